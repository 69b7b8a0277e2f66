"""Inbound activity and outbound message schemas exchanged with the channel."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ActivityType(str, Enum):
    MESSAGE = "message"
    CONVERSATION_UPDATE = "conversationUpdate"


class AttachmentLayout(str, Enum):
    LIST = "list"
    CAROUSEL = "carousel"


class Activity(BaseModel):
    """An event delivered by the channel for one conversation."""

    type: ActivityType
    conversation_id: str
    text: str = ""
    recipient_id: Optional[str] = None
    members_added: list[str] = Field(default_factory=list)

    def bot_was_added(self) -> bool:
        """True when the first member added to the conversation is the bot itself."""
        return bool(self.members_added) and self.members_added[0] == self.recipient_id


class CardAction(BaseModel):
    """A button on a hero card."""

    type: str = "showImage"
    title: str
    value: str
    image: Optional[str] = None


class HeroCard(BaseModel):
    """Image card with buttons, rendered by the channel."""

    images: list[str] = Field(default_factory=list)
    buttons: list[CardAction] = Field(default_factory=list)


class OutboundMessage(BaseModel):
    """A single response sent back through the channel."""

    text: str
    speak: Optional[str] = None
    attachments: list[HeroCard] = Field(default_factory=list)
    attachment_layout: AttachmentLayout = AttachmentLayout.LIST
