"""Today's specialties, rendered as a carousel of hero cards."""

from fridai.config import settings
from fridai.prompts import messages
from fridai.schemas.activity_schema import (
    AttachmentLayout,
    CardAction,
    HeroCard,
    OutboundMessage,
)

SPECIALTIES: list[str] = ["Carbonara", "Pizza", "Lasagna"]


def build_specialty_card(dish: str, site: str = settings.restaurant.specialties_site) -> HeroCard:
    """Build the card for one dish, pointing at its picture on the restaurant site."""
    image = f"{site.rstrip('/')}/{dish.lower()}.jpg"
    return HeroCard(
        images=[image],
        buttons=[CardAction(type="showImage", title=dish, value=dish, image=image)],
    )


def build_specialties_message(site: str = settings.restaurant.specialties_site) -> OutboundMessage:
    return OutboundMessage(
        text=messages.SPECIALTIES_INTRO,
        attachments=[build_specialty_card(dish, site) for dish in SPECIALTIES],
        attachment_layout=AttachmentLayout.CAROUSEL,
    )
