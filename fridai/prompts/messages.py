"""
Centralized bot messages.

Restaurant-specific values are injected from configuration, not hardcoded.
Templates with placeholders are rendered by the helpers below.
"""

from typing import Optional

from fridai.config import settings

_rest = settings.restaurant

GREETING = _rest.greeting
DISCOUNTS = _rest.discounts_message
SPECIALTIES_INTRO = "For today we have:"
NOT_UNDERSTOOD = "Sorry, I didn't understand that."

ASK_TIME = "When do you need the reservation?"
ASK_AMOUNT = "How many people will you need the reservation for?"
AMOUNT_NOT_A_NUMBER = "The amount of people should be a number."
ASK_NAME = "And the name on the reservation?"
CONFIRMATION_RETRY = "Please confirm, say 'yes' or 'no' or something like that."
DECLINED = f"Thanks for using the {_rest.assistant_name}. See you soon!"


def build_confirmation_prompt(time: Optional[str], amount_people: Optional[str]) -> str:
    """Build the read-back question asked before finalizing."""
    return (
        "Ok. Let me confirm the information: "
        f"This is a reservation for {time} for {amount_people} people. Is that correct?"
    )


def build_accepted_message(time: Optional[str], full_name: Optional[str]) -> str:
    """Build the closing message for a confirmed reservation."""
    return f"Great, we will be expecting you this {time}. Thanks for your reservation {full_name}!"
