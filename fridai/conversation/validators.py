"""
Reply parsers for the validated reservation steps.

Each parser returns the accepted value, or None when the reply must be
rejected and the step re-prompted.
"""

import re
from typing import Optional

_NON_NEGATIVE_INT = re.compile(r"[0-9]+")

YES_WORDS = frozenset({
    "yes", "y", "yeah", "yea", "yep", "yup", "sure", "ok", "okay",
    "correct", "right", "true", "absolutely", "definitely", "affirmative",
})
NO_WORDS = frozenset({
    "no", "n", "nope", "nah", "not", "wrong", "false", "incorrect", "negative",
})
# Negations used as a yes; removed before the word check
AFFIRMATIVE_PHRASES = re.compile(r"\b(?:no|not an?) (?:problem|issue|worries)\b")


def parse_amount_people(reply: str) -> Optional[str]:
    """Accept a non-negative integer, returned as its trimmed string.

    Examples:
        >>> parse_amount_people(" 4 ")
        '4'
        >>> parse_amount_people("four") is None
        True
    """
    value = reply.strip()
    if _NON_NEGATIVE_INT.fullmatch(value):
        return value
    return None


def parse_confirmation(reply: str) -> Optional[bool]:
    """Interpret a yes/no style answer.

    Returns None when the reply carries neither, or both, polarities.
    """
    lower = reply.lower()
    idiom = AFFIRMATIVE_PHRASES.search(lower) is not None
    words = set(re.findall(r"[a-z]+", AFFIRMATIVE_PHRASES.sub(" ", lower)))
    said_yes = idiom or bool(words & YES_WORDS)
    said_no = bool(words & NO_WORDS)
    if said_yes == said_no:
        return None
    return said_yes
