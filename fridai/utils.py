"""Shared utilities used across the restaurant bot."""

import logging
from datetime import date, datetime
from typing import Optional

logger = logging.getLogger(__name__)

DISPLAY_FORMAT = "%B %d at %I:%M %p"

_TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def normalize_timex(timex: str) -> str:
    """Append a minutes component to a timex that carries no time separator.

    Examples:
        >>> normalize_timex("2024-05-01T18")
        '2024-05-01T18:00'
        >>> normalize_timex("2024-05-01T18:30")
        '2024-05-01T18:30'
    """
    timex = timex.strip()
    return timex if ":" in timex else f"{timex}:00"


def parse_timex(timex: str, reference: Optional[date] = None) -> datetime:
    """Parse a recognizer timex into a datetime.

    A date-only timex resolves to midnight, an unspecified year (``XXXX``)
    takes the reference year and a time-only timex (``T19``) the reference
    date.

    Raises:
        ValueError: If the timex cannot be interpreted as a date/time.
    """
    reference = reference or date.today()
    value = normalize_timex(timex)

    date_part, sep, time_part = value.partition("T")
    if not sep:
        # "2024-05-01" became "2024-05-01:00"; no hour was given
        date_part = value.split(":", 1)[0]
        time_part = "00:00"

    if date_part:
        date_part = date_part.replace("XXXX", f"{reference.year:04d}", 1)
        day = datetime.strptime(date_part, "%Y-%m-%d").date()
    else:
        day = reference

    for fmt in _TIME_FORMATS:
        try:
            moment = datetime.strptime(time_part, fmt).time()
            break
        except ValueError:
            continue
    else:
        raise ValueError(f"Unrecognized timex time component: {timex!r}")

    return datetime.combine(day, moment)


def format_timex(timex: str, reference: Optional[date] = None) -> Optional[str]:
    """Render a timex in the human format used in reservation messages.

    Returns None when the timex cannot be parsed, so the caller can fall
    back to asking for the time.

    Examples:
        >>> format_timex("2024-05-01T18")
        'May 01 at 06:00 PM'
        >>> format_timex("2024-05-01")
        'May 01 at 12:00 AM'
    """
    try:
        return parse_timex(timex, reference).strftime(DISPLAY_FORMAT)
    except ValueError:
        logger.warning("Could not parse timex %r", timex)
        return None
