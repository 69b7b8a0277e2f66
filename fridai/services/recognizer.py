"""
Intent and entity recognition.

The dispatcher depends only on the ``Recognizer`` protocol. In production
this is backed by a hosted language-understanding service;
``KeywordRecognizer`` is an offline backend that scores intents from
keyword signals and extracts the party size and a datetime timex, so the
console channel and tests run without network access.
"""

import logging
import re
from datetime import date, timedelta
from typing import Any, Callable, Optional, Protocol

from fridai.schemas.recognizer_schema import IntentScore, RecognizerResult

logger = logging.getLogger(__name__)

TODAYS_SPECIALTY = "TodaysSpecialty"
RESERVE_TABLE = "ReserveTable"
GET_DISCOUNTS = "GetDiscounts"
NONE_INTENT = "None"

INTENT_SIGNALS: dict[str, list[str]] = {
    RESERVE_TABLE: [
        "reserve", "reservation", "book", "table for", "a table", "party of",
    ],
    TODAYS_SPECIALTY: [
        "special", "specialty", "specialties", "dish of the day", "today's menu",
        "what's cooking",
    ],
    GET_DISCOUNTS: [
        "discount", "deal", "offer", "promotion", "coupon", "happy hour",
    ],
}

BASE_SCORE = 0.6
SCORE_PER_SIGNAL = 0.15
MAX_SCORE = 0.95
NONE_SCORE_MATCHED = 0.2
NONE_SCORE_UNMATCHED = 0.8

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

_AMOUNT_PATTERNS = [
    re.compile(r"\b(?:for|party of)\s+(\d+)\b"),
    re.compile(r"\b(\d+)\s+(?:people|persons|guests|of us)\b"),
]
_CLOCK_12H = re.compile(r"\b(\d{1,2})(?::(\d{2}))?\s*(am|pm)\b")
_CLOCK_24H = re.compile(r"\bat\s+(\d{1,2}):(\d{2})\b")
_ISO_DATE = re.compile(r"\b(\d{4}-\d{2}-\d{2})\b")


class Recognizer(Protocol):
    async def recognize(self, text: str) -> RecognizerResult: ...


class KeywordRecognizer:
    """Offline recognizer based on keyword signals and regex entity extraction."""

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today

    async def recognize(self, text: str) -> RecognizerResult:
        lower = text.lower()
        intents = self._score_intents(lower)
        entities: dict[str, Any] = {}

        amount = extract_amount_people(lower)
        if amount is not None:
            entities["AmountPeople"] = [amount]

        timex = extract_timex(lower, self._today())
        if timex is not None:
            entities["datetime"] = [{"timex": [timex], "type": _timex_type(timex)}]

        result = RecognizerResult(text=text, intents=intents, entities=entities)
        top = result.top_intent()
        logger.debug("Recognized '%s' (%.2f) entities=%s",
                     top.name if top else NONE_INTENT,
                     top.score if top and top.score is not None else 0.0,
                     sorted(entities))
        return result

    def _score_intents(self, lower: str) -> list[IntentScore]:
        scores: list[IntentScore] = []
        for intent, signals in INTENT_SIGNALS.items():
            hits = sum(1 for s in signals if s in lower)
            if hits:
                score = min(BASE_SCORE + SCORE_PER_SIGNAL * (hits - 1), MAX_SCORE)
                scores.append(IntentScore(name=intent, score=score))
        none_score = NONE_SCORE_MATCHED if scores else NONE_SCORE_UNMATCHED
        scores.append(IntentScore(name=NONE_INTENT, score=none_score))
        return sorted(scores, key=lambda i: i.score or 0.0, reverse=True)


def extract_amount_people(lower: str) -> Optional[str]:
    """Extract a party size such as 'table for 4' or '6 people'."""
    for pattern in _AMOUNT_PATTERNS:
        match = pattern.search(lower)
        if match:
            return match.group(1)
    return None


def extract_timex(lower: str, today: date) -> Optional[str]:
    """
    Build a timex from relative days, weekdays, ISO dates, and clock times.

    Examples:
        >>> extract_timex("tomorrow at 7pm", date(2024, 4, 30))
        '2024-05-01T19'
        >>> extract_timex("on 2024-05-01", date(2024, 4, 30))
        '2024-05-01'
    """
    day = _extract_day(lower, today)
    clock = _extract_clock(lower)

    if day is None and clock is None:
        return None

    date_part = day.isoformat() if day is not None else ""
    if clock is None:
        return date_part

    hour, minute = clock
    time_part = f"T{hour:02d}" if minute is None else f"T{hour:02d}:{minute:02d}"
    return date_part + time_part


def _extract_day(lower: str, today: date) -> Optional[date]:
    iso = _ISO_DATE.search(lower)
    if iso:
        try:
            return date.fromisoformat(iso.group(1))
        except ValueError:
            logger.debug("Ignoring invalid date %r", iso.group(1))
    if "tomorrow" in lower:
        return today + timedelta(days=1)
    if "today" in lower or "tonight" in lower:
        return today
    for index, name in enumerate(WEEKDAYS):
        if re.search(rf"\b{name}\b", lower):
            ahead = (index - today.weekday()) % 7 or 7
            return today + timedelta(days=ahead)
    return None


def _extract_clock(lower: str) -> Optional[tuple[int, Optional[int]]]:
    match = _CLOCK_12H.search(lower)
    if match:
        hour = int(match.group(1)) % 12
        if match.group(3) == "pm":
            hour += 12
        minute = int(match.group(2)) if match.group(2) else None
        if hour < 24 and (minute is None or minute < 60):
            return hour, minute
    match = _CLOCK_24H.search(lower)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour < 24 and minute < 60:
            return hour, minute
    return None


def _timex_type(timex: str) -> str:
    if timex.startswith("T"):
        return "time"
    return "datetime" if "T" in timex else "date"
