"""Recognizer and knowledge-base result models."""

import math
from typing import Any, Optional

from pydantic import BaseModel, Field


class IntentScore(BaseModel):
    """A classified intent with its confidence."""

    name: str
    score: Optional[float] = None

    def confidence(self) -> Optional[float]:
        """Return the score, or None when it is missing or not finite."""
        if self.score is None or not math.isfinite(self.score):
            return None
        return self.score


class RecognizerResult(BaseModel):
    """
    Output of the intent/entity recognizer for one utterance.

    Entities follow the recognizer's raw shape: each entity name maps to a
    list of values, and ``datetime`` values are dicts carrying a ``timex``
    list (or string).
    """

    text: str = ""
    intents: list[IntentScore] = Field(default_factory=list)
    entities: dict[str, Any] = Field(default_factory=dict)

    def top_intent(self) -> Optional[IntentScore]:
        """Return the highest scoring intent; unscored or invalid scores rank last."""
        if not self.intents:
            return None
        return max(self.intents, key=lambda i: _rank(i.confidence()))

    def get_amount_people(self) -> Optional[str]:
        value = _first(self.entities.get("AmountPeople"))
        return None if value is None else str(value)

    def get_timex(self) -> Optional[str]:
        """Return the first timex of the first ``datetime`` entity, if any."""
        entity = _first(self.entities.get("datetime"))
        if isinstance(entity, dict):
            entity = entity.get("timex")
        timex = _first(entity)
        return None if timex is None else str(timex)


class KnowledgeAnswer(BaseModel):
    """A ranked canned answer from the knowledge base."""

    text: str
    score: float


def _rank(confidence: Optional[float]) -> float:
    return -1.0 if confidence is None else confidence


def _first(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value
