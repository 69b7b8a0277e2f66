"""
Knowledge-base question answering.

The dispatcher depends only on the ``KnowledgeAnswerer`` protocol, which
returns ranked canned answers (possibly none). ``FaqKnowledgeBase`` is an
offline backend over a small FAQ catalog, ranking entries by how many of
their keywords appear in the question.
"""

import logging
import re
from dataclasses import dataclass
from typing import Protocol

from fridai.config import settings
from fridai.schemas.recognizer_schema import KnowledgeAnswer

logger = logging.getLogger(__name__)

# Keyword hits needed for a full-confidence answer
FULL_MATCH_HITS = 2


class KnowledgeAnswerer(Protocol):
    async def answer(self, text: str) -> list[KnowledgeAnswer]: ...


@dataclass(frozen=True)
class FaqEntry:
    keywords: frozenset[str]
    answer: str


FAQ_CATALOG: list[FaqEntry] = [
    FaqEntry(frozenset({"open", "opening", "hours", "close", "closing"}), "We open at 5pm"),
    FaqEntry(
        frozenset({"where", "address", "located", "location", "find"}),
        "You can find us at 1 Microsoft Way, right next to the harbour.",
    ),
    FaqEntry(
        frozenset({"parking", "park", "car", "garage"}),
        "There is free parking for our guests behind the restaurant.",
    ),
    FaqEntry(
        frozenset({"vegetarian", "vegan", "gluten", "allergy", "allergies"}),
        "Most of our pasta dishes can be made vegetarian or gluten free. Just ask your waiter.",
    ),
    FaqEntry(
        frozenset({"dog", "dogs", "pet", "pets"}),
        "Well-behaved pets are welcome on our terrace.",
    ),
    FaqEntry(
        frozenset({"card", "cards", "cash", "pay", "payment"}),
        "We accept cash and all major credit cards.",
    ),
    FaqEntry(
        frozenset({"dress", "code", "wear"}),
        "There is no dress code. Come as you are!",
    ),
]


class FaqKnowledgeBase:
    """Offline FAQ answerer scoring entries by keyword overlap."""

    def __init__(
        self,
        catalog: list[FaqEntry] = FAQ_CATALOG,
        min_score: float = settings.dispatch.knowledge_min_score,
    ) -> None:
        self._catalog = catalog
        self._min_score = min_score

    async def answer(self, text: str) -> list[KnowledgeAnswer]:
        words = set(re.findall(r"[a-z]+", text.lower()))
        answers: list[KnowledgeAnswer] = []
        for entry in self._catalog:
            hits = len(entry.keywords & words)
            score = min(hits / FULL_MATCH_HITS, 1.0)
            if hits and score >= self._min_score:
                answers.append(KnowledgeAnswer(text=entry.answer, score=score))
        answers.sort(key=lambda a: a.score, reverse=True)
        logger.debug("Knowledge base returned %d answer(s)", len(answers))
        return answers
