"""Shared test fixtures and helpers."""

import asyncio
from typing import Any, Optional

import pytest

from fridai.conversation.dispatcher import TurnDispatcher
from fridai.conversation.reservation_dialog import ReservationDialog
from fridai.schemas.activity_schema import Activity, ActivityType
from fridai.schemas.recognizer_schema import IntentScore, KnowledgeAnswer, RecognizerResult
from fridai.services.speech import SsmlGenerator

CONVERSATION_ID = "conv-1"
BOT_ID = "bot"


class FakeRecognizer:
    """Recognizer returning a canned result and recording every call."""

    def __init__(self) -> None:
        self.result: Optional[RecognizerResult] = None
        self.error: Optional[Exception] = None
        self.calls: list[str] = []

    async def recognize(self, text: str) -> RecognizerResult:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.result or RecognizerResult(text=text)


class FakeAnswerer:
    """Knowledge answerer returning canned answers and recording every call."""

    def __init__(self) -> None:
        self.answers: list[KnowledgeAnswer] = []
        self.error: Optional[Exception] = None
        self.calls: list[str] = []

    async def answer(self, text: str) -> list[KnowledgeAnswer]:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return list(self.answers)


class BlockingRecognizer:
    """Recognizer that never returns until cancelled."""

    def __init__(self) -> None:
        self.started = asyncio.Event()

    async def recognize(self, text: str) -> RecognizerResult:
        self.started.set()
        await asyncio.Event().wait()
        raise AssertionError("unreachable")


def make_result(
    intent: str,
    score: Optional[float],
    entities: Optional[dict[str, Any]] = None,
    text: str = "",
) -> RecognizerResult:
    """Helper to create a RecognizerResult with a single intent."""
    return RecognizerResult(
        text=text,
        intents=[IntentScore(name=intent, score=score)],
        entities=entities or {},
    )


def message(text: str, conversation_id: str = CONVERSATION_ID) -> Activity:
    """Helper to create an inbound message activity."""
    return Activity(
        type=ActivityType.MESSAGE,
        conversation_id=conversation_id,
        recipient_id=BOT_ID,
        text=text,
    )


@pytest.fixture
def speech():
    return SsmlGenerator("test-voice")


@pytest.fixture
def dialog(speech):
    return ReservationDialog(speech, "en-US")


@pytest.fixture
def recognizer():
    return FakeRecognizer()


@pytest.fixture
def answerer():
    return FakeAnswerer()


@pytest.fixture
def dispatcher(recognizer, answerer, speech):
    return TurnDispatcher(recognizer, answerer, speech, intent_threshold=0.5, language="en-US")
