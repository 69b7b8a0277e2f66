"""
Turn dispatcher: routes each inbound activity for one conversation.

Per message, a suspended reservation dialog gets the first chance to
consume it. Otherwise the recognizer classifies the message and the top
intent (above the confidence threshold) picks a handler; anything else
goes to the knowledge base. State is staged during the turn and committed
only once the whole turn succeeded.

Usage:
    dispatcher = TurnDispatcher(recognizer, answerer, speech)
    replies = await dispatcher.on_turn(
        Activity(type=ActivityType.MESSAGE, conversation_id="c1", text="table for 2")
    )
"""

import logging
from typing import Optional

from fridai.config import settings
from fridai.conversation.reservation_dialog import (
    DialogTurnResult,
    DialogTurnStatus,
    ReservationDialog,
)
from fridai.conversation.validators import parse_amount_people
from fridai.logging_context import set_conversation_id
from fridai.prompts import messages
from fridai.schemas.activity_schema import Activity, ActivityType, OutboundMessage
from fridai.schemas.recognizer_schema import RecognizerResult
from fridai.schemas.reservation_schema import DialogState, Reservation
from fridai.services.knowledge import KnowledgeAnswerer
from fridai.services.recognizer import (
    GET_DISCOUNTS,
    RESERVE_TABLE,
    TODAYS_SPECIALTY,
    Recognizer,
)
from fridai.services.specialties import build_specialties_message
from fridai.services.speech import SpeechMarkupGenerator
from fridai.services.state_store import MemoryStateStore, StateStore
from fridai.utils import format_timex

logger = logging.getLogger(__name__)


class TurnDispatcher:
    """Per-turn router between the reservation dialog and intent handlers."""

    def __init__(
        self,
        recognizer: Recognizer,
        answerer: KnowledgeAnswerer,
        speech: SpeechMarkupGenerator,
        reservations: Optional[StateStore[Reservation]] = None,
        dialogs: Optional[StateStore[DialogState]] = None,
        intent_threshold: float = settings.dispatch.intent_threshold,
        language: str = settings.speech.voice_font_language,
    ) -> None:
        self._recognizer = recognizer
        self._answerer = answerer
        self._speech = speech
        self._language = language
        self._intent_threshold = intent_threshold
        self.reservations = reservations or MemoryStateStore(Reservation)
        self.dialogs = dialogs or MemoryStateStore(DialogState)
        self._dialog = ReservationDialog(speech, language)

    async def on_turn(self, activity: Activity) -> list[OutboundMessage]:
        """Process one inbound activity and return the responses to send."""
        set_conversation_id(activity.conversation_id)

        if activity.type == ActivityType.MESSAGE:
            return await self._on_message(activity)

        if activity.type == ActivityType.CONVERSATION_UPDATE and activity.bot_was_added():
            logger.info("Bot joined conversation; sending greeting")
            return [self._say(messages.GREETING)]

        return []

    # ------------------------------------------------------------------ #
    # Message turns
    # ------------------------------------------------------------------ #

    async def _on_message(self, activity: Activity) -> list[OutboundMessage]:
        key = activity.conversation_id
        try:
            responses = await self._continue_dialog(key, activity.text)
            if responses is None:
                responses = await self._route(key, activity.text)

            reservation = await self.reservations.get(key, Reservation)
            await self.reservations.set(key, reservation)
            await self.reservations.save_changes(key)
            await self.dialogs.save_changes(key)
        except BaseException:
            logger.warning("Turn aborted; discarding staged state")
            self.reservations.discard_changes(key)
            self.dialogs.discard_changes(key)
            raise
        return responses

    async def _continue_dialog(self, key: str, text: str) -> Optional[list[OutboundMessage]]:
        """Resume a suspended dialog.

        Returns the dialog's responses, or None when the turn should fall
        through to classification.
        """
        dialog_state = await self.dialogs.get(key)
        if dialog_state is None:
            return None

        reservation = await self.reservations.get(key, Reservation)
        result = self._dialog.resume(reservation, dialog_state, text)
        await self._store_dialog_result(key, result)

        if result.status == DialogTurnStatus.WAITING or result.messages:
            return result.messages
        return None

    async def _store_dialog_result(self, key: str, result: DialogTurnResult) -> None:
        if result.status == DialogTurnStatus.WAITING:
            await self.reservations.set(key, result.reservation)
            await self.dialogs.set(key, result.dialog_state)
        else:
            await self.reservations.delete(key)
            await self.dialogs.delete(key)

    async def _route(self, key: str, text: str) -> list[OutboundMessage]:
        recognized = await self._recognizer.recognize(text)
        intent = self._top_intent(recognized)

        if intent == TODAYS_SPECIALTY:
            return [build_specialties_message()]
        if intent == RESERVE_TABLE:
            return await self._start_reservation(key, recognized)
        if intent == GET_DISCOUNTS:
            return [OutboundMessage(text=messages.DISCOUNTS)]
        return await self._answer_question(text)

    def _top_intent(self, recognized: RecognizerResult) -> str:
        top = recognized.top_intent()
        confidence = top.confidence() if top is not None else None
        if confidence is None or confidence <= self._intent_threshold:
            logger.info("No intent above threshold %.2f", self._intent_threshold)
            return ""
        logger.info("Top intent '%s' (%.2f)", top.name, confidence)
        return top.name

    # ------------------------------------------------------------------ #
    # Intent handlers
    # ------------------------------------------------------------------ #

    async def _start_reservation(
        self, key: str, recognized: RecognizerResult
    ) -> list[OutboundMessage]:
        timex = recognized.get_timex()
        amount = recognized.get_amount_people()
        amount_people = parse_amount_people(amount) if amount is not None else None
        if amount is not None and amount_people is None:
            logger.warning("Ignoring non-numeric party size %r from recognizer", amount)
        seed = Reservation(
            amount_people=amount_people,
            time=format_timex(timex) if timex is not None else None,
        )
        result = self._dialog.begin(seed)
        await self._store_dialog_result(key, result)
        return result.messages

    async def _answer_question(self, text: str) -> list[OutboundMessage]:
        answers = await self._answerer.answer(text)
        if not answers:
            return [OutboundMessage(text=messages.NOT_UNDERSTOOD)]
        return [OutboundMessage(text=answers[0].text)]

    def _say(self, text: str) -> OutboundMessage:
        return OutboundMessage(text=text, speak=self._speech.to_markup(text, self._language))
