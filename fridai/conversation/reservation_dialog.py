"""
Reservation dialog runner.

Drives the reservation state machine for one turn: starting from a seed
reservation or from a persisted suspension point, it runs steps until one
of them suspends for input or the dialog completes. Prompts and closing
messages are rendered with speech markup for voice channels.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from fridai.config import settings
from fridai.conversation.state_machine import (
    Complete,
    Suspend,
    next_step,
    transition,
)
from fridai.schemas.activity_schema import OutboundMessage
from fridai.schemas.reservation_schema import DialogState, Reservation, ReservationStep
from fridai.services.speech import SpeechMarkupGenerator

logger = logging.getLogger(__name__)


class DialogTurnStatus(str, Enum):
    """Outcome of running the dialog for one turn."""

    EMPTY = "empty"
    WAITING = "waiting"
    COMPLETE = "complete"


@dataclass
class DialogTurnResult:
    """
    Result of one dialog turn.

    ``reservation`` and ``dialog_state`` are what must be persisted for the
    conversation; both are None once the dialog has ended.
    """
    status: DialogTurnStatus
    reservation: Optional[Reservation] = None
    dialog_state: Optional[DialogState] = None
    messages: list[OutboundMessage] = field(default_factory=list)


class ReservationDialog:
    """Resumable reservation dialog collecting time, party size, and name."""

    def __init__(
        self,
        speech: SpeechMarkupGenerator,
        language: str = settings.speech.voice_font_language,
    ) -> None:
        self._speech = speech
        self._language = language

    def begin(self, seed: Optional[Reservation] = None) -> DialogTurnResult:
        """Start a new dialog, skipping every step the seed already answers."""
        reservation = seed.model_copy() if seed is not None else Reservation()
        logger.info("Reservation dialog started (seeded fields: %s)",
                    sorted(reservation.model_dump(exclude_none=True)))
        return self._run(reservation, ReservationStep.INIT, reply=None, attempts=0)

    def resume(
        self,
        reservation: Reservation,
        dialog_state: Optional[DialogState],
        reply: str,
    ) -> DialogTurnResult:
        """Bind ``reply`` to the pending step and continue the dialog."""
        if dialog_state is None:
            return DialogTurnResult(status=DialogTurnStatus.EMPTY, reservation=reservation)
        logger.debug("Resuming reservation dialog at '%s'", dialog_state.pending_step.value)
        return self._run(reservation, dialog_state.pending_step, reply, dialog_state.attempts)

    def _run(
        self,
        reservation: Reservation,
        step: ReservationStep,
        reply: Optional[str],
        attempts: int,
    ) -> DialogTurnResult:
        outbound: list[OutboundMessage] = []
        while True:
            result = transition(reservation, step, reply)
            reservation = result.reservation
            action = result.action

            if isinstance(action, Suspend):
                attempts = attempts + 1 if action.rejected else 0
                if action.rejected:
                    logger.info("Reply rejected at '%s' (attempt %d)", step.value, attempts)
                outbound.extend(self._say(prompt) for prompt in action.prompts)
                return DialogTurnResult(
                    status=DialogTurnStatus.WAITING,
                    reservation=reservation,
                    dialog_state=DialogState(pending_step=step, attempts=attempts),
                    messages=outbound,
                )

            if isinstance(action, Complete):
                outbound.append(self._say(action.message))
                logger.info("Reservation dialog complete (confirmed=%s)", reservation.confirmed)
                return DialogTurnResult(status=DialogTurnStatus.COMPLETE, messages=outbound)

            logger.debug("Step '%s' advanced", step.value)
            step = next_step(step)
            reply = None
            attempts = 0

    def _say(self, text: str) -> OutboundMessage:
        return OutboundMessage(text=text, speak=self._speech.to_markup(text, self._language))
