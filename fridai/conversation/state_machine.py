"""
Finite state machine for the reservation dialog.

Six steps run in a fixed order. Each step is a pure function of the
current reservation and the reply to that step's own prompt (if any), and
answers with one of three actions:

    Suspend(prompts)   -- send the prompts and wait for the next reply
    Advance()          -- move on to the next step in the same turn
    Complete(message)  -- send the closing message and end the dialog

Usage:
    result = transition(Reservation(), ReservationStep.ASK_TIME)
    assert isinstance(result.action, Suspend)
    result = transition(result.reservation, ReservationStep.ASK_TIME, "tonight")
    assert result.reservation.time == "tonight"
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from fridai.conversation.validators import parse_amount_people, parse_confirmation
from fridai.prompts import messages
from fridai.schemas.reservation_schema import Reservation, ReservationStep

logger = logging.getLogger(__name__)

STEP_ORDER: tuple[ReservationStep, ...] = (
    ReservationStep.INIT,
    ReservationStep.ASK_TIME,
    ReservationStep.ASK_AMOUNT,
    ReservationStep.ASK_NAME,
    ReservationStep.ASK_CONFIRMATION,
    ReservationStep.FINALIZE,
)


@dataclass(frozen=True)
class Suspend:
    """Wait for the guest's reply to ``prompts``."""
    prompts: tuple[str, ...]
    rejected: bool = False


@dataclass(frozen=True)
class Advance:
    """Fall through to the next step without consuming a prompt."""


@dataclass(frozen=True)
class Complete:
    """End the dialog with a closing message."""
    message: str


DialogAction = Union[Suspend, Advance, Complete]


@dataclass(frozen=True)
class TransitionResult:
    reservation: Reservation
    action: DialogAction


class InvalidTransitionError(Exception):
    """Raised when a step is driven in a way the dialog never allows."""


def next_step(step: ReservationStep) -> ReservationStep:
    """Return the step that follows ``step``.

    Raises:
        InvalidTransitionError: If ``step`` is the final step.
    """
    index = STEP_ORDER.index(step)
    if index + 1 >= len(STEP_ORDER):
        raise InvalidTransitionError(f"No step follows '{step.value}'")
    return STEP_ORDER[index + 1]


def _init(reservation: Reservation, reply: Optional[str]) -> TransitionResult:
    return TransitionResult(reservation, Advance())


def _ask_time(reservation: Reservation, reply: Optional[str]) -> TransitionResult:
    if reply is not None:
        # Any reply is accepted as the time
        return TransitionResult(reservation.model_copy(update={"time": reply}), Advance())
    if reservation.time:
        return TransitionResult(reservation, Advance())
    return TransitionResult(reservation, Suspend((messages.ASK_TIME,)))


def _ask_amount(reservation: Reservation, reply: Optional[str]) -> TransitionResult:
    if reply is not None:
        amount = parse_amount_people(reply)
        if amount is None:
            logger.debug("Rejected amount of people: %r", reply)
            return TransitionResult(
                reservation,
                Suspend((messages.AMOUNT_NOT_A_NUMBER, messages.ASK_AMOUNT), rejected=True),
            )
        return TransitionResult(
            reservation.model_copy(update={"amount_people": amount}), Advance()
        )
    if reservation.amount_people is not None:
        return TransitionResult(reservation, Advance())
    return TransitionResult(reservation, Suspend((messages.ASK_AMOUNT,)))


def _ask_name(reservation: Reservation, reply: Optional[str]) -> TransitionResult:
    if reply is not None:
        return TransitionResult(reservation.model_copy(update={"full_name": reply}), Advance())
    if reservation.full_name is not None:
        return TransitionResult(reservation, Advance())
    return TransitionResult(reservation, Suspend((messages.ASK_NAME,)))


def _ask_confirmation(reservation: Reservation, reply: Optional[str]) -> TransitionResult:
    if reply is not None:
        confirmed = parse_confirmation(reply)
        if confirmed is None:
            logger.debug("Rejected confirmation reply: %r", reply)
            return TransitionResult(
                reservation, Suspend((messages.CONFIRMATION_RETRY,), rejected=True)
            )
        return TransitionResult(
            reservation.model_copy(update={"confirmed": confirmed}), Advance()
        )
    if reservation.confirmed is not None:
        return TransitionResult(reservation, Advance())
    prompt = messages.build_confirmation_prompt(reservation.time, reservation.amount_people)
    return TransitionResult(reservation, Suspend((prompt,)))


def _finalize(reservation: Reservation, reply: Optional[str]) -> TransitionResult:
    if reservation.confirmed is None:
        raise InvalidTransitionError("Cannot finalize a reservation that was not confirmed")
    if reservation.confirmed:
        message = messages.build_accepted_message(reservation.time, reservation.full_name)
    else:
        message = messages.DECLINED
    return TransitionResult(reservation, Complete(message))


_STEP_HANDLERS: dict[ReservationStep, Callable[[Reservation, Optional[str]], TransitionResult]] = {
    ReservationStep.INIT: _init,
    ReservationStep.ASK_TIME: _ask_time,
    ReservationStep.ASK_AMOUNT: _ask_amount,
    ReservationStep.ASK_NAME: _ask_name,
    ReservationStep.ASK_CONFIRMATION: _ask_confirmation,
    ReservationStep.FINALIZE: _finalize,
}

# Steps that never suspend, so they never receive a reply
_PROMPTLESS_STEPS = frozenset({ReservationStep.INIT, ReservationStep.FINALIZE})


def transition(
    reservation: Reservation,
    step: ReservationStep,
    reply: Optional[str] = None,
) -> TransitionResult:
    """
    Run one dialog step.

    Args:
        reservation: The reservation as currently persisted.
        step: The step to run.
        reply: The guest's answer to this step's pending prompt, or None
            when the step is entered without a reply.

    Returns:
        The (possibly updated) reservation and the action to take next.

    Raises:
        InvalidTransitionError: If a reply is bound to a step that never
            prompts, or to a reservation that is already final.
    """
    if reply is not None:
        if step in _PROMPTLESS_STEPS:
            raise InvalidTransitionError(f"Step '{step.value}' does not accept replies")
        if reservation.is_terminal():
            raise InvalidTransitionError(
                f"Reservation is already final; cannot apply a reply to '{step.value}'"
            )
    return _STEP_HANDLERS[step](reservation, reply)
