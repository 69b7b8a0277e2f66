"""Reservation data models and persisted dialog state."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ReservationStep(str, Enum):
    """Steps of the reservation dialog, in execution order."""

    INIT = "init"
    ASK_TIME = "ask_time"
    ASK_AMOUNT = "ask_amount"
    ASK_NAME = "ask_name"
    ASK_CONFIRMATION = "ask_confirmation"
    FINALIZE = "finalize"


class Reservation(BaseModel):
    """
    Per-conversation reservation being collected.

    Fields stay None until the matching dialog step (or upstream entity
    extraction) fills them. Once ``confirmed`` is set the record is final.
    """

    time: Optional[str] = None
    amount_people: Optional[str] = None
    full_name: Optional[str] = None
    confirmed: Optional[bool] = None

    def is_terminal(self) -> bool:
        return self.confirmed is not None


class DialogState(BaseModel):
    """Suspension marker for an in-flight reservation dialog."""

    pending_step: ReservationStep
    attempts: int = 0
