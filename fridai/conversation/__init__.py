from fridai.conversation.dispatcher import TurnDispatcher
from fridai.conversation.reservation_dialog import (
    DialogTurnResult,
    DialogTurnStatus,
    ReservationDialog,
)
from fridai.conversation.state_machine import (
    Advance,
    Complete,
    InvalidTransitionError,
    Suspend,
    transition,
)

__all__ = [
    "TurnDispatcher",
    "ReservationDialog",
    "DialogTurnResult",
    "DialogTurnStatus",
    "transition",
    "Suspend",
    "Advance",
    "Complete",
    "InvalidTransitionError",
]
