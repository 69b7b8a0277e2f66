"""Conversation ID logging context.

The dispatcher sets the conversation ID at the start of every turn. A
LogRecord factory stamps it onto every record created in that async
context, so ``%(conversation_id)s`` works in any handler format, including
records from modules that never import this one.

Usage:
    from fridai.logging_context import install_record_factory, set_conversation_id

    install_record_factory()
    set_conversation_id("conv-42")
    logging.getLogger(__name__).info("Resuming dialog")  # ... [conv-42] ...
"""

import logging
from contextvars import ContextVar

NO_CONVERSATION = "-"

_conversation_id: ContextVar[str] = ContextVar("conversation_id", default=NO_CONVERSATION)


def set_conversation_id(conversation_id: str) -> None:
    """Set the conversation ID for the current async context."""
    _conversation_id.set(conversation_id)


def get_conversation_id() -> str:
    return _conversation_id.get()


def install_record_factory() -> None:
    """Wrap the active LogRecord factory so records carry ``conversation_id``.

    Safe to call more than once; the factory is only wrapped the first time.
    """
    previous = logging.getLogRecordFactory()
    if getattr(previous, "_adds_conversation_id", False):
        return

    def factory(*args, **kwargs) -> logging.LogRecord:
        record = previous(*args, **kwargs)
        record.conversation_id = _conversation_id.get()  # type: ignore[attr-defined]
        return record

    factory._adds_conversation_id = True  # type: ignore[attr-defined]
    logging.setLogRecordFactory(factory)
