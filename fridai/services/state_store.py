"""
Conversation-scoped key-value state storage.

Writes are staged per key and only become visible to later turns once
``save_changes`` commits them. A failed or cancelled turn calls
``discard_changes`` so the conversation stays at its last committed state.

In production the committed side would live in Redis, Cosmos DB, or a
similar backing store; ``MemoryStateStore`` keeps it in process.
"""

import logging
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_DELETED = object()


class StateStore(Protocol[ModelT]):
    async def get(
        self, key: str, default_factory: Optional[Callable[[], ModelT]] = None
    ) -> Optional[ModelT]: ...

    async def set(self, key: str, value: ModelT) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def save_changes(self, key: str) -> None: ...

    def discard_changes(self, key: str) -> None: ...


class MemoryStateStore(Generic[ModelT]):
    """In-process store holding one pydantic model per key."""

    def __init__(self, model: type[ModelT]) -> None:
        self._model = model
        self._committed: dict[str, dict[str, Any]] = {}
        self._pending: dict[str, Any] = {}

    async def get(
        self, key: str, default_factory: Optional[Callable[[], ModelT]] = None
    ) -> Optional[ModelT]:
        """Return the staged or committed value, else ``default_factory()``.

        Reads never stage anything; a changed value must be passed to ``set``.
        """
        if key in self._pending:
            staged = self._pending[key]
            if staged is not _DELETED:
                return staged
        elif key in self._committed:
            return self._model.model_validate(self._committed[key])
        return default_factory() if default_factory is not None else None

    async def set(self, key: str, value: ModelT) -> None:
        if not isinstance(value, self._model):
            raise TypeError(
                f"Expected {self._model.__name__} for key '{key}', got {type(value).__name__}"
            )
        self._pending[key] = value

    async def delete(self, key: str) -> None:
        self._pending[key] = _DELETED

    async def save_changes(self, key: str) -> None:
        """Commit the staged value for ``key``, if any."""
        if key not in self._pending:
            return
        staged = self._pending.pop(key)
        if staged is _DELETED:
            self._committed.pop(key, None)
            logger.debug("Deleted %s for '%s'", self._model.__name__, key)
        else:
            self._committed[key] = staged.model_dump(mode="json")
            logger.debug("Saved %s for '%s'", self._model.__name__, key)

    def discard_changes(self, key: str) -> None:
        if self._pending.pop(key, None) is not None:
            logger.debug("Discarded staged %s for '%s'", self._model.__name__, key)

    def committed(self, key: str) -> Optional[ModelT]:
        """Return the last committed value for ``key`` without staging it."""
        raw = self._committed.get(key)
        return None if raw is None else self._model.model_validate(raw)
