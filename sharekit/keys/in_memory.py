"""Process-wide in-memory persistence key."""

from __future__ import annotations

import copy
import threading
from typing import Any, Dict, Generic, Optional, TypeVar

from sharekit.shared_key import SaveContext, SharedKey
from sharekit.shared_reader_key import LoadContext, SharedSubscriber
from sharekit.subscription import SharedSubscription

__all__ = ["InMemoryKey"]

V = TypeVar("V")

_STORAGE: Dict[str, Any] = {}
_STORAGE_LOCK = threading.Lock()


class InMemoryKey(SharedKey[V], Generic[V]):
    """Stores values in a map shared by every key in the process.

    Values survive across ``Shared`` instances using the same name and
    are lost when the process exits.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def id(self) -> str:
        return f"in_memory:{self.name}"

    def load(self, context: LoadContext[V]) -> Optional[V]:
        with _STORAGE_LOCK:
            if self.name not in _STORAGE:
                return None
            return copy.deepcopy(_STORAGE[self.name])

    def subscribe(
        self, context: LoadContext[V], subscriber: SharedSubscriber[V]
    ) -> SharedSubscription:
        return SharedSubscription.empty()

    def save(self, value: V, context: SaveContext) -> None:
        stored = copy.deepcopy(value)
        with _STORAGE_LOCK:
            _STORAGE[self.name] = stored

    def __repr__(self) -> str:
        return f"InMemoryKey({self.name!r})"