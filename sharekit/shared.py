"""Mutable shared state that persists itself through a key."""

from __future__ import annotations

import copy
import threading
from typing import Any, Callable, Generic, Optional, TypeVar

from sharekit.errors import SharingInstantError
from sharekit.shared_key import SaveContext, SharedKey
from sharekit.shared_reader import SharedReader
from sharekit.shared_reader_key import LoadContext, SharedSubscriber, SubscriberEvent
from sharekit.subscription import SharedSubscription
from sharekit.watch import WatchReceiver, WatchSender, channel

__all__ = ["Shared"]

V = TypeVar("V")
R = TypeVar("R")


class _Cell(Generic[V]):
    """Mutable holder handed to ``Shared.with_lock`` callbacks."""

    __slots__ = ("value",)

    def __init__(self, value: V) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"_Cell({self.value!r})"


class _SharedState(Generic[V]):
    def __init__(self, value: V, sender: WatchSender[V]) -> None:
        self.value = value
        self.sender = sender
        self.lock = threading.RLock()
        self.subscription: Optional[SharedSubscription] = None

    def replace(self, value: V) -> None:
        with self.lock:
            self.value = value
            snapshot = copy.deepcopy(value)
        self.sender.send(snapshot)


class Shared(Generic[V]):
    """A value guarded by a lock, saved through a key after every mutation.

    Copies made with ``copy.copy`` share the same underlying state.
    """

    def __init__(self, default: V, key: SharedKey[V]) -> None:
        try:
            loaded = key.load(LoadContext.initial_value(copy.deepcopy(default)))
        except SharingInstantError:
            loaded = None
        initial = default if loaded is None else loaded

        sender, _ = channel(copy.deepcopy(initial))
        state: _SharedState[V] = _SharedState(initial, sender)
        self._key = key
        self._state = state

        def on_event(event: SubscriberEvent[V]) -> None:
            if event.has_value:
                state.replace(event.value)  # type: ignore[arg-type]

        state.subscription = key.subscribe(
            LoadContext.initial_value(copy.deepcopy(initial)),
            SharedSubscriber(on_event),
        )

    def get(self) -> V:
        """The current value."""
        with self._state.lock:
            return self._state.value

    def with_lock(self, func: Callable[[_Cell[V]], R]) -> R:
        """Mutate the value under the lock, then save and broadcast it.

        ``func`` receives a cell whose ``value`` it may replace or mutate
        in place; its return value is returned. If ``func`` raises, the
        stored value is left unchanged.
        """
        state = self._state
        with state.lock:
            cell = _Cell(state.value)
            result = func(cell)
            state.value = cell.value
            snapshot = copy.deepcopy(cell.value)
        try:
            self._key.save(snapshot, SaveContext.DID_SET)
        except SharingInstantError:
            pass
        state.sender.send(snapshot)
        return result

    def save(self) -> None:
        """Explicitly persist the current value."""
        with self._state.lock:
            snapshot = copy.deepcopy(self._state.value)
        self._key.save(snapshot, SaveContext.USER_INITIATED)

    def load(self) -> None:
        """Reload the value from the key, if it holds one."""
        loaded = self._key.load(LoadContext.user_initiated())
        if loaded is not None:
            self._state.replace(loaded)

    def watch(self) -> WatchReceiver[V]:
        """A receiver that sees every later change."""
        return self._state.sender.subscribe()

    def reader(self) -> SharedReader[V]:
        """A read-only view of this value."""
        with self._state.lock:
            current = copy.deepcopy(self._state.value)
        return SharedReader.from_watch(current, self._state.sender.subscribe())

    def __repr__(self) -> str:
        return f"Shared({self.get()!r}, key={self._key.id()!r})"

    def _cell_factory(self) -> Any:  # pragma: no cover - convenience for subclasses
        return _Cell