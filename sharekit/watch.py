"""A single-value broadcast channel that always holds the latest value."""

from __future__ import annotations

import itertools
import threading
from typing import Callable, Dict, Generic, Tuple, TypeVar

from sharekit.subscription import SharedSubscription

__all__ = ["WatchSender", "WatchReceiver", "channel"]

T = TypeVar("T")


class _WatchState(Generic[T]):
    def __init__(self, value: T) -> None:
        self.value = value
        self.version = 0
        self.lock = threading.Lock()
        self.listeners: Dict[int, Callable[[T], None]] = {}
        self.ids = itertools.count()


class WatchSender(Generic[T]):
    """The writing end of a watch channel."""

    def __init__(self, state: _WatchState[T]) -> None:
        self._state = state

    def send(self, value: T) -> None:
        """Replace the current value and notify every listener."""
        state = self._state
        with state.lock:
            state.value = value
            state.version += 1
            listeners = list(state.listeners.values())
        for listener in listeners:
            listener(value)

    def subscribe(self) -> "WatchReceiver[T]":
        """A new receiver that treats the current value as already seen."""
        with self._state.lock:
            seen = self._state.version
        return WatchReceiver(self._state, seen)


class WatchReceiver(Generic[T]):
    """The reading end of a watch channel."""

    def __init__(self, state: _WatchState[T], seen: int) -> None:
        self._state = state
        self._seen = seen

    def borrow(self) -> T:
        """The latest value, without marking it as seen."""
        return self._state.value

    def borrow_and_update(self) -> T:
        """The latest value, marking it as seen."""
        with self._state.lock:
            self._seen = self._state.version
            return self._state.value

    def has_changed(self) -> bool:
        """Whether a value has been sent since this receiver last looked."""
        with self._state.lock:
            return self._state.version != self._seen

    def add_listener(self, callback: Callable[[T], None]) -> SharedSubscription:
        """Call ``callback`` with each value sent from now on."""
        state = self._state
        with state.lock:
            key = next(state.ids)
            state.listeners[key] = callback

        def remove() -> None:
            with state.lock:
                state.listeners.pop(key, None)

        return SharedSubscription(remove)


def channel(initial: T) -> Tuple[WatchSender[T], WatchReceiver[T]]:
    """Create a connected sender and receiver holding ``initial``."""
    state = _WatchState(initial)
    return WatchSender(state), WatchReceiver(state, 0)