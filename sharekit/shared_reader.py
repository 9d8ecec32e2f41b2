"""Read-only view of shared state that follows a watch channel."""

from __future__ import annotations

import threading
from typing import Callable, Generic, Optional, TypeVar

from sharekit.subscription import SharedSubscription
from sharekit.watch import WatchReceiver, channel

__all__ = ["SharedReader"]

V = TypeVar("V")
U = TypeVar("U")


class SharedReader(Generic[V]):
    """Holds a value and refreshes it from a watch receiver on each read."""

    def __init__(self, initial: V, receiver: WatchReceiver[V]) -> None:
        self._value = initial
        self._receiver = receiver
        self._following = False
        self._lock = threading.Lock()
        self._source_subscription: Optional[SharedSubscription] = None

    @classmethod
    def from_watch(cls, initial: V, receiver: WatchReceiver[V]) -> "SharedReader[V]":
        return cls(initial, receiver)

    def get(self) -> V:
        """The most recent value sent on the channel, or the initial one."""
        with self._lock:
            if self._following or self._receiver.has_changed():
                self._following = True
                self._value = self._receiver.borrow()
            return self._value

    def watch(self) -> WatchReceiver[V]:
        """The receiver this reader follows."""
        return self._receiver

    def map(self, func: Callable[[V], U]) -> "SharedReader[U]":
        """A derived reader whose value is ``func`` applied to this one's."""
        initial = func(self.get())
        sender, receiver = channel(initial)
        derived: SharedReader[U] = SharedReader(initial, receiver)
        derived._source_subscription = self._receiver.add_listener(
            lambda value: sender.send(func(value))
        )
        return derived