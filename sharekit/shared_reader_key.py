"""Read-only persistence keys and the subscriber they push updates to."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Optional, TypeVar

from sharekit.errors import SharingInstantError
from sharekit.subscription import SharedSubscription

__all__ = ["LoadContext", "SubscriberEvent", "SharedSubscriber", "SharedReaderKey"]

V = TypeVar("V")


@dataclass(frozen=True)
class LoadContext(Generic[V]):
    """Why a value is being loaded.

    On the initial load ``value`` holds the default the caller supplied;
    a user-initiated reload carries no value.
    """

    is_initial: bool
    value: Optional[V] = None

    @classmethod
    def initial_value(cls, value: V) -> "LoadContext[V]":
        return cls(True, value)

    @classmethod
    def user_initiated(cls) -> "LoadContext[V]":
        return cls(False)

    @property
    def is_user_initiated(self) -> bool:
        return not self.is_initial


@dataclass(frozen=True)
class SubscriberEvent(Generic[V]):
    """One update delivered to a subscriber.

    Exactly one of three things: a new value (``has_value``), an error,
    or a request to fall back to the initial value.
    """

    value: Optional[V] = None
    has_value: bool = False
    error: Optional[SharingInstantError] = None

    @property
    def returns_initial(self) -> bool:
        return not self.has_value and self.error is None


class SharedSubscriber(Generic[V]):
    """Receives change notifications pushed by a persistence key."""

    def __init__(self, callback: Callable[[SubscriberEvent[V]], Any]) -> None:
        self._callback = callback

    def yield_value(self, value: V) -> None:
        """Push an updated value."""
        self._callback(SubscriberEvent(value=value, has_value=True))

    def yield_returning_initial_value(self) -> None:
        """Signal that the value should revert to its default."""
        self._callback(SubscriberEvent())

    def yield_error(self, error: SharingInstantError) -> None:
        """Push an error."""
        self._callback(SubscriberEvent(error=error))


class SharedReaderKey(abc.ABC, Generic[V]):
    """A source that can load a value and report external changes to it."""

    @abc.abstractmethod
    def id(self) -> Hashable:
        """Identity used to recognise keys that point at the same storage."""

    @abc.abstractmethod
    def load(self, context: LoadContext[V]) -> Optional[V]:
        """Return the stored value, or None to use the default.

        Raises a ``SharingInstantError`` when the store cannot be read.
        """

    @abc.abstractmethod
    def subscribe(
        self, context: LoadContext[V], subscriber: SharedSubscriber[V]
    ) -> SharedSubscription:
        """Start delivering external changes to ``subscriber``.

        The returned subscription must be kept; cancelling it stops delivery.
        """