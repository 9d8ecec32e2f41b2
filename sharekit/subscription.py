"""Cancellable handle for reactive subscriptions."""

from __future__ import annotations

import threading
from typing import Callable, Optional

__all__ = ["SharedSubscription"]


class SharedSubscription:
    """A subscription that runs its cancel callback exactly once.

    The callback runs on an explicit ``cancel()``, on leaving a ``with``
    block, or when the handle is garbage collected.
    """

    def __init__(self, cancel: Optional[Callable[[], None]]) -> None:
        self._cancel_fn = cancel
        self._lock = threading.Lock()

    @classmethod
    def empty(cls) -> "SharedSubscription":
        """A subscription with nothing to cancel."""
        return cls(None)

    @property
    def active(self) -> bool:
        """Whether a cancel callback is still pending."""
        return self._cancel_fn is not None

    def cancel(self) -> None:
        """Cancel the subscription; later calls do nothing."""
        with self._lock:
            func, self._cancel_fn = self._cancel_fn, None
        if func is not None:
            func()

    def __enter__(self) -> "SharedSubscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()

    def __del__(self) -> None:
        try:
            self.cancel()
        except AttributeError:
            pass