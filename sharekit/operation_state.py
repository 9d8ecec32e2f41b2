"""State of an asynchronous operation: idle, in flight, succeeded or failed."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, replace
from typing import Callable, Generic, Optional, TypeVar

__all__ = ["OperationStatus", "OperationState"]

T = TypeVar("T")
U = TypeVar("U")


class OperationStatus(enum.Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class OperationState(Generic[T]):
    """Immutable snapshot of an operation's progress.

    ``value`` is set only on success, ``error`` only on failure.
    Timestamps come from ``time.monotonic()``.
    """

    status: OperationStatus = OperationStatus.IDLE
    value: Optional[T] = None
    error: Optional[str] = None
    started_at: Optional[float] = None
    finished_at: Optional[float] = None

    @classmethod
    def idle(cls) -> "OperationState[T]":
        return cls()

    @classmethod
    def in_flight(cls) -> "OperationState[T]":
        return cls(OperationStatus.IN_FLIGHT, started_at=time.monotonic())

    @classmethod
    def success(cls, value: T) -> "OperationState[T]":
        return cls(OperationStatus.SUCCESS, value=value, finished_at=time.monotonic())

    @classmethod
    def failure(cls, error: object) -> "OperationState[T]":
        return cls(
            OperationStatus.FAILURE, error=str(error), finished_at=time.monotonic()
        )

    def is_loading(self) -> bool:
        return self.status is OperationStatus.IN_FLIGHT

    def is_idle(self) -> bool:
        return self.status is OperationStatus.IDLE

    def is_success(self) -> bool:
        return self.status is OperationStatus.SUCCESS

    def is_failure(self) -> bool:
        return self.status is OperationStatus.FAILURE

    def map(self, func: Callable[[T], U]) -> "OperationState[U]":
        """Transform the success value; other states pass through unchanged."""
        if self.status is OperationStatus.SUCCESS:
            return replace(self, value=func(self.value))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]