"""Lifecycle hooks attached to mutations and other operations."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

from sharekit.errors import SharingInstantError

__all__ = ["MutationCallbacks"]

T = TypeVar("T")


class MutationCallbacks(Generic[T]):
    """Optional hooks run around an operation, each at most once.

    Builder methods set a hook and return the same object, so they chain.
    Firing either path consumes every hook.
    """

    def __init__(self) -> None:
        self._on_mutate: Optional[Callable[[], Any]] = None
        self._on_success: Optional[Callable[[T], Any]] = None
        self._on_error: Optional[Callable[[SharingInstantError], Any]] = None
        self._on_settled: Optional[Callable[[], Any]] = None

    @classmethod
    def error_only(cls, func: Callable[[SharingInstantError], Any]) -> "MutationCallbacks[T]":
        return cls().on_error(func)

    @classmethod
    def success_only(cls, func: Callable[[T], Any]) -> "MutationCallbacks[T]":
        return cls().on_success(func)

    @classmethod
    def settled_only(cls, func: Callable[[], Any]) -> "MutationCallbacks[T]":
        return cls().on_settled(func)

    def on_mutate(self, func: Callable[[], Any]) -> "MutationCallbacks[T]":
        """Run ``func`` before the operation."""
        self._on_mutate = func
        return self

    def on_success(self, func: Callable[[T], Any]) -> "MutationCallbacks[T]":
        """Run ``func`` with the result when the operation succeeds."""
        self._on_success = func
        return self

    def on_error(self, func: Callable[[SharingInstantError], Any]) -> "MutationCallbacks[T]":
        """Run ``func`` with the error when the operation fails."""
        self._on_error = func
        return self

    def on_settled(self, func: Callable[[], Any]) -> "MutationCallbacks[T]":
        """Run ``func`` after the operation, whatever its outcome."""
        self._on_settled = func
        return self

    def _take(self):
        hooks = (self._on_mutate, self._on_success, self._on_error, self._on_settled)
        self._on_mutate = self._on_success = self._on_error = self._on_settled = None
        return hooks

    def fire_success(self, value: T) -> None:
        """Run on_mutate, on_success(value), then on_settled."""
        mutate, success, _, settled = self._take()
        if mutate is not None:
            mutate()
        if success is not None:
            success(value)
        if settled is not None:
            settled()

    def fire_error(self, error: SharingInstantError) -> None:
        """Run on_mutate, on_error(error), then on_settled."""
        mutate, _, failed, settled = self._take()
        if mutate is not None:
            mutate()
        if failed is not None:
            failed(error)
        if settled is not None:
            settled()

    def is_empty(self) -> bool:
        return all(hook is None for hook in (
            self._on_mutate, self._on_success, self._on_error, self._on_settled
        ))

    def __repr__(self) -> str:
        return (
            f"MutationCallbacks(on_mutate={self._on_mutate is not None}, "
            f"on_success={self._on_success is not None}, "
            f"on_error={self._on_error is not None}, "
            f"on_settled={self._on_settled is not None})"
        )