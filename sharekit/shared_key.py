"""Persistence keys that can also write values back."""

from __future__ import annotations

import abc
import enum
from typing import TypeVar

from sharekit.shared_reader_key import SharedReaderKey

__all__ = ["SaveContext", "SharedKey"]

V = TypeVar("V")


class SaveContext(enum.Enum):
    """Why a value is being saved."""

    DID_SET = "did_set"
    USER_INITIATED = "user_initiated"


class SharedKey(SharedReaderKey[V]):
    """A readable key that can persist values to its store."""

    @abc.abstractmethod
    def save(self, value: V, context: SaveContext) -> None:
        """Persist ``value``.

        Called with ``DID_SET`` after a mutation and with ``USER_INITIATED``
        on an explicit save. Raises a ``SharingInstantError`` on failure.
        """