"""Exception hierarchy shared by the whole package."""

from __future__ import annotations

__all__ = [
    "SharingInstantError",
    "SerializationError",
    "StorageKeyError",
    "TransactionFailed",
    "NotFoundError",
]


class SharingInstantError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class SerializationError(SharingInstantError):
    """A value could not be encoded to, or decoded from, its stored form."""


class StorageKeyError(SharingInstantError):
    """A persistence key failed to read from or write to its backing store."""


class TransactionFailed(SharingInstantError):
    """A transaction against the database did not complete."""


class NotFoundError(SharingInstantError):
    """A requested entity does not exist."""