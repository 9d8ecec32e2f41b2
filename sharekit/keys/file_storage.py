"""Persistence key that stores a value as a JSON file."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Generic, Optional, TypeVar, Union

from sharekit.errors import SerializationError, StorageKeyError
from sharekit.shared_key import SaveContext, SharedKey
from sharekit.shared_reader_key import LoadContext, SharedSubscriber
from sharekit.subscription import SharedSubscription

__all__ = ["FileStorageKey"]

V = TypeVar("V")


class FileStorageKey(SharedKey[V], Generic[V]):
    """Reads and writes a JSON document at a fixed path."""

    def __init__(self, path: Union[str, "os.PathLike[str]"]) -> None:
        self.path = Path(path)

    def id(self) -> str:
        return f"file:{self.path}"

    def load(self, context: LoadContext[V]) -> Optional[V]:
        if not self.path.exists():
            return None
        try:
            contents = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageKeyError(str(exc)) from exc
        try:
            return json.loads(contents)
        except ValueError as exc:
            raise SerializationError(str(exc)) from exc

    def subscribe(
        self, context: LoadContext[V], subscriber: SharedSubscriber[V]
    ) -> SharedSubscription:
        return SharedSubscription.empty()

    def save(self, value: V, context: SaveContext) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageKeyError(str(exc)) from exc
        try:
            text = json.dumps(value, indent=2)
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageKeyError(str(exc)) from exc

    def __repr__(self) -> str:
        return f"FileStorageKey({str(self.path)!r})"