"""Typed create, update, delete and link operations on database tables."""

from __future__ import annotations

import abc
import dataclasses
from typing import Any, ClassVar, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from sharekit.errors import SerializationError, SharingInstantError, TransactionFailed
from sharekit.mutation_callbacks import MutationCallbacks

__all__ = ["Table", "Database", "Mutator"]

T = TypeVar("T", bound="Table")


class Table:
    """Base for entity types stored in a named table.

    Subclasses set ``TABLE_NAME``. ``to_value`` turns an instance into a
    JSON-like dict; dataclasses and plain objects work without overriding it.
    """

    TABLE_NAME: ClassVar[str]

    def to_value(self) -> Any:
        """The instance as a JSON-like value (normally a dict)."""
        if dataclasses.is_dataclass(self) and not isinstance(self, type):
            return dataclasses.asdict(self)
        try:
            attrs = vars(self)
        except TypeError as exc:
            raise SerializationError(str(exc)) from exc
        return {name: value for name, value in attrs.items() if not name.startswith("_")}


class Database(abc.ABC):
    """A store that accepts transactions made of steps."""

    @abc.abstractmethod
    def transact(self, steps: List[List[Any]]) -> None:
        """Apply ``steps``, each of the form ``[op, table, id, attrs]``.

        Raises a ``SharingInstantError`` when the transaction fails.
        """


class Mutator(Generic[T]):
    """Builds transaction steps for one table type and runs them on a database."""

    def __init__(self, table: Type[T], db: Database) -> None:
        name = getattr(table, "TABLE_NAME", None)
        if not isinstance(name, str):
            raise TypeError(f"{table!r} does not define a string TABLE_NAME")
        self.table = table
        self.db = db

    @property
    def table_name(self) -> str:
        return self.table.TABLE_NAME

    def create(self, item: T) -> None:
        """Create an entity, taking its id from the item's ``id`` field."""
        entity_id, attrs = self._extract_id_and_attrs(item)
        self.db.transact(self._build_steps("update", entity_id, attrs))

    def create_with_callbacks(self, item: T, callbacks: MutationCallbacks[None]) -> None:
        self._with_callbacks(lambda: self.create(item), callbacks)

    def update(self, entity_id: str, item: T) -> None:
        """Update the entity with the given id."""
        attrs = self._serialize(item)
        self.db.transact(self._build_steps("update", entity_id, attrs))

    def update_with_callbacks(
        self, entity_id: str, item: T, callbacks: MutationCallbacks[None]
    ) -> None:
        self._with_callbacks(lambda: self.update(entity_id, item), callbacks)

    def delete(self, entity_id: str) -> None:
        """Delete the entity with the given id."""
        self.db.transact(self._build_steps("delete", entity_id, {}))

    def delete_with_callbacks(self, entity_id: str, callbacks: MutationCallbacks[None]) -> None:
        self._with_callbacks(lambda: self.delete(entity_id), callbacks)

    def link(self, entity_id: str, field: str, target_id: str) -> None:
        """Link the entity to ``target_id`` through ``field``."""
        self.db.transact(self._build_steps("link", entity_id, {field: target_id}))

    def link_with_callbacks(
        self, entity_id: str, field: str, target_id: str, callbacks: MutationCallbacks[None]
    ) -> None:
        self._with_callbacks(lambda: self.link(entity_id, field, target_id), callbacks)

    def unlink(self, entity_id: str, field: str, target_id: str) -> None:
        """Remove the link from the entity to ``target_id`` through ``field``."""
        self.db.transact(self._build_steps("unlink", entity_id, {field: target_id}))

    def unlink_with_callbacks(
        self, entity_id: str, field: str, target_id: str, callbacks: MutationCallbacks[None]
    ) -> None:
        self._with_callbacks(lambda: self.unlink(entity_id, field, target_id), callbacks)

    @staticmethod
    def _with_callbacks(operation, callbacks: MutationCallbacks[None]) -> None:
        try:
            operation()
        except SharingInstantError as exc:
            callbacks.fire_error(exc)
            raise TransactionFailed(str(exc)) from exc
        callbacks.fire_success(None)

    @staticmethod
    def _serialize(item: Any) -> Any:
        try:
            return item.to_value()
        except SharingInstantError:
            raise
        except (TypeError, ValueError, AttributeError) as exc:
            raise SerializationError(str(exc)) from exc

    def _extract_id_and_attrs(self, item: T) -> Tuple[str, Dict[str, Any]]:
        value = self._serialize(item)
        if not isinstance(value, dict):
            raise SerializationError("Table item must serialize to an object")
        entity_id: Optional[Any] = value.get("id")
        if not isinstance(entity_id, str):
            raise SerializationError("Table item must have a string 'id' field")
        return entity_id, value

    def _build_steps(self, op: str, entity_id: str, attrs: Any) -> List[List[Any]]:
        return [[op, self.table_name, entity_id, attrs]]

    def __repr__(self) -> str:
        return f"Mutator({self.table_name!r})"