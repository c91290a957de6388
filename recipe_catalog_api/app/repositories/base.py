"""Generic keyed collection shared by the entity repositories."""

import uuid
from typing import Callable, Dict, Generic, List, TypeVar

from pydantic import BaseModel

from ..core.errors import NotFoundError
from ..core.locks import ReadWriteLock


T = TypeVar("T", bound=BaseModel)


class InMemoryRepository(Generic[T]):
    """Dictionary of entities keyed by id, guarded by a ``ReadWriteLock``.

    Entities are returned as deep copies so callers cannot change
    stored state by mutating what they receive.  ``find_all`` yields
    entities in insertion order, which keeps pagination stable between
    calls while the collection is unchanged.
    """

    entity_name = "entity"

    def __init__(self) -> None:
        self._items: Dict[str, T] = {}
        self._lock = ReadWriteLock()

    @staticmethod
    def _new_id() -> str:
        return str(uuid.uuid4())

    def _not_found(self, entity_id: str) -> NotFoundError:
        return NotFoundError(f"{self.entity_name} {entity_id} not found")

    def _get(self, entity_id: str) -> T:
        # Caller must hold the lock.
        try:
            return self._items[entity_id]
        except KeyError:
            raise self._not_found(entity_id) from None

    def _select(self, predicate: Callable[[T], bool]) -> List[T]:
        with self._lock.read_locked():
            return [item.model_copy(deep=True) for item in self._items.values() if predicate(item)]

    def find_all(self) -> List[T]:
        with self._lock.read_locked():
            return [item.model_copy(deep=True) for item in self._items.values()]

    def find_by_id(self, entity_id: str) -> T:
        with self._lock.read_locked():
            return self._get(entity_id).model_copy(deep=True)

    def delete(self, entity_id: str) -> None:
        with self._lock.write_locked():
            self._get(entity_id)
            del self._items[entity_id]

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._items)
