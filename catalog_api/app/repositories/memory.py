"""
In‑memory repository.

``InMemoryRepository`` is the sole owner of the entities of one type.
It assigns identifiers, answers lookups and keeps entities in
insertion order.  It never raises domain errors: a missing id is
reported as ``None`` and deleting a missing id does nothing.  Turning
absence into an error is the service's decision.

Entities are copied on the way in and on the way out.  What a caller
holds is a snapshot; changing it has no effect until it is saved
again.

Every instance owns one ``ReadWriteLock``.  Mutations (``save``,
``delete_by_id``) take the write lock, queries take the read lock.
``exclusive()`` exposes the write lock so a service can run a
read‑check‑write sequence without another writer slipping in between.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Dict, Generic, Iterator, List, Optional, Type, TypeVar

from catalog_api.app.core.locks import ReadWriteLock
from catalog_api.app.schemas.base import Entity

T = TypeVar("T", bound=Entity)

logger = logging.getLogger(__name__)


class InMemoryRepository(Generic[T]):
    """Dictionary backed store with a monotonically increasing id allocator."""

    def __init__(self, entity_type: Type[T]) -> None:
        self.entity_type = entity_type
        self._items: Dict[int, T] = {}
        self._next_id = 1
        self._lock = ReadWriteLock()

    @property
    def entity_name(self) -> str:
        return self.entity_type.entity_name

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_all(self) -> List[T]:
        """Return a snapshot of every stored entity in insertion order."""
        with self._lock.read_locked():
            return [self._copy(item) for item in self._items.values()]

    def find_by_id(self, entity_id: int) -> Optional[T]:
        """Return the entity with ``entity_id`` or ``None``."""
        with self._lock.read_locked():
            item = self._items.get(entity_id)
            return self._copy(item) if item is not None else None

    def find_where(self, predicate: Callable[[T], bool]) -> List[T]:
        """Return the entities matching ``predicate``, in insertion order."""
        with self._lock.read_locked():
            return [self._copy(item) for item in self._items.values() if predicate(item)]

    def exists_by_id(self, entity_id: int) -> bool:
        with self._lock.read_locked():
            return entity_id in self._items

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._items)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def save(self, entity: T) -> T:
        """Insert or replace ``entity`` and return the stored copy.

        An entity without an id receives the next identifier.  An
        entity with an id replaces any stored entity with the same id.
        """
        with self._lock.write_locked():
            if entity.id is None:
                stored = entity.model_copy(update={"id": self._next_id}, deep=True)
                self._next_id += 1
            else:
                stored = entity.model_copy(deep=True)
                # Keep the allocator ahead of explicitly chosen ids.
                if stored.id >= self._next_id:
                    self._next_id = stored.id + 1
            previous = self._items.get(stored.id)
            self._items[stored.id] = stored
            self._after_save(previous, stored)
            logger.debug(
                "%s %s %s", "Replaced" if previous is not None else "Inserted", self.entity_name, stored.id
            )
            return self._copy(stored)

    def delete_by_id(self, entity_id: int) -> None:
        """Remove the entity with ``entity_id``; a missing id is a no‑op."""
        with self._lock.write_locked():
            removed = self._items.pop(entity_id, None)
            if removed is not None:
                self._after_delete(removed)
                logger.debug("Deleted %s %s", self.entity_name, entity_id)

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        """Hold the write lock for a multi‑step operation.

        Repository methods called from the same thread inside the block
        do not block on the lock.
        """
        with self._lock.write_locked():
            yield

    # ------------------------------------------------------------------
    # Hooks for derived structures, called under the write lock
    # ------------------------------------------------------------------
    def _after_save(self, previous: Optional[T], stored: T) -> None:
        pass

    def _after_delete(self, removed: T) -> None:
        pass

    @staticmethod
    def _copy(item: T) -> T:
        return item.model_copy(deep=True)
