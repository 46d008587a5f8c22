"""
Repository with a secondary index on one attribute.

Catalogue style entities are looked up by a non‑identity attribute
(books and products by ``category``, employees by ``department``).
``IndexedRepository`` keeps ``value -> {ids}`` next to the store and
updates it inside the same write critical section as ``save`` and
``delete_by_id``, so a query never sees the index and the store
disagree.

Results of ``find_by_index`` follow the same discipline as
``find_all``: a snapshot, ordered by when each entity was first
inserted.
"""

from collections import defaultdict
from typing import Any, Dict, Hashable, List, Optional, Set, Type

from .memory import InMemoryRepository, T


class IndexedRepository(InMemoryRepository[T]):
    """``InMemoryRepository`` plus an index on ``index_attribute``."""

    def __init__(self, entity_type: Type[T], index_attribute: str = "category") -> None:
        super().__init__(entity_type)
        self.index_attribute = index_attribute
        self._index: Dict[Hashable, Set[int]] = defaultdict(set)
        # Insertion sequence of each stored id, used to order index hits.
        self._positions: Dict[int, int] = {}
        self._sequence = 0

    def _key(self, entity: T) -> Any:
        return getattr(entity, self.index_attribute)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_by_index(self, value: Any) -> List[T]:
        """Return the entities whose indexed attribute equals ``value``."""
        with self._lock.read_locked():
            ids = self._index.get(value, ())
            ordered = sorted(ids, key=self._positions.__getitem__)
            return [self._copy(self._items[entity_id]) for entity_id in ordered]

    def find_by_category(self, category: Any) -> List[T]:
        return self.find_by_index(category)

    def index_keys(self) -> List[Any]:
        """Attribute values that currently have at least one entity."""
        with self._lock.read_locked():
            return [key for key, ids in self._index.items() if ids]

    # ------------------------------------------------------------------
    # Index maintenance
    # ------------------------------------------------------------------
    def _after_save(self, previous: Optional[T], stored: T) -> None:
        if previous is None:
            self._positions[stored.id] = self._sequence
            self._sequence += 1
        else:
            self._unindex(self._key(previous), previous.id)
        self._index[self._key(stored)].add(stored.id)

    def _after_delete(self, removed: T) -> None:
        self._unindex(self._key(removed), removed.id)
        self._positions.pop(removed.id, None)

    def _unindex(self, key: Any, entity_id: int) -> None:
        ids = self._index.get(key)
        if ids is None:
            return
        ids.discard(entity_id)
        if not ids:
            del self._index[key]
