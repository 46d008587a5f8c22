"""
Generic CRUD service.

``CrudService`` wraps exactly one repository and is the layer where
domain rules are applied.  It is the only place where a missing
entity becomes ``ErrorKind.NOT_FOUND`` and where invalid field values
become ``ErrorKind.INVALID_ARGUMENT``.  Domain services subclass it
and add their own verbs on top of ``_mutate``, which runs a
fetch‑change‑save sequence atomically with respect to other writers
of the same repository.
"""

import logging
from typing import Any, Callable, Dict, FrozenSet, Generic, List, Mapping

from catalog_api.app.core.errors import CatalogError
from catalog_api.app.repositories.memory import InMemoryRepository, T

logger = logging.getLogger(__name__)


class CrudService(Generic[T]):
    """Create, read, update and delete for one entity type."""

    # Fields that `update` refuses to touch; they change only through
    # the dedicated verbs of a subclass.
    read_only_fields: FrozenSet[str] = frozenset()

    def __init__(self, repository: InMemoryRepository[T]) -> None:
        self.repository = repository

    @property
    def entity_name(self) -> str:
        return self.repository.entity_name

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get_by_id(self, entity_id: int) -> T:
        """Return the entity or raise ``NOT_FOUND``."""
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            logger.warning("%s %s not found", self.entity_name, entity_id)
            raise CatalogError.not_found(self.entity_name, entity_id)
        return entity

    def list_all(self) -> List[T]:
        return self.repository.find_all()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def create(self, entity: T) -> T:
        """Validate and store a new entity.

        Any id on the incoming entity is discarded: creating never
        overwrites an existing record.
        """
        candidate = entity.model_copy(update={"id": None})
        self._validate(candidate)
        with self.repository.exclusive():
            self._before_create(candidate)
            saved = self.repository.save(candidate)
        logger.info("Created %s %s", self.entity_name, saved.id)
        return saved

    def update(self, entity_id: int, patch: Mapping[str, Any]) -> T:
        """Apply ``patch`` to an existing entity and store the result.

        Raises ``NOT_FOUND`` if the entity does not exist and
        ``INVALID_ARGUMENT`` if the patch names unknown fields, tries
        to change the id or a read-only field, or produces invalid
        values.
        """
        changes = dict(patch)
        fields = set(self.repository.entity_type.model_fields) - {"id"} - self.read_only_fields
        read_only = sorted(set(changes) & self.read_only_fields)
        if read_only:
            logger.warning("Rejected update of %s on %s %s", read_only, self.entity_name, entity_id)
            raise CatalogError.invalid(
                f"{', '.join(read_only)} cannot be set directly on {self.entity_name}",
                entity=self.entity_name,
                entity_id=entity_id,
            )
        unknown = sorted(set(changes) - fields)
        if unknown:
            raise CatalogError.invalid(
                f"Cannot update {', '.join(unknown)} on {self.entity_name}",
                entity=self.entity_name,
                entity_id=entity_id,
            )
        updated = self._mutate(entity_id, lambda current: self._apply(current, changes))
        logger.info("Updated %s %s: %s", self.entity_name, entity_id, sorted(changes))
        return updated

    def delete(self, entity_id: int) -> None:
        """Remove the entity; deleting a missing id is not an error."""
        self.repository.delete_by_id(entity_id)
        logger.info("Deleted %s %s", self.entity_name, entity_id)

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------
    def _mutate(self, entity_id: int, change: Callable[[T], T]) -> T:
        """Fetch, transform and save one entity under the write lock.

        ``change`` receives a snapshot and returns the new state, or
        raises ``CatalogError`` to abort without touching the store.
        The returned state is validated before it is saved.
        """
        with self.repository.exclusive():
            current = self.get_by_id(entity_id)
            changed = change(current)
            self._validate(changed)
            self._before_update(current, changed)
            return self.repository.save(changed)

    def _apply(self, current: T, changes: Dict[str, Any]) -> T:
        data = current.model_dump()
        data.update(changes)
        # Rebuild through the model so patched values are type checked.
        try:
            return type(current).model_validate(data)
        except ValueError as exc:
            raise CatalogError.invalid(str(exc), entity=self.entity_name, entity_id=current.id) from exc

    def _validate(self, entity: T) -> None:
        try:
            entity.ensure_valid()
        except CatalogError as exc:
            logger.warning("Rejected %s %s: %s", self.entity_name, entity.id, exc.message)
            raise

    def _before_create(self, entity: T) -> None:
        """Hook run under the write lock before a new entity is saved."""

    def _before_update(self, current: T, changed: T) -> None:
        """Hook run under the write lock before an updated entity is saved."""
