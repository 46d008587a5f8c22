"""
Base class shared by every stored entity.

An entity is a pydantic model with an optional integer ``id``.  The
id is ``None`` until a repository assigns one and never changes
afterwards.  Entities compare equal by identity only: two saved
employees with the same id are equal even if their salaries differ,
and an unsaved entity is only equal to itself.  Use ``model_dump()``
to compare field values.

Subclasses implement ``ensure_valid`` to reject values that break a
domain rule (empty names, non‑positive prices, ...).
"""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, Field

from catalog_api.app.core.errors import CatalogError


class Entity(BaseModel):
    """Record with a stable identity and mutable business attributes."""

    # Name used in error messages and log lines.
    entity_name: ClassVar[str] = "Entity"

    id: Optional[int] = Field(None, description="Assigned by the repository on first save")

    model_config = {
        "from_attributes": True,
    }

    def ensure_valid(self) -> None:
        """Raise ``CatalogError`` (invalid argument) if a field breaks a rule."""

    def _invalid(self, message: str) -> CatalogError:
        return CatalogError.invalid(message, entity=self.entity_name, entity_id=self.id)

    def _require_text(self, field_name: str) -> None:
        value = getattr(self, field_name)
        if value is None or not str(value).strip():
            raise self._invalid(f"{self.entity_name} {field_name} must not be empty")

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return object.__hash__(self)
        return hash((type(self).__name__, self.id))
