"""
Domain error kinds raised by services and rendered by the API layer.

There is a single exception type, ``CatalogError``, tagged with an
``ErrorKind``.  The entity type and identifier travel as data on the
error instead of being encoded in a subclass per entity, so a missing
book and a missing user are both ``ErrorKind.NOT_FOUND``.

Repositories never raise these errors; absence is a normal return
value there.  Services are the only layer that converts absence or a
rule violation into a ``CatalogError``.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Kinds of failures a service operation can report."""

    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    UNAVAILABLE = "unavailable"
    INVARIANT_VIOLATION = "invariant_violation"
    CONFLICT = "conflict"


class CatalogError(Exception):
    """A deterministic domain failure.

    Parameters
    ----------
    kind : ErrorKind
        What went wrong.
    message : str
        Human readable description.
    entity : Optional[str]
        Name of the entity type involved, e.g. ``"Book"``.
    entity_id : Any
        Identifier of the entity involved, if any.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        entity: Optional[str] = None,
        entity_id: Any = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message)

    @classmethod
    def not_found(cls, entity: str, entity_id: Any) -> "CatalogError":
        return cls(
            ErrorKind.NOT_FOUND,
            f"{entity} with id {entity_id} not found",
            entity=entity,
            entity_id=entity_id,
        )

    @classmethod
    def invalid(cls, message: str, entity: Optional[str] = None, entity_id: Any = None) -> "CatalogError":
        return cls(ErrorKind.INVALID_ARGUMENT, message, entity=entity, entity_id=entity_id)

    def to_dict(self) -> Dict[str, Any]:
        """Structured form used by the API error envelope."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "entity": self.entity,
            "id": self.entity_id,
        }

    def __repr__(self) -> str:
        return f"CatalogError({self.kind.value!r}, {self.message!r})"
