"""
Repository layer.

Repositories own the authoritative in‑memory store for one entity
type, assign identity on first save and answer lookup and listing
queries.  They return snapshots or ``None`` and never raise domain
errors.
"""

from .indexed import IndexedRepository
from .memory import InMemoryRepository

__all__ = ["InMemoryRepository", "IndexedRepository"]
