"""
Endpoint modules for API v1, one per entity type.

Each module defines an ``APIRouter`` named ``router`` that is mounted by
``api/v1/router.py``.
"""
