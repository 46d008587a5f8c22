"""
Application package initializer.

The project is organised in layers: ``schemas`` holds the entities,
``repositories`` owns their in‑memory storage, ``services`` applies
the domain rules and ``api`` exposes them over versioned routers.
Each layer only talks to the one directly below it.
"""

from .main import app, create_app  # noqa: F401
