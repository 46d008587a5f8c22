"""
Main entrypoint for the Catalog API.

This module assembles the FastAPI application: it sets up logging,
builds the per‑application service container, registers the error
handlers and includes the versioned routers.  ``create_app`` builds
and configures the app, which is then instantiated at module import
time as ``app``, e.g. for an ASGI server::

    uvicorn catalog_api.app.main:app

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.errors import register_error_handlers
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.container import build_container
from .core.logging_config import setup_logging
from .core.sample_data import seed_sample_data

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use instead of the one read from the
        environment.  Tests pass their own instance.

    Returns
    -------
    FastAPI
        A configured application with its own, empty (or seeded)
        repositories.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the steps below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.state.catalog = build_container()
    if settings.seed_sample_data:
        seed_sample_data(app.state.catalog)

    register_error_handlers(app)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
