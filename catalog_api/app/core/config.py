"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
application starts without any environment at all.  Tests build their
own ``Settings`` instance and pass it to ``create_app`` instead of
patching the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the
    # console handler configured by ``setup_logging``.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Populate every repository with the demo records on startup.
    # Disabled by default so that a fresh application starts empty and
    # identifiers begin at 1.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
