"""
Logging setup for the Catalog API.

``setup_logging`` can be called more than once, e.g. by every
``create_app`` in a test session or after a host such as uvicorn or
pytest has already installed its own handlers.  Each call:

* sets the level of the ``catalog_api`` logger, leaving the host's
  root level alone;
* adds a console handler to the root logger only if the root logger
  has no handler yet;
* attaches a file handler for ``logfile`` unless one writing to the
  same path is already installed.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "catalog_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _formatter() -> logging.Formatter:
    return logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler_for(logger: logging.Logger, path: Path) -> Optional[logging.FileHandler]:
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path:
            return handler
    return None


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the application.

    Parameters
    ----------
    level : str
        Level name for the ``catalog_api`` loggers (e.g. ``"DEBUG"``).
        Case insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives every record of the application.
        Its parent directory must exist.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    root = logging.getLogger()
    if not root.handlers:
        console = logging.StreamHandler()
        console.setFormatter(_formatter())
        root.addHandler(console)

    if logfile:
        path = Path(logfile).resolve()
        if _file_handler_for(package_logger, path) is None:
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(_formatter())
            package_logger.addHandler(file_handler)
