"""Standard Python logging configuration."""
from __future__ import annotations

import logging
import sys

from stats_analyzer import config

LEVEL = config.LOG_LEVEL  # level name, e.g. "INFO"

def setup_logging() -> None:
    """Configure standard Python logging.

    Call **exactly once** at app startup. Later calls are no-ops.
    """
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return

    # Gunicorn-like brackets so service and server lines read the same
    formatter = logging.Formatter(
        fmt='[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %z'
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(LEVEL)

    # uvicorn installs its own handlers; route everything through root instead
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(LEVEL)

    setup_logging._configured = True  # type: ignore[attr-defined]
