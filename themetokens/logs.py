"""Log file setup for build hosts embedding themetokens.

The library itself only emits through module loggers. A build script or
stylesheet host calls ``configure_logging`` once at startup to persist
those records; this is the public entry point for that.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


def configure_logging(log_dir: Path, *, level: int = logging.INFO) -> logging.Logger:
    """Attach a rotating file handler to the ``themetokens`` logger once."""
    logger = logging.getLogger("themetokens")
    if logger.handlers:
        return logger

    logger.setLevel(level)
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "themetokens.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
