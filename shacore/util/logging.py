"""Logging setup utilities."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOGGER_NAME = "shacore"


def configure_logging(*, level: str | int = logging.WARNING, log_path: Path | None = None) -> logging.Logger:
    """Configure the ``shacore`` logger; stdout is reserved for digests."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    stream_handlers = [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]
    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    # sys.stderr may have been swapped (and the old one closed) since the last call
    for handler in stream_handlers:
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(stream=sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_path and os.path.abspath(log_path) not in existing_files:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
