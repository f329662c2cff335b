"""Logging configuration for the engine, the CLI and the API server."""

from __future__ import annotations

import logging
import sys

# Third-party loggers that drown out engine output at DEBUG
_NOISY = ("uvicorn.access", "multipart")


def setup_logging(level: str = "INFO") -> None:
    """Install a single stdout handler on the root logger."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)-5s] %(name)-32s | %(message)s",
        datefmt="%H:%M:%S",
    ))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _NOISY:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
