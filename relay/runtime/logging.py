"""Logging initialization."""

from __future__ import annotations

import logging

from relay.config.logging import LOG_LEVEL, LOG_FORMAT


def configure_logging() -> None:
    # Per-request access lines drown out connection lifecycle logs.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


__all__ = ["configure_logging"]
