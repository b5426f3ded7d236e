"""Configuration module exports (env-resolved constants only)."""

from .limits import (
    MAX_CONCURRENT_CONNECTIONS,
)
from .storage import (
    RECORDINGS_DIR,
)

__all__ = [
    "MAX_CONCURRENT_CONNECTIONS",
    "RECORDINGS_DIR",
]
