"""Admission control configuration (env-resolved constants only)."""

from __future__ import annotations

import os

_MAX_CONCURRENT_CONNECTIONS_RAW = (os.getenv("MAX_CONCURRENT_CONNECTIONS") or "").strip()
try:
    MAX_CONCURRENT_CONNECTIONS: int = int(_MAX_CONCURRENT_CONNECTIONS_RAW) if _MAX_CONCURRENT_CONNECTIONS_RAW else 100
except Exception:
    MAX_CONCURRENT_CONNECTIONS = 100
MAX_CONCURRENT_CONNECTIONS = max(1, int(MAX_CONCURRENT_CONNECTIONS))

__all__ = [
    "MAX_CONCURRENT_CONNECTIONS",
]
