"""Shared helpers for unit tests.

- fakes.py: in-memory WebSocket double speaking the ASGI receive protocol
- settings.py: AppSettings rooted in a temporary directory
"""

from __future__ import annotations

from .fakes import FakeWebSocket, StalledWebSocket
from .settings import make_settings

__all__ = ["FakeWebSocket", "StalledWebSocket", "make_settings"]
