"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from relay.state.settings import AppSettings
    from relay.handlers.connections import ConnectionHub
    from relay.handlers.listening import ListeningStateManager


@dataclass(slots=True)
class RuntimeDeps:
    connections: ConnectionHub
    listening: ListeningStateManager
    settings: AppSettings


__all__ = ["RuntimeDeps"]
