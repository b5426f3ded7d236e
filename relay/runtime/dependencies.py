"""Runtime dependency construction (listening state + admission control)."""

from __future__ import annotations

import logging

from relay.state import RuntimeDeps
from relay.state.settings import AppSettings
from relay.handlers.connections import ConnectionHub
from relay.handlers.listening import ListeningStateManager
from relay.handlers.recordings import ensure_recordings_dir

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()

    recordings_dir = ensure_recordings_dir(settings.storage.recordings_dir)
    logger.info("recordings: %s", recordings_dir.resolve())

    connections = ConnectionHub(max_connections=settings.limits.max_concurrent_connections)
    listening = ListeningStateManager(connections)

    return RuntimeDeps(
        connections=connections,
        listening=listening,
        settings=settings,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
