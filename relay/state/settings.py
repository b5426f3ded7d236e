"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from pathlib import Path
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    public_dir: Path
    ws_endpoint_path: str


@dataclass(frozen=True, slots=True)
class StorageSettings:
    recordings_dir: Path


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int


@dataclass(frozen=True, slots=True)
class AppSettings:
    server: ServerSettings
    storage: StorageSettings
    limits: LimitsSettings


__all__ = [
    "AppSettings",
    "LimitsSettings",
    "ServerSettings",
    "StorageSettings",
]
