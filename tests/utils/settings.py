from __future__ import annotations

from pathlib import Path

from relay.state.settings import AppSettings, LimitsSettings, ServerSettings, StorageSettings


def make_settings(root: Path, *, max_connections: int = 100, ws_endpoint_path: str = "/") -> AppSettings:
    return AppSettings(
        server=ServerSettings(
            host="127.0.0.1",
            port=0,
            public_dir=root / "public",
            ws_endpoint_path=ws_endpoint_path,
        ),
        storage=StorageSettings(recordings_dir=root / "recordings"),
        limits=LimitsSettings(max_concurrent_connections=max_connections),
    )


__all__ = ["make_settings"]
