"""Load runtime settings.

Configuration values are resolved from the environment in `relay/config/*` and
exposed here as structured dataclasses for the rest of the server.
"""

from __future__ import annotations

from relay.config.storage import RECORDINGS_DIR
from relay.config.websocket import WS_ENDPOINT_PATH
from relay.config.limits import MAX_CONCURRENT_CONNECTIONS
from relay.config.server import HOST, PORT, PUBLIC_DIR
from relay.state.settings import AppSettings, LimitsSettings, ServerSettings, StorageSettings


def load_settings() -> AppSettings:
    return AppSettings(
        server=ServerSettings(
            host=HOST,
            port=PORT,
            public_dir=PUBLIC_DIR,
            ws_endpoint_path=WS_ENDPOINT_PATH,
        ),
        storage=StorageSettings(recordings_dir=RECORDINGS_DIR),
        limits=LimitsSettings(
            max_concurrent_connections=MAX_CONCURRENT_CONNECTIONS,
        ),
    )


__all__ = ["load_settings"]
