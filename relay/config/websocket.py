"""WebSocket protocol configuration and constants."""

from __future__ import annotations

import os

# The upgrade shares the HTTP port; browsers connect to ws://host:port/.
WS_ENDPOINT_PATH = (os.getenv("WS_ENDPOINT_PATH") or "").strip() or "/"

# Message keys
WS_KEY_TYPE = "type"
WS_KEY_STATUS = "status"
WS_KEY_USER_ID = "userId"
WS_KEY_ERROR = "error"

# Control message types
WS_TYPE_TOGGLE_LISTEN = "toggle-listen"

# Status values carried in state pushes
WS_STATUS_LISTENING = "Listening..."
WS_STATUS_IDLE = ""

# Per-connection outbound delivery. Pushes are queued and sent by one task per
# connection, so a peer that stops reading only backs up its own queue.
WS_OUTBOUND_QUEUE_MAX = max(1, int(os.getenv("WS_OUTBOUND_QUEUE_MAX", "64")))
WS_OUTBOUND_DRAIN_TIMEOUT_S = max(0.0, float(os.getenv("WS_OUTBOUND_DRAIN_TIMEOUT_S", "1")))

# Close codes
WS_CLOSE_INTERNAL_ERROR_CODE = 1011
WS_CLOSE_BUSY_CODE = 4002

__all__ = [
    "WS_ENDPOINT_PATH",
    "WS_KEY_TYPE",
    "WS_KEY_STATUS",
    "WS_KEY_USER_ID",
    "WS_KEY_ERROR",
    "WS_TYPE_TOGGLE_LISTEN",
    "WS_STATUS_LISTENING",
    "WS_STATUS_IDLE",
    "WS_OUTBOUND_QUEUE_MAX",
    "WS_OUTBOUND_DRAIN_TIMEOUT_S",
    "WS_CLOSE_INTERNAL_ERROR_CODE",
    "WS_CLOSE_BUSY_CODE",
]
