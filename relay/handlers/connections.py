"""WebSocket connection admission control and live-connection registry."""

from __future__ import annotations

import asyncio
from typing import Any

from .websocket.outbound import OutboundChannel


class ConnectionHub:
    def __init__(
        self,
        *,
        max_connections: int,
        outbound_queue_max: int | None = None,
        outbound_drain_timeout_s: float | None = None,
    ) -> None:
        self._max = max(1, int(max_connections))
        self._outbound_queue_max = outbound_queue_max
        self._outbound_drain_timeout_s = outbound_drain_timeout_s
        self._lock = asyncio.Lock()
        self._active: dict[int, OutboundChannel] = {}

    async def connect(self, ws: Any) -> OutboundChannel | None:
        """Attempt to admit a websocket connection (without accepting it).

        Returns the connection's outbound channel, or None when at capacity.
        """
        key = id(ws)
        async with self._lock:
            channel = self._active.get(key)
            if channel is not None:
                return channel
            if len(self._active) >= self._max:
                return None
            channel = OutboundChannel(
                ws,
                max_pending=self._outbound_queue_max,
                drain_timeout_s=self._outbound_drain_timeout_s,
            )
            self._active[key] = channel
            return channel

    async def disconnect(self, ws: Any) -> None:
        key = id(ws)
        async with self._lock:
            self._active.pop(key, None)

    def snapshot(self) -> list[OutboundChannel]:
        """Copy of the live channels, safe to iterate while others come and go."""
        return list(self._active.values())

    def get_connection_count(self) -> int:
        return len(self._active)


__all__ = ["ConnectionHub"]
