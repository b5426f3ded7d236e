"""Per-connection outbound queue with a dedicated sender task."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any

import orjson
from fastapi import WebSocket

from relay.config.websocket import WS_OUTBOUND_QUEUE_MAX, WS_OUTBOUND_DRAIN_TIMEOUT_S

from .errors import safe_send_text

logger = logging.getLogger(__name__)

_CLOSE = object()


class OutboundChannel:
    """Queues text frames for one WebSocket and delivers them in order.

    Enqueueing never waits on the peer. A full queue drops the new frame.
    """

    def __init__(
        self,
        ws: WebSocket,
        *,
        max_pending: int | None = None,
        drain_timeout_s: float | None = None,
    ) -> None:
        self._ws = ws
        self._queue: asyncio.Queue[Any] = asyncio.Queue(
            maxsize=max(1, int(WS_OUTBOUND_QUEUE_MAX if max_pending is None else max_pending))
        )
        self._drain_timeout_s = float(WS_OUTBOUND_DRAIN_TIMEOUT_S if drain_timeout_s is None else drain_timeout_s)
        self._closed = False
        self._task: asyncio.Task | None = None

    @property
    def ws(self) -> WebSocket:
        return self._ws

    def send_text(self, text: str) -> bool:
        if self._closed:
            return False
        try:
            self._queue.put_nowait(text)
        except asyncio.QueueFull:
            logger.warning("outbound queue full; dropping frame for slow peer")
            return False
        return True

    def send_json(self, data: dict[str, Any]) -> bool:
        return self.send_text(orjson.dumps(data).decode("utf-8"))

    def start(self) -> asyncio.Task:
        if self._task is None:
            self._task = asyncio.create_task(self._sender_loop())
        return self._task

    async def join(self) -> None:
        """Wait until every queued frame has been handed to the socket."""
        await self._queue.join()

    async def stop(self) -> None:
        """Deliver what is already queued, bounded by the drain timeout, then stop."""
        self._closed = True
        if self._task is None:
            return
        with contextlib.suppress(asyncio.QueueFull):
            self._queue.put_nowait(_CLOSE)
        done, _ = await asyncio.wait({self._task}, timeout=self._drain_timeout_s)
        if not done:
            logger.debug("outbound drain timed out; dropping %d frame(s)", self._queue.qsize())
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await self._task
        self._task = None

    async def _sender_loop(self) -> None:
        while True:
            item = await self._queue.get()
            try:
                if item is _CLOSE:
                    return
                await safe_send_text(self._ws, item)
            finally:
                self._queue.task_done()


__all__ = ["OutboundChannel"]
