"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib

from fastapi import WebSocket

from relay.state import RuntimeDeps
from relay.handlers.sink import AudioSink
from relay.config.websocket import WS_CLOSE_BUSY_CODE, WS_CLOSE_INTERNAL_ERROR_CODE

from .errors import reject_connection
from .outbound import OutboundChannel
from .message_loop import run_message_loop

logger = logging.getLogger(__name__)


async def _prepare_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> OutboundChannel | None:
    channel = await runtime_deps.connections.connect(ws)
    if channel is None:
        await reject_connection(
            ws,
            message="Server cannot accept new connections. Please try again later.",
            close_code=WS_CLOSE_BUSY_CODE,
        )
        return None

    try:
        await ws.accept()
    except Exception:
        with contextlib.suppress(Exception):
            await runtime_deps.connections.disconnect(ws)
        raise
    return channel


async def _open_sink(ws: WebSocket, runtime_deps: RuntimeDeps) -> AudioSink | None:
    try:
        return await AudioSink.open(runtime_deps.settings.storage.recordings_dir)
    except OSError:
        logger.exception("failed to allocate audio sink")
        with contextlib.suppress(Exception):
            await ws.close(code=WS_CLOSE_INTERNAL_ERROR_CODE, reason="recording unavailable")
        return None


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    channel: OutboundChannel | None = None
    sink: AudioSink | None = None
    frames = 0
    try:
        channel = await _prepare_connection(ws, runtime_deps)
        if channel is None:
            return
        channel.start()

        sink = await _open_sink(ws, runtime_deps)
        if sink is None:
            return

        logger.info(
            "WebSocket connection accepted sink=%s. Active: %s",
            sink.path.name,
            runtime_deps.connections.get_connection_count(),
        )
        await runtime_deps.listening.send_snapshot(channel)
        frames = await run_message_loop(ws, sink, runtime_deps)
    finally:
        if sink is not None:
            with contextlib.suppress(Exception):
                await sink.close()

        if channel is not None:
            with contextlib.suppress(Exception):
                await runtime_deps.connections.disconnect(ws)
            with contextlib.suppress(Exception):
                await channel.stop()
            logger.info(
                "WebSocket connection closed sink=%s frames=%d bytes=%s. Active: %s",
                sink.path.name if sink is not None else None,
                frames,
                sink.bytes_written if sink is not None else 0,
                runtime_deps.connections.get_connection_count(),
            )


__all__ = ["handle_websocket_connection"]
