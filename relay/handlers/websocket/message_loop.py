"""WebSocket frame demultiplexer: control text vs. raw audio bytes."""

from __future__ import annotations

import logging

from fastapi import WebSocket, WebSocketDisconnect

from relay.handlers.sink import AudioSink
from relay.state import Frame, AudioFrame, RuntimeDeps, ControlFrame

from .dispatch import dispatch_control
from .parser import parse_control_message

logger = logging.getLogger(__name__)


async def receive_frame(ws: WebSocket) -> Frame | None:
    """Read one ASGI message and classify it.

    Raises WebSocketDisconnect when the peer goes away and ValueError when a
    text frame is not a valid control message.
    """
    message = await ws.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(code=message.get("code", 1000), reason=message.get("reason"))

    text = message.get("text")
    if text is not None:
        return ControlFrame(parse_control_message(text))
    data = message.get("bytes")
    if data is not None:
        return AudioFrame(data)
    return None


async def run_message_loop(ws: WebSocket, sink: AudioSink, runtime_deps: RuntimeDeps) -> int:
    """Route frames until the connection closes; returns the number of frames handled."""
    frames = 0
    try:
        while True:
            try:
                frame = await receive_frame(ws)
            except ValueError as exc:
                logger.warning("discarding malformed control frame: %s", exc)
                continue
            if frame is None:
                continue

            frames += 1
            if isinstance(frame, AudioFrame):
                await sink.write(frame.data)
                continue
            await dispatch_control(runtime_deps, frame.message)
    except WebSocketDisconnect as exc:
        logger.debug("WebSocket disconnected code=%s", exc.code)
    return frames


__all__ = ["receive_frame", "run_message_loop"]
