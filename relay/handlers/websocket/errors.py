"""Failure-tolerant send helpers for WebSocket state pushes."""

from __future__ import annotations

import logging
from typing import Any

import orjson
from fastapi import WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from relay.config.websocket import WS_KEY_ERROR

logger = logging.getLogger(__name__)


def build_error_payload(message: str) -> dict[str, Any]:
    return {WS_KEY_ERROR: message}


def is_open(ws: WebSocket) -> bool:
    return (
        getattr(ws, "application_state", None) == WebSocketState.CONNECTED
        and getattr(ws, "client_state", None) == WebSocketState.CONNECTED
    )


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def safe_send_json(ws: WebSocket, data: dict[str, Any]) -> bool:
    return await safe_send_text(ws, orjson.dumps(data).decode("utf-8"))


async def reject_connection(
    ws: WebSocket,
    *,
    message: str,
    close_code: int,
) -> None:
    # Accept so we can send a structured error, then close.
    try:
        await ws.accept()
    except Exception:
        # If accept fails, nothing else to do.
        return
    await safe_send_json(ws, build_error_payload(message))
    try:
        await ws.close(code=close_code, reason=message)
    except Exception:
        return


__all__ = [
    "build_error_payload",
    "is_open",
    "safe_send_json",
    "safe_send_text",
    "reject_connection",
]
