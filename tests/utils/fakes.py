"""In-memory WebSocket double for exercising handlers without a server."""

from __future__ import annotations

import asyncio
from typing import Any

import orjson
from starlette.websockets import WebSocketState


class FakeWebSocket:
    def __init__(self, *, fail_sends: bool = False) -> None:
        self.application_state = WebSocketState.CONNECTING
        self.client_state = WebSocketState.CONNECTED
        self.fail_sends = fail_sends
        self.sent: list[str] = []
        self.close_code: int | None = None
        self.close_reason: str | None = None
        self._inbound: asyncio.Queue[dict[str, Any]] = asyncio.Queue()

    # Inbound scripting

    def push_text(self, text: str) -> None:
        self._inbound.put_nowait({"type": "websocket.receive", "text": text})

    def push_json(self, data: dict[str, Any]) -> None:
        self.push_text(orjson.dumps(data).decode("utf-8"))

    def push_bytes(self, data: bytes) -> None:
        self._inbound.put_nowait({"type": "websocket.receive", "bytes": data})

    def push_disconnect(self, code: int = 1000) -> None:
        self._inbound.put_nowait({"type": "websocket.disconnect", "code": code})

    # ASGI-facing surface used by the handlers

    async def accept(self) -> None:
        self.application_state = WebSocketState.CONNECTED

    async def receive(self) -> dict[str, Any]:
        message = await self._inbound.get()
        if message["type"] == "websocket.disconnect":
            self.client_state = WebSocketState.DISCONNECTED
        return message

    async def send_text(self, text: str) -> None:
        if self.fail_sends:
            raise RuntimeError("send failed")
        if self.application_state != WebSocketState.CONNECTED:
            raise RuntimeError("websocket is not connected")
        self.sent.append(text)

    async def close(self, *, code: int = 1000, reason: str | None = None) -> None:
        self.application_state = WebSocketState.DISCONNECTED
        self.close_code = code
        self.close_reason = reason or ""

    # Assertions

    def sent_json(self) -> list[dict[str, Any]]:
        return [orjson.loads(text) for text in self.sent]


class StalledWebSocket(FakeWebSocket):
    """A peer that stopped reading: every send blocks forever."""

    def __init__(self) -> None:
        super().__init__()
        self.send_attempts = 0
        self._never = asyncio.Event()

    async def send_text(self, text: str) -> None:
        self.send_attempts += 1
        await self._never.wait()


__all__ = ["FakeWebSocket", "StalledWebSocket"]
