"""Single source of truth for who is listening, with broadcast fan-out."""

from __future__ import annotations

import asyncio
import logging

import orjson

from relay.state import ToggleListen, ListeningState

from .connections import ConnectionHub
from .websocket.errors import is_open
from .websocket.outbound import OutboundChannel

logger = logging.getLogger(__name__)


class ListeningStateManager:
    """Owns the process-wide ListeningState.

    Every read that is pushed to a client and every toggle (mutate plus
    enqueue to all peers) runs under one lock, so a client that connects after
    a toggle completed always sees that toggle and never an older value.
    Delivery happens on each connection's outbound channel, outside the lock.
    """

    def __init__(self, connections: ConnectionHub) -> None:
        self._connections = connections
        self._state = ListeningState()
        self._lock = asyncio.Lock()

    @property
    def state(self) -> ListeningState:
        return self._state

    async def send_snapshot(self, channel: OutboundChannel) -> bool:
        async with self._lock:
            return channel.send_json(self._state.to_message())

    async def toggle(self, message: ToggleListen) -> ListeningState:
        async with self._lock:
            listening = message.listening
            state = ListeningState(
                is_listening=listening,
                listener_id=message.user_id if listening else None,
            )
            # Last write wins.
            self._state = state
            queued, targets = self._broadcast(state)
        logger.info(
            "listening: is_listening=%s listener_id=%s queued=%d/%d",
            state.is_listening,
            state.listener_id,
            queued,
            targets,
        )
        return state

    def _broadcast(self, state: ListeningState) -> tuple[int, int]:
        text = orjson.dumps(state.to_message()).decode("utf-8")
        targets = [channel for channel in self._connections.snapshot() if is_open(channel.ws)]
        queued = sum(1 for channel in targets if channel.send_text(text))
        return queued, len(targets)


__all__ = ["ListeningStateManager"]
