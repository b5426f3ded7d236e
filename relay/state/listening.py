"""Process-wide listening state snapshot (dataclasses only)."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass

from relay.config.websocket import WS_KEY_STATUS, WS_STATUS_IDLE, WS_KEY_USER_ID, WS_STATUS_LISTENING


@dataclass(frozen=True, slots=True)
class ListeningState:
    """Who is listening right now.

    Instances are immutable; the manager swaps in a new one per toggle, so a
    reader can never observe a listener id without the listening flag.
    """

    is_listening: bool = False
    listener_id: str | None = None

    def __post_init__(self) -> None:
        if self.is_listening != (self.listener_id is not None):
            raise ValueError("listener_id must be set if and only if is_listening is true")

    @property
    def status(self) -> str:
        return WS_STATUS_LISTENING if self.is_listening else WS_STATUS_IDLE

    def to_message(self) -> dict[str, Any]:
        return {WS_KEY_STATUS: self.status, WS_KEY_USER_ID: self.listener_id}


__all__ = ["ListeningState"]
