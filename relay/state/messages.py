"""Parsed client control messages (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass

from relay.config.websocket import WS_STATUS_LISTENING


@dataclass(frozen=True, slots=True)
class ToggleListen:
    status: str
    user_id: str | None = None

    @property
    def listening(self) -> bool:
        return self.status == WS_STATUS_LISTENING


@dataclass(frozen=True, slots=True)
class UnknownControl:
    """A well-formed message whose type this server does not handle."""

    type: str


ControlMessage = ToggleListen | UnknownControl

__all__ = ["ControlMessage", "ToggleListen", "UnknownControl"]
