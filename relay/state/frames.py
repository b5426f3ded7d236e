"""Inbound WebSocket frames, classified at the transport boundary."""

from __future__ import annotations

from dataclasses import dataclass

from .messages import ControlMessage


@dataclass(frozen=True, slots=True)
class ControlFrame:
    message: ControlMessage


@dataclass(frozen=True, slots=True)
class AudioFrame:
    data: bytes


Frame = ControlFrame | AudioFrame

__all__ = ["AudioFrame", "ControlFrame", "Frame"]
