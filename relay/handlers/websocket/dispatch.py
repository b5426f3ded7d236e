"""Dispatch handlers for parsed control messages."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable, Awaitable

from relay.state import RuntimeDeps, ToggleListen, ControlMessage, UnknownControl

logger = logging.getLogger(__name__)

HandlerFn = Callable[[RuntimeDeps, Any], Awaitable[None]]


async def _handle_toggle_listen(runtime_deps: RuntimeDeps, message: ToggleListen) -> None:
    await runtime_deps.listening.toggle(message)


async def _handle_unknown(_runtime_deps: RuntimeDeps, message: UnknownControl) -> None:
    # Forward-compatible: newer clients may send types this server predates.
    logger.debug("ignoring control message type=%s", message.type)


HANDLERS: dict[type, HandlerFn] = {
    ToggleListen: _handle_toggle_listen,
    UnknownControl: _handle_unknown,
}


async def dispatch_control(runtime_deps: RuntimeDeps, message: ControlMessage) -> None:
    await HANDLERS[type(message)](runtime_deps, message)


__all__ = ["HANDLERS", "dispatch_control"]
