"""Client control message parsing/validation."""

from __future__ import annotations

import json

from relay.state import ToggleListen, ControlMessage, UnknownControl
from relay.config.websocket import WS_KEY_TYPE, WS_KEY_STATUS, WS_KEY_USER_ID, WS_TYPE_TOGGLE_LISTEN


def _parse_toggle_listen(msg: dict) -> ToggleListen:
    status = msg.get(WS_KEY_STATUS)
    if not isinstance(status, str):
        raise ValueError("toggle-listen missing string 'status'")

    user_id = msg.get(WS_KEY_USER_ID)
    toggle = ToggleListen(status=status, user_id=user_id if isinstance(user_id, str) and user_id else None)
    if toggle.listening and toggle.user_id is None:
        raise ValueError("toggle-listen that starts listening requires a non-empty string 'userId'")
    return toggle


def parse_control_message(raw: str) -> ControlMessage:
    try:
        msg = json.loads(raw)
    except Exception as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise ValueError("message must be a JSON object")

    msg_type = msg.get(WS_KEY_TYPE)
    if not isinstance(msg_type, str) or not msg_type.strip():
        raise ValueError("message missing non-empty 'type'")

    msg_type = msg_type.strip()
    if msg_type == WS_TYPE_TOGGLE_LISTEN:
        return _parse_toggle_listen(msg)
    return UnknownControl(type=msg_type)


__all__ = ["parse_control_message"]
