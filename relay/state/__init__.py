from .runtime import RuntimeDeps
from .settings import AppSettings
from .listening import ListeningState
from .frames import Frame, AudioFrame, ControlFrame
from .messages import ToggleListen, ControlMessage, UnknownControl

__all__ = [
    "AppSettings",
    "AudioFrame",
    "ControlFrame",
    "ControlMessage",
    "Frame",
    "ListeningState",
    "RuntimeDeps",
    "ToggleListen",
    "UnknownControl",
]
