"""Recording storage configuration (env-resolved constants only)."""

from __future__ import annotations

import os
from pathlib import Path

_RECORDINGS_DIR_RAW = (os.getenv("RECORDINGS_DIR") or "").strip()
RECORDINGS_DIR: Path = Path(_RECORDINGS_DIR_RAW).expanduser() if _RECORDINGS_DIR_RAW else Path("recordings")

# Browsers stream MediaRecorder output as webm/opus; the relay never inspects it.
RECORDING_EXTENSION = ".webm"

STREAM_FILENAME_PREFIX = "stream"
UPLOAD_FILENAME_PREFIX = "recording"

# Multipart field carrying the uploaded file on POST /upload.
UPLOAD_FIELD_NAME = "audio"

# Attempts at picking a fresh sink name before giving up on exclusive create.
SINK_CREATE_ATTEMPTS = 5

__all__ = [
    "RECORDINGS_DIR",
    "RECORDING_EXTENSION",
    "SINK_CREATE_ATTEMPTS",
    "STREAM_FILENAME_PREFIX",
    "UPLOAD_FIELD_NAME",
    "UPLOAD_FILENAME_PREFIX",
]
