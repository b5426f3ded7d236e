"""Recording file naming and on-disk storage helpers."""

from __future__ import annotations

import time
import uuid
import shutil
import logging
from pathlib import Path
from typing import BinaryIO

from relay.config.storage import (
    RECORDING_EXTENSION,
    SINK_CREATE_ATTEMPTS,
    STREAM_FILENAME_PREFIX,
    UPLOAD_FILENAME_PREFIX,
)

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def ensure_recordings_dir(recordings_dir: Path) -> Path:
    recordings_dir.mkdir(parents=True, exist_ok=True)
    return recordings_dir


def stream_filename(now_ms: int | None = None) -> str:
    """Name for a per-connection capture: stream-<epoch-ms>-<128-bit random hex>.webm."""
    ts = _now_ms() if now_ms is None else now_ms
    return f"{STREAM_FILENAME_PREFIX}-{ts}-{uuid.uuid4().hex}{RECORDING_EXTENSION}"


def upload_filename(now_ms: int | None = None, *, attempt: int = 0) -> str:
    ts = _now_ms() if now_ms is None else now_ms
    if attempt:
        return f"{UPLOAD_FILENAME_PREFIX}-{ts}-{attempt}{RECORDING_EXTENSION}"
    return f"{UPLOAD_FILENAME_PREFIX}-{ts}{RECORDING_EXTENSION}"


def create_stream_file(recordings_dir: Path) -> tuple[Path, BinaryIO]:
    """Create a fresh, exclusively-owned stream file and return it open for writing."""
    for _ in range(SINK_CREATE_ATTEMPTS):
        path = recordings_dir / stream_filename()
        try:
            return path, open(path, "xb")
        except FileExistsError:
            logger.warning("stream file name collision: %s", path.name)
    raise FileExistsError(f"could not allocate a unique stream file in {recordings_dir}")


def store_upload(source: BinaryIO, recordings_dir: Path) -> Path:
    """Copy an uploaded file under recordings_dir without overwriting an existing upload."""
    now_ms = _now_ms()
    attempt = 0
    while True:
        path = recordings_dir / upload_filename(now_ms, attempt=attempt)
        try:
            target = open(path, "xb")
        except FileExistsError:
            attempt += 1
            continue
        with target:
            shutil.copyfileobj(source, target)
        return path


__all__ = [
    "create_stream_file",
    "ensure_recordings_dir",
    "store_upload",
    "stream_filename",
    "upload_filename",
]
