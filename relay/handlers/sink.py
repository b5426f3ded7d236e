"""Append-only file sink for one connection's raw audio frames."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import BinaryIO

from .recordings import create_stream_file

logger = logging.getLogger(__name__)


class AudioSink:
    """Raw concatenation of every binary frame received on one connection.

    Writes run in a worker thread. Callers must await each write before
    issuing the next one; that is what keeps chunks in arrival order.
    """

    def __init__(self, path: Path, fh: BinaryIO) -> None:
        self._path = path
        self._fh = fh
        self._closed = False
        self.bytes_written = 0

    @classmethod
    async def open(cls, recordings_dir: Path) -> AudioSink:
        path, fh = await asyncio.to_thread(create_stream_file, recordings_dir)
        return cls(path, fh)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    async def write(self, data: bytes) -> bool:
        if self._closed:
            logger.debug("dropping %d bytes for closed sink %s", len(data), self._path.name)
            return False
        if not data:
            return True
        try:
            await asyncio.to_thread(self._fh.write, data)
        except (OSError, ValueError):
            logger.exception("sink write failed: %s", self._path.name)
            return False
        self.bytes_written += len(data)
        return True

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            await asyncio.to_thread(self._flush_and_close)
        except OSError:
            logger.exception("sink close failed: %s", self._path.name)

    def _flush_and_close(self) -> None:
        try:
            self._fh.flush()
        finally:
            self._fh.close()


__all__ = ["AudioSink"]
