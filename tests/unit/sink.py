from __future__ import annotations

import re
from pathlib import Path

import pytest

from relay.handlers.sink import AudioSink
from relay.handlers.recordings import (
    store_upload,
    stream_filename,
    upload_filename,
    create_stream_file,
    ensure_recordings_dir,
)

STREAM_NAME = re.compile(r"^stream-\d+-[0-9a-f]{32}\.webm$")


def test_stream_filename_format() -> None:
    assert STREAM_NAME.match(stream_filename())
    assert stream_filename(now_ms=123).startswith("stream-123-")


def test_stream_filenames_differ_within_one_millisecond() -> None:
    names = {stream_filename(now_ms=1) for _ in range(1000)}
    assert len(names) == 1000


def test_upload_filename_format() -> None:
    assert upload_filename(now_ms=1700000000000) == "recording-1700000000000.webm"
    assert upload_filename(now_ms=5, attempt=2) == "recording-5-2.webm"


def test_create_stream_file_is_exclusive(tmp_path: Path) -> None:
    path, fh = create_stream_file(ensure_recordings_dir(tmp_path / "rec"))
    with fh:
        assert path.parent == tmp_path / "rec"
        assert STREAM_NAME.match(path.name)


def test_store_upload_never_overwrites(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("relay.handlers.recordings._now_ms", lambda: 42)
    first = tmp_path / "first.bin"
    first.write_bytes(b"one")
    second = tmp_path / "second.bin"
    second.write_bytes(b"two")

    with first.open("rb") as src:
        a = store_upload(src, tmp_path)
    with second.open("rb") as src:
        b = store_upload(src, tmp_path)

    assert a.name == "recording-42.webm"
    assert b.name == "recording-42-1.webm"
    assert a.read_bytes() == b"one"
    assert b.read_bytes() == b"two"


@pytest.mark.asyncio
async def test_sink_is_exact_concatenation_in_order(tmp_path: Path) -> None:
    sink = await AudioSink.open(tmp_path)
    chunks = [b"\x1a\x45\xdf\xa3", b"", b"\x00" * 1024, bytes(range(256)), b"tail"]
    for chunk in chunks:
        assert await sink.write(chunk) is True
    await sink.close()

    assert sink.path.read_bytes() == b"".join(chunks)
    assert sink.bytes_written == sum(len(c) for c in chunks)


@pytest.mark.asyncio
async def test_sink_close_is_idempotent_and_drops_late_writes(tmp_path: Path) -> None:
    sink = await AudioSink.open(tmp_path)
    await sink.write(b"abc")
    await sink.close()
    await sink.close()

    assert sink.closed is True
    assert await sink.write(b"late") is False
    assert sink.path.read_bytes() == b"abc"


@pytest.mark.asyncio
async def test_sink_without_audio_keeps_empty_file(tmp_path: Path) -> None:
    sink = await AudioSink.open(tmp_path)
    await sink.close()
    assert sink.path.exists()
    assert sink.path.stat().st_size == 0


@pytest.mark.asyncio
async def test_sink_write_failure_is_reported_not_raised(tmp_path: Path) -> None:
    class _BrokenFile:
        def write(self, _data: bytes) -> int:
            raise OSError("disk full")

        def flush(self) -> None:
            return None

        def close(self) -> None:
            return None

    sink = AudioSink(tmp_path / "broken.webm", _BrokenFile())
    assert await sink.write(b"abc") is False
    assert sink.bytes_written == 0
    await sink.close()
