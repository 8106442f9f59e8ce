# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

_PAYLOAD = "Test data\n"

# name -> (mark, codec used for the payload)
SAMPLES: dict[str, tuple[bytes, str]] = {
    "no_bom": (b"", "ascii"),
    "utf8_bom": (b"\xef\xbb\xbf", "utf-8"),
    "utf16be_bom": (b"\xfe\xff", "utf-16-be"),
    "utf16le_bom": (b"\xff\xfe", "utf-16-le"),
    "utf32be_bom": (b"\x00\x00\xfe\xff", "utf-32-be"),
    "utf32le_bom": (b"\xff\xfe\x00\x00", "utf-32-le"),
}


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Write one ``<name>.txt`` file per entry in SAMPLES into *tmp_path*."""
    for name, (mark, codec) in SAMPLES.items():
        (tmp_path / f"{name}.txt").write_bytes(mark + _PAYLOAD.encode(codec))
    return tmp_path


class TrackingStream:
    """Binary stream stub recording reads and closes."""

    def __init__(
        self,
        chunks: list[bytes],
        fail_after: int | None = None,
        fail_on_close: bool = False,
    ) -> None:
        self._chunks = list(chunks)
        self._fail_after = fail_after
        self._fail_on_close = fail_on_close
        self.reads = 0
        self.close_count = 0

    def read(self, size: int = -1) -> bytes:
        if self._fail_after is not None and self.reads >= self._fail_after:
            msg = "device not ready"
            raise OSError(msg)
        self.reads += 1
        if not self._chunks:
            return b""
        chunk = self._chunks.pop(0)
        return chunk[:size] if size >= 0 else chunk

    def close(self) -> None:
        self.close_count += 1
        if self._fail_on_close:
            msg = "close failed"
            raise OSError(msg)


@pytest.fixture
def tracking_stream() -> type[TrackingStream]:
    """Return the TrackingStream class for building stream stubs."""
    return TrackingStream
