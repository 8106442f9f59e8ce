"""Fetch the leading bytes of a buffer, stream or file and detect its BOM."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit
from urllib.request import url2pathname

from bomsniff._utils import MAX_BOM_BYTES, MIN_BOM_BYTES, _validate_prefix
from bomsniff.detector import BOM, detect
from bomsniff.exceptions import BOMError, ReadFailureError, UnsupportedSourceError

logger = logging.getLogger(__name__)


def detect_bytes(buffer: bytes | bytearray | memoryview) -> BOM | None:
    """Detect the BOM at the start of an in-memory buffer.

    Buffers shorter than two bytes yield ``None`` rather than an error.
    """
    _validate_prefix(buffer)
    if len(buffer) < MIN_BOM_BYTES:
        return None
    return detect(buffer)


def detect_stream(opener: Callable[[], Any]) -> BOM | None:
    """Open a binary stream, read up to four bytes and detect its BOM.

    The stream returned by *opener* is closed on every exit path before
    detection runs.

    :param opener: Zero-argument callable returning an object with a
        ``read(n)`` method returning bytes, e.g.
        ``lambda: open(path, "rb")``.
    :returns: The detected :class:`~bomsniff.detector.BOM`, or ``None`` when
        there is no mark or fewer than two bytes could be read.
    :raises UnsupportedSourceError: If *opener* does not produce a binary
        stream.
    :raises ReadFailureError: If opening or reading the stream fails.
    """
    return _detect_from_opener(opener, None)


def detect_file(locator: str | os.PathLike[str]) -> BOM | None:
    """Detect the BOM of a file given as a path or a ``file://`` URL.

    :param locator: Filesystem path or ``file://`` URL.
    :raises UnsupportedSourceError: For any other URL scheme or a locator
        that is neither a string nor a path.
    :raises ReadFailureError: If the file cannot be opened or read.
    """
    path = _resolve_path(locator)
    logger.debug("Opening %s", path)
    return _detect_from_opener(lambda: path.open("rb"), locator)


def _resolve_path(locator: object) -> Path:
    if isinstance(locator, os.PathLike):
        return Path(locator)
    if not isinstance(locator, str):
        raise UnsupportedSourceError(locator)
    parts = urlsplit(locator)
    # Only "scheme://..." and "file:..." are URLs; "notes:v2.txt" and
    # Windows drives are paths.
    is_file_url = parts.scheme.lower() == "file"
    if len(parts.scheme) <= 1 or not (is_file_url or "://" in locator):
        return Path(locator)
    if not is_file_url or parts.netloc not in ("", "localhost"):
        raise UnsupportedSourceError(locator)
    return Path(url2pathname(parts.path))


def _detect_from_opener(opener: Callable[[], Any], source: object) -> BOM | None:
    label = opener if source is None else source
    try:
        stream = opener()
    except BOMError:
        raise
    except OSError as err:
        logger.debug("Could not open %r: %s", label, err)
        raise ReadFailureError(err, source) from err
    except (TypeError, ValueError) as err:
        raise UnsupportedSourceError(label) from err
    if stream is None:
        raise UnsupportedSourceError(label)

    try:
        if not callable(getattr(stream, "read", None)):
            raise UnsupportedSourceError(label)
        prefix = _read_prefix(stream, source, label)
    except BaseException:
        # The pending error wins over a failing close().
        _close_quietly(stream, label)
        raise
    _close(stream, source)

    logger.debug("Read %d byte(s) from %r", len(prefix), label)
    result = detect(prefix)
    if result is not None:
        logger.debug("Detected %s BOM in %r", result.encoding.value, label)
    return result


def _read_prefix(stream: Any, source: object, label: object) -> bytes:
    """Read up to MAX_BOM_BYTES, looping over short reads until EOF."""
    buf = bytearray()
    while len(buf) < MAX_BOM_BYTES:
        try:
            chunk = stream.read(MAX_BOM_BYTES - len(buf))
        except (OSError, ValueError) as err:
            # ValueError: I/O operation on a closed file
            logger.debug("Read from %r failed: %s", label, err)
            raise ReadFailureError(err, source) from err
        if not chunk:
            # EOF, or no data yet on a non-blocking stream
            break
        if isinstance(chunk, str):
            raise UnsupportedSourceError(label)
        buf.extend(chunk)
    return bytes(buf)


def _close(stream: Any, source: object) -> None:
    close = getattr(stream, "close", None)
    if close is None:
        return
    try:
        close()
    except OSError as err:
        raise ReadFailureError(err, source) from err


def _close_quietly(stream: Any, label: object) -> None:
    close = getattr(stream, "close", None)
    if close is None:
        return
    try:
        close()
    except OSError as err:
        logger.debug("Ignoring close() failure on %r: %s", label, err)
