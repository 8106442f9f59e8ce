"""Byte order mark (BOM) detection for files, streams and buffers."""

from __future__ import annotations

from bomsniff._utils import MAX_BOM_BYTES
from bomsniff.detector import BOM, detect, mark_length
from bomsniff.enums import Encoding
from bomsniff.exceptions import BOMError, ReadFailureError, UnsupportedSourceError
from bomsniff.source import detect_bytes, detect_file, detect_stream

__version__ = "1.0.0"
__all__ = [
    "BOM",
    "MAX_BOM_BYTES",
    "BOMError",
    "Encoding",
    "ReadFailureError",
    "UnsupportedSourceError",
    "detect",
    "detect_bytes",
    "detect_file",
    "detect_stream",
    "mark_length",
]
