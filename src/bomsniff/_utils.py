"""Internal shared utilities for bomsniff."""

from __future__ import annotations

#: Maximum number of leading bytes examined during detection.  The longest
#: marks (UTF-32) are four bytes.
MAX_BOM_BYTES: int = 4

#: Shortest mark (UTF-16) length.  Shorter prefixes never match.
MIN_BOM_BYTES: int = 2


def _validate_prefix(prefix: object) -> None:
    """Raise TypeError if *prefix* is not a bytes-like object."""
    if not isinstance(prefix, (bytes, bytearray, memoryview)):
        msg = f"expected a bytes-like object, got {type(prefix).__name__}"
        raise TypeError(msg)
