"""Byte order mark detection over the first four bytes of a stream."""

from __future__ import annotations

import dataclasses

from bomsniff._utils import MAX_BOM_BYTES, MIN_BOM_BYTES, _validate_prefix
from bomsniff.enums import Encoding

_MARKS: dict[Encoding, bytes] = {
    Encoding.UTF_8: b"\xef\xbb\xbf",
    Encoding.UTF_16_BE: b"\xfe\xff",
    Encoding.UTF_16_LE: b"\xff\xfe",
    Encoding.UTF_32_BE: b"\x00\x00\xfe\xff",
    Encoding.UTF_32_LE: b"\xff\xfe\x00\x00",
}

# UTF-32-LE must be tried before UTF-16-LE: its mark starts with FF FE too.
_RULES: tuple[Encoding, ...] = (
    Encoding.UTF_32_BE,
    Encoding.UTF_32_LE,
    Encoding.UTF_16_BE,
    Encoding.UTF_16_LE,
    Encoding.UTF_8,
)


def mark_length(encoding: object) -> int | None:
    """Return the length in bytes of the BOM for *encoding*.

    :param encoding: An :class:`~bomsniff.enums.Encoding` member.
    :returns: 3 for UTF-8, 2 for UTF-16, 4 for UTF-32, or ``None`` for
        anything that is not an :class:`~bomsniff.enums.Encoding`.
    """
    if not isinstance(encoding, Encoding):
        return None
    return len(_MARKS[encoding])


@dataclasses.dataclass(frozen=True, slots=True)
class BOM:
    """A byte order mark found at the start of a stream.

    Only the encoding is stored; the mark length and bytes are derived
    from it.
    """

    encoding: Encoding

    def __post_init__(self) -> None:
        if not isinstance(self.encoding, Encoding):
            msg = f"encoding must be an Encoding member, got {self.encoding!r}"
            raise TypeError(msg)

    @property
    def length(self) -> int:
        """Number of leading bytes to skip before decoding the payload."""
        return len(_MARKS[self.encoding])

    @property
    def mark(self) -> bytes:
        """The literal mark bytes."""
        return _MARKS[self.encoding]

    def to_dict(self) -> dict[str, str | int]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'encoding'`` (codec name) and ``'length'`` keys.
        """
        return {"encoding": self.encoding.value, "length": self.length}


def detect(prefix: bytes | bytearray | memoryview) -> BOM | None:
    """Check for a BOM at the start of *prefix*.

    Bytes past the fourth are ignored.  Bytes missing from a short prefix
    never satisfy a rule, so a bare ``FF FE`` is UTF-16-LE.

    :param prefix: The first bytes of a stream.
    :returns: The detected :class:`BOM`, or ``None`` if there is none.
    :raises TypeError: If *prefix* is not bytes-like.
    """
    _validate_prefix(prefix)
    data = bytes(prefix[:MAX_BOM_BYTES])
    if len(data) < MIN_BOM_BYTES:
        return None
    for encoding in _RULES:
        if data.startswith(_MARKS[encoding]):
            return BOM(encoding)
    return None
