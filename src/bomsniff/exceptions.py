"""Exceptions raised while fetching the bytes to examine.

Detection itself never fails; only opening or reading a source can.
"""

from __future__ import annotations


class BOMError(Exception):
    """Base class for errors raised by bomsniff."""


class UnsupportedSourceError(BOMError, ValueError):
    """The source cannot be turned into a readable byte stream at all."""

    def __init__(self, source: object) -> None:
        self.source = source
        msg = f"unsupported source: {source!r}"
        super().__init__(msg)


class ReadFailureError(BOMError, OSError):
    """Opening or reading the byte stream failed.

    The original exception is available as :attr:`error` and is also
    chained as ``__cause__`` when raised by bomsniff.
    """

    def __init__(self, error: BaseException, source: object = None) -> None:
        self.error = error
        self.source = source
        if source is None:
            msg = f"failed to read stream: {error}"
        else:
            msg = f"failed to read {source!r}: {error}"
        super().__init__(msg)
