"""Enumerations for bomsniff."""

import enum


class Encoding(enum.Enum):
    """Unicode encodings that announce themselves with a byte order mark.

    Member values are Python codec names, so ``data[bom.length:].decode(
    bom.encoding.value)`` decodes the payload that follows the mark.
    """

    UTF_8 = "utf-8"
    UTF_16_BE = "utf-16-be"
    UTF_16_LE = "utf-16-le"
    UTF_32_BE = "utf-32-be"
    UTF_32_LE = "utf-32-le"
