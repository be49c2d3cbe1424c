"""Sign and surrounding-space extraction for raw numerals."""

from __future__ import annotations

from decimal_formats.utils.byteseq import Numeral, as_bytes, restore


def split_sign_bytes(decimal: bytes) -> tuple[bytes, bytes]:
    """Byte-level worker behind :func:`split_sign`."""
    magnitude = decimal.strip(b" ")
    if magnitude.startswith(b"-"):
        return b"-", magnitude[1:].lstrip(b" ")
    if magnitude.startswith(b"+"):
        return b"", magnitude[1:].lstrip(b" ")
    return b"", magnitude


def split_sign(decimal: Numeral) -> tuple[Numeral, Numeral]:
    """Split *decimal* into its sign and its magnitude.

    The sign is ``"-"`` for negative numbers and empty otherwise; an explicit
    ``+`` is dropped. ASCII spaces around the numeral and between the sign and
    the digits are removed. Both parts come back in the input's type.

    Examples:
        split_sign("-123")        -> ("-", "123")
        split_sign("+ 123")       -> ("", "123")
        split_sign("  -   123  ") -> ("-", "123")
        split_sign("   ")         -> ("", "")
    """
    sign, magnitude = split_sign_bytes(as_bytes(decimal))
    return restore(sign, decimal), restore(magnitude, decimal)
