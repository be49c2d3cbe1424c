"""Adapters between the accepted input representations and raw bytes.

Every numeral routine works on UTF-8 bytes. Callers may hand in ``str``,
``bytes`` or ``bytearray``; results go back out in the same representation.
"""

from __future__ import annotations

from typing import TypeVar

Numeral = TypeVar("Numeral", str, bytes, bytearray)


def as_bytes(decimal: str | bytes | bytearray) -> bytes:
    """Return the UTF-8 byte content of *decimal*.

    Lone surrogates are passed through as bytes the scanner rejects.
    """
    if isinstance(decimal, str):
        return decimal.encode("utf-8", errors="surrogatepass")
    if isinstance(decimal, (bytes, bytearray)):
        return bytes(decimal)
    raise TypeError(
        f"Expected str, bytes or bytearray, got {type(decimal).__name__}"
    )


def restore(data: bytes, like: Numeral) -> Numeral:
    """Convert *data* back to the representation of *like*."""
    if isinstance(like, str):
        return data.decode("utf-8", errors="surrogatepass")
    if isinstance(like, bytearray):
        return bytearray(data)
    return data
