"""Canonical-form check for decimal strings."""

from __future__ import annotations

from decimal_formats.utils.byteseq import as_bytes

_MINUS = ord("-")
_DOT = ord(".")
_ZERO = ord("0")
_NINE = ord("9")


def is_normalized(decimal: str | bytes | bytearray) -> bool:
    """Check if *decimal* is already a canonical numeral.

    A canonical numeral:
      - may start with a '-',
      - continues with one or more digits,
      - has at most one '.', followed by one or more digits,
      - does not start with '0' unless the integer part is exactly 0,
      - has no trailing zeros after the '.' and no trailing '.'.

    ``"0"`` is the only spelling of zero; ``"-0"`` is rejected.
    """
    data = as_bytes(decimal)
    if not data:
        return False
    if data == b"0":
        return True

    first = True  # still at the first digit of the integer part
    after = False  # past the '.'
    expect_dot = False  # the integer part started with '0'
    c = 0
    for i, c in enumerate(data):
        if i == 0 and c == _MINUS:
            continue
        if c == _DOT:
            if first or after:
                return False
            after = True
            expect_dot = False
            continue
        if c < _ZERO or c > _NINE:
            return False
        if expect_dot:
            return False
        if first:
            expect_dot = c == _ZERO
        first = False

    if c == _DOT or (after and c == _ZERO):
        return False
    if expect_dot or first:
        # "-0" or a lone "-"
        return False
    return True
