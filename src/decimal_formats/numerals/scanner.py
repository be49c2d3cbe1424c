"""Single-pass format scanner.

Walks the bytes of a numeral once, left to right, and at the same time
decides which separator is the decimal point, which one groups digits, how
wide the groups are, and what the canonical digits are.

The only retroactive step happens when a second, different separator shows
up: the first separator is then known to have been a grouping separator and
the digits buffered after it as a tentative fraction move back into the
integer part.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from decimal_formats.models.decimal_format import (
    UNKNOWN_FORMAT,
    DecimalFormat,
    Separator,
    is_possible,
)
from decimal_formats.numerals.sign import split_sign_bytes

# Separators that may be either the point or the grouping separator.
_EITHER_ROLE = frozenset({Separator.COMMA, Separator.PERIOD, Separator.APOSTROPHE})

_SINGLE_BYTE = {
    ord(","): Separator.COMMA,
    ord("."): Separator.PERIOD,
    ord("'"): Separator.APOSTROPHE,
    ord(" "): Separator.SPACE,
    ord("_"): Separator.UNDERSCORE,
}

# Second byte of the UTF-8 encodings that start with 0xC2.
_UTF8_LEAD = 0xC2
_DOUBLE_BYTE = {
    0xB7: Separator.MIDDLE_DOT,
    0xA0: Separator.NO_BREAK_SPACE,
}


class ScanState(StrEnum):
    """Scanner states: no separator yet, one ambiguous separator pending, grouping confirmed, point fixed."""

    NO_SEPARATOR = "no_separator"
    PENDING = "pending"
    GROUPING = "grouping"
    POINT_FIXED = "point_fixed"


class ScanFailure(StrEnum):
    """Why a numeral was rejected."""

    NO_DIGITS = "no_digits"
    INVALID_CHARACTER = "invalid_character"
    GROUP_TOO_WIDE = "group_too_wide"
    INCONSISTENT_GROUPING = "inconsistent_grouping"
    INVALID_PAIRING = "invalid_pairing"
    SEPARATOR_AFTER_POINT = "separator_after_point"
    TRAILING_GROUP = "trailing_group"
    AMBIGUOUS = "ambiguous"


class ScanResult(BaseModel):
    """Outcome of scanning one numeral."""

    model_config = ConfigDict(frozen=True)

    canonical: bytes = b""
    decimal_format: DecimalFormat = UNKNOWN_FORMAT
    failure: ScanFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@lru_cache(maxsize=128)
def _format(point: Separator, group: Separator, standard: bool) -> DecimalFormat:
    return DecimalFormat(point=point, group=group, standard=standard)


def _failed(reason: ScanFailure) -> ScanResult:
    return ScanResult(failure=reason)


def read_separator(data: bytes, i: int) -> tuple[Separator | None, int]:
    """Return the separator starting at ``data[i]`` and its width in bytes.

    Middle dot and no-break space are two-byte UTF-8 sequences; they are
    recognized from their 0xC2 lead byte. Anything else that is not a known
    separator yields ``(None, 1)``.
    """
    byte = data[i]
    if byte == _UTF8_LEAD:
        if i + 1 < len(data) and data[i + 1] in _DOUBLE_BYTE:
            return _DOUBLE_BYTE[data[i + 1]], 2
        return None, 1
    return _SINGLE_BYTE.get(byte), 1


def compose(sign: bytes, integer: bytes, fraction: bytes) -> bytes:
    """Assemble a canonical numeral from its parts.

    Leading zeros of the integer part and trailing zeros of the fraction are
    dropped. Negative zero collapses to ``0``.
    """
    digits = integer.lstrip(b"0") or b"0"
    fraction = fraction.rstrip(b"0")
    if fraction:
        digits = digits + b"." + fraction
    if sign and digits != b"0":
        return sign + digits
    return digits


def scan_numeral(decimal: bytes) -> ScanResult:
    """Detect the format of *decimal* and compute its canonical form.

    Examples:
        b"1,234.56" -> b"1234.56", {`.`, `,`, standard}
        b"123.45"   -> b"123.45",  {`.`, `<none>`, standard}
        b"1,234"    -> failure AMBIGUOUS
        b"123 45"   -> failure TRAILING_GROUP
    """
    sign, magnitude = split_sign_bytes(decimal)

    state = ScanState.NO_SEPARATOR
    first = point = group = Separator.NONE
    run = 0  # digits since the last separator
    mode = 0  # confirmed group width: 0 unknown, 2 or 3
    seen_digit = False
    integer = bytearray()
    fraction = bytearray()
    active = integer

    i = 0
    while i < len(magnitude):
        byte = magnitude[i]
        if 0x30 <= byte <= 0x39:
            run += 1
            seen_digit = True
            active.append(byte)
            i += 1
            continue

        sep, width = read_separator(magnitude, i)
        if sep is None:
            return _failed(ScanFailure.INVALID_CHARACTER)
        i += width

        if state is ScanState.NO_SEPARATOR:
            first = sep
            if sep in _EITHER_ROLE:
                # A group separator needs 1 to 3 digits in front of it.
                if run == 0 or run > 3:
                    point, state = sep, ScanState.POINT_FIXED
                else:
                    state = ScanState.PENDING
                active = fraction
            elif sep is Separator.MIDDLE_DOT:
                point, state = sep, ScanState.POINT_FIXED
                active = fraction
            else:
                if run > 3:
                    return _failed(ScanFailure.GROUP_TOO_WIDE)
                group, state = sep, ScanState.GROUPING
        elif state is ScanState.POINT_FIXED:
            return _failed(ScanFailure.SEPARATOR_AFTER_POINT)
        elif sep is first:
            if run not in (2, 3) or (mode and run != mode):
                return _failed(ScanFailure.INCONSISTENT_GROUPING)
            group, mode, state = first, run, ScanState.GROUPING
            integer += fraction
            fraction.clear()
            active = integer
        else:
            # Only a point can differ from the grouping separator.
            group, point = first, sep
            if run != 3:
                return _failed(ScanFailure.INCONSISTENT_GROUPING)
            if not is_possible(point, group):
                return _failed(ScanFailure.INVALID_PAIRING)
            integer += fraction
            fraction.clear()
            active = fraction
            state = ScanState.POINT_FIXED
        run = 0

    if not seen_digit:
        return _failed(ScanFailure.NO_DIGITS)

    if state is ScanState.NO_SEPARATOR:
        decimal_format = _format(Separator.NONE, Separator.NONE, True)
    elif state is ScanState.POINT_FIXED:
        decimal_format = _format(point, group, mode != 2)
    elif state is ScanState.GROUPING:
        if run != 3:
            return _failed(ScanFailure.TRAILING_GROUP)
        decimal_format = _format(Separator.NONE, group, mode != 2)
    else:
        if run == 3:
            return _failed(ScanFailure.AMBIGUOUS)
        decimal_format = _format(first, Separator.NONE, True)

    return ScanResult(
        canonical=compose(sign, bytes(integer), bytes(fraction)),
        decimal_format=decimal_format,
    )
