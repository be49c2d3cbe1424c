"""Render canonical numerals in a target decimal format."""

from __future__ import annotations

from decimal_formats.config import Settings
from decimal_formats.models.decimal_format import DecimalFormat, Separator
from decimal_formats.numerals.detection import normalize
from decimal_formats.numerals.validation import is_normalized
from decimal_formats.utils.byteseq import Numeral, as_bytes, restore


def group_digits(integer: bytes, group: bytes, standard: bool = True) -> bytes:
    """Insert *group* between the digit groups of *integer*.

    The rightmost group holds 3 digits; the others hold 3 (standard) or 2
    (non-standard) digits. An empty *group* leaves the digits untouched.
    """
    if not group or len(integer) <= 3:
        return integer
    width = 3 if standard else 2
    head, groups = integer[:-3], [integer[-3:]]
    while head:
        groups.append(head[-width:])
        head = head[:-width]
    return group.join(reversed(groups))


def convert(decimal_format: DecimalFormat, decimal: Numeral) -> tuple[Numeral, bool]:
    """Rewrite *decimal* in *decimal_format*.

    The input need not be canonical; it is normalized first. Returns
    ``("0", False)`` when the input is not a recognizable decimal number.
    A format without a point writes fractions with '.'.
    """
    if not is_normalized(decimal):
        decimal = normalize(decimal)
        if not is_normalized(decimal):
            return restore(b"0", decimal), False

    data = as_bytes(decimal)
    sign = b""
    if data.startswith(b"-"):
        sign, data = b"-", data[1:]
    integer, _, fraction = data.partition(b".")

    out = sign + group_digits(
        integer, decimal_format.group.value.encode("utf-8"), decimal_format.standard
    )
    if fraction:
        point = decimal_format.point or Separator.PERIOD
        out += point.value.encode("utf-8") + fraction
    return restore(out, decimal), True


def format_numeral(
    decimal: Numeral, settings: Settings | None = None
) -> tuple[Numeral, bool]:
    """Convert *decimal* to the output format configured in *settings*."""
    if settings is None:
        settings = Settings()
    return convert(settings.output_format(), decimal)
