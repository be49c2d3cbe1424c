"""Format detection and normalization of loosely written decimal numbers.

Handles:
- Any mix of the supported separators: "1,234.56", "1.234,56", "1'234·56"
- Indian grouping: "12,34,567.89"
- Signs and surrounding spaces: " - 1 234,50 " -> "-1234.5"
- Ambiguous input ("1,234") is rejected unless the format is known up front
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from decimal_formats.models.decimal_format import (
    UNKNOWN_FORMAT,
    DecimalFormat,
    Separator,
)
from decimal_formats.numerals.scanner import (
    ScanFailure,
    ScanResult,
    compose,
    scan_numeral,
)
from decimal_formats.numerals.sign import split_sign_bytes
from decimal_formats.utils.byteseq import Numeral, as_bytes, restore
from decimal_formats.utils.logging import get_logger

logger = get_logger(__name__)


def _scan(decimal: str | bytes | bytearray) -> ScanResult:
    result = scan_numeral(as_bytes(decimal))
    if not result.ok:
        logger.debug(
            "numeral_rejected", reason=result.failure.value, length=len(decimal)
        )
    return result


def detect_format(decimal: str | bytes | bytearray) -> tuple[DecimalFormat, bool]:
    """Detect the decimal format *decimal* is written in.

    Returns ``(UNKNOWN_FORMAT, False)`` when the input is not a decimal number
    or when it is ambiguous. A format without any evidence of non-standard
    grouping is reported as standard.
    """
    result = _scan(decimal)
    return result.decimal_format, result.ok


def normalize_checked(decimal: Numeral) -> tuple[Numeral, bool]:
    """Return the canonical form of *decimal* and whether that succeeded.

    On failure the input is returned unchanged.
    """
    result = _scan(decimal)
    if not result.ok:
        return decimal, False
    return restore(result.canonical, decimal), True


def normalize(decimal: Numeral) -> Numeral:
    """Return the canonical form of *decimal*, or *decimal* itself on failure.

    A canonical decimal string:
      - may start with a '-',
      - is followed by one or more digits,
      - has a '.' only when digits follow it ("123." -> "123"),
      - does not start with '0' unless the integer part is 0 ("0123.4" -> "123.4"),
      - has no trailing zeros after the '.' ("123.000" -> "123").
    """
    normalized, _ = normalize_checked(decimal)
    return normalized


def _groups_fit(groups: list[bytes], standard: bool) -> bool:
    """Check the widths of the integer groups split on a grouping separator."""
    if len(groups) == 1:
        return True
    *head, last = groups
    if len(last) != 3:
        return False
    width = 3 if standard else 2
    leading, *inner = head
    if not 1 <= len(leading) <= width:
        return False
    return all(len(g) == width for g in inner)


def normalize_as(
    decimal_format: DecimalFormat, decimal: Numeral
) -> tuple[Numeral, bool]:
    """Normalize *decimal*, which is known to be written in *decimal_format*.

    Knowing the format settles inputs the scanner has to reject as
    ambiguous: "1,234" read as {`.`, `,`, standard} is "1234".
    Returns ``(decimal, False)`` when the input does not fit the format.
    """
    sign, magnitude = split_sign_bytes(as_bytes(decimal))
    point = decimal_format.point.value.encode("utf-8")
    group = decimal_format.group.value.encode("utf-8")

    integer, fraction = magnitude, b""
    if point and point in magnitude:
        integer, fraction = magnitude.split(point, 1)
    groups = integer.split(group) if group else [integer]

    digits = b"".join(groups)
    if not (digits + fraction).isdigit() or (not digits and len(groups) > 1):
        return decimal, False
    if not _groups_fit(groups, decimal_format.standard):
        return decimal, False
    return restore(compose(sign, digits, fraction), decimal), True


def detect_shared_format(
    samples: Iterable[str | bytes | bytearray],
) -> tuple[DecimalFormat, bool]:
    """Detect the one format a collection of numerals is written in.

    Samples vote separately for a decimal point and for a grouping separator;
    the most common of each wins, ties going to the one seen first. A group
    candidate equal to the winning point is skipped. Grouping is non-standard
    if any sample grouped with the winning separator that way. Ambiguous and
    malformed samples do not vote.
    """
    points: Counter[Separator] = Counter()
    groups: Counter[Separator] = Counter()
    non_standard: set[Separator] = set()
    ambiguous = 0
    for sample in samples:
        result = scan_numeral(as_bytes(sample))
        if result.failure is ScanFailure.AMBIGUOUS:
            ambiguous += 1
        if not result.ok:
            continue
        found = result.decimal_format
        if found.point:
            points[found.point] += 1
        if found.group:
            groups[found.group] += 1
            if not found.standard:
                non_standard.add(found.group)

    point = points.most_common(1)[0][0] if points else Separator.NONE
    group = next((g for g, _ in groups.most_common() if g != point), Separator.NONE)
    if not (point or group):
        logger.debug("shared_format_undetermined", ambiguous=ambiguous)
        return UNKNOWN_FORMAT, False

    shared = DecimalFormat(point=point, group=group, standard=group not in non_standard)
    logger.debug(
        "shared_format_detected",
        decimal_format=shared.to_display_string(),
        point_votes=points[point],
        group_votes=groups[group],
        ambiguous=ambiguous,
    )
    return shared, True


def normalize_all(samples: Iterable[Numeral]) -> list[tuple[Numeral, bool]]:
    """Normalize a collection of numerals written in one shared format.

    The shared format is detected first; each sample is then read with that
    format, falling back to independent detection for samples that do not fit
    it. Each entry is ``(output, ok)`` as returned by :func:`normalize_checked`.
    """
    samples = list(samples)
    shared, found = detect_shared_format(samples)
    results: list[tuple[Numeral, bool]] = []
    for sample in samples:
        if found:
            normalized, ok = normalize_as(shared, sample)
            if ok:
                results.append((normalized, ok))
                continue
        results.append(normalize_checked(sample))
    return results
