"""Decimal format descriptors.

A ``DecimalFormat`` names the decimal separator, the grouping separator and
the grouping style of a written number. Formats are produced by detection
(see ``numerals.detection``) or supplied by callers as a rendering target.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator

from decimal_formats.utils.byteseq import Numeral


class Separator(StrEnum):
    """The closed set of characters that may separate digits."""

    COMMA = ","
    PERIOD = "."
    APOSTROPHE = "'"
    MIDDLE_DOT = "·"
    NO_BREAK_SPACE = "\u00a0"
    SPACE = " "
    UNDERSCORE = "_"
    NONE = ""


# Which grouping separators can accompany a given decimal separator.
# https://en.wikipedia.org/wiki/Decimal_separator
#   1,234,567.89  1 234 567.89  1_234_567.89  1'234'567.89   -> point "."
#   1 234 567,89  1.234.567,89  1'234'567,89                  -> point ","
#   1,234,567·89  (Malaysia, Malta, Singapore, UK handwritten) -> point "·"
#   1.234.567'89  (Spain, handwritten until the 1980s)         -> point "'"
VALID_PAIRINGS: dict[Separator, frozenset[Separator]] = {
    Separator.PERIOD: frozenset(
        {
            Separator.SPACE,
            Separator.NO_BREAK_SPACE,
            Separator.COMMA,
            Separator.APOSTROPHE,
            Separator.UNDERSCORE,
        }
    ),
    Separator.COMMA: frozenset(
        {
            Separator.SPACE,
            Separator.NO_BREAK_SPACE,
            Separator.PERIOD,
            Separator.APOSTROPHE,
        }
    ),
    Separator.MIDDLE_DOT: frozenset({Separator.COMMA}),
    Separator.APOSTROPHE: frozenset({Separator.PERIOD}),
}


def is_possible(point: Separator, group: Separator) -> bool:
    """Return True if *group* is a known companion of the decimal *point*."""
    return group in VALID_PAIRINGS.get(point, frozenset())


class DecimalFormat(BaseModel):
    """How a decimal number is written.

    ``standard`` grouping puts a separator every 3 digits left of the point.
    Non-standard grouping (Indian numbering) keeps 3 digits in the group
    nearest the point and 2 digits in every group further left.
    """

    model_config = ConfigDict(frozen=True)

    point: Separator = Separator.NONE
    group: Separator = Separator.NONE
    standard: bool = True

    @model_validator(mode="after")
    def check_distinct_separators(self) -> DecimalFormat:
        if self.point and self.point == self.group:
            raise ValueError(
                f"Decimal and grouping separator must differ, both are {self.point.value!r}"
            )
        return self

    def to_display_string(self) -> str:
        """Render as {`<point>`, `<group>`, standard|non-standard}."""
        point = self.point.value or "<none>"
        group = self.group.value or "<none>"
        style = "standard" if self.standard else "non-standard"
        return f"{{`{point}`, `{group}`, {style}}}"

    def __str__(self) -> str:
        return self.to_display_string()

    def convert(self, decimal: Numeral) -> tuple[Numeral, bool]:
        """Rewrite *decimal* in this format. Returns ``(output, ok)``."""
        from decimal_formats.numerals.rendering import convert

        return convert(self, decimal)

    def parse(self, decimal: Numeral) -> tuple[Numeral, bool]:
        """Normalize *decimal*, which is known to be written in this format."""
        from decimal_formats.numerals.detection import normalize_as

        return normalize_as(self, decimal)


# Returned alongside a failed detection.
UNKNOWN_FORMAT = DecimalFormat(standard=False)
