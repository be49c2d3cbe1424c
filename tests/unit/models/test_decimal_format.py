"""Test decimal format descriptors and the separator pairing table."""
import pytest
from pydantic import ValidationError

from decimal_formats.models.decimal_format import (
    UNKNOWN_FORMAT,
    VALID_PAIRINGS,
    DecimalFormat,
    Separator,
    is_possible,
)


class TestDisplayString:
    def test_point_without_group(self):
        df = DecimalFormat(point=".", group="", standard=True)
        assert df.to_display_string() == "{`.`, `<none>`, standard}"

    def test_space_group(self):
        df = DecimalFormat(point=".", group=" ", standard=True)
        assert df.to_display_string() == "{`.`, ` `, standard}"

    def test_non_standard(self):
        df = DecimalFormat(point=",", group="'", standard=False)
        assert df.to_display_string() == "{`,`, `'`, non-standard}"

    def test_middle_dot(self):
        df = DecimalFormat(point="·", standard=False)
        assert df.to_display_string() == "{`·`, `<none>`, non-standard}"

    def test_str_matches_display_string(self):
        df = DecimalFormat(point=",", group=" ")
        assert str(df) == "{`,`, ` `, standard}"

    def test_unknown_format(self):
        assert str(UNKNOWN_FORMAT) == "{`<none>`, `<none>`, non-standard}"


class TestDecimalFormat:
    def test_defaults(self):
        df = DecimalFormat()
        assert df.point is Separator.NONE
        assert df.group is Separator.NONE
        assert df.standard is True

    def test_string_values_coerced_to_separators(self):
        df = DecimalFormat(point=",", group="\u00a0")
        assert df.point is Separator.COMMA
        assert df.group is Separator.NO_BREAK_SPACE

    def test_equal_formats_compare_equal(self):
        assert DecimalFormat(point=",", group=".") == DecimalFormat(
            point=Separator.COMMA, group=Separator.PERIOD, standard=True
        )

    def test_hashable(self):
        formats = {DecimalFormat(point=","), DecimalFormat(point=",")}
        assert len(formats) == 1

    def test_immutable(self):
        df = DecimalFormat(point=",")
        with pytest.raises(ValidationError):
            df.point = Separator.PERIOD

    def test_same_point_and_group_rejected(self):
        with pytest.raises(ValidationError):
            DecimalFormat(point=",", group=",")

    def test_unknown_separator_rejected(self):
        with pytest.raises(ValidationError):
            DecimalFormat(point=";")

    def test_unknown_format_is_zero_value(self):
        assert UNKNOWN_FORMAT == DecimalFormat(point="", group="", standard=False)


class TestPairings:
    def test_period_point(self):
        assert is_possible(Separator.PERIOD, Separator.COMMA)
        assert is_possible(Separator.PERIOD, Separator.UNDERSCORE)
        assert not is_possible(Separator.PERIOD, Separator.MIDDLE_DOT)

    def test_comma_point(self):
        assert is_possible(Separator.COMMA, Separator.PERIOD)
        assert is_possible(Separator.COMMA, Separator.NO_BREAK_SPACE)
        assert not is_possible(Separator.COMMA, Separator.UNDERSCORE)

    def test_middle_dot_only_after_comma(self):
        assert VALID_PAIRINGS[Separator.MIDDLE_DOT] == frozenset({Separator.COMMA})

    def test_apostrophe_only_after_period(self):
        assert VALID_PAIRINGS[Separator.APOSTROPHE] == frozenset({Separator.PERIOD})

    def test_spaces_are_never_points(self):
        assert not is_possible(Separator.SPACE, Separator.COMMA)
        assert not is_possible(Separator.UNDERSCORE, Separator.PERIOD)
