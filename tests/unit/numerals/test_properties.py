"""Idempotence and round-trip properties over representative numerals."""
import itertools

from decimal_formats.models.decimal_format import VALID_PAIRINGS, DecimalFormat
from decimal_formats.numerals.detection import detect_format, normalize, normalize_checked
from decimal_formats.numerals.validation import is_normalized

RAW = [
    "123",
    " - 1 234,50 ",
    "12 345.",
    "1'34'567",
    "1.234.567'89",
    "1,234·56",
    "0012,5",
    ".250",
    "-0.0",
    "1 234 567,125",
    "1_000_000.000001",
]

CANONICAL = ["1234567.89", "-123456.5", "98765432.1", "100000.01"]

FORMATS = [
    DecimalFormat(point=point, group=group, standard=standard)
    for point, groups in VALID_PAIRINGS.items()
    for group in sorted(groups)
    for standard in (True, False)
]


class TestIdempotence:
    def test_normalized_output_is_canonical(self):
        for raw in RAW:
            result, ok = normalize_checked(raw)
            assert ok, raw
            assert is_normalized(result), raw
            assert normalize(result) == result


class TestRoundTrip:
    def test_detect_recovers_format(self):
        for number, df in itertools.product(CANONICAL, FORMATS):
            rendered, ok = df.convert(number)
            assert ok
            assert detect_format(rendered) == (df, True), rendered

    def test_normalize_recovers_numeral(self):
        for number, df in itertools.product(CANONICAL, FORMATS):
            rendered, _ = df.convert(number)
            assert normalize(rendered) == number, rendered

    def test_point_only_formats(self):
        for point in VALID_PAIRINGS:
            df = DecimalFormat(point=point)
            for number in CANONICAL:
                rendered, _ = df.convert(number)
                assert normalize(rendered) == number, rendered
