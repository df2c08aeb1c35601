from decimal import Decimal
import math

import pytest

from autocsv.domain.services.transformers.numeric import compile_number_pattern


class TestCompileNumberPattern:
    def test_grouping_and_fraction_digits(self):
        pattern = compile_number_pattern("#,##0.00")

        assert pattern.grouping_size == 3
        assert pattern.min_integer_digits == 1
        assert pattern.min_fraction_digits == 2
        assert pattern.max_fraction_digits == 2
        assert pattern.prefix == ""
        assert pattern.suffix == ""

    def test_optional_fraction_digits(self):
        pattern = compile_number_pattern("0.0##")

        assert pattern.min_fraction_digits == 1
        assert pattern.max_fraction_digits == 3
        assert pattern.grouping_size == 0

    def test_percent_suffix_sets_multiplier(self):
        assert compile_number_pattern("0.00%").multiplier == 100

    def test_negative_subpattern_is_ignored(self):
        pattern = compile_number_pattern("#,##0.00;(#,##0.00)")

        assert pattern.suffix == ""
        assert pattern.max_fraction_digits == 2

    @pytest.mark.parametrize(
        "pattern",
        ["abc", "", "#,##0.0,0", "0.0.0", "#,##0,", "'0.00"],
    )
    def test_invalid_patterns(self, pattern):
        with pytest.raises(ValueError):
            compile_number_pattern(pattern)


class TestNumberPatternFormat:
    @pytest.mark.parametrize(
        ("pattern", "value", "expected"),
        [
            ("#,##0.00", 3500.0, "3,500.00"),
            ("#,##0.00", 1234567.891, "1,234,567.89"),
            ("#,##0.00", 0.5, "0.50"),
            ("#,##0.00", -1234.5, "-1,234.50"),
            ("#,##0", 1234567, "1,234,567"),
            ("#,##0", 999, "999"),
            ("000", 7, "007"),
            ("#.##", 0.5, ".5"),
            ("#.##", 2.0, "2"),
            ("0.00%", 0.256, "25.60%"),
            ("$#,##0.00", 1234.5, "$1,234.50"),
            ("#,##0.00", 1e20, "100,000,000,000,000,000,000.00"),
            ("#,##,##0", 1234567, "1,234,567"),
        ],
    )
    def test_format(self, pattern, value, expected):
        assert compile_number_pattern(pattern).format(value) == expected

    def test_rounding_is_half_even(self):
        pattern = compile_number_pattern("0.0")

        assert pattern.format(0.25) == "0.2"
        assert pattern.format(0.35) == "0.4"

    def test_negative_value_rounding_to_zero_has_no_sign(self):
        assert compile_number_pattern("0.0").format(-0.01) == "0.0"

    def test_decimal_input(self):
        assert compile_number_pattern("#,##0.00").format(Decimal("1234.005")) == "1,234.00"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (math.inf, "inf"),
            (-math.inf, "-inf"),
            (math.nan, "nan"),
            (Decimal("-Infinity"), "-inf"),
        ],
    )
    def test_non_finite_values(self, value, expected):
        assert compile_number_pattern("#,##0.00").format(value) == expected


class TestNumberPatternParse:
    def test_strips_grouping(self):
        assert compile_number_pattern("#,##0.00").parse("3,500.00") == Decimal("3500.00")

    def test_strips_prefix_and_suffix(self):
        assert compile_number_pattern("$#,##0.00").parse("$1,234.50") == Decimal("1234.50")

    def test_percent_divides_by_hundred(self):
        assert compile_number_pattern("0.00%").parse("25.60%") == Decimal("0.256")

    def test_negative_value(self):
        assert compile_number_pattern("#,##0.00").parse("-1,234.50") == Decimal("-1234.50")

    @pytest.mark.parametrize("text", ["abc", "", "1.2.3", "12abc"])
    def test_rejects_non_numeric_text(self, text):
        with pytest.raises(ValueError, match="does not match number pattern"):
            compile_number_pattern("#,##0.00").parse(text)

    def test_explicit_plus_sign(self):
        assert compile_number_pattern("#,##0.00").parse("+5") == Decimal("5")

    @pytest.mark.parametrize("text", ["--5", "+-5", "-+5", "+-1,234.50"])
    def test_rejects_more_than_one_sign(self, text):
        with pytest.raises(ValueError, match="does not match number pattern"):
            compile_number_pattern("#,##0.00").parse(text)

    def test_sign_goes_before_prefix(self):
        assert compile_number_pattern("$#,##0.00").parse("-$1,234.50") == Decimal("-1234.50")

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("inf", Decimal("Infinity")),
            ("-inf", Decimal("-Infinity")),
            (" INF ", Decimal("Infinity")),
        ],
    )
    def test_infinities(self, text, expected):
        assert compile_number_pattern("#,##0.00").parse(text) == expected

    def test_nan(self):
        assert compile_number_pattern("#,##0.00").parse("nan").is_nan()

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_non_finite_format_is_parsed_back(self, value):
        pattern = compile_number_pattern("$#,##0.00")

        assert float(pattern.parse(pattern.format(value))) == value
