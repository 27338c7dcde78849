# Tests for permissive-prefix parsing and number display

import math

import pytest

from sumcalculator.model.numbers import format_number, parse_float_prefix


class TestParseFloatPrefix:
    """parse_float_prefix reads the longest numeric prefix."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3", 3.0),
            ("-1.5", -1.5),
            ("+7", 7.0),
            ("2.5", 2.5),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("1.5E-2", 0.015),
            ("  42", 42.0),
        ],
    )
    def test_plain_numbers(self, text, expected):
        """Complete numeric literals parse to their value."""
        assert parse_float_prefix(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("12abc", 12.0),
            ("3.14xyz", 3.14),
            ("1e", 1.0),
            ("1e+", 1.0),
            ("1.5.3", 1.5),
            ("1,5", 1.0),
            ("0x10", 0.0),
            ("7 8", 7.0),
        ],
    )
    def test_trailing_garbage_is_ignored(self, text, expected):
        """Only the numeric prefix counts; whatever follows is dropped."""
        assert parse_float_prefix(text) == expected

    def test_infinity_literal(self):
        """'Infinity' with an optional sign is a valid prefix."""
        assert parse_float_prefix("Infinity") == math.inf
        assert parse_float_prefix("-Infinity") == -math.inf
        assert parse_float_prefix("Infinityx") == math.inf

    def test_huge_exponent_overflows_to_infinity(self):
        assert parse_float_prefix("1e999") == math.inf

    @pytest.mark.parametrize("text", ["\ufeff5", "\u00a05", "\u20285", "\u30005", "\u200a5"])
    def test_skips_unicode_leading_whitespace(self, text):
        """Byte-order marks and Unicode spaces before the number are skipped."""
        assert parse_float_prefix(text) == 5.0

    @pytest.mark.parametrize("text", ["\x855", "\x1c5", "\x1f5"])
    def test_control_characters_are_not_whitespace(self, text):
        """NEL and the information separators block the numeric prefix."""
        assert parse_float_prefix(text) is None

    @pytest.mark.parametrize(
        "text", ["abc", ".", "-", "+", "e5", "nan", "NaN", "inf", "infinity", "", "   ", "١٢"]
    )
    def test_no_numeric_prefix(self, text):
        """Text without a numeric prefix is not a number."""
        assert parse_float_prefix(text) is None


class TestFormatNumber:
    """format_number renders results for display."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (7.0, "7"),
            (1.0, "1"),
            (-3.0, "-3"),
            (13.0, "13"),
            (1e20, "100000000000000000000"),
        ],
    )
    def test_integral_values_drop_fraction(self, value, expected):
        assert format_number(value) == expected

    def test_zero_and_negative_zero(self):
        assert format_number(0.0) == "0"
        assert format_number(-0.0) == "0"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.5, "1.5"),
            (-2.25, "-2.25"),
            (123.456, "123.456"),
            (0.1 + 0.2, "0.30000000000000004"),
            (0.000001, "0.000001"),
        ],
    )
    def test_fractional_values(self, value, expected):
        assert format_number(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1e21, "1e+21"),
            (1.5e22, "1.5e+22"),
            (1e-7, "1e-7"),
            (-1.5e-7, "-1.5e-7"),
        ],
    )
    def test_exponent_notation(self, value, expected):
        """Magnitudes outside the fixed range use exponent notation."""
        assert format_number(value) == expected

    def test_special_values(self):
        assert format_number(math.nan) == "NaN"
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"
