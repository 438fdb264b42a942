"""
Tests for number parsing and the string formatting primitives.

Run with: pytest tests/ -v
"""

import math
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from aform.parser import (
    make_number,
    extract_nums,
    make_array_from_list,
    parse_float,
    js_to_string,
)
from aform.util import printf, printx, printd, scand


class TestMakeNumber:
    """Tests for converting field text to numbers."""

    def test_first_comma_is_decimal_point(self):
        assert make_number("3,14") == 3.14

    def test_not_a_number(self):
        assert make_number("abc") is None

    def test_numbers_pass_through(self):
        assert make_number(5) == 5
        assert make_number(-2.5) == -2.5

    def test_whitespace_and_trailing_text(self):
        assert make_number("  12abc ") == 12

    def test_only_first_comma_replaced(self):
        # "1,234.5" becomes "1.234.5", whose numeric prefix is 1.234
        assert make_number("1,234.5") == 1.234

    def test_infinite_rejected(self):
        assert make_number("Infinity") is None
        assert make_number("1e999") is None

    def test_non_string_input(self):
        assert make_number(None) is None
        assert make_number(True) is None
        assert make_number(["1"]) is None


class TestExtractNums:
    """Tests for digit group extraction."""

    def test_leading_decimal_separator(self):
        assert extract_nums(".5") == ["0", "5"]
        assert extract_nums(",25") == ["0", "25"]

    def test_number_input(self):
        assert extract_nums(42) == [42]

    def test_digit_runs(self):
        assert extract_nums("12-34/5678") == ["12", "34", "5678"]

    def test_no_digits(self):
        assert extract_nums("abc") is None
        assert extract_nums("") is None
        assert extract_nums(None) is None


class TestListHelpers:

    def test_split_list(self):
        assert make_array_from_list("a, b,c") == ["a", "b", "c"]

    def test_sequence_passes_through(self):
        names = ["f1", "f2"]
        assert make_array_from_list(names) is names

    def test_parse_float_prefix(self):
        assert parse_float("  -1.5e3x") == -1500.0
        assert parse_float(".5") == 0.5
        assert math.isnan(parse_float("x1"))

    def test_js_to_string(self):
        assert js_to_string(3.0) == "3"
        assert js_to_string(0.5) == "0.5"
        assert js_to_string(1e-7) == "1e-7"
        assert js_to_string(True) == "true"


class TestPrintf:
    """Tests for printf number formatting."""

    @pytest.mark.parametrize("sep_style,expected", [
        (0, "1,234.50"),
        (1, "1234.50"),
        (2, "1.234,50"),
        (3, "1234,50"),
        (4, "1'234.50"),
    ])
    def test_separator_styles(self, sep_style, expected):
        assert printf(f"%,{sep_style}.2f", 1234.5) == expected

    def test_large_grouping(self):
        assert printf("%,0.2f", 1234567.891) == "1,234,567.89"

    def test_rounds_half_up(self):
        assert printf("%.2f", 0.125) == "0.13"
        assert printf("%.0f", 0.5) == "1"

    def test_rounding_carries_into_integer(self):
        assert printf("%.2f", 0.999) == "1.00"
        assert printf("%.2f", -1.999) == "-2.00"

    def test_small_negative_loses_sign(self):
        assert printf("%.2f", -0.5) == "0.50"

    def test_negative(self):
        assert printf("%,0.2f", -1234.5) == "-1,234.50"

    def test_integer_and_hex(self):
        assert printf("%d", 42.9) == "42"
        assert printf("%x", 255) == "0xFF"

    def test_width_and_flags(self):
        assert printf("%5d", 42) == "   42"
        assert printf("%05d", -42) == "-0042"
        assert printf("%+d", 7) == "+7"

    def test_strings(self):
        assert printf("%s and %s", 10, "x") == "10 and x"
        assert printf("must be % s.", 10.0) == "must be 10."

    def test_unknown_conversion_and_missing_argument(self):
        assert printf("%q") == "%q"
        assert printf("value: %d") == "value: "


class TestPrintx:
    """Tests for picture mask formatting."""

    def test_ssn(self):
        assert printx("999-99-9999", "123456789") == "123-45-6789"

    def test_phone(self):
        assert printx("(999) 999-9999", "5551234567") == "(555) 123-4567"

    def test_stops_when_source_exhausted(self):
        assert printx("999-9999", "555") == "555"

    def test_digit_mask_skips_punctuation(self):
        assert printx("9999999999", "(555) 123-4567") == "5551234567"

    def test_case_commands(self):
        assert printx(">AAA", "abc") == "ABC"
        assert printx("<?=?", "AB") == "aB"

    def test_escape(self):
        assert printx("\\99", "5") == "95"


class TestDates:
    """Tests for printd and scand."""

    def test_printd_long(self):
        assert printd("mmmm d, yyyy", datetime(2024, 1, 5)) == "January 5, 2024"

    def test_printd_time(self):
        assert printd("h:MM tt", datetime(2024, 1, 5, 15, 7)) == "3:07 pm"
        assert printd("HH:MM:ss", datetime(2024, 1, 5, 9, 8, 7)) == "09:08:07"

    def test_printd_day_names(self):
        assert printd("dddd", datetime(2024, 1, 5)) == "Friday"
        assert printd("ddd", datetime(2024, 1, 7)) == "Sun"

    def test_printd_presets(self):
        date = datetime(2024, 1, 5, 9, 8, 7)
        assert printd(0, date) == "D:20240105090807"
        assert printd(1, date) == "2024.01.05 09:08:07"

    def test_printd_escape_and_literal_index(self):
        date = datetime(2024, 1, 5)
        assert printd("\\m", date) == "m"
        assert printd(99, date) == "99"

    def test_scand_exact(self):
        assert scand("m/d/yy", "1/5/24") == datetime(2024, 1, 5)
        assert scand("mmm d, yyyy", "Jan 5, 2024") == datetime(2024, 1, 5)

    def test_scand_time(self):
        parsed = scand("h:MM tt", "3:07 pm")
        assert parsed.hour == 15
        assert parsed.minute == 7

    def test_scand_nonexistent_date(self):
        assert scand("m/d/yy", "2/30/24") is None
        assert scand("HH:MM", "25:00") is None

    def test_scand_strict(self):
        assert scand("m/d/yy", "1.5.24", strict=True) is None

    def test_scand_guess(self):
        assert scand("m/d/yy", "1.5.24") == datetime(2024, 1, 5)
        assert scand("mmm d, yyyy", "January 5 2024") == datetime(2024, 1, 5)

    def test_scand_guess_needs_numbers(self):
        assert scand("m/d/yy", "tomorrow") is None
