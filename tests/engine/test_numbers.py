import math

import pytest

from inmocalc.engine.numbers import (
    clamp_with_error,
    format_currency,
    format_for_editing,
    format_pct,
    is_num,
    parse_locale_number,
    round_half_up,
    safe,
)


class TestParseLocaleNumber:
    @pytest.mark.parametrize("text,expected", [
        ("250000", 250000),
        ("250.000", 250000),
        ("1.234.567,89", 1234567.89),
        ("3,2", 3.2),
        ("  1 200 ", 1200),
        ("-4,5", -4.5),
    ])
    def test_es_formats(self, text, expected):
        assert parse_locale_number(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", ",", None])
    def test_invalid_is_nan(self, text):
        assert math.isnan(parse_locale_number(text))

    def test_trailing_junk_ignored(self):
        """Leading numeric prefix wins, like a lenient parseFloat."""
        assert parse_locale_number("12 €") == 12


class TestFormatForEditing:
    def test_integer_has_no_decimals(self):
        assert format_for_editing(250000.0) == "250000"

    def test_decimal_comma_no_grouping(self):
        assert format_for_editing(1234567.89) == "1234567,89"

    def test_nan_is_empty(self):
        assert format_for_editing(float("nan")) == ""

    @pytest.mark.parametrize("x", [0.0, 3.2, 1234567.89, -0.75, 0.1 + 0.2, 1e-7])
    def test_round_trip(self, x):
        assert parse_locale_number(format_for_editing(x)) == x


class TestSafe:
    def test_nan_becomes_zero(self):
        assert safe(float("nan")) == 0.0
        assert safe(None) == 0.0

    def test_number_passes(self):
        assert safe(12.5) == 12.5

    def test_is_num(self):
        assert is_num(3)
        assert not is_num(float("nan"))
        assert not is_num(float("inf"))
        assert not is_num(True)


class TestClampWithError:
    def test_above_max(self):
        value, err = clamp_with_error(150, 0, 100)
        assert value == 100
        assert err == "Value cannot be greater than 100"

    def test_below_min(self):
        value, err = clamp_with_error(-5, 0, 100)
        assert value == 0
        assert err == "Value cannot be less than 0"

    def test_in_range(self):
        assert clamp_with_error(50, 0, 100) == (50, "")

    def test_nan_untouched(self):
        value, err = clamp_with_error(float("nan"), 0, 100)
        assert math.isnan(value)
        assert err == ""


class TestFormatting:
    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(-2.5) == -2

    def test_currency(self):
        assert format_currency(250000) == "250.000 €"
        assert format_currency(999.6) == "1.000 €"
        assert format_currency(float("nan")) == ""

    def test_pct(self):
        assert format_pct(3.14159) == "3.14%"
        assert format_pct(float("nan")) == "–"
