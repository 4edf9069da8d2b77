# tests/test_utils.py

"""
Rounding and Formatting Tests
"""

from decimal import Decimal

from cfp_review.scoring.utils import format_percent, format_score, round_to, to_decimal


class TestRoundTo:
    """Tests for round_to half-up rounding."""

    def test_rounds_to_two_places_by_default(self):
        assert round_to(2.345) == 2.35
        assert round_to(2.344) == 2.34
        assert round_to(3.333333) == 3.33

    def test_rounds_to_requested_places(self):
        assert round_to(2.3456, 3) == 2.346
        assert round_to(2.3456, 1) == 2.3
        assert round_to(2.5, 0) == 3

    def test_half_up(self):
        assert round_to(2.45, 1) == 2.5
        assert round_to(2.555, 2) == 2.56

    def test_whole_numbers(self):
        assert round_to(3) == 3
        assert round_to(3.0) == 3


class TestToDecimal:

    def test_quantizes(self):
        assert to_decimal(2.345) == Decimal("2.35")
        assert to_decimal(1.23456, 4) == Decimal("1.2346")


class TestFormatScore:
    """Tests for format_score display rules."""

    def test_at_most_two_decimals(self):
        assert format_score(3.5) == "3.5"
        assert format_score(3.25) == "3.25"
        assert format_score(3.333333) == "3.33"

    def test_none_is_dash(self):
        assert format_score(None) == "-"

    def test_whole_numbers_have_no_trailing_zeros(self):
        assert format_score(3) == "3"
        assert format_score(4.0) == "4"
        assert format_score(3.999) == "4"

    def test_zero(self):
        assert format_score(0) == "0"


class TestFormatPercent:
    """Tests for format_percent."""

    def test_whole_numbers(self):
        assert format_percent(75) == "75%"
        assert format_percent(100) == "100%"
        assert format_percent(0) == "0%"

    def test_rounds_to_nearest_integer(self):
        assert format_percent(75.5) == "76%"
        assert format_percent(75.4) == "75%"
        assert format_percent(33.33) == "33%"
        assert format_percent(60.00000000000001) == "60%"
