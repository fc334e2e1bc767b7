"""Tests for transformation helpers."""

import pytest

from ltc2946.domain.helpers.transformations import clamp, truncating_div


class TestTruncatingDiv:
    """Division rounds toward zero like C integer division."""

    @pytest.mark.parametrize(
        "numerator,denominator,expected",
        [
            (7, 2, 3),
            (-7, 2, -3),
            (7, -2, -3),
            (-7, -2, 3),
            (0, 5, 0),
            (31250000, 1000, 31250),
        ],
    )
    def test_truncates_toward_zero(self, numerator, denominator, expected):
        """Test sign handling."""
        assert truncating_div(numerator, denominator) == expected

    def test_differs_from_floor_division_for_negatives(self):
        """Test that -1 / 31250 is 0, not -1."""
        assert truncating_div(-1000, 31250) == 0
        assert -1000 // 31250 == -1

    def test_zero_divisor_raises(self):
        """Test division by zero is not masked."""
        with pytest.raises(ZeroDivisionError):
            truncating_div(1, 0)

    def test_large_values_are_exact(self):
        """Test no float precision loss."""
        assert truncating_div(10**30 + 1, 10) == 10**29


class TestClamp:
    """Test saturating clamp."""

    def test_inside_range(self):
        assert clamp(100, 0, 0xFFF) == 100

    def test_above_range(self):
        assert clamp(0x1000, 0, 0xFFF) == 0xFFF

    def test_below_range(self):
        assert clamp(-1, 0, 0xFFF) == 0

    def test_bounds_inclusive(self):
        assert clamp(0, 0, 0xFFF) == 0
        assert clamp(0xFFF, 0, 0xFFF) == 0xFFF
