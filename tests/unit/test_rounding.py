"""Unit tests for the rounding helpers."""

import pytest

from cabinetry.domain.services.rounding import (
    approximately_equal,
    calculate_ratio,
    clamp,
    distribute_equally,
    round_to_decimal,
    validate_total,
)


class TestRoundToDecimal:
    """Tests for round_to_decimal."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (240.0, 240.0),
            (233.333333, 233.3),
            (233.35, 233.4),
            (0.05, 0.1),
            (123.45, 123.5),
            (-0.25, -0.2),
        ],
    )
    def test_rounds_half_up_to_one_decimal(self, value: float, expected: float) -> None:
        """Ties round towards positive infinity."""
        assert round_to_decimal(value) == expected

    def test_other_precisions(self) -> None:
        assert round_to_decimal(1.005, 2) == 1.01
        assert round_to_decimal(1234.5, 0) == 1235.0

    def test_float_noise_does_not_flip_ties(self) -> None:
        """1.15 * 10 is 11.499999... in binary; it must still round up."""
        assert round_to_decimal(1.15) == 1.2


class TestClamp:
    """Tests for clamp."""

    def test_below_minimum(self) -> None:
        assert clamp(10, 50, 720) == 50

    def test_above_maximum(self) -> None:
        assert clamp(800, 50, 720) == 720

    def test_inside_range(self) -> None:
        assert clamp(300, 50, 720) == 300


class TestHelpers:
    """Tests for the distribution and comparison helpers."""

    def test_distribute_equally(self) -> None:
        assert distribute_equally(720, 3) == [240.0, 240.0, 240.0]
        assert distribute_equally(700, 3) == [233.3, 233.3, 233.3]

    def test_distribute_equally_no_slots(self) -> None:
        assert distribute_equally(720, 0) == []

    def test_approximately_equal(self) -> None:
        assert approximately_equal(1.0, 1.005)
        assert not approximately_equal(1.0, 1.05)
        assert approximately_equal(1.0, 1.05, tolerance=0.1)

    def test_calculate_ratio(self) -> None:
        assert calculate_ratio(700, 350) == 2.0
        assert calculate_ratio(700, 0) == 1.0

    def test_validate_total(self) -> None:
        check = validate_total([300, 210, 210], 720)
        assert check.is_valid
        assert check.total == 720
        assert check.remaining == 0

    def test_validate_total_over(self) -> None:
        check = validate_total([300, 300, 300], 720)
        assert not check.is_valid
        assert check.remaining == -180
