"""Unit tests for drawer height distribution.

These tests verify:
- Equal distribution sums to the carcass height for every drawer quantity
- Single-slot edits redistribute the remainder or reset
- Proportional rescaling with and without per-slot constraints
- Validation messages and summary figures
"""

import logging
import random

import pytest

from cabinetry.domain.services.height_distribution import (
    MAX_RESCALE_ITERATIONS,
    MIN_HEIGHT,
    HeightConstraint,
    HeightState,
    calculate_optimal_heights,
    height_summary,
    is_optimal_distribution,
    proportional_height,
    reset_to_optimal,
    scale_proportionally,
    scale_proportionally_detailed,
    update_height,
    validate_heights,
    validate_total_max_height,
    validate_total_min_height,
)


class TestCalculateOptimalHeights:
    """Tests for calculate_optimal_heights."""

    def test_equal_split(self) -> None:
        """A 720mm carcass with 3 drawers gives three 240mm drawers."""
        assert calculate_optimal_heights(720, 3) == [240.0, 240.0, 240.0]

    def test_zero_quantity_is_empty(self) -> None:
        """No drawers means no heights."""
        assert calculate_optimal_heights(720, 0) == []

    def test_negative_quantity_is_empty(self) -> None:
        assert calculate_optimal_heights(720, -2) == []

    def test_top_slot_absorbs_rounding_residual(self) -> None:
        """100 / 6 rounds up to 16.7; the top drawer takes the difference."""
        heights = calculate_optimal_heights(100, 6)
        assert heights[:5] == [16.7] * 5
        assert heights[5] == pytest.approx(16.5)

    @pytest.mark.parametrize("quantity", [1, 2, 3, 4, 5, 6])
    @pytest.mark.parametrize("carcass_height", [100, 333, 500, 720, 721.5, 873, 2100])
    def test_sum_matches_carcass_height(
        self, carcass_height: float, quantity: int
    ) -> None:
        """Heights always sum to the carcass height within 0.1mm."""
        heights = calculate_optimal_heights(carcass_height, quantity)
        assert len(heights) == quantity
        assert sum(heights) == pytest.approx(carcass_height, abs=0.1)

    def test_repeated_calls_are_identical(self) -> None:
        """The calculation is pure."""
        first = calculate_optimal_heights(873, 7)
        second = calculate_optimal_heights(873, 7)
        assert first == second

    def test_reset_to_optimal_matches(self) -> None:
        assert reset_to_optimal(700, 4) == calculate_optimal_heights(700, 4)

    def test_update_reset_uses_reset_to_optimal(self) -> None:
        update = update_height(HeightState(700, 4, (175, 175, 175, 175)), 1, 700)

        assert update.was_reset is True
        assert update.heights == reset_to_optimal(700, 4)

    def test_proportional_height(self) -> None:
        assert proportional_height(720, 3) == 240.0
        assert proportional_height(100, 3) == 33.3
        assert proportional_height(720, 0) == 0.0


class TestUpdateHeight:
    """Tests for update_height."""

    def test_redistributes_remainder_equally(self) -> None:
        """Setting the bottom drawer to 300 splits the other 420mm in two."""
        state = HeightState(720, 3, (240, 240, 240))

        result = update_height(state, 0, 300)

        assert result.heights == [300.0, 210.0, 210.0]
        assert result.changed_index == 0
        assert result.was_reset is False

    def test_last_other_slot_absorbs_residual(self) -> None:
        """400 / 3 rounds to 133.3; the last unedited drawer takes 133.4."""
        state = HeightState(700, 4, (175, 175, 175, 175))

        result = update_height(state, 1, 300)

        assert result.heights[0] == 133.3
        assert result.heights[1] == 300.0
        assert result.heights[2] == 133.3
        assert result.heights[3] == pytest.approx(133.4)
        assert sum(result.heights) == pytest.approx(700, abs=0.1)
        assert result.was_reset is False

    def test_new_height_is_rounded(self) -> None:
        state = HeightState(720, 2, (360, 360))

        result = update_height(state, 0, 300.04)

        assert result.heights[0] == 300.0
        assert result.heights[1] == 420.0

    def test_new_height_clamped_to_minimum(self) -> None:
        """Heights below 50mm are raised to 50mm before redistributing."""
        state = HeightState(720, 3, (240, 240, 240))

        result = update_height(state, 2, 10)

        assert result.heights == [335.0, 335.0, 50.0]
        assert result.was_reset is False

    def test_full_height_leaves_no_room_and_resets(self, caplog) -> None:
        """A drawer taking the whole carcass forces a reset."""
        state = HeightState(720, 3, (240, 240, 240))

        with caplog.at_level(logging.WARNING):
            result = update_height(state, 1, 1000)

        assert result.was_reset is True
        assert result.heights == [240.0, 240.0, 240.0]
        assert "reset" in caplog.text

    def test_floored_share_overshoot_resets(self, caplog) -> None:
        """Others floored at 50mm would overflow a 300mm carcass."""
        state = HeightState(300, 6, (50, 50, 50, 50, 50, 50))

        with caplog.at_level(logging.WARNING):
            result = update_height(state, 0, 100)

        assert result.was_reset is True
        assert result.heights == [50.0] * 6
        assert "exceeds carcass height" in caplog.text

    def test_single_drawer_must_fill_carcass(self) -> None:
        """Editing a lone drawer to anything but the carcass height resets it."""
        state = HeightState(720, 1, (720,))

        result = update_height(state, 0, 500)

        assert result.was_reset is True
        assert result.heights == [720.0]

    def test_single_drawer_keeps_full_height(self) -> None:
        state = HeightState(720, 1, (720,))

        result = update_height(state, 0, 720)

        assert result.was_reset is False
        assert result.heights == [720.0]

    def test_short_height_list_is_padded(self) -> None:
        state = HeightState(720, 3, (240,))

        result = update_height(state, 0, 320)

        assert result.heights == [320.0, 200.0, 200.0]

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range_index_raises(self, index: int) -> None:
        state = HeightState(720, 3, (240, 240, 240))

        with pytest.raises(IndexError, match="out of range"):
            update_height(state, index, 300)

    @pytest.mark.parametrize("quantity", [2, 3, 4, 5, 6])
    @pytest.mark.parametrize("carcass_height", [300, 450, 720, 900])
    def test_minimum_height_or_reset(self, carcass_height: float, quantity: int) -> None:
        """Every slot is at least 50mm unless the heights were reset."""
        state = HeightState(
            carcass_height,
            quantity,
            tuple(calculate_optimal_heights(carcass_height, quantity)),
        )
        for index in range(quantity):
            for requested in (0, 49, 50, 75.5, 120, 260, carcass_height - 60, 5000):
                result = update_height(state, index, requested)
                assert result.was_reset or all(h >= MIN_HEIGHT for h in result.heights)
                assert sum(result.heights) == pytest.approx(carcass_height, abs=0.1)


class TestScaleProportionally:
    """Tests for scale_proportionally and scale_proportionally_detailed."""

    def test_scales_without_constraints(self) -> None:
        assert scale_proportionally([240, 240, 240], 720, 900) == [300.0, 300.0, 300.0]

    def test_keeps_proportions(self) -> None:
        assert scale_proportionally([100, 300], 400, 800) == [200.0, 600.0]

    def test_zero_old_total_returns_input(self) -> None:
        """No division by zero: heights come back unchanged."""
        assert scale_proportionally([100, 200], 0, 720) == [100.0, 200.0]

    def test_negative_old_total_returns_input(self) -> None:
        result = scale_proportionally_detailed([100, 200], -5, 720)
        assert result.heights == [100.0, 200.0]
        assert result.iterations == 0

    def test_empty_input(self) -> None:
        assert scale_proportionally([], 720, 900) == []

    def test_rounding_overshoot_resets(self, caplog) -> None:
        """166.7 x 3 exceeds 500, so the heights reset to equal shares."""
        with caplog.at_level(logging.WARNING):
            result = scale_proportionally([100, 100, 100], 300, 500)

        assert sum(result) == pytest.approx(500, abs=0.1)
        assert result == calculate_optimal_heights(500, 3)
        assert "exceed" in caplog.text

    def test_constraints_satisfied_first_pass(self) -> None:
        result = scale_proportionally_detailed(
            [100, 620], 720, 360, [HeightConstraint(), HeightConstraint()]
        )

        assert result.heights == [50.0, 310.0]
        assert result.converged is True
        assert result.iterations == 1

    def test_clamped_slot_hands_deficit_to_others(self) -> None:
        """A slot pushed below 50mm is raised; the other slot pays for it."""
        result = scale_proportionally_detailed(
            [60, 660], 720, 360, [HeightConstraint(), HeightConstraint()]
        )

        assert result.heights == [50.0, 310.0]
        assert result.converged is True
        assert result.iterations == 2
        assert sum(result.heights) == pytest.approx(360)

    def test_maximum_constraint_hands_surplus_to_others(self) -> None:
        constraints = [HeightConstraint(max=200), HeightConstraint(), HeightConstraint()]

        result = scale_proportionally_detailed([200, 200, 200], 600, 900, constraints)

        assert result.heights[0] == 200.0
        assert result.heights[1] == pytest.approx(350.0)
        assert result.heights[2] == pytest.approx(350.0)
        assert result.converged is True

    def test_all_slots_locked_abandons(self, caplog) -> None:
        """When nothing is free to move the remainder is dropped and logged."""
        constraints = [HeightConstraint(min=100, max=100), HeightConstraint(min=100, max=100)]

        with caplog.at_level(logging.WARNING):
            result = scale_proportionally_detailed([100, 100], 200, 300, constraints)

        assert result.abandoned is True
        assert result.converged is False
        assert sum(result.heights) == pytest.approx(300)
        assert "all drawers are constrained" in caplog.text

    @pytest.mark.parametrize("seed", range(25))
    def test_terminates_within_iteration_cap(self, seed: int) -> None:
        """Arbitrary constraint sets converge or give up within the cap."""
        rng = random.Random(seed)
        quantity = rng.randint(1, 6)
        old_total = rng.uniform(300, 2400)
        new_total = rng.uniform(300, 2400)
        heights = calculate_optimal_heights(old_total, quantity)
        constraints = []
        for _ in range(quantity):
            low = rng.uniform(20, 200)
            high = low + rng.uniform(0, 800)
            constraints.append(HeightConstraint(min=low, max=high))

        result = scale_proportionally_detailed(heights, old_total, new_total, constraints)

        assert 1 <= result.iterations <= MAX_RESCALE_ITERATIONS
        assert len(result.heights) == quantity
        if result.iterations < MAX_RESCALE_ITERATIONS:
            assert result.converged or result.abandoned
        assert sum(result.heights) == pytest.approx(new_total, abs=0.1)


class TestHeightConstraint:
    """Tests for HeightConstraint."""

    def test_defaults(self) -> None:
        constraint = HeightConstraint()
        assert constraint.min == MIN_HEIGHT
        assert constraint.max == float("inf")

    def test_min_above_max_raises(self) -> None:
        with pytest.raises(ValueError, match="exceeds max"):
            HeightConstraint(min=300, max=100)


class TestValidateHeights:
    """Tests for validate_heights."""

    def test_valid_heights(self) -> None:
        result = validate_heights(HeightState(720, 3, (240, 240, 240)))

        assert result.is_valid is True
        assert result.errors == []
        assert result.total_height == 720
        assert result.remaining_height == 0

    def test_total_exceeds_carcass(self) -> None:
        result = validate_heights(HeightState(720, 3, (240, 240, 300)))

        assert result.is_valid is False
        assert result.errors == [
            "Total drawer height (780.0mm) exceeds carcass height (720mm)"
        ]
        assert result.remaining_height == -60

    def test_below_minimum(self) -> None:
        result = validate_heights(HeightState(720, 3, (40, 340, 340)))

        assert result.errors == ["All drawer heights must be at least 50mm"]

    def test_length_mismatch(self) -> None:
        result = validate_heights(HeightState(720, 3, (360, 360)))

        assert result.errors == [
            "Height array length (2) doesn't match drawer quantity (3)"
        ]

    def test_no_drawers(self) -> None:
        result = validate_heights(HeightState(720, 0, ()))

        assert result.errors == ["At least one drawer is required"]

    def test_heights_coerced_to_tuple(self) -> None:
        state = HeightState(720, 2, [360, 360])
        assert state.heights == (360, 360)


class TestConstraintTotals:
    """Tests for validate_total_min_height and validate_total_max_height."""

    def test_minimums_fit(self) -> None:
        assert validate_total_min_height([HeightConstraint()] * 3, 720) is True

    def test_minimums_do_not_fit(self) -> None:
        assert validate_total_min_height([HeightConstraint(min=300)] * 3, 720) is False

    def test_unbounded_maximums_fill(self) -> None:
        assert validate_total_max_height([HeightConstraint()] * 3, 720) is True

    def test_maximums_too_small(self) -> None:
        assert validate_total_max_height([HeightConstraint(max=100)] * 3, 720) is False


class TestSummary:
    """Tests for is_optimal_distribution and height_summary."""

    def test_equal_split_is_optimal(self) -> None:
        assert is_optimal_distribution(HeightState(720, 3, (240, 240, 240))) is True

    def test_edited_split_is_not_optimal(self) -> None:
        assert is_optimal_distribution(HeightState(720, 3, (300, 210, 210))) is False

    def test_length_mismatch_is_not_optimal(self) -> None:
        assert is_optimal_distribution(HeightState(720, 3, (360, 360))) is False

    def test_summary_figures(self) -> None:
        summary = height_summary(HeightState(720, 3, (200, 200, 200)))

        assert summary.total_used == 600
        assert summary.remaining_height == 120
        assert summary.is_optimal is False
        assert summary.exceeds_limit is False
        assert summary.height_percentage == pytest.approx(83.333, abs=0.001)

    def test_summary_flags_overflow(self) -> None:
        summary = height_summary(HeightState(720, 2, (400, 400)))
        assert summary.exceeds_limit is True
