"""Drawer height distribution.

Converts a total length (the carcass height) and a slot count (the drawer
quantity) into per-slot heights that always sum to the total within
``SUM_TOLERANCE``. The solver is greedy: edits are redistributed equally, and
whenever an edit cannot be satisfied locally the whole set is reset to an
equal split. Resets are reported through ``HeightUpdate.was_reset`` and a
``WARNING`` log record; they are never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from .rounding import clamp, distribute_equally, round_to_decimal

logger = logging.getLogger(__name__)

__all__ = [
    "DECIMAL_PRECISION",
    "MAX_RESCALE_ITERATIONS",
    "MIN_HEIGHT",
    "SUM_TOLERANCE",
    "HeightConstraint",
    "HeightState",
    "HeightSummary",
    "HeightUpdate",
    "HeightValidation",
    "RescaleResult",
    "calculate_optimal_heights",
    "height_summary",
    "is_optimal_distribution",
    "proportional_height",
    "reset_to_optimal",
    "scale_proportionally",
    "scale_proportionally_detailed",
    "update_height",
    "validate_heights",
    "validate_total_max_height",
    "validate_total_min_height",
]

MIN_HEIGHT = 50.0
DECIMAL_PRECISION = 1
MAX_RESCALE_ITERATIONS = 10
SUM_TOLERANCE = 0.1

# Float noise allowed when comparing sums of 1-decimal values
_EPSILON = 1e-6


@dataclass(frozen=True)
class HeightState:
    """Snapshot of one carcass's drawer heights.

    Attributes:
        carcass_height: Total length to distribute (mm).
        quantity: Number of slots.
        heights: Current slot heights, bottom drawer first.
    """

    carcass_height: float
    quantity: int
    heights: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "heights", tuple(self.heights))


@dataclass(frozen=True)
class HeightConstraint:
    """Per-slot bounds, typically supplied by the product catalogue.

    Attributes:
        min: Smallest allowed height for the slot.
        max: Largest allowed height for the slot.
        dim_id: Identifier of the external dimension driving the slot.
    """

    min: float = MIN_HEIGHT
    max: float = float("inf")
    dim_id: str = ""

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"Constraint min ({self.min}) exceeds max ({self.max})")


@dataclass(frozen=True)
class HeightUpdate:
    """Result of an edit to the drawer heights.

    Attributes:
        heights: The new slot heights.
        changed_index: Slot the caller edited (-1 for quantity changes).
        was_reset: True when the edit could not be satisfied and the heights
            were replaced by an equal distribution.
    """

    heights: list[float]
    changed_index: int
    was_reset: bool = False


@dataclass(frozen=True)
class HeightValidation:
    """Outcome of :func:`validate_heights`."""

    is_valid: bool
    total_height: float
    remaining_height: float
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RescaleResult:
    """Detailed outcome of a proportional rescale.

    Attributes:
        heights: Rescaled slot heights.
        iterations: Clamp-and-redistribute passes performed.
        converged: True when a pass found nothing left to redistribute.
        abandoned: True when every slot was locked before convergence and the
            remaining adjustment was dropped.
    """

    heights: list[float]
    iterations: int = 0
    converged: bool = True
    abandoned: bool = False


@dataclass(frozen=True)
class HeightSummary:
    """Aggregate figures for displaying a drawer stack."""

    total_used: float
    remaining_height: float
    is_optimal: bool
    exceeds_limit: bool
    height_percentage: float


def calculate_optimal_heights(carcass_height: float, quantity: int) -> list[float]:
    """Equal distribution of ``carcass_height`` over ``quantity`` slots.

    Each share is rounded to one decimal; the top slot absorbs the
    rounding residual so the list sums to the carcass height.

    Examples:
        >>> calculate_optimal_heights(720, 3)
        [240.0, 240.0, 240.0]
        >>> calculate_optimal_heights(100, 6)
        [16.7, 16.7, 16.7, 16.7, 16.7, 16.5]
        >>> calculate_optimal_heights(720, 0)
        []
    """
    if quantity <= 0:
        return []
    heights = distribute_equally(carcass_height, quantity)
    _absorb_residual(heights, carcass_height, quantity - 1)
    return heights


def _absorb_residual(heights: list[float], total: float, index: int) -> None:
    residual = total - sum(heights)
    if abs(residual) > _EPSILON:
        heights[index] = round_to_decimal(heights[index] + residual, DECIMAL_PRECISION)


def reset_to_optimal(carcass_height: float, quantity: int) -> list[float]:
    """Equal distribution that replaces heights an edit could not satisfy.

    Every reset path (:func:`update_height` and the drawer policies in
    :mod:`.drawer_layout`) goes through here.
    """
    return calculate_optimal_heights(carcass_height, quantity)


def proportional_height(carcass_height: float, quantity: int) -> float:
    """Height of one slot in an equal distribution (0 for no slots)."""
    if quantity <= 0:
        return 0.0
    return round_to_decimal(carcass_height / quantity, DECIMAL_PRECISION)


def _reset(state: HeightState, changed_index: int, reason: str) -> HeightUpdate:
    logger.warning(
        f"Drawer heights reset to equal distribution "
        f"({state.quantity} x {proportional_height(state.carcass_height, state.quantity)}mm): {reason}"
    )
    return HeightUpdate(
        heights=reset_to_optimal(state.carcass_height, state.quantity),
        changed_index=changed_index,
        was_reset=True,
    )


def update_height(
    state: HeightState, changed_index: int, new_height: float
) -> HeightUpdate:
    """Set one slot and redistribute the rest equally.

    The new height is rounded to one decimal and clamped to
    [MIN_HEIGHT, carcass height]. The remaining length is split equally
    between the other slots, each floored at MIN_HEIGHT. When no length
    remains, or the floored split overshoots the carcass height, the whole
    state is reset to :func:`calculate_optimal_heights`.

    A single drawer always fills the carcass: editing it to anything else
    resets it.

    Args:
        state: Current heights.
        changed_index: Slot being edited.
        new_height: Requested height for that slot.

    Returns:
        HeightUpdate with the new heights and ``was_reset``.

    Raises:
        IndexError: If ``changed_index`` is not a valid slot.

    Example:
        >>> state = HeightState(720, 3, (240, 240, 240))
        >>> update_height(state, 0, 300).heights
        [300.0, 210.0, 210.0]
    """
    if not 0 <= changed_index < state.quantity:
        raise IndexError(
            f"Drawer index {changed_index} out of range for {state.quantity} drawers"
        )

    validated = clamp(
        round_to_decimal(new_height, DECIMAL_PRECISION), MIN_HEIGHT, state.carcass_height
    )

    heights = [float(h) for h in state.heights[: state.quantity]]
    heights.extend([0.0] * (state.quantity - len(heights)))
    heights[changed_index] = validated

    remaining = state.carcass_height - validated
    others = state.quantity - 1

    if others == 0:
        if abs(remaining) > _EPSILON:
            return _reset(state, changed_index, "a single drawer must fill the carcass")
        return HeightUpdate(heights=heights, changed_index=changed_index)

    if remaining <= 0:
        return _reset(
            state, changed_index, f"drawer {changed_index} leaves no room for the others"
        )

    share = round_to_decimal(remaining / others, DECIMAL_PRECISION)
    floored = share < MIN_HEIGHT
    share = max(share, MIN_HEIGHT)
    for i in range(state.quantity):
        if i != changed_index:
            heights[i] = share
    if not floored:
        last_other = max(i for i in range(state.quantity) if i != changed_index)
        _absorb_residual(heights, state.carcass_height, last_other)

    total = sum(heights)
    if min(heights) < MIN_HEIGHT:
        return _reset(
            state, changed_index, f"redistribution leaves a drawer below {MIN_HEIGHT:g}mm"
        )
    if total > state.carcass_height + _EPSILON:
        return _reset(
            state,
            changed_index,
            f"total {round_to_decimal(total)}mm exceeds carcass height {state.carcass_height}mm",
        )

    logger.debug(f"Drawer {changed_index} set to {validated}mm, others {share}mm")
    return HeightUpdate(heights=heights, changed_index=changed_index)


def _bounds(
    constraints: Sequence[HeightConstraint], index: int, new_total: float
) -> tuple[float, float]:
    if index < len(constraints):
        c = constraints[index]
        return c.min, min(c.max, new_total)
    return MIN_HEIGHT, new_total


def scale_proportionally_detailed(
    heights: Sequence[float],
    old_total: float,
    new_total: float,
    constraints: Sequence[HeightConstraint] = (),
) -> RescaleResult:
    """Rescale heights to a new total, honouring per-slot bounds.

    Every slot is multiplied by ``new_total / old_total``. Without
    constraints the scaled heights are returned as they are, or reset to an
    equal distribution if rounding pushed them past ``new_total``.

    With constraints, up to ``MAX_RESCALE_ITERATIONS`` passes clamp slots
    that fall outside their [min, max] and hand the deficit or surplus to the
    unclamped slots in proportion to their heights. When every slot is
    clamped the remainder is abandoned (logged). Finally the largest slot
    absorbs any rounding residual so the heights sum to ``new_total``.

    Slots without an explicit constraint use [MIN_HEIGHT, new_total].

    Args:
        heights: Current slot heights.
        old_total: Total the heights were laid out for.
        new_total: Total to scale to.
        constraints: Optional per-slot bounds, by index.

    Returns:
        RescaleResult with the heights and solver diagnostics. Empty input or
        ``old_total <= 0`` returns the heights unchanged.
    """
    current = [float(h) for h in heights]
    if not current or old_total <= 0:
        return RescaleResult(heights=current, iterations=0)

    ratio = new_total / old_total
    scaled = [round_to_decimal(h * ratio, DECIMAL_PRECISION) for h in current]

    if not constraints:
        if sum(scaled) > new_total + _EPSILON:
            logger.warning(
                f"Scaled drawer heights exceed {new_total}mm, resetting to equal distribution"
            )
            return RescaleResult(
                heights=reset_to_optimal(new_total, len(current))
            )
        return RescaleResult(heights=scaled)

    iterations = 0
    converged = False
    abandoned = False
    while iterations < MAX_RESCALE_ITERATIONS:
        iterations += 1
        deficit = 0.0
        surplus = 0.0
        locked: set[int] = set()

        for i, h in enumerate(scaled):
            low, high = _bounds(constraints, i, new_total)
            if h < low:
                deficit += low - h
                scaled[i] = low
                locked.add(i)
            elif h > high:
                surplus += h - high
                scaled[i] = high
                locked.add(i)

        if abs(deficit - surplus) < SUM_TOLERANCE:
            converged = True
            break

        amount = surplus - deficit
        unlocked = [i for i in range(len(scaled)) if i not in locked]
        if not unlocked:
            logger.warning(
                f"Cannot redistribute {round_to_decimal(amount)}mm: all drawers are constrained"
            )
            abandoned = True
            break

        unlocked_total = sum(scaled[i] for i in unlocked)
        for i in unlocked:
            if unlocked_total <= 0:
                scaled[i] += amount / len(unlocked)
            else:
                scaled[i] += amount * (scaled[i] / unlocked_total)

        scaled = [round_to_decimal(h, DECIMAL_PRECISION) for h in scaled]

    if not converged and not abandoned:
        logger.warning(
            f"Drawer rescale did not converge within {MAX_RESCALE_ITERATIONS} iterations"
        )

    residual = new_total - sum(scaled)
    if abs(residual) > _EPSILON:
        largest = max(range(len(scaled)), key=lambda i: scaled[i])
        scaled[largest] = round_to_decimal(scaled[largest] + residual, DECIMAL_PRECISION)

    return RescaleResult(
        heights=scaled,
        iterations=iterations,
        converged=converged,
        abandoned=abandoned,
    )


def scale_proportionally(
    heights: Sequence[float],
    old_total: float,
    new_total: float,
    constraints: Sequence[HeightConstraint] = (),
) -> list[float]:
    """Rescale heights to ``new_total``; see :func:`scale_proportionally_detailed`."""
    return scale_proportionally_detailed(heights, old_total, new_total, constraints).heights


def validate_heights(state: HeightState) -> HeightValidation:
    """Collect human-readable violations of the drawer height rules.

    Checks that at least one drawer exists, the height count matches the
    quantity, the total fits the carcass and every slot is at least
    MIN_HEIGHT. Never raises.
    """
    errors: list[str] = []

    if state.quantity <= 0:
        errors.append("At least one drawer is required")

    if len(state.heights) != state.quantity:
        errors.append(
            f"Height array length ({len(state.heights)}) doesn't match "
            f"drawer quantity ({state.quantity})"
        )

    total = sum(h or 0.0 for h in state.heights)
    remaining = state.carcass_height - total

    if total > state.carcass_height + _EPSILON:
        errors.append(
            f"Total drawer height ({round_to_decimal(total)}mm) exceeds "
            f"carcass height ({state.carcass_height}mm)"
        )

    if any(h < MIN_HEIGHT for h in state.heights):
        errors.append(f"All drawer heights must be at least {MIN_HEIGHT:g}mm")

    return HeightValidation(
        is_valid=not errors,
        total_height=total,
        remaining_height=remaining,
        errors=errors,
    )


def validate_total_min_height(
    constraints: Sequence[HeightConstraint], carcass_height: float
) -> bool:
    """Whether the slots' minimum heights fit inside the carcass."""
    return sum(c.min or MIN_HEIGHT for c in constraints) <= carcass_height


def validate_total_max_height(
    constraints: Sequence[HeightConstraint], carcass_height: float
) -> bool:
    """Whether the slots can grow enough to fill the carcass."""
    return sum(c.max for c in constraints) >= carcass_height


def is_optimal_distribution(state: HeightState) -> bool:
    """Whether the heights match the equal distribution within 0.1mm."""
    optimal = calculate_optimal_heights(state.carcass_height, state.quantity)
    if len(optimal) != len(state.heights):
        return False
    return all(abs(h - o) < SUM_TOLERANCE for h, o in zip(state.heights, optimal))


def height_summary(state: HeightState) -> HeightSummary:
    """Totals for displaying how much of the carcass the drawers use."""
    total = sum(h or 0.0 for h in state.heights)
    percentage = (total / state.carcass_height) * 100 if state.carcass_height else 0.0
    return HeightSummary(
        total_used=total,
        remaining_height=state.carcass_height - total,
        is_optimal=is_optimal_distribution(state),
        exceeds_limit=total > state.carcass_height + _EPSILON,
        height_percentage=percentage,
    )
