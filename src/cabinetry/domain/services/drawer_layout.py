"""Drawer layout resolver.

Drawer fronts stack contiguously from the bottom of the carcass to the top in
slot order. Every call repositions the whole stack, since each drawer's y
offset depends on all the heights below it.

The height-list helpers here are the drawer-specific policies built on top of
:mod:`.height_distribution`: growing or shrinking the quantity, filling in a
missing list, and following a carcass height change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..entities import PanelDescriptor, check_drawer_quantity
from ..value_objects import CarcassMaterial, PanelType, Position3D
from .height_distribution import (
    SUM_TOLERANCE,
    HeightConstraint,
    HeightState,
    HeightSummary,
    HeightUpdate,
    HeightValidation,
    height_summary,
    proportional_height,
    reset_to_optimal,
    scale_proportionally_detailed,
    validate_heights,
)

logger = logging.getLogger(__name__)

__all__ = [
    "CARCASS_HEIGHT_TOLERANCE",
    "DrawerStack",
    "change_quantity",
    "drawer_width",
    "ensure_heights",
    "rescale_for_carcass_height",
    "resolve_drawers",
]

# Post-rescale check tolerance when following a carcass height change
CARCASS_HEIGHT_TOLERANCE = 0.5


def drawer_width(width: float, thickness: float) -> float:
    """Drawer front width: the opening between the two end panels."""
    return width - 2 * thickness


def resolve_drawers(
    heights: Sequence[float],
    width: float,
    depth: float,
    thickness: float,
    material: CarcassMaterial | None = None,
) -> list[PanelDescriptor]:
    """Resolve one drawer front per height, stacked bottom to top.

    Drawer ``i`` spans y = sum(heights[:i]) to sum(heights[:i + 1]). Fronts
    span the full carcass depth and sit between the end panels.

    Args:
        heights: Drawer heights, bottom drawer first.
        width: Carcass width.
        depth: Carcass depth.
        thickness: End panel thickness.
        material: Material shared with the fronts.

    Returns:
        Drawer front descriptors in slot order.
    """
    front_width = drawer_width(width, thickness)
    drawers = []
    bottom = 0.0
    for i, height in enumerate(heights):
        drawers.append(
            PanelDescriptor(
                panel_type=PanelType.DRAWER_FRONT,
                width=front_width,
                height=height,
                depth=depth,
                position=Position3D(width / 2, bottom + height / 2, depth / 2),
                material=material,
                thickness_axis="z",
                index=i,
                name=f"drawer {i + 1}",
            )
        )
        bottom += height
    return drawers


def change_quantity(
    heights: Sequence[float], carcass_height: float, new_quantity: int
) -> HeightUpdate:
    """Grow or shrink the drawer list to ``new_quantity`` slots.

    Existing heights are kept. New slots get an equal share of the carcass
    height; shrinking truncates to the first ``new_quantity`` heights. When
    the result no longer sums to the carcass height the whole list resets to
    an equal distribution.

    Raises:
        CardinalityError: If ``new_quantity`` is outside 1..6.
    """
    check_drawer_quantity(new_quantity)

    current = [float(h) for h in heights]
    share = proportional_height(carcass_height, new_quantity)
    if new_quantity > len(current):
        result = current + [share] * (new_quantity - len(current))
    else:
        result = current[:new_quantity]

    if abs(sum(result) - carcass_height) > SUM_TOLERANCE:
        logger.warning(
            f"Drawer quantity change to {new_quantity} breaks the "
            f"{carcass_height}mm total, resetting to equal distribution"
        )
        return HeightUpdate(
            heights=reset_to_optimal(carcass_height, new_quantity),
            changed_index=-1,
            was_reset=True,
        )

    return HeightUpdate(heights=result, changed_index=-1)


def ensure_heights(
    heights: Sequence[float], carcass_height: float, quantity: int
) -> HeightUpdate:
    """Return a height list matching ``quantity`` that fills the carcass.

    A list of the wrong length is replaced by an equal distribution, as is a
    list whose total misses the carcass height by more than
    ``SUM_TOLERANCE`` in either direction.
    """
    current = [float(h) for h in heights]
    if len(current) != quantity:
        return HeightUpdate(
            heights=reset_to_optimal(carcass_height, quantity),
            changed_index=-1,
            was_reset=bool(current),
        )

    total = sum(current)
    if abs(total - carcass_height) > SUM_TOLERANCE:
        verb = "exceeds" if total > carcass_height else "falls short of"
        logger.warning(
            f"Drawer heights total {total}mm {verb} carcass height "
            f"{carcass_height}mm, resetting to equal distribution"
        )
        return HeightUpdate(
            heights=reset_to_optimal(carcass_height, quantity),
            changed_index=-1,
            was_reset=True,
        )

    return HeightUpdate(heights=current, changed_index=-1)


def rescale_for_carcass_height(
    heights: Sequence[float],
    old_height: float,
    new_height: float,
    constraints: Sequence[HeightConstraint] | None = None,
) -> HeightUpdate:
    """Follow a carcass height change, keeping the drawers' proportions.

    Heights are rescaled with per-slot constraints (MIN_HEIGHT floor by
    default). The list resets to an equal distribution when the solver
    abandons the rescale because every slot is constrained, when a slot ends
    up below its minimum, or when the total misses the new carcass height by
    more than ``CARCASS_HEIGHT_TOLERANCE``.

    Example:
        >>> rescale_for_carcass_height([120.0] * 6, 720, 200).was_reset
        True
    """
    quantity = len(heights)
    if quantity == 0:
        return HeightUpdate(heights=[], changed_index=-1)

    if constraints is None:
        constraints = [HeightConstraint(max=new_height) for _ in range(quantity)]

    result = scale_proportionally_detailed(heights, old_height, new_height, constraints)
    scaled = result.heights
    total = sum(scaled)

    reason = None
    if result.abandoned:
        reason = "every drawer is at its limit"
    elif any(h <= 0 or h < c.min for h, c in zip(scaled, constraints)):
        reason = "a drawer falls below its minimum height"
    elif abs(total - new_height) > CARCASS_HEIGHT_TOLERANCE:
        reason = f"rescaled total {total}mm misses the carcass height"

    if reason is not None:
        logger.warning(
            f"Drawer heights cannot follow a {new_height}mm carcass ({reason}), "
            f"resetting to equal distribution"
        )
        return HeightUpdate(
            heights=reset_to_optimal(new_height, quantity),
            changed_index=-1,
            was_reset=True,
        )

    logger.debug(f"Drawer heights rescaled from {old_height}mm to {new_height}mm")
    return HeightUpdate(heights=scaled, changed_index=-1)


@dataclass(frozen=True)
class DrawerStack:
    """Drawer fronts of one carcass together with their height diagnostics.

    Attributes:
        carcass_height: Height the drawers fill.
        heights: Drawer heights, bottom drawer first.
        fronts: Resolved drawer front descriptors.
        validation: Rule violations of the current heights.
        summary: Totals for display.
    """

    carcass_height: float
    heights: tuple[float, ...]
    fronts: tuple[PanelDescriptor, ...]
    validation: HeightValidation
    summary: HeightSummary

    @classmethod
    def build(
        cls,
        heights: Sequence[float],
        width: float,
        height: float,
        depth: float,
        thickness: float,
        material: CarcassMaterial | None = None,
    ) -> "DrawerStack":
        """Resolve the fronts and diagnostics for ``heights``."""
        state = HeightState(height, len(heights), tuple(heights))
        return cls(
            carcass_height=height,
            heights=tuple(heights),
            fronts=tuple(resolve_drawers(heights, width, depth, thickness, material)),
            validation=validate_heights(state),
            summary=height_summary(state),
        )
