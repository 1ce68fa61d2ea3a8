"""Domain services: the pure calculations of the layout engine.

This package provides:
- Rounding helpers shared by every calculation
- Drawer height distribution and rescaling
- Carcass, door and drawer layout resolvers
- Benchtop/kicker merging
- Cut list generation
"""

from .carcass_resolver import CarcassDimensionResolver
from .cut_list import CutListGenerator
from .door_layout import door_dimensions, resolve_doors
from .drawer_layout import (
    DrawerStack,
    change_quantity,
    drawer_width,
    ensure_heights,
    rescale_for_carcass_height,
    resolve_drawers,
)
from .height_distribution import (
    MAX_RESCALE_ITERATIONS,
    MIN_HEIGHT,
    SUM_TOLERANCE,
    HeightConstraint,
    HeightState,
    HeightSummary,
    HeightUpdate,
    HeightValidation,
    RescaleResult,
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
from .merge import (
    MergeResult,
    SlabStore,
    analyze_merge,
    benchtop_depth,
    benchtop_for_cabinet,
    cabinet_number,
    effective_benchtop_span,
    merge_slabs,
)
from .rounding import clamp, round_to_decimal

__all__ = [
    # Rounding
    "clamp",
    "round_to_decimal",
    # Height distribution
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
    # Layout resolvers
    "CarcassDimensionResolver",
    "DrawerStack",
    "change_quantity",
    "door_dimensions",
    "drawer_width",
    "ensure_heights",
    "rescale_for_carcass_height",
    "resolve_doors",
    "resolve_drawers",
    # Merging
    "MergeResult",
    "SlabStore",
    "analyze_merge",
    "benchtop_depth",
    "benchtop_for_cabinet",
    "cabinet_number",
    "effective_benchtop_span",
    "merge_slabs",
    # Cut list
    "CutListGenerator",
]
