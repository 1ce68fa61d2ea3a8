"""Domain layer - the carcass layout engine."""

from .assembly import CarcassAssembly
from .defaults import LayoutDefaults
from .entities import CarcassConfig, CarcassLayout, PanelDescriptor, Slab
from .services import (
    CarcassDimensionResolver,
    CutListGenerator,
    analyze_merge,
    calculate_optimal_heights,
    merge_slabs,
    resolve_doors,
    resolve_drawers,
    scale_proportionally,
    update_height,
    validate_heights,
)
from .value_objects import (
    CabinetType,
    CardinalityError,
    CarcassDimensions,
    CarcassMaterial,
    CutPiece,
    DoorMaterial,
    InvalidDimensionsError,
    MergeWarning,
    PanelType,
    Position3D,
    SlabCategory,
)
from .views import ViewSet, apply_kicker_height

__all__ = [
    "CabinetType",
    "CardinalityError",
    "CarcassAssembly",
    "CarcassConfig",
    "CarcassDimensionResolver",
    "CarcassDimensions",
    "CarcassLayout",
    "CarcassMaterial",
    "CutListGenerator",
    "CutPiece",
    "DoorMaterial",
    "InvalidDimensionsError",
    "LayoutDefaults",
    "MergeWarning",
    "PanelDescriptor",
    "PanelType",
    "Position3D",
    "Slab",
    "SlabCategory",
    "ViewSet",
    "analyze_merge",
    "apply_kicker_height",
    "calculate_optimal_heights",
    "merge_slabs",
    "resolve_doors",
    "resolve_drawers",
    "scale_proportionally",
    "update_height",
    "validate_heights",
]
