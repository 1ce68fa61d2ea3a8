"""Value objects for the carcass layout domain.

This module provides the immutable (and the deliberately shared) data types
used throughout the engine. All classes are re-exported from sub-modules for
convenience.
"""

from __future__ import annotations

# Errors
from ._errors import CardinalityError, InvalidDimensionsError

# Panel roles and naming
from ._panels import PART_NAMES, PanelShape, PanelType

# Core geometry
from ._core_geometry import (
    CabinetType,
    CarcassDimensions,
    CutPiece,
    Position3D,
)

# Materials
from ._materials import (
    DEFAULT_DOOR_THICKNESS,
    DEFAULT_PANEL_THICKNESS,
    CarcassMaterial,
    DoorMaterial,
)

# Merging
from ._merge import MergeWarning, MergeWarningType, SlabCategory

__all__ = [
    # Errors
    "CardinalityError",
    "InvalidDimensionsError",
    # Panels
    "PART_NAMES",
    "PanelShape",
    "PanelType",
    # Core geometry
    "CabinetType",
    "CarcassDimensions",
    "CutPiece",
    "Position3D",
    # Materials
    "DEFAULT_DOOR_THICKNESS",
    "DEFAULT_PANEL_THICKNESS",
    "CarcassMaterial",
    "DoorMaterial",
    # Merging
    "MergeWarning",
    "MergeWarningType",
    "SlabCategory",
]
