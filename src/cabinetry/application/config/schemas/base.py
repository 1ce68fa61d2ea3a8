"""Shared models for carcass configuration schemas.

Enums come straight from the domain layer; they are ``(str, Enum)`` so JSON
strings validate against them directly.
"""

from pydantic import BaseModel, ConfigDict, Field

from cabinetry.domain.value_objects import (
    DEFAULT_DOOR_THICKNESS,
    DEFAULT_PANEL_THICKNESS,
    CabinetType,
    SlabCategory,
)

# Supported schema versions for configuration files
# Version 1.0: Carcass documents and slab merge documents
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Upper bound for any single dimension, in mm
MAX_DIMENSION = 10000.0

CabinetTypeConfig = CabinetType
SlabCategoryConfig = SlabCategory


class DimensionsConfig(BaseModel):
    """Outer carcass dimensions in millimetres."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=MAX_DIMENSION)
    height: float = Field(..., gt=0, le=MAX_DIMENSION)
    depth: float = Field(..., gt=0, le=MAX_DIMENSION)


class MaterialConfig(BaseModel):
    """Carcass material.

    Attributes:
        colour: Hex colour string.
        panel_thickness: Board thickness in mm (1 to 100).
        back_thickness: Optional back thickness; when given it overrides
            ``panel_thickness`` since the two are always kept equal.
        opacity: Display opacity (0 to 1).
        transparent: Whether the material is rendered transparent.
    """

    model_config = ConfigDict(extra="forbid")

    colour: str = Field(default="#ffffff", pattern=r"^#[0-9a-fA-F]{6}$")
    panel_thickness: float = Field(default=DEFAULT_PANEL_THICKNESS, gt=0, le=100)
    back_thickness: float | None = Field(default=None, gt=0, le=100)
    opacity: float = Field(default=0.9, ge=0.0, le=1.0)
    transparent: bool = True


class DoorMaterialConfig(BaseModel):
    """Door front material."""

    model_config = ConfigDict(extra="forbid")

    colour: str = Field(default="#ffffff", pattern=r"^#[0-9a-fA-F]{6}$")
    thickness: float = Field(default=DEFAULT_DOOR_THICKNESS, gt=0, le=100)


class DefaultsConfig(BaseModel):
    """Overrides for the layout defaults; every field is optional."""

    model_config = ConfigDict(extra="forbid")

    kicker_height: float | None = Field(default=None, ge=0, le=1000)
    leg_diameter: float | None = Field(default=None, gt=0, le=500)
    leg_front_setback: float | None = Field(default=None, ge=0, le=1000)
    base_rail_depth: float | None = Field(default=None, ge=0, le=1000)
    shelf_edge_clearance: float | None = Field(default=None, ge=0, le=1000)
    door_gap: float | None = Field(default=None, ge=0, le=50)
    door_clearance: float | None = Field(default=None, ge=0, le=100)
    door_overhang: float | None = Field(default=None, ge=0, le=500)
    wall_cabinet_elevation: float | None = Field(default=None, ge=0, le=MAX_DIMENSION)
    benchtop_thickness: float | None = Field(default=None, gt=0, le=200)
    benchtop_depth_extension: float | None = Field(default=None, ge=0, le=500)
    benchtop_front_overhang: float | None = Field(default=None, ge=0, le=500)
