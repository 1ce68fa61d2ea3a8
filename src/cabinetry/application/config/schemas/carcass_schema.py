"""Carcass document schema.

A carcass document describes one cabinet: its type, outer dimensions,
material and feature selections, plus optional layout default overrides.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cabinetry.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    CabinetTypeConfig,
    DefaultsConfig,
    DimensionsConfig,
    DoorMaterialConfig,
    MaterialConfig,
)
from cabinetry.domain.entities import (
    MAX_DOOR_COUNT,
    MAX_DRAWER_QUANTITY,
    MIN_DOOR_COUNT,
    MIN_DRAWER_QUANTITY,
)

DrawerHeight = Annotated[float, Field(gt=0)]


def check_schema_version(v: str) -> str:
    """Accept supported versions and newer minors of a supported major."""
    if v in SUPPORTED_VERSIONS:
        return v

    major_version = int(v.split(".")[0])
    supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
    if major_version in supported_majors:
        return v

    raise ValueError(
        f"Unsupported schema version '{v}'. "
        f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
    )


class CarcassFeaturesConfig(BaseModel):
    """Shelf, door and drawer selections.

    Attributes:
        shelf_count: Number of shelves (0 to 20).
        shelf_spacing: Maximum shelf spacing in mm.
        door_enabled: Whether doors are fitted.
        door_count: 1 or 2.
        door_material: Door front material.
        overhang_door: Door overhang; defaults to on for top cabinets.
        drawer_enabled: Whether drawers are fitted.
        drawer_quantity: 1 to 6.
        drawer_heights: Saved drawer heights, bottom first. Missing or
            inconsistent lists are replaced by an equal distribution.
    """

    model_config = ConfigDict(extra="forbid")

    shelf_count: int = Field(default=2, ge=0, le=20)
    shelf_spacing: float = Field(default=300.0, gt=0)
    door_enabled: bool = True
    door_count: int = Field(default=2, ge=MIN_DOOR_COUNT, le=MAX_DOOR_COUNT)
    door_material: DoorMaterialConfig = Field(default_factory=DoorMaterialConfig)
    overhang_door: bool | None = None
    drawer_enabled: bool = False
    drawer_quantity: int = Field(
        default=3, ge=MIN_DRAWER_QUANTITY, le=MAX_DRAWER_QUANTITY
    )
    drawer_heights: list[DrawerHeight] = Field(
        default_factory=list, max_length=MAX_DRAWER_QUANTITY
    )


class CarcassDocument(BaseModel):
    """Root model of a carcass configuration file.

    Example:
        >>> doc = CarcassDocument(
        ...     schema_version="1.0",
        ...     cabinet_type="base",
        ...     dimensions=DimensionsConfig(width=600, height=720, depth=560),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    cabinet_type: CabinetTypeConfig
    id: str = ""
    product_id: str = ""
    dimensions: DimensionsConfig
    material: MaterialConfig = Field(default_factory=MaterialConfig)
    config: CarcassFeaturesConfig = Field(default_factory=CarcassFeaturesConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported."""
        return check_schema_version(v)
