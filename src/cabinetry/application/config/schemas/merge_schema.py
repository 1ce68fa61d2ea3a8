"""Slab merge document schema."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cabinetry.application.config.schemas.base import MAX_DIMENSION, SlabCategoryConfig
from cabinetry.application.config.schemas.carcass_schema import check_schema_version


class SlabConfig(BaseModel):
    """One benchtop or kicker placed in room coordinates.

    ``x``, ``y`` and ``z`` are the slab's left, bottom and back faces.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    width: float = Field(..., gt=0, le=MAX_DIMENSION)
    height: float = Field(..., gt=0, le=MAX_DIMENSION)
    depth: float = Field(..., gt=0, le=MAX_DIMENSION)
    material: str = "Unknown"
    product_id: str = ""
    sort_number: int | None = Field(default=None, ge=0)


class SlabMergeDocument(BaseModel):
    """Root model of a merge file: the slabs selected for merging."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    category: SlabCategoryConfig
    slabs: list[SlabConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported."""
        return check_schema_version(v)

    @field_validator("slabs")
    @classmethod
    def validate_unique_ids(cls, v: list[SlabConfig]) -> list[SlabConfig]:
        """Slab ids must be unique."""
        seen: set[str] = set()
        for slab in v:
            if slab.id in seen:
                raise ValueError(f"Duplicate slab id '{slab.id}'")
            seen.add(slab.id)
        return v
