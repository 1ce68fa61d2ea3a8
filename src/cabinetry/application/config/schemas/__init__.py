"""Pydantic schemas for carcass and slab merge documents."""

from cabinetry.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    CabinetTypeConfig,
    DefaultsConfig,
    DimensionsConfig,
    DoorMaterialConfig,
    MaterialConfig,
    SlabCategoryConfig,
)
from cabinetry.application.config.schemas.carcass_schema import (
    CarcassDocument,
    CarcassFeaturesConfig,
)
from cabinetry.application.config.schemas.merge_schema import (
    SlabConfig,
    SlabMergeDocument,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CabinetTypeConfig",
    "CarcassDocument",
    "CarcassFeaturesConfig",
    "DefaultsConfig",
    "DimensionsConfig",
    "DoorMaterialConfig",
    "MaterialConfig",
    "SlabCategoryConfig",
    "SlabConfig",
    "SlabMergeDocument",
]
