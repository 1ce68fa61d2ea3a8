"""Adapters converting validated configuration models into domain objects."""

from cabinetry.application.config.schemas import (
    CarcassDocument,
    DefaultsConfig,
    DimensionsConfig,
    MaterialConfig,
    SlabMergeDocument,
)
from cabinetry.domain.defaults import LayoutDefaults
from cabinetry.domain.entities import CarcassConfig, Slab
from cabinetry.domain.value_objects import (
    CarcassDimensions,
    CarcassMaterial,
    DoorMaterial,
)


def config_to_dimensions(config: DimensionsConfig) -> CarcassDimensions:
    """Convert the dimensions block."""
    return CarcassDimensions(
        width=config.width,
        height=config.height,
        depth=config.depth,
    )


def config_to_material(config: MaterialConfig) -> CarcassMaterial:
    """Convert the material block.

    A ``back_thickness`` overrides ``panel_thickness``, since the two are
    kept equal.
    """
    material = CarcassMaterial(
        colour=config.colour,
        panel_thickness=config.panel_thickness,
        opacity=config.opacity,
        transparent=config.transparent,
    )
    if config.back_thickness is not None:
        material.update(back_thickness=config.back_thickness)
    return material


def config_to_carcass_config(document: CarcassDocument) -> CarcassConfig:
    """Build the domain ``CarcassConfig`` from a carcass document.

    Drawer heights are copied verbatim; the resolver and assembly repair a
    missing or inconsistent list.
    """
    features = document.config
    overrides = {
        "material": config_to_material(document.material),
        "shelf_count": features.shelf_count,
        "shelf_spacing": features.shelf_spacing,
        "door_enabled": features.door_enabled,
        "door_material": DoorMaterial(
            colour=features.door_material.colour,
            thickness=features.door_material.thickness,
        ),
        "door_count": features.door_count,
        "drawer_enabled": features.drawer_enabled,
        "drawer_quantity": features.drawer_quantity,
        "drawer_heights": list(features.drawer_heights),
    }
    if features.overhang_door is not None:
        overrides["overhang_door"] = features.overhang_door
    return CarcassConfig.for_cabinet_type(document.cabinet_type, **overrides)


def config_to_defaults(config: DefaultsConfig) -> LayoutDefaults:
    """Apply the given overrides on top of the standard defaults."""
    return LayoutDefaults(**config.model_dump(exclude_none=True))


def config_to_slabs(document: SlabMergeDocument) -> list[Slab]:
    """Convert the slabs of a merge document, in document order."""
    return [
        Slab(
            slab_id=slab.id,
            category=document.category,
            x=slab.x,
            y=slab.y,
            z=slab.z,
            width=slab.width,
            height=slab.height,
            depth=slab.depth,
            material=slab.material,
            product_id=slab.product_id,
            sort_number=slab.sort_number,
        )
        for slab in document.slabs
    ]
