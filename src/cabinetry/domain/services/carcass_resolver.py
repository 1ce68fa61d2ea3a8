"""Carcass dimension resolver.

Derives every structural panel of a carcass (ends, back, bottom, top, base
rail, shelves and legs) from the outer dimensions and the material
thickness, then delegates to the door and drawer resolvers. Each call
returns a complete new :class:`CarcassLayout`; nothing is patched in place.

Coordinates are carcass-local with the origin at the back-bottom-left
corner: x along the width, y up the height, z towards the front.
"""

from __future__ import annotations

import logging

from ..defaults import LayoutDefaults
from ..entities import CarcassConfig, CarcassLayout, PanelDescriptor
from ..value_objects import (
    CabinetType,
    CarcassDimensions,
    CarcassMaterial,
    InvalidDimensionsError,
    PanelShape,
    PanelType,
    Position3D,
)
from .door_layout import resolve_doors
from .drawer_layout import ensure_heights, resolve_drawers

logger = logging.getLogger(__name__)

__all__ = ["LEG_NAMES", "CarcassDimensionResolver"]

LEG_NAMES = ("frontLeft", "frontRight", "backLeft", "backRight")


class CarcassDimensionResolver:
    """Resolves the full panel tree of a carcass.

    Args:
        defaults: Fixed dimensions (kicker height, leg size, clearances).
            A different kicker height means a different resolver; see
            :meth:`LayoutDefaults.with_kicker_height`.
    """

    def __init__(self, defaults: LayoutDefaults | None = None) -> None:
        self.defaults = defaults or LayoutDefaults()

    def resolve(
        self,
        cabinet_type: CabinetType,
        dimensions: CarcassDimensions,
        config: CarcassConfig,
        strict: bool = False,
    ) -> CarcassLayout:
        """Resolve every part of one carcass.

        Degenerate dimensions (any of width, height or depth no larger than
        two panel thicknesses) produce zero or negative panel sizes unless
        ``strict`` is set.

        Args:
            cabinet_type: Top, base or tall.
            dimensions: Outer carcass dimensions.
            config: Material and feature selections. Not modified.
            strict: Raise instead of passing degenerate geometry through.

        Returns:
            The complete layout, structural panels first, then doors and
            drawer fronts when enabled.

        Raises:
            InvalidDimensionsError: In strict mode, if the carcass is too small
                for its panels.
        """
        material = config.material
        t = material.thickness

        if strict:
            self.check_dimensions(dimensions, t)

        panels: list[PanelDescriptor] = [
            *self.end_panels(dimensions, material),
            self.back_panel(dimensions, material),
            self.bottom_panel(dimensions, material),
            self.top_panel(cabinet_type, dimensions, material),
        ]
        if cabinet_type == CabinetType.BASE:
            panels.append(self.base_rail(dimensions, material))
        panels.extend(
            self.shelves(dimensions, material, config.shelf_count, config.shelf_spacing)
        )
        if cabinet_type.has_legs:
            panels.extend(self.legs(dimensions, material))

        if config.door_enabled:
            panels.extend(
                resolve_doors(
                    cabinet_type,
                    dimensions.width,
                    dimensions.height,
                    dimensions.depth,
                    door_thickness=config.door_material.thickness,
                    door_count=config.door_count,
                    gap=self.defaults.door_gap,
                    overhang=config.overhang_door,
                    clearance=self.defaults.door_clearance,
                    overhang_extension=self.defaults.door_overhang,
                    material=config.door_material,
                )
            )

        drawer_heights: tuple[float, ...] = ()
        if config.drawer_enabled:
            heights = ensure_heights(
                config.drawer_heights, dimensions.height, config.drawer_quantity
            ).heights
            drawer_heights = tuple(heights)
            panels.extend(
                resolve_drawers(
                    heights, dimensions.width, dimensions.depth, t, material=material
                )
            )

        logger.debug(
            f"Resolved {cabinet_type.value} carcass "
            f"{dimensions.width}x{dimensions.height}x{dimensions.depth}: "
            f"{len(panels)} parts"
        )

        return CarcassLayout(
            cabinet_type=cabinet_type,
            dimensions=dimensions,
            elevation=self.elevation(cabinet_type),
            panels=tuple(panels),
            drawer_heights=drawer_heights,
        )

    @staticmethod
    def check_dimensions(dimensions: CarcassDimensions, thickness: float) -> None:
        """Raise ``InvalidDimensionsError`` if any dimension is <= 2 thicknesses."""
        limit = 2 * thickness
        bad = tuple(
            name
            for name in ("width", "height", "depth")
            if getattr(dimensions, name) <= limit
        )
        if bad:
            raise InvalidDimensionsError(
                f"Carcass {', '.join(bad)} must exceed twice the panel "
                f"thickness ({limit}mm)",
                bad,
            )

    def elevation(self, cabinet_type: CabinetType) -> float:
        """Vertical offset of the cabinet group above the floor."""
        if cabinet_type == CabinetType.TOP:
            return self.defaults.wall_cabinet_elevation
        return self.defaults.kicker_height

    def end_panels(
        self, dimensions: CarcassDimensions, material: CarcassMaterial
    ) -> list[PanelDescriptor]:
        t = material.thickness
        w, h, d = dimensions.width, dimensions.height, dimensions.depth
        return [
            PanelDescriptor(
                panel_type=PanelType.LEFT_END,
                width=t,
                height=h,
                depth=d,
                position=Position3D(t / 2, h / 2, d / 2),
                material=material,
                thickness_axis="x",
                name="left",
            ),
            PanelDescriptor(
                panel_type=PanelType.RIGHT_END,
                width=t,
                height=h,
                depth=d,
                position=Position3D(w - t / 2, h / 2, d / 2),
                material=material,
                thickness_axis="x",
                name="right",
            ),
        ]

    def back_panel(
        self, dimensions: CarcassDimensions, material: CarcassMaterial
    ) -> PanelDescriptor:
        """Back panel fitted between the ends, behind the carcass (z < 0)."""
        t = material.thickness
        panel_width = dimensions.width - 2 * t
        return PanelDescriptor(
            panel_type=PanelType.BACK,
            width=panel_width,
            height=dimensions.height,
            depth=material.back_thickness,
            position=Position3D(
                t + panel_width / 2, dimensions.height / 2, -material.back_thickness / 2
            ),
            material=material,
            thickness_axis="z",
            name="back",
        )

    def _horizontal_panel(
        self,
        panel_type: PanelType,
        dimensions: CarcassDimensions,
        material: CarcassMaterial,
        y: float,
        index: int | None = None,
        name: str = "",
        metadata: dict | None = None,
    ) -> PanelDescriptor:
        t = material.thickness
        panel_width = dimensions.width - 2 * t
        effective_depth = dimensions.depth - t
        return PanelDescriptor(
            panel_type=panel_type,
            width=panel_width,
            height=t,
            depth=effective_depth,
            position=Position3D(t + panel_width / 2, y, t + effective_depth / 2),
            material=material,
            thickness_axis="y",
            index=index,
            name=name,
            metadata=metadata or {},
        )

    def bottom_panel(
        self, dimensions: CarcassDimensions, material: CarcassMaterial
    ) -> PanelDescriptor:
        return self._horizontal_panel(
            PanelType.BOTTOM, dimensions, material, material.thickness / 2, name="bottom"
        )

    def top_panel(
        self,
        cabinet_type: CabinetType,
        dimensions: CarcassDimensions,
        material: CarcassMaterial,
    ) -> PanelDescriptor:
        """Top panel; carries the base rail depth (non-zero for base cabinets)."""
        rail_depth = (
            self.defaults.base_rail_depth if cabinet_type == CabinetType.BASE else 0.0
        )
        return self._horizontal_panel(
            PanelType.TOP,
            dimensions,
            material,
            dimensions.height - material.thickness / 2,
            name="top",
            metadata={"base_rail_depth": rail_depth},
        )

    def base_rail(
        self, dimensions: CarcassDimensions, material: CarcassMaterial
    ) -> PanelDescriptor:
        """Vertical rail across the top front of a base cabinet."""
        t = material.thickness
        rail_width = dimensions.width - 2 * t
        rail_height = self.defaults.base_rail_depth
        return PanelDescriptor(
            panel_type=PanelType.BASE_RAIL,
            width=rail_width,
            height=rail_height,
            depth=t,
            position=Position3D(
                t + rail_width / 2,
                dimensions.height - rail_height / 2,
                dimensions.depth - t / 2,
            ),
            material=material,
            thickness_axis="z",
            name="base rail",
        )

    def shelf_positions(
        self, height: float, thickness: float, count: int, max_spacing: float
    ) -> list[float]:
        """Centre heights of the shelves.

        Shelves are spread evenly between ``thickness + clearance`` and
        ``height - thickness - clearance``; the spacing never exceeds
        ``max_spacing``. No shelves fit when that span is empty.
        """
        clearance = self.defaults.shelf_edge_clearance
        start = thickness + clearance
        end = height - thickness - clearance
        if count <= 0 or end <= start:
            return []
        spacing = min(max_spacing, (end - start) / (count + 1))
        return [start + (i + 1) * spacing for i in range(count)]

    def shelves(
        self,
        dimensions: CarcassDimensions,
        material: CarcassMaterial,
        count: int,
        max_spacing: float,
    ) -> list[PanelDescriptor]:
        positions = self.shelf_positions(
            dimensions.height, material.thickness, count, max_spacing
        )
        return [
            self._horizontal_panel(
                PanelType.SHELF, dimensions, material, y, index=i, name=f"shelf {i + 1}"
            )
            for i, y in enumerate(positions)
        ]

    def legs(
        self, dimensions: CarcassDimensions, material: CarcassMaterial
    ) -> list[PanelDescriptor]:
        """Four cylindrical legs whose tops are flush with the carcass bottom.

        Front legs are set back from the front edge; back legs touch the back
        edge. All legs sit inside the end panels.
        """
        t = material.thickness
        diameter = self.defaults.leg_diameter
        leg_height = self.defaults.kicker_height
        radius = diameter / 2

        left_x = t + radius
        right_x = dimensions.width - t - radius
        front_z = dimensions.depth - self.defaults.leg_front_setback - radius
        back_z = radius
        y = -leg_height / 2

        corners = (
            (left_x, front_z),
            (right_x, front_z),
            (left_x, back_z),
            (right_x, back_z),
        )
        return [
            PanelDescriptor(
                panel_type=PanelType.LEG,
                width=diameter,
                height=leg_height,
                depth=diameter,
                position=Position3D(x, y, z),
                thickness_axis="y",
                shape=PanelShape.CYLINDER,
                index=i,
                name=LEG_NAMES[i],
            )
            for i, (x, z) in enumerate(corners)
        ]
