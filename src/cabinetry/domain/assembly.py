"""Carcass assembly: the state holder for one cabinet.

A ``CarcassAssembly`` owns the dimensions and config of one cabinet and the
layout resolved from them. The rendering layer calls one of the ``update_*``
or ``toggle_*`` methods per user edit and rebuilds its primitives from
:meth:`CarcassAssembly.layout`. Every change triggers a full re-resolve.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from .defaults import LayoutDefaults
from .entities import CarcassConfig, CarcassLayout, check_door_count
from .services import (
    CarcassDimensionResolver,
    CutListGenerator,
    DrawerStack,
    HeightState,
    HeightUpdate,
    change_quantity,
    ensure_heights,
    rescale_for_carcass_height,
    update_height,
)
from .value_objects import CabinetType, CarcassDimensions, CutPiece

logger = logging.getLogger(__name__)

__all__ = ["CarcassAssembly"]


class CarcassAssembly:
    """One cabinet's dimensions, config and resolved layout.

    Attributes:
        cabinet_type: Top, base or tall.
        dimensions: Current outer dimensions (replaced wholesale).
        config: Feature selections; owned by this assembly.
        defaults: Layout defaults, including the kicker height.
        cabinet_id: Identifier of the cabinet in its document.
        product_id: Product the cabinet was created from.
    """

    def __init__(
        self,
        cabinet_type: CabinetType,
        dimensions: CarcassDimensions,
        config: CarcassConfig | None = None,
        defaults: LayoutDefaults | None = None,
        cabinet_id: str = "",
        product_id: str = "",
    ) -> None:
        self.cabinet_type = cabinet_type
        self.dimensions = dimensions
        self.config = config or CarcassConfig.for_cabinet_type(cabinet_type)
        self.defaults = defaults or LayoutDefaults()
        self.cabinet_id = cabinet_id
        self.product_id = product_id
        self._resolver = CarcassDimensionResolver(self.defaults)
        self._cut_list = CutListGenerator()

        if self.config.drawer_enabled:
            self._store_heights(
                ensure_heights(
                    self.config.drawer_heights,
                    self.dimensions.height,
                    self.config.drawer_quantity,
                )
            )
        self._layout = self._resolve()

    def __repr__(self) -> str:
        d = self.dimensions
        return (
            f"CarcassAssembly({self.cabinet_id!r}, {self.cabinet_type.value}, "
            f"{d.width}x{d.height}x{d.depth})"
        )

    def _resolve(self) -> CarcassLayout:
        return self._resolver.resolve(self.cabinet_type, self.dimensions, self.config)

    def _rebuild(self) -> CarcassLayout:
        self._layout = self._resolve()
        return self._layout

    def _store_heights(self, update: HeightUpdate) -> HeightUpdate:
        self.config.drawer_heights = list(update.heights)
        return update

    @property
    def elevation(self) -> float:
        """Vertical offset of the cabinet group above the floor."""
        return self._layout.elevation

    def layout(self) -> CarcassLayout:
        """The current panel tree."""
        return self._layout

    def part_dimensions(self) -> list[CutPiece]:
        """Cut list rows for the current layout."""
        return self._cut_list.generate(self._layout)

    def drawer_stack(self) -> DrawerStack | None:
        """Drawer fronts and height diagnostics, or ``None`` without drawers."""
        if not self.config.drawer_enabled:
            return None
        return DrawerStack.build(
            self.config.drawer_heights,
            self.dimensions.width,
            self.dimensions.height,
            self.dimensions.depth,
            self.config.material.thickness,
            self.config.material,
        )

    def update_dimensions(self, dimensions: CarcassDimensions) -> CarcassLayout:
        """Replace the dimensions and rebuild.

        Drawer heights follow a height change proportionally.
        """
        old_height = self.dimensions.height
        self.dimensions = dimensions
        if (
            self.config.drawer_enabled
            and self.config.drawer_heights
            and dimensions.height != old_height
        ):
            self._store_heights(
                rescale_for_carcass_height(
                    self.config.drawer_heights, old_height, dimensions.height
                )
            )
        return self._rebuild()

    def update_config(self, **changes: Any) -> CarcassLayout:
        """Apply config changes and rebuild.

        The new values are validated as a whole before anything is applied.
        The material object is kept, so panels keep sharing it.

        Raises:
            TypeError: If an unknown field is given.
            CardinalityError: If a door count or drawer quantity is out of
                range.
        """
        old = self.config
        new = replace(old, **changes)

        if new.drawer_enabled:
            if old.drawer_enabled and new.drawer_quantity != old.drawer_quantity:
                new.drawer_heights = change_quantity(
                    old.drawer_heights, self.dimensions.height, new.drawer_quantity
                ).heights
            else:
                new.drawer_heights = ensure_heights(
                    new.drawer_heights, self.dimensions.height, new.drawer_quantity
                ).heights

        self.config = new
        return self._rebuild()

    def update_material(self, **changes: Any) -> CarcassLayout:
        """Change the shared carcass material in place and rebuild."""
        self.config.material.update(**changes)
        return self._rebuild()

    def toggle_doors(self, enabled: bool | None = None) -> CarcassLayout:
        """Enable, disable or (with no argument) flip the doors."""
        self.config.door_enabled = (
            not self.config.door_enabled if enabled is None else enabled
        )
        return self._rebuild()

    def set_door_count(self, door_count: int) -> CarcassLayout:
        """Change the number of doors.

        Raises:
            CardinalityError: If ``door_count`` is not 1 or 2.
        """
        check_door_count(door_count)
        self.config.door_count = door_count
        return self._rebuild()

    def set_overhang_door(self, overhang: bool) -> CarcassLayout:
        """Set the overhang flag (only has an effect on top cabinets)."""
        self.config.overhang_door = overhang
        return self._rebuild()

    def toggle_drawers(self, enabled: bool | None = None) -> CarcassLayout:
        """Enable, disable or flip the drawers.

        Enabling fills in an equal distribution when no valid heights exist.
        """
        self.config.drawer_enabled = (
            not self.config.drawer_enabled if enabled is None else enabled
        )
        if self.config.drawer_enabled:
            self._store_heights(
                ensure_heights(
                    self.config.drawer_heights,
                    self.dimensions.height,
                    self.config.drawer_quantity,
                )
            )
        return self._rebuild()

    def update_drawer_quantity(self, quantity: int) -> HeightUpdate:
        """Change the number of drawers and restack them.

        Raises:
            CardinalityError: If ``quantity`` is outside 1..6.
        """
        update = change_quantity(
            self.config.drawer_heights, self.dimensions.height, quantity
        )
        self.config.drawer_quantity = quantity
        self._store_heights(update)
        self._rebuild()
        return update

    def update_drawer_height(self, index: int, height: float) -> HeightUpdate:
        """Edit one drawer height; the others are redistributed.

        Check ``was_reset`` on the result: an edit that cannot be satisfied
        resets every drawer to an equal share.

        Raises:
            IndexError: If ``index`` is not a drawer slot.
        """
        state = HeightState(
            self.dimensions.height,
            self.config.drawer_quantity,
            tuple(self.config.drawer_heights),
        )
        update = self._store_heights(update_height(state, index, height))
        self._rebuild()
        return update

    def update_kicker_height(self, kicker_height: float) -> bool:
        """Change the kicker (leg) height.

        Only base and tall cabinets stand on legs; for top cabinets this is a
        no-op.

        Returns:
            True when the cabinet was repositioned.
        """
        if not self.cabinet_type.has_legs:
            return False
        self.defaults = self.defaults.with_kicker_height(kicker_height)
        self._resolver = CarcassDimensionResolver(self.defaults)
        self._rebuild()
        logger.debug(f"{self.cabinet_id or 'cabinet'} kicker height set to {kicker_height}mm")
        return True
