"""Layout defaults threaded explicitly through the resolvers.

Every constant the carcass, door, drawer and slab calculations depend on lives
here instead of in process-wide mutable state. Callers that need a different
kicker height build a new value with :meth:`LayoutDefaults.with_kicker_height`
and pass it to the resolver.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class LayoutDefaults:
    """Fixed dimensions used when deriving parts (all in mm).

    Attributes:
        kicker_height: Leg height; vertical offset of base/tall cabinets.
        leg_diameter: Diameter of the cylindrical legs.
        leg_front_setback: Distance from the carcass front to the front legs.
        base_rail_depth: Depth of the rail at the top of base cabinets.
        shelf_edge_clearance: Gap kept clear above the bottom panel and below
            the top panel when spacing shelves.
        door_gap: Gap applied around door edges.
        door_clearance: Distance between the carcass front and the door back.
        door_overhang: Extra door height for overhanging top-cabinet doors.
        wall_cabinet_elevation: Mounting height of top (wall) cabinets.
        benchtop_thickness: Thickness of new benchtops.
        benchtop_depth_extension: Fixed benchtop extension past the carcass.
        benchtop_front_overhang: Default front overhang of benchtops.
    """

    kicker_height: float = 100.0
    leg_diameter: float = 50.0
    leg_front_setback: float = 70.0
    base_rail_depth: float = 60.0
    shelf_edge_clearance: float = 100.0
    door_gap: float = 2.0
    door_clearance: float = 2.0
    door_overhang: float = 20.0
    wall_cabinet_elevation: float = 2400.0
    benchtop_thickness: float = 38.0
    benchtop_depth_extension: float = 20.0
    benchtop_front_overhang: float = 20.0

    def __post_init__(self) -> None:
        if self.kicker_height < 0:
            raise ValueError("Kicker height cannot be negative")
        if self.leg_diameter <= 0:
            raise ValueError("Leg diameter must be positive")
        if self.door_gap < 0:
            raise ValueError("Door gap cannot be negative")

    def with_kicker_height(self, kicker_height: float) -> "LayoutDefaults":
        """Return a copy with a different kicker (leg) height."""
        return replace(self, kicker_height=kicker_height)
