"""Door layout resolver.

Doors float in front of the carcass: their back face sits ``clearance`` mm in
front of the carcass front (z = depth). A gap is kept around the door edges
and, for two doors, between them.
"""

from __future__ import annotations

from ..entities import PanelDescriptor, check_door_count
from ..value_objects import CabinetType, DoorMaterial, PanelType, Position3D

__all__ = ["DOOR_NAMES", "door_dimensions", "resolve_doors"]

DOOR_NAMES = {1: ("door",), 2: ("left door", "right door")}


def door_dimensions(
    width: float,
    height: float,
    door_count: int,
    gap: float = 2.0,
) -> tuple[float, float]:
    """Width and height of each door front (without overhang).

    Args:
        width: Carcass width.
        height: Carcass height.
        door_count: 1 or 2.
        gap: Edge gap.

    Returns:
        ``(door_width, door_height)``.

    Raises:
        CardinalityError: If ``door_count`` is not 1 or 2.
    """
    check_door_count(door_count)
    door_height = height - 2 * gap
    if door_count == 1:
        return width - 2 * gap, door_height
    return width / 2 - gap, door_height


def resolve_doors(
    cabinet_type: CabinetType,
    width: float,
    height: float,
    depth: float,
    door_thickness: float,
    door_count: int,
    gap: float = 2.0,
    overhang: bool = False,
    clearance: float = 2.0,
    overhang_extension: float = 20.0,
    material: DoorMaterial | None = None,
) -> list[PanelDescriptor]:
    """Resolve every door front of a carcass.

    A single door is centred on the carcass. Two doors each take half the
    width less the gap; the left door is centred at x = w/2 and the right at
    x = W - w/2. The overhang flag is honoured for top cabinets only, where it
    adds ``overhang_extension`` to the door height and raises the door centre
    by the same amount.

    Raises:
        CardinalityError: If ``door_count`` is not 1 or 2.
    """
    door_width, door_height = door_dimensions(width, height, door_count, gap)
    centre_y = height / 2

    if overhang and cabinet_type == CabinetType.TOP:
        door_height += overhang_extension
        centre_y += overhang_extension

    z = depth + door_thickness / 2 + clearance

    if door_count == 1:
        xs = [width / 2]
    else:
        xs = [door_width / 2, width - door_width / 2]

    return [
        PanelDescriptor(
            panel_type=PanelType.DOOR,
            width=door_width,
            height=door_height,
            depth=door_thickness,
            position=Position3D(x, centre_y, z),
            material=material,
            thickness_axis="z",
            index=i,
            name=DOOR_NAMES[door_count][i],
        )
        for i, x in enumerate(xs)
    ]
