"""Domain entities for carcass layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from .value_objects import (
    CabinetType,
    CardinalityError,
    CarcassDimensions,
    CarcassMaterial,
    DoorMaterial,
    PanelShape,
    PanelType,
    Position3D,
    SlabCategory,
)

MIN_DOOR_COUNT = 1
MAX_DOOR_COUNT = 2
MIN_DRAWER_QUANTITY = 1
MAX_DRAWER_QUANTITY = 6

Axis = Literal["x", "y", "z"]


@dataclass(frozen=True)
class PanelDescriptor:
    """Resolved geometry of one part of a carcass.

    Descriptors are derived, never stored: every dimension or config change
    produces a fresh set.

    Attributes:
        panel_type: Role of the part.
        width: Extent along x (mm).
        height: Extent along y (mm).
        depth: Extent along z (mm).
        position: Centre of the part in carcass-local coordinates.
        material: Material the part is built from. Carcass panels share the
            config's ``CarcassMaterial`` by reference.
        thickness_axis: Axis along which the board thickness runs.
        shape: Primitive to build (legs are cylinders).
        index: Ordinal among parts of the same type (shelf, leg, door,
            drawer), ``None`` for singletons.
        name: Human-readable label (e.g. "left door", "frontLeft").
        metadata: Additional per-part data (e.g. ``base_rail_depth``).
    """

    panel_type: PanelType
    width: float
    height: float
    depth: float
    position: Position3D
    material: CarcassMaterial | DoorMaterial | None = None
    thickness_axis: Axis = "z"
    shape: PanelShape = PanelShape.BOX
    index: int | None = None
    name: str = ""
    metadata: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def thickness(self) -> float:
        """Board thickness (extent along ``thickness_axis``)."""
        return {"x": self.width, "y": self.height, "z": self.depth}[self.thickness_axis]

    @property
    def face_size(self) -> tuple[float, float]:
        """The two extents that are not the thickness, larger first.

        This is the rectangle a nesting or cut-list layer places on sheet
        stock; 3D position is ignored.
        """
        extents = {"x": self.width, "y": self.height, "z": self.depth}
        del extents[self.thickness_axis]
        a, b = extents.values()
        return (a, b) if a >= b else (b, a)

    @property
    def bottom_y(self) -> float:
        """Lowest y covered by the part."""
        return self.position.y - self.height / 2

    @property
    def top_y(self) -> float:
        """Highest y covered by the part."""
        return self.position.y + self.height / 2


@dataclass
class CarcassConfig:
    """Material and feature selections for one carcass.

    The caller (an assembly or document) owns this object, including the
    ``drawer_heights`` list; the drawer calculations return new lists which
    the owner stores back here.

    Attributes:
        material: Carcass material, shared by reference with the panels.
        shelf_count: Number of adjustable shelves.
        shelf_spacing: Maximum spacing between shelves (mm).
        door_enabled: Whether doors are fitted.
        door_material: Material of the door fronts.
        door_count: Number of doors (1 or 2).
        overhang_door: Whether doors overhang; honoured for top cabinets only.
        drawer_enabled: Whether drawers are fitted.
        drawer_quantity: Number of drawers (1 to 6).
        drawer_heights: Per-drawer front heights, bottom drawer first.
    """

    material: CarcassMaterial = field(default_factory=CarcassMaterial.default)
    shelf_count: int = 2
    shelf_spacing: float = 300.0
    door_enabled: bool = True
    door_material: DoorMaterial = field(default_factory=DoorMaterial.default)
    door_count: int = 2
    overhang_door: bool = False
    drawer_enabled: bool = False
    drawer_quantity: int = 3
    drawer_heights: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.shelf_count < 0:
            raise ValueError("Shelf count cannot be negative")
        if self.shelf_spacing <= 0:
            raise ValueError("Shelf spacing must be positive")
        check_door_count(self.door_count)
        check_drawer_quantity(self.drawer_quantity)

    @classmethod
    def for_cabinet_type(cls, cabinet_type: CabinetType, **overrides: Any) -> "CarcassConfig":
        """Build a config with the per-type defaults (overhang on top cabinets)."""
        overrides.setdefault("overhang_door", cabinet_type == CabinetType.TOP)
        return cls(**overrides)


def check_door_count(door_count: int) -> None:
    """Raise ``CardinalityError`` unless ``door_count`` is 1 or 2."""
    if door_count not in (MIN_DOOR_COUNT, MAX_DOOR_COUNT):
        raise CardinalityError("door_count", door_count, "1 or 2")


def check_drawer_quantity(quantity: int) -> None:
    """Raise ``CardinalityError`` unless ``quantity`` is within 1..6."""
    if not MIN_DRAWER_QUANTITY <= quantity <= MAX_DRAWER_QUANTITY:
        raise CardinalityError(
            "drawer_quantity",
            quantity,
            f"between {MIN_DRAWER_QUANTITY} and {MAX_DRAWER_QUANTITY}",
        )


@dataclass(frozen=True)
class CarcassLayout:
    """Complete panel tree of one carcass.

    Attributes:
        cabinet_type: Type the layout was resolved for.
        dimensions: Outer dimensions the layout was resolved from.
        elevation: Vertical offset of the cabinet group above the floor.
        panels: Every resolved part, structural panels first.
        drawer_heights: Drawer heights used for the drawer fronts (empty when
            drawers are disabled).
    """

    cabinet_type: CabinetType
    dimensions: CarcassDimensions
    elevation: float
    panels: tuple[PanelDescriptor, ...]
    drawer_heights: tuple[float, ...] = ()

    def of_type(self, panel_type: PanelType) -> list[PanelDescriptor]:
        """All parts with the given role, in resolution order."""
        return [p for p in self.panels if p.panel_type == panel_type]

    def single(self, panel_type: PanelType) -> PanelDescriptor | None:
        """The only part with the given role, or ``None``."""
        found = self.of_type(panel_type)
        return found[0] if found else None

    @property
    def left_end(self) -> PanelDescriptor | None:
        return self.single(PanelType.LEFT_END)

    @property
    def right_end(self) -> PanelDescriptor | None:
        return self.single(PanelType.RIGHT_END)

    @property
    def back(self) -> PanelDescriptor | None:
        return self.single(PanelType.BACK)

    @property
    def bottom(self) -> PanelDescriptor | None:
        return self.single(PanelType.BOTTOM)

    @property
    def top(self) -> PanelDescriptor | None:
        return self.single(PanelType.TOP)

    @property
    def base_rail(self) -> PanelDescriptor | None:
        return self.single(PanelType.BASE_RAIL)

    @property
    def shelves(self) -> list[PanelDescriptor]:
        return self.of_type(PanelType.SHELF)

    @property
    def legs(self) -> list[PanelDescriptor]:
        return self.of_type(PanelType.LEG)

    @property
    def doors(self) -> list[PanelDescriptor]:
        return self.of_type(PanelType.DOOR)

    @property
    def drawers(self) -> list[PanelDescriptor]:
        return self.of_type(PanelType.DRAWER_FRONT)


@dataclass(frozen=True)
class Slab:
    """A benchtop or kicker placed in room coordinates.

    Position is the slab's minimum corner: left x, bottom y, back z.

    Attributes:
        slab_id: Unique identifier of the assembly.
        category: Benchtop or kicker.
        x: Left edge.
        y: Bottom face (height from floor).
        z: Back face.
        width: Extent along x.
        height: Extent along y (the thickness, for benchtops).
        depth: Extent along z.
        material: Material name or colour.
        product_id: Product the slab was created from.
        sort_number: Display number; falls back to digits in ``slab_id``.
    """

    slab_id: str
    category: SlabCategory
    x: float
    y: float
    z: float
    width: float
    height: float
    depth: float
    material: str = "Unknown"
    product_id: str = ""
    sort_number: int | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("Slab dimensions must be positive")

    @property
    def right_x(self) -> float:
        return self.x + self.width

    @property
    def top_y(self) -> float:
        return self.y + self.height

    @property
    def front_z(self) -> float:
        return self.z + self.depth
