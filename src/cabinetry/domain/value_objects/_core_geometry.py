"""Core geometry value objects for carcass layout."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._errors import InvalidDimensionsError
from ._panels import PanelType


class CabinetType(str, Enum):
    """Carcass types handled by the layout engine.

    Attributes:
        TOP: Wall-hung cabinet, mounted at a fixed elevation.
        BASE: Floor cabinet on legs, topped with a base rail.
        TALL: Floor-to-ceiling cabinet on legs.
    """

    TOP = "top"
    BASE = "base"
    TALL = "tall"

    @property
    def has_legs(self) -> bool:
        """Whether cabinets of this type stand on legs."""
        return self in (CabinetType.BASE, CabinetType.TALL)


@dataclass(frozen=True)
class CarcassDimensions:
    """Outer bounding box of one cabinet in millimetres.

    Replaced wholesale by a dimension change, never patched field by field.
    """

    width: float
    height: float
    depth: float

    def __post_init__(self) -> None:
        bad = tuple(
            name
            for name in ("width", "height", "depth")
            if getattr(self, name) <= 0
        )
        if bad:
            raise InvalidDimensionsError(
                f"Carcass dimensions must be positive: {', '.join(bad)}", bad
            )

    def with_changes(
        self,
        width: float | None = None,
        height: float | None = None,
        depth: float | None = None,
    ) -> "CarcassDimensions":
        """Return a new dimensions value with the given fields replaced."""
        return CarcassDimensions(
            width=self.width if width is None else width,
            height=self.height if height is None else height,
            depth=self.depth if depth is None else depth,
        )


@dataclass(frozen=True)
class Position3D:
    """Centre point of a part in carcass-local coordinates.

    Origin is the back-bottom-left corner of the carcass: x runs along the
    width, y up the height and z from the back towards the front. Negative
    values are valid (the back panel sits behind z=0, legs below y=0).
    """

    x: float
    y: float
    z: float

    def offset(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> "Position3D":
        """Return this position shifted by the given deltas."""
        return Position3D(self.x + dx, self.y + dy, self.z + dz)


@dataclass(frozen=True)
class CutPiece:
    """A rectangle to be cut from sheet stock, consumed by nesting/export."""

    width: float
    height: float
    quantity: int
    label: str
    panel_type: PanelType
    thickness: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Cut piece dimensions must be positive")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def area(self) -> float:
        """Total area for all pieces of this type in square millimetres."""
        return self.width * self.height * self.quantity
