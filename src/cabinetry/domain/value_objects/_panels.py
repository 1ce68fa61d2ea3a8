"""Panel types and part naming."""

from __future__ import annotations

from enum import Enum


class PanelType(str, Enum):
    """Roles a derived part can play in a carcass."""

    # Structural panels
    LEFT_END = "left_end"
    RIGHT_END = "right_end"
    BACK = "back"
    BOTTOM = "bottom"
    TOP = "top"
    BASE_RAIL = "base_rail"
    SHELF = "shelf"
    LEG = "leg"

    # Fronts
    DOOR = "door"
    DRAWER_FRONT = "drawer_front"

    # Slabs
    BENCHTOP = "benchtop"
    KICKER = "kicker"


class PanelShape(str, Enum):
    """Primitive the rendering layer should build for a part."""

    BOX = "box"
    CYLINDER = "cylinder"


# Part names used by the cut list and export layers
PART_NAMES: dict[PanelType, str] = {
    PanelType.LEFT_END: "Left Panel",
    PanelType.RIGHT_END: "Right Panel",
    PanelType.BACK: "Back Panel",
    PanelType.TOP: "Top Panel",
    PanelType.BASE_RAIL: "Base Rail",
    PanelType.BOTTOM: "Bottom Panel",
    PanelType.SHELF: "Shelf",
    PanelType.LEG: "Leg",
    PanelType.DOOR: "Door",
    PanelType.DRAWER_FRONT: "Drawer Front",
    PanelType.BENCHTOP: "Benchtop",
    PanelType.KICKER: "Kicker",
}
