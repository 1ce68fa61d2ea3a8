"""Carcass and door materials.

A ``CarcassMaterial`` is owned by one ``CarcassConfig`` and shared by
reference with every panel descriptor resolved from that config, so a change
made through :meth:`CarcassMaterial.update` is seen by all sibling panels.
Call :meth:`CarcassMaterial.clone_for_independent_edit` before mutating when a
panel (or another cabinet) needs to diverge.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

DEFAULT_PANEL_THICKNESS = 16.0
DEFAULT_DOOR_THICKNESS = 18.0


@dataclass(eq=False)
class CarcassMaterial:
    """Material shared by the structural panels of one carcass.

    ``back_thickness`` always mirrors ``panel_thickness``: updating either one
    propagates the value to the other.

    Attributes:
        colour: Hex colour string, e.g. ``"#ffffff"``.
        panel_thickness: Thickness of end, top, bottom and shelf panels (mm).
        back_thickness: Thickness of the back panel (mm).
        opacity: Display opacity in [0, 1].
        transparent: Whether the rendering layer should blend the material.
    """

    colour: str = "#ffffff"
    panel_thickness: float = DEFAULT_PANEL_THICKNESS
    back_thickness: float = DEFAULT_PANEL_THICKNESS
    opacity: float = 0.9
    transparent: bool = True

    def __post_init__(self) -> None:
        if self.panel_thickness <= 0:
            raise ValueError("Material thickness must be positive")
        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError("Opacity must be between 0 and 1")
        # panel_thickness is the single source of truth at construction
        self.back_thickness = self.panel_thickness

    @property
    def thickness(self) -> float:
        """Panel thickness, the value every structural formula uses."""
        return self.panel_thickness

    def update(self, **changes: Any) -> None:
        """Apply changes in place, keeping both thicknesses equal.

        Raises:
            ValueError: If an unknown field is given, a thickness is not
                positive, both thicknesses are given with different values,
                or opacity is outside [0, 1].
        """
        unknown = set(changes) - {
            "colour",
            "panel_thickness",
            "back_thickness",
            "opacity",
            "transparent",
        }
        if unknown:
            raise ValueError(f"Unknown material field(s): {', '.join(sorted(unknown))}")

        thickness = changes.pop("panel_thickness", None)
        back = changes.pop("back_thickness", None)
        if thickness is not None and back is not None and thickness != back:
            raise ValueError(
                f"Conflicting thicknesses: panel {thickness}mm, back {back}mm"
            )
        if thickness is None:
            thickness = back
        if "opacity" in changes and not 0.0 <= changes["opacity"] <= 1.0:
            raise ValueError("Opacity must be between 0 and 1")
        if thickness is not None:
            if thickness <= 0:
                raise ValueError("Material thickness must be positive")
            self.panel_thickness = thickness
            self.back_thickness = thickness

        for name, value in changes.items():
            setattr(self, name, value)

    def clone_for_independent_edit(self) -> "CarcassMaterial":
        """Return an unshared copy that can be mutated independently."""
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialise in the persisted document shape."""
        return {
            "colour": self.colour,
            "panel_thickness": self.panel_thickness,
            "back_thickness": self.back_thickness,
            "opacity": self.opacity,
            "transparent": self.transparent,
        }

    @classmethod
    def default(cls) -> "CarcassMaterial":
        """White 16mm board, slightly transparent."""
        return cls()


@dataclass(frozen=True)
class DoorMaterial:
    """Material of door fronts.

    Attributes:
        colour: Hex colour string.
        thickness: Door thickness in mm.
    """

    colour: str = "#ffffff"
    thickness: float = DEFAULT_DOOR_THICKNESS

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError("Door thickness must be positive")

    @classmethod
    def default(cls) -> "DoorMaterial":
        """White 18mm door."""
        return cls()
