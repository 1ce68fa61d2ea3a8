"""Cut list generation from a resolved carcass layout."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..value_objects import PART_NAMES, CutPiece, PanelType

if TYPE_CHECKING:
    from ..entities import CarcassLayout, PanelDescriptor

logger = logging.getLogger(__name__)

__all__ = ["CutListGenerator"]

# Legs are bought in, not cut from sheet stock
_NOT_CUT = frozenset({PanelType.LEG})


class CutListGenerator:
    """Turns panel descriptors into consolidated sheet-stock rectangles."""

    def generate(self, layout: CarcassLayout) -> list[CutPiece]:
        """Generate a consolidated cut list for a layout.

        Identical panels (same part name, face size and thickness) are
        grouped into one piece with a quantity. Each piece's width and height
        are the panel's face size, larger first; 3D position is ignored.
        Degenerate panels with no area are skipped.

        Args:
            layout: The resolved carcass.

        Returns:
            Cut pieces in the order their part first appears in the layout.
        """
        groups: dict[tuple, list[PanelDescriptor]] = {}
        for panel in layout.panels:
            if panel.panel_type in _NOT_CUT:
                continue
            width, height = panel.face_size
            if width <= 0 or height <= 0:
                logger.debug(f"Skipping degenerate {panel.panel_type.value} panel")
                continue
            key = (
                panel.panel_type,
                round(width, 3),
                round(height, 3),
                panel.thickness,
            )
            groups.setdefault(key, []).append(panel)

        pieces: list[CutPiece] = []
        for (panel_type, width, height, thickness), panels in groups.items():
            pieces.append(
                CutPiece(
                    width=width,
                    height=height,
                    quantity=len(panels),
                    label=PART_NAMES[panel_type],
                    panel_type=panel_type,
                    thickness=thickness,
                )
            )
        return pieces

    def sort_by_size(self, cut_list: list[CutPiece]) -> list[CutPiece]:
        """Sort cut list by area (largest first) for efficient cutting."""
        return sorted(cut_list, key=lambda p: p.area, reverse=True)
