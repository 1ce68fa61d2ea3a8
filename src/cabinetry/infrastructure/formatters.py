"""Output formatters and exporters for carcass layouts and merges."""

from __future__ import annotations

import json
from typing import Any, Sequence

from cabinetry.application.config import ConfigError, ValidationResult
from cabinetry.application.dtos import LayoutOutput, MergeOutput
from cabinetry.domain import CarcassLayout, CutPiece, MergeWarning, PanelDescriptor, Slab
from cabinetry.domain.services import HeightValidation

# mm² per m²
_MM2_PER_M2 = 1_000_000


class LayoutFormatter:
    """Formats a resolved panel tree as a table."""

    def format(self, layout: CarcassLayout) -> str:
        d = layout.dimensions
        lines = [
            f"CARCASS ({layout.cabinet_type.value}) "
            f"{d.width:g} x {d.height:g} x {d.depth:g} mm, "
            f"elevation {layout.elevation:g} mm",
            "=" * 86,
            f"{'Part':<16} {'Name':<14} {'Width':>9} {'Height':>9} {'Depth':>9}"
            f"   {'Position (x, y, z)'}",
            "-" * 86,
        ]
        for panel in layout.panels:
            lines.append(self._format_panel(panel))
        lines.append("-" * 86)
        lines.append(f"{len(layout.panels)} parts")
        if layout.drawer_heights:
            heights = ", ".join(f"{h:g}" for h in layout.drawer_heights)
            lines.append(f"Drawer heights: {heights} mm")
        return "\n".join(lines)

    def _format_panel(self, panel: PanelDescriptor) -> str:
        p = panel.position
        return (
            f"{panel.panel_type.value:<16} {panel.name:<14} {panel.width:>9.1f} "
            f"{panel.height:>9.1f} {panel.depth:>9.1f}   "
            f"({p.x:.1f}, {p.y:.1f}, {p.z:.1f})"
        )


class CutListFormatter:
    """Formats cut lists for display (sizes in mm, area in m²)."""

    def format(self, cut_list: list[CutPiece]) -> str:
        """Format cut list as a table."""
        if not cut_list:
            return "No pieces in cut list."

        lines = [
            "CUT LIST",
            "=" * 72,
            f"{'Piece':<16} {'Width':<10} {'Height':<10} {'Thick':<7} {'Qty':<5} {'Area (m²)'}",
            "-" * 72,
        ]

        total_area = 0.0
        for piece in cut_list:
            area = piece.area / _MM2_PER_M2
            lines.append(
                f"{piece.label:<16} {piece.width:<10.1f} {piece.height:<10.1f} "
                f"{piece.thickness:<7g} {piece.quantity:<5} {area:.3f}"
            )
            total_area += area

        lines.append("-" * 72)
        lines.append(f"{'TOTAL':<16} {'':<10} {'':<10} {'':<7} {'':<5} {total_area:.3f}")

        return "\n".join(lines)


class DrawerHeightsFormatter:
    """Formats a drawer stack and its validation for display."""

    def format(
        self,
        heights: Sequence[float],
        carcass_height: float,
        validation: HeightValidation,
        was_reset: bool = False,
    ) -> str:
        lines = [f"DRAWERS ({len(heights)} in {carcass_height:g} mm)"]
        bottom = 0.0
        # Top drawer first, as seen from the front
        rows = []
        for i, height in enumerate(heights):
            rows.append(
                f"  {i + 1:>2}. {height:>7.1f} mm   y {bottom:.1f} - {bottom + height:.1f}"
            )
            bottom += height
        lines.extend(reversed(rows))
        lines.append(
            f"Total {validation.total_height:.1f} mm, "
            f"remaining {validation.remaining_height:.1f} mm"
        )
        if was_reset:
            lines.append("Heights were reset to an equal distribution.")
        for error in validation.errors:
            lines.append(f"Error: {error}")
        return "\n".join(lines)


class MergeWarningFormatter:
    """Formats merge warnings and the merged slab."""

    def format_warnings(self, warnings: list[MergeWarning]) -> str:
        if not warnings:
            return "No conflicts."
        lines = ["Warnings:"]
        for warning in warnings:
            lines.append(f"  [{warning.type.value}] {warning.message}")
        return "\n".join(lines)

    def format_slab(self, slab: Slab) -> str:
        return (
            f"{slab.category.value} {slab.slab_id}: "
            f"{slab.width:g} x {slab.height:g} x {slab.depth:g} mm "
            f"at ({slab.x:g}, {slab.y:g}, {slab.z:g}), material {slab.material}"
        )

    def format(self, output: MergeOutput) -> str:
        lines = []
        if output.warnings:
            lines.append(self.format_warnings(output.warnings))
        if output.result is not None:
            removed = ", ".join(output.result.removed_ids)
            lines.append(f"Merged {removed}")
            lines.append(f"  -> {self.format_slab(output.result.slab)}")
        elif output.needs_confirmation:
            lines.append("Merge not performed; re-run with --yes to confirm.")
        return "\n".join(lines)


class ConfigErrorFormatter:
    """Formats a configuration load failure as an ``Errors:`` block."""

    def format(self, error: ConfigError) -> str:
        lines = ["Errors:"]
        if error.error_type == "file_not_found":
            lines.append(f"  File not found: {error.path}")
        elif error.error_type == "json_parse":
            lines.append(f"  Invalid JSON syntax in {error.path}")
            lines.extend(
                f"    line {d.get('line', '?')}, column {d.get('column', '?')}: "
                f"{d.get('message', '')}"
                for d in error.details
            )
        elif error.details:
            for detail in error.details:
                lines.append(f"  {detail.get('path') or '(document)'}: {detail.get('message')}")
                if detail.get("value") is not None:
                    lines.append(f"    got {detail['value']!r}")
        else:
            lines.append(f"  {error.message}")
        return "\n".join(lines)


class ValidationReportFormatter:
    """Formats layout check results, one block per check group.

    A group line reads ``Drawers: ok`` or ``Drawers: 1 error(s), 1 warning(s)``
    and is followed by its findings.
    """

    def format(self, groups: Sequence[tuple[str, ValidationResult]]) -> str:
        lines = []
        errors = warnings = 0
        for heading, result in groups:
            errors += len(result.errors)
            warnings += len(result.warnings)
            lines.append(f"{heading}: {self._count(result)}")
            for error in result.errors:
                lines.append(f"  {error.path}: {error.message}")
                if error.value is not None:
                    lines.append(f"    got {error.value!r}")
            for warning in result.warnings:
                lines.append(f"  {warning.path}: {warning.message}")
                if warning.suggestion:
                    lines.append(f"    Suggestion: {warning.suggestion}")
        lines.append("")
        if errors:
            lines.append(f"Validation failed: {errors} error(s), {warnings} warning(s)")
        elif warnings:
            lines.append(f"Validation passed with {warnings} warning(s)")
        else:
            lines.append("Validation passed. Configuration is valid.")
        return "\n".join(lines)

    def _count(self, result: ValidationResult) -> str:
        parts = []
        if result.errors:
            parts.append(f"{len(result.errors)} error(s)")
        if result.warnings:
            parts.append(f"{len(result.warnings)} warning(s)")
        return ", ".join(parts) or "ok"


class JsonExporter:
    """Exports the panel tree, cut list and merges as JSON."""

    def export(self, output: LayoutOutput) -> str:
        """Export layout output as JSON string."""
        if not output.is_valid or output.layout is None:
            return json.dumps({"errors": output.errors}, indent=2)

        layout = output.layout
        data: dict[str, Any] = {
            "cabinet_type": layout.cabinet_type.value,
            "dimensions": {
                "width": layout.dimensions.width,
                "height": layout.dimensions.height,
                "depth": layout.dimensions.depth,
            },
            "elevation": layout.elevation,
            "panels": [self._format_panel(p) for p in layout.panels],
            "drawer_heights": list(layout.drawer_heights),
            "cut_list": [self._format_cut_piece(p) for p in output.cut_list],
        }
        if output.drawer_validation is not None:
            data["drawer_validation"] = {
                "is_valid": output.drawer_validation.is_valid,
                "total_height": output.drawer_validation.total_height,
                "remaining_height": output.drawer_validation.remaining_height,
                "errors": list(output.drawer_validation.errors),
            }
        return json.dumps(data, indent=2)

    def export_merge(self, output: MergeOutput) -> str:
        """Export a merge outcome as JSON string."""
        data: dict[str, Any] = {
            "warnings": [
                {
                    "type": w.type.value,
                    "message": w.message,
                    "affected": list(w.affected),
                }
                for w in output.warnings
            ],
            "confirmed": output.confirmed,
            "merged": None,
            "removed_ids": [],
        }
        if output.result is not None:
            slab = output.result.slab
            data["merged"] = {
                "id": slab.slab_id,
                "category": slab.category.value,
                "x": slab.x,
                "y": slab.y,
                "z": slab.z,
                "width": slab.width,
                "height": slab.height,
                "depth": slab.depth,
                "material": slab.material,
                "product_id": slab.product_id,
            }
            data["removed_ids"] = list(output.result.removed_ids)
        if output.errors:
            data["errors"] = list(output.errors)
        return json.dumps(data, indent=2)

    def _format_panel(self, panel: PanelDescriptor) -> dict[str, Any]:
        result: dict[str, Any] = {
            "type": panel.panel_type.value,
            "name": panel.name,
            "shape": panel.shape.value,
            "width": panel.width,
            "height": panel.height,
            "depth": panel.depth,
            "position": {
                "x": panel.position.x,
                "y": panel.position.y,
                "z": panel.position.z,
            },
        }
        if panel.index is not None:
            result["index"] = panel.index
        if panel.metadata:
            result["metadata"] = dict(panel.metadata)
        return result

    def _format_cut_piece(self, piece: CutPiece) -> dict[str, Any]:
        return {
            "label": piece.label,
            "width": piece.width,
            "height": piece.height,
            "quantity": piece.quantity,
            "panel_type": piece.panel_type.value,
            "thickness": piece.thickness,
        }
