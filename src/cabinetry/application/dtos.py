"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cabinetry.domain import CarcassLayout, CutPiece, MergeWarning
from cabinetry.domain.services import HeightValidation, MergeResult


@dataclass
class LayoutOutput:
    """Output DTO of :class:`ResolveLayoutCommand`.

    Attributes:
        layout: The resolved panel tree, ``None`` if resolution failed.
        cut_list: Consolidated cut pieces, largest first.
        drawer_validation: Drawer height diagnostics when drawers are fitted.
        errors: Error messages if resolution failed.
    """

    layout: CarcassLayout | None
    cut_list: list[CutPiece] = field(default_factory=list)
    drawer_validation: HeightValidation | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the output is valid (no errors)."""
        return len(self.errors) == 0 and self.layout is not None


@dataclass
class MergeOutput:
    """Output DTO of :class:`MergeSlabsCommand`.

    Attributes:
        result: The merge, ``None`` when it did not happen.
        warnings: Conflicts found in the selection.
        confirmed: Whether the caller confirmed the warnings.
        errors: Reasons the merge could not happen.
    """

    result: MergeResult | None
    warnings: list[MergeWarning] = field(default_factory=list)
    confirmed: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def needs_confirmation(self) -> bool:
        """True when warnings were found and the caller has not confirmed them."""
        return bool(self.warnings) and not self.confirmed

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0
