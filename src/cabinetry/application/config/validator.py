"""Validation structures and layout checks for carcass documents.

Schema validation (types, ranges) happens when a document is loaded. The
checks here run on a loaded document and catch what the schema cannot see:
carcasses too small for their panels, inconsistent drawer heights and
selections that will be ignored.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from cabinetry.application.config.adapter import config_to_defaults
from cabinetry.application.config.schemas import CarcassDocument
from cabinetry.domain.services import (
    CarcassDimensionResolver,
    HeightState,
    validate_heights,
)
from cabinetry.domain.value_objects import CabinetType


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "dimensions.width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if the configuration has any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_dimensions(document: CarcassDocument) -> ValidationResult:
    """Every dimension must exceed twice the panel thickness."""
    result = ValidationResult()
    thickness = document.material.back_thickness or document.material.panel_thickness
    for name in ("width", "height", "depth"):
        value = getattr(document.dimensions, name)
        if value <= 2 * thickness:
            result.add_error(
                f"dimensions.{name}",
                f"Must exceed twice the panel thickness ({2 * thickness}mm)",
                value,
            )
    return result


def check_drawers(document: CarcassDocument) -> ValidationResult:
    """Saved drawer heights must match the quantity and fit the carcass."""
    result = ValidationResult()
    features = document.config

    if not features.drawer_enabled:
        if features.drawer_heights:
            result.add_warning(
                "config.drawer_heights",
                "Drawer heights are ignored while drawers are disabled",
            )
        return result

    if not features.drawer_heights:
        return result

    state = HeightState(
        document.dimensions.height,
        features.drawer_quantity,
        tuple(features.drawer_heights),
    )
    for message in validate_heights(state).errors:
        result.add_error("config.drawer_heights", message, list(features.drawer_heights))

    if result.errors:
        return result

    total = sum(features.drawer_heights)
    if abs(total - document.dimensions.height) > 0.1:
        result.add_warning(
            "config.drawer_heights",
            f"Drawer heights total {total}mm but the carcass is "
            f"{document.dimensions.height}mm high; they will be reset to an equal "
            f"distribution",
            suggestion="Leave drawer_heights empty or make them fill the carcass",
        )
    return result


def check_features(document: CarcassDocument) -> ValidationResult:
    """Selections that will be silently ignored by the layout."""
    result = ValidationResult()
    features = document.config

    if features.overhang_door and document.cabinet_type != CabinetType.TOP:
        result.add_warning(
            "config.overhang_door",
            f"Door overhang only applies to top cabinets, not "
            f"{document.cabinet_type.value}",
        )

    if features.door_enabled and features.drawer_enabled:
        result.add_warning(
            "config",
            "Both doors and drawers are enabled; the fronts will overlap",
        )

    if features.shelf_count > 0:
        resolver = CarcassDimensionResolver(config_to_defaults(document.defaults))
        positions = resolver.shelf_positions(
            document.dimensions.height,
            document.material.back_thickness or document.material.panel_thickness,
            features.shelf_count,
            features.shelf_spacing,
        )
        if not positions:
            result.add_warning(
                "config.shelf_count",
                "Carcass is too short for shelves; none will be placed",
                suggestion="Set shelf_count to 0",
            )

    return result


# Check groups in report order, as (heading, check)
LAYOUT_CHECKS: tuple[tuple[str, Callable[[CarcassDocument], ValidationResult]], ...] = (
    ("Dimensions", check_dimensions),
    ("Drawers", check_drawers),
    ("Ignored selections", check_features),
)


def validate_config(document: CarcassDocument) -> ValidationResult:
    """Run every layout check on a loaded carcass document."""
    result = ValidationResult()
    for _, check in LAYOUT_CHECKS:
        result.merge(check(document))
    return result
