"""Infrastructure layer - output formatting and export."""

from .formatters import (
    ConfigErrorFormatter,
    CutListFormatter,
    DrawerHeightsFormatter,
    JsonExporter,
    LayoutFormatter,
    MergeWarningFormatter,
    ValidationReportFormatter,
)

__all__ = [
    "ConfigErrorFormatter",
    "CutListFormatter",
    "DrawerHeightsFormatter",
    "JsonExporter",
    "LayoutFormatter",
    "MergeWarningFormatter",
    "ValidationReportFormatter",
]
