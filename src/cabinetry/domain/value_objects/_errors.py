"""Error types raised by the layout engine."""

from __future__ import annotations


class InvalidDimensionsError(ValueError):
    """Raised when carcass dimensions cannot produce positive panels.

    Attributes:
        fields: Names of the offending dimensions (e.g. ``("width",)``).
    """

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        self.fields = fields
        super().__init__(message)


class CardinalityError(ValueError):
    """Raised when a count (doors, drawers) falls outside its allowed range.

    Attributes:
        name: The name of the counted item ("door_count", "drawer_quantity").
        value: The rejected value.
        allowed: Human-readable description of the allowed values.
    """

    def __init__(self, name: str, value: int, allowed: str) -> None:
        self.name = name
        self.value = value
        self.allowed = allowed
        super().__init__(f"{name} must be {allowed} (got {value})")
