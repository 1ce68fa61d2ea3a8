"""Value objects for merging benchtops and kickers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SlabCategory(str, Enum):
    """Slab assemblies that can be merged together."""

    BENCHTOP = "benchtop"
    KICKER = "kicker"


class MergeWarningType(str, Enum):
    """Kinds of conflict reported before a merge."""

    HEIGHT = "height"
    DEPTH = "depth"
    THICKNESS = "thickness"
    MATERIAL = "material"


@dataclass(frozen=True)
class MergeWarning:
    """Advisory conflict that the caller must confirm before merging.

    Attributes:
        type: Category of the conflict.
        message: Human-readable alert text.
        affected: Display numbers (``"#3"``) of the flagged slabs.
    """

    type: MergeWarningType
    message: str
    affected: tuple[str, ...] = field(default_factory=tuple)
