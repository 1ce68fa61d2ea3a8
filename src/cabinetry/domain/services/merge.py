"""Benchtop and kicker merging.

Merging replaces N slabs of one category with a single slab covering their
bounding union. Before merging, :func:`analyze_merge` reports the conflicts
the caller should confirm (differing heights, depths, thicknesses or
materials). Warnings are advisory; the merge itself never refuses a
conflict, only an invalid selection.
"""

from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..defaults import LayoutDefaults
from ..entities import Slab
from ..value_objects import (
    CarcassDimensions,
    MergeWarning,
    MergeWarningType,
    SlabCategory,
)

logger = logging.getLogger(__name__)

__all__ = [
    "MERGE_TOLERANCE",
    "MergeResult",
    "SlabStore",
    "analyze_merge",
    "benchtop_depth",
    "benchtop_for_cabinet",
    "cabinet_number",
    "effective_benchtop_span",
    "merge_slabs",
]

MERGE_TOLERANCE = 0.5

_DIGITS = re.compile(r"\d+")


@dataclass(frozen=True)
class MergeResult:
    """Outcome of a merge.

    Attributes:
        slab: The synthesized slab.
        warnings: Conflicts found before merging.
        removed_ids: Ids of the source slabs the merge replaced.
    """

    slab: Slab
    warnings: list[MergeWarning] = field(default_factory=list)
    removed_ids: tuple[str, ...] = ()


def cabinet_number(slab: Slab) -> str:
    """Display number of a slab: ``#<sort number>``, else ``#<digits in id>``.

    Falls back to the bare id when it contains no digits.
    """
    if slab.sort_number is not None:
        return f"#{slab.sort_number}"
    match = _DIGITS.search(slab.slab_id)
    return f"#{match.group(0)}" if match else slab.slab_id


def _number_value(number: str) -> int:
    try:
        return int(number.lstrip("#"))
    except ValueError:
        return 0


def _at(values: Iterable[tuple[str, float]], target: float) -> tuple[str, ...]:
    return tuple(n for n, v in values if abs(v - target) < MERGE_TOLERANCE)


def _differs(values: Sequence[float]) -> bool:
    return abs(max(values) - min(values)) > MERGE_TOLERANCE


def _analyze_benchtops(slabs: Sequence[Slab]) -> list[MergeWarning]:
    warnings: list[MergeWarning] = []
    numbers = [cabinet_number(s) for s in slabs]

    ys = [s.y for s in slabs]
    if _differs(ys):
        highest = _at(zip(numbers, ys), max(ys))
        lowest = _at(zip(numbers, ys), min(ys))
        # The smaller group is the odd one out; ties flag the higher group
        if len(highest) <= len(lowest):
            warnings.append(
                MergeWarning(
                    MergeWarningType.HEIGHT,
                    f"Alert: Your Cabinet(s) {', '.join(highest)} is taller than "
                    f"others. Do you want to proceed with Merge?",
                    highest,
                )
            )
        else:
            warnings.append(
                MergeWarning(
                    MergeWarningType.HEIGHT,
                    f"Alert: Your Cabinet(s) {', '.join(lowest)} is shorter than "
                    f"others. Do you want to proceed with Merge?",
                    lowest,
                )
            )

    depths = [s.depth for s in slabs]
    if _differs(depths):
        deepest = _at(zip(numbers, depths), max(depths))
        warnings.append(
            MergeWarning(
                MergeWarningType.DEPTH,
                f"Alert: Your Cabinet(s) {', '.join(deepest)} has deeper Benchtop. "
                f"Do you want to proceed with Merge? It will extend all other "
                f"Benchtop Depth.",
                deepest,
            )
        )

    thicknesses = [s.height for s in slabs]
    if _differs(thicknesses):
        thickest = _at(zip(numbers, thicknesses), max(thicknesses))
        warnings.append(
            MergeWarning(
                MergeWarningType.THICKNESS,
                f"Alert: Your Cabinet(s) {', '.join(thickest)} has different "
                f"Thickness to others. Merging will increase all other thickness "
                f"to the highest Thickness. Do you confirm?",
                thickest,
            )
        )

    if len({s.material for s in slabs}) > 1:
        reference = _material_reference(slabs)
        number = cabinet_number(reference)
        warnings.append(
            MergeWarning(
                MergeWarningType.MATERIAL,
                f'Alert: Your Cabinet {number} material is "{reference.material}". '
                f"By proceeding with Merge, all Benchtop materials will be "
                f"changed to this material.",
                (number,),
            )
        )

    return warnings


def _analyze_kickers(slabs: Sequence[Slab]) -> list[MergeWarning]:
    warnings: list[MergeWarning] = []
    numbers = [cabinet_number(s) for s in slabs]

    heights = [s.height for s in slabs]
    if _differs(heights):
        tallest = _at(zip(numbers, heights), max(heights))
        warnings.append(
            MergeWarning(
                MergeWarningType.HEIGHT,
                f"Alert: The Kicker height will be according to the tallest "
                f"Kicker ({', '.join(tallest)}). Are you sure to proceed?",
                tallest,
            )
        )

    if _differs([s.z for s in slabs]):
        fronts = [s.front_z for s in slabs]
        outermost = _at(zip(numbers, fronts), max(fronts))
        warnings.append(
            MergeWarning(
                MergeWarningType.DEPTH,
                f"Alert: Kicker set backs are not matching. We will merge the "
                f"Kickers based on the outer Kicker ({', '.join(outermost)}). "
                f"Do you want to proceed?",
                outermost,
            )
        )

    return warnings


def _material_reference(slabs: Sequence[Slab]) -> Slab:
    """Slab with the lowest numeric display number (first wins ties)."""
    return min(slabs, key=lambda s: _number_value(cabinet_number(s)))


def analyze_merge(slabs: Sequence[Slab]) -> list[MergeWarning]:
    """Report the conflicts a merge of ``slabs`` would resolve.

    Benchtops are checked for differing floor height, depth, thickness and
    material; kickers for differing height and set back. Differences within
    ``MERGE_TOLERANCE`` are ignored. Fewer than two slabs, or a mixed
    selection, yields no warnings.
    """
    if len(slabs) < 2 or len({s.category for s in slabs}) != 1:
        return []
    if slabs[0].category == SlabCategory.BENCHTOP:
        return _analyze_benchtops(slabs)
    return _analyze_kickers(slabs)


def merge_slabs(slabs: Sequence[Slab], new_id: str | None = None) -> Slab | None:
    """Synthesize one slab covering every slab in ``slabs``.

    Benchtops take the bounding box of all inputs, the first slab's product
    and the material of the lowest-numbered slab. Kickers take the x extent
    of all inputs, the tallest height, the outermost front and the leftmost
    slab's product, material and floor height.

    Args:
        slabs: Two or more slabs of one category.
        new_id: Id for the new slab; a random one is generated if omitted.

    Returns:
        The merged slab, or ``None`` (logged) for fewer than two slabs or a
        mixed selection.
    """
    if len(slabs) < 2:
        logger.warning(f"Need at least 2 slabs to merge, got {len(slabs)}")
        return None

    category = slabs[0].category
    if any(s.category != category for s in slabs):
        logger.warning(f"All selected slabs must be {category.value}s")
        return None

    slab_id = new_id or f"{category.value}-{uuid.uuid4().hex[:8]}"
    min_x = min(s.x for s in slabs)
    max_x = max(s.right_x for s in slabs)
    min_z = min(s.z for s in slabs)
    max_z = max(s.front_z for s in slabs)

    if category == SlabCategory.BENCHTOP:
        first = slabs[0]
        min_y = min(s.y for s in slabs)
        max_y = max(s.top_y for s in slabs)
        merged = Slab(
            slab_id=slab_id,
            category=category,
            x=min_x,
            y=min_y,
            z=min_z,
            width=max_x - min_x,
            height=max_y - min_y,
            depth=max_z - min_z,
            material=_material_reference(slabs).material,
            product_id=first.product_id,
        )
    else:
        reference = min(slabs, key=lambda s: s.x)
        merged = Slab(
            slab_id=slab_id,
            category=category,
            x=min_x,
            y=reference.y,
            z=min_z,
            width=max_x - min_x,
            height=max(s.height for s in slabs),
            depth=max_z - min_z,
            material=reference.material,
            product_id=reference.product_id,
        )

    logger.debug(
        f"Merged {len(slabs)} {category.value}s into {merged.slab_id} "
        f"({merged.width}x{merged.height}x{merged.depth})"
    )
    return merged


class SlabStore:
    """In-memory registry of slabs keyed by id.

    A merge takes the source slabs out of the store before building the
    replacement, so no other operation can see them half-merged. If the merge
    is rejected the sources are put back unchanged.
    """

    def __init__(self, slabs: Iterable[Slab] = ()) -> None:
        self._slabs: dict[str, Slab] = {}
        for slab in slabs:
            self.add(slab)

    def __len__(self) -> int:
        return len(self._slabs)

    def __contains__(self, slab_id: object) -> bool:
        return slab_id in self._slabs

    def __iter__(self):
        return iter(self._slabs.values())

    def add(self, slab: Slab) -> None:
        """Register a slab.

        Raises:
            ValueError: If a slab with the same id is already registered.
        """
        if slab.slab_id in self._slabs:
            raise ValueError(f"Slab '{slab.slab_id}' already exists")
        self._slabs[slab.slab_id] = slab

    def get(self, slab_id: str) -> Slab:
        """Look up a slab by id.

        Raises:
            KeyError: If no such slab is registered.
        """
        try:
            return self._slabs[slab_id]
        except KeyError:
            raise KeyError(f"Unknown slab '{slab_id}'") from None

    def remove(self, slab_id: str) -> Slab:
        """Remove and return a slab."""
        slab = self.get(slab_id)
        del self._slabs[slab_id]
        return slab

    def merge(self, slab_ids: Sequence[str], new_id: str | None = None) -> MergeResult | None:
        """Replace the given slabs with their merged slab.

        Returns:
            The merge result, or ``None`` when the selection cannot be merged
            (the store is left unchanged).

        Raises:
            KeyError: If an id is not registered.
        """
        sources = [self.get(slab_id) for slab_id in slab_ids]
        warnings = analyze_merge(sources)

        taken = [self.remove(s.slab_id) for s in sources]
        merged = merge_slabs(taken, new_id=new_id)
        if merged is None:
            for slab in taken:
                self.add(slab)
            return None

        self.add(merged)
        return MergeResult(
            slab=merged,
            warnings=warnings,
            removed_ids=tuple(s.slab_id for s in taken),
        )


def benchtop_depth(
    parent_depth: float,
    front_overhang: float = 20.0,
    depth_extension: float = 20.0,
) -> float:
    """Benchtop depth: cabinet depth plus the fixed extension and front overhang."""
    return parent_depth + depth_extension + front_overhang


def effective_benchtop_span(
    cabinet_x: float,
    cabinet_width: float,
    attached: Iterable[tuple[float, float]] = (),
) -> tuple[float, float]:
    """Left x and length of a benchtop covering a cabinet and its attachments.

    Args:
        cabinet_x: Left edge of the cabinet.
        cabinet_width: Cabinet width.
        attached: ``(left_x, width)`` of each filler or panel attached to the
            cabinet.

    Returns:
        ``(left_x, length)``.
    """
    min_x = cabinet_x
    max_x = cabinet_x + cabinet_width
    for left, width in attached:
        min_x = min(min_x, left)
        max_x = max(max_x, left + width)
    return min_x, max_x - min_x


def benchtop_for_cabinet(
    slab_id: str,
    cabinet_x: float,
    cabinet_y: float,
    cabinet_z: float,
    dimensions: CarcassDimensions,
    attached: Iterable[tuple[float, float]] = (),
    defaults: LayoutDefaults | None = None,
    front_overhang: float | None = None,
    thickness: float | None = None,
    material: str = "Unknown",
    product_id: str = "",
) -> Slab:
    """Benchtop slab sitting on a base cabinet.

    The slab spans the cabinet and any attached fillers or panels, rests on
    the carcass top (``cabinet_y + height``) and starts at the cabinet's back
    face.
    """
    defaults = defaults or LayoutDefaults()
    overhang = defaults.benchtop_front_overhang if front_overhang is None else front_overhang
    left_x, length = effective_benchtop_span(cabinet_x, dimensions.width, attached)
    return Slab(
        slab_id=slab_id,
        category=SlabCategory.BENCHTOP,
        x=left_x,
        y=cabinet_y + dimensions.height,
        z=cabinet_z,
        width=length,
        height=defaults.benchtop_thickness if thickness is None else thickness,
        depth=benchtop_depth(dimensions.depth, overhang, defaults.benchtop_depth_extension),
        material=material,
        product_id=product_id,
    )
