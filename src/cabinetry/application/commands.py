"""Application commands (use cases) for carcass layout and slab merging."""

from __future__ import annotations

import logging

from cabinetry.application.config import (
    CarcassDocument,
    SlabMergeDocument,
    config_to_carcass_config,
    config_to_defaults,
    config_to_dimensions,
    config_to_slabs,
)
from cabinetry.domain import (
    CarcassAssembly,
    CarcassDimensionResolver,
    CutListGenerator,
)
from cabinetry.domain.services import SlabStore, analyze_merge

from .dtos import LayoutOutput, MergeOutput

logger = logging.getLogger(__name__)


class ResolveLayoutCommand:
    """Resolve the full panel tree and cut list of one carcass document."""

    def __init__(self, cut_list_generator: CutListGenerator | None = None) -> None:
        self.cut_list_generator = cut_list_generator or CutListGenerator()

    def build_assembly(self, document: CarcassDocument) -> CarcassAssembly:
        """Create the assembly described by a document.

        Raises:
            ValueError: If the document describes an impossible carcass.
        """
        return CarcassAssembly(
            cabinet_type=document.cabinet_type,
            dimensions=config_to_dimensions(document.dimensions),
            config=config_to_carcass_config(document),
            defaults=config_to_defaults(document.defaults),
            cabinet_id=document.id,
            product_id=document.product_id,
        )

    def execute(self, document: CarcassDocument, strict: bool = False) -> LayoutOutput:
        """Execute the layout resolution.

        Args:
            document: A validated carcass document.
            strict: Reject carcasses too small for their panels instead of
                resolving degenerate geometry.

        Returns:
            LayoutOutput with the layout, sorted cut list and drawer
            diagnostics, or with ``errors`` set.
        """
        try:
            assembly = self.build_assembly(document)
            if strict:
                CarcassDimensionResolver.check_dimensions(
                    assembly.dimensions, assembly.config.material.thickness
                )
        except ValueError as e:
            logger.debug(f"Layout resolution failed: {e}")
            return LayoutOutput(layout=None, errors=[str(e)])

        cut_list = self.cut_list_generator.sort_by_size(
            self.cut_list_generator.generate(assembly.layout())
        )
        stack = assembly.drawer_stack()

        return LayoutOutput(
            layout=assembly.layout(),
            cut_list=cut_list,
            drawer_validation=stack.validation if stack else None,
        )


class MergeSlabsCommand:
    """Merge the slabs of a merge document into one.

    The merge is held back when the selection has conflicts and the caller
    has not confirmed them.
    """

    def execute(
        self,
        document: SlabMergeDocument,
        confirm: bool = False,
        new_id: str | None = None,
    ) -> MergeOutput:
        """Execute the merge.

        Args:
            document: A validated merge document.
            confirm: Proceed even when warnings are found.
            new_id: Id for the merged slab.

        Returns:
            MergeOutput; ``result`` is ``None`` when the merge needs
            confirmation or the selection cannot be merged.
        """
        slabs = config_to_slabs(document)
        warnings = analyze_merge(slabs)

        if warnings and not confirm:
            return MergeOutput(result=None, warnings=warnings, confirmed=False)

        store = SlabStore(slabs)
        result = store.merge([s.slab_id for s in slabs], new_id=new_id)
        if result is None:
            return MergeOutput(
                result=None,
                warnings=warnings,
                confirmed=confirm,
                errors=[f"Need at least 2 {document.category.value}s to merge"],
            )

        return MergeOutput(result=result, warnings=warnings, confirmed=confirm)
