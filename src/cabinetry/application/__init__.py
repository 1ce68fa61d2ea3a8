"""Application layer - use cases and orchestration."""

from .commands import MergeSlabsCommand, ResolveLayoutCommand
from .dtos import LayoutOutput, MergeOutput

__all__ = [
    "LayoutOutput",
    "MergeOutput",
    "MergeSlabsCommand",
    "ResolveLayoutCommand",
]
