"""Views: named groups of cabinets.

A view scopes document-wide edits such as the kicker height. Views are
lettered ``A`` to ``Z`` and each cabinet belongs to at most one of them.
"""

from __future__ import annotations

import logging
import string
from typing import Iterable, Mapping

from .assembly import CarcassAssembly

logger = logging.getLogger(__name__)

__all__ = ["NO_VIEW", "MAX_VIEWS", "ViewSet", "apply_kicker_height"]

NO_VIEW = "none"
VIEW_LETTERS = string.ascii_uppercase
MAX_VIEWS = len(VIEW_LETTERS)


class ViewSet:
    """Disjoint partition of cabinet ids into lettered views.

    Example:
        >>> views = ViewSet()
        >>> views.create_view()
        'A'
        >>> views.assign("c1", "A")
        >>> views.view_of("c1")
        'A'
    """

    def __init__(self) -> None:
        self._views: dict[str, set[str]] = {}
        self._cabinet_view: dict[str, str] = {}

    @property
    def view_ids(self) -> list[str]:
        """Existing view letters in alphabetical order."""
        return sorted(self._views)

    def create_view(self) -> str:
        """Create the next unused view letter.

        Raises:
            ValueError: If all 26 views exist.
        """
        for letter in VIEW_LETTERS:
            if letter not in self._views:
                self._views[letter] = set()
                return letter
        raise ValueError(f"Maximum number of views reached ({MAX_VIEWS})")

    def _require(self, view_id: str) -> set[str]:
        try:
            return self._views[view_id]
        except KeyError:
            raise ValueError(f"View '{view_id}' does not exist") from None

    def assign(self, cabinet_id: str, view_id: str) -> None:
        """Move a cabinet into a view, removing it from its previous one.

        Assigning to ``"none"`` unassigns the cabinet.

        Raises:
            ValueError: If the view does not exist.
        """
        if view_id == NO_VIEW:
            self.unassign(cabinet_id)
            return
        members = self._require(view_id)
        self.unassign(cabinet_id)
        members.add(cabinet_id)
        self._cabinet_view[cabinet_id] = view_id

    def unassign(self, cabinet_id: str) -> None:
        """Remove a cabinet from whatever view holds it."""
        previous = self._cabinet_view.pop(cabinet_id, None)
        if previous is not None:
            self._views[previous].discard(cabinet_id)

    def delete_view(self, view_id: str) -> list[str]:
        """Delete a view; its cabinets become unassigned.

        Returns:
            The ids of the cabinets that were in the view.

        Raises:
            ValueError: For ``"none"`` or an unknown view.
        """
        if view_id == NO_VIEW:
            raise ValueError("Cannot delete the 'none' view")
        members = self._require(view_id)
        for cabinet_id in members:
            del self._cabinet_view[cabinet_id]
        del self._views[view_id]
        return sorted(members)

    def view_of(self, cabinet_id: str) -> str | None:
        """The view holding a cabinet, or ``None``."""
        return self._cabinet_view.get(cabinet_id)

    def cabinets_in_view(self, view_id: str) -> list[str]:
        """Cabinet ids in a view (empty for an unknown view)."""
        return sorted(self._views.get(view_id, ()))

    def same_view(self, cabinet_ids: Iterable[str]) -> bool:
        """Whether every given cabinet is assigned to one and the same view."""
        views = {self._cabinet_view.get(c) for c in cabinet_ids}
        return len(views) == 1 and None not in views


def apply_kicker_height(
    view_set: ViewSet,
    view_id: str,
    kicker_height: float,
    assemblies: Mapping[str, CarcassAssembly],
) -> list[str]:
    """Set the kicker height of every base and tall cabinet in one view.

    Args:
        view_set: The document's views.
        view_id: View to update.
        kicker_height: New kicker (leg) height.
        assemblies: Assemblies by cabinet id.

    Returns:
        Ids of the cabinets that were repositioned.
    """
    updated = []
    for cabinet_id in view_set.cabinets_in_view(view_id):
        assembly = assemblies.get(cabinet_id)
        if assembly is None:
            logger.warning(f"Cabinet '{cabinet_id}' in view {view_id} has no assembly")
            continue
        if assembly.update_kicker_height(kicker_height):
            updated.append(cabinet_id)
    return updated
