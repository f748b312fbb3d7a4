"""Battler record -- a reference marker store and resistance source.

The engine never touches a battler directly; the mechanics helpers read the
current marker through :meth:`Battler.has_marker`, pass
:meth:`Battler.is_resisted` into the engine, and apply the result here.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tier_ladder.ir.resolution import ResolutionResult


class Battler(BaseModel):
    """Anything that can carry ladder markers."""

    name: str
    markers: set[str] = Field(default_factory=set)
    """Markers currently applied (e.g. ``"depressed"``, ``"atk_up_2"``)."""

    resistances: set[str] = Field(default_factory=set)
    """Markers this battler is immune to."""

    # -- marker store --------------------------------------------------------

    def has_marker(self, marker: str) -> bool:
        return marker in self.markers

    def add_marker(self, marker: str) -> None:
        self.markers.add(marker)

    def remove_marker(self, marker: str) -> None:
        """Remove *marker* if present."""
        self.markers.discard(marker)

    # -- resistance source ---------------------------------------------------

    def is_resisted(self, marker: str) -> bool:
        return marker in self.resistances

    # -- applying decisions --------------------------------------------------

    def apply_resolution(self, result: ResolutionResult) -> None:
        """Swap markers as decided by *result*.  No-ops leave the set untouched."""
        if result.removed_marker is not None:
            self.remove_marker(result.removed_marker)
        if result.added_marker is not None:
            self.add_marker(result.added_marker)
