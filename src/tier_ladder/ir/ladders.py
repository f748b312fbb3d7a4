"""Ladder definitions -- ordered marker positions for tiered status effects."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class LadderName(str, Enum):
    """Canonical names of the registered ladders."""

    SAD = "sad"
    ANGRY = "angry"
    HAPPY = "happy"
    AFRAID = "afraid"
    ATK = "atk"
    DEF = "def"
    SPD = "spd"


class LadderCategory(str, Enum):
    """Broad grouping of a ladder, used by the selection helpers."""

    EMOTION = "EMOTION"
    """Emotional state ladders (sad, angry, happy, afraid)."""

    BUFF = "BUFF"
    """Stat modification ladders spanning both directions (atk, def, spd)."""


class UnknownLadderError(KeyError):
    """Raised when a ladder name is not registered, even after alias resolution."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown ladder: {self.name!r}"


class Ladder(BaseModel):
    """An ordered sequence of mutually exclusive marker positions.

    Positions are listed from the lowest tier to the highest.  Exactly one
    position holds ``None`` -- the neutral position (tier 0).  Positions
    before it are negative tiers, positions after it positive tiers.
    """

    model_config = ConfigDict(frozen=True)

    name: LadderName
    category: LadderCategory
    markers: tuple[str | None, ...]
    """Marker identifiers ordered low to high.  ``None`` is the neutral position."""

    @model_validator(mode="after")
    def _validate_positions(self) -> "Ladder":
        if not self.markers:
            raise ValueError(f"Ladder {self.name.value!r} has no positions")

        neutral_count = sum(1 for m in self.markers if m is None)
        if neutral_count != 1:
            raise ValueError(
                f"Ladder {self.name.value!r} must have exactly one neutral "
                f"position, found {neutral_count}"
            )

        named = [m for m in self.markers if m is not None]
        duplicates = sorted({m for m in named if named.count(m) > 1})
        if duplicates:
            raise ValueError(
                f"Ladder {self.name.value!r} has duplicate markers: "
                f"{', '.join(duplicates)}"
            )
        return self

    # -- positions -----------------------------------------------------------

    @property
    def neutral_index(self) -> int:
        return self.markers.index(None)

    @property
    def last_index(self) -> int:
        return len(self.markers) - 1

    @property
    def min_tier(self) -> int:
        return -self.neutral_index

    @property
    def max_tier(self) -> int:
        return self.last_index - self.neutral_index

    @property
    def spans_both_directions(self) -> bool:
        """True if the ladder has positions on both sides of neutral."""
        return self.min_tier < 0 < self.max_tier

    def index_of(self, marker: str | None) -> int | None:
        """Return the position index of *marker*, or ``None`` if absent.

        ``None`` (the neutral marker) always resolves to the neutral index.
        """
        if marker is None:
            return self.neutral_index
        try:
            return self.markers.index(marker)
        except ValueError:
            return None

    def tier_of(self, marker: str | None) -> int:
        """Signed tier of *marker*; markers outside the ladder count as 0."""
        index = self.index_of(marker)
        if index is None:
            return 0
        return index - self.neutral_index

    def marker_for_tier(self, tier: int) -> str | None:
        """Return the marker at *tier*, clamped to the ladder's ends."""
        index = min(max(self.neutral_index + tier, 0), self.last_index)
        return self.markers[index]

    # -- split halves --------------------------------------------------------

    def raising_half(self) -> Ladder:
        """The ladder from neutral upwards, discarding negative tiers."""
        return self.model_copy(update={"markers": self.markers[self.neutral_index:]})

    def lowering_half(self) -> Ladder:
        """The ladder from the bottom up to neutral, discarding positive tiers."""
        return self.model_copy(update={"markers": self.markers[: self.neutral_index + 1]})
