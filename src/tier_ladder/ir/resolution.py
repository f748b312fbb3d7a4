"""Resolution results -- the outcome of moving a battler along a ladder."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .ladders import LadderName


class TierOutcome(str, Enum):
    """Which kind of change a resolution produced, for log/animation selection."""

    NO_CHANGE = "NO_CHANGE"
    """Nothing moved: zero delta, or every candidate tier was resisted."""

    CHANGED = "CHANGED"
    """The marker moved to a different position."""

    PINNED = "PINNED"
    """The battler already sat at the extreme in the requested direction."""


class ResolutionResult(BaseModel):
    """Transient decision returned by :func:`~tier_ladder.engine.resolve_tier`.

    The engine never touches the battler; the caller removes
    :attr:`removed_marker` and adds :attr:`added_marker` itself.
    """

    model_config = ConfigDict(frozen=True)

    ladder: LadderName
    previous_marker: str | None
    """Marker the battler carried on this ladder before the move (``None`` = neutral)."""

    marker: str | None
    """Marker the battler should carry afterwards (``None`` = neutral)."""

    previous_tier: int
    clamped_tier: int
    """Tier targeted after clamping to the ladder ends, before resistance fallback."""

    tier: int
    """Tier actually reached."""

    requested_delta: int

    @property
    def changed(self) -> bool:
        return self.marker != self.previous_marker

    @property
    def applied_delta(self) -> int:
        """Net number of tiers actually moved."""
        return self.tier - self.previous_tier

    @property
    def saturated(self) -> bool:
        """True if the request overshot the ladder end and was clamped."""
        return self.previous_tier + self.requested_delta != self.clamped_tier

    @property
    def resisted(self) -> bool:
        """True if resistance pulled the result back toward the start."""
        return self.tier != self.clamped_tier

    @property
    def removed_marker(self) -> str | None:
        if self.changed and self.previous_marker is not None:
            return self.previous_marker
        return None

    @property
    def added_marker(self) -> str | None:
        if self.changed and self.marker is not None:
            return self.marker
        return None

    @property
    def outcome(self) -> TierOutcome:
        if self.changed:
            return TierOutcome.CHANGED
        if self.requested_delta != 0 and self.clamped_tier == self.previous_tier:
            return TierOutcome.PINNED
        return TierOutcome.NO_CHANGE
