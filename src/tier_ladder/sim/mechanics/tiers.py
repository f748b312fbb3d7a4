"""Tier mechanics on a battler -- resolve a move, then apply it.

Each helper performs one full read-resolve-apply sequence against a single
:class:`~tier_ladder.sim.core.battler.Battler`.  Callers sharing a battler
across threads must serialize these calls themselves.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tier_ladder.engine.resolution import current_tier, find_current_marker, resolve_tier
from tier_ladder.ir.ladders import LadderCategory, LadderName
from tier_ladder.ir.resolution import ResolutionResult

if TYPE_CHECKING:
    from tier_ladder.content.registry import LadderRegistry
    from tier_ladder.sim.core.battler import Battler

logger = logging.getLogger(__name__)

# Emotions are checked in this order when a battler somehow carries several.
_EMOTION_PRIORITY = (
    LadderName.HAPPY,
    LadderName.SAD,
    LadderName.ANGRY,
    LadderName.AFRAID,
)


def state_tier(battler: Battler, name: str | LadderName, registry: LadderRegistry) -> int:
    """Return the battler's signed tier on the full ladder *name*.

    Raises
    ------
    UnknownLadderError
        If *name* does not resolve to a registered ladder.
    """
    ladder = registry.get_ladder(registry.ladder_name(name))
    return current_tier(ladder, find_current_marker(ladder, battler.has_marker))


def emotion_state_type(battler: Battler, registry: LadderRegistry) -> LadderName | None:
    """Return the emotion ladder the battler currently sits on.

    ``None`` means the battler is emotionally neutral.
    """
    registered = set(registry.ladders_in(LadderCategory.EMOTION))
    for name in _EMOTION_PRIORITY:
        if name not in registered:
            continue
        ladder = registry.get_ladder(name)
        if find_current_marker(ladder, battler.has_marker) is not None:
            return name
    return None


def emotion_tier(battler: Battler, registry: LadderRegistry) -> int:
    """Tier of whichever emotion the battler feels, 0 when neutral."""
    emotion = emotion_state_type(battler, registry)
    if emotion is None:
        return 0
    return state_tier(battler, emotion, registry)


def add_state_tier(
    battler: Battler,
    name: str | LadderName,
    delta: int,
    registry: LadderRegistry,
) -> ResolutionResult:
    """Move the battler *delta* tiers along ladder *name* and apply the result.

    The ladder walked is ``registry.effective_ladder(name, delta)``, so with
    split buffs a raise never removes an existing debuff marker and vice
    versa.

    Parameters
    ----------
    battler:
        The battler to modify (mutated in place).
    name:
        Ladder name or alias, case-insensitive.
    delta:
        Signed number of tiers to move.
    registry:
        The process-wide ladder registry.

    Returns
    -------
    ResolutionResult
        The applied decision, for log text or animation selection.
    """
    key = registry.ladder_name(name)
    ladder = registry.effective_ladder(key, delta)
    current = find_current_marker(ladder, battler.has_marker)

    result = resolve_tier(ladder, current, delta, battler.is_resisted)
    battler.apply_resolution(result)

    if result.changed:
        logger.debug(
            "%s: %s %r -> %r (tier %d -> %d)",
            battler.name, key.value, result.previous_marker, result.marker,
            result.previous_tier, result.tier,
        )
    return result


def set_state_tier(
    battler: Battler,
    name: str | LadderName,
    tier: int,
    registry: LadderRegistry,
) -> ResolutionResult:
    """Put the battler at *tier* on ladder *name*, replacing any current marker.

    Every marker of the full ladder is cleared first (with split buffs a
    battler can carry a buff and a debuff at once), then the move is
    resolved from neutral, so resistance can still pull the final tier
    toward 0.

    The returned result is measured from the marker that was cleared, so a
    real removal always reports ``changed``.  If several markers were
    cleared, ``previous_marker`` is the lowest one that differs from the
    final marker.
    """
    key = registry.ladder_name(name)
    ladder = registry.get_ladder(key)
    carried = [m for m in ladder.markers if m is not None and battler.has_marker(m)]
    for marker in carried:
        battler.remove_marker(marker)

    fresh = resolve_tier(
        registry.effective_ladder(key, tier), None, tier, battler.is_resisted
    )
    battler.apply_resolution(fresh)

    previous = next((m for m in carried if m != fresh.marker), fresh.marker if carried else None)
    previous_tier = ladder.tier_of(previous)
    result = ResolutionResult(
        ladder=key,
        previous_marker=previous,
        marker=fresh.marker,
        previous_tier=previous_tier,
        clamped_tier=fresh.clamped_tier,
        tier=fresh.tier,
        requested_delta=tier - previous_tier,
    )

    if result.changed:
        logger.debug(
            "%s: %s set %r -> %r (tier %d -> %d)",
            battler.name, key.value, result.previous_marker, result.marker,
            result.previous_tier, result.tier,
        )
    return result
