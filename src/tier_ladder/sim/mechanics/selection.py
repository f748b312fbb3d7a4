"""Ladder selection helpers layered on top of :mod:`.tiers`.

These pick *which* ladder to move -- at random, by the battler's current
emotion, by the target's emotion, or by the battler's strongest/weakest
buff -- and then delegate to :func:`~tier_ladder.sim.mechanics.tiers.add_state_tier`.
Helpers that have nothing to act on (e.g. a neutral battler asked to
reinforce its emotion) return ``None`` instead of a result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from tier_ladder.ir.ladders import LadderCategory, LadderName
from tier_ladder.sim.mechanics.tiers import add_state_tier, emotion_state_type, state_tier

if TYPE_CHECKING:
    from tier_ladder.content.registry import LadderRegistry
    from tier_ladder.ir.resolution import ResolutionResult
    from tier_ladder.sim.core.battler import Battler
    from tier_ladder.sim.core.rng import SelectionRNG

logger = logging.getLogger(__name__)


def _choose(candidates: Iterable[LadderName], rng: SelectionRNG | None) -> LadderName | None:
    """Pick one ladder from *candidates*; without an rng, the first by name."""
    if rng is not None:
        return rng.choose_ladder(candidates)
    return min(candidates, key=lambda n: n.value, default=None)


# ---------------------------------------------------------------------------
# Random ladders
# ---------------------------------------------------------------------------

def add_random_emotion(
    battler: Battler, delta: int, registry: LadderRegistry, rng: SelectionRNG
) -> ResolutionResult | None:
    """Move a uniformly chosen axis emotion (never afraid) by *delta* tiers.

    Returns ``None`` if the registry has no axis emotions.
    """
    emotion = rng.choose_ladder(
        name for name in registry.primary_ladders()
        if registry.get_ladder(name).category == LadderCategory.EMOTION
    )
    if emotion is None:
        logger.warning("add_random_emotion: registry has no axis emotion ladders")
        return None
    return add_state_tier(battler, emotion, delta, registry)


def add_random_buff(
    battler: Battler, delta: int, registry: LadderRegistry, rng: SelectionRNG
) -> ResolutionResult | None:
    """Move a uniformly chosen buff ladder by *delta* tiers.

    Returns ``None`` if the registry has no buff ladders.
    """
    buff = rng.choose_ladder(registry.ladders_in(LadderCategory.BUFF))
    if buff is None:
        logger.warning("add_random_buff: registry has no buff ladders")
        return None
    return add_state_tier(battler, buff, delta, registry)


def add_random_tier(
    battler: Battler,
    name: str | LadderName,
    min_delta: int,
    max_delta: int,
    registry: LadderRegistry,
    rng: SelectionRNG,
) -> ResolutionResult:
    """Move ladder *name* by a delta drawn uniformly from ``[min_delta, max_delta]``."""
    return add_state_tier(battler, name, rng.random_delta(min_delta, max_delta), registry)


# ---------------------------------------------------------------------------
# Ladders derived from the battler's own emotion
# ---------------------------------------------------------------------------

def add_supplementary_emotion(
    battler: Battler, delta: int, registry: LadderRegistry
) -> ResolutionResult | None:
    """Push the battler further along the emotion it already feels."""
    emotion = emotion_state_type(battler, registry)
    if emotion is None:
        return None
    return add_state_tier(battler, emotion, delta, registry)


def add_supplementary_buff(
    battler: Battler, delta: int, registry: LadderRegistry
) -> ResolutionResult | None:
    """Move the buff ladder that reinforces the battler's current emotion."""
    emotion = emotion_state_type(battler, registry)
    if emotion is None:
        return None
    buff = registry.reinforcing_ladder(emotion)
    if buff is None:
        return None
    return add_state_tier(battler, buff, delta, registry)


def add_complementary_buff(
    battler: Battler, delta: int, registry: LadderRegistry
) -> ResolutionResult | None:
    """Move the buff ladder that offsets the battler's current emotion."""
    emotion = emotion_state_type(battler, registry)
    if emotion is None:
        return None
    buff = registry.offsetting_ladder(emotion)
    if buff is None:
        return None
    return add_state_tier(battler, buff, delta, registry)


# ---------------------------------------------------------------------------
# Ladders derived from another battler's emotion
# ---------------------------------------------------------------------------

def add_advantage_emotion(
    battler: Battler,
    target: Battler,
    delta: int,
    registry: LadderRegistry,
    rng: SelectionRNG | None = None,
) -> ResolutionResult | None:
    """Give *battler* an emotion that is strong against *target*'s emotion.

    Returns ``None`` if the target is neutral or its emotion has no axis
    membership.
    """
    target_emotion = emotion_state_type(target, registry)
    if target_emotion is None:
        return None
    emotion = _choose(registry.weak_against(target_emotion), rng)
    if emotion is None:
        return None
    return add_state_tier(battler, emotion, delta, registry)


def add_disadvantage_emotion(
    battler: Battler,
    target: Battler,
    delta: int,
    registry: LadderRegistry,
    rng: SelectionRNG | None = None,
) -> ResolutionResult | None:
    """Give *battler* an emotion that is weak against *target*'s emotion."""
    target_emotion = emotion_state_type(target, registry)
    if target_emotion is None:
        return None
    emotion = _choose(registry.strong_against(target_emotion), rng)
    if emotion is None:
        return None
    return add_state_tier(battler, emotion, delta, registry)


# ---------------------------------------------------------------------------
# Strongest / weakest buff
# ---------------------------------------------------------------------------

def pick_extreme_ladder(
    battler: Battler,
    names: Iterable[str | LadderName],
    registry: LadderRegistry,
    rng: SelectionRNG,
    highest: bool = True,
) -> LadderName | None:
    """Return the ladder in *names* where the battler's tier is highest (or lowest).

    Ties are broken uniformly at random.  Returns ``None`` for an empty
    *names*.
    """
    tiers = {registry.ladder_name(n): 0 for n in names}
    if not tiers:
        logger.warning("pick_extreme_ladder called with no candidate ladders")
        return None
    for name in tiers:
        tiers[name] = state_tier(battler, name, registry)

    best = max(tiers.values()) if highest else min(tiers.values())
    tied = [name for name, tier in tiers.items() if tier == best]
    return rng.choose_ladder(tied)


def add_highest_buff(
    battler: Battler, delta: int, registry: LadderRegistry, rng: SelectionRNG
) -> ResolutionResult | None:
    """Move the buff ladder the battler currently stands highest on."""
    buff = pick_extreme_ladder(
        battler, registry.ladders_in(LadderCategory.BUFF), registry, rng, highest=True
    )
    if buff is None:
        return None
    return add_state_tier(battler, buff, delta, registry)


def add_lowest_buff(
    battler: Battler, delta: int, registry: LadderRegistry, rng: SelectionRNG
) -> ResolutionResult | None:
    """Move the buff ladder the battler currently stands lowest on."""
    buff = pick_extreme_ladder(
        battler, registry.ladders_in(LadderCategory.BUFF), registry, rng, highest=False
    )
    if buff is None:
        return None
    return add_state_tier(battler, buff, delta, registry)
