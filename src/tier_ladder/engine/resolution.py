"""Tier resolution -- move a marker along a ladder, clamp, fall back on resistance.

Everything here is a pure function of its arguments.  The battler's state
comes in as the current marker plus a resistance predicate, and the decision
goes out as a :class:`~tier_ladder.ir.resolution.ResolutionResult`; the
caller applies it.  Predicate exceptions are not caught.
"""

from __future__ import annotations

import logging
from typing import Callable

from tier_ladder.ir.ladders import Ladder
from tier_ladder.ir.resolution import ResolutionResult

logger = logging.getLogger(__name__)

ResistancePredicate = Callable[[str], bool]
"""Maps a marker identifier to True if the battler is immune to it."""

MarkerPredicate = Callable[[str], bool]
"""Maps a marker identifier to True if the battler currently carries it."""


def _clamp(index: int, ladder: Ladder) -> int:
    return min(max(index, 0), ladder.last_index)


def _is_resisted(marker: str | None, is_resisted: ResistancePredicate) -> bool:
    # Neutral is never resistible, which bounds the fallback loop.
    if marker is None:
        return False
    return bool(is_resisted(marker))


def find_current_marker(ladder: Ladder, has_marker: MarkerPredicate) -> str | None:
    """Return the first non-neutral marker of *ladder* the battler carries.

    Markers are checked from the lowest tier upwards.  Returns ``None`` when
    the battler carries nothing from this ladder.
    """
    for marker in ladder.markers:
        if marker is not None and has_marker(marker):
            return marker
    return None


def current_tier(ladder: Ladder, current_marker: str | None) -> int:
    """Signed tier of *current_marker* on *ladder*, or 0 if it is not on it."""
    return ladder.tier_of(current_marker)


def resolve_tier(
    ladder: Ladder,
    current_marker: str | None,
    delta: int,
    is_resisted: ResistancePredicate,
) -> ResolutionResult:
    """Compute where a move of *delta* tiers lands on *ladder*.

    The move saturates at either end of the ladder.  If the battler resists
    the target marker, the move shrinks one tier at a time toward zero until
    an unresisted position (or the starting position) is reached.

    Parameters
    ----------
    ladder:
        The effective ladder to walk.
    current_marker:
        The marker the battler carries on this ladder.  ``None`` or a marker
        that is not on the ladder both count as the neutral position.
    delta:
        Signed number of tiers to move.  ``0`` is a no-op that never consults
        *is_resisted*.
    is_resisted:
        Resistance predicate, called at most ``abs(delta)`` times and never
        with the neutral marker.

    Returns
    -------
    ResolutionResult
        The target marker and tiers.  ``changed`` is False for no-ops.
    """
    current_index = ladder.index_of(current_marker)
    if current_index is None:
        current_index = ladder.neutral_index
    start_marker = ladder.markers[current_index]
    start_tier = current_index - ladder.neutral_index

    if delta == 0:
        return ResolutionResult(
            ladder=ladder.name,
            previous_marker=start_marker,
            marker=start_marker,
            previous_tier=start_tier,
            clamped_tier=start_tier,
            tier=start_tier,
            requested_delta=0,
        )

    # Saturate first: shrinking a delta past the ladder end would only
    # re-test the same extreme marker.
    remaining = _clamp(current_index + delta, ladder) - current_index
    clamped_tier = start_tier + remaining

    target_index = current_index + remaining
    while remaining != 0 and _is_resisted(ladder.markers[target_index], is_resisted):
        logger.debug(
            "%s: %r resisted, retreating from tier %d",
            ladder.name.value, ladder.markers[target_index],
            target_index - ladder.neutral_index,
        )
        remaining += -1 if remaining > 0 else 1
        target_index = current_index + remaining

    return ResolutionResult(
        ladder=ladder.name,
        previous_marker=start_marker,
        marker=ladder.markers[target_index],
        previous_tier=start_tier,
        clamped_tier=clamped_tier,
        tier=target_index - ladder.neutral_index,
        requested_delta=delta,
    )
