"""Tier resolution engine.

Usage::

    from tier_ladder.engine import find_current_marker, resolve_tier

    current = find_current_marker(ladder, battler.has_marker)
    result = resolve_tier(ladder, current, +2, battler.is_resisted)
"""

from .resolution import (
    MarkerPredicate,
    ResistancePredicate,
    current_tier,
    find_current_marker,
    resolve_tier,
)

__all__ = [
    "MarkerPredicate",
    "ResistancePredicate",
    "current_tier",
    "find_current_marker",
    "resolve_tier",
]
