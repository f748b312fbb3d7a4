"""Battler-facing ladder mechanics.

Re-exports the primary functions from each mechanics module for convenience.

Usage::

    from tier_ladder.sim.mechanics import (
        add_state_tier, set_state_tier, state_tier,
        emotion_state_type, emotion_tier,
        add_random_emotion, add_highest_buff, add_advantage_emotion,
    )
"""

# -- tiers -------------------------------------------------------------------
from .tiers import (
    add_state_tier,
    emotion_state_type,
    emotion_tier,
    set_state_tier,
    state_tier,
)

# -- selection ---------------------------------------------------------------
from .selection import (
    add_advantage_emotion,
    add_complementary_buff,
    add_disadvantage_emotion,
    add_highest_buff,
    add_lowest_buff,
    add_random_buff,
    add_random_emotion,
    add_random_tier,
    add_supplementary_buff,
    add_supplementary_emotion,
    pick_extreme_ladder,
)

__all__ = [
    # tiers
    "add_state_tier",
    "set_state_tier",
    "state_tier",
    "emotion_state_type",
    "emotion_tier",
    # selection
    "add_random_emotion",
    "add_random_buff",
    "add_random_tier",
    "add_supplementary_emotion",
    "add_supplementary_buff",
    "add_complementary_buff",
    "add_advantage_emotion",
    "add_disadvantage_emotion",
    "pick_extreme_ladder",
    "add_highest_buff",
    "add_lowest_buff",
]
