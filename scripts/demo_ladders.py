"""Demo script: walk battlers up and down the default ladders and print the results."""

from __future__ import annotations
import sys
sys.path.insert(0, "src")

from tier_ladder.config import LadderConfig, load_config
from tier_ladder.content.registry import LadderRegistry
from tier_ladder.ir.ladders import LadderCategory, LadderName
from tier_ladder.sim.core.battler import Battler
from tier_ladder.sim.core.rng import BUFF_STREAM, SelectionRNG
from tier_ladder.sim.mechanics import (
    add_advantage_emotion,
    add_highest_buff,
    add_state_tier,
    add_supplementary_buff,
    emotion_state_type,
    state_tier,
)


def separator(title):
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}")


def show(result):
    print(
        f"  {result.ladder.value:6s} {result.previous_marker!s:>12} -> {result.marker!s:<12}"
        f" tier {result.previous_tier:+d} -> {result.tier:+d}"
        f"  [{result.outcome.value}]"
    )


registry = LadderRegistry(load_config())
rng = SelectionRNG(42)

# ============================================================
# Demo 1: climbing the sad ladder and saturating at the top
# ============================================================
separator("DEMO 1: sad +2, then +5 (saturates)")
omori = Battler(name="Omori")
show(add_state_tier(omori, "sad", 2, registry))
show(add_state_tier(omori, "sad", 5, registry))
show(add_state_tier(omori, "sad", 1, registry))

# ============================================================
# Demo 2: resistance fallback
# ============================================================
separator("DEMO 2: atk -3 with atk_down_3 and atk_down_2 resisted")
aubrey = Battler(name="Aubrey", resistances={"atk_down_3", "atk_down_2"})
show(add_state_tier(aubrey, "Attack", -3, registry))
print(f"  markers: {sorted(aubrey.markers)}")

# ============================================================
# Demo 3: combined vs split buff ladders
# ============================================================
separator("DEMO 3: atk -1 then +1, combined vs split")
for combine in (True, False):
    reg = LadderRegistry(LadderConfig(combine_buffs=combine))
    kel = Battler(name="Kel")
    add_state_tier(kel, LadderName.ATK, -1, reg)
    add_state_tier(kel, LadderName.ATK, 1, reg)
    print(f"  combine_buffs={combine}: markers={sorted(kel.markers)}")

# ============================================================
# Demo 4: selection helpers
# ============================================================
separator("DEMO 4: advantage emotion, supplementary buff, highest buff")
hero = Battler(name="Hero")
foe = Battler(name="Foe", markers={"sad"})
show(add_advantage_emotion(hero, foe, 1, registry))
print(f"  hero feels: {emotion_state_type(hero, registry)}")
show(add_supplementary_buff(hero, 2, registry))
show(add_highest_buff(hero, 1, registry, rng.fork(BUFF_STREAM)))
for name in registry.ladders_in(LadderCategory.BUFF):
    print(f"  {name.value}: tier {state_tier(hero, name, registry):+d}")
