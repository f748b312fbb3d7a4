"""Collaborator-side primitives: the battler record and the selection RNG."""

from tier_ladder.sim.core.battler import Battler
from tier_ladder.sim.core.rng import SelectionRNG

__all__ = [
    "Battler",
    "SelectionRNG",
]
