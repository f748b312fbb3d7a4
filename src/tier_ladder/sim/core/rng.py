"""Seeded random source for the ladder selection helpers.

Resolution itself is deterministic.  Randomness only enters when a helper
has to *pick* something: :func:`add_random_emotion` and
:func:`add_random_buff` pick a ladder, :func:`add_random_tier` draws a
delta, and :func:`pick_extreme_ladder` breaks ties between buffs standing
on the same tier.  All of them take a :class:`SelectionRNG` so a battle can
be replayed from a single seed.
"""

from __future__ import annotations

import hashlib
import random
from typing import Iterable

from tier_ladder.ir.ladders import LadderName

# Conventional stream names for SelectionRNG.fork.
EMOTION_STREAM = "emotions"
BUFF_STREAM = "buffs"


class SelectionRNG:
    """Picks ladders and tier deltas from a reproducible stream.

    A battle usually keeps one root RNG and forks one stream per kind of
    pick, so that an extra random emotion does not shift which buff a
    later tie-break lands on::

        root = SelectionRNG(seed)
        emotions = root.fork(EMOTION_STREAM)  # add_random_emotion
        buffs = root.fork(BUFF_STREAM)        # add_random_buff, add_highest_buff

    Parameters
    ----------
    seed:
        Integer seed.  ``None`` draws one from system entropy; it is still
        exposed on :attr:`seed`, so an unseeded battle can be replayed.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def random_delta(self, min_delta: int, max_delta: int) -> int:
        """Return a tier delta drawn uniformly from ``[min_delta, max_delta]``."""
        if min_delta > max_delta:
            raise ValueError(f"min_delta ({min_delta}) must be <= max_delta ({max_delta})")
        return self._rng.randint(min_delta, max_delta)

    def choose_ladder(self, candidates: Iterable[LadderName]) -> LadderName | None:
        """Pick one of *candidates* uniformly, or ``None`` if there are none.

        Candidates are ordered by name before drawing, so the pick for a
        given seed does not depend on registration order or set iteration.
        """
        ordered = sorted(set(candidates), key=lambda n: n.value)
        if not ordered:
            return None
        return self._rng.choice(ordered)

    def fork(self, name: str) -> SelectionRNG:
        """Derive an independent stream from this seed and *name*.

        Forking is a pure function of ``(seed, name)``: it ignores how much
        of the parent stream has been consumed.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        return SelectionRNG(int.from_bytes(digest[:8], "big"))

    def __repr__(self) -> str:
        return f"SelectionRNG(seed={self._seed})"
