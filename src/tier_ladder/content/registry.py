"""Ladder registry -- loads and serves ladder definitions and their relations.

The ladder table, alias map, axis relations and paired ladders are loaded
from ``data/ladders.json`` next to this module (or an alternate file named
in :class:`~tier_ladder.config.LadderConfig`).  The registry is built once
at startup and is read-only afterwards, so it can be shared freely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from tier_ladder.config import LadderConfig
from tier_ladder.ir.ladders import (
    Ladder,
    LadderCategory,
    LadderName,
    UnknownLadderError,
)

logger = logging.getLogger(__name__)

_DEFAULT_LADDERS_PATH = Path(__file__).resolve().parent / "data" / "ladders.json"


def _parse_ladder(raw: dict[str, Any]) -> Ladder:
    """Parse a raw JSON dict into a Ladder."""
    return Ladder(
        name=LadderName(raw["name"]),
        category=LadderCategory(raw["category"]),
        markers=tuple(raw["markers"]),
    )


class LadderRegistry:
    """Serves ladders by name, plus the relations between them.

    Usage::

        registry = LadderRegistry()
        ladder = registry.get_ladder(registry.ladder_name("Attack"))
        registry.strong_against(LadderName.SAD)   # frozenset({LadderName.HAPPY})

    Parameters
    ----------
    config:
        Startup options.  ``combine_buffs=False`` splits every ladder that
        spans both directions into independent raising and lowering halves;
        :meth:`effective_ladder` then hands out the half matching a move's
        sign.
    """

    def __init__(self, config: LadderConfig | None = None) -> None:
        self._config = config or LadderConfig()
        self._ladders: dict[LadderName, Ladder] = {}
        self._halves: dict[LadderName, tuple[Ladder, Ladder]] = {}
        self._aliases: dict[str, str] = {}
        self._strong: dict[LadderName, frozenset[LadderName]] = {}
        self._weak: dict[LadderName, frozenset[LadderName]] = {}
        self._reinforcing: dict[LadderName, LadderName] = {}
        self._offsetting: dict[LadderName, LadderName] = {}

        self._load(self._config.ladders_path or _DEFAULT_LADDERS_PATH)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _load(self, path: str | Path) -> None:
        with open(path) as f:
            raw: dict[str, Any] = json.load(f)

        for raw_ladder in raw.get("ladders", []):
            if "_section" in raw_ladder:
                continue  # Skip organizational section markers
            ladder = _parse_ladder(raw_ladder)
            if ladder.name in self._ladders:
                raise ValueError(f"Ladder {ladder.name.value!r} defined twice in {path}")
            self._ladders[ladder.name] = ladder
            if not self._config.combine_buffs and ladder.spans_both_directions:
                self._halves[ladder.name] = (ladder.lowering_half(), ladder.raising_half())

        for alias, target in raw.get("aliases", {}).items():
            self._require_registered(target, f"alias {alias!r}")
            self._aliases[alias.lower()] = target

        for name, relations in raw.get("axis", {}).items():
            key = self._require_registered(name, "axis relation")
            context = f"axis relation for {name!r}"
            strong = frozenset(
                self._require_registered(v, context) for v in relations.get("strong", [])
            )
            weak = frozenset(
                self._require_registered(v, context) for v in relations.get("weak", [])
            )
            if key in strong or key in weak:
                raise ValueError(f"Axis relation for {name!r} references itself")
            self._strong[key] = strong
            self._weak[key] = weak

        for name, pair in raw.get("pairs", {}).items():
            key = self._require_registered(name, "ladder pair")
            if pair.get("reinforcing") is not None:
                self._reinforcing[key] = self._require_registered(
                    pair["reinforcing"], f"reinforcing ladder of {name!r}"
                )
            if pair.get("offsetting") is not None:
                self._offsetting[key] = self._require_registered(
                    pair["offsetting"], f"offsetting ladder of {name!r}"
                )

        logger.debug(
            "Loaded %d ladders from %s (combine_buffs=%s)",
            len(self._ladders), path, self._config.combine_buffs,
        )

    def _require_registered(self, value: str, context: str) -> LadderName:
        try:
            name = LadderName(value)
        except ValueError:
            raise ValueError(f"{context} references unknown ladder {value!r}") from None
        if name not in self._ladders:
            raise ValueError(f"{context} references unregistered ladder {value!r}")
        return name

    # ------------------------------------------------------------------
    # Name resolution
    # ------------------------------------------------------------------

    @property
    def combine_buffs(self) -> bool:
        return self._config.combine_buffs

    def resolve_name(self, name: str | LadderName) -> str:
        """Lowercase *name* and map aliases to canonical names.

        Unknown names are returned unchanged (lowercased); :meth:`get_ladder`
        rejects them later.
        """
        if isinstance(name, LadderName):
            return name.value
        lowered = name.lower()
        return self._aliases.get(lowered, lowered)

    def ladder_name(self, name: str | LadderName) -> LadderName:
        """Resolve *name* to a registered :class:`LadderName`.

        Raises
        ------
        UnknownLadderError
            If no registered ladder matches after alias resolution.
        """
        return self.get_ladder(self.resolve_name(name)).name

    # ------------------------------------------------------------------
    # Ladder queries
    # ------------------------------------------------------------------

    def get_ladder(self, name: str | LadderName) -> Ladder:
        """Return the full ladder registered under the canonical *name*.

        Raises
        ------
        UnknownLadderError
            If *name* is not an exact canonical ladder name.
        """
        try:
            key = LadderName(name)
        except ValueError:
            raise UnknownLadderError(str(name)) from None
        ladder = self._ladders.get(key)
        if ladder is None:
            raise UnknownLadderError(key.value)
        return ladder

    def effective_ladder(self, name: str | LadderName, delta: int) -> Ladder:
        """Return the ladder a move of *delta* tiers should walk.

        With ``combine_buffs`` on this is the full ladder.  Otherwise
        two-directional ladders are replaced by their raising half for
        positive deltas and their lowering half for negative ones.
        """
        ladder = self.get_ladder(name)
        halves = self._halves.get(ladder.name)
        if halves is None or delta == 0:
            return ladder
        lowering, raising = halves
        return raising if delta > 0 else lowering

    def list_ladder_names(self) -> list[LadderName]:
        """Return all registered ladder names in registration order."""
        return list(self._ladders)

    def ladders_in(self, category: LadderCategory) -> list[LadderName]:
        """Return the names of all ladders in *category*, in registration order."""
        return [name for name, ladder in self._ladders.items() if ladder.category == category]

    def primary_ladders(self) -> list[LadderName]:
        """Return the ladders that take part in the strong/weak axis."""
        return [
            name for name in self._ladders
            if self._strong.get(name) or self._weak.get(name)
        ]

    # ------------------------------------------------------------------
    # Relations
    # ------------------------------------------------------------------

    def strong_against(self, name: str | LadderName) -> frozenset[LadderName]:
        """Ladders that *name* is strong against (empty outside the axis)."""
        return self._strong.get(self.get_ladder(name).name, frozenset())

    def weak_against(self, name: str | LadderName) -> frozenset[LadderName]:
        """Ladders that *name* is weak against (empty outside the axis)."""
        return self._weak.get(self.get_ladder(name).name, frozenset())

    def reinforcing_ladder(self, name: str | LadderName) -> LadderName | None:
        """The buff ladder that strengthens what *name* is good at, if any."""
        return self._reinforcing.get(self.get_ladder(name).name)

    def offsetting_ladder(self, name: str | LadderName) -> LadderName | None:
        """The buff ladder that covers what *name* is bad at, if any."""
        return self._offsetting.get(self.get_ladder(name).name)

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"LadderRegistry(ladders={len(self._ladders)}, "
            f"combine_buffs={self._config.combine_buffs})"
        )
