"""Startup configuration for the ladder registry.

Read once when the process starts and handed to
:class:`~tier_ladder.content.registry.LadderRegistry`; nothing consults it
per call.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel

_COMBINE_BUFFS_ENV = "TIER_LADDER_COMBINE_BUFFS"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class LadderConfig(BaseModel):
    """Options that shape the effective ladders."""

    combine_buffs: bool = True
    """Treat two-directional ladders (atk/def/spd) as one continuous ladder.

    When False, each such ladder is split at neutral into a raising half and
    a lowering half, and a move only ever walks the half matching its sign.
    """

    ladders_path: Path | None = None
    """Alternate ladder table.  Defaults to the bundled ``ladders.json``."""


def _parse_flag(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{_COMBINE_BUFFS_ENV} must be a boolean, got {raw!r}")


def load_config(path: str | Path | None = None) -> LadderConfig:
    """Build a :class:`LadderConfig` from an optional JSON file and the environment.

    Parameters
    ----------
    path:
        JSON file holding ``LadderConfig`` fields.  When omitted the
        defaults are used.

    The ``TIER_LADDER_COMBINE_BUFFS`` environment variable, if set, overrides
    ``combine_buffs`` from the file.

    Raises
    ------
    pydantic.ValidationError
        If the file does not hold a JSON object of valid fields.
    """
    config = LadderConfig()
    if path is not None:
        config = LadderConfig.model_validate(json.loads(Path(path).read_text()))

    env_flag = os.environ.get(_COMBINE_BUFFS_ENV)
    if env_flag is not None:
        config = config.model_copy(update={"combine_buffs": _parse_flag(env_flag)})
    return config
