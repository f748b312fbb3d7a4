"""Shared fixtures for ladder tests."""

from __future__ import annotations

import pytest

from tier_ladder.config import LadderConfig
from tier_ladder.content.registry import LadderRegistry
from tier_ladder.ir.ladders import Ladder, LadderCategory, LadderName


@pytest.fixture(scope="module")
def registry() -> LadderRegistry:
    """Module-scoped registry with the bundled ladders, buffs combined."""
    return LadderRegistry()


@pytest.fixture(scope="module")
def split_registry() -> LadderRegistry:
    """Module-scoped registry with buff ladders split at neutral."""
    return LadderRegistry(LadderConfig(combine_buffs=False))


@pytest.fixture
def sad_ladder() -> Ladder:
    """none -> mild -> sad -> miserable (tiers 0..3)."""
    return Ladder(
        name=LadderName.SAD,
        category=LadderCategory.EMOTION,
        markers=(None, "mild", "sad", "miserable"),
    )


@pytest.fixture
def atk_ladder() -> Ladder:
    """Seven positions with neutral at index 3 (tiers -3..3)."""
    return Ladder(
        name=LadderName.ATK,
        category=LadderCategory.BUFF,
        markers=("strong-", "mid-", "weak-", None, "weak+", "mid+", "strong+"),
    )
