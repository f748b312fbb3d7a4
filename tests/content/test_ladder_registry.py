"""Tests for LadderRegistry -- bundled data, names, relations, split mode."""

import json

import pytest
from pydantic import ValidationError

from tier_ladder.config import LadderConfig
from tier_ladder.content.registry import LadderRegistry
from tier_ladder.ir.ladders import LadderCategory, LadderName, UnknownLadderError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_BASE_TABLE = {
    "ladders": [
        {"name": "sad", "category": "EMOTION", "markers": [None, "sad"]},
        {"name": "happy", "category": "EMOTION", "markers": [None, "happy"]},
        {"name": "atk", "category": "BUFF", "markers": ["atk_down", None, "atk_up"]},
    ],
}


def _registry_from(tmp_path, **overrides) -> LadderRegistry:
    table = dict(_BASE_TABLE)
    table.update(overrides)
    path = tmp_path / "ladders.json"
    path.write_text(json.dumps(table))
    return LadderRegistry(LadderConfig(ladders_path=path))


# ---------------------------------------------------------------------------
# Bundled ladders
# ---------------------------------------------------------------------------

class TestBundledLadders:
    def test_all_ladders_registered(self, registry):
        assert registry.list_ladder_names() == [
            LadderName.SAD,
            LadderName.ANGRY,
            LadderName.HAPPY,
            LadderName.AFRAID,
            LadderName.ATK,
            LadderName.DEF,
            LadderName.SPD,
        ]

    def test_emotion_ladder_shape(self, registry):
        ladder = registry.get_ladder(LadderName.SAD)

        assert ladder.markers == (None, "sad", "depressed", "miserable")
        assert ladder.category == LadderCategory.EMOTION

    def test_afraid_has_single_tier(self, registry):
        ladder = registry.get_ladder("afraid")

        assert ladder.max_tier == 1
        assert ladder.min_tier == 0

    def test_buff_ladder_shape(self, registry):
        ladder = registry.get_ladder(LadderName.SPD)

        assert ladder.neutral_index == 3
        assert ladder.marker_for_tier(-3) == "spd_down_3"
        assert ladder.marker_for_tier(2) == "spd_up_2"

    def test_categories(self, registry):
        assert registry.ladders_in(LadderCategory.BUFF) == [
            LadderName.ATK, LadderName.DEF, LadderName.SPD,
        ]
        assert LadderName.AFRAID in registry.ladders_in(LadderCategory.EMOTION)

    def test_repr(self, registry):
        assert repr(registry) == "LadderRegistry(ladders=7, combine_buffs=True)"


# ---------------------------------------------------------------------------
# Name resolution
# ---------------------------------------------------------------------------

class TestNameResolution:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("atk", "atk"),
            ("Attack", "atk"),
            ("DEFENSE", "def"),
            ("speed", "spd"),
            ("Agi", "spd"),
            ("agility", "spd"),
            ("SAD", "sad"),
        ],
    )
    def test_resolve_name(self, registry, raw, expected):
        assert registry.resolve_name(raw) == expected

    def test_unknown_name_passes_through(self, registry):
        assert registry.resolve_name("Jealous") == "jealous"

    def test_resolve_enum(self, registry):
        assert registry.resolve_name(LadderName.DEF) == "def"

    def test_ladder_name(self, registry):
        assert registry.ladder_name("Speed") == LadderName.SPD

    def test_ladder_name_unknown(self, registry):
        with pytest.raises(UnknownLadderError):
            registry.ladder_name("jealous")

    def test_get_ladder_is_exact(self, registry):
        with pytest.raises(UnknownLadderError, match="attack"):
            registry.get_ladder("attack")

    def test_get_ladder_unregistered_enum(self, tmp_path):
        reg = _registry_from(tmp_path)

        with pytest.raises(UnknownLadderError):
            reg.get_ladder(LadderName.SPD)


# ---------------------------------------------------------------------------
# Relations
# ---------------------------------------------------------------------------

class TestRelations:
    def test_axis_cycle(self, registry):
        assert registry.strong_against(LadderName.SAD) == {LadderName.HAPPY}
        assert registry.weak_against(LadderName.SAD) == {LadderName.ANGRY}
        assert registry.strong_against(LadderName.ANGRY) == {LadderName.SAD}
        assert registry.weak_against(LadderName.ANGRY) == {LadderName.HAPPY}
        assert registry.strong_against(LadderName.HAPPY) == {LadderName.ANGRY}
        assert registry.weak_against(LadderName.HAPPY) == {LadderName.SAD}

    def test_afraid_has_no_axis(self, registry):
        assert registry.strong_against("afraid") == frozenset()
        assert registry.weak_against("afraid") == frozenset()

    def test_buffs_have_no_axis(self, registry):
        assert registry.strong_against(LadderName.ATK) == frozenset()

    def test_relations_never_self_referential(self, registry):
        for name in registry.list_ladder_names():
            assert name not in registry.strong_against(name)
            assert name not in registry.weak_against(name)

    def test_primary_ladders(self, registry):
        assert registry.primary_ladders() == [
            LadderName.SAD, LadderName.ANGRY, LadderName.HAPPY,
        ]

    @pytest.mark.parametrize(
        "emotion, reinforcing, offsetting",
        [
            (LadderName.HAPPY, LadderName.SPD, LadderName.ATK),
            (LadderName.SAD, LadderName.DEF, LadderName.SPD),
            (LadderName.ANGRY, LadderName.ATK, LadderName.DEF),
        ],
    )
    def test_paired_ladders(self, registry, emotion, reinforcing, offsetting):
        assert registry.reinforcing_ladder(emotion) == reinforcing
        assert registry.offsetting_ladder(emotion) == offsetting

    def test_no_pairs_outside_primary(self, registry):
        assert registry.reinforcing_ladder(LadderName.AFRAID) is None
        assert registry.offsetting_ladder(LadderName.ATK) is None

    def test_relation_on_unknown_ladder(self, registry):
        with pytest.raises(UnknownLadderError):
            registry.strong_against("jealous")


# ---------------------------------------------------------------------------
# Combined vs split buff ladders
# ---------------------------------------------------------------------------

class TestEffectiveLadder:
    def test_combined_returns_full_ladder(self, registry):
        full = registry.get_ladder(LadderName.ATK)

        assert registry.effective_ladder(LadderName.ATK, 2) == full
        assert registry.effective_ladder(LadderName.ATK, -2) == full

    def test_split_raising(self, split_registry):
        ladder = split_registry.effective_ladder(LadderName.ATK, 1)

        assert ladder.markers == (None, "atk_up_1", "atk_up_2", "atk_up_3")

    def test_split_lowering(self, split_registry):
        ladder = split_registry.effective_ladder("def", -1)

        assert ladder.markers == ("def_down_3", "def_down_2", "def_down_1", None)

    def test_split_zero_delta_returns_full(self, split_registry):
        assert split_registry.effective_ladder(LadderName.ATK, 0).last_index == 6

    def test_split_leaves_one_sided_ladders_alone(self, split_registry):
        full = split_registry.get_ladder(LadderName.HAPPY)

        assert split_registry.effective_ladder(LadderName.HAPPY, -1) == full

    def test_split_get_ladder_is_full(self, split_registry):
        assert split_registry.get_ladder(LadderName.SPD).last_index == 6
        assert split_registry.combine_buffs is False


# ---------------------------------------------------------------------------
# Loading alternate tables
# ---------------------------------------------------------------------------

class TestLoadingTables:
    def test_minimal_table(self, tmp_path):
        reg = _registry_from(tmp_path)

        assert reg.list_ladder_names() == [LadderName.SAD, LadderName.HAPPY, LadderName.ATK]
        assert reg.resolve_name("attack") == "attack"
        assert reg.primary_ladders() == []

    def test_asymmetric_relations_kept(self, tmp_path):
        reg = _registry_from(
            tmp_path, axis={"sad": {"strong": ["happy"], "weak": []}, "happy": {"strong": [], "weak": []}}
        )

        assert reg.strong_against(LadderName.SAD) == {LadderName.HAPPY}
        assert reg.weak_against(LadderName.HAPPY) == frozenset()

    def test_self_referential_axis_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="references itself"):
            _registry_from(tmp_path, axis={"sad": {"strong": ["sad"], "weak": []}})

    def test_alias_to_unregistered_ladder_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="unregistered ladder 'spd'"):
            _registry_from(tmp_path, aliases={"speed": "spd"})

    def test_relation_to_unknown_name_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="unknown ladder 'joy'"):
            _registry_from(tmp_path, axis={"sad": {"strong": ["joy"], "weak": []}})

    def test_relation_to_unregistered_ladder_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="unregistered ladder 'afraid'"):
            _registry_from(tmp_path, axis={"sad": {"strong": ["afraid"], "weak": []}})

    def test_weak_relation_to_unregistered_ladder_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="unregistered ladder 'angry'"):
            _registry_from(tmp_path, axis={"happy": {"strong": [], "weak": ["angry"]}})

    def test_pair_to_unknown_name_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="unknown ladder 'luck'"):
            _registry_from(tmp_path, pairs={"happy": {"reinforcing": "luck"}})

    def test_duplicate_ladder_rejected(self, tmp_path):
        ladders = _BASE_TABLE["ladders"] + [
            {"name": "sad", "category": "EMOTION", "markers": [None, "blue"]},
        ]

        with pytest.raises(ValueError, match="defined twice"):
            _registry_from(tmp_path, ladders=ladders)

    def test_malformed_ladder_rejected(self, tmp_path):
        ladders = [{"name": "sad", "category": "EMOTION", "markers": ["sad", "blue"]}]

        with pytest.raises(ValidationError):
            _registry_from(tmp_path, ladders=ladders)
