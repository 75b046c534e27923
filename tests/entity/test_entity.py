"""
Tests for the entity model, progression and serialization.
"""

import json

import pytest

from battlesim.actions.ability import AbilityId
from battlesim.core.constants import Archetype, ControlMode, StatusKind
from battlesim.effects.status_engine import add_status
from battlesim.entity.entity_serialization import (
    entity_from_dict,
    entity_to_dict,
    load_entities,
    save_entities,
)
from battlesim.entity.entity_stats import StatBlock


# ============================================================================
# STATS
# ============================================================================


def test_stat_block_clamps_on_creation():
    stats = StatBlock(hp=120, max_hp=80, mp=-5, max_mp=10)
    assert stats.hp == 80
    assert stats.mp == 0


def test_take_hp_clamps_at_zero(hero):
    assert hero.take_hp(500) == 80
    assert hero.stats.hp == 0
    assert hero.is_dead()


def test_restore_hp_reports_actual_amount(hero):
    hero.take_hp(10)
    assert hero.restore_hp(50) == 10
    assert hero.stats.hp == hero.stats.max_hp


def test_mp_helpers_clamp(hero):
    assert hero.spend_mp(30) == 20
    assert hero.stats.mp == 0
    assert hero.restore_mp(100) == 20


def test_negative_amounts_are_ignored(hero):
    assert hero.take_hp(-10) == 0
    assert hero.restore_hp(-10) == 0
    assert hero.stats.hp == 80


# ============================================================================
# ABILITIES
# ============================================================================


def test_available_abilities_hide_passives_and_unaffordable(healer):
    """
    Test that the ability menu only lists usable abilities the entity can pay for.
    """
    assert healer.available_abilities() == [
        AbilityId.HEAL,
        AbilityId.CURE_POISON,
        AbilityId.PROTECT,
    ]
    healer.stats.mp = 4
    assert healer.available_abilities() == [AbilityId.HEAL, AbilityId.CURE_POISON]


def test_can_afford_requires_knowing_the_ability(hero, healer):
    assert hero.can_afford(AbilityId.FIRE_SLASH)
    assert not healer.can_afford(AbilityId.FIRE_SLASH)


# ============================================================================
# PROGRESSION
# ============================================================================


def test_gain_exp_levels_up_with_carry_over(make_entity):
    """
    Test that a level 5 hero with 250 exp gaining 600 reaches level 6 with 350
    exp left, grows and is fully restored.
    """
    hero = make_entity(
        "Hero",
        hp=80,
        mp=20,
        STR=25,
        DEF=15,
        INT=5,
        MND=5,
        SPD=15,
        level=5,
        archetype=Archetype.HERO,
        exp=250,
    )
    hero.take_hp(60)
    hero.spend_mp(20)

    messages = hero.gain_exp(600)

    assert messages == ["Hero reached Level 6!"]
    assert hero.level == 6
    assert hero.exp == 350
    assert hero.exp_to_next == 600
    assert hero.stats.max_hp == 90
    assert hero.stats.max_mp == 22
    assert hero.stats.STR == 30
    assert hero.stats.DEF == 18
    assert hero.stats.SPD == 17
    assert hero.stats.hp == 90
    assert hero.stats.mp == 22


def test_gain_exp_can_level_more_than_once(make_entity):
    healer = make_entity("Healer", hp=50, mp=40, archetype=Archetype.HEALER)
    messages = healer.gain_exp(300)
    assert messages == ["Healer reached Level 2!", "Healer reached Level 3!"]
    assert healer.exp == 0
    assert healer.stats.max_hp == 60


def test_monster_does_not_grow(beast):
    beast.gain_exp(100)
    assert beast.level == 2
    assert beast.stats.max_hp == 60


def test_clear_transient_flags(hero, beast):
    hero.is_defending = True
    hero.pending_override = object()
    hero.clear_transient_flags()
    assert not hero.is_defending
    assert hero.pending_override is None


def test_status_line_mentions_name_and_statuses(hero):
    add_status(hero, StatusKind.POISON)
    line = hero.get_status_line(show_numbers=True)
    assert "Hero" in line
    assert "80/80" in line
    assert "POISON" in line


# ============================================================================
# SERIALIZATION
# ============================================================================


def test_entity_dict_round_trip(commander):
    """
    Test that the persisted attribute set survives serialization.
    """
    add_status(commander, StatusKind.POISON)
    commander.equipment["weapon"] = "Iron Sword"
    commander.take_hp(5)

    data = entity_to_dict(commander)
    restored = entity_from_dict(json.loads(json.dumps(data)))

    assert restored.name == "Commander"
    assert restored.control == ControlMode.PLAYER
    assert restored.archetype == Archetype.REALIST
    assert restored.stats == commander.stats
    assert restored.abilities == commander.abilities
    assert restored.statuses[StatusKind.POISON].turns_remaining == 3
    assert restored.equipment["weapon"] == "Iron Sword"


def test_entity_from_dict_requires_stats():
    with pytest.raises(ValueError):
        entity_from_dict({"name": "Nobody"})


def test_save_and_load_entities(tmp_path, hero, beast):
    path = tmp_path / "roster.json"
    save_entities(path, [hero, beast])
    loaded = load_entities(path)
    assert set(loaded) == {"Hero", "Beast"}
    assert loaded["Beast"].exp_reward == 80


def test_load_entities_missing_file(tmp_path):
    assert load_entities(tmp_path / "missing.json") == {}
