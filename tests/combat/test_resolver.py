"""
Tests for the action resolver.
"""

import pytest

from battlesim.actions.ability import AbilityId
from battlesim.actions.action import attack, defend, override, pray, use_ability
from battlesim.actions.catalog import ABILITIES
from battlesim.core.constants import LogKind, StatusKind
from battlesim.combat.resolver import ActionResolver
from battlesim.effects.status_engine import add_status, has_status
from battlesim.items.inventory import Inventory


@pytest.fixture
def resolver():
    return ActionResolver()


def messages(entries):
    return [entry.message for entry in entries]


# ============================================================================
# BASIC ACTIONS
# ============================================================================


def test_attack_damages_enemy(resolver, context, hero, beast):
    """
    Test that a basic attack applies mitigated damage and reports it.
    """
    entries = resolver.resolve(attack(beast), hero, context)
    assert messages(entries) == ["Hero attacks Beast for 20 damage!"]
    assert beast.stats.hp == 40


def test_attack_wakes_sleeping_target(resolver, context, hero, beast):
    """
    Test that physical damage wakes the target within the same resolution.
    """
    add_status(beast, StatusKind.SLEEP)
    entries = resolver.resolve(attack(beast), hero, context)
    assert messages(entries)[-1] == "Beast wakes up!"
    assert not has_status(beast, StatusKind.SLEEP)


def test_attack_on_ally_is_rejected(resolver, context, hero, healer):
    """
    Test that an attack aimed at an ally is a no-op with an explanation.
    """
    entries = resolver.resolve(attack(healer), hero, context)
    assert messages(entries) == ["Hero cannot target Healer with that!"]
    assert healer.stats.hp == healer.stats.max_hp


def test_attack_on_dead_target_is_rejected(resolver, context, hero, beast):
    beast.take_hp(999)
    entries = resolver.resolve(attack(beast), hero, context)
    assert messages(entries) == ["Hero's target is no longer standing!"]
    assert entries[0].kind == LogKind.INFO


def test_defend_sets_flag(resolver, context, hero):
    entries = resolver.resolve(defend(), hero, context)
    assert messages(entries) == ["Hero defends!"]
    assert hero.is_defending


def test_pray_does_nothing(resolver, context, healer):
    entries = resolver.resolve(pray(), healer, context)
    assert messages(entries) == ["Healer prays... (nothing happens)"]


# ============================================================================
# ABILITIES
# ============================================================================


def test_fire_slash_costs_mp_and_deals_damage(resolver, context, hero, beast):
    """
    Test that Fire Slash spends 8 MP and deals floor(STR * 1.5) with a zero draw.
    """
    entries = resolver.resolve(use_ability(AbilityId.FIRE_SLASH, beast), hero, context)
    assert messages(entries) == ["Hero uses Fire Slash on Beast for 37 damage!"]
    assert hero.stats.mp == 12
    assert beast.stats.hp == 23


def test_fire_slash_wakes_sleeping_target(resolver, context, hero, beast):
    add_status(beast, StatusKind.SLEEP)
    entries = resolver.resolve(use_ability(AbilityId.FIRE_SLASH, beast), hero, context)
    assert "Beast wakes up!" in messages(entries)
    assert not has_status(beast, StatusKind.SLEEP)


def test_ability_without_enough_mp_is_rejected(resolver, context, hero, beast):
    """
    Test that an unaffordable ability is a no-op and spends nothing.
    """
    hero.stats.mp = 5
    entries = resolver.resolve(use_ability(AbilityId.FIRE_SLASH, beast), hero, context)
    assert messages(entries) == ["Hero doesn't have enough MP for Fire Slash!"]
    assert hero.stats.mp == 5
    assert beast.stats.hp == 60


def test_unknown_ability_is_rejected(resolver, context, healer, beast):
    entries = resolver.resolve(use_ability(AbilityId.FIRE_SLASH, beast), healer, context)
    assert messages(entries) == ["Healer doesn't know Fire Slash!"]
    assert healer.stats.mp == 40


def test_passive_ability_cannot_be_used(resolver, context, hero):
    entries = resolver.resolve(use_ability(AbilityId.HEADSTRONG, hero), hero, context)
    assert messages(entries) == ["Hero tries an ability that cannot be used!"]


def test_heal_reports_actual_amount(resolver, context, healer, hero):
    """
    Test that Heal restores floor(MND * 1.5 + 20) capped at max HP and
    reports the HP actually restored.
    """
    hero.take_hp(50)
    entries = resolver.resolve(use_ability(AbilityId.HEAL, hero), healer, context)
    assert messages(entries) == ["Healer casts Heal! Hero recovers 50 HP!"]
    assert hero.stats.hp == 80
    assert healer.stats.mp == 36


def test_heal_cannot_target_enemy(resolver, context, healer, beast):
    entries = resolver.resolve(use_ability(AbilityId.HEAL, beast), healer, context)
    assert messages(entries) == ["Healer cannot target Beast with that!"]
    assert healer.stats.mp == 40


def test_protect_adds_three_turns(resolver, context, healer, hero):
    resolver.resolve(use_ability(AbilityId.PROTECT, hero), healer, context)
    assert hero.statuses[StatusKind.PROTECT].turns_remaining == 3
    assert healer.stats.mp == 34


def test_cure_poison_removes_poison(resolver, context, healer, hero):
    add_status(hero, StatusKind.POISON)
    entries = resolver.resolve(use_ability(AbilityId.CURE_POISON, hero), healer, context)
    assert not has_status(hero, StatusKind.POISON)
    assert messages(entries) == ["Healer casts CurePoison! Hero's poison is cured!"]


def test_scan_marks_target(resolver, context, commander, beast):
    entries = resolver.resolve(use_ability(AbilityId.SCAN, beast), commander, context)
    assert beast.scanned
    assert messages(entries) == ["Commander scans Beast! HP: 60/60"]
    assert commander.stats.mp == 20


def test_potion_consumes_stock(resolver, context, commander, healer):
    """
    Test that a potion heals the target and uses one unit of stock.
    """
    healer.take_hp(40)
    entries = resolver.resolve(use_ability(AbilityId.USE_POTION, healer), commander, context)
    assert messages(entries) == ["Commander uses a Potion! Healer recovers 40 HP!"]
    assert healer.stats.hp == 50
    assert context.inventory.item_count("POTION") == 4


def test_potion_with_empty_inventory(resolver, context, commander, healer):
    """
    Test that a potion without stock reports the failure and heals nothing.
    """
    context.inventory = Inventory(stock={})
    healer.take_hp(40)
    entries = resolver.resolve(use_ability(AbilityId.USE_POTION, healer), commander, context)
    assert messages(entries) == ["No Potions available!"]
    assert healer.stats.hp == 10


def test_failing_effect_is_reported_and_not_refunded(
    resolver, context, healer, hero, monkeypatch
):
    """
    Test that an exception raised by an effect becomes an error entry and the
    MP already spent stays spent.
    """

    def broken(user, target, ctx):
        raise RuntimeError("boom")

    monkeypatch.setitem(
        ABILITIES,
        AbilityId.HEAL,
        ABILITIES[AbilityId.HEAL].model_copy(update={"effect": broken}),
    )
    entries = resolver.resolve(use_ability(AbilityId.HEAL, hero), healer, context)
    assert len(entries) == 1
    assert entries[0].kind == LogKind.ERROR
    assert entries[0].message == "Healer's Heal fizzles out!"
    assert healer.stats.mp == 36


# ============================================================================
# OVERRIDE
# ============================================================================


def test_override_queues_action(resolver, context, commander, hero, beast):
    queued = attack(beast)
    entries = resolver.resolve(override(hero, queued), commander, context)
    assert messages(entries) == ["Commander will control Hero's next action!"]
    assert hero.pending_override is queued


def test_override_requires_the_ability(resolver, context, healer, hero, beast):
    entries = resolver.resolve(override(hero, attack(beast)), healer, context)
    assert messages(entries) == ["Healer cannot override anyone!"]
    assert hero.pending_override is None


def test_override_cannot_target_player_controlled(resolver, context, commander, beast):
    entries = resolver.resolve(override(commander, attack(beast)), commander, context)
    assert messages(entries) == ["Commander is not following orders from Commander."]
    assert commander.pending_override is None


def test_override_cannot_target_enemy(resolver, context, commander, beast, hero):
    entries = resolver.resolve(override(beast, attack(hero)), commander, context)
    assert messages(entries) == ["Commander cannot target Beast with that!"]


def test_take_override_consumes_once(resolver, context, fixed_rng, hero, beast):
    """
    Test that a queued override is returned once and then cleared.
    """
    queued = attack(beast)
    hero.pending_override = queued
    fixed_rng.value = 0.5
    action, entries = resolver.take_override(hero, context)
    assert action is queued
    assert messages(entries) == ["[OVERRIDE] Hero's action is controlled!"]
    assert hero.pending_override is None
    assert resolver.take_override(hero, context) == (None, [])


def test_headstrong_can_ignore_override(resolver, context, fixed_rng, hero, beast):
    """
    Test that a stubborn combatant discards the override on a low draw.
    """
    hero.pending_override = attack(beast)
    fixed_rng.value = 0.05
    action, entries = resolver.take_override(hero, context)
    assert action is None
    assert messages(entries) == [
        "[OVERRIDE] Hero's action is controlled!",
        "Hero ignores the override! (Headstrong)",
    ]
    assert hero.pending_override is None


def test_override_without_stubbornness_always_applies(
    resolver, context, fixed_rng, healer, hero
):
    queued = use_ability(AbilityId.HEAL, hero)
    healer.pending_override = queued
    fixed_rng.value = 0.0
    action, _ = resolver.take_override(healer, context)
    assert action is queued
