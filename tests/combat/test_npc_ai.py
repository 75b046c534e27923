"""
Tests for the AI decision policies.
"""

from battlesim.actions.ability import AbilityId
from battlesim.actions.action import (
    AbilityAction,
    AttackAction,
    DefendAction,
    PrayAction,
)
from battlesim.combat.npc_ai import (
    DEFAULT_POLICY,
    AggressivePolicy,
    HostilePolicy,
    SupportPolicy,
    policy_for,
)


def test_aggressive_uses_signature_when_affordable(context, hero, beast):
    policy = AggressivePolicy()
    action = policy.decide(hero, [hero], [beast], context)
    assert isinstance(action, AbilityAction)
    assert action.ability_id == AbilityId.FIRE_SLASH
    assert action.target is beast


def test_aggressive_falls_back_to_attack(context, hero, beast):
    """
    Test that the aggressive policy attacks once it cannot pay for its ability.
    """
    hero.stats.mp = 7
    action = AggressivePolicy().decide(hero, [hero], [beast], context)
    assert isinstance(action, AttackAction)
    assert action.target is beast


def test_aggressive_defends_without_enemies(context, hero):
    action = AggressivePolicy().decide(hero, [hero], [], context)
    assert isinstance(action, DefendAction)


def test_hostile_attacks_a_living_opponent(context, beast, hero, healer):
    healer.take_hp(999)
    action = HostilePolicy().decide(beast, [beast], [healer, hero], context)
    assert isinstance(action, AttackAction)
    assert action.target is hero


def test_support_heals_first_injured_ally(context, healer, hero):
    """
    Test that the support policy heals the first injured ally, however small
    the wound.
    """
    hero.take_hp(1)
    policy = SupportPolicy(buff_target=hero)
    action = policy.decide(healer, [hero, healer], [], context)
    assert isinstance(action, AbilityAction)
    assert action.ability_id == AbilityId.HEAL
    assert action.target is hero


def test_support_buffs_when_nobody_is_hurt(context, healer, hero):
    """
    Test that the support policy recasts its buff even if it is already active.
    """
    policy = SupportPolicy(buff_target=hero)
    for _ in range(2):
        action = policy.decide(healer, [hero, healer], [], context)
        assert isinstance(action, AbilityAction)
        assert action.ability_id == AbilityId.PROTECT
        assert action.target is hero


def test_support_does_not_skip_to_buff_when_heal_unaffordable(context, healer, hero):
    """
    Test that an unaffordable heal stops the ally scan and the buff is
    considered next.
    """
    hero.take_hp(10)
    healer.stats.mp = 3
    action = SupportPolicy(buff_target=hero).decide(healer, [hero, healer], [], context)
    assert isinstance(action, DefendAction)


def test_support_defends_without_buff_target(context, healer, hero):
    action = SupportPolicy().decide(healer, [hero, healer], [], context)
    assert isinstance(action, DefendAction)


def test_support_ignores_dead_buff_target(context, healer, hero):
    hero.take_hp(999)
    action = SupportPolicy(buff_target=hero).decide(healer, [healer], [], context)
    assert isinstance(action, DefendAction)


def test_support_may_pray_while_defending(context, fixed_rng, healer, hero):
    """
    Test that the policy prays on a draw below 15% when handed an actor
    that is still defending.
    """
    healer.is_defending = True
    fixed_rng.value = 0.1
    policy = SupportPolicy(buff_target=hero)
    assert isinstance(policy.decide(healer, [hero, healer], [], context), PrayAction)

    fixed_rng.value = 0.5
    assert isinstance(policy.decide(healer, [hero, healer], [], context), AbilityAction)


def test_policy_for_falls_back_to_default(beast, hero):
    assert policy_for(beast) is DEFAULT_POLICY
    hero.policy = AggressivePolicy()
    assert policy_for(hero) is hero.policy
