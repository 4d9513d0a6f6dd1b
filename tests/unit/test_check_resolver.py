"""
Unit tests for degrees of success and the check resolver.
"""

from types import SimpleNamespace

import pytest

from src.modules.check import (
    CheckContext,
    CheckResolver,
    InvalidCheckContextError,
    adjust_degrees,
    calculate_degrees,
)
from src.modules.combat.craftsmanship import get_craftsmanship_rule_elements
from src.modules.rng.roller import DiceRoller
from src.modules.rules.modifier import Modifier


def melee_test(actor, **kwargs):
    kwargs.setdefault('base_target', actor.get_characteristic('ws'))
    kwargs.setdefault('label', 'Weapon Skill Test')
    kwargs.setdefault('domains', ['attack:melee'])
    kwargs.setdefault('characteristic', 'ws')
    kwargs.setdefault('skip_confirmation', True)
    return CheckContext(actor=actor, **kwargs)


class TestDegrees:
    """Test degrees of success and failure."""

    @pytest.mark.parametrize("roll,target,success,degrees", [
        (30, 45, True, 2),
        (70, 45, False, 3),
        (45, 45, True, 1),
        (46, 45, False, 1),
        (1, 45, True, 5),
        (100, 45, False, 6),
        (36, 45, True, 1),
        (35, 45, True, 2),
    ])
    def test_calculate(self, roll, target, success, degrees):
        """Test one degree for the result plus one per full ten points."""
        result = calculate_degrees(roll, target)
        assert result.success is success
        assert result.degrees == degrees

    def test_label(self):
        """Test the short display label."""
        assert calculate_degrees(30, 45).label == "2 DoS"
        assert calculate_degrees(70, 45).label == "3 DoF"

    def test_adjust_success(self):
        """Test positive adjustments add degrees of success."""
        result = adjust_degrees(calculate_degrees(30, 45), 1)
        assert result.success is True
        assert result.degrees == 3

    def test_adjust_failure(self):
        """Test positive adjustments remove degrees of failure, never flipping."""
        result = adjust_degrees(calculate_degrees(46, 45), 3)
        assert result.success is False
        assert result.degrees == 1

    def test_adjust_floor(self):
        """Test degrees never drop below one."""
        assert adjust_degrees(calculate_degrees(30, 45), -5).degrees == 1


class TestResolve:
    """Test end-to-end resolution."""

    def test_craftsmanship_example(self, resolver, scripted_roller, acolyte):
        """Test base 40 with a good weapon rolls against 45."""
        scripted_roller.queue(30)
        result = resolver.resolve(melee_test(acolyte), ad_hoc=get_craftsmanship_rule_elements('good'))

        assert result.target == 45
        assert result.modifier_total == 5
        assert result.success is True
        assert result.degrees == 2
        assert result.dos.label == "2 DoS"
        assert [m.label for m in result.applied_modifiers] == ['Good Craftsmanship']
        assert 'weapon:craftsmanship:good' in result.roll_options

    def test_failure(self, resolver, scripted_roller, acolyte):
        """Test a failed check."""
        scripted_roller.queue(70)
        result = resolver.resolve(melee_test(acolyte), ad_hoc=get_craftsmanship_rule_elements('good'))
        assert result.target == 45
        assert result.success is False
        assert result.degrees == 3

    def test_target_zero_never_passes(self, resolver, scripted_roller, acolyte, make_item):
        """Test a target floored at zero fails even on a 1."""
        acolyte.add_item(make_item('Crippled', 'condition', rules=[
            {'key': 'FlatModifier', 'domain': 'attack:melee', 'value': -60}
        ]))
        scripted_roller.queue(1)
        result = resolver.resolve(melee_test(acolyte))

        assert result.target == 0
        assert result.modifier_total == -60
        assert result.success is False
        assert result.degrees == 1

    def test_target_above_hundred(self, resolver, scripted_roller, acolyte):
        """Test there is no upper clamp and 100 is not an automatic failure."""
        scripted_roller.queue(100)
        result = resolver.resolve(melee_test(
            acolyte,
            base_target=90,
            modifiers=[Modifier('Helpless Target', 20, 'situational')]
        ))
        assert result.target == 110
        assert result.success is True
        assert result.degrees == 2

    def test_roll_options(self, resolver, scripted_roller, acolyte):
        """Test the flags asserted during a resolution."""
        scripted_roller.queue(50)
        result = resolver.resolve(melee_test(acolyte, roll_options={'self:charging'}))
        assert {'self:check', 'self:characteristic:ws', 'self:charging'} <= result.roll_options

    def test_malformed_predicate_ignored(self, resolver, scripted_roller, acolyte, make_item):
        """Test a bad and/or statement drops its modifier without raising."""
        acolyte.add_item(make_item('Odd Talent', 'talent', rules=[
            {'key': 'FlatModifier', 'domain': 'attack:melee', 'value': 10, 'predicate': [{'and': 5}]},
            {'key': 'FlatModifier', 'domain': 'attack:melee', 'value': 20,
             'predicate': [{'or': [{'and': 5}]}]},
        ]))
        scripted_roller.queue(50)
        result = resolver.resolve(melee_test(acolyte))

        assert result.modifier_total == 0
        assert result.target == 40

    def test_zero_grouped_modifier_listed(self, resolver, scripted_roller, acolyte, make_item):
        """Test a zero-valued grouped modifier still shows as applied."""
        acolyte.add_item(make_item('Steady', 'talent', rules=[
            {'key': 'FlatModifier', 'domain': 'attack:melee', 'value': 0,
             'exclusionGroup': 'g', 'label': 'Zero'},
        ]))
        scripted_roller.queue(50)
        result = resolver.resolve(melee_test(acolyte))

        assert [m.label for m in result.applied_modifiers] == ['Zero']
        assert result.modifier_total == 0

    def test_context_modifiers_not_mutated(self, resolver, scripted_roller, acolyte):
        """Test caller modifiers are copied before the pipeline runs."""
        supplied = Modifier('Charge', 20, 'situational')
        scripted_roller.queue(50)
        result = resolver.resolve(melee_test(acolyte, modifiers=[supplied]))

        assert result.modifier_total == 20
        assert result.applied_modifiers[0] is not supplied

    def test_cap(self, scripted_roller, acolyte):
        """Test the optional modifier cap."""
        resolver = CheckResolver(roller=scripted_roller, modifier_cap=20)
        scripted_roller.queue(50)
        result = resolver.resolve(melee_test(acolyte, modifiers=[Modifier('Big', 30, 'situational')]))
        assert result.modifier_total == 20
        assert result.target == 60

    def test_threshold(self, resolver, scripted_roller, acolyte):
        """Test the requested degrees threshold."""
        scripted_roller.queue(30, 30)
        assert resolver.resolve(melee_test(acolyte, dos_threshold=2)).threshold_met is True
        assert resolver.resolve(melee_test(acolyte)).threshold_met is None

        scripted_roller.queue(35)
        assert resolver.resolve(melee_test(acolyte, dos_threshold=2)).threshold_met is False

    def test_to_dict(self, resolver, scripted_roller, acolyte):
        """Test conversion to dictionary."""
        scripted_roller.queue(7)
        data = resolver.resolve(melee_test(acolyte)).to_dict()
        assert data['label'] == 'Weapon Skill Test'
        assert data['actor_id'] == acolyte.id
        assert data['roll']['display'] == '07'
        assert data['dos'] == {'success': True, 'degrees': 4, 'roll': 7, 'target': 40}


class TestInvalidContext:
    """Test context validation."""

    def test_no_actor(self, resolver):
        """Test that a missing actor raises."""
        with pytest.raises(InvalidCheckContextError):
            resolver.resolve(CheckContext(actor=None, base_target=40, label='x', domains=['a']))

    def test_no_domain(self, resolver, acolyte):
        """Test that a check must declare a domain."""
        with pytest.raises(InvalidCheckContextError):
            resolver.resolve(melee_test(acolyte, domains=[]))

        with pytest.raises(InvalidCheckContextError):
            resolver.resolve(melee_test(acolyte, domains=['', '  ']))


class TestConfirmation:
    """Test the optional confirmation step."""

    def test_abandon(self, scripted_roller, acolyte):
        """Test abandoning returns None without rolling."""
        resolver = CheckResolver(roller=scripted_roller, confirm=lambda prompt: False)
        assert resolver.resolve(melee_test(acolyte, skip_confirmation=False)) is None
        assert scripted_roller.values == []

    def test_toggle_off(self, scripted_roller, acolyte, make_item):
        """Test toggleable modifiers can be switched off before rolling."""
        acolyte.add_item(make_item('Frenzy', 'talent', rules=[
            {'key': 'FlatModifier', 'domain': 'attack:melee', 'value': 10, 'toggleable': True},
            {'key': 'FlatModifier', 'domain': 'attack:melee', 'value': 5},
        ]))
        prompts = []

        def confirm(prompt):
            prompts.append(prompt)
            for modifier in prompt.toggleable:
                modifier.enabled = False
            return True

        resolver = CheckResolver(roller=scripted_roller, confirm=confirm)
        scripted_roller.queue(50)
        result = resolver.resolve(melee_test(acolyte, skip_confirmation=False))

        assert len(prompts) == 1
        assert prompts[0].base_target == 40
        assert len(prompts[0].modifiers) == 2
        assert result.modifier_total == 5

    def test_skip_flag(self, scripted_roller, acolyte):
        """Test skip_confirmation bypasses the callback."""
        def confirm(prompt):
            raise AssertionError("confirmation should be skipped")

        resolver = CheckResolver(roller=scripted_roller, confirm=confirm)
        scripted_roller.queue(50)
        assert resolver.resolve(melee_test(acolyte, skip_confirmation=True)) is not None

    def test_no_callback(self, resolver, scripted_roller, acolyte):
        """Test a resolver without a callback rolls directly."""
        scripted_roller.queue(50)
        assert resolver.resolve(melee_test(acolyte, skip_confirmation=False)) is not None


class TestDegreeAdjustments:
    """Test post-roll degree adjustments."""

    ACCURATE = [{'key': 'AdjustDegree', 'amount': 1, 'predicate': ['self:aim:full'], 'label': 'Accurate'}]

    def test_applies_when_predicate_passes(self, resolver, scripted_roller, acolyte):
        """Test an adjustment improves a success."""
        scripted_roller.queue(30)
        result = resolver.resolve(melee_test(acolyte, roll_options={'self:aim:full'}), ad_hoc=self.ACCURATE)
        assert result.degrees == 3
        assert [adj.source for adj in result.degree_adjustments] == ['Accurate']

    def test_skipped_when_predicate_fails(self, resolver, scripted_roller, acolyte):
        """Test the adjustment needs its predicate."""
        scripted_roller.queue(30)
        result = resolver.resolve(melee_test(acolyte), ad_hoc=self.ACCURATE)
        assert result.degrees == 2
        assert result.degree_adjustments == []

    def test_softens_failure(self, resolver, scripted_roller, acolyte):
        """Test an improvement on a failure removes a degree of failure."""
        scripted_roller.queue(70)
        result = resolver.resolve(melee_test(acolyte, roll_options={'self:aim:full'}), ad_hoc=self.ACCURATE)
        assert result.success is False
        assert result.degrees == 3


class TestDeterminism:
    """Test seeded replay."""

    def test_same_seed_same_result(self, acolyte):
        """Test two resolvers with one seed produce identical checks."""
        first = CheckResolver(roller=DiceRoller(seed=99))
        second = CheckResolver(roller=DiceRoller(seed=99))

        for _ in range(5):
            context = melee_test(acolyte)
            assert first.resolve(context).to_dict() == second.resolve(context).to_dict()

    def test_from_config(self, acolyte):
        """Test building a resolver from configuration."""
        config = SimpleNamespace(rng_seed=5, modifier_cap=10)
        resolver = CheckResolver.from_config(config)
        assert resolver.modifier_cap == 10
        assert resolver.roller.seed == 5

        result = resolver.resolve(melee_test(acolyte, modifiers=[Modifier('Big', 30, 'situational')]))
        assert result.target == 50
