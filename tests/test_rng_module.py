"""
Tests for RNG module.
"""

import pytest
from src.modules.rng.dice_parser import DiceParser, DiceNotationError
from src.modules.rng.roller import DiceRoller, PercentileRoll


class TestDiceParser:
    """Test dice notation parser."""

    def test_percentile(self):
        """Test parsing the percentile die."""
        parsed = DiceParser.parse("1d100")
        assert len(parsed.dice_groups) == 1
        assert parsed.dice_groups[0].count == 1
        assert parsed.dice_groups[0].sides == 100
        assert parsed.static_modifier == 0

    def test_implicit_count(self):
        """Test that 'd10' means one die."""
        parsed = DiceParser.parse("d10")
        assert parsed.dice_groups[0].count == 1
        assert parsed.dice_groups[0].sides == 10

    def test_roll_with_modifier(self):
        """Test parsing with static modifier."""
        parsed = DiceParser.parse("2d10+3")
        assert parsed.dice_groups[0].count == 2
        assert parsed.static_modifier == 3

        parsed = DiceParser.parse("1d10-2")
        assert parsed.static_modifier == -2

    def test_several_groups(self):
        """Test parsing several dice groups and flat terms."""
        parsed = DiceParser.parse("1d10+1d5-2+4")
        assert [str(group) for group in parsed.dice_groups] == ["1d10", "1d5"]
        assert parsed.static_modifier == 2

    def test_case_and_whitespace(self):
        """Test that notation is normalized."""
        parsed = DiceParser.parse(" 1D10 + 2 ")
        assert parsed.original_notation == "1d10+2"
        assert parsed.static_modifier == 2

    def test_invalid_notation(self):
        """Test that invalid notation raises error."""
        with pytest.raises(DiceNotationError):
            DiceParser.parse("")

        with pytest.raises(DiceNotationError):
            DiceParser.parse("invalid")

        with pytest.raises(DiceNotationError):
            DiceParser.parse("0d10")  # Zero dice

        with pytest.raises(DiceNotationError):
            DiceParser.parse("1d1")  # One side

        with pytest.raises(DiceNotationError):
            DiceParser.parse("5")  # No dice at all

    def test_missing_operator(self):
        """Test that terms must be joined by + or -."""
        with pytest.raises(DiceNotationError):
            DiceParser.parse("1d10 2")

        with pytest.raises(DiceNotationError):
            DiceParser.parse("1 d10")

        with pytest.raises(DiceNotationError):
            DiceParser.parse("   ")

        assert DiceParser.parse("2d10 +3").original_notation == "2d10+3"

    def test_subtracting_dice(self):
        """Test that subtracting dice groups is rejected."""
        with pytest.raises(DiceNotationError):
            DiceParser.parse("1d10-1d5")

    def test_limits(self):
        """Test count and sides limits."""
        assert DiceParser.validate("100d10")
        assert not DiceParser.validate("101d10")
        assert DiceParser.validate("1d1000")
        assert not DiceParser.validate("1d1001")

    def test_validation(self):
        """Test notation validation."""
        assert DiceParser.validate("1d100")
        assert DiceParser.validate("2d10+3")
        assert not DiceParser.validate("invalid")
        assert not DiceParser.validate("")


class TestPercentileRoll:
    """Test percentile digit decomposition."""

    def test_digits(self):
        """Test tens and units digits."""
        roll = PercentileRoll(34)
        assert roll.tens == 3
        assert roll.units == 4
        assert roll.display == "34"

    def test_single_digit(self):
        """Test a roll below ten reads with a leading zero."""
        roll = PercentileRoll(7)
        assert roll.tens == 0
        assert roll.units == 7
        assert roll.display == "07"

    def test_hundred_reads_double_zero(self):
        """Test that 100 is '00' with both digits zero."""
        roll = PercentileRoll(100)
        assert roll.tens == 0
        assert roll.units == 0
        assert roll.display == "00"

    @pytest.mark.parametrize("value,expected", [
        (34, 43),
        (70, 7),
        (5, 50),
        (10, 1),
        (100, 100),
        (99, 99),
    ])
    def test_reversed(self, value, expected):
        """Test reading the roll with its digits swapped."""
        assert PercentileRoll(value).reversed == expected

    def test_to_dict(self):
        """Test conversion to dictionary."""
        data = PercentileRoll(100).to_dict()
        assert data == {'value': 100, 'tens': 0, 'units': 0, 'display': '00'}


class TestDiceRoller:
    """Test dice roller with seeded random."""

    def test_simple_roll(self):
        """Test simple roll."""
        roller = DiceRoller(seed=42)
        result = roller.roll("1d10")

        assert result.notation == "1d10"
        assert 1 <= result.total <= 10
        assert len(result.dice_results) == 1
        assert len(result.dice_results[0].rolls) == 1

    def test_roll_with_modifier(self):
        """Test roll with static modifier."""
        roller = DiceRoller(seed=42)
        result = roller.roll("1d10+5")

        assert result.static_modifier == 5
        assert result.total == result.dice_results[0].total + 5

    def test_d100_range(self):
        """Test that percentile rolls stay within 1-100."""
        roller = DiceRoller(seed=3)
        values = [roller.roll_d100().value for _ in range(500)]
        assert min(values) >= 1
        assert max(values) <= 100

    def test_seeded_determinism(self):
        """Test that seeded roller produces same results."""
        roller1 = DiceRoller(seed=12345)
        roller2 = DiceRoller(seed=12345)

        assert [roller1.roll_d100().value for _ in range(20)] == \
            [roller2.roll_d100().value for _ in range(20)]
        assert roller1.roll("3d10+5").total == roller2.roll("3d10+5").total

    def test_set_seed_replays(self):
        """Test that resetting the seed replays the sequence."""
        roller = DiceRoller(seed=7)
        first = [roller.roll_total("1d5") for _ in range(10)]

        roller.set_seed(7)
        assert [roller.roll_total("1d5") for _ in range(10)] == first

    def test_breakdown(self):
        """Test breakdown string generation."""
        roller = DiceRoller(seed=42)
        result = roller.roll("2d10+3")

        breakdown = result.get_breakdown()
        assert "2d10" in breakdown
        assert "+3" in breakdown
        assert str(result.total) in breakdown

    def test_to_dict(self):
        """Test conversion to dictionary."""
        roller = DiceRoller(seed=42)
        result = roller.roll("1d10+5", metadata={'purpose': 'damage'})

        data = result.to_dict()
        assert data['notation'] == "1d10+5"
        assert data['total'] == result.total
        assert data['metadata'] == {'purpose': 'damage'}
        assert isinstance(data['dice_results'], list)

    def test_invalid_notation_raises(self):
        """Test that the roller propagates notation errors."""
        with pytest.raises(DiceNotationError):
            DiceRoller(seed=1).roll("d")
