"""
RNG Module - the engine's randomness provider.

Provides:
- Dice notation parsing (1d100, 1d10+2, 1d5)
- Percentile rolls with digit decomposition
- Seeded rolling for deterministic replay

Usage:
    roller = DiceRoller(seed=42)
    roll = roller.roll_d100()
    print(roll.value, roll.tens, roll.units)

    damage = roller.roll("1d10")
    print(damage.get_breakdown())   # "1d10: [7] = 7 | Total: 7"
"""

from .dice_parser import DiceParser, DiceNotationError, DiceExpression, ParsedRoll
from .roller import DiceRoller, RollResult, DiceGroupResult, PercentileRoll

__all__ = [
    'DiceParser',
    'DiceNotationError',
    'DiceExpression',
    'ParsedRoll',
    'DiceRoller',
    'RollResult',
    'DiceGroupResult',
    'PercentileRoll',
]
