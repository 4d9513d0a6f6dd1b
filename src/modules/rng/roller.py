"""
Dice rolling: percentile tests and small-range draws.

Everything random in the engine comes from a DiceRoller: the d100 of a
check, damage dice, the 1d5 of a critical table. A roller built with a
seed replays its sequence exactly.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
from .dice_parser import DiceParser, DiceExpression


@dataclass(frozen=True)
class PercentileRoll:
    """
    A d100 result and its digit decomposition.

    A roll of 100 reads as "00": both digits are zero.
    """
    value: int

    @property
    def tens(self) -> int:
        return (self.value // 10) % 10

    @property
    def units(self) -> int:
        return self.value % 10

    @property
    def reversed(self) -> int:
        """
        Digits swapped, as used for hit locations.

        34 -> 43, 70 -> 7, 5 -> 50. A "00" reversed is still "00" (100).
        """
        swapped = self.units * 10 + self.tens
        return swapped or 100

    @property
    def display(self) -> str:
        return f"{self.tens}{self.units}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'value': self.value,
            'tens': self.tens,
            'units': self.units,
            'display': self.display
        }


@dataclass
class DiceGroupResult:
    """The individual dice drawn for one group, e.g. 2d10 -> [3, 9]."""
    expression: DiceExpression
    rolls: List[int]

    @property
    def total(self) -> int:
        return sum(self.rolls)

    def __str__(self) -> str:
        return f"{self.expression}: {self.rolls} = {self.total}"


@dataclass
class RollResult:
    """A notation roll: every group drawn plus the flat terms."""
    notation: str
    dice_results: List[DiceGroupResult]
    static_modifier: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(group.total for group in self.dice_results) + self.static_modifier

    def get_breakdown(self) -> str:
        """e.g. "2d10: [3, 9] = 12 | +3 | Total: 15" """
        parts = [str(group) for group in self.dice_results]
        if self.static_modifier:
            parts.append(f"{self.static_modifier:+d}")
        parts.append(f"Total: {self.total}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'notation': self.notation,
            'total': self.total,
            'breakdown': self.get_breakdown(),
            'dice_results': [
                {'expression': str(group.expression), 'rolls': list(group.rolls), 'total': group.total}
                for group in self.dice_results
            ],
            'static_modifier': self.static_modifier,
            'metadata': dict(self.metadata)
        }


class DiceRoller:
    """
    Randomness provider for the engine.

    All draws go through _roll_die, one die at a time, so a seeded
    roller (or a subclass feeding fixed values) fully determines every
    result built on top of it.

    Usage:
        roller = DiceRoller(seed=42)
        roller.roll_d100().display     # "07"
        roller.roll_total("1d10")      # 6
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def set_seed(self, seed: Optional[int]) -> None:
        """Restart the sequence from a new seed."""
        self.seed = seed
        self.rng = random.Random(seed)

    def _roll_die(self, sides: int) -> int:
        return self.rng.randint(1, sides)

    def roll_simple(self, count: int, sides: int) -> List[int]:
        """Draw count dice of the given size, without notation."""
        return [self._roll_die(sides) for _ in range(count)]

    def roll_d100(self) -> PercentileRoll:
        return PercentileRoll(self._roll_die(100))

    def roll(self, notation: str, metadata: Optional[Dict[str, Any]] = None) -> RollResult:
        """
        Roll a dice expression such as "1d10+2".

        Raises:
            DiceNotationError: If notation is invalid
        """
        parsed = DiceParser.parse(notation)
        groups = [
            DiceGroupResult(expression=expr, rolls=self.roll_simple(expr.count, expr.sides))
            for expr in parsed.dice_groups
        ]
        return RollResult(
            notation=parsed.original_notation,
            dice_results=groups,
            static_modifier=parsed.static_modifier,
            metadata=metadata or {}
        )

    def roll_total(self, notation: str) -> int:
        return self.roll(notation).total
