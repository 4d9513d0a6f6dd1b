"""
Dice notation parser.

Supports the notation the ruleset uses for its draws:
- 1d100 (percentile test)
- 1d10, 2d10+3 (damage)
- 1d5 (small-range table draws)
- 1d10+1d5-2 (several groups and a static modifier)
"""

import re
from dataclasses import dataclass
from typing import List


@dataclass
class DiceExpression:
    """Parsed dice group."""
    count: int           # Number of dice
    sides: int           # Number of sides per die

    def __str__(self) -> str:
        return f"{self.count}d{self.sides}"


@dataclass
class ParsedRoll:
    """Complete parsed roll expression."""
    dice_groups: List[DiceExpression]  # All dice groups
    static_modifier: int               # Sum of flat terms
    original_notation: str             # Normalized notation

    def __str__(self) -> str:
        return self.original_notation


class DiceNotationError(Exception):
    """Raised when dice notation is invalid."""
    pass


class DiceParser:
    """Parser for dice notation."""

    # One signed term: a dice group or a flat number
    TERM_PATTERN = re.compile(r'([+-]?)(?:(\d*)d(\d+)|(\d+))')
    # Spaces are allowed around operators only
    OPERATOR_SPACING = re.compile(r'\s*([+-])\s*')
    WHITESPACE = re.compile(r'\s')

    MAX_COUNT = 100
    MAX_SIDES = 1000

    @classmethod
    def parse(cls, notation: str) -> ParsedRoll:
        """
        Parse dice notation into structured format.

        Examples:
            "1d100" -> ParsedRoll(dice_groups=[DiceExpression(1, 100)], static_modifier=0)
            "d10+2" -> ParsedRoll(dice_groups=[DiceExpression(1, 10)], static_modifier=2)

        Raises:
            DiceNotationError: If notation is invalid
        """
        if not notation or not isinstance(notation, str):
            raise DiceNotationError("Notation must be a non-empty string")

        normalized = cls.OPERATOR_SPACING.sub(r'\1', notation.strip().lower())
        if not normalized:
            raise DiceNotationError("Notation cannot be empty")
        if cls.WHITESPACE.search(normalized):
            raise DiceNotationError(f"Missing operator between terms in '{notation.strip()}'")

        dice_groups = []
        static_modifier = 0
        position = 0

        while position < len(normalized):
            match = cls.TERM_PATTERN.match(normalized, position)
            if not match or match.end() == position:
                raise DiceNotationError(
                    f"Unexpected '{normalized[position:]}' in '{normalized}'"
                )
            # Every term after the first needs an explicit sign
            sign, count_str, sides_str, flat_str = match.groups()
            if position > 0 and not sign:
                raise DiceNotationError(f"Missing operator before '{match.group(0)}' in '{normalized}'")

            if sides_str is not None:
                if sign == '-':
                    raise DiceNotationError(f"Subtracting dice is not supported: '{normalized}'")
                dice_groups.append(cls._dice_group(count_str, sides_str))
            else:
                value = int(flat_str)
                static_modifier += -value if sign == '-' else value

            position = match.end()

        if not dice_groups:
            raise DiceNotationError(f"No valid dice expression found in '{normalized}'")

        return ParsedRoll(
            dice_groups=dice_groups,
            static_modifier=static_modifier,
            original_notation=normalized
        )

    @classmethod
    def _dice_group(cls, count_str: str, sides_str: str) -> DiceExpression:
        count = int(count_str) if count_str else 1
        sides = int(sides_str)

        if count < 1:
            raise DiceNotationError(f"Dice count must be at least 1, got {count}")
        if count > cls.MAX_COUNT:
            raise DiceNotationError(f"Dice count too large (max {cls.MAX_COUNT}), got {count}")
        if sides < 2:
            raise DiceNotationError(f"Dice must have at least 2 sides, got {sides}")
        if sides > cls.MAX_SIDES:
            raise DiceNotationError(f"Dice sides too large (max {cls.MAX_SIDES}), got {sides}")

        return DiceExpression(count, sides)

    @classmethod
    def validate(cls, notation: str) -> bool:
        """True if notation parses, False otherwise."""
        try:
            cls.parse(notation)
            return True
        except DiceNotationError:
            return False
