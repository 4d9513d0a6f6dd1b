"""
Degrees of success and failure for a d100 roll-under test.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class DegreesResult:
    """
    Classification of a percentile test.

    Attributes:
        success: Whether the roll met the target (roll <= target)
        degrees: Degrees of success, or of failure when success is False (always >= 1)
        roll: The d100 value
        target: Effective target the roll was compared to
    """
    success: bool
    degrees: int
    roll: int
    target: int

    @property
    def label(self) -> str:
        kind = "DoS" if self.success else "DoF"
        return f"{self.degrees} {kind}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'degrees': self.degrees,
            'roll': self.roll,
            'target': self.target
        }


def calculate_degrees(roll: int, target: int) -> DegreesResult:
    """
    Classify a roll against its effective target.

    Success when roll <= target. One degree for passing or failing at
    all, plus one for every full ten points of margin:

        degrees = 1 + (|target - roll| // 10)

    Examples:
        >>> calculate_degrees(30, 45)
        DegreesResult(success=True, degrees=2, roll=30, target=45)
        >>> calculate_degrees(70, 45)
        DegreesResult(success=False, degrees=3, roll=70, target=45)
    """
    success = roll <= target
    margin = target - roll if success else roll - target
    return DegreesResult(success=success, degrees=1 + margin // 10, roll=roll, target=target)


def adjust_degrees(result: DegreesResult, amount: int) -> DegreesResult:
    """
    Shift degrees toward a better (positive) or worse (negative) outcome.

    Success never flips and degrees never drop below 1.
    """
    delta = amount if result.success else -amount
    return DegreesResult(
        success=result.success,
        degrees=max(1, result.degrees + delta),
        roll=result.roll,
        target=result.target
    )
