"""
Hit location from an attack roll.

The attack's d100 is read with its digits reversed: a 34 hits location
43 (Body). Called shots skip the table.
"""

from dataclasses import dataclass
from typing import Optional

from src.modules.rng.roller import PercentileRoll
from .tables import RangeTable


@dataclass(frozen=True)
class LocationRange:
    key: str
    label: str
    min: int
    max: int


@dataclass(frozen=True)
class HitLocation:
    location: str
    label: str
    location_roll: int


HIT_LOCATION_TABLE: RangeTable[LocationRange] = RangeTable("hit-location", [
    LocationRange('head', 'Head', 1, 10),
    LocationRange('rightArm', 'Right Arm', 11, 20),
    LocationRange('leftArm', 'Left Arm', 21, 30),
    LocationRange('body', 'Body', 31, 70),
    LocationRange('rightLeg', 'Right Leg', 71, 85),
    LocationRange('leftLeg', 'Left Leg', 86, 100),
])


def determine_hit_location(roll: PercentileRoll, called_shot: Optional[str] = None) -> HitLocation:
    """
    Args:
        roll: The attack's percentile roll
        called_shot: Location key forced by a called shot

    Returns:
        HitLocation (location_roll is 0 for called shots)
    """
    if called_shot:
        label = next(
            (row.label for row in HIT_LOCATION_TABLE.entries if row.key == called_shot),
            called_shot
        )
        return HitLocation(location=called_shot, label=label, location_roll=0)

    reversed_roll = roll.reversed
    row = HIT_LOCATION_TABLE.find(reversed_roll)
    return HitLocation(location=row.key, label=row.label, location_roll=reversed_roll)
