"""
Fixed outcome tables.

Two lookup shapes:
- OutcomeTable: rows keyed by an index; a small draw plus a severity
  selects the row, clamped to the table bounds (vehicle criticals)
- RangeTable: rows keyed by a [low, high] roll range (hit locations,
  d100 tables)

A lookup never comes back empty: a miss falls back to the closest bound.
"""

from dataclasses import dataclass
from typing import Any, Generic, List, Sequence, Tuple, TypeVar

from src.modules.rng.roller import DiceRoller

Row = TypeVar('Row')


@dataclass(frozen=True)
class TableOutcome(Generic[Row]):
    """The draw, the index it selected, and the row found there."""
    draw: int
    index: int
    entry: Row


class OutcomeTable(Generic[Row]):
    """
    Severity-indexed table.

    Rows are looked up by their `roll` attribute (or 'roll' key). The
    draw plus severity is clamped into [first index, last index]; if no
    row carries the clamped index exactly, the last row is used.
    """

    def __init__(self, name: str, entries: Sequence[Row], die: str = "1d5"):
        if not entries:
            raise ValueError(f"Outcome table '{name}' has no entries")
        self.name = name
        self.entries: Tuple[Row, ...] = tuple(entries)
        self.die = die

    @staticmethod
    def _index_of(entry: Any) -> int:
        if isinstance(entry, dict):
            return entry['roll']
        return entry.roll

    @property
    def min_index(self) -> int:
        return min(self._index_of(e) for e in self.entries)

    @property
    def max_index(self) -> int:
        return max(self._index_of(e) for e in self.entries)

    def select(self, total: int) -> Tuple[int, Row]:
        """Clamp a total into the table and return (index, row)."""
        index = max(self.min_index, min(self.max_index, total))
        for entry in self.entries:
            if self._index_of(entry) == index:
                return index, entry
        return index, self.entries[-1]

    def lookup(self, severity: int, roller: DiceRoller) -> TableOutcome[Row]:
        """Draw the table die, add severity, return the selected row."""
        draw = roller.roll_total(self.die)
        index, entry = self.select(draw + severity)
        return TableOutcome(draw=draw, index=index, entry=entry)


class RangeTable(Generic[Row]):
    """
    Table of rows covering roll ranges, given in ascending order.

    Each row exposes `min` and `max` (attributes or keys). Rolls below the
    first range return the first row, rolls above the last return the last.
    """

    def __init__(self, name: str, entries: Sequence[Row]):
        if not entries:
            raise ValueError(f"Range table '{name}' has no entries")
        self.name = name
        self.entries: Tuple[Row, ...] = tuple(entries)

    @staticmethod
    def _bounds(entry: Any) -> Tuple[int, int]:
        if isinstance(entry, dict):
            return entry['min'], entry['max']
        return entry.min, entry.max

    def find(self, roll: int) -> Row:
        for entry in self.entries:
            low, high = self._bounds(entry)
            if low <= roll <= high:
                return entry

        first_low, _ = self._bounds(self.entries[0])
        if roll < first_low:
            return self.entries[0]
        return self.entries[-1]


@dataclass(frozen=True)
class VehicleCriticalEntry:
    roll: int
    effect: str
    catastrophic: bool


VEHICLE_CRITICAL_ENTRIES: List[VehicleCriticalEntry] = [
    VehicleCriticalEntry(1, "Jarring Blow: all crew must pass an Agility test or be Stunned for 1 round.", False),
    VehicleCriticalEntry(2, "Weapon Disabled: one random mounted weapon ceases to function.", False),
    VehicleCriticalEntry(3, "Motive System Damaged: speed halved, -20 to Operate tests.", False),
    VehicleCriticalEntry(4, "Structural Breach: armour halved on one random facing.", False),
    VehicleCriticalEntry(5, "Crew Hit: one random crew member takes 2d10 Impact damage.", False),
    VehicleCriticalEntry(6, "Engine Crippled: vehicle immobilised until repaired.", False),
    VehicleCriticalEntry(7, "Fuel Leak: vehicle catches fire, 1d10 Energy damage per round to all crew.", False),
    VehicleCriticalEntry(8, "Total System Failure: all weapons and motive systems offline. Crew must evacuate.", True),
    VehicleCriticalEntry(9, "Catastrophic Explosion: vehicle destroyed. All crew take 3d10+10 Energy damage.", True),
    VehicleCriticalEntry(10, "Annihilated: vehicle utterly destroyed. All crew killed unless Fate is spent.", True),
]

VEHICLE_CRITICAL_TABLE: OutcomeTable[VehicleCriticalEntry] = OutcomeTable(
    "vehicle-critical", VEHICLE_CRITICAL_ENTRIES, die="1d5"
)


def lookup_vehicle_critical(severity: int, roller: DiceRoller) -> VehicleCriticalEntry:
    """
    Vehicle critical effect for damage beyond 0 structural integrity.

    Rolls 1d5 + severity; anything past 10 is the last row.
    """
    return VEHICLE_CRITICAL_TABLE.lookup(severity, roller).entry
