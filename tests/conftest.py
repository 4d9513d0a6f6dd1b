"""
Shared fixtures for engine tests.
"""

import pytest

from src.core.models import Actor, Item
from src.modules.check.resolver import CheckResolver
from src.modules.rng.roller import DiceRoller


class ScriptedRoller(DiceRoller):
    """DiceRoller that returns predetermined die results in order."""

    def __init__(self, *values: int):
        super().__init__(seed=0)
        self.values = list(values)

    def queue(self, *values: int) -> None:
        self.values.extend(values)

    def _roll_die(self, sides: int) -> int:
        assert self.values, "ScriptedRoller ran out of values"
        value = self.values.pop(0)
        assert 1 <= value <= sides, f"Scripted value {value} does not fit a d{sides}"
        return value


@pytest.fixture
def scripted_roller():
    """Empty scripted roller; queue values in the test."""
    return ScriptedRoller()


@pytest.fixture
def resolver(scripted_roller):
    """Headless resolver drawing from the scripted roller."""
    return CheckResolver(roller=scripted_roller)


@pytest.fixture
def acolyte():
    """Actor with typical characteristics and no items."""
    return Actor(
        name="Acolyte Vance",
        characteristics={'ws': 40, 'bs': 35, 's': 30, 't': 34, 'ag': 38, 'wp': 42},
        wounds={'value': 12, 'max': 12}
    )


@pytest.fixture
def make_item():
    """Factory for items with rule elements."""
    def _make(name, item_type='gear', equipped=False, rules=None, **system):
        return Item(name=name, type=item_type, equipped=equipped, rules=list(rules or []), system=system)
    return _make
