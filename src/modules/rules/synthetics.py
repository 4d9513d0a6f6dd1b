"""
Synthetics: everything the rule elements in effect contributed to one
resolution.

A Synthetics instance is built by the ModifierSynthesizer for a single
(actor, domains) request and is never cached or stored.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Tuple, FrozenSet

from .modifier import Modifier
from .predicate import Predicate


@dataclass(frozen=True)
class DosAdjustment:
    """Shift of degrees after the roll. Positive improves, negative worsens."""
    amount: int
    source: str
    predicate: Predicate = field(default_factory=Predicate)


@dataclass(frozen=True)
class DiceOverrideEntry:
    """Damage dice override: rerollLowest (Tearing), minimumDie (Proven), maximizeDie."""
    mode: str
    source: str
    value: int = 0


@dataclass(frozen=True)
class ToughnessAdjustment:
    """Change to the Toughness bonus used to soak damage."""
    value: float
    mode: str
    source: str


@dataclass(frozen=True)
class ResistanceEntry:
    """Damage resistance against one damage type ("all" matches every type)."""
    damage_type: str
    value: int
    mode: str
    source: str


@dataclass
class Synthetics:
    """
    Collected rule element output, in source scan order.

    Attributes:
        modifiers: Runtime modifiers whose domain matched the request
        roll_options: Asserted flags, first assertion order, no duplicates
        dos_adjustments: Post-roll degree adjustments
        dice_overrides: Damage dice overrides keyed by domain
        toughness_adjustments: Toughness bonus adjustments
        resistances: Damage resistances
    """
    modifiers: List[Modifier] = field(default_factory=list)
    roll_options: List[str] = field(default_factory=list)
    dos_adjustments: List[DosAdjustment] = field(default_factory=list)
    dice_overrides: Dict[str, List[DiceOverrideEntry]] = field(default_factory=dict)
    toughness_adjustments: List[ToughnessAdjustment] = field(default_factory=list)
    resistances: List[ResistanceEntry] = field(default_factory=list)

    @property
    def net_modifier(self) -> int:
        """Plain sum of every synthesized modifier."""
        return sum(m.value for m in self.modifiers)

    @property
    def option_set(self) -> FrozenSet[str]:
        return frozenset(self.roll_options)

    def add_roll_option(self, option: str) -> None:
        if option not in self.roll_options:
            self.roll_options.append(option)

    def get_dice_overrides(self, domain: str) -> List[DiceOverrideEntry]:
        return list(self.dice_overrides.get(domain, []))

    def toughness_bonus(self, base: int) -> int:
        """Effective Toughness bonus: additions first, then multipliers."""
        value = float(base)
        for adj in self.toughness_adjustments:
            if adj.mode == 'add':
                value += adj.value
        for adj in self.toughness_adjustments:
            if adj.mode == 'multiply':
                value *= adj.value
        return int(value)

    def reduce_damage(self, damage: int, damage_type: str) -> Tuple[int, List[str]]:
        """
        Apply resistances to incoming damage.

        Halving applies once however many "half" entries match, then flat
        reductions. Damage never drops below zero.

        Returns:
            (remaining damage, labels of the resistances that applied)
        """
        matching = [r for r in self.resistances if r.damage_type in (damage_type, 'all')]
        applied = []

        halves = [r for r in matching if r.mode == 'half']
        if halves:
            damage = damage // 2
            applied.extend(r.source for r in halves)

        for resistance in matching:
            if resistance.mode == 'flat' and resistance.value:
                damage -= resistance.value
                applied.append(resistance.source)

        return max(0, damage), applied
