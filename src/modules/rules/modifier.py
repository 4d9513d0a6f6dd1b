"""
Runtime modifiers and the modifier pipeline.

Modifiers are synthesized fresh for each resolution and discarded with it.
Every modifier carries a source tag ("equipment", "talent", "condition"...).
Modifiers sharing an exclusion group compete: the best bonus and the
worst penalty apply. Ungrouped modifiers always stack.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Iterable, Dict, Any

from .predicate import Predicate


@dataclass
class Modifier:
    """One numeric adjustment to a check's target."""
    label: str
    value: int
    source: str
    domain: Optional[str] = None
    exclusion_group: Optional[str] = None
    predicate: Predicate = field(default_factory=Predicate)
    enabled: bool = True
    toggleable: bool = False

    @property
    def is_bonus(self) -> bool:
        return self.value > 0

    @property
    def is_penalty(self) -> bool:
        return self.value < 0

    def clone(self) -> 'Modifier':
        return Modifier(
            label=self.label,
            value=self.value,
            source=self.source,
            domain=self.domain,
            exclusion_group=self.exclusion_group,
            predicate=Predicate(self.predicate.statements),
            enabled=self.enabled,
            toggleable=self.toggleable
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'label': self.label,
            'value': self.value,
            'source': self.source,
            'domain': self.domain,
            'exclusion_group': self.exclusion_group,
            'enabled': self.enabled
        }


@dataclass
class ModifierResolution:
    """Outcome of the modifier pipeline."""
    total: int
    applied: List[Modifier]
    all: List[Modifier]
    uncapped_total: int = 0


def apply_exclusion_groups(modifiers: Iterable[Modifier]) -> List[Modifier]:
    """
    Drop the losers of each exclusion group.

    Within a group only the highest bonus and the lowest penalty survive
    (the first one listed wins a tie). A zero in a group neither competes
    nor is dropped. Survivors keep their original order.
    """
    modifiers = list(modifiers)
    winners = {}

    for mod in modifiers:
        if not mod.exclusion_group or mod.value == 0:
            continue
        slot = (mod.exclusion_group, mod.is_bonus)
        current = winners.get(slot)
        if current is None:
            winners[slot] = mod
        elif mod.is_bonus and mod.value > current.value:
            winners[slot] = mod
        elif mod.is_penalty and mod.value < current.value:
            winners[slot] = mod

    kept_ids = {id(mod) for mod in winners.values()}
    return [
        mod for mod in modifiers
        if not mod.exclusion_group or mod.value == 0 or id(mod) in kept_ids
    ]


def resolve_modifiers(
    modifiers: Iterable[Modifier],
    roll_options: Iterable[str],
    cap: Optional[int] = None
) -> ModifierResolution:
    """
    Run the modifier pipeline.

    1. Keep enabled modifiers whose predicate passes
    2. Apply exclusion groups
    3. Sum values
    4. Clamp to +/- cap (only when a cap is given)
    """
    modifiers = list(modifiers)
    options = frozenset(roll_options)

    applicable = [m for m in modifiers if m.enabled and m.predicate.test(options)]
    applied = apply_exclusion_groups(applicable)

    raw_total = sum(m.value for m in applied)
    total = raw_total if cap is None else max(-cap, min(cap, raw_total))

    return ModifierResolution(total=total, applied=applied, all=modifiers, uncapped_total=raw_total)
