"""
Check input and output types.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Sequence, Set, Union

from src.modules.rng.roller import PercentileRoll
from src.modules.rules.modifier import Modifier
from src.modules.rules.synthetics import DosAdjustment
from .degrees import DegreesResult


class InvalidCheckContextError(Exception):
    """Raised when a check has no acting entity or no domain."""
    pass


@dataclass
class CheckContext:
    """
    Everything needed to request a check.

    Attributes:
        actor: The acting entity
        base_target: Target number before modifiers
        label: Human-readable label, e.g. "Weapon Skill Test"
        domains: Domain(s) the check belongs to
        characteristic: Characteristic abbreviation the test is based on, if any
        skip_confirmation: Roll immediately, no confirmation step
        modifiers: Extra modifiers supplied directly by the caller
        roll_options: Extra flags for predicate matching
        dos_threshold: Degrees of success required (e.g. from a GM roll request)
    """
    actor: Any
    base_target: int
    label: str
    domains: Union[str, Sequence[str]] = ()
    characteristic: Optional[str] = None
    skip_confirmation: bool = False
    modifiers: List[Modifier] = field(default_factory=list)
    roll_options: Set[str] = field(default_factory=set)
    dos_threshold: Optional[int] = None


@dataclass
class CheckPrompt:
    """What the confirmation step is shown; toggleable modifiers may be switched off."""
    label: str
    base_target: int
    modifiers: List[Modifier]

    @property
    def toggleable(self) -> List[Modifier]:
        return [m for m in self.modifiers if m.toggleable]


@dataclass
class CheckResult:
    """
    The outcome of one resolved check.

    Attributes:
        context: The request
        roll: The percentile roll
        target: Effective target after modifiers
        applied_modifiers: Modifiers that counted, in source scan order
        modifier_total: Net modifier folded into the target
        dos: Success flag and degrees
        roll_options: Every flag asserted during the resolution
        degree_adjustments: Post-roll adjustments that applied
    """
    context: CheckContext
    roll: PercentileRoll
    target: int
    applied_modifiers: List[Modifier]
    modifier_total: int
    dos: DegreesResult
    roll_options: FrozenSet[str] = frozenset()
    degree_adjustments: List[DosAdjustment] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.dos.success

    @property
    def degrees(self) -> int:
        return self.dos.degrees

    @property
    def threshold_met(self) -> Optional[bool]:
        """None when no threshold was requested."""
        threshold = self.context.dos_threshold
        if threshold is None:
            return None
        return self.dos.success and self.dos.degrees >= threshold

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for a presentation layer."""
        return {
            'label': self.context.label,
            'actor_id': getattr(self.context.actor, 'id', None),
            'base_target': self.context.base_target,
            'roll': self.roll.to_dict(),
            'target': self.target,
            'modifier_total': self.modifier_total,
            'applied_modifiers': [m.to_dict() for m in self.applied_modifiers],
            'dos': self.dos.to_dict(),
            'roll_options': sorted(self.roll_options),
            'degree_adjustments': [
                {'amount': adj.amount, 'source': adj.source}
                for adj in self.degree_adjustments
            ],
            'threshold_met': self.threshold_met
        }
