"""
Environmental hazard handler.

- Fire: 1d10 Energy damage to the body
- Vacuum: 1d10 Impact damage; survival time is the Toughness bonus in rounds
- Toxic: headless Toughness test, penalised by the toxicity rating
- Gravity: movement and Agility modifiers

Handlers are given their resolver and roller explicitly and read nothing
from global state.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from src.modules.check.resolver import CheckResolver
from src.modules.check.types import CheckContext, CheckResult
from src.modules.rng.roller import DiceRoller
from src.modules.rules.domains import CHECK_TOXIC

logger = logging.getLogger(__name__)

HAZARD_TYPES = ('fire', 'vacuum', 'toxic', 'gravity')


@dataclass
class HazardOutcome:
    """What a hazard did to an actor this round."""
    hazard: str
    actor_id: Optional[str]
    message: str
    damage: int = 0
    damage_type: Optional[str] = None
    check: Optional[CheckResult] = None

    @property
    def resisted(self) -> Optional[bool]:
        """None for hazards that involve no test."""
        if self.check is None:
            return None
        return self.check.success


@dataclass(frozen=True)
class GravityModifier:
    movement_multiplier: float
    agility_modifier: int


GRAVITY_MODIFIERS = {
    'low': GravityModifier(movement_multiplier=2, agility_modifier=10),
    'high': GravityModifier(movement_multiplier=0.5, agility_modifier=-10),
    'zero': GravityModifier(movement_multiplier=0, agility_modifier=-20),
}


class EnvironmentHandler:
    """
    Applies environmental hazards to actors.

    Usage:
        handler = EnvironmentHandler(resolver)
        outcome = handler.apply_toxic(actor, toxicity=10)
        if not outcome.resisted:
            ...
    """

    def __init__(self, resolver: CheckResolver, roller: Optional[DiceRoller] = None):
        self.resolver = resolver
        self.roller = roller or resolver.roller

    def apply_fire(self, actor: Any) -> HazardOutcome:
        """1d10 Energy damage to the body."""
        damage = self.roller.roll_total("1d10")
        self._damage(actor, damage)

        message = f"{actor.name} takes {damage} Energy damage from fire!"
        logger.info(message)
        return HazardOutcome('fire', getattr(actor, 'id', None), message, damage, 'energy')

    def apply_vacuum(self, actor: Any) -> HazardOutcome:
        """1d10 Impact damage from suffocation and decompression."""
        toughness_bonus = actor.get_characteristic_bonus('t')
        damage = self.roller.roll_total("1d10")
        self._damage(actor, damage)

        message = (
            f"{actor.name} suffocates in vacuum! {damage} damage. "
            f"Toughness bonus rounds until death: {toughness_bonus}"
        )
        logger.warning(message)
        return HazardOutcome('vacuum', getattr(actor, 'id', None), message, damage, 'impact')

    def apply_toxic(self, actor: Any, toxicity: int = 0) -> HazardOutcome:
        """
        Toughness test against a toxic environment.

        Args:
            actor: Actor exposed to the environment
            toxicity: Penalty subtracted from Toughness for the test
        """
        result = self.resolver.resolve(CheckContext(
            actor=actor,
            base_target=actor.get_characteristic('t') - toxicity,
            label=f"{actor.name} - Toxic Resistance",
            domains=[CHECK_TOXIC],
            characteristic='t',
            skip_confirmation=True
        ))

        if result is not None and not result.success:
            message = f"{actor.name} fails the Toxicity test! Apply poison effects."
            logger.warning(message)
        else:
            message = f"{actor.name} resists the toxic environment."
            logger.info(message)

        return HazardOutcome('toxic', getattr(actor, 'id', None), message, check=result)

    @staticmethod
    def get_gravity_modifier(gravity: str) -> GravityModifier:
        """
        Raises:
            ValueError: If gravity is not 'low', 'high' or 'zero'
        """
        try:
            return GRAVITY_MODIFIERS[gravity]
        except KeyError:
            raise ValueError(
                f"Unknown gravity '{gravity}'. Must be one of: {', '.join(sorted(GRAVITY_MODIFIERS))}"
            ) from None

    @staticmethod
    def _damage(actor: Any, damage: int) -> None:
        result = actor.apply_damage(damage, 'body')
        if not result:
            logger.error(f"Could not apply hazard damage to {actor.name}: {result.error}")
