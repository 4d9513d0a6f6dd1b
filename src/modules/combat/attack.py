"""
Attack resolution.

An attack is a check in the attack:melee or attack:ranged domain (plus a
domain naming the weapon) against Weapon Skill or Ballistic Skill. The
weapon's craftsmanship and qualities are turned into rule elements for
this attack only. A hit is given a location from the reversed roll.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from src.modules.check.resolver import CheckResolver
from src.modules.check.types import CheckContext, CheckResult
from src.modules.rules.domains import ATTACK_MELEE, ATTACK_RANGED, domain
from src.modules.rules.modifier import Modifier
from .craftsmanship import get_craftsmanship_rule_elements
from .hit_location import HitLocation, determine_hit_location
from .qualities import get_quality_rule_elements

logger = logging.getLogger(__name__)

MELEE = 'melee'
RANGED = 'ranged'


@dataclass
class AttackResult:
    check: CheckResult
    weapon_name: str
    attack_type: str
    hit: Optional[HitLocation] = None

    @property
    def success(self) -> bool:
        return self.check.success

    @property
    def degrees(self) -> int:
        return self.check.degrees


def weapon_domain(weapon: Any) -> str:
    """Domain addressing attacks made with one specific weapon."""
    return domain('weapon', weapon.id)


def attack_type_of(weapon: Any) -> str:
    """Weapons whose class is 'melee' attack in melee; everything else is ranged."""
    system = getattr(weapon, 'system', None) or {}
    return MELEE if system.get('class') == MELEE else RANGED


class AttackResolver:
    """
    Resolves attacks through a CheckResolver.

    Usage:
        attacks = AttackResolver(resolver)
        result = attacks.resolve_attack(actor, chainsword)
        if result.success:
            print(result.hit.label)
    """

    def __init__(self, resolver: CheckResolver):
        self.resolver = resolver

    def resolve_attack(
        self,
        actor: Any,
        weapon: Any,
        base_target: Optional[int] = None,
        modifiers: Optional[List[Modifier]] = None,
        roll_options: Optional[Iterable[str]] = None,
        called_shot: Optional[str] = None,
        skip_confirmation: bool = True
    ) -> Optional[AttackResult]:
        """
        Make one attack.

        Args:
            actor: Attacker
            weapon: Weapon item (craftsmanship and qualities are read from its system data)
            base_target: Overrides the WS/BS target
            modifiers: Situational modifiers (range, aim, called shot penalty...)
            roll_options: Extra flags, e.g. 'self:aim' or 'self:aim:full'
            called_shot: Location key that overrides the hit location table
            skip_confirmation: Roll without the confirmation step

        Returns:
            AttackResult, or None if the confirmation step was abandoned
        """
        attack_type = attack_type_of(weapon)
        characteristic = 'ws' if attack_type == MELEE else 'bs'
        if base_target is None:
            base_target = actor.get_characteristic(characteristic)

        system = getattr(weapon, 'system', None) or {}
        ad_hoc = get_craftsmanship_rule_elements(system.get('craftsmanship', 'common'))
        ad_hoc += get_quality_rule_elements(system.get('qualities', []))

        options = set(roll_options or ())
        options.update({'self:attack', f"self:attack:{attack_type}"})

        check = self.resolver.resolve(
            CheckContext(
                actor=actor,
                base_target=base_target,
                label=f"{weapon.name} Attack",
                domains=[ATTACK_MELEE if attack_type == MELEE else ATTACK_RANGED, weapon_domain(weapon)],
                characteristic=characteristic,
                skip_confirmation=skip_confirmation,
                modifiers=list(modifiers or []),
                roll_options=options
            ),
            ad_hoc=ad_hoc
        )
        if check is None:
            return None

        hit = determine_hit_location(check.roll, called_shot) if check.success else None
        if hit:
            logger.debug(f"{actor.name} hits with {weapon.name}: {hit.label} ({check.dos.label})")

        return AttackResult(check=check, weapon_name=weapon.name, attack_type=attack_type, hit=hit)
