"""
Weapon quality rule synthesis.

Qualities are stored on a weapon as plain strings ("Accurate",
"Proven(3)"). Like craftsmanship, their rule elements are generated at
attack time and never stored on the weapon.
"""

import re
from typing import Any, Callable, Dict, Iterable, List, Tuple

from src.modules.rules.domains import ATTACK_RANGED, DAMAGE_MELEE, DAMAGE_RANGED

QUALITY_PATTERN = re.compile(r'^(.+?)\((\d+)\)$')

QualityGenerator = Callable[[int], List[Dict[str, Any]]]


def parse_quality(quality: str) -> Tuple[str, int]:
    """
    Split a quality into slug and rating.

    Examples:
        >>> parse_quality('Proven(3)')
        ('proven', 3)
        >>> parse_quality('Razor Sharp')
        ('razor sharp', 0)
    """
    quality = quality.strip()
    match = QUALITY_PATTERN.match(quality)
    if match:
        return match.group(1).strip().lower(), int(match.group(2))
    return quality.lower(), 0


def _damage_override(mode: str, label: str, value: int = 0) -> List[Dict[str, Any]]:
    overrides = []
    for damage_domain in (DAMAGE_MELEE, DAMAGE_RANGED):
        rule = {"key": "DiceOverride", "domain": damage_domain, "mode": mode, "label": label}
        if value:
            rule["value"] = value
        overrides.append(rule)
    return overrides


QUALITY_RULES: Dict[str, QualityGenerator] = {
    'accurate': lambda n: [
        {"key": "RollOption", "option": "weapon:accurate", "label": "Accurate"},
        {"key": "FlatModifier", "domain": ATTACK_RANGED, "value": 10, "label": "Accurate (Aim)",
         "source": "quality", "predicate": ["self:aim"]},
        {"key": "AdjustDegree", "amount": 1, "predicate": ["self:aim:full"], "label": "Accurate (Full Aim)"},
    ],
    'balanced': lambda n: [
        {"key": "RollOption", "option": "weapon:balanced", "label": "Balanced"},
        {"key": "FlatModifier", "domain": "skill:parry", "value": 10, "label": "Balanced", "source": "quality"},
    ],
    'tearing': lambda n: [
        {"key": "RollOption", "option": "weapon:tearing", "label": "Tearing"},
        *_damage_override("rerollLowest", "Tearing"),
    ],
    'proven': lambda n: [
        {"key": "RollOption", "option": "weapon:proven", "label": f"Proven({n})"},
        *_damage_override("minimumDie", f"Proven({n})", n or 3),
    ],
    'reliable': lambda n: [
        {"key": "RollOption", "option": "weapon:reliable", "label": "Reliable"},
    ],
    'unreliable': lambda n: [
        {"key": "RollOption", "option": "weapon:unreliable", "label": "Unreliable"},
    ],
}


def get_quality_rule_elements(qualities: Iterable[str]) -> List[Dict[str, Any]]:
    """
    Rule elements for a weapon's qualities.

    Unknown qualities still assert "weapon:quality:<slug>" so predicates
    can refer to them.
    """
    rules: List[Dict[str, Any]] = []

    for raw in qualities:
        if not isinstance(raw, str) or not raw.strip():
            continue
        slug, rating = parse_quality(raw)
        generator = QUALITY_RULES.get(slug)
        if generator:
            rules.extend(generator(rating))
        else:
            rules.append({"key": "RollOption", "option": f"weapon:quality:{slug}", "label": raw.strip()})

    return rules
