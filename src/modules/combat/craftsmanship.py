"""
Craftsmanship rule synthesis.

A weapon's grade is stored as a plain string. Its rule elements are
generated from that string at attack time and passed to the resolver as
ad-hoc input; they are never written back to the weapon, so changing the
grade takes effect on the very next check.

Attack (Weapon Skill / Ballistic Skill):
- Poor: -10
- Common: no modifier
- Good: +5
- Best: +10

Armour, per covered location:
- Poor: -1
- Common / Good: no change
- Best: +1
"""

from typing import Any, Dict, List

from src.modules.rules.domains import ATTACK_MELEE, ATTACK_RANGED

ATTACK_BONUS = {
    'poor': -10,
    'good': 5,
    'best': 10,
}

ARMOUR_BONUS = {
    'poor': -1,
    'best': 1,
}


def get_craftsmanship_rule_elements(craftsmanship: str) -> List[Dict[str, Any]]:
    """
    Rule elements for a weapon's craftsmanship grade.

    Common and unrecognized grades produce nothing.

    Examples:
        >>> [re['key'] for re in get_craftsmanship_rule_elements('good')]
        ['RollOption', 'FlatModifier', 'FlatModifier']
    """
    value = ATTACK_BONUS.get(craftsmanship)
    if value is None:
        return []

    label = f"{craftsmanship.capitalize()} Craftsmanship"
    return [
        {"key": "RollOption", "option": f"weapon:craftsmanship:{craftsmanship}", "label": label},
        {"key": "FlatModifier", "domain": ATTACK_MELEE, "value": value, "label": label, "source": "equipment"},
        {"key": "FlatModifier", "domain": ATTACK_RANGED, "value": value, "label": label, "source": "equipment"},
    ]


def get_armour_craftsmanship_bonus(craftsmanship: str) -> int:
    """Armour points added at each location the armour covers."""
    return ARMOUR_BONUS.get(craftsmanship, 0)
