"""
Armour coverage aggregation.
"""

from typing import Any, Dict, Iterable

from .craftsmanship import get_armour_craftsmanship_bonus

HIT_LOCATIONS = ('head', 'rightArm', 'leftArm', 'body', 'rightLeg', 'leftLeg')


def _location_value(locations: Dict[str, Any], location: str) -> int:
    value = locations.get(location, 0)
    return value if isinstance(value, (int, float)) and not isinstance(value, bool) else 0


def aggregate_armour(items: Iterable[Any]) -> Dict[str, int]:
    """
    Armour points per hit location from equipped armour.

    Unequipped armour contributes nothing. Missing location entries count
    as zero. A location an item covers also gets that item's craftsmanship
    bonus, and one item never contributes less than zero.

    Args:
        items: Items as exposed by an actor (only type 'armour' counts)

    Returns:
        {location: armour points} for every hit location
    """
    armour = {location: 0 for location in HIT_LOCATIONS}

    for item in items:
        if getattr(item, 'type', None) != 'armour':
            continue
        if getattr(item, 'equipped', False) is not True:
            continue

        system = getattr(item, 'system', None) or {}
        locations = system.get('locations') or {}
        bonus = get_armour_craftsmanship_bonus(system.get('craftsmanship', 'common'))

        for location in HIT_LOCATIONS:
            value = _location_value(locations, location)
            if value > 0:
                armour[location] += max(0, int(value) + bonus)

    return armour


def get_location_armour(actor: Any, location: str) -> int:
    """Armour points an actor has at one location."""
    return aggregate_armour(getattr(actor, 'items', None) or ()).get(location, 0)
