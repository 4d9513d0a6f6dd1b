"""
Core data models for the percentile engine.

These are a minimal stand-in for the host's document layer:
- Item: Owned thing carrying an equipped flag and embedded rule elements
- Actor: Acting entity with characteristics, wounds and owned items

The check engine only reads them: it enumerates an actor's items and looks
at each item's type, equipped flag and rule list.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
import logging
import uuid

from .result import Result, ErrorCode

logger = logging.getLogger(__name__)

# Item types whose rule elements apply while owned, no equipping needed
ACTIVE_ITEM_TYPES = (
    'talent',
    'trait',
    'condition',
    'malignancy',
    'mental-disorder',
    'critical-injury',
)


def generate_id(prefix: str) -> str:
    """
    Generate a unique ID with the given prefix.

    Examples:
        >>> generate_id('item')
        'item_a1b2c3d4e5f6'
    """
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


@dataclass
class Item:
    """
    An item owned by an actor.

    Equipment (weapons, armour, gear) only contributes rule elements while
    equipped. Talents, traits, conditions, malignancies, mental disorders
    and critical injuries contribute for as long as they are owned.

    Attributes:
        name: Display name, also the default label for its rule elements
        type: Item type tag (e.g. 'weapon', 'armour', 'condition')
        id: Unique identifier
        equipped: Whether the item is currently equipped
        rules: Embedded rule element sources (plain dicts)
        system: Free-form item data (craftsmanship, locations, qualities...)
    """
    name: str
    type: str
    id: str = field(default_factory=lambda: generate_id('item'))
    equipped: bool = False
    rules: List[Dict[str, Any]] = field(default_factory=list)
    system: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Item':
        """
        Build an item from loosely structured data.

        Missing fields fall back to defaults: an item without an equipped
        flag is not equipped, an item without rules has none. Both may
        also be nested in the system data.
        """
        system = data.get('system') or {}

        rules = data.get('rules')
        if rules is None:
            rules = system.get('rules', [])

        equipped = data.get('equipped')
        if equipped is None:
            equipped = system.get('equipped', False)

        return Item(
            name=data.get('name', 'Unnamed Item'),
            type=data.get('type', 'gear'),
            id=data.get('id') or generate_id('item'),
            equipped=bool(equipped),
            rules=list(rules or []),
            system=dict(system)
        )

    @property
    def is_always_active(self) -> bool:
        """True if this item applies without being equipped."""
        return self.type in ACTIVE_ITEM_TYPES

    @property
    def is_active(self) -> bool:
        """True if this item's rule elements currently apply."""
        return self.is_always_active or self.equipped

    @property
    def craftsmanship(self) -> str:
        return self.system.get('craftsmanship', 'common')

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'name': self.name,
            'type': self.type,
            'equipped': self.equipped,
            'rules': [dict(rule) for rule in self.rules],
            'system': dict(self.system)
        }


@dataclass
class Actor:
    """
    An acting entity: the subject of every check.

    Attributes:
        name: Display name
        id: Unique identifier
        characteristics: Characteristic values keyed by abbreviation ('ws', 'bs', 't'...)
        wounds: {'value': current, 'max': maximum}
        items: Owned items in the order they were added
    """
    name: str
    id: str = field(default_factory=lambda: generate_id('actor'))
    characteristics: Dict[str, int] = field(default_factory=dict)
    wounds: Dict[str, int] = field(default_factory=lambda: {'value': 10, 'max': 10})
    items: List[Item] = field(default_factory=list)

    def get_characteristic(self, key: str) -> int:
        """Characteristic value, 0 if the actor does not have it."""
        return self.characteristics.get(key, 0)

    def get_characteristic_bonus(self, key: str) -> int:
        """Tens digit of a characteristic (e.g. Toughness 34 -> bonus 3)."""
        return self.get_characteristic(key) // 10

    def get_item(self, item_id: str) -> Optional[Item]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def items_of_type(self, item_type: str) -> List[Item]:
        return [item for item in self.items if item.type == item_type]

    def add_item(self, item: Item) -> Result:
        """
        Give an item to this actor.

        Returns:
            Result with the item's id, or ITEM_ALREADY_OWNED
        """
        if self.get_item(item.id):
            return Result.fail(
                f"{self.name} already owns item {item.id}",
                ErrorCode.ITEM_ALREADY_OWNED
            )

        self.items.append(item)
        logger.debug(f"{self.name} gained {item.type} '{item.name}'")
        return Result.ok({'actor_id': self.id, 'item_id': item.id})

    def remove_item(self, item_id: str) -> Result:
        """
        Remove an item. Its rule elements stop applying with it.
        """
        item = self.get_item(item_id)
        if not item:
            return Result.fail(f"Item {item_id} not found on {self.name}", ErrorCode.ITEM_NOT_FOUND)

        self.items = [owned for owned in self.items if owned.id != item_id]
        logger.debug(f"{self.name} lost {item.type} '{item.name}'")
        return Result.ok({'actor_id': self.id, 'item_id': item_id})

    def equip_item(self, item_id: str) -> Result:
        """
        Equip an owned item.

        Validates:
        - Actor owns the item
        - Item is equipment (talents, conditions... are always active)
        - Item is not already equipped
        """
        item = self.get_item(item_id)
        if not item:
            return Result.fail(f"Item {item_id} not found on {self.name}", ErrorCode.ITEM_NOT_FOUND)

        if item.is_always_active:
            return Result.fail(
                f"{item.type} '{item.name}' cannot be equipped",
                ErrorCode.ITEM_NOT_EQUIPPABLE
            )

        if item.equipped:
            return Result.fail(f"'{item.name}' is already equipped", ErrorCode.ITEM_ALREADY_EQUIPPED)

        item.equipped = True
        return Result.ok({'actor_id': self.id, 'item_id': item_id, 'equipped': True})

    def unequip_item(self, item_id: str) -> Result:
        """Unequip an owned item."""
        item = self.get_item(item_id)
        if not item:
            return Result.fail(f"Item {item_id} not found on {self.name}", ErrorCode.ITEM_NOT_FOUND)

        if not item.equipped:
            return Result.fail(f"'{item.name}' is not equipped", ErrorCode.ITEM_NOT_EQUIPPED)

        item.equipped = False
        return Result.ok({'actor_id': self.id, 'item_id': item_id, 'equipped': False})

    def apply_damage(self, wounds: int, location: str = 'body') -> Result:
        """
        Reduce current wounds, never below zero.

        Args:
            wounds: Number of wounds to apply
            location: Hit location (recorded in the result data)

        Returns:
            Result with the new wound value and whether the actor hit zero
        """
        if wounds < 0:
            return Result.fail("Damage cannot be negative", ErrorCode.INVALID_INPUT)

        current = self.wounds.get('value', 0)
        new_value = max(0, current - wounds)
        self.wounds['value'] = new_value

        if new_value <= 0:
            logger.warning(f"{self.name} has reached 0 wounds! Critical damage!")

        return Result.ok({
            'actor_id': self.id,
            'wounds': new_value,
            'location': location,
            'critical': new_value <= 0
        })
