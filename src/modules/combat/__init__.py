"""
Combat Module - rule providers and callers of the check resolver.

Provides:
- Craftsmanship and weapon quality rule synthesis
- Armour coverage per hit location
- Hit locations from reversed rolls
- Severity-indexed and range outcome tables
- Environmental hazards
- Attack resolution
"""

from .craftsmanship import (
    get_craftsmanship_rule_elements,
    get_armour_craftsmanship_bonus,
)
from .armour import HIT_LOCATIONS, aggregate_armour, get_location_armour
from .tables import (
    OutcomeTable,
    RangeTable,
    TableOutcome,
    VehicleCriticalEntry,
    VEHICLE_CRITICAL_TABLE,
    lookup_vehicle_critical,
)
from .hit_location import HitLocation, HIT_LOCATION_TABLE, determine_hit_location
from .qualities import parse_quality, get_quality_rule_elements
from .environment import EnvironmentHandler, HazardOutcome, GravityModifier
from .attack import AttackResolver, AttackResult, weapon_domain, attack_type_of

__all__ = [
    'get_craftsmanship_rule_elements',
    'get_armour_craftsmanship_bonus',
    'HIT_LOCATIONS',
    'aggregate_armour',
    'get_location_armour',
    'OutcomeTable',
    'RangeTable',
    'TableOutcome',
    'VehicleCriticalEntry',
    'VEHICLE_CRITICAL_TABLE',
    'lookup_vehicle_critical',
    'HitLocation',
    'HIT_LOCATION_TABLE',
    'determine_hit_location',
    'parse_quality',
    'get_quality_rule_elements',
    'EnvironmentHandler',
    'HazardOutcome',
    'GravityModifier',
    'AttackResolver',
    'AttackResult',
    'weapon_domain',
    'attack_type_of',
]
