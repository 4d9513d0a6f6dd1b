"""
Rules Module - declarative rule elements and modifier synthesis.

Provides:
- Domain keys for addressing kinds of checks
- Rule element kinds (FlatModifier, RollOption, AdjustDegree, ...)
- Predicates over roll options
- The modifier pipeline (exclusion groups, optional cap)
- ModifierSynthesizer: rule elements in effect for (actor, domains)

Usage:
    synthesizer = ModifierSynthesizer()
    synthetics = synthesizer.synthesize(actor, ['attack:melee'])
    print(synthetics.net_modifier, synthetics.roll_options)
"""

from .domains import (
    ATTACK,
    ATTACK_MELEE,
    ATTACK_RANGED,
    CHECK_TOXIC,
    DAMAGE_MELEE,
    DAMAGE_RANGED,
    domain,
    characteristic_domain,
    skill_domain,
    expand_domain,
    normalize_domains,
    domain_matches,
)
from .predicate import Predicate
from .modifier import Modifier, ModifierResolution, apply_exclusion_groups, resolve_modifiers
from .synthetics import (
    Synthetics,
    DosAdjustment,
    DiceOverrideEntry,
    ToughnessAdjustment,
    ResistanceEntry,
)
from .elements import core_rule_elements
from .registry import RuleElementRegistry, get_default_registry
from .synthesizer import ModifierSynthesizer

__all__ = [
    'ATTACK',
    'ATTACK_MELEE',
    'ATTACK_RANGED',
    'CHECK_TOXIC',
    'DAMAGE_MELEE',
    'DAMAGE_RANGED',
    'domain',
    'characteristic_domain',
    'skill_domain',
    'expand_domain',
    'normalize_domains',
    'domain_matches',
    'Predicate',
    'Modifier',
    'ModifierResolution',
    'apply_exclusion_groups',
    'resolve_modifiers',
    'Synthetics',
    'DosAdjustment',
    'DiceOverrideEntry',
    'ToughnessAdjustment',
    'ResistanceEntry',
    'core_rule_elements',
    'RuleElementRegistry',
    'get_default_registry',
    'ModifierSynthesizer',
]
