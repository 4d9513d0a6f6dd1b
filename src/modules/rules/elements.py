"""
Built-in rule element kinds.

- FlatModifier: numeric modifier on one domain
- RollOption: asserts a flag for predicates and display
- AdjustDegree: shifts degrees of success/failure after the roll
- DiceOverride: changes damage dice behavior on a domain
- Resistance: reduces incoming damage of a type
- AdjustToughness: changes the Toughness bonus used to soak damage
"""

from typing import Dict, Any, List, Tuple

from ..base import RuleElementDefinition, base_properties
from .modifier import Modifier
from .predicate import Predicate
from .synthetics import (
    Synthetics,
    DosAdjustment,
    DiceOverrideEntry,
    ToughnessAdjustment,
    ResistanceEntry,
)


class FlatModifierElement(RuleElementDefinition):
    """
    Adds a flat value to checks in one domain.

    Example on a talent:
        {
            "key": "FlatModifier",
            "domain": "characteristic:bs",
            "value": 10,
            "label": "Marksman",
            "source": "talent",
            "predicate": ["self:aim:full"]
        }
    """

    key = "FlatModifier"
    description = "Flat numeric modifier to one domain"

    def get_schema(self) -> Dict[str, Any]:
        properties = base_properties(self.key)
        properties.update({
            "domain": {"type": "string", "minLength": 1},
            "value": {"type": "integer"},
            "source": {"type": "string", "default": "rule-element"},
            "exclusionGroup": {"type": "string"},
            "toggleable": {"type": "boolean", "default": False}
        })
        return {
            "type": "object",
            "properties": properties,
            "required": ["key", "domain", "value"]
        }

    def apply(self, data, synthetics: Synthetics, domains: Tuple[str, ...], default_label: str) -> None:
        if data['domain'] not in domains:
            return

        synthetics.modifiers.append(Modifier(
            label=data.get('label') or default_label,
            value=data['value'],
            source=data.get('source', 'rule-element'),
            domain=data['domain'],
            exclusion_group=data.get('exclusionGroup'),
            predicate=Predicate.from_data(data.get('predicate')),
            toggleable=data.get('toggleable', False)
        ))


class RollOptionElement(RuleElementDefinition):
    """
    Asserts a roll option, e.g. "weapon:reliable".

    No numeric effect. Predicates elsewhere can test for the option.
    """

    key = "RollOption"
    description = "Boolean flag visible to predicates"

    def get_schema(self) -> Dict[str, Any]:
        properties = base_properties(self.key)
        properties["option"] = {"type": "string", "minLength": 1}
        return {
            "type": "object",
            "properties": properties,
            "required": ["key", "option"]
        }

    def apply(self, data, synthetics: Synthetics, domains: Tuple[str, ...], default_label: str) -> None:
        synthetics.add_roll_option(data['option'])


class AdjustDegreeElement(RuleElementDefinition):
    """
    Adjusts degrees after a check resolves.

        {"key": "AdjustDegree", "amount": 1, "predicate": ["self:aim:full"], "label": "Accurate"}
    """

    key = "AdjustDegree"
    description = "Post-roll degree of success/failure adjustment"

    def get_schema(self) -> Dict[str, Any]:
        properties = base_properties(self.key)
        properties["amount"] = {"type": "integer", "not": {"const": 0}}
        return {
            "type": "object",
            "properties": properties,
            "required": ["key", "amount"]
        }

    def apply(self, data, synthetics: Synthetics, domains: Tuple[str, ...], default_label: str) -> None:
        synthetics.dos_adjustments.append(DosAdjustment(
            amount=data['amount'],
            source=data.get('label') or default_label,
            predicate=Predicate.from_data(data.get('predicate'))
        ))


class DiceOverrideElement(RuleElementDefinition):
    """
    Tearing: {"key": "DiceOverride", "domain": "damage:melee", "mode": "rerollLowest"}
    Proven(3): {"key": "DiceOverride", "domain": "damage:ranged", "mode": "minimumDie", "value": 3}
    """

    key = "DiceOverride"
    description = "Damage dice behavior override"

    def get_schema(self) -> Dict[str, Any]:
        properties = base_properties(self.key)
        properties.update({
            "domain": {"type": "string", "minLength": 1},
            "mode": {"enum": ["rerollLowest", "minimumDie", "maximizeDie"]},
            "value": {"type": "integer", "minimum": 0}
        })
        return {
            "type": "object",
            "properties": properties,
            "required": ["key", "domain", "mode"]
        }

    def apply(self, data, synthetics: Synthetics, domains: Tuple[str, ...], default_label: str) -> None:
        entries = synthetics.dice_overrides.setdefault(data['domain'], [])
        entries.append(DiceOverrideEntry(
            mode=data['mode'],
            source=data.get('label') or default_label,
            value=data.get('value', 0)
        ))


class ResistanceElement(RuleElementDefinition):
    """
    {"key": "Resistance", "damageType": "energy", "value": 2}
    {"key": "Resistance", "damageType": "impact", "mode": "half"}
    """

    key = "Resistance"
    description = "Damage resistance against a damage type"

    def get_schema(self) -> Dict[str, Any]:
        properties = base_properties(self.key)
        properties.update({
            "damageType": {"type": "string", "minLength": 1},
            "value": {"type": "integer", "minimum": 0, "default": 0},
            "mode": {"enum": ["flat", "half"], "default": "flat"}
        })
        return {
            "type": "object",
            "properties": properties,
            "required": ["key", "damageType"]
        }

    def apply(self, data, synthetics: Synthetics, domains: Tuple[str, ...], default_label: str) -> None:
        synthetics.resistances.append(ResistanceEntry(
            damage_type=data['damageType'],
            value=data.get('value', 0),
            mode=data.get('mode', 'flat'),
            source=data.get('label') or default_label
        ))


class AdjustToughnessElement(RuleElementDefinition):
    """
    Unnatural Toughness (2): {"key": "AdjustToughness", "value": 2}
    Unnatural Toughness (x2): {"key": "AdjustToughness", "value": 2, "mode": "multiply"}
    """

    key = "AdjustToughness"
    description = "Toughness bonus adjustment for damage soak"

    def get_schema(self) -> Dict[str, Any]:
        properties = base_properties(self.key)
        properties.update({
            "value": {"type": "number"},
            "mode": {"enum": ["add", "multiply"], "default": "add"}
        })
        return {
            "type": "object",
            "properties": properties,
            "required": ["key", "value"]
        }

    def apply(self, data, synthetics: Synthetics, domains: Tuple[str, ...], default_label: str) -> None:
        synthetics.toughness_adjustments.append(ToughnessAdjustment(
            value=data['value'],
            mode=data.get('mode', 'add'),
            source=data.get('label') or default_label
        ))


def core_rule_elements() -> List[RuleElementDefinition]:
    """Return the rule element kinds every registry starts with."""
    return [
        FlatModifierElement(),
        RollOptionElement(),
        AdjustDegreeElement(),
        DiceOverrideElement(),
        ResistanceElement(),
        AdjustToughnessElement(),
    ]
