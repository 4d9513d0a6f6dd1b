"""
Rule element kind definitions.

A rule element is declarative data: a dict whose "key" names its kind.
Each kind is described by a RuleElementDefinition that declares a JSON
Schema for its data and knows how to contribute to Synthetics. New kinds
are added by subclassing and registering; the synthesizer and resolver
never change.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from src.modules.rules.synthetics import Synthetics


class RuleElementDefinition(ABC):
    """
    Defines one rule element kind with validation.

    Attributes:
        key: Discriminant value in rule element data (e.g. "FlatModifier")
        description: Human-readable description
        schema_version: Version of the schema (semver)
        module: Which module provides this kind
    """

    key: str
    description: str
    schema_version: str = "1.0.0"
    module: str = "rules"

    @abstractmethod
    def get_schema(self) -> Dict[str, Any]:
        """
        Return JSON Schema for validation.

        Example:
            {
                "type": "object",
                "properties": {
                    "key": {"const": "RollOption"},
                    "option": {"type": "string", "minLength": 1}
                },
                "required": ["key", "option"]
            }
        """
        pass

    def validate(self, data: Dict[str, Any]) -> bool:
        """
        Validate rule element data against schema.

        Returns:
            True if valid

        Raises:
            jsonschema.ValidationError: If validation fails
        """
        import jsonschema
        jsonschema.validate(data, self.get_schema())
        return True

    @abstractmethod
    def apply(
        self,
        data: Dict[str, Any],
        synthetics: 'Synthetics',
        domains: Tuple[str, ...],
        default_label: str
    ) -> None:
        """
        Contribute validated data to synthetics.

        Args:
            data: Rule element data (already validated)
            synthetics: Collection being built for the current resolution
            domains: Domains the current check declared
            default_label: Label to use when the data carries none
                          (usually the owning item's name)
        """
        pass

    def to_dict(self) -> Dict[str, Any]:
        return {
            'key': self.key,
            'description': self.description,
            'schema_version': self.schema_version,
            'module': self.module
        }


def base_properties(key: str) -> Dict[str, Any]:
    """Schema properties every rule element kind shares."""
    return {
        "key": {"const": key},
        "label": {
            "type": "string",
            "description": "Display label; defaults to the owning item's name"
        },
        "predicate": {
            "type": "array",
            "description": "Statements over roll options that must all pass",
            "items": {
                "anyOf": [
                    {"type": "string"},
                    {
                        "type": "object",
                        "properties": {
                            "and": {"type": "array"},
                            "or": {"type": "array"}
                        }
                    }
                ]
            }
        }
    }
