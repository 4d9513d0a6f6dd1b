"""
Registry of rule element kinds.

Maps the "key" discriminant of rule element data to its definition.
Unknown keys are not an error: data written for a newer ruleset still
loads, its unknown elements are simply ignored.
"""

import logging
from typing import Dict, List, Optional

from ..base import RuleElementDefinition
from .elements import core_rule_elements

logger = logging.getLogger(__name__)


class RuleElementRegistry:
    """
    Registry of rule element kinds.

    Usage:
        registry = RuleElementRegistry.with_core_elements()
        registry.register(MyCustomElement())
        definition = registry.get('FlatModifier')
    """

    def __init__(self):
        self._definitions: Dict[str, RuleElementDefinition] = {}

    @classmethod
    def with_core_elements(cls) -> 'RuleElementRegistry':
        """Create a registry holding every built-in kind."""
        registry = cls()
        for definition in core_rule_elements():
            registry.register(definition)
        return registry

    def register(self, definition: RuleElementDefinition) -> None:
        """
        Register a kind.

        Raises:
            ValueError: If the key is already registered
        """
        if definition.key in self._definitions:
            raise ValueError(f"Rule element kind '{definition.key}' is already registered")

        self._definitions[definition.key] = definition
        logger.debug(f"Registered rule element kind '{definition.key}' from module '{definition.module}'")

    def get(self, key: str) -> Optional[RuleElementDefinition]:
        return self._definitions.get(key)

    def is_registered(self, key: str) -> bool:
        return key in self._definitions

    def get_keys(self) -> List[str]:
        """Registered keys, sorted."""
        return sorted(self._definitions)

    def get_all(self) -> List[Dict[str, str]]:
        return [self._definitions[key].to_dict() for key in self.get_keys()]


# Shared default registry (lazy-loaded)
_default_registry: Optional[RuleElementRegistry] = None


def get_default_registry() -> RuleElementRegistry:
    """Get the shared registry of built-in kinds."""
    global _default_registry
    if _default_registry is None:
        _default_registry = RuleElementRegistry.with_core_elements()
    return _default_registry
