"""
Modifier Synthesizer.

Gathers the rule elements in effect for an actor and turns the ones that
bear on the requested domains into Synthetics.

Scan order (observable, it is the display order of applied modifiers):
1. Equipped equipment (weapons, armour, gear...)
2. Always-active items (talents, traits, conditions, malignancies,
   mental disorders, critical injuries)
3. Ad-hoc rule elements supplied by the caller for this resolution only
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple, Union

import jsonschema

from src.core.models import ACTIVE_ITEM_TYPES
from .domains import normalize_domains
from .registry import RuleElementRegistry, get_default_registry
from .synthetics import Synthetics

logger = logging.getLogger(__name__)

AD_HOC_LABEL = "Situational"


class ModifierSynthesizer:
    """
    Builds Synthetics for one (actor, domains) request.

    Stateless between calls: the same actor state, domains and ad-hoc
    input always produce the same ordered output. Never raises on bad
    rule element data; such elements are logged and skipped.
    """

    def __init__(self, registry: Optional[RuleElementRegistry] = None):
        self.registry = registry or get_default_registry()

    def synthesize(
        self,
        actor: Any,
        domains: Union[str, Iterable[str]],
        ad_hoc: Optional[Sequence[Dict[str, Any]]] = None
    ) -> Synthetics:
        """
        Collect everything in effect for the actor on the given domains.

        Args:
            actor: Anything exposing an `items` sequence; each item exposes
                  `type`, `equipped`, `rules` and `name` (missing ones default)
            domains: Domain(s) the check declares
            ad_hoc: Rule elements generated for this resolution only
                   (craftsmanship, weapon qualities...), never stored

        Returns:
            Synthetics in source scan order
        """
        domain_set = normalize_domains(domains)
        synthetics = Synthetics()
        warned: Set[str] = set()

        # One snapshot per call so every pass sees the same items
        items = tuple(getattr(actor, 'items', None) or ())

        for item in self._equipped_equipment(items):
            self._apply_rules(item, synthetics, domain_set, warned)

        for item in self._active_items(items):
            self._apply_rules(item, synthetics, domain_set, warned)

        if ad_hoc:
            self._apply_sources(list(ad_hoc), AD_HOC_LABEL, synthetics, domain_set, warned)

        logger.debug(
            f"Synthesized {len(synthetics.modifiers)} modifier(s) and "
            f"{len(synthetics.roll_options)} roll option(s) for {list(domain_set)}"
        )
        return synthetics

    @staticmethod
    def _equipped_equipment(items: Tuple[Any, ...]) -> List[Any]:
        return [
            item for item in items
            if getattr(item, 'type', None) not in ACTIVE_ITEM_TYPES
            and getattr(item, 'equipped', False) is True
        ]

    @staticmethod
    def _active_items(items: Tuple[Any, ...]) -> List[Any]:
        return [item for item in items if getattr(item, 'type', None) in ACTIVE_ITEM_TYPES]

    def _apply_rules(self, item: Any, synthetics: Synthetics, domains: Tuple[str, ...], warned: Set[str]) -> None:
        rules = getattr(item, 'rules', None) or []
        label = getattr(item, 'name', None) or AD_HOC_LABEL
        self._apply_sources(list(rules), label, synthetics, domains, warned)

    def _apply_sources(
        self,
        sources: List[Any],
        default_label: str,
        synthetics: Synthetics,
        domains: Tuple[str, ...],
        warned: Set[str]
    ) -> None:
        for data in sources:
            if not isinstance(data, dict):
                logger.warning(f"Ignoring rule element on '{default_label}': expected an object, got {type(data).__name__}")
                continue

            key = data.get('key')
            definition = self.registry.get(key) if isinstance(key, str) else None
            if definition is None:
                if repr(key) not in warned:
                    warned.add(repr(key))
                    logger.warning(f"Unknown rule element key: '{key}' (on '{default_label}'), ignoring")
                continue

            try:
                definition.validate(data)
            except jsonschema.ValidationError as e:
                logger.warning(f"Invalid {key} rule element on '{default_label}': {e.message}")
                continue

            definition.apply(data, synthetics, domains, default_label)
