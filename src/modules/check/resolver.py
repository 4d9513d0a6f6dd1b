"""
The d100 roll-under check resolver.

Flow:
1. Validate the context (actor and at least one domain)
2. Synthesize modifiers and roll options for (actor, domains)
3. Confirmation step (unless skipped or no callback is configured)
4. Modifier pipeline (predicates, exclusion groups, optional cap)
5. Effective target = max(0, base target + net modifier)
6. Roll d100 and classify degrees of success/failure
7. Apply post-roll degree adjustments

The resolver never mutates the actor, persists, or renders anything.
Callers apply side effects from the returned CheckResult.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from src.modules.rng.roller import DiceRoller
from src.modules.rules.domains import normalize_domains
from src.modules.rules.modifier import resolve_modifiers
from src.modules.rules.synthesizer import ModifierSynthesizer
from src.modules.rules.synthetics import DosAdjustment
from .degrees import DegreesResult, calculate_degrees, adjust_degrees
from .types import CheckContext, CheckPrompt, CheckResult, InvalidCheckContextError

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[CheckPrompt], bool]


class CheckResolver:
    """
    Resolves percentile checks.

    Holds no per-check state, so one resolver can serve any number of
    checks.

    Usage:
        resolver = CheckResolver(roller=DiceRoller(seed=7))
        result = resolver.resolve(CheckContext(
            actor=acolyte,
            base_target=acolyte.get_characteristic('ws'),
            label="Weapon Skill Test",
            domains=['attack:melee'],
            skip_confirmation=True
        ))
        print(result.dos.label)   # "2 DoS"
    """

    def __init__(
        self,
        roller: Optional[DiceRoller] = None,
        synthesizer: Optional[ModifierSynthesizer] = None,
        modifier_cap: Optional[int] = None,
        confirm: Optional[ConfirmCallback] = None
    ):
        """
        Args:
            roller: Randomness provider (unseeded DiceRoller if omitted)
            synthesizer: Modifier synthesizer (built-in kinds if omitted)
            modifier_cap: Clamp the net modifier to +/- this value; None means no cap
            confirm: Confirmation step. Receives a CheckPrompt, returns False to abandon
        """
        self.roller = roller or DiceRoller()
        self.synthesizer = synthesizer or ModifierSynthesizer()
        self.modifier_cap = modifier_cap
        self.confirm = confirm

    @classmethod
    def from_config(cls, config, confirm: Optional[ConfirmCallback] = None) -> 'CheckResolver':
        """Build a resolver from a Config (seed and modifier cap)."""
        return cls(
            roller=DiceRoller(seed=config.rng_seed),
            modifier_cap=config.modifier_cap,
            confirm=confirm
        )

    def resolve(
        self,
        context: CheckContext,
        ad_hoc: Optional[Sequence[Dict[str, Any]]] = None
    ) -> Optional[CheckResult]:
        """
        Resolve one check.

        Args:
            context: The check request
            ad_hoc: Rule elements generated for this check only

        Returns:
            CheckResult, or None if the confirmation step was abandoned

        Raises:
            InvalidCheckContextError: If there is no actor or no domain
        """
        domains = self._validate(context)

        synthetics = self.synthesizer.synthesize(context.actor, domains, ad_hoc)
        modifiers = synthetics.modifiers + [m.clone() for m in context.modifiers]

        roll_options = set(context.roll_options)
        roll_options.update(synthetics.roll_options)
        roll_options.add('self:check')
        if context.characteristic:
            roll_options.add(f"self:characteristic:{context.characteristic}")

        if not context.skip_confirmation and self.confirm is not None:
            prompt = CheckPrompt(label=context.label, base_target=context.base_target, modifiers=modifiers)
            if not self.confirm(prompt):
                logger.info(f"Check '{context.label}' abandoned at confirmation")
                return None

        resolution = resolve_modifiers(modifiers, roll_options, self.modifier_cap)
        if resolution.total != resolution.uncapped_total:
            logger.debug(
                f"Modifier total {resolution.uncapped_total:+d} capped to {resolution.total:+d}"
            )

        # A target of 0 cannot be passed: the lowest roll is 1
        target = max(0, context.base_target + resolution.total)

        roll = self.roller.roll_d100()
        dos = calculate_degrees(roll.value, target)
        dos, adjustments = self._apply_degree_adjustments(dos, synthetics.dos_adjustments, roll_options)

        result = CheckResult(
            context=context,
            roll=roll,
            target=target,
            applied_modifiers=resolution.applied,
            modifier_total=resolution.total,
            dos=dos,
            roll_options=frozenset(roll_options),
            degree_adjustments=adjustments
        )

        logger.debug(
            f"{context.label}: rolled {roll.display} vs {target} "
            f"({context.base_target} {resolution.total:+d}) -> {dos.label}"
        )
        return result

    @staticmethod
    def _validate(context: CheckContext):
        if context is None or context.actor is None:
            raise InvalidCheckContextError("A check needs an acting entity")

        domains = normalize_domains(context.domains)
        if not domains:
            raise InvalidCheckContextError(f"Check '{context.label}' declares no domain")

        return domains

    @staticmethod
    def _apply_degree_adjustments(
        dos: DegreesResult,
        adjustments: List[DosAdjustment],
        roll_options
    ):
        applied = []
        for adjustment in adjustments:
            if adjustment.predicate.test(roll_options):
                dos = adjust_degrees(dos, adjustment.amount)
                applied.append(adjustment)
        return dos, applied
