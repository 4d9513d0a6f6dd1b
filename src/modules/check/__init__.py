"""
Check Module - percentile test resolution.

Provides:
- CheckContext / CheckResult
- Degrees of success and failure
- CheckResolver: synthesize, fold, roll, classify

Usage:
    resolver = CheckResolver(roller=DiceRoller(seed=42))
    result = resolver.resolve(CheckContext(
        actor=actor,
        base_target=40,
        label="Toughness Test",
        domains=['characteristic:t'],
        skip_confirmation=True
    ))
"""

from .degrees import DegreesResult, calculate_degrees, adjust_degrees
from .types import CheckContext, CheckPrompt, CheckResult, InvalidCheckContextError
from .resolver import CheckResolver

__all__ = [
    'DegreesResult',
    'calculate_degrees',
    'adjust_degrees',
    'CheckContext',
    'CheckPrompt',
    'CheckResult',
    'InvalidCheckContextError',
    'CheckResolver',
]
