"""
Predicates: conditions over roll options.

Statements:
- "self:aim" - true if the option is asserted
- "not:flanked" - true if the option is NOT asserted
- {"and": [...]} - true if every sub-statement passes
- {"or": [...]} - true if any sub-statement passes

A predicate is a list of statements that must all pass. The empty
predicate always passes.
"""

import logging
from typing import Any, Iterable, Tuple

logger = logging.getLogger(__name__)


class Predicate:
    """An immutable list of predicate statements."""

    def __init__(self, statements: Iterable[Any] = ()):
        self.statements: Tuple[Any, ...] = tuple(statements)

    @classmethod
    def from_data(cls, data: Any) -> 'Predicate':
        """Create from raw rule element data, normalizing to a list."""
        if not data:
            return cls()
        if isinstance(data, (list, tuple)):
            return cls(data)
        return cls([data])

    @property
    def is_empty(self) -> bool:
        return not self.statements

    def test(self, roll_options: Iterable[str]) -> bool:
        """True if every statement is satisfied by the roll options."""
        options = roll_options if isinstance(roll_options, (set, frozenset)) else set(roll_options)
        return all(self._test_statement(s, options) for s in self.statements)

    def _test_statement(self, statement: Any, options) -> bool:
        if isinstance(statement, str):
            if statement.startswith('not:'):
                return statement[4:] not in options
            return statement in options

        if isinstance(statement, dict):
            for joiner, combine in (('and', all), ('or', any)):
                if joiner in statement:
                    parts = statement[joiner]
                    if not isinstance(parts, (list, tuple)):
                        break
                    return combine(self._test_statement(s, options) for s in parts)

        # Malformed statements never pass
        logger.debug(f"Unrecognized predicate statement: {statement!r}")
        return False

    def to_list(self) -> list:
        return list(self.statements)

    def __eq__(self, other) -> bool:
        return isinstance(other, Predicate) and self.statements == other.statements

    def __repr__(self) -> str:
        return f"Predicate({list(self.statements)!r})"
