"""
Outcome of an actor update.

Adding, removing and equipping items, and taking damage, report
failure through a Result rather than an exception. Hazard handlers apply
damage in the middle of a resolution and only need to log a failed update,
not unwind.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorCode(Enum):
    """Why an actor update was refused."""

    ITEM_NOT_FOUND = "item_not_found"
    ITEM_ALREADY_OWNED = "item_already_owned"
    ITEM_NOT_EQUIPPABLE = "item_not_equippable"
    ITEM_ALREADY_EQUIPPED = "item_already_equipped"
    ITEM_NOT_EQUIPPED = "item_not_equipped"

    INVALID_INPUT = "invalid_input"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Result:
    """
    Attributes:
        success: Whether the update was applied
        data: Details of the applied update (ids, new wound value...)
        error: Message for a refused update
        error_code: ErrorCode for a refused update

    Examples:
        >>> result = actor.equip_item(lasgun.id)
        >>> if not result:
        ...     print(result.error_code, result.error)
    """
    success: bool
    data: Any = None
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = None

    @classmethod
    def ok(cls, data: Any = None) -> 'Result':
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, code: ErrorCode) -> 'Result':
        return cls(success=False, error=error, error_code=code)

    def __bool__(self) -> bool:
        return self.success
