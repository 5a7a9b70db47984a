"""
Result object for error handling in Yambo.

Operations that can be refused (publishing an event with a bad payload,
registering a duplicate event type) return a Result instead of raising.
Die values never fail: malformed values degrade to 0.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorCode(Enum):
    """Machine-readable classification for failed Results."""

    # Event errors
    EVENT_TYPE_NOT_REGISTERED = "event_type_not_registered"
    EVENT_TYPE_ALREADY_REGISTERED = "event_type_already_registered"
    SCHEMA_VALIDATION_FAILED = "schema_validation_failed"

    def __str__(self) -> str:
        return self.value


@dataclass
class Result:
    """
    Represents the result of an operation that can succeed or fail.

    Attributes:
        success: Whether the operation succeeded
        data: The result data if successful
        error: Error message if failed
        error_code: Machine-readable error code if failed

    Examples:
        >>> result = bus.publish(Event.create('dice.rolled', payload))
        >>> if not result:
        ...     print(result.error_code)
        schema_validation_failed
    """
    success: bool
    data: Any = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @staticmethod
    def ok(data: Any = None) -> 'Result':
        return Result(success=True, data=data)

    @staticmethod
    def fail(error: str, code: Optional[str | ErrorCode] = None) -> 'Result':
        """
        Create a failed result.

        Args:
            error: Human-readable error message
            code: Machine-readable error code (ErrorCode enum or string)
        """
        error_code_str = code.value if isinstance(code, ErrorCode) else code
        return Result(success=False, error=error, error_code=error_code_str)

    def __bool__(self) -> bool:
        """Allow using Result in boolean context: if result: ..."""
        return self.success
