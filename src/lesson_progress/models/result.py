"""
Result<T> pattern for store mutations and period resolution.

Operations that can be refused (duplicate enrollment, unknown log id,
unparseable analysis period) return a Result instead of raising, so the
caller can show the message and keep the current snapshot untouched.
"""

from dataclasses import dataclass
from typing import Optional, Generic, TypeVar
from enum import Enum


T = TypeVar('T')


class ResultStatus(Enum):
    """Status of a Result."""
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class Result(Generic[T]):
    """
    Outcome of an operation that may be refused.

    Attributes:
        status: Result status (SUCCESS or FAILURE)
        value: The produced value if successful (None if failure)
        error: The exception that caused failure, if any
        message: Human-readable description

    Examples:
        >>> result = store.add_enrollment("S001", "C001", planned_sessions=20)
        >>> if result.is_failure:
        ...     print(result.message)
    """

    status: ResultStatus
    value: Optional[T] = None
    error: Optional[Exception] = None
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Check if the result represents success."""
        return self.status == ResultStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        """Check if the result represents failure."""
        return self.status == ResultStatus.FAILURE

    @classmethod
    def success(cls, value: T, message: Optional[str] = None) -> 'Result[T]':
        """Create a successful result carrying ``value``."""
        return cls(status=ResultStatus.SUCCESS, value=value, message=message)

    @classmethod
    def failure(
        cls,
        message: str,
        error: Optional[Exception] = None
    ) -> 'Result[T]':
        """Create a failure result with a message and optional cause."""
        return cls(status=ResultStatus.FAILURE, message=message, error=error)

    def unwrap(self) -> T:
        """
        Return the value of a successful result.

        Raises:
            ValueError: If the result is a failure
        """
        if self.is_failure:
            raise ValueError(f"Cannot unwrap failure result: {self.message}")
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the value if successful, otherwise ``default``."""
        return self.value if self.is_success else default
