"""
Result type for caller-facing service operations.

Services return a Result when the caller is expected to branch on failure
(e.g. reporting a malformed sign-up pool) instead of handling an exception.

Usage:
    result = matchmaking_service.run(players)
    if result:
        render(result.value)
    else:
        print(f"Error ({result.error_code}): {result.error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Success/failure wrapper for a service return value.

    Attributes:
        success: Whether the operation succeeded
        value: The payload on success
        error: Human-readable message on failure
        error_code: Code from services.error_codes on failure
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, code: str | None = None) -> "Result[T]":
        return cls(success=False, error=error, error_code=code)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """
        Return the value.

        Raises:
            ValueError: If the result is a failure
        """
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore[return-value]
