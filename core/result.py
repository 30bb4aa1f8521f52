"""
Explicit success/failure container for fallible field parsing.
"""
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Result(Generic[T]):
    """
    Outcome of an operation that can fail without raising.
    
    Attributes:
        success: Whether the operation succeeded
        data: The produced value (only when success is True)
        error: Failure description (only when success is False)
    """
    
    def __init__(self, success: bool, data: Optional[T] = None, error: Optional[str] = None):
        self.success = success
        self.data = data
        self.error = error
    
    @classmethod
    def ok(cls, data: T) -> "Result[T]":
        """Create a successful Result wrapping ``data``."""
        return cls(success=True, data=data)
    
    @classmethod
    def fail(cls, error: str) -> "Result[T]":
        """Create a failed Result carrying ``error``."""
        return cls(success=False, error=error)
    
    def is_success(self) -> bool:
        return self.success
    
    def is_failure(self) -> bool:
        return not self.success
    
    def unwrap(self, default: Optional[T] = None) -> Optional[T]:
        """Return the data if successful, otherwise ``default``."""
        return self.data if self.is_success() else default
    
    def __repr__(self) -> str:
        return f"Result(success={self.success}, data={self.data!r}, error={self.error!r})"
