"""Result type returned across the handshake boundary."""

from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

from twitter_auth.core.exceptions import AuthError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class AuthResult(Generic[T]):
    """Either a value or the ``AuthError`` that ended the attempt."""

    value: Optional[T] = None
    error: Optional[AuthError] = None

    @classmethod
    def success(cls, value: T) -> "AuthResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AuthError) -> "AuthResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def errors(self) -> List[dict]:
        """Host-facing ``[{"message_key": ..., "message": ...}]`` list."""
        return [] if self.error is None else [self.error.to_dict()]

    def unwrap(self) -> T:
        """Return the value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value
