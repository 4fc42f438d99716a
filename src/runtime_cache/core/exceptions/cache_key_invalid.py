"""Cache key invalid exception.

ONLY key validation errors - raised when a raw key cannot be normalized
deterministically.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Optional

from .base import RuntimeCacheError


class CacheKeyInvalid(RuntimeCacheError, ValueError):
    """Cache key validation error.

    Raised when a key is of a type that has no stable string form:
    - Mappings (ordering is not part of the key)
    - Sets and frozensets (unordered)
    """

    def __init__(
        self,
        key: Any,
        reason: str,
        error_code: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        """Initialize cache key validation error.

        Args:
            key: The rejected raw key
            reason: Human-readable reason for the rejection
            error_code: Optional machine-readable error code
            details: Optional additional error details
        """
        self.key = key
        self.reason = reason
        super().__init__(
            f"Invalid cache key {key!r}: {reason}",
            error_code=error_code or "CACHE_KEY_INVALID",
            details=details,
        )

    @classmethod
    def unordered(cls, key: Any) -> "CacheKeyInvalid":
        """Create exception for a key whose element order is undefined."""
        return cls(
            key=key,
            reason=f"{type(key).__name__} keys are unordered; use a list or tuple",
            error_code="CACHE_KEY_UNORDERED",
            details={"key_type": type(key).__name__},
        )

    @classmethod
    def encoding_mismatch(cls, key: Any, expected: str) -> "CacheKeyInvalid":
        """Create exception for a normalized key built with another encoding."""
        return cls(
            key=key,
            reason=f"key was normalized as '{key.encoding.value}', store expects '{expected}'",
            error_code="CACHE_KEY_ENCODING_MISMATCH",
            details={"key_encoding": key.encoding.value, "expected_encoding": expected},
        )

    def to_dict(self) -> dict:
        """Convert exception to dictionary for serialization."""
        data = super().to_dict()
        data["key"] = repr(self.key)
        data["reason"] = self.reason
        return data
