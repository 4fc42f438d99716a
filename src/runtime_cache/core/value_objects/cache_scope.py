"""Cache scope value object."""

from enum import Enum


class CacheScope(str, Enum):
    """Where a memoized value lives."""

    SHARED = "shared"      # Process-wide, via the shared registry
    INSTANCE = "instance"  # Bound to one object
