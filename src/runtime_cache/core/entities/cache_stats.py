"""Cache statistics entity.

ONLY counters - immutable snapshot of a runtime cache's activity, taken
under the store lock so the numbers are mutually consistent.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time statistics for one runtime cache store."""

    name: str
    entries: int = 0
    hits: int = 0
    misses: int = 0
    computations: int = 0
    failures: int = 0
    invalidations: int = 0

    @property
    def total_requests(self) -> int:
        """Number of get-or-compute calls that resolved a value or failed."""
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Hit rate as a percentage, 0.0 when nothing was requested yet."""
        if self.total_requests == 0:
            return 0.0
        return self.hits / self.total_requests * 100

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        data = asdict(self)
        data["total_requests"] = self.total_requests
        data["hit_rate_percent"] = self.hit_rate
        return data
