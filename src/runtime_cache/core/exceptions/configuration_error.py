"""Runtime cache configuration exception."""

from typing import Any

from .base import RuntimeCacheError


class RuntimeCacheConfigurationError(RuntimeCacheError):
    """Raised when a setting holds a value the library cannot use."""

    def __init__(self, setting: str, value: Any, reason: str):
        self.setting = setting
        self.value = value
        super().__init__(
            f"Invalid runtime cache setting '{setting}'={value!r}: {reason}",
            error_code="CACHE_CONFIGURATION_INVALID",
            details={"setting": setting, "value": repr(value), "reason": reason},
        )
