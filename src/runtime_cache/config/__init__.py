"""Configuration module for runtime-cache.

Pydantic-backed settings and environment-driven logging setup.
"""

from .logging_config import (
    LogFormat,
    LogLevel,
    LogVerbosity,
    LoggingConfig,
    bootstrap_logging,
    setup_logging,
)
from .settings import RuntimeCacheSettings, get_settings

__all__ = [
    # Settings
    "RuntimeCacheSettings",
    "get_settings",

    # Logging
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "LoggingConfig",
    "bootstrap_logging",
    "setup_logging",
]
