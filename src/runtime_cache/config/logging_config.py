"""Centralized logging configuration for runtime-cache.

Environment-based control over verbosity, level and format, applied with
logging.config.dictConfig.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict

from ..core.exceptions.configuration_error import RuntimeCacheConfigurationError
from .settings import get_settings


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging, including cache misses


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level, falling back to WARNING."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


class LoggingConfig:
    """Centralized logging configuration manager."""

    PACKAGE_LOGGER = "runtime_cache"

    @classmethod
    def build(cls) -> Dict[str, Any]:
        """Build a dictConfig mapping from environment variables.

        LOG_VERBOSITY wins over LOG_LEVEL when both are set.
        """
        log_level = os.getenv("LOG_LEVEL", "").upper()
        log_verbosity = os.getenv("LOG_VERBOSITY", "")
        log_format = os.getenv("LOG_FORMAT", LogFormat.SIMPLE.value).lower()

        if log_verbosity:
            effective_log_level = get_log_level_from_verbosity(log_verbosity)
        elif log_level in LogLevel.__members__:
            effective_log_level = log_level
        else:
            effective_log_level = LogLevel.WARNING.value

        try:
            format_string = FORMAT_STRINGS[LogFormat(log_format)]
        except ValueError:
            format_string = FORMAT_STRINGS[LogFormat.SIMPLE]

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                cls.PACKAGE_LOGGER: {
                    "level": effective_log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

    @classmethod
    def configure(cls) -> None:
        """Configure package logging based on environment variables."""
        config = cls.build()
        logging.config.dictConfig(config)

        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: level={config['loggers'][cls.PACKAGE_LOGGER]['level']}"
        )

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module.

        Args:
            module_name: Name of the module
            level: Log level to set
        """
        logging.getLogger(module_name).setLevel(getattr(logging, level.upper()))

    @classmethod
    def silence_module(cls, module_name: str) -> None:
        """Silence all logging from a module."""
        cls.set_module_level(module_name, "CRITICAL")


def setup_logging() -> None:
    """Setup logging configuration from environment variables.

    Only touches the ``runtime_cache`` logger tree; the host application's
    root logger is left alone.
    """
    LoggingConfig.configure()



def bootstrap_logging() -> bool:
    """Run setup_logging() when settings ask for it.

    Called on package import. Invalid settings do not break the import;
    they are reported here and raised again by the first get_settings() call.

    Returns:
        True if logging was configured
    """
    try:
        enabled = get_settings().configure_logging
    except RuntimeCacheConfigurationError as e:
        logging.getLogger(LoggingConfig.PACKAGE_LOGGER).warning(
            f"Skipping runtime cache logging setup: {e.message}"
        )
        return False

    if enabled:
        setup_logging()
    return enabled
