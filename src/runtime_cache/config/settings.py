"""
Runtime cache settings.

Environment-driven options for key encoding, default namespace, statistics
and logging bootstrap, loaded with pydantic-settings.
"""
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions.configuration_error import RuntimeCacheConfigurationError
from ..core.value_objects.key_encoding import KeyEncoding


class RuntimeCacheSettings(BaseSettings):
    """Settings for runtime cache stores and registries."""

    model_config = SettingsConfigDict(
        env_prefix="RUNTIME_CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    key_encoding: KeyEncoding = Field(
        default=KeyEncoding.JOINED,
        description="How raw keys are flattened to strings",
    )
    default_namespace: str = Field(
        default="default",
        description="Shared-cache namespace used when none is given",
    )
    track_stats: bool = Field(
        default=True,
        description="Count hits, misses and computations per store",
    )
    configure_logging: bool = Field(
        default=False,
        description="Run setup_logging() when the package is imported",
    )

    @field_validator("default_namespace")
    @classmethod
    def validate_default_namespace(cls, v: str) -> str:
        """Reject blank namespace names."""
        if not v or not v.strip():
            raise ValueError("default_namespace cannot be empty")
        return v.strip()


@lru_cache()
def get_settings() -> RuntimeCacheSettings:
    """Get cached runtime cache settings.

    Raises:
        RuntimeCacheConfigurationError: If the environment holds an invalid value
    """
    try:
        return RuntimeCacheSettings()
    except ValidationError as e:
        error = e.errors()[0]
        setting = ".".join(str(part) for part in error["loc"])
        raise RuntimeCacheConfigurationError(
            setting, error.get("input"), error["msg"]
        ) from e
