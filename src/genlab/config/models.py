"""Configuration models using Pydantic."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class CacheConfig(BaseModel):
    """Defaults for FunctionCache instances built by the CLI.

    maxsize is None for the unbounded table. Setting it opts into LRU
    eviction.
    """

    default_ttl_seconds: float = 5.0
    maxsize: int | None = None

    @field_validator("maxsize")
    @classmethod
    def _check_maxsize(cls, value: int | None) -> int | None:
        if value is not None and value < 1:
            raise ValueError("maxsize must be a positive integer")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class ConfigError(Exception):
    """Configuration error."""

    pass


class GenlabConfig(BaseModel):
    """Root configuration."""

    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def cache_kwargs(self) -> dict[str, int]:
        """Constructor kwargs for FunctionCache derived from this config."""
        if self.cache.maxsize is None:
            return {}
        return {"maxsize": self.cache.maxsize}
