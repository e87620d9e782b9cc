"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_CACHE_MAX_ENTRIES = 1024


class CacheConfig(BaseSettings):
    """Delimiter-pattern cache configuration."""

    model_config = {"env_prefix": "STRCALC_CACHE_"}

    backend: Literal["memory", "redis"] = "memory"
    max_entries: int | None = DEFAULT_CACHE_MAX_ENTRIES  # None = unbounded (memory backend only)
    ttl: int = 3600  # seconds, redis backend only


class RedisConfig(BaseSettings):
    """Redis connection for the shared pattern cache."""

    model_config = {"env_prefix": "STRCALC_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    key_prefix: str = "strcalc:delimiter:"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "STRCALC_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    cache: CacheConfig = Field(default_factory=CacheConfig)
    redis: RedisConfig = Field(default_factory=RedisConfig)
