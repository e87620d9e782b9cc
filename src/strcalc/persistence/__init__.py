"""Pluggable delimiter-pattern caches behind the IPatternCache Protocol."""

from __future__ import annotations

from strcalc.core.config import AppSettings
from strcalc.core.protocols import IPatternCache
from strcalc.persistence.memory_backend import MemoryPatternCache
from strcalc.persistence.redis_backend import RedisPatternCache


def create_pattern_cache(settings: AppSettings | None = None) -> IPatternCache:
    """Create the pattern cache selected by ``settings.cache.backend``."""
    if settings is None:
        settings = AppSettings()

    if settings.cache.backend == "redis":
        return RedisPatternCache(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
            key_prefix=settings.redis.key_prefix,
            ttl=settings.cache.ttl,
        )

    return MemoryPatternCache(max_entries=settings.cache.max_entries)


__all__ = ["MemoryPatternCache", "RedisPatternCache", "create_pattern_cache"]
