"""Redis pattern cache implementing IPatternCache.

Only the escaped pattern source is stored; patterns are recompiled on read,
which lets several API workers share one cache.
"""

from __future__ import annotations

import re

import redis

from strcalc.core.exceptions import CacheError


class RedisPatternCache:
    """Shared IPatternCache backed by Redis."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        key_prefix: str = "strcalc:delimiter:",
        ttl: int = 3600,
    ) -> None:
        self._host = host
        self._port = port
        self._db = db
        self._key_prefix = key_prefix
        self._ttl = ttl
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=True,
        )

    def _key(self, delimiter: str) -> str:
        return f"{self._key_prefix}{delimiter}"

    def get(self, delimiter: str) -> re.Pattern[str] | None:
        try:
            source = self._client.get(self._key(delimiter))
        except Exception as exc:
            raise CacheError(f"Redis GET failed for delimiter={delimiter!r}: {exc}") from exc
        if source is None:
            return None
        return re.compile(source)

    def put(self, delimiter: str, pattern: re.Pattern[str]) -> None:
        try:
            self._client.setex(self._key(delimiter), self._ttl, pattern.pattern)
        except Exception as exc:
            raise CacheError(f"Redis SETEX failed for delimiter={delimiter!r}: {exc}") from exc

    def clear(self) -> None:
        try:
            keys = list(self._client.scan_iter(match=f"{self._key_prefix}*"))
            if keys:
                self._client.delete(*keys)
        except Exception as exc:
            raise CacheError(f"Redis clear failed for prefix={self._key_prefix!r}: {exc}") from exc
