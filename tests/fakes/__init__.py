"""Shared test doubles — memory cache plus a cache that always fails."""

from __future__ import annotations

import re

from strcalc.core.exceptions import CacheError
from strcalc.persistence.memory_backend import MemoryPatternCache


class FailingPatternCache:
    """IPatternCache whose every operation raises CacheError."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def get(self, delimiter: str) -> re.Pattern[str] | None:
        self.calls.append("get")
        raise CacheError("cache unavailable")

    def put(self, delimiter: str, pattern: re.Pattern[str]) -> None:
        self.calls.append("put")
        raise CacheError("cache unavailable")

    def clear(self) -> None:
        raise CacheError("cache unavailable")


__all__ = ["FailingPatternCache", "MemoryPatternCache"]
