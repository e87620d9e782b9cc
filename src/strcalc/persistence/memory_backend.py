"""In-process pattern cache — dict-backed, safe to share across threads."""

from __future__ import annotations

import re
import threading


class MemoryPatternCache:
    """Dict-backed IPatternCache.

    Reads are plain dict lookups. Insertion takes a lock so that eviction and
    the size bound stay consistent under concurrent callers.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._max_entries = max_entries
        self._patterns: dict[str, re.Pattern[str]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, delimiter: object) -> bool:
        return delimiter in self._patterns

    def get(self, delimiter: str) -> re.Pattern[str] | None:
        return self._patterns.get(delimiter)

    def put(self, delimiter: str, pattern: re.Pattern[str]) -> None:
        with self._lock:
            if delimiter in self._patterns:
                return
            if self._max_entries is not None and len(self._patterns) >= self._max_entries:
                # oldest first; dicts keep insertion order
                self._patterns.pop(next(iter(self._patterns)))
            self._patterns[delimiter] = pattern

    def clear(self) -> None:
        with self._lock:
            self._patterns.clear()
