"""Protocol interfaces for strcalc abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

import re
from typing import Protocol, Sequence, runtime_checkable


# ---------------------------------------------------------------------------
# Pattern Cache
# ---------------------------------------------------------------------------

@runtime_checkable
class IPatternCache(Protocol):
    """Memoizes compiled delimiter patterns keyed by raw declaration."""

    def get(self, delimiter: str) -> re.Pattern[str] | None: ...

    def put(self, delimiter: str, pattern: re.Pattern[str]) -> None: ...

    def clear(self) -> None: ...


# ---------------------------------------------------------------------------
# Calculator
# ---------------------------------------------------------------------------

@runtime_checkable
class ICalculator(Protocol):
    """Parses delimited integer strings and reduces them to a single result."""

    def calculate(self, numbers: str | None = None) -> int: ...

    def batch_calculate(self, inputs: Sequence[str]) -> list[int]: ...
