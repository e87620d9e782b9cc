"""strcalc exception hierarchy."""

from __future__ import annotations

_DIGIT_CHUNK = 4000
_CHUNK_BASE = 10 ** _DIGIT_CHUNK


def format_int(value: int) -> str:
    """str(value) without CPython's int/str conversion digit limit."""
    magnitude = abs(value)
    if magnitude < _CHUNK_BASE:
        return str(value)
    parts: list[str] = []
    while magnitude >= _CHUNK_BASE:
        magnitude, low = divmod(magnitude, _CHUNK_BASE)
        parts.append(str(low).zfill(_DIGIT_CHUNK))
    parts.append(str(magnitude))
    sign = "-" if value < 0 else ""
    return sign + "".join(reversed(parts))


class StrCalcError(Exception):
    """Base exception for all strcalc errors."""


class DelimiterFormatError(StrCalcError):
    """Custom delimiter header is not terminated by a newline."""

    def __init__(self, message: str = "missing newline after delimiter declaration") -> None:
        super().__init__(f"Invalid delimiter format: {message}")


class NegativeNumbersError(StrCalcError):
    """One or more negative tokens were found in the input."""

    def __init__(self, negatives: list[int]) -> None:
        self.negatives = list(negatives)
        joined = ", ".join(format_int(n) for n in self.negatives)
        super().__init__(f"Negative numbers not allowed: {joined}")


class CacheError(StrCalcError):
    """Pattern cache operation failed."""
