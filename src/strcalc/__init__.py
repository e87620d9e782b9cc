"""strcalc — delimited integer string calculator."""

from __future__ import annotations

from strcalc.calculator import StringCalculator, create_calculator
from strcalc.core.exceptions import (
    CacheError,
    DelimiterFormatError,
    NegativeNumbersError,
    StrCalcError,
)
from strcalc.models.operation import Operation

__version__ = "0.1.0"

__all__ = [
    "CacheError",
    "DelimiterFormatError",
    "NegativeNumbersError",
    "Operation",
    "StrCalcError",
    "StringCalculator",
    "create_calculator",
]
