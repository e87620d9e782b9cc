"""String calculator core."""

from __future__ import annotations

from strcalc.calculator.service import StringCalculator
from strcalc.core.config import AppSettings
from strcalc.persistence import create_pattern_cache


def create_calculator(settings: AppSettings | None = None) -> StringCalculator:
    """Create a StringCalculator wired to the configured pattern cache."""
    return StringCalculator(cache=create_pattern_cache(settings))


__all__ = ["StringCalculator", "create_calculator"]
