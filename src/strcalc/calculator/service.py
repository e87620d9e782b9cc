"""StringCalculator — parse a delimited integer string and reduce it."""

from __future__ import annotations

import logging
from typing import Sequence

from strcalc.calculator.operations import reduce_tokens
from strcalc.calculator.parsing import (
    HEADER_PREFIX,
    extract_delimiter,
    parse_int,
    split_numbers,
    validate_no_negatives,
)
from strcalc.core.config import DEFAULT_CACHE_MAX_ENTRIES
from strcalc.core.exceptions import NegativeNumbersError
from strcalc.core.protocols import IPatternCache
from strcalc.models.operation import operation_for_symbol
from strcalc.persistence.memory_backend import MemoryPatternCache

logger = logging.getLogger(__name__)


class StringCalculator:
    """ICalculator implementation.

    The delimiter-pattern cache is injected at construction time so its
    lifetime and sharing are owned by the caller. Without one, each
    calculator gets its own in-memory cache bounded at
    ``DEFAULT_CACHE_MAX_ENTRIES``.
    """

    def __init__(self, *, cache: IPatternCache | None = None) -> None:
        self._cache = cache if cache is not None else MemoryPatternCache(
            max_entries=DEFAULT_CACHE_MAX_ENTRIES,
        )

    @property
    def cache(self) -> IPatternCache:
        return self._cache

    def calculate(self, numbers: str | None = None) -> int:
        """Reduce ``numbers`` to a single integer.

        Raises:
            DelimiterFormatError: custom header without a terminating newline.
            NegativeNumbersError: any token is negative.
        """
        if not numbers:
            return 0

        if "," not in numbers and "\n" not in numbers and not numbers.startswith(HEADER_PREFIX):
            return self._calculate_single(numbers)

        spec = extract_delimiter(numbers, self._cache)
        operation = operation_for_symbol(spec.raw_delimiter)
        tokens = split_numbers(spec.numbers_section, spec.pattern)
        validate_no_negatives(tokens)
        return reduce_tokens(operation, tokens)

    def batch_calculate(self, inputs: Sequence[str]) -> list[int]:
        """Calculate each input in order. The first failure propagates."""
        logger.debug("Batch calculate: %d inputs", len(inputs))
        return [self.calculate(numbers) for numbers in inputs]

    @staticmethod
    def _calculate_single(numbers: str) -> int:
        value = parse_int(numbers.strip())
        if value < 0:
            raise NegativeNumbersError([value])
        return value
