"""Delimiter extraction, tokenization and validation.

Input grammar::

    ""                                   -> no tokens
    "1,2\\n3"                            -> default series, split on comma or newline
    "//<delim>\\n1<delim>2<delim>3"      -> custom series, <delim> taken literally

Pieces are trimmed, empty pieces are skipped and pieces without a leading
integer count as 0.
"""

from __future__ import annotations

import logging
import re

from strcalc.core.exceptions import CacheError, DelimiterFormatError, NegativeNumbersError
from strcalc.core.protocols import IPatternCache
from strcalc.core.types import TokenList
from strcalc.models.delimiter import DelimiterSpec

logger = logging.getLogger(__name__)

HEADER_PREFIX = "//"
DEFAULT_DELIMITER = ","
DEFAULT_PATTERN = re.compile(r"[,\n]")

_LEADING_INT = re.compile(r"([+-]?)([0-9]+)")

# below CPython's int/str conversion digit limit
_DIGIT_CHUNK = 4000


def _digits_to_int(digits: str) -> int:
    if len(digits) <= _DIGIT_CHUNK:
        return int(digits)
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start:start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def parse_int(piece: str) -> int:
    """Parse the leading integer of an already-trimmed piece, 0 if there is none.

    Digit runs of any length are accepted.

    >>> parse_int("42")
    42
    >>> parse_int("12abc")
    12
    >>> parse_int("abc")
    0
    """
    match = _LEADING_INT.match(piece)
    if match is None:
        return 0
    sign, digits = match.groups()
    value = _digits_to_int(digits)
    return -value if sign == "-" else value


def _compile_delimiter(raw_delimiter: str, cache: IPatternCache | None) -> re.Pattern[str]:
    """Return the literal-match pattern for a declaration, memoized in ``cache``.

    A failing cache is logged and bypassed; the freshly compiled pattern is
    always equivalent to a cached one.
    """
    if cache is not None:
        try:
            cached = cache.get(raw_delimiter)
        except CacheError as exc:
            logger.warning("Pattern cache read failed, compiling directly: %s", exc)
            cached = None
        if cached is not None:
            return cached

    logger.debug("Pattern cache miss for delimiter %r", raw_delimiter)
    pattern = re.compile(re.escape(raw_delimiter))

    if cache is not None:
        try:
            cache.put(raw_delimiter, pattern)
        except CacheError as exc:
            logger.warning("Pattern cache write failed: %s", exc)
    return pattern


def extract_delimiter(numbers: str, cache: IPatternCache | None = None) -> DelimiterSpec:
    """Split an input into its delimiter pattern and numeric body.

    Raises:
        DelimiterFormatError: the input starts with ``//`` but has no newline.
    """
    if not numbers.startswith(HEADER_PREFIX):
        return DelimiterSpec(
            raw_delimiter=DEFAULT_DELIMITER,
            pattern=DEFAULT_PATTERN,
            numbers_section=numbers,
        )

    newline_index = numbers.find("\n")
    if newline_index == -1:
        raise DelimiterFormatError()

    raw_delimiter = numbers[len(HEADER_PREFIX):newline_index]
    return DelimiterSpec(
        raw_delimiter=raw_delimiter,
        pattern=_compile_delimiter(raw_delimiter, cache),
        numbers_section=numbers[newline_index + 1:],
    )


def split_numbers(numbers_section: str, pattern: re.Pattern[str]) -> TokenList:
    """Tokenize a numeric body: split, trim, drop empties, coerce to int."""
    if not numbers_section:
        return []

    return [
        parse_int(piece)
        for piece in (raw.strip() for raw in pattern.split(numbers_section))
        if piece
    ]


def validate_no_negatives(tokens: TokenList) -> None:
    """Raise NegativeNumbersError listing every negative token in input order."""
    negatives = [token for token in tokens if token < 0]
    if negatives:
        raise NegativeNumbersError(negatives)
