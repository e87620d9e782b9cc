"""Tests for delimiter extraction, tokenization and negative validation."""

from __future__ import annotations

import re

import pytest

from strcalc.calculator.parsing import (
    DEFAULT_PATTERN,
    extract_delimiter,
    parse_int,
    split_numbers,
    validate_no_negatives,
)
from strcalc.core.exceptions import DelimiterFormatError, NegativeNumbersError
from strcalc.persistence.memory_backend import MemoryPatternCache


class TestParseInt:
    @pytest.mark.parametrize(
        ("piece", "expected"),
        [("42", 42), ("-7", -7), ("+5", 5), ("12abc", 12), ("3.9", 3), ("abc", 0), ("-", 0), ("", 0)],
    )
    def test_leading_integer(self, piece, expected):
        assert parse_int(piece) == expected

    def test_non_ascii_digits_are_not_numbers(self):
        assert parse_int("٣") == 0  # Arabic-Indic three

    def test_digit_run_past_conversion_limit(self):
        assert parse_int("9" * 5000) == 10 ** 5000 - 1

    def test_negative_digit_run_past_conversion_limit(self):
        assert parse_int("-1" + "0" * 4500 + "7x") == -(10 ** 4501 + 7)


class TestExtractDelimiter:
    def test_default_series(self):
        spec = extract_delimiter("1,2\n3")
        assert spec.raw_delimiter == ","
        assert spec.pattern is DEFAULT_PATTERN
        assert spec.numbers_section == "1,2\n3"

    def test_custom_header(self):
        spec = extract_delimiter("//;\n1;2")
        assert spec.raw_delimiter == ";"
        assert spec.numbers_section == "1;2"
        assert spec.pattern.split("1;2") == ["1", "2"]

    def test_declaration_is_escaped(self):
        spec = extract_delimiter("//.*\n1.*2")
        assert spec.pattern.pattern == re.escape(".*")
        assert spec.pattern.split("1.*2x3") == ["1", "2x3"]

    def test_body_keeps_later_newlines(self):
        spec = extract_delimiter("//;\n1;2\n3")
        assert spec.numbers_section == "1;2\n3"

    def test_missing_newline(self):
        with pytest.raises(DelimiterFormatError, match="missing newline"):
            extract_delimiter("//;1;2")

    def test_uses_cache(self):
        cache = MemoryPatternCache()
        first = extract_delimiter("//#\n1#2", cache).pattern
        second = extract_delimiter("//#\n3#4", cache).pattern
        assert first is second
        assert "#" in cache

    def test_spec_is_frozen(self):
        spec = extract_delimiter("1,2")
        with pytest.raises(AttributeError):
            spec.raw_delimiter = ";"


class TestSplitNumbers:
    def test_empty_section(self):
        assert split_numbers("", DEFAULT_PATTERN) == []

    def test_trims_and_drops_empty_pieces(self):
        assert split_numbers(" 1 ,, 2 ,\n,3, ", DEFAULT_PATTERN) == [1, 2, 3]

    def test_coerces_non_numeric(self):
        assert split_numbers("1,abc,3", DEFAULT_PATTERN) == [1, 0, 3]

    def test_preserves_order_and_sign(self):
        assert split_numbers("5,-1,4,-9", DEFAULT_PATTERN) == [5, -1, 4, -9]


class TestValidateNoNegatives:
    def test_accepts_non_negative(self):
        validate_no_negatives([0, 1, 2])  # should not raise

    def test_accepts_empty(self):
        validate_no_negatives([])  # should not raise

    def test_lists_negatives_in_order(self):
        with pytest.raises(NegativeNumbersError) as exc_info:
            validate_no_negatives([3, -4, 1, -2])
        assert str(exc_info.value) == "Negative numbers not allowed: -4, -2"
        assert exc_info.value.negatives == [-4, -2]

    def test_lists_oversized_negative_in_full(self):
        huge = -(10 ** 4500 + 3)
        with pytest.raises(NegativeNumbersError) as exc_info:
            validate_no_negatives([1, huge, -2])
        expected = "-1" + "0" * 4499 + "3"
        assert str(exc_info.value) == f"Negative numbers not allowed: {expected}, -2"
