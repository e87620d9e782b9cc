"""Reducers for each Operation."""

from __future__ import annotations

import math
from typing import Callable

from strcalc.core.types import TokenList
from strcalc.models.operation import Operation


def add_tokens(tokens: TokenList) -> int:
    return sum(tokens)


def multiply_tokens(tokens: TokenList) -> int:
    """Product of the tokens; 0 for an empty list or when any token is 0."""
    if not tokens or 0 in tokens:
        return 0
    return math.prod(tokens)


REDUCERS: dict[Operation, Callable[[TokenList], int]] = {
    Operation.ADDITION: add_tokens,
    Operation.MULTIPLICATION: multiply_tokens,
}


def reduce_tokens(operation: Operation, tokens: TokenList) -> int:
    return REDUCERS[operation](tokens)
