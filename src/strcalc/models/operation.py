"""Reduction operations and the header-symbol lookup."""

from __future__ import annotations

from enum import StrEnum


class Operation(StrEnum):
    ADDITION = "addition"
    MULTIPLICATION = "multiplication"


_SYMBOLS: dict[str, Operation] = {
    "+": Operation.ADDITION,
    "*": Operation.MULTIPLICATION,
}


def operation_for_symbol(symbol: str) -> Operation:
    """Map a raw delimiter declaration to its operation.

    Total over all strings: anything other than ``*`` (including the implicit
    ``,`` of the default series) selects addition.
    """
    return _SYMBOLS.get(symbol, Operation.ADDITION)
