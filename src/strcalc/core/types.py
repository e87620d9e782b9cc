"""Type aliases used across strcalc."""

from __future__ import annotations

Token = int
TokenList = list[Token]
