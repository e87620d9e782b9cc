"""Delimiter specification extracted from a calculator input."""

from __future__ import annotations

import re
from typing import NamedTuple


class DelimiterSpec(NamedTuple):
    """Result of splitting an input into its delimiter header and numeric body.

    Built on every general-path call, so it stays a plain tuple.
    """

    raw_delimiter: str  # unescaped declaration, "," for the default series
    pattern: re.Pattern[str]
    numbers_section: str = ""
