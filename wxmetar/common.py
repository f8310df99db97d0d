"""
Common helper methods used in various modules.
"""

from __future__ import annotations

import re
from typing import Any

_WHITESPACE = re.compile(r"\s+")


def normalize_report(report: str) -> str:
    """
    Trims and uppercases a raw report and collapses all runs of whitespace
    (including newlines from copy/pasted reports) into single spaces.
    """
    return _WHITESPACE.sub(" ", report.strip().upper())


def tokenize_report(report: str) -> list[str]:
    """
    Splits a raw METAR/SPECI string into its whitespace delimited groups.
    Decoding is case insensitive so every token is returned upper cased.

    >>> tokenize_report("  metar KJFK\\n121856Z ")
    ['METAR', 'KJFK', '121856Z']
    >>> tokenize_report("   ")
    []
    """
    normalized = normalize_report(report)
    if len(normalized) == 0:
        return []
    return normalized.split(" ")


def thousands(value: int) -> str:
    """Formats an integer with comma thousands separators, ie 25000 -> '25,000'."""
    return f"{value:,}"


def quotify(value: Any) -> str:
    """
    Returns str(value), if input value is already a string we wrap it in single
    quotes.
    """
    return f"'{value}'" if isinstance(value, str) else str(value)
