#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

Won (KRW) handling for order sheet amounts. The won has no minor unit, so all
amounts are plain integers and every calculation stays in integer arithmetic.

Sheet cells arrive as free text ("12,900원", "-3,000", "₩ 45000"), so parsing is
deliberately lenient: everything except digits and the minus sign is discarded
and unparseable cells count as zero.
"""

import re
from typing import Any

_NON_AMOUNT_CHARS = re.compile(r"[^\d-]")


def parse_won_amount(value: Any) -> int:
    """
    Parse a sheet cell into an integer won amount.

    Args:
        value: Cell text or number, e.g. "12,900원", 12900, 12900.0

    Returns:
        Integer won, 0 for empty or invalid input

    Examples:
        parse_won_amount("12,900원") -> 12900
        parse_won_amount("-3,000") -> -3000
        parse_won_amount("무료") -> 0
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value:  # NaN
            return 0
        return int(value)

    cleaned = _NON_AMOUNT_CHARS.sub("", str(value))
    match = re.match(r"-?\d+", cleaned)
    if not match:
        return 0
    return int(match.group(0))


def format_won(won: int) -> str:
    """
    Format an integer won amount with thousands separators.

    Example:
        format_won(1234500) -> "₩1,234,500"
        format_won(-500) -> "-₩500"
    """
    sign = "-" if won < 0 else ""
    return f"{sign}₩{abs(int(won)):,}"

