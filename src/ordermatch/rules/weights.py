#!/usr/bin/env python3
"""
Quantity Weight Resolution

A matched order's quantity is multiplied by its weight: the per-identifier
override when one is set, otherwise the group default, otherwise 1.
"""

from typing import Any

from .models import RuleGroup

DEFAULT_WEIGHT = 1


def as_positive_weight(value: Any) -> int | None:
    """
    Return value as a positive integer weight, or None if it isn't one.

    Whole floats (2.0, as produced by some JSON writers) are accepted.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 1 else None
    if isinstance(value, float) and value.is_integer() and value >= 1:
        return int(value)
    return None


def resolve_weight(group: RuleGroup, identifier: str) -> int:
    """
    Resolve the effective weight of identifier within group.

    Never raises: invalid stored values fall through to the next candidate.

    Args:
        group: The matched rule group
        identifier: The order identifier that matched

    Returns:
        Positive integer weight
    """
    override = as_positive_weight(group.override_for(identifier))
    if override is not None:
        return override

    default = as_positive_weight(group.default_weight)
    if default is not None:
        return default

    return DEFAULT_WEIGHT
