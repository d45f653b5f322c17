#!/usr/bin/env python3
"""
Row Ordering

Matched rows first, then unmatched rows; each partition ascending by display
name under the Unicode Collation Algorithm (so "apple" and "Apple" sort
together and Hangul sorts in dictionary order), not by code point.
"""

from collections.abc import Iterable
from functools import lru_cache

from pyuca import Collator

from .models import AggregatedRow


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loading the collation table takes a moment; do it once
    return Collator()


def collation_key(text: str) -> tuple:
    """Sort key for text under the default Unicode collation."""
    return _collator().sort_key(text)


def sort_rows(rows: Iterable[AggregatedRow]) -> list[AggregatedRow]:
    """
    Order rows for display and export.

    Args:
        rows: Unsorted aggregation output

    Returns:
        New list: matched partition, then unmatched partition, each by display name
    """
    return sorted(rows, key=lambda row: (0 if row.is_matched else 1, collation_key(row.display_name)))
