#!/usr/bin/env python3
"""
Derived Row Metrics

The original (unweighted) quantity of a matched row is derived by dividing its
weighted quantity by one representative weight. This is exact only when every
order in the row resolved to the same weight; rows mixing weights get an
approximation.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from ..core.money import Money
from ..rules.editor import find_group_for_row
from ..rules.models import RuleGroup
from ..rules.weights import DEFAULT_WEIGHT, resolve_weight
from .models import AggregatedRow, MatchedRow


def round_half_up_div(numerator: int, denominator: int) -> int:
    """Integer division rounding .5 upward, for non-negative numerators."""
    if denominator <= 0:
        raise ValueError(f"Denominator must be positive, got {denominator}")
    return (2 * numerator + denominator) // (2 * denominator)


def effective_weight(row: AggregatedRow, groups: list[RuleGroup]) -> int:
    """
    Representative weight of a row.

    Unmatched rows use 1. Matched rows resolve the weight of their first
    contributing identifier in their rule group; 1 when the group is gone.
    """
    if not isinstance(row, MatchedRow):
        return DEFAULT_WEIGHT

    group = find_group_for_row(groups, row)
    if group is None:
        return DEFAULT_WEIGHT
    return resolve_weight(group, row.representative_identifier)


def original_quantity(row: AggregatedRow, groups: list[RuleGroup]) -> int:
    """Quantity before weighting: round(weighted / effective weight) for matched rows."""
    if not isinstance(row, MatchedRow):
        return row.quantity
    return round_half_up_div(row.weighted_quantity, effective_weight(row, groups))


@dataclass
class AggregationSummary:
    """Headline numbers for one aggregation result."""

    item_count: int
    matched_count: int
    unmatched_count: int
    total_orders: int
    total_quantity: int
    total_original_quantity: int
    payment_amount: Money
    settlement_amount: Money
    purchase_amount: Money

    @property
    def match_rate(self) -> float:
        """Share of rows that matched a rule."""
        return self.matched_count / self.item_count if self.item_count else 0.0


def summarize(rows: Iterable[AggregatedRow], groups: list[RuleGroup]) -> AggregationSummary:
    """Compute summary statistics over aggregated rows."""
    rows = list(rows)
    matched_count = sum(1 for row in rows if row.is_matched)

    payment = Money.zero()
    settlement = Money.zero()
    purchase = Money.zero()
    for row in rows:
        payment = payment + row.payment_amount
        settlement = settlement + row.settlement_amount
        purchase = purchase + row.purchase_amount

    return AggregationSummary(
        item_count=len(rows),
        matched_count=matched_count,
        unmatched_count=len(rows) - matched_count,
        total_orders=sum(row.order_count for row in rows),
        total_quantity=sum(row.quantity for row in rows),
        total_original_quantity=sum(original_quantity(row, groups) for row in rows),
        payment_amount=payment,
        settlement_amount=settlement,
        purchase_amount=purchase,
    )
