#!/usr/bin/env python3
"""
Order Aggregation

Folds a snapshot of orders into matched and unmatched summary rows.

Matched rows are keyed by the rule group's target name (not its id), so two
groups sharing a name merge into one row. Unmatched rows are keyed by the
order identifier and always use weight 1.
"""

import logging
from collections.abc import Iterable

from ..orders.identifier import identifier_of
from ..orders.models import OrderRecord
from ..rules.index import RuleIndex
from ..rules.models import RuleGroup
from ..rules.weights import resolve_weight
from .models import AggregatedRow, MatchedRow, UnmatchedRow, unmatched_display_name
from .sorter import sort_rows

logger = logging.getLogger(__name__)


def aggregate(orders: Iterable[OrderRecord], groups: Iterable[RuleGroup]) -> list[AggregatedRow]:
    """
    Aggregate orders against a rule group snapshot.

    Args:
        orders: Orders in sheet order
        groups: Rule groups in stored order; treated as read-only

    Returns:
        One row per target name (matched) and per identifier (unmatched),
        in first-seen order. Use sort_rows for display order.
    """
    index = RuleIndex(groups)
    matched: dict[str, MatchedRow] = {}
    unmatched: dict[str, UnmatchedRow] = {}
    order_total = 0

    for order in orders:
        order_total += 1
        identifier = identifier_of(order)
        match = index.find(identifier)

        if match is not None:
            group, matched_id = match
            weight = resolve_weight(group, matched_id)

            row = matched.get(group.target_name)
            if row is None:
                row = MatchedRow(
                    display_name=group.target_name,
                    rule_group_id=group.id,
                    representative_identifier=matched_id,
                    stock=group.stock,
                )
                matched[group.target_name] = row

            row.weighted_quantity += order.quantity * weight
            row.add_amounts(order)
            if not row.stock_location and order.stock_location:
                row.stock_location = order.stock_location
            if not row.box_spec and order.box_spec:
                row.box_spec = order.box_spec
        else:
            row = unmatched.get(identifier)
            if row is None:
                row = UnmatchedRow(
                    display_name=unmatched_display_name(order),
                    identifier=identifier,
                    representative_order=order,
                    stock_location=order.stock_location,
                    box_spec=order.box_spec,
                )
                unmatched[identifier] = row

            row.raw_quantity += order.quantity
            row.add_amounts(order)

    logger.debug(
        "Aggregated %d orders into %d matched and %d unmatched rows",
        order_total,
        len(matched),
        len(unmatched),
    )
    return [*matched.values(), *unmatched.values()]


def process_orders(orders: Iterable[OrderRecord], groups: Iterable[RuleGroup]) -> list[AggregatedRow]:
    """Aggregate and sort in one call: the full pass used by the session and CLI."""
    return sort_rows(aggregate(orders, groups))
