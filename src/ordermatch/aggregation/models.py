#!/usr/bin/env python3
"""
Aggregation Domain Models

Summary rows produced by one aggregation pass. Rows are recomputed from scratch
on every pass and never persisted.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..core.money import Money
from ..orders.models import OrderRecord

UNMATCHED_PLACEHOLDER = "정보부족"


@dataclass(kw_only=True)
class AggregatedRow(ABC):
    """
    Totals shared by matched and unmatched rows.

    total_weight is the accumulated mass (unit weight times quantity).
    """

    display_name: str
    order_count: int = 0
    payment_amount: Money = Money.zero()
    settlement_amount: Money = Money.zero()
    purchase_amount: Money = Money.zero()
    total_weight: float = 0.0
    stock_location: str = ""
    box_spec: str = ""

    @property
    @abstractmethod
    def is_matched(self) -> bool:
        """True if the row was produced by a rule group."""
        ...

    @property
    @abstractmethod
    def quantity(self) -> int:
        """Quantity column: weighted for matched rows, raw for unmatched rows."""
        ...

    def add_amounts(self, order: OrderRecord) -> None:
        """Fold one order's count, money and mass into the totals."""
        self.order_count += 1
        self.payment_amount = self.payment_amount + order.payment_amount
        self.settlement_amount = self.settlement_amount + order.settlement_amount
        self.purchase_amount = self.purchase_amount + order.purchase_amount
        self.total_weight += order.total_weight


@dataclass(kw_only=True)
class MatchedRow(AggregatedRow):
    """
    All orders whose rule group has a given target name.

    representative_identifier is the identifier of the first contributing
    order; it picks the weight used to derive the original quantity.
    """

    rule_group_id: str
    weighted_quantity: int = 0
    representative_identifier: str = ""
    stock: int = 0

    @property
    def is_matched(self) -> bool:
        return True

    @property
    def quantity(self) -> int:
        return self.weighted_quantity


@dataclass(kw_only=True)
class UnmatchedRow(AggregatedRow):
    """All orders sharing one identifier that no rule group claims."""

    identifier: str
    raw_quantity: int = 0
    representative_order: OrderRecord | None = None

    @property
    def is_matched(self) -> bool:
        return False

    @property
    def quantity(self) -> int:
        return self.raw_quantity


def unmatched_display_name(order: OrderRecord) -> str:
    """'seller / product name / option name' with empty parts dropped."""
    parts = [order.seller, order.product_name, order.option_name]
    return " / ".join(p for p in parts if p) or UNMATCHED_PLACEHOLDER
