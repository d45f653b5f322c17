#!/usr/bin/env python3
"""
Order Domain Models

Type-safe model for one row of a marketplace order sheet. Both supported sheet
layouts ("collected orders" and "new orders") share the same Korean column
names for the fields used here.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.money import Money

# Mandatory columns: seller, product number, product name, option name, quantity
COL_SELLER = "판매처"
COL_PRODUCT_NUMBER = "상품번호"
COL_PRODUCT_NAME = "상품명"
COL_OPTION_NAME = "옵션명"
COL_QUANTITY = "수량"

# Optional columns
COL_PAYMENT_AMOUNT = "결제금액"
COL_SETTLEMENT_AMOUNT = "정산예정금액"
COL_PURCHASE_AMOUNT = "사입금액"
COL_UNIT_WEIGHT = "상품무게"
COL_STOCK_LOCATION = "재고위치"
COL_BOX_SPEC = "박스규격"

REQUIRED_COLUMNS = (COL_SELLER, COL_PRODUCT_NUMBER, COL_PRODUCT_NAME, COL_OPTION_NAME, COL_QUANTITY)


class SheetFormat(Enum):
    """Order sheet layouts exported by the order management tool."""

    COLLECTED = "collected"  # 수집된 주문, first header is "No."
    NEW = "new"  # 신규주문, first header is "CS상태"

    @property
    def label(self) -> str:
        return "수집된 주문" if self is SheetFormat.COLLECTED else "신규주문"


def parse_quantity(value: Any) -> int:
    """
    Parse the leading integer of a quantity cell.

    "3" -> 3, "3개" -> 3, "2.0" -> 2, "" -> 0. Negative quantities clamp to 0.
    """
    if value is None:
        return 0
    match = re.match(r"\s*([+-]?\d+)", str(value))
    if not match:
        return 0
    return max(0, int(match.group(1)))


def parse_unit_weight(value: Any) -> float:
    """
    Parse a unit weight cell such as "1.5kg" into a float.

    Everything except digits and dots is dropped first; unparseable cells are 0.
    """
    if value is None:
        return 0.0
    cleaned = re.sub(r"[^\d.]", "", str(value))
    match = re.match(r"\d*\.?\d+", cleaned)
    if not match:
        return 0.0
    return float(match.group(0))


@dataclass(frozen=True)
class OrderRecord:
    """
    Single order line from an order sheet.

    The four identity fields (seller, product number, product name, option
    name) decide which rule an order matches; quantity and the remaining
    fields are only accumulated.
    """

    # Identity fields
    seller: str
    product_number: str
    product_name: str
    option_name: str

    quantity: int

    # Optional aggregated fields
    payment_amount: Money = Money.zero()
    settlement_amount: Money = Money.zero()
    purchase_amount: Money = Money.zero()
    unit_weight: float = 0.0
    stock_location: str = ""
    box_spec: str = ""

    sheet_format: SheetFormat | None = None

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError(f"Quantity must be non-negative, got {self.quantity}")

    @classmethod
    def from_sheet_row(cls, row: dict[str, str], sheet_format: SheetFormat | None = None) -> "OrderRecord":
        """
        Create OrderRecord from a header -> cell text mapping.

        Args:
            row: One sheet row keyed by trimmed header name
            sheet_format: Detected sheet layout, kept for display

        Returns:
            OrderRecord instance

        Note:
            Missing optional columns default to zero / empty string.
        """
        return cls(
            seller=str(row.get(COL_SELLER, "") or ""),
            product_number=str(row.get(COL_PRODUCT_NUMBER, "") or ""),
            product_name=str(row.get(COL_PRODUCT_NAME, "") or ""),
            option_name=str(row.get(COL_OPTION_NAME, "") or ""),
            quantity=parse_quantity(row.get(COL_QUANTITY, "")),
            payment_amount=Money.parse(row.get(COL_PAYMENT_AMOUNT, "")),
            settlement_amount=Money.parse(row.get(COL_SETTLEMENT_AMOUNT, "")),
            purchase_amount=Money.parse(row.get(COL_PURCHASE_AMOUNT, "")),
            unit_weight=parse_unit_weight(row.get(COL_UNIT_WEIGHT, "")),
            stock_location=str(row.get(COL_STOCK_LOCATION, "") or ""),
            box_spec=str(row.get(COL_BOX_SPEC, "") or ""),
            sheet_format=sheet_format,
        )

    @property
    def has_identity(self) -> bool:
        """True if at least one identity field is non-empty."""
        return bool(self.seller or self.product_number or self.product_name or self.option_name)

    @property
    def total_weight(self) -> float:
        """Mass of this line: unit weight times quantity."""
        return self.unit_weight * self.quantity

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "seller": self.seller,
            "productNumber": self.product_number,
            "productName": self.product_name,
            "optionName": self.option_name,
            "quantity": self.quantity,
            "paymentAmount": self.payment_amount.to_won(),
            "settlementAmount": self.settlement_amount.to_won(),
            "purchaseAmount": self.purchase_amount.to_won(),
            "weight": self.unit_weight,
            "stockLocation": self.stock_location,
            "boxSpec": self.box_spec,
            "sheetFormat": self.sheet_format.value if self.sheet_format else None,
        }
