#!/usr/bin/env python3
"""
Synthetic Test Data Generators

Builds anonymized orders and order sheets for unit and integration tests.
Sellers, products and amounts are all made up.
"""

from pathlib import Path
from typing import Any

import pandas as pd

from ordermatch.core.money import Money
from ordermatch.orders.models import OrderRecord

# Header of a "new orders" export (first column CS상태)
NEW_ORDER_HEADERS = [
    "CS상태",
    "판매처",
    "상품번호",
    "상품명",
    "옵션명",
    "수량",
    "결제금액",
    "정산예정금액",
    "사입금액",
    "상품무게",
    "재고위치",
    "박스규격",
]

# Header of a "collected orders" export (first column No.)
COLLECTED_ORDER_HEADERS = ["No.", "판매처", "상품번호", "상품명", "옵션명", "수량", "결제금액"]


def make_order(
    seller: str = "StoreA",
    product_number: str = "100",
    product_name: str = "Widget",
    option_name: str = "Red",
    quantity: int = 1,
    payment: int = 0,
    **kwargs: Any,
) -> OrderRecord:
    """Build an OrderRecord with sensible synthetic defaults."""
    return OrderRecord(
        seller=seller,
        product_number=product_number,
        product_name=product_name,
        option_name=option_name,
        quantity=quantity,
        payment_amount=Money.from_won(payment),
        **kwargs,
    )


def synthetic_sheet_rows() -> list[dict[str, str]]:
    """A small new-orders sheet: two widget lines, one gadget line, one blank row."""
    return [
        {
            "CS상태": "",
            "판매처": "StoreA",
            "상품번호": "100",
            "상품명": "Widget",
            "옵션명": "Red",
            "수량": "2",
            "결제금액": "12,900원",
            "정산예정금액": "11,000",
            "사입금액": "5,000",
            "상품무게": "1.5kg",
            "재고위치": "A-1",
            "박스규격": "S",
        },
        {
            "CS상태": "",
            "판매처": " storea ",
            "상품번호": "100",
            "상품명": "WIDGET",
            "옵션명": "red",
            "수량": "3",
            "결제금액": "19,350원",
            "정산예정금액": "16,500",
            "사입금액": "7,500",
            "상품무게": "1.5kg",
            "재고위치": "",
            "박스규격": "",
        },
        {
            "CS상태": "",
            "판매처": "StoreB",
            "상품번호": "200",
            "상품명": "Gadget",
            "옵션명": "",
            "수량": "1",
            "결제금액": "8,000",
            "정산예정금액": "7,000",
            "사입금액": "3,000",
            "상품무게": "",
            "재고위치": "B-2",
            "박스규격": "M",
        },
        {header: "" for header in NEW_ORDER_HEADERS},
    ]


def write_order_sheet(path: Path, rows: list[dict[str, str]] | None = None, headers: list[str] | None = None) -> Path:
    """
    Write rows as an order sheet; the suffix of path picks xlsx or csv.

    Returns:
        The written path
    """
    rows = synthetic_sheet_rows() if rows is None else rows
    df = pd.DataFrame(rows, columns=headers or NEW_ORDER_HEADERS, dtype=str)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".csv":
        df.to_csv(path, index=False, encoding="utf-8-sig")
    else:
        df.to_excel(path, index=False, engine="openpyxl")
    return path
