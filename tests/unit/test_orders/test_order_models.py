#!/usr/bin/env python3
"""Tests for OrderRecord and cell parsing helpers."""

import pytest

from ordermatch.core.money import Money
from ordermatch.orders.models import OrderRecord, SheetFormat, parse_quantity, parse_unit_weight


@pytest.mark.orders
class TestParseHelpers:
    """Test quantity and weight cell parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [("3", 3), ("3개", 3), (" 12 ", 12), ("2.0", 2), ("", 0), (None, 0), ("abc", 0), ("-4", 0)],
    )
    def test_parse_quantity(self, value, expected):
        assert parse_quantity(value) == expected

    @pytest.mark.parametrize("value,expected", [("1.5kg", 1.5), ("200", 200.0), ("", 0.0), (None, 0.0)])
    def test_parse_unit_weight(self, value, expected):
        assert parse_unit_weight(value) == expected


@pytest.mark.orders
class TestOrderRecord:
    """Test OrderRecord construction."""

    def test_from_sheet_row(self):
        row = {
            "판매처": "StoreA",
            "상품번호": "100",
            "상품명": "Widget",
            "옵션명": "Red",
            "수량": "2",
            "결제금액": "12,900원",
            "상품무게": "1.5kg",
            "재고위치": "A-1",
        }

        order = OrderRecord.from_sheet_row(row, SheetFormat.NEW)

        assert order.seller == "StoreA"
        assert order.quantity == 2
        assert order.payment_amount == Money.from_won(12900)
        assert order.settlement_amount == Money.zero()
        assert order.total_weight == 3.0
        assert order.stock_location == "A-1"
        assert order.box_spec == ""
        assert order.sheet_format is SheetFormat.NEW

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValueError):
            OrderRecord(seller="s", product_number="", product_name="", option_name="", quantity=-1)

    def test_has_identity(self):
        assert OrderRecord("s", "", "", "", 1).has_identity
        assert not OrderRecord("", "", "", "", 1).has_identity

    def test_to_dict(self):
        order = OrderRecord("StoreA", "100", "Widget", "Red", 2, payment_amount=Money.from_won(500))
        data = order.to_dict()

        assert data["productNumber"] == "100"
        assert data["paymentAmount"] == 500
        assert data["sheetFormat"] is None

    def test_sheet_format_labels(self):
        assert SheetFormat.COLLECTED.label == "수집된 주문"
        assert SheetFormat.NEW.label == "신규주문"
