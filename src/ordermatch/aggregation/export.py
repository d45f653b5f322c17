#!/usr/bin/env python3
"""
CSV Export

Writes aggregated rows as a spreadsheet-friendly CSV: every field quoted,
UTF-8 with a byte-order mark so Excel detects the encoding of Korean text.
"""

import csv
import io
import logging
from collections.abc import Iterable
from pathlib import Path

from ..rules.models import RuleGroup
from .metrics import original_quantity
from .models import AggregatedRow

logger = logging.getLogger(__name__)

CSV_HEADERS = ["주문유형", "상품명", "매칭여부", "주문건수", "주문수량", "판매 주문수량"]
MATCHED_LABEL = "매칭"
UNMATCHED_LABEL = "미매칭"
TOTAL_LABEL = "합계"
RESULT_SUFFIX = "_매칭결과"
DEFAULT_BASENAME = "처리결과"


def export_filename(source_name: str | None, suffix: str = RESULT_SUFFIX, default_basename: str = DEFAULT_BASENAME) -> str:
    """
    Output file name for a source sheet: '<stem>_매칭결과.csv'.

    Example:
        export_filename("orders_0501.xlsx") -> "orders_0501_매칭결과.csv"
    """
    stem = Path(source_name).stem if source_name else ""
    return f"{stem or default_basename}{suffix}.csv"


def csv_records(rows: Iterable[AggregatedRow], groups: list[RuleGroup]) -> list[list[str]]:
    """Build the CSV table (header, one line per row, totals line) as text cells."""
    records = [list(CSV_HEADERS)]
    total_orders = 0
    total_original = 0
    total_quantity = 0

    for row in rows:
        label = MATCHED_LABEL if row.is_matched else UNMATCHED_LABEL
        original = original_quantity(row, groups)
        records.append(
            [label, row.display_name, label, str(row.order_count), str(original), str(row.quantity)]
        )
        total_orders += row.order_count
        total_original += original
        total_quantity += row.quantity

    records.append([TOTAL_LABEL, "", "", str(total_orders), str(total_original), str(total_quantity)])
    return records


def render_csv(rows: Iterable[AggregatedRow], groups: list[RuleGroup]) -> str:
    """Render rows as CSV text (without the byte-order mark)."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    records = csv_records(rows, groups)
    writer.writerows(records)
    # No newline after the totals line
    return buffer.getvalue().removesuffix("\n")


def write_csv(rows: Iterable[AggregatedRow], groups: list[RuleGroup], path: str | Path) -> Path:
    """
    Write rows to a CSV file encoded as UTF-8 with BOM.

    Returns:
        The written path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8-sig", newline="") as f:
        f.write(render_csv(rows, groups))
    logger.info("Wrote CSV export to %s", path)
    return path
