#!/usr/bin/env python3
"""
Order Sheet Loader

Reads an order management export (Excel or CSV) into OrderRecord domain models.

Functions:
- detect_sheet_format: Identify the export layout from its header row
- load_orders: Load an order sheet as a list of OrderRecord
"""

import logging
from pathlib import Path
from typing import Any

import pandas as pd

from .models import REQUIRED_COLUMNS, OrderRecord, SheetFormat

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}
CSV_SUFFIXES = {".csv"}


class OrderSheetError(ValueError):
    """Raised when an order sheet cannot be read or lacks mandatory columns."""

    pass


def detect_sheet_format(headers: list[str]) -> SheetFormat:
    """
    Detect the export layout from the first header cell.

    "No." marks a collected-orders export, "CS상태" a new-orders export.
    Anything else is treated as a new-orders export.
    """
    if headers:
        first = headers[0].strip()
        if first == "No.":
            return SheetFormat.COLLECTED
        if first == "CS상태":
            return SheetFormat.NEW
    return SheetFormat.NEW


def _cell_text(value: Any) -> str:
    """Render one cell as text, dropping the '.0' pandas adds to whole numbers."""
    if value is None:
        return ""
    if isinstance(value, float):
        if value != value:  # NaN
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


def _read_raw_rows(path: Path) -> list[list[str]]:
    """Read the first sheet of a file as rows of cell text, header row included."""
    suffix = path.suffix.lower()
    try:
        if suffix in EXCEL_SUFFIXES:
            df = pd.read_excel(path, sheet_name=0, header=None, dtype=object)
        elif suffix in CSV_SUFFIXES:
            df = pd.read_csv(path, header=None, dtype=str, keep_default_na=False, encoding="utf-8-sig")
        else:
            raise OrderSheetError(f"지원하지 않는 파일 형식입니다: {path.suffix or path.name}")
    except OrderSheetError:
        raise
    except pd.errors.EmptyDataError:
        return []
    except (pd.errors.ParserError, ValueError, OSError, ImportError) as e:
        raise OrderSheetError(f"엑셀 파일 처리 중 오류 발생: {e}") from e

    return [[_cell_text(v) for v in row] for row in df.itertuples(index=False, name=None)]


def rows_to_orders(rows: list[list[str]]) -> list[OrderRecord]:
    """
    Convert raw sheet rows (header first) into OrderRecord objects.

    Args:
        rows: Sheet rows as cell text; rows[0] is the header

    Returns:
        Orders in sheet order. Rows with every mandatory column blank, or with
        all four identity fields empty, are dropped.

    Raises:
        OrderSheetError: If a mandatory column is missing from the header
    """
    if len(rows) < 2:
        return []

    headers = [h.strip() for h in rows[0]]
    sheet_format = detect_sheet_format(headers)
    logger.info("Detected order sheet format: %s", sheet_format.label)

    # A repeated header maps to its last column
    header_map: dict[str, int] = {}
    for index, header in enumerate(headers):
        if header:
            header_map[header] = index

    missing = [h for h in REQUIRED_COLUMNS if h not in header_map]
    if missing:
        raise OrderSheetError(f"필수 컬럼이 누락되었습니다: {', '.join(missing)}")

    orders: list[OrderRecord] = []
    skipped = 0
    for raw in rows[1:]:
        row = {header: (raw[index] if index < len(raw) else "") for header, index in header_map.items()}

        if not any(row[h].strip() for h in REQUIRED_COLUMNS):
            skipped += 1
            continue

        order = OrderRecord.from_sheet_row(row, sheet_format)
        if not order.has_identity:
            skipped += 1
            continue
        orders.append(order)

    if skipped:
        logger.debug("Skipped %d blank order rows", skipped)
    return orders


def load_orders(path: str | Path) -> list[OrderRecord]:
    """
    Load an order sheet as domain models.

    Args:
        path: Path to an .xlsx/.xlsm/.xls or .csv export

    Returns:
        List of OrderRecord, one per non-blank data row

    Raises:
        FileNotFoundError: If the file doesn't exist
        OrderSheetError: If the file can't be parsed or lacks mandatory columns

    Example:
        >>> orders = load_orders("data/2024-05-01_orders.xlsx")
        >>> for order in orders:
        ...     print(f"{order.product_name}: {order.quantity}")
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Order sheet not found: {path}")

    orders = rows_to_orders(_read_raw_rows(path))
    logger.info("Loaded %d orders from %s", len(orders), path.name)
    return orders
