"""
Order Sheet Package

Reading marketplace order exports and deriving the identifiers used for rule
matching.

Key Components:
- models: OrderRecord and cell parsing helpers
- identifier: canonical identifier normalization
- loader: Excel/CSV order sheet reading
"""

from .identifier import identifier_of, make_identifier, normalize_field, split_identifier
from .loader import OrderSheetError, detect_sheet_format, load_orders, rows_to_orders
from .models import REQUIRED_COLUMNS, OrderRecord, SheetFormat

__all__ = [
    # Domain models
    "OrderRecord",
    "SheetFormat",
    "REQUIRED_COLUMNS",
    # Identifiers
    "identifier_of",
    "make_identifier",
    "normalize_field",
    "split_identifier",
    # Loading
    "OrderSheetError",
    "detect_sheet_format",
    "load_orders",
    "rows_to_orders",
]
