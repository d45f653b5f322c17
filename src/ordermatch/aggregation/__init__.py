"""
Aggregation Package

Classifies orders against a rule snapshot and summarizes them into output rows.

Key Components:
- aggregator: the matching-and-accumulation pass
- sorter: deterministic display ordering
- metrics: original-quantity derivation and summary statistics
- export: CSV output
"""

from .aggregator import aggregate, process_orders
from .export import CSV_HEADERS, export_filename, render_csv, write_csv
from .metrics import AggregationSummary, effective_weight, original_quantity, summarize
from .models import AggregatedRow, MatchedRow, UnmatchedRow
from .sorter import sort_rows

__all__ = [
    # Domain models
    "AggregatedRow",
    "MatchedRow",
    "UnmatchedRow",
    # Pass
    "aggregate",
    "process_orders",
    "sort_rows",
    # Metrics
    "AggregationSummary",
    "effective_weight",
    "original_quantity",
    "summarize",
    # Export
    "CSV_HEADERS",
    "export_filename",
    "render_csv",
    "write_csv",
]
