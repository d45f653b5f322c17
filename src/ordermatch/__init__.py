"""
Order Match - Rule-Based Order Sheet Aggregation

Classifies marketplace order rows against user-defined matching rules and
summarizes them into per-product rows with quantity weighting.

Key Features:
- Case- and whitespace-insensitive order identifiers
- Rule groups with default and per-identifier quantity weights
- Matched/unmatched aggregation with deterministic ordering
- CSV export with original and weighted quantities
- Versioned JSON backups of the rule set

Domain Packages:
- core: Currency handling, configuration, persistence helpers
- orders: Order sheet loading and identifier normalization
- rules: Rule groups, lookup, weights, editing and persistence
- aggregation: Aggregation pass, ordering, metrics and CSV export
- cli: Command-line interface

Example Usage:
    from ordermatch.orders import load_orders
    from ordermatch.rules import RuleSetStore
    from ordermatch.aggregation import process_orders

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Order Match Contributors"

from .aggregation import AggregatedRow, MatchedRow, UnmatchedRow, aggregate, process_orders, sort_rows
from .core.config import Environment, get_config
from .core.money import Money
from .orders import OrderRecord, identifier_of
from .rules import RuleGroup, find_match, resolve_weight
from .session import MatchingSession

__all__ = [
    # Core
    "Environment",
    "Money",
    "get_config",
    # Orders
    "OrderRecord",
    "identifier_of",
    # Rules
    "RuleGroup",
    "find_match",
    "resolve_weight",
    # Aggregation
    "AggregatedRow",
    "MatchedRow",
    "UnmatchedRow",
    "aggregate",
    "process_orders",
    "sort_rows",
    # Driver
    "MatchingSession",
]
