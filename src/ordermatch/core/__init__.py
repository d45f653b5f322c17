"""
Core Utilities Package

Shared infrastructure used by the order, rule and aggregation packages.

This package provides:
- Won currency handling with integer arithmetic
- Configuration management for environment-specific settings
- JSON file helpers and the DataStore persistence protocol
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    get_output_dir,
    is_test,
    reload_config,
)
from .currency import format_won, parse_won_amount
from .datastore import DataStore
from .datastore_mixin import JsonFileStoreMixin, PersistenceFailureError
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "get_config",
    "get_data_dir",
    "get_output_dir",
    "is_test",
    "reload_config",
    # Currency
    "Money",
    "format_won",
    "parse_won_amount",
    # Persistence
    "DataStore",
    "JsonFileStoreMixin",
    "PersistenceFailureError",
]
