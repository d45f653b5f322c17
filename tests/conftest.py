"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from ordermatch.core import config as config_module
from ordermatch.orders.models import OrderRecord
from ordermatch.rules.models import RuleGroup


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Point configuration at a throwaway data directory."""
    # Ensure tests never touch a real rule set
    monkeypatch.setenv("ORDERMATCH_ENV", "test")
    monkeypatch.setenv("ORDERMATCH_DATA_DIR", str(tmp_path / "ordermatch_data"))
    for name in ("ORDERMATCH_RULES_FILE", "ORDERMATCH_CATEGORIES_FILE", "ORDERMATCH_EXPORT_DIR", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")

    # Drop the cached configuration so every test builds its own
    monkeypatch.setattr(config_module, "_config", None)


@pytest.fixture
def sample_order() -> OrderRecord:
    """Sample order row for testing."""
    return OrderRecord(
        seller="StoreA",
        product_number="100",
        product_name="Widget",
        option_name="Red",
        quantity=2,
    )


@pytest.fixture
def sample_rule_group() -> RuleGroup:
    """Sample rule group claiming the sample order."""
    return RuleGroup(
        id="g1",
        target_name="Widgets",
        default_weight=1,
        members=["storea|100|widget|red"],
    )


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for won parsing and formatting")
    config.addinivalue_line("markers", "orders: Tests for order sheet loading and identifiers")
    config.addinivalue_line("markers", "rules: Tests for rule groups, editing and persistence")
    config.addinivalue_line("markers", "aggregation: Tests for the aggregation pass and export")
