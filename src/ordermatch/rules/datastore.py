#!/usr/bin/env python3
"""
Rule Set DataStore

JSON-file repository for the matching rule set. The file holds a plain array
of rule groups in the v1 shape.
"""

import json
import logging
from pathlib import Path
from typing import Any

from ..core.datastore_mixin import JsonFileStoreMixin, PersistenceFailureError
from ..core.json_utils import read_json
from .editor import ensure_rule_ids
from .models import RuleGroup

logger = logging.getLogger(__name__)

__all__ = ["PersistenceFailureError", "RuleSetStore", "is_valid_rule_payload"]


def is_valid_rule_payload(data: Any) -> bool:
    """Check that data is a list of objects with a string productName and a list of rules."""
    if not isinstance(data, list):
        return False
    return all(
        isinstance(item, dict) and isinstance(item.get("productName"), str) and isinstance(item.get("rules"), list)
        for item in data
    )


class RuleSetStore(JsonFileStoreMixin):
    """
    DataStore for the persisted rule group list.

    A missing file loads as an empty rule set. A corrupt file is logged and
    also loads as an empty rule set, so a bad write never blocks the app.
    """

    def __init__(self, path: Path, default_rules: list[RuleGroup] | None = None):
        """
        Initialize rule set store.

        Args:
            path: Rule set JSON file (data/rules/matching_rules.json)
            default_rules: Rules to use when nothing valid is stored
        """
        self.path = Path(path)
        self.default_rules = list(default_rules or [])

    def load(self) -> list[RuleGroup]:
        """
        Load the rule set.

        Returns:
            Rule groups in stored order, each with an id
        """
        if not self.exists():
            return [g.copy() for g in self.default_rules]

        try:
            data = read_json(self.path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("Failed to load rules from %s: %s", self.path, e)
            return [g.copy() for g in self.default_rules]

        if not is_valid_rule_payload(data):
            logger.warning("Invalid rules found in %s, using default", self.path)
            return [g.copy() for g in self.default_rules]

        return ensure_rule_ids([RuleGroup.from_dict(item) for item in data])

    def save(self, data: list[RuleGroup]) -> None:
        """
        Save the rule set.

        Raises:
            PersistenceFailureError: If the file can't be written
        """
        self._write([group.to_dict() for group in data])
        logger.info("Saved %d rule groups to %s", len(data), self.path)

    def item_count(self) -> int | None:
        """Get count of stored rule groups."""
        if not self.exists():
            return None
        try:
            data = read_json(self.path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            return None
        return len(data) if isinstance(data, list) else 0

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return "No matching rules saved"
        return f"Matching rules: {count} group(s)"
