#!/usr/bin/env python3
"""
Matching Session

Stateful driver around the stateless matching engine. A session keeps the
current rule snapshot, the most recently loaded order sheet and the last
result, and re-runs a full aggregation pass after every rule change.

Rule changes are validated before anything is touched. A failed save is
reported through ``last_error`` while the in-memory rule set keeps the change.
"""

import logging
from pathlib import Path
from typing import Any

from .aggregation.aggregator import process_orders
from .aggregation.export import export_filename, write_csv
from .aggregation.metrics import AggregationSummary, summarize
from .aggregation.models import AggregatedRow
from .core.datastore import DataStore
from .core.datastore_mixin import PersistenceFailureError
from .orders.loader import load_orders
from .orders.models import OrderRecord
from .rules import backup, editor
from .rules.models import RuleGroup

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = "매칭 규칙을 저장하는 데 실패했습니다. 저장 공간을 확인해주세요."


class MatchingSession:
    """
    Holds the state between aggregation passes.

    Example:
        >>> session = MatchingSession(RuleSetStore(config.rules.rules_file))
        >>> session.load_rules()
        >>> rows = session.process_file("orders.xlsx")
        >>> session.create_rule(rows[-1].representative_order, "과일류")
        >>> session.export_csv(config.output_dir)
    """

    def __init__(self, rule_store: DataStore[list[RuleGroup]]):
        self.rule_store = rule_store
        self.rules: list[RuleGroup] = []
        self.orders: list[OrderRecord] | None = None
        self.source_name: str | None = None
        self.rows: list[AggregatedRow] = []
        self.last_error: str | None = None

    def load_rules(self) -> list[RuleGroup]:
        """Load the persisted rule set into the session."""
        self.rules = self.rule_store.load()
        logger.debug("Session loaded %d rule groups", len(self.rules))
        return self.rules

    def process_file(self, path: str | Path) -> list[AggregatedRow]:
        """
        Load an order sheet, retain it, and run a pass.

        Raises:
            FileNotFoundError, OrderSheetError: If the sheet can't be loaded.
                The previously retained orders and rows are kept in that case.
        """
        path = Path(path)
        orders = load_orders(path)
        return self.process_orders(orders, path.name)

    def process_orders(self, orders: list[OrderRecord], source_name: str | None = None) -> list[AggregatedRow]:
        """Retain an order sequence and run a pass over it."""
        self.orders = list(orders)
        self.source_name = source_name
        self.rows = process_orders(self.orders, self.rules)
        return self.rows

    def recompute(self) -> list[AggregatedRow] | None:
        """
        Re-run the pass over the retained orders with the current rules.

        Returns:
            The new rows, or None when no order sheet has been retained yet
            (the previous rows are left as they are)
        """
        if self.orders is None:
            logger.info("No order sheet loaded; skipping recompute")
            return None
        self.rows = process_orders(self.orders, self.rules)
        return self.rows

    def apply_rules(self, rules: list[RuleGroup]) -> list[AggregatedRow] | None:
        """
        Replace the rule set, persist it, and recompute.

        A persistence failure is recorded in last_error; the new rules stay
        active in memory.
        """
        self.rules = rules
        self.last_error = None
        try:
            self.rule_store.save(rules)
        except PersistenceFailureError as e:
            logger.error("Rule set save failed: %s", e)
            self.last_error = SAVE_FAILED_MESSAGE
        return self.recompute()

    def create_rule(
        self,
        order: OrderRecord,
        target_name: str,
        default_weight: int = 1,
        member_weight: int | None = None,
    ) -> list[AggregatedRow] | None:
        """Create (or merge) a rule for an unmatched order. See editor.create_rule_from_order."""
        rules = editor.create_rule_from_order(self.rules, order, target_name, default_weight, member_weight)
        return self.apply_rules(rules)

    def update_rule(
        self,
        group_id: str,
        target_name: str,
        default_weight: int,
        identifier: str | None = None,
        member_weight: int | None = None,
    ) -> list[AggregatedRow] | None:
        """Edit a rule group. See editor.update_rule_group."""
        rules = editor.update_rule_group(
            self.rules, group_id, target_name, default_weight, identifier, member_weight
        )
        return self.apply_rules(rules)

    def set_member_weight(self, group_id: str, identifier: str, weight: int) -> list[AggregatedRow] | None:
        """Set one member's weight override."""
        return self.apply_rules(editor.set_member_weight(self.rules, group_id, identifier, weight))

    def remove_member(self, group_id: str, identifier: str) -> list[AggregatedRow] | None:
        """Remove one member; deletes the group when it becomes empty."""
        return self.apply_rules(editor.remove_member(self.rules, group_id, identifier))

    def delete_rule(self, group_id: str) -> list[AggregatedRow] | None:
        """Delete a rule group."""
        return self.apply_rules(editor.delete_rule_group(self.rules, group_id))

    def delete_rule_for_row(self, row: AggregatedRow) -> list[AggregatedRow] | None:
        """
        Delete the rule group behind a matched row.

        Raises:
            RuleGroupNotFoundError: If no group backs the row
        """
        group = editor.find_group_for_row(self.rules, row)
        if group is None:
            raise editor.RuleGroupNotFoundError(row.display_name)
        return self.delete_rule(group.id)

    def restore_backup(self, path: str | Path) -> list[AggregatedRow] | None:
        """
        Replace the rule set with the contents of a backup file.

        Raises:
            InvalidBackupFormatError: The current rules are kept untouched
        """
        rules = backup.load_backup(path)
        result = self.apply_rules(rules)
        if self.orders is None:
            self.rows = []
        return result

    def write_backup(self, directory: str | Path) -> Path:
        """Write a backup of the current rule set into directory."""
        return backup.write_backup(self.rules, directory)

    def export_csv(self, directory: str | Path, **filename_options: Any) -> Path:
        """Write the current rows as CSV into directory, named after the source sheet."""
        path = Path(directory) / export_filename(self.source_name, **filename_options)
        return write_csv(self.rows, self.rules, path)

    def summary(self) -> AggregationSummary:
        """Summary statistics of the current rows."""
        return summarize(self.rows, self.rules)
