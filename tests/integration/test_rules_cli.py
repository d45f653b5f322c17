#!/usr/bin/env python3
"""
Integration tests for the rules command group.
"""

import json

import pytest
from click.testing import CliRunner

from ordermatch.cli.main import main
from ordermatch.core.config import get_config
from ordermatch.rules.datastore import RuleSetStore

WIDGET_ID = "storea|100|widget|red"


@pytest.mark.integration
@pytest.mark.rules
class TestRulesCLI:
    """Test creating, editing and deleting rules from the command line."""

    def setup_method(self):
        self.runner = CliRunner()

    def _create(self, *extra: str):
        return self.runner.invoke(
            main,
            [
                "rules",
                "create",
                "--seller",
                "StoreA",
                "--product-number",
                "100",
                "--product-name",
                "Widget",
                "--option-name",
                "Red",
                "--target",
                "Widgets",
                *extra,
            ],
        )

    def _stored(self):
        return RuleSetStore(get_config().rules.rules_file).load()

    def test_list_empty(self):
        result = self.runner.invoke(main, ["rules", "list"])

        assert result.exit_code == 0
        assert "No matching rules saved" in result.output

    def test_list_with_undecodable_rules_file(self):
        rules_file = get_config().rules.rules_file
        rules_file.parent.mkdir(parents=True, exist_ok=True)
        rules_file.write_bytes(b"\xff\xfe[garbage")

        result = self.runner.invoke(main, ["rules", "list"])

        assert result.exit_code == 0, result.output
        assert "No matching rules saved" in result.output

    def test_create_and_show(self):
        result = self._create("--member-weight", "2")
        assert result.exit_code == 0, result.output
        assert "Rule saved under 'Widgets'" in result.output

        group = self._stored()[0]
        assert group.members == [WIDGET_ID]
        assert group.weight_overrides == {WIDGET_ID: 2}

        listing = self.runner.invoke(main, ["rules", "list"])
        assert group.id in listing.output
        assert "Widgets" in listing.output

        shown = self.runner.invoke(main, ["rules", "show", group.id])
        assert shown.exit_code == 0
        assert "Target: Widgets" in shown.output
        assert "* x2  storea | 100 | widget | red" in shown.output

    def test_create_requires_identity(self):
        result = self.runner.invoke(main, ["rules", "create", "--target", "Widgets"])

        assert result.exit_code != 0
        assert "is required" in result.output

    def test_create_rejects_blank_target(self):
        result = self._create("--target", "   ")

        assert result.exit_code != 0
        assert "대상 상품명" in result.output

    def test_create_rejects_zero_weight(self):
        result = self._create("--weight", "0")

        assert result.exit_code != 0
        assert self._stored() == []

    def test_edit(self):
        self._create()
        group_id = self._stored()[0].id

        result = self.runner.invoke(main, ["rules", "edit", group_id, "--weight", "3"])

        assert result.exit_code == 0
        group = self._stored()[0]
        assert group.default_weight == 3
        assert group.target_name == "Widgets"

    def test_set_weight_and_remove_member(self):
        self._create()
        group_id = self._stored()[0].id

        result = self.runner.invoke(main, ["rules", "set-weight", group_id, WIDGET_ID, "5"])
        assert result.exit_code == 0
        assert self._stored()[0].weight_overrides == {WIDGET_ID: 5}

        result = self.runner.invoke(main, ["rules", "remove-member", group_id, WIDGET_ID])
        assert result.exit_code == 0
        assert self._stored() == []

    def test_set_weight_non_member(self):
        self._create()
        group_id = self._stored()[0].id

        result = self.runner.invoke(main, ["rules", "set-weight", group_id, "other|||", "2"])

        assert result.exit_code != 0

    def test_delete(self):
        self._create()
        group_id = self._stored()[0].id

        result = self.runner.invoke(main, ["rules", "delete", group_id, "--yes"])

        assert result.exit_code == 0
        assert self._stored() == []

    def test_delete_unknown(self):
        result = self.runner.invoke(main, ["rules", "delete", "missing", "--yes"])

        assert result.exit_code != 0
        assert "Rule group not found" in result.output

    def test_backup_and_restore(self, temp_dir):
        self._create()

        result = self.runner.invoke(main, ["rules", "backup", "--output-dir", str(temp_dir)])
        assert result.exit_code == 0
        backup_file = next(temp_dir.glob("matching-rules-backup-v1-*.json"))
        assert json.loads(backup_file.read_text(encoding="utf-8"))["metadata"]["totalRules"] == 1

        self.runner.invoke(main, ["rules", "delete", self._stored()[0].id, "--yes"])
        assert self._stored() == []

        result = self.runner.invoke(main, ["rules", "restore", str(backup_file)])
        assert result.exit_code == 0
        assert [g.target_name for g in self._stored()] == ["Widgets"]

    def test_backup_without_rules(self):
        result = self.runner.invoke(main, ["rules", "backup"])

        assert result.exit_code != 0
        assert "No matching rules" in result.output

    def test_restore_invalid_file(self, temp_dir):
        bad = temp_dir / "bad.json"
        bad.write_text(json.dumps({"version": "v2", "rules": []}), encoding="utf-8")

        result = self.runner.invoke(main, ["rules", "restore", str(bad)])

        assert result.exit_code != 0
        assert "유효하지 않은 백업 파일입니다." in result.output
