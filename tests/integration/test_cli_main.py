#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests end-to-end CLI command execution with real command invocation.
"""

import pytest
from click.testing import CliRunner

from ordermatch.cli.main import main


@pytest.mark.integration
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Order Match" in result.output
        for command in ["match", "rules", "categories", "config", "version"]:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "Order Match v0.1.0" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self):
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert "Rules File:" in result.output
        assert "Categories File:" in result.output
        assert "Export Directory:" in result.output
        assert "Log Level: INFO" in result.output

    def test_invalid_command_shows_error(self):
        result = self.runner.invoke(main, ["invalid-command"])

        assert result.exit_code != 0
        assert "No such command" in result.output

    def test_verbose_flag_enables_verbose_output(self):
        result = self.runner.invoke(main, ["--verbose", "config"])

        assert result.exit_code == 0
        assert "Data directory:" in result.output

    def test_debug_flag(self):
        result = self.runner.invoke(main, ["--debug", "config"])

        assert result.exit_code == 0
        assert "Debug logging enabled" in result.output
        assert "Log Level: DEBUG" in result.output

    def test_invalid_configuration_is_reported(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        result = self.runner.invoke(main, ["config"])

        assert result.exit_code != 0
        assert "Configuration validation failed" in result.output


@pytest.mark.integration
class TestCategoriesCLI:
    """Test the categories command group."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_list_shows_defaults(self):
        result = self.runner.invoke(main, ["categories", "list"])

        assert result.exit_code == 0
        assert "과일류" in result.output
        assert "기타" in result.output

    def test_add_move_remove(self):
        assert self.runner.invoke(main, ["categories", "add", "견과류"]).exit_code == 0

        result = self.runner.invoke(main, ["categories", "move", "견과류", "0"])
        assert result.exit_code == 0

        listing = self.runner.invoke(main, ["categories", "list"]).output
        assert listing.splitlines()[0].strip() == "0  견과류"

        assert self.runner.invoke(main, ["categories", "remove", "견과류"]).exit_code == 0
        assert "견과류" not in self.runner.invoke(main, ["categories", "list"]).output

    def test_add_blank(self):
        result = self.runner.invoke(main, ["categories", "add", "  "])

        assert result.exit_code != 0
        assert "must not be blank" in result.output

    def test_move_unknown(self):
        result = self.runner.invoke(main, ["categories", "move", "없는분류", "1"])

        assert result.exit_code != 0
        assert "Unknown category" in result.output
