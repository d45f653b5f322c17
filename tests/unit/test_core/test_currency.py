#!/usr/bin/env python3
"""Tests for won parsing and formatting."""

import pytest

from ordermatch.core.currency import format_won, parse_won_amount


@pytest.mark.currency
class TestParseWonAmount:
    """Test lenient sheet cell parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("12,900원", 12900),
            ("₩ 45000", 45000),
            ("-3,000", -3000),
            ("무료", 0),
            ("", 0),
            (None, 0),
            (12900, 12900),
            (12900.0, 12900),
            (float("nan"), 0),
        ],
    )
    def test_parse(self, value, expected):
        assert parse_won_amount(value) == expected

    def test_bool_is_not_an_amount(self):
        assert parse_won_amount(True) == 0


@pytest.mark.currency
class TestFormatWon:
    """Test thousands-separated won output."""

    def test_positive(self):
        assert format_won(0) == "₩0"
        assert format_won(1234) == "₩1,234"

    def test_negative(self):
        assert format_won(-1234) == "-₩1,234"
