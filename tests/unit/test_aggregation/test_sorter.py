#!/usr/bin/env python3
"""Tests for row ordering."""

import pytest

from ordermatch.aggregation.models import MatchedRow, UnmatchedRow
from ordermatch.aggregation.sorter import collation_key, sort_rows


def _matched(name: str) -> MatchedRow:
    return MatchedRow(display_name=name, rule_group_id=name)


def _unmatched(name: str) -> UnmatchedRow:
    return UnmatchedRow(display_name=name, identifier=name)


@pytest.mark.aggregation
class TestSortRows:
    """Test matched-first, collated ordering."""

    def test_matched_before_unmatched(self):
        rows = sort_rows([_unmatched("a"), _matched("z"), _unmatched("b"), _matched("y")])

        assert [(r.is_matched, r.display_name) for r in rows] == [
            (True, "y"),
            (True, "z"),
            (False, "a"),
            (False, "b"),
        ]

    def test_case_insensitive_collation(self):
        rows = sort_rows([_matched("banana"), _matched("Cherry"), _matched("Apple")])
        assert [r.display_name for r in rows] == ["Apple", "banana", "Cherry"]

    def test_hangul_dictionary_order(self):
        rows = sort_rows([_matched("채소류"), _matched("과일류"), _matched("육류")])
        assert [r.display_name for r in rows] == ["과일류", "육류", "채소류"]

    def test_returns_new_list(self):
        rows = [_matched("b"), _matched("a")]
        sorted_rows = sort_rows(rows)

        assert sorted_rows is not rows
        assert [r.display_name for r in rows] == ["b", "a"]

    def test_collation_key_differs_from_code_point_order(self):
        assert collation_key("apple") < collation_key("Banana")
        assert "Banana" < "apple"
