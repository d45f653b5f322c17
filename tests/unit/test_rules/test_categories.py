#!/usr/bin/env python3
"""Tests for the category list store."""

import pytest

from ordermatch.core.json_utils import write_json
from ordermatch.rules.categories import DEFAULT_CATEGORIES, CategoryStore


@pytest.mark.rules
class TestCategoryStore:
    """Test CategoryStore behavior."""

    def _store(self, temp_dir) -> CategoryStore:
        return CategoryStore(temp_dir / "categories.json")

    def test_defaults_when_missing(self, temp_dir):
        store = self._store(temp_dir)

        assert store.load() == DEFAULT_CATEGORIES
        assert store.item_count() is None
        assert "defaults" in store.summary_text()

    def test_invalid_content_yields_defaults(self, temp_dir):
        store = self._store(temp_dir)
        write_json(store.path, {"not": "a list"})

        assert store.load() == DEFAULT_CATEGORIES

    def test_undecodable_file_yields_defaults(self, temp_dir):
        store = self._store(temp_dir)
        store.path.write_bytes(b"\xff\xfe[garbage")

        assert store.load() == DEFAULT_CATEGORIES

    def test_add(self, temp_dir):
        store = self._store(temp_dir)

        categories = store.add("  견과류 ")

        assert categories[-1] == "견과류"
        assert store.load()[-1] == "견과류"
        assert store.item_count() == len(DEFAULT_CATEGORIES) + 1

    def test_add_ignores_blank_and_duplicates(self, temp_dir):
        store = self._store(temp_dir)

        assert store.add("   ") == DEFAULT_CATEGORIES
        assert store.add("기타") == DEFAULT_CATEGORIES
        assert not store.exists()

    def test_remove(self, temp_dir):
        store = self._store(temp_dir)

        categories = store.remove("기타")

        assert "기타" not in categories
        assert store.load() == categories

    def test_move(self, temp_dir):
        store = self._store(temp_dir)

        categories = store.move("기타", 0)

        assert categories[0] == "기타"
        assert store.load()[0] == "기타"

    def test_move_clamps_position(self, temp_dir):
        store = self._store(temp_dir)

        assert store.move("과일류", 99)[-1] == "과일류"
        assert store.move("과일류", -5)[0] == "과일류"

    def test_move_unknown(self, temp_dir):
        with pytest.raises(ValueError):
            self._store(temp_dir).move("없는분류", 0)

    def test_reorder(self, temp_dir):
        store = self._store(temp_dir)
        store.reorder(["b", "a"])
        assert store.load() == ["b", "a"]
