#!/usr/bin/env python3
"""
Category List Store

Ordered list of target names offered when creating a rule. The list is free
text and is not linked to rule groups beyond equal names.
"""

import json
import logging
from pathlib import Path

from ..core.datastore_mixin import JsonFileStoreMixin
from ..core.json_utils import read_json

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    "과일류",
    "채소류",
    "육류",
    "해산물",
    "가공식품",
    "생활용품",
    "주방용품",
    "의류",
    "전자제품",
    "기타",
]


class CategoryStore(JsonFileStoreMixin):
    """DataStore for the category name list."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> list[str]:
        """Load categories; missing or invalid content yields the defaults."""
        if not self.exists():
            return list(DEFAULT_CATEGORIES)

        try:
            data = read_json(self.path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("Failed to load categories from %s: %s", self.path, e)
            return list(DEFAULT_CATEGORIES)

        if isinstance(data, list) and all(isinstance(item, str) for item in data):
            return data

        logger.warning("Invalid categories found in %s, using defaults", self.path)
        return list(DEFAULT_CATEGORIES)

    def save(self, data: list[str]) -> None:
        """Save categories in the given order."""
        self._write(list(data))

    def add(self, name: str) -> list[str]:
        """Append a category unless it is blank or already present."""
        categories = self.load()
        name = name.strip()
        if not name or name in categories:
            return categories
        categories.append(name)
        self.save(categories)
        return categories

    def remove(self, name: str) -> list[str]:
        """Remove every occurrence of a category."""
        categories = [c for c in self.load() if c != name]
        self.save(categories)
        return categories

    def reorder(self, names: list[str]) -> list[str]:
        """Replace the stored order with names."""
        self.save(names)
        return list(names)

    def move(self, name: str, position: int) -> list[str]:
        """
        Move a category to a zero-based position, clamped to the list bounds.

        Raises:
            ValueError: If the category doesn't exist
        """
        categories = self.load()
        if name not in categories:
            raise ValueError(f"Unknown category: {name}")
        categories.remove(name)
        position = max(0, min(position, len(categories)))
        categories.insert(position, name)
        return self.reorder(categories)

    def item_count(self) -> int | None:
        if not self.exists():
            return None
        return len(self.load())

    def summary_text(self) -> str:
        count = self.item_count()
        if count is None:
            return f"Categories: {len(DEFAULT_CATEGORIES)} (defaults)"
        return f"Categories: {count}"
