#!/usr/bin/env python3
"""
DataStore Mixin - Common functionality for single-file JSON stores.

Provides shared implementation of the metadata methods so that each store
only has to implement loading, saving and its own item count.
"""

import logging
from abc import abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any

from .json_utils import write_json

logger = logging.getLogger(__name__)


class PersistenceFailureError(OSError):
    """Raised when a store cannot write its backing file."""

    pass


class JsonFileStoreMixin:
    """
    Mixin providing common DataStore functionality for one JSON file.

    Subclasses must set ``self.path`` and implement:
    - item_count() -> int | None
    - summary_text() -> str
    """

    path: Path

    def exists(self) -> bool:
        """Check if the backing file exists."""
        return self.path.is_file()

    def last_modified(self) -> datetime | None:
        """Get modification time of the backing file."""
        if not self.exists():
            return None
        return datetime.fromtimestamp(self.path.stat().st_mtime)

    def age_days(self) -> int | None:
        """
        Get age of data in days since last modification.

        Returns:
            Number of days since last modification, or None if data doesn't exist
        """
        last_mod = self.last_modified()
        if last_mod is None:
            return None
        return (datetime.now() - last_mod).days

    def size_bytes(self) -> int | None:
        """Get size of the backing file."""
        if not self.exists():
            return None
        return self.path.stat().st_size

    def _write(self, payload: Any) -> None:
        """
        Write payload to the backing file.

        Raises:
            PersistenceFailureError: If the file system rejects the write
        """
        try:
            write_json(self.path, payload)
        except OSError as e:
            logger.error("Failed to write %s: %s", self.path, e)
            raise PersistenceFailureError(f"Failed to save {self.path}: {e}") from e

    @abstractmethod
    def item_count(self) -> int | None:
        """Get count of items/records in stored data."""
        ...

    @abstractmethod
    def summary_text(self) -> str:
        """Get human-readable summary of current data state."""
        ...
