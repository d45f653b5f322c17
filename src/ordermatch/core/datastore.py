#!/usr/bin/env python3
"""
DataStore Protocol - Standard interface for persisted state.

Separates persistence from the matching engine: whatever drives the engine is
handed a store, loads a snapshot from it, and saves the snapshot back after a
mutation. The engine itself only ever sees the snapshot.
"""

from datetime import datetime
from typing import Protocol, TypeVar

T = TypeVar("T")


class DataStore(Protocol[T]):
    """
    Protocol for persisted data and metadata queries.

    Type parameter T represents the stored data type (e.g. a list of rule
    groups, a list of category names).
    """

    def exists(self) -> bool:
        """
        Check if data exists in storage.

        Returns:
            True if the backing file exists, False otherwise
        """
        ...

    def load(self) -> T:
        """
        Load data from storage.

        Returns:
            Stored data, or the store's default when nothing is stored yet
        """
        ...

    def save(self, data: T) -> None:
        """
        Save data to storage.

        Args:
            data: Data to persist

        Raises:
            PersistenceFailureError: If the write fails
        """
        ...

    def last_modified(self) -> datetime | None:
        """
        Get timestamp of most recent data modification.

        Returns:
            datetime of last modification, or None if data doesn't exist
        """
        ...

    def age_days(self) -> int | None:
        """
        Get age of data in days since last modification.

        Returns:
            Number of days since last modification, or None if data doesn't exist
        """
        ...

    def item_count(self) -> int | None:
        """
        Get count of stored records.

        Returns:
            Count of records, or None if data doesn't exist
        """
        ...

    def size_bytes(self) -> int | None:
        """
        Get total storage size in bytes.

        Returns:
            Size of the backing file in bytes, or None if data doesn't exist
        """
        ...

    def summary_text(self) -> str:
        """
        Get human-readable summary of current data state.

        Returns:
            Brief text description for display in CLI output and logs
        """
        ...
