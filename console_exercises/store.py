"""In-memory keyed record store.

Records live for the process lifetime only. Keys are unique: adding an
existing key either merges into the stored record (when the store defines a
merge) or is rejected.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from console_exercises.exceptions import (
    CapacityExceededError,
    DuplicateRecordError,
    EmptyStoreError,
    RecordNotFoundError,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")


class RecordStore(Generic[R]):
    """Insertion-ordered mapping from a string key to a mutable record.

    Subclasses customize the user-facing messages through the ``*_message``
    class attributes and opt into merge-on-add by overriding :meth:`merge`.

    Args:
        capacity: Optional upper bound on the number of records.
    """

    not_found_message = "No record found for {key}."
    duplicate_message = "A record for {key} already exists."
    capacity_message = "Cannot add more records. Maximum capacity of {capacity} reached."
    empty_message = "No records to display."

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._records: dict[str, R] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    @property
    def is_full(self) -> bool:
        return self.capacity is not None and len(self._records) >= self.capacity

    def check_capacity(self) -> None:
        """Raise CapacityExceededError if no further record fits."""
        if self.is_full:
            raise CapacityExceededError(
                self.capacity, self.capacity_message.format(capacity=self.capacity)
            )

    def merge(self, key: str, existing: R, incoming: R) -> R:
        """Combine an incoming record with the stored one for the same key.

        The default rejects the duplicate.
        """
        raise DuplicateRecordError(key, self.duplicate_message.format(key=key))

    def add(self, key: str, record: R) -> bool:
        """Insert ``record`` under ``key``, or merge it into the existing record.

        Returns:
            True if a new record was created, False if it was merged.

        Raises:
            CapacityExceededError: The store is full; nothing is changed.
            DuplicateRecordError: The key exists and the store does not merge.
        """
        if key in self._records:
            self._records[key] = self.merge(key, self._records[key], record)
            logger.debug(f"Merged record {key!r}")
            return False
        self.check_capacity()
        self._records[key] = record
        logger.debug(f"Added record {key!r} ({len(self._records)} stored)")
        return True

    def update(self, key: str, record: R) -> R:
        """Replace the record stored under ``key`` in place, keeping its position."""
        self.get(key)
        self._records[key] = record
        logger.debug(f"Updated record {key!r}")
        return record

    def get(self, key: str) -> R:
        try:
            return self._records[key]
        except KeyError:
            raise RecordNotFoundError(key, self.not_found_message.format(key=key)) from None

    def records(self) -> list[R]:
        """Return all records in insertion order.

        Raises:
            EmptyStoreError: The store holds no records.
        """
        if not self._records:
            raise EmptyStoreError(self.empty_message)
        return list(self._records.values())

    def items(self) -> list[tuple[str, R]]:
        """Return ``(key, record)`` pairs in insertion order, raising like :meth:`records`."""
        if not self._records:
            raise EmptyStoreError(self.empty_message)
        return list(self._records.items())
