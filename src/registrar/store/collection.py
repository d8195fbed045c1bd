"""
Ordered, id-keyed record collection used by the entity store.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from .models import Record

R = TypeVar("R", bound=Record)


class EntityCollection(Generic[R]):
    """
    In-memory collection of one record kind.

    Records are kept in insertion order and indexed by id. New ids come
    from a counter that only moves forward, so an id freed by ``remove``
    is never handed out again. Every operation holds the collection lock,
    which makes ``add`` and ``remove`` safe to call from several threads.
    """

    def __init__(self, name: str, record_type: type[R]):
        self.name = name
        self.record_type = record_type
        self._records: dict[int, R] = {}
        self._last_id = 0
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, id: object) -> bool:
        with self._lock:
            return id in self._records

    @property
    def last_id(self) -> int:
        """Highest id ever assigned or loaded in this collection."""
        return self._last_id

    def list(self) -> list[R]:
        """Return a snapshot of all records in insertion order."""
        with self._lock:
            return list(self._records.values())

    def get(self, id: int | None) -> R | None:
        """Return the record with the given id, or None."""
        if id is None:
            return None
        with self._lock:
            return self._records.get(id)

    def add(self, **fields: Any) -> R:
        """
        Create a record from ``fields`` with the next id and append it.

        Args:
            **fields: Record fields other than ``id`` (by field name or alias)

        Returns:
            The newly created record
        """
        with self._lock:
            record = self.record_type(id=self._last_id + 1, **fields)
            self._insert(record)
            return record

    def extend(self, records: Iterable[R]) -> None:
        """
        Append existing records, keeping their ids.

        Raises:
            ValueError: If a record id is already present
        """
        with self._lock:
            for record in records:
                self._insert(record)

    def remove(self, id: int) -> R | None:
        """Remove and return the record with the given id, or None if absent."""
        with self._lock:
            return self._records.pop(id, None)

    def _insert(self, record: R) -> None:
        if record.id in self._records:
            raise ValueError(f"Duplicate {self.name} id: {record.id}")
        self._records[record.id] = record
        self._last_id = max(self._last_id, record.id)
