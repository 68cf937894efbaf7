"""
Record Store - Versioned In-Memory Roster.

The store owns the authoritative set of employee records. Contents are held
as an immutable tuple; every mutation builds a new tuple and bumps the
version, so readers always see one consistent snapshot.

Usage:
    store = InMemoryRecordStore(seed_records)
    snapshot = store.snapshot()
    store.update(snapshot[0].with_changes(is_active=False))
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Iterable, Optional, Protocol, Tuple

from roster_manager.domain.entities import Employee
from roster_manager.domain.value_objects import Snapshot

logger = logging.getLogger(__name__)


class RosterStoreError(Exception):
    """Base class for store failures."""
    pass


class NotFoundError(RosterStoreError):
    """Raised when an update or delete names a record that is not present."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Employee record '{record_id}' not found")
        self.record_id = record_id


class DuplicateRecordError(RosterStoreError):
    """Raised when adding a record whose id is already stored."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Employee record '{record_id}' already exists")
        self.record_id = record_id


class RecordStoreProtocol(Protocol):
    """Protocol for record stores."""

    @property
    def version(self) -> int:
        ...

    def snapshot(self) -> Tuple[int, Snapshot]:
        ...

    def list(self) -> Snapshot:
        ...

    def add(self, record: Employee) -> None:
        ...

    def update(self, record: Employee) -> None:
        ...

    def remove(self, record_id: str) -> None:
        ...


class InMemoryRecordStore:
    """
    Copy-on-write record store.

    Features:
        - Immutable snapshots, replaced wholesale on mutation
        - Monotonic version counter for cache keys and staleness checks
        - Failed mutations leave contents and version unchanged
    """

    def __init__(self, records: Optional[Iterable[Employee]] = None) -> None:
        self._lock = RLock()
        self._records: Snapshot = ()
        self._version = 0
        for record in records or ():
            self._check_unique(record.id)
            self._records = self._records + (record,)
        logger.debug(f"Record store initialized with {len(self._records)} records")

    @property
    def version(self) -> int:
        with self._lock:
            return self._version

    def snapshot(self) -> Tuple[int, Snapshot]:
        """Current version and contents, read together."""
        with self._lock:
            return self._version, self._records

    def list(self) -> Snapshot:
        with self._lock:
            return self._records

    def get(self, record_id: str) -> Employee:
        """
        Look up a record by id.

        Raises:
            NotFoundError: If no record has this id
        """
        with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return record
        raise NotFoundError(record_id)

    def add(self, record: Employee) -> None:
        """
        Append a record.

        Raises:
            DuplicateRecordError: If the id is already stored
        """
        with self._lock:
            self._check_unique(record.id)
            self._commit(self._records + (record,))
            logger.info(f"Added employee {record.employee_id} ({record.id})")

    def update(self, record: Employee) -> None:
        """
        Replace the record with the same id, keeping its position.

        Raises:
            NotFoundError: If no record has this id
        """
        with self._lock:
            index = self._index_of(record.id)
            records = list(self._records)
            records[index] = record
            self._commit(tuple(records))
            logger.info(f"Updated employee {record.employee_id} ({record.id})")

    def remove(self, record_id: str) -> None:
        """
        Delete a record.

        Raises:
            NotFoundError: If no record has this id
        """
        with self._lock:
            index = self._index_of(record_id)
            self._commit(self._records[:index] + self._records[index + 1:])
            logger.info(f"Removed employee record {record_id}")

    def __len__(self) -> int:
        return len(self.list())

    def _index_of(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        raise NotFoundError(record_id)

    def _check_unique(self, record_id: str) -> None:
        if any(r.id == record_id for r in self._records):
            raise DuplicateRecordError(record_id)

    def _commit(self, records: Snapshot) -> None:
        self._records = records
        self._version += 1
