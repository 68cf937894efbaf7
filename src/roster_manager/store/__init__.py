"""
Store Package - Authoritative roster contents.

    - InMemoryRecordStore: Versioned copy-on-write store
    - NotFoundError, DuplicateRecordError: Mutation failures
"""

from roster_manager.store.record_store import (
    DuplicateRecordError,
    InMemoryRecordStore,
    NotFoundError,
    RecordStoreProtocol,
    RosterStoreError,
)

__all__ = [
    "DuplicateRecordError",
    "InMemoryRecordStore",
    "NotFoundError",
    "RecordStoreProtocol",
    "RosterStoreError",
]
