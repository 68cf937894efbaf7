"""
View Cache - LRU memoisation of derived views.

Keyed on ``(store_version, query)``. A store mutation bumps the version, so
stale entries are never hit and age out through LRU eviction.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional, Tuple

from roster_manager.domain.value_objects import QueryResult, RosterQuery

logger = logging.getLogger(__name__)

CacheKey = Tuple[int, RosterQuery]


@dataclass
class CacheStats:
    """Cache statistics."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class ViewCache:
    """Bounded LRU cache of QueryResult values."""

    def __init__(self, max_entries: int = 32) -> None:
        self.max_entries = max_entries
        self._entries: "OrderedDict[CacheKey, QueryResult]" = OrderedDict()
        self.stats = CacheStats()

    def get(self, store_version: int, query: RosterQuery) -> Optional[QueryResult]:
        key = (store_version, query)
        result = self._entries.get(key)
        if result is None:
            self.stats.misses += 1
            return None
        self._entries.move_to_end(key)
        self.stats.hits += 1
        return result

    def put(self, result: QueryResult) -> None:
        key = (result.store_version, result.query)
        self._entries[key] = result
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            self.stats.evictions += 1
            logger.debug(f"Evicted cached view for store v{evicted[0]}")

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
