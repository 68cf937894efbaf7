"""
Session Package - Per-user query state and actions.

Components:
    - RosterSession: Query parameters, store actions, view, stats, export
    - DerivationTicket: Snapshot and query captured for one derivation
    - ViewCache: LRU memoisation on (store version, query)
"""

from roster_manager.session.roster_session import (
    DerivationTicket,
    QueryGenerator,
    RosterSession,
)
from roster_manager.session.view_cache import CacheStats, ViewCache

__all__ = [
    "DerivationTicket",
    "QueryGenerator",
    "RosterSession",
    "CacheStats",
    "ViewCache",
]
