"""
Stats Package - Aggregate figures over the whole roster.
"""

from roster_manager.stats.aggregate import MONTHS_PER_YEAR, compute_stats

__all__ = ["MONTHS_PER_YEAR", "compute_stats"]
