"""
Aggregate Statistics.

Summary figures over the full, unfiltered roster. ``monthly_payroll``
assumes ``income`` is annual and counts active employees only.
"""

from __future__ import annotations

from typing import Sequence

from roster_manager.domain.entities import Employee
from roster_manager.domain.value_objects import RosterStats

MONTHS_PER_YEAR = 12


def compute_stats(records: Sequence[Employee]) -> RosterStats:
    active = [r for r in records if r.is_active]
    return RosterStats(
        total=len(records),
        active_count=len(active),
        distinct_departments=len({r.department for r in records}),
        monthly_payroll=sum(r.income for r in active) / MONTHS_PER_YEAR,
    )
