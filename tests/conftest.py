"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, List

import pytest

from roster_manager.adapters.console_logger import ConsoleAuditLogger
from roster_manager.adapters.metrics_collector import InMemoryMetricsCollector
from roster_manager.adapters.mock_roster import MockRosterProvider
from roster_manager.config.models import RosterConfig
from roster_manager.domain.entities import Employee, PayFrequency
from roster_manager.store.record_store import InMemoryRecordStore

EmployeeFactory = Callable[..., Employee]


@pytest.fixture
def make_employee() -> EmployeeFactory:
    """Factory building employees with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides: Any) -> Employee:
        counter["n"] += 1
        n = counter["n"]
        data = {
            "id": f"rec-{n}",
            "employee_id": f"E{100 + n}",
            "name": f"Employee {n}",
            "email": f"employee{n}@example.com",
            "contact": "555-0100",
            "address": "1 Main St",
            "position": "Analyst",
            "department": "Finance",
            "performance": 75,
            "income": 60000,
            "is_active": True,
            "date_of_birth": "1990-01-01",
            "joining_date": "2020-01-01",
            "pay_frequency": PayFrequency.MONTHLY,
        }
        data.update(overrides)
        return Employee(**data)

    return _make


@pytest.fixture
def sample_roster(make_employee: EmployeeFactory) -> List[Employee]:
    """A small roster spanning departments, positions and statuses."""
    return [
        make_employee(
            name="Alice Johnson",
            email="alice@example.com",
            position="Engineer",
            department="Platform",
            income=120000,
            performance=92,
        ),
        make_employee(
            name="Bob Smith",
            email="bob@example.com",
            position="Designer",
            department="Engineering",
            income=60000,
            performance=70,
        ),
        make_employee(
            name="Carol White",
            email="carol@example.com",
            position="Manager",
            department="Sales",
            income=90000,
            performance=81,
            is_active=False,
        ),
        make_employee(
            name="Dan Brown",
            email="dan@example.com",
            position="Engineer",
            department="Engineering",
            income=80000,
            performance=64,
        ),
    ]


@pytest.fixture
def store(sample_roster: List[Employee]) -> InMemoryRecordStore:
    return InMemoryRecordStore(sample_roster)


@pytest.fixture
def mock_provider() -> MockRosterProvider:
    return MockRosterProvider(seed=42)


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    return InMemoryMetricsCollector()


@pytest.fixture
def default_config() -> RosterConfig:
    return RosterConfig()


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"
