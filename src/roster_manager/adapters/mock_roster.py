"""
Mock Roster Provider.

Generates a deterministic sample roster for development, demos and tests,
and loads rosters from YAML or JSON files.
"""

from __future__ import annotations

import random
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from roster_manager.domain.entities import Employee, Gender, PayFrequency


def load_employees(path: Union[str, Path]) -> List[Employee]:
    """
    Load a list of employee records from a YAML or JSON file.

    Field names may be snake_case or the camelCase used by the web
    client (``employeeId``, ``isActive``, ...).

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the document is not a list
        ValidationError: If a record is invalid
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or []
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of employees in {path}")
    return [Employee.model_validate(item) for item in data]


class MockRosterProvider:
    """Fake roster source for development and testing."""

    # (name, position, department)
    MOCK_EMPLOYEES = [
        ("Alice Johnson", "Software Engineer", "Engineering"),
        ("Bob Smith", "Product Manager", "Product"),
        ("Charlie Brown", "UX Designer", "Design"),
        ("Diana Prince", "Senior Engineer", "Engineering"),
        ("Ethan Hunt", "Sales Executive", "Sales"),
        ("Fiona Gallagher", "HR Specialist", "Human Resources"),
        ("George Martin", "Data Analyst", "Analytics"),
        ("Hannah Lee", "Marketing Lead", "Marketing"),
        ("Ivan Petrov", "DevOps Engineer", "Engineering"),
        ("Julia Roberts", "Account Manager", "Sales"),
        ("Kevin Durant", "QA Engineer", "Engineering"),
        ("Laura Palmer", "Recruiter", "Human Resources"),
        # Accents and case exercise collation
        ("Élodie Martin", "Data Analyst", "Analytics"),
        ("zoe Adams", "UX Designer", "Design"),
    ]

    INACTIVE = {"Ethan Hunt", "Laura Palmer"}

    def __init__(self, seed: int = 42) -> None:
        """
        Initialize mock provider with random seed.

        Args:
            seed: Random seed for reproducibility
        """
        self._seed = seed
        self._rng = random.Random(seed)
        self._employees = self._generate_employees()

    def get_employees(self) -> List[Employee]:
        return list(self._employees)

    def as_dicts(self) -> List[Dict[str, Any]]:
        """Records in the camelCase shape used by the web client."""
        return [e.model_dump(by_alias=True, mode="json") for e in self._employees]

    def _generate_employees(self) -> List[Employee]:
        employees = []
        base_date = date(2024, 1, 1)
        frequencies = list(PayFrequency)
        genders = list(Gender)

        for i, (name, position, department) in enumerate(self.MOCK_EMPLOYEES, start=1):
            first = name.split()[0].lower()
            joining = base_date - timedelta(days=self._rng.randint(30, 3000))
            birth = date(1965, 1, 1) + timedelta(days=self._rng.randint(0, 12000))
            employees.append(
                Employee(
                    id=f"emp-{i:03d}",
                    employee_id=f"E{1000 + i}",
                    name=name,
                    email=f"{first}@example.com",
                    contact=f"555-01{i:02d}",
                    address=f"{self._rng.randint(1, 999)} Main St, Springfield",
                    position=position,
                    department=department,
                    performance=self._rng.randint(40, 100),
                    income=self._rng.randrange(40_000, 160_000, 1_000),
                    avatar_url=f"https://i.pravatar.cc/150?u={i}",
                    is_active=name not in self.INACTIVE,
                    date_of_birth=birth.isoformat(),
                    joining_date=joining.isoformat(),
                    pay_frequency=self._rng.choice(frequencies),
                    gender=self._rng.choice(genders),
                )
            )
        return employees
