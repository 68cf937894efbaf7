"""
Core Domain Entities.

This module defines the fundamental entities of the Roster Manager domain.
These entities represent the core concepts that the query pipeline and the
exporter operate on.
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field


class PayFrequency(str, Enum):
    """How often an employee is paid."""

    MONTHLY = "Monthly"
    BI_WEEKLY = "Bi-weekly"
    WEEKLY = "Weekly"
    ANNUALLY = "Annually"


class Gender(str, Enum):
    """Self-reported gender of an employee."""

    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"
    PREFER_NOT_TO_SAY = "Prefer not to say"


class SortOrder(str, Enum):
    """Direction of the view ordering."""

    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortOrder":
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC


class SortKey(str, Enum):
    """Employee fields the view can be ordered by."""

    EMPLOYEE_ID = "employee_id"
    NAME = "name"
    EMAIL = "email"
    CONTACT = "contact"
    ADDRESS = "address"
    POSITION = "position"
    DEPARTMENT = "department"
    PERFORMANCE = "performance"
    INCOME = "income"
    IS_ACTIVE = "is_active"
    DATE_OF_BIRTH = "date_of_birth"
    JOINING_DATE = "joining_date"
    PAY_FREQUENCY = "pay_frequency"
    GENDER = "gender"


def _new_record_id() -> str:
    return uuid.uuid4().hex


class Employee(BaseModel):
    """One employee on the roster.

    Records are immutable. Edits go through ``with_changes`` which returns a
    new record carrying the same ``id``.
    """

    id: str = Field(default_factory=_new_record_id, description="Stable record id")
    employee_id: str = Field(..., alias="employeeId", description="Human-facing id")
    name: str
    email: str = ""
    contact: str = ""
    address: str = ""
    position: str = ""
    department: str = ""
    performance: Union[int, float] = Field(default=0, description="Score, nominally 0-100")
    income: Union[int, float] = Field(default=0, description="Annual income")
    avatar_url: str = Field(default="", alias="avatarUrl")
    is_active: bool = Field(default=True, alias="isActive")
    date_of_birth: str = Field(default="", alias="dateOfBirth", description="YYYY-MM-DD")
    joining_date: str = Field(default="", alias="joiningDate", description="YYYY-MM-DD")
    pay_frequency: PayFrequency = Field(
        default=PayFrequency.MONTHLY, alias="payFrequency"
    )
    gender: Gender = Gender.PREFER_NOT_TO_SAY

    model_config = {"frozen": True, "populate_by_name": True}

    def with_changes(self, **changes: Any) -> "Employee":
        """Return a copy with ``changes`` applied, keeping the record id."""
        changes.pop("id", None)
        data = self.model_dump()
        data.update(changes)
        return Employee.model_validate(data)

    def field_value(self, key: SortKey) -> Any:
        """Value of an orderable field, enums unwrapped to their text."""
        value = getattr(self, key.value)
        return value.value if isinstance(value, Enum) else value

    @property
    def status_label(self) -> str:
        return "Active" if self.is_active else "Inactive"
