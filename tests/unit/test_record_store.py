"""
Unit Tests for InMemoryRecordStore.

Test Aspects Covered:
    ✅ Business Logic: Add, update, remove, versioning
    ✅ Error Handling: Unknown ids, duplicate ids
    ✅ Edge Cases: Snapshots unaffected by later mutations
"""

from __future__ import annotations

import pytest

from roster_manager.store.record_store import (
    DuplicateRecordError,
    InMemoryRecordStore,
    NotFoundError,
)


class TestRecordStore:
    """Test cases for InMemoryRecordStore."""

    def test_add_appends_and_bumps_version(self, make_employee) -> None:
        store = InMemoryRecordStore()
        record = make_employee()

        store.add(record)

        assert store.list() == (record,)
        assert store.version == 1

    def test_update_replaces_in_place(self, make_employee) -> None:
        """
        SCENARIO: Edit the middle record
        EXPECTED: New value at the same position, others untouched
        """
        # Arrange
        records = [make_employee(), make_employee(), make_employee()]
        store = InMemoryRecordStore(records)
        edited = records[1].with_changes(name="Renamed")

        # Act
        store.update(edited)

        # Assert
        assert store.list() == (records[0], edited, records[2])
        assert records[1].name != "Renamed"

    def test_remove(self, make_employee) -> None:
        records = [make_employee(), make_employee()]
        store = InMemoryRecordStore(records)

        store.remove(records[0].id)

        assert store.list() == (records[1],)

    def test_update_unknown_id_leaves_store_unchanged(self, make_employee) -> None:
        """
        SCENARIO: Update a record that was deleted meanwhile
        EXPECTED: NotFoundError, contents and version unchanged
        """
        record = make_employee()
        store = InMemoryRecordStore([record])
        version_before, snapshot_before = store.snapshot()

        with pytest.raises(NotFoundError) as exc_info:
            store.update(make_employee(id="missing"))

        assert exc_info.value.record_id == "missing"
        assert store.snapshot() == (version_before, snapshot_before)

    def test_remove_unknown_id_raises(self, make_employee) -> None:
        store = InMemoryRecordStore([make_employee()])

        with pytest.raises(NotFoundError):
            store.remove("missing")

        assert store.version == 0

    def test_duplicate_id_rejected(self, make_employee) -> None:
        record = make_employee()
        store = InMemoryRecordStore([record])

        with pytest.raises(DuplicateRecordError):
            store.add(record.with_changes(name="Copy"))

        assert len(store) == 1

    def test_snapshot_is_immutable_copy(self, make_employee) -> None:
        """
        SCENARIO: Take a snapshot, then mutate the store
        EXPECTED: The snapshot still shows the old contents
        """
        store = InMemoryRecordStore([make_employee()])
        version, snapshot = store.snapshot()

        store.add(make_employee())

        assert len(snapshot) == 1
        assert store.version == version + 1

    def test_get(self, make_employee) -> None:
        record = make_employee()
        store = InMemoryRecordStore([record])

        assert store.get(record.id) is record
        with pytest.raises(NotFoundError):
            store.get("missing")


class TestEmployeeRecord:
    """Records are immutable values."""

    def test_with_changes_keeps_id(self, make_employee) -> None:
        record = make_employee()

        edited = record.with_changes(id="other", income=1)

        assert edited.id == record.id
        assert edited.income == 1
        assert record.income != 1

    def test_frozen(self, make_employee) -> None:
        record = make_employee()

        with pytest.raises(Exception):
            record.name = "changed"

    def test_generated_id_when_missing(self) -> None:
        from roster_manager.domain.entities import Employee

        a = Employee(employee_id="E1", name="A")
        b = Employee(employee_id="E1", name="A")

        assert a.id and b.id and a.id != b.id

    def test_accepts_camel_case_fields(self) -> None:
        from roster_manager.domain.entities import Employee, PayFrequency

        record = Employee.model_validate(
            {"employeeId": "E9", "name": "Kim", "isActive": False, "payFrequency": "Weekly"}
        )

        assert record.employee_id == "E9"
        assert record.is_active is False
        assert record.pay_frequency is PayFrequency.WEEKLY
