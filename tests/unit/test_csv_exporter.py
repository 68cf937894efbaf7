"""
Unit Tests for the CSV exporter.

Test Aspects Covered:
    ✅ Business Logic: Column order, status label, escaping
    ✅ Error Handling: Empty input, unexpected failures
    ✅ Edge Cases: Quotes, commas, newlines, numeric text forms
"""

from __future__ import annotations

import csv
import io
from unittest.mock import patch

import pytest

from roster_manager.config.models import ExportConfig
from roster_manager.export.artifact import build_artifact
from roster_manager.export.csv_exporter import (
    HEADERS,
    EmptyInputError,
    ExportError,
    ExportFailureError,
    escape_field,
    export_csv,
    to_text,
)


class TestEscapeField:
    """Test cases for escape_field."""

    def test_quotes_and_comma(self) -> None:
        """
        SCENARIO: Value  Jane, "Doe"
        EXPECTED: Wrapped in quotes with embedded quotes doubled
        """
        assert escape_field('Jane, "Doe"') == '"Jane, ""Doe"""'

    def test_round_trips_through_csv_reader(self) -> None:
        """
        SCENARIO: Escaped field parsed by a standard CSV reader
        EXPECTED: Original value recovered exactly
        """
        original = 'Jane, "Doe"'

        parsed = next(csv.reader(io.StringIO(escape_field(original))))

        assert parsed == [original]

    def test_newline_is_quoted(self) -> None:
        assert escape_field("line1\nline2") == '"line1\nline2"'

    def test_plain_value_unchanged(self) -> None:
        assert escape_field("Engineering") == "Engineering"
        assert escape_field("") == ""

    def test_lone_quote(self) -> None:
        assert escape_field('5" screen') == '"5"" screen"'


class TestToText:
    """Numbers and flags print the way the roster displays them."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (50000, "50000"),
            (50000.0, "50000"),
            (71.5, "71.5"),
            (True, "true"),
            (False, "false"),
            (float("nan"), "NaN"),
        ],
    )
    def test_text_forms(self, value, expected: str) -> None:
        assert to_text(value) == expected


class TestExportCsv:
    """Test cases for export_csv."""

    def test_header_and_column_order(self, make_employee) -> None:
        """
        SCENARIO: Export a single active employee
        EXPECTED: Fixed header, row values in matching order
        """
        # Arrange
        record = make_employee(
            employee_id="EMP-1",
            name="Ann Lee",
            email="ann@example.com",
            contact="555-0199",
            address="1 Main St",
            position="Engineer",
            department="Platform",
            income=95000,
            performance=88,
            date_of_birth="1990-02-03",
            joining_date="2018-07-01",
            pay_frequency="Bi-weekly",
        )

        # Act
        lines = export_csv([record]).split("\n")

        # Assert
        assert lines[0] == (
            "ID,Name,Email,Contact,Address,Position,Department,Status,"
            "Annual Income,Performance,Date of Birth,Joining Date,Pay Frequency"
        )
        assert lines[1] == (
            "EMP-1,Ann Lee,ann@example.com,555-0199,1 Main St,Engineer,Platform,"
            "Active,95000,88,1990-02-03,2018-07-01,Bi-weekly"
        )
        assert len(HEADERS) == 13

    def test_inactive_status_label(self, make_employee) -> None:
        row = export_csv([make_employee(is_active=False)]).split("\n")[1]

        assert next(csv.reader([row]))[7] == "Inactive"

    def test_rows_follow_input_order_without_trailing_newline(self, make_employee) -> None:
        records = [make_employee(name="Zed"), make_employee(name="Amy")]

        document = export_csv(records)

        assert not document.endswith("\n")
        assert [line.split(",")[1] for line in document.split("\n")[1:]] == ["Zed", "Amy"]

    def test_document_parses_back_losslessly(self, make_employee) -> None:
        """
        SCENARIO: Fields containing commas, quotes and newlines
        EXPECTED: csv.reader recovers every field value
        """
        record = make_employee(
            name='Jane, "Doe"',
            address="12 Elm St,\nApt 4",
            position='Lead "Ops"',
        )

        rows = list(csv.reader(io.StringIO(export_csv([record]))))

        assert rows[1][1] == 'Jane, "Doe"'
        assert rows[1][4] == "12 Elm St,\nApt 4"
        assert rows[1][5] == 'Lead "Ops"'
        assert len(rows) == 2

    def test_empty_input_raises(self) -> None:
        """
        SCENARIO: Export with zero records
        EXPECTED: EmptyInputError, distinct from ExportFailureError
        """
        with pytest.raises(EmptyInputError) as exc_info:
            export_csv([])

        assert not isinstance(exc_info.value, ExportFailureError)
        assert isinstance(exc_info.value, ExportError)

    def test_unexpected_failure_is_wrapped(self, make_employee) -> None:
        """
        SCENARIO: Row formatting raises unexpectedly
        EXPECTED: ExportFailureError with the original cause preserved
        """
        cause = RuntimeError("boom")

        with patch(
            "roster_manager.export.csv_exporter.format_row", side_effect=cause
        ):
            with pytest.raises(ExportFailureError) as exc_info:
                export_csv([make_employee()])

        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause


class TestBuildArtifact:
    """Test cases for artifact packaging."""

    def test_packages_utf8_csv(self, make_employee) -> None:
        record = make_employee(name="Zoë")

        artifact = build_artifact([record])

        assert artifact.filename == "employees.csv"
        assert artifact.mime_type.startswith("text/csv")
        assert artifact.content == export_csv([record]).encode("utf-8")
        assert "Zoë" in artifact.text

    def test_uses_configured_filename(self, make_employee) -> None:
        artifact = build_artifact([make_employee()], ExportConfig(filename="team.csv"))

        assert artifact.filename == "team.csv"

    def test_empty_input_produces_no_artifact(self) -> None:
        with pytest.raises(EmptyInputError):
            build_artifact([])
