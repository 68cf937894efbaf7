"""
Unit Tests for the package entry point.

Test Aspects Covered:
    ✅ Business Logic: Usage example in the package docstring runs as shown
"""

from __future__ import annotations

import doctest

import roster_manager


class TestPackage:
    """Test cases for the roster_manager package."""

    def test_docstring_example_runs(self) -> None:
        """
        SCENARIO: Run the package docstring example as a doctest
        EXPECTED: Every shown output matches
        """
        result = doctest.testmod(roster_manager, verbose=False)

        assert result.attempted > 0
        assert result.failed == 0
