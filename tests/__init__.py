"""
Test Suite for Roster Manager.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Pipeline and session tests across components
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/roster_manager         # With coverage
"""
