"""
Validation Package - Query parameter validation.

    - QueryValidator: Builds RosterQuery values from raw input
    - QueryValidationError: Raised with the offending field name
"""

from roster_manager.validation.query_validator import (
    QueryValidationError,
    QueryValidator,
)

__all__ = ["QueryValidationError", "QueryValidator"]
