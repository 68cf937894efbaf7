"""
Query Validator - Validate user-supplied query parameters.

Turns raw values from the user interface (plain strings) into a RosterQuery:
    - Sort key is an orderable employee field
    - Sort order is "asc" or "desc"
    - Category filters are non-empty strings and never a match-all label
      other than the configured one for that filter
    - Match-all labels on the query equal the configured labels

Design Notes:
    - Fail-fast principle
    - All problems reported together, with the first offending field
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Set, Tuple

from roster_manager.config.models import RosterConfig
from roster_manager.domain.entities import SortKey, SortOrder
from roster_manager.domain.value_objects import (
    ALL_DEPARTMENTS,
    ALL_POSITIONS,
    RosterQuery,
)
from roster_manager.sorting.comparator import FIELD_TYPES

logger = logging.getLogger(__name__)

_FIELD_ALIASES = {
    "employeeId": SortKey.EMPLOYEE_ID,
    "isActive": SortKey.IS_ACTIVE,
    "dateOfBirth": SortKey.DATE_OF_BIRTH,
    "joiningDate": SortKey.JOINING_DATE,
    "payFrequency": SortKey.PAY_FREQUENCY,
}


class QueryValidationError(Exception):
    """Raised when query validation fails."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class QueryValidator:
    """Validates and normalises query parameters."""

    def __init__(self, config: Optional[RosterConfig] = None) -> None:
        self.config = config or RosterConfig()

    def default_query(self) -> RosterQuery:
        """The query a new session starts with."""
        q = self.config.query
        return RosterQuery(
            search_term="",
            department_filter=q.all_departments_label,
            position_filter=q.all_positions_label,
            all_departments_label=q.all_departments_label,
            all_positions_label=q.all_positions_label,
            sort_key=q.default_sort_key,
            sort_order=q.default_sort_order,
        )

    def parse_sort_key(self, value: Any) -> SortKey:
        key, error = self._sort_key(value)
        if error:
            raise QueryValidationError(error, field="sort_key")
        return key

    def parse_sort_order(self, value: Any) -> SortOrder:
        order, error = self._sort_order(value)
        if error:
            raise QueryValidationError(error, field="sort_order")
        return order

    def build(self, params: Mapping[str, Any]) -> RosterQuery:
        """
        Build a query from raw parameters, filling defaults.

        Args:
            params: Any of search_term, department_filter, position_filter,
                    sort_key, sort_order and the two match-all labels

        Raises:
            QueryValidationError: If any parameter is invalid
        """
        base = self.default_query()
        errors: List[Tuple[str, str]] = []

        search_term = params.get("search_term", base.search_term)
        if not isinstance(search_term, str):
            errors.append(("search_term", "search_term must be a string"))

        for label_name in ("all_departments_label", "all_positions_label"):
            configured = getattr(base, label_name)
            if params.get(label_name, configured) != configured:
                errors.append(
                    (label_name, f"{label_name} must be the configured {configured!r}")
                )

        filters = {}
        for name, label_name in (
            ("department_filter", "all_departments_label"),
            ("position_filter", "all_positions_label"),
        ):
            value = params.get(name, getattr(base, name))
            if not isinstance(value, str) or not value:
                errors.append((name, f"{name} must be a non-empty string"))
            elif value in self._foreign_labels(getattr(base, label_name)):
                errors.append((name, f"{name} {value!r} is not a label for this filter"))
            filters[name] = value

        sort_key, key_error = self._sort_key(params.get("sort_key", base.sort_key))
        if key_error:
            errors.append(("sort_key", key_error))

        sort_order, order_error = self._sort_order(
            params.get("sort_order", base.sort_order)
        )
        if order_error:
            errors.append(("sort_order", order_error))

        if errors:
            message = "; ".join(msg for _, msg in errors)
            logger.error(f"Query validation failed: {message}")
            raise QueryValidationError(message, field=errors[0][0])

        return RosterQuery(
            search_term=search_term,
            all_departments_label=base.all_departments_label,
            all_positions_label=base.all_positions_label,
            sort_key=sort_key,
            sort_order=sort_order,
            **filters,
        )

    def _foreign_labels(self, own: str) -> Set[str]:
        """Match-all labels, built-in or configured, that belong elsewhere."""
        q = self.config.query
        labels = {
            ALL_DEPARTMENTS,
            ALL_POSITIONS,
            q.all_departments_label,
            q.all_positions_label,
        }
        return labels - {own}

    def _sort_key(self, value: Any) -> Tuple[Optional[SortKey], Optional[str]]:
        if isinstance(value, SortKey):
            key = value
        elif isinstance(value, str) and value in _FIELD_ALIASES:
            key = _FIELD_ALIASES[value]
        else:
            try:
                key = SortKey(value)
            except ValueError:
                supported = ", ".join(k.value for k in SortKey)
                return None, f"Unknown sort key {value!r}. Supported: {supported}"
        if key not in FIELD_TYPES:
            return None, f"Sort key {key.value} has no comparator"
        return key, None

    def _sort_order(self, value: Any) -> Tuple[Optional[SortOrder], Optional[str]]:
        try:
            return SortOrder(value), None
        except ValueError:
            return None, f"Unknown sort order {value!r}. Use 'asc' or 'desc'"
