"""
Utility functions for calendar dates used by the date-validity check.
"""

from datetime import date, datetime
from typing import Any, Optional


def parse_calendar_date(value: Any) -> Optional[date]:
    """
    Parse a configuration or shop date into a calendar date.

    Handles date objects, datetimes and ISO strings ("2025-06-17",
    "2025-06-17T10:00:00Z") gracefully.

    Returns:
        date object, or None if the value is absent or cannot be parsed
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
    except ValueError:
        return None


def is_within_date_range(start: Optional[date], end: Optional[date], today: Optional[date]) -> bool:
    """
    Inclusive date range check; an absent bound is open on that side.

    Without a current date only fully unbounded ranges are valid.
    """
    if start is None and end is None:
        return True
    if today is None:
        return False
    if start is not None and start > today:
        return False
    if end is not None and end < today:
        return False
    return True
