"""
Weekday conversion utilities for datehelper.

This module converts between the two weekday numbering systems in play:
1. Calendar format (Sunday=1, Monday=2, ..., Saturday=7) - used by every Calendar,
   by DateComponents.weekday and by first-weekday settings
2. Python datetime.weekday() (Monday=0, Tuesday=1, ..., Sunday=6) - used by
   datetime and by babel's locale data (first_week_day, weekend_start, weekend_end)
"""

from typing import Dict
from datetime import date
import logging


logger = logging.getLogger(__name__)


# Conversion mapping for quick lookup
PYTHON_WEEKDAY_TO_CALENDAR: Dict[int, int] = {
    0: 2,  # Monday -> 2
    1: 3,  # Tuesday -> 3
    2: 4,  # Wednesday -> 4
    3: 5,  # Thursday -> 5
    4: 6,  # Friday -> 6
    5: 7,  # Saturday -> 7
    6: 1,  # Sunday -> 1
}


def python_weekday_to_calendar(python_day: int) -> int:
    """
    Convert Python datetime.weekday() format (Monday=0) to calendar weekday (Sunday=1).

    Args:
        python_day: Python weekday number (0-6)

    Returns:
        Day number in calendar format (1-7)

    Raises:
        ValueError: If python_day is not in valid range (0-6)

    Examples:
        >>> python_weekday_to_calendar(0)  # Monday
        2
        >>> python_weekday_to_calendar(6)  # Sunday
        1
    """
    if python_day not in PYTHON_WEEKDAY_TO_CALENDAR:
        raise ValueError(f"Invalid Python weekday number: {python_day}. Must be 0-6.")

    return PYTHON_WEEKDAY_TO_CALENDAR[python_day]


def weekday_from_date(value: date, format_type: str = "calendar") -> int:
    """
    Get the weekday number of a date (or wall-clock datetime) in the specified format.

    Args:
        value: date or datetime object
        format_type: Output format ("calendar" or "python")

    Returns:
        Weekday number in the specified format

    Examples:
        >>> weekday_from_date(date(2025, 7, 18), "calendar")  # Friday
        6
        >>> weekday_from_date(date(2025, 7, 18), "python")
        4
    """
    python_weekday = value.weekday()

    if format_type == "python":
        return python_weekday
    elif format_type == "calendar":
        return python_weekday_to_calendar(python_weekday)
    else:
        raise ValueError(f"Invalid format_type: {format_type}. Must be 'calendar' or 'python'.")
