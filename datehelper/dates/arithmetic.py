"""
Calendar arithmetic: add or subtract a date-time interval.

    >>> add_interval(datetime(2024, 1, 31, 9, 0), DateTimeInterval.months(1))     # 2024-02-29 09:00
    >>> subtract_interval(datetime(2024, 3, 10), DateTimeInterval.weeks(2))        # 2024-02-25 00:00

Plain intervals use the device's current calendar; calendar-scoped intervals
use the calendar they carry. When the calendar cannot compute a result the
original date is returned; try_add_interval / try_subtract_interval expose
the failure reason instead.
"""

import logging
from datetime import datetime
from typing import Tuple

from datehelper.calendars.calendar import Calendar
from datehelper.config.constants import CalendarUnit, INTERVAL_DISPATCH
from datehelper.models.components import ComputationResult
from datehelper.models.interval import DateTimeInterval, DateTimeIntervalWithCalendar
from datehelper.utils.error_handlers import IntervalError, validate_and_raise


logger = logging.getLogger(__name__)


def _resolve(interval: DateTimeInterval) -> Tuple[Calendar, CalendarUnit, int]:
    """Map an interval onto (calendar, calendar unit, magnitude)."""
    validate_and_raise(
        isinstance(interval, DateTimeInterval), IntervalError,
        "Right-hand operand must be a DateTimeInterval", operand=interval
    )

    unit, multiplier = INTERVAL_DISPATCH[interval.unit]
    if isinstance(interval, DateTimeIntervalWithCalendar):
        calendar = interval.calendar
    else:
        calendar = Calendar.current()

    return calendar, unit, interval.value * multiplier


def _apply(value: datetime, interval: DateTimeInterval, sign: int) -> ComputationResult:
    calendar, unit, amount = _resolve(interval)

    if amount == 0:
        return ComputationResult(value=value)

    result = calendar.date_by_adding(unit, sign * amount, value)
    if result is None:
        return ComputationResult(
            error=f"{calendar.identifier.value} calendar cannot add {sign * amount} {unit.value}(s) to {value.isoformat()}"
        )
    return ComputationResult(value=result)


def try_add_interval(value: datetime, interval: DateTimeInterval) -> ComputationResult:
    """Add an interval, reporting failure instead of falling back."""
    return _apply(value, interval, 1)


def try_subtract_interval(value: datetime, interval: DateTimeInterval) -> ComputationResult:
    """Subtract an interval, reporting failure instead of falling back."""
    return _apply(value, interval, -1)


def add_interval(value: datetime, interval: DateTimeInterval) -> datetime:
    """
    Add an interval to a date; returns the original date if the calendar cannot.

    A zero magnitude returns the date untouched.

    Raises:
        IntervalError: If interval is not a DateTimeInterval
    """
    result = try_add_interval(value, interval)
    if not result.succeeded:
        logger.debug(f"add_interval fell back to the original date: {result.error}")
    return result.or_fallback(value)


def subtract_interval(value: datetime, interval: DateTimeInterval) -> datetime:
    """
    Subtract an interval from a date; returns the original date if the calendar cannot.

    A zero magnitude returns the date untouched.

    Raises:
        IntervalError: If interval is not a DateTimeInterval
    """
    result = try_subtract_interval(value, interval)
    if not result.succeeded:
        logger.debug(f"subtract_interval fell back to the original date: {result.error}")
    return result.or_fallback(value)
