"""
Conversions of an elapsed time interval (timedelta or seconds) into other units.
"""

from datetime import timedelta
from typing import Union

from datehelper.config.constants import (
    SECONDS_PER_MINUTE,
    SECONDS_PER_HOUR,
    SECONDS_PER_DAY,
    SECONDS_PER_WEEK,
)


IntervalLike = Union[timedelta, int, float]


def _total_seconds(interval: IntervalLike) -> float:
    if isinstance(interval, timedelta):
        return interval.total_seconds()
    return float(interval)


def interval_seconds(interval: IntervalLike) -> int:
    """Whole number of seconds, truncated toward zero."""
    return int(_total_seconds(interval))


def interval_minutes(interval: IntervalLike) -> float:
    return _total_seconds(interval) / SECONDS_PER_MINUTE


def interval_hours(interval: IntervalLike) -> float:
    return _total_seconds(interval) / SECONDS_PER_HOUR


def interval_days(interval: IntervalLike) -> float:
    return _total_seconds(interval) / SECONDS_PER_DAY


def interval_weeks(interval: IntervalLike) -> float:
    return _total_seconds(interval) / SECONDS_PER_WEEK
