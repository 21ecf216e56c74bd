"""
Date queries, derivations and calendar arithmetic.
"""

from .arithmetic import add_interval, subtract_interval, try_add_interval, try_subtract_interval
from .derivation import (
    end_of_day,
    end_of_month,
    is_between,
    is_beyond,
    is_current_month,
    is_current_week,
    is_current_year,
    is_future,
    is_jumuah,
    is_past,
    is_today,
    is_tomorrow,
    is_weekday,
    is_weekend,
    is_yesterday,
    shift,
    start_of_day,
    start_of_month,
    time_to_decimal,
    tomorrow,
    yesterday,
)

__all__ = [
    "add_interval",
    "subtract_interval",
    "try_add_interval",
    "try_subtract_interval",
    "end_of_day",
    "end_of_month",
    "is_between",
    "is_beyond",
    "is_current_month",
    "is_current_week",
    "is_current_year",
    "is_future",
    "is_jumuah",
    "is_past",
    "is_today",
    "is_tomorrow",
    "is_weekday",
    "is_weekend",
    "is_yesterday",
    "shift",
    "start_of_day",
    "start_of_month",
    "time_to_decimal",
    "tomorrow",
    "yesterday",
]
