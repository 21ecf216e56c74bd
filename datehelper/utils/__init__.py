"""
Utility modules for datehelper.

This package contains cross-cutting utility modules: error handling, logging
setup, weekday numbering conversion and elapsed-interval conversions.
"""

from .error_handlers import (
    DateHelperError,
    ConfigurationError,
    CalendarComputationError,
    DateParsingError,
    IntervalError,
    safe_compute,
)
from .logging_config import setup_logging, setup_module_logger, configure_third_party_loggers
from .weekday_converter import (
    python_weekday_to_calendar,
    weekday_from_date,
)
from .time_interval import (
    interval_seconds,
    interval_minutes,
    interval_hours,
    interval_days,
    interval_weeks,
)

__all__ = [
    # Error handling
    "DateHelperError",
    "ConfigurationError",
    "CalendarComputationError",
    "DateParsingError",
    "IntervalError",
    "safe_compute",
    # Logging
    "setup_logging",
    "setup_module_logger",
    "configure_third_party_loggers",
    # Weekday conversion
    "python_weekday_to_calendar",
    "weekday_from_date",
    # Elapsed intervals
    "interval_seconds",
    "interval_minutes",
    "interval_hours",
    "interval_days",
    "interval_weeks",
]
