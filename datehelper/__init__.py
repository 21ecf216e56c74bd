"""
datehelper - convenience helpers over Python's date/time machinery.

Derived dates (start/end of day or month, yesterday/tomorrow), weekday and
weekend checks, calendar-unit arithmetic and string formatting/parsing, all
computed through a Calendar bound to a time zone and a locale.
"""

__version__ = "1.0.0"

from .utils.error_handlers import (
    DateHelperError,
    ConfigurationError,
    CalendarComputationError,
    DateParsingError,
    IntervalError,
)
from .config.constants import CalendarIdentifier, CalendarUnit, DayOfWeek, FormatterStyle, LanguageDirection
from .calendars import (
    Calendar,
    POSIX_LOCALE,
    POSIX_TIME_ZONE,
    character_direction,
    current_calendar,
    is_current_time_zone,
    islamic_calendar,
    language_name,
    offset_from_current,
)
from .models.components import ComputationResult, DateComponents
from .models.interval import DateTimeInterval, DateTimeIntervalWithCalendar
from .dates import (
    add_interval,
    subtract_interval,
    try_add_interval,
    try_subtract_interval,
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
from .formatting import (
    DateFormatter,
    date_from_string,
    date_to_string,
    date_to_styled_string,
    short_string,
    timer_string,
)

__all__ = [
    # Errors
    "DateHelperError",
    "ConfigurationError",
    "CalendarComputationError",
    "DateParsingError",
    "IntervalError",
    # Enumerations
    "CalendarIdentifier",
    "CalendarUnit",
    "DayOfWeek",
    "FormatterStyle",
    "LanguageDirection",
    # Calendars, time zones and locales
    "Calendar",
    "POSIX_LOCALE",
    "POSIX_TIME_ZONE",
    "character_direction",
    "current_calendar",
    "is_current_time_zone",
    "islamic_calendar",
    "language_name",
    "offset_from_current",
    # Models
    "ComputationResult",
    "DateComponents",
    "DateTimeInterval",
    "DateTimeIntervalWithCalendar",
    # Arithmetic
    "add_interval",
    "subtract_interval",
    "try_add_interval",
    "try_subtract_interval",
    # Queries and derivations
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
    # String conversion
    "DateFormatter",
    "date_from_string",
    "date_to_string",
    "date_to_styled_string",
    "short_string",
    "timer_string",
]
