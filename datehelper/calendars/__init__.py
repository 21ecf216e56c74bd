"""
Calendar, time-zone and locale helpers.
"""

from .calendar import Calendar, current_calendar, islamic_calendar
from .locale import POSIX_LOCALE, character_direction, current_locale, get_locale, language_name
from .timezone import (
    POSIX_TIME_ZONE,
    current_time_zone,
    get_time_zone,
    is_current_time_zone,
    offset_from_current,
    seconds_from_gmt,
)

__all__ = [
    "Calendar",
    "current_calendar",
    "islamic_calendar",
    "POSIX_LOCALE",
    "character_direction",
    "current_locale",
    "get_locale",
    "language_name",
    "POSIX_TIME_ZONE",
    "current_time_zone",
    "get_time_zone",
    "is_current_time_zone",
    "offset_from_current",
    "seconds_from_gmt",
]
