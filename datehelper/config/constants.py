"""
Constants and enumerations for the datehelper library.
Calendar identifiers, unit tags, formatter styles and fixed formats.
"""

from enum import Enum
from typing import Dict, FrozenSet


class CalendarIdentifier(str, Enum):
    """Calendar systems understood by the calendar engine"""
    GREGORIAN = "gregorian"
    ISO8601 = "iso8601"
    ISLAMIC_UMM_AL_QURA = "islamic-umalqura"


class CalendarUnit(str, Enum):
    """Calendar component units used for extraction, arithmetic and comparison"""
    YEAR = "year"
    MONTH = "month"
    WEEK_OF_YEAR = "week_of_year"
    DAY = "day"
    WEEKDAY = "weekday"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


class IntervalUnit(str, Enum):
    """Granularity tags of a date-time interval"""
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


class DayOfWeek(int, Enum):
    """Calendar weekday numbering (Sunday=1), shared by every calendar"""
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


class LanguageDirection(str, Enum):
    """Character direction of a language"""
    LEFT_TO_RIGHT = "left-to-right"
    RIGHT_TO_LEFT = "right-to-left"
    TOP_TO_BOTTOM = "top-to-bottom"
    BOTTOM_TO_TOP = "bottom-to-top"
    UNKNOWN = "unknown"


class FormatterStyle(str, Enum):
    """Predefined date/time styles resolved through CLDR data"""
    NONE = "none"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    FULL = "full"


# Interval tag -> (calendar unit, multiplier). Every calendar is assumed to have a 7-day week.
INTERVAL_DISPATCH: Dict[IntervalUnit, tuple] = {
    IntervalUnit.SECONDS: (CalendarUnit.SECOND, 1),
    IntervalUnit.MINUTES: (CalendarUnit.MINUTE, 1),
    IntervalUnit.HOURS: (CalendarUnit.HOUR, 1),
    IntervalUnit.DAYS: (CalendarUnit.DAY, 1),
    IntervalUnit.WEEKS: (CalendarUnit.DAY, 7),
    IntervalUnit.MONTHS: (CalendarUnit.MONTH, 1),
    IntervalUnit.YEARS: (CalendarUnit.YEAR, 1),
}

# Components needed to rebuild a wall-clock instant
FULL_COMPONENTS: FrozenSet[CalendarUnit] = frozenset({
    CalendarUnit.YEAR,
    CalendarUnit.MONTH,
    CalendarUnit.DAY,
    CalendarUnit.HOUR,
    CalendarUnit.MINUTE,
    CalendarUnit.SECOND,
})

# Normalizing identifiers
POSIX_LOCALE_IDENTIFIER = "en_US_POSIX"
POSIX_TIME_ZONE_IDENTIFIER = "GMT"
FALLBACK_TIME_ZONE_IDENTIFIER = "UTC"

# Default settings values
DEFAULT_CALENDAR_IDENTIFIER = CalendarIdentifier.GREGORIAN.value
DEFAULT_DATE_FORMAT = "yyyy/MM/dd HH:mm"
SHORT_DATE_FORMAT = "yyyy-MM-dd"
DEFAULT_TIMER_PREFIX = "+"

# Two-digit years below the pivot belong to the 2000s
TWO_DIGIT_YEAR_PIVOT = 69

# Fields missing from a parsed string are taken from this reference day
PARSE_REFERENCE_YEAR = 2000

# Time constants
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_WEEK = 604800

# Friday in the Sunday=1 numbering
JUMUAH_WEEKDAY = DayOfWeek.FRIDAY.value

# Month names of the Umm al-Qura calendar are available in these languages
HIJRI_MONTH_NAME_LANGUAGES = ("en", "ar", "bn")

# Logging constants
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROOT_LOGGER_NAME = "datehelper"
