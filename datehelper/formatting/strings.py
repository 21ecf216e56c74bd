"""
String conversion helpers built on DateFormatter.

    >>> date_from_string("2018/11/30 12:00", time_zone="UTC")
    datetime.datetime(2018, 11, 30, 12, 0, tzinfo=zoneinfo.ZoneInfo(key='UTC'))
    >>> date_to_string(datetime(2018, 11, 30), "EEEE, MMM d")
    'Friday, Nov 30'
"""

from datetime import datetime, timezone
from typing import Optional

from datehelper.calendars.calendar import Calendar
from datehelper.calendars.locale import LocaleLike
from datehelper.calendars.timezone import TimeZoneLike
from datehelper.config.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE, SHORT_DATE_FORMAT
from datehelper.config.settings import get_settings
from datehelper.formatting.formatter import DateFormatter, StyleLike


def date_from_string(string: str, date_format: Optional[str] = None,
                     time_zone: Optional[TimeZoneLike] = None,
                     calendar: Optional[Calendar] = None,
                     locale: Optional[LocaleLike] = None) -> Optional[datetime]:
    """
    Creates a date from a string.

    Args:
        string: Text to parse
        date_format: LDML pattern (default: DATEHELPER_DATE_FORMAT, "yyyy/MM/dd HH:mm")
        time_zone: Zone the wall-clock text is read in (default: device zone)
        calendar: Calendar system of the text (default: device calendar)
        locale: Locale for month and period names (default: device locale)

    Returns:
        The date, or None if the string is empty or does not match the pattern
    """
    if date_format is None:
        date_format = get_settings().formatting.date_format

    formatter = DateFormatter(date_format, time_zone=time_zone, calendar=calendar, locale=locale)
    return formatter.date_from(string)


def date_to_string(value: datetime, date_format: str,
                   time_zone: Optional[TimeZoneLike] = None,
                   calendar: Optional[Calendar] = None,
                   locale: Optional[LocaleLike] = None) -> str:
    """Formats the date to a string using an LDML pattern."""
    formatter = DateFormatter(date_format, time_zone=time_zone, calendar=calendar, locale=locale)
    return formatter.string_from(value)


def date_to_styled_string(value: datetime, date_style: StyleLike,
                          time_style: Optional[StyleLike] = None,
                          time_zone: Optional[TimeZoneLike] = None,
                          calendar: Optional[Calendar] = None,
                          locale: Optional[LocaleLike] = None) -> str:
    """
    Formats the date to a string using the locale's predefined styles.

        >>> date_to_styled_string(datetime(2018, 11, 30, 14, 5), "medium", "short", locale="en_US")
        'Nov 30, 2018, 2:05 PM'
    """
    formatter = DateFormatter.styled(
        date_style, time_style, time_zone=time_zone, calendar=calendar, locale=locale
    )
    return formatter.string_from(value)


def short_string(value: datetime, time_zone: Optional[TimeZoneLike] = None,
                 calendar: Optional[Calendar] = None,
                 locale: Optional[LocaleLike] = None) -> str:
    """Formats the date as yyyy-MM-dd."""
    return date_to_string(value, SHORT_DATE_FORMAT, time_zone=time_zone, calendar=calendar, locale=locale)


def timer_string(value: datetime, from_date: Optional[datetime] = None,
                 positive_prefix: Optional[str] = None,
                 now: Optional[datetime] = None) -> str:
    """
    Formats the time elapsed since from_date as HH:mm:ss.

    The prefix is shown when the date lies before from_date; a date after
    it renders without a sign. Hours are not capped at 24.

    Args:
        value: Target date
        from_date: Start of the countdown (default: now)
        positive_prefix: Prefix used when the date precedes from_date (default: DATEHELPER_TIMER_PREFIX, "+")
        now: Instant used when from_date is omitted

    Returns:
        String such as "+01:02:03"
    """
    if positive_prefix is None:
        positive_prefix = get_settings().formatting.timer_positive_prefix
    if from_date is None:
        from_date = now if now is not None else datetime.now(timezone.utc)

    # Naive dates are read as UTC, like the rest of the offset helpers
    start = from_date if from_date.tzinfo is not None else from_date.replace(tzinfo=timezone.utc)
    end = value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)

    seconds = int((end.astimezone(timezone.utc) - start.astimezone(timezone.utc)).total_seconds())
    prefix = positive_prefix if seconds < 0 else ""

    remaining = abs(seconds)
    hours = remaining // SECONDS_PER_HOUR
    minutes = (remaining % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
    secs = remaining % SECONDS_PER_MINUTE

    return "%s%02d:%02d:%02d" % (prefix, hours, minutes, secs)
