"""
Date queries and derivations.

Every function accepts an explicit calendar and, where "now" matters, an
explicit instant. Both default to the device's current values, read on each
call. Derivations never fail visibly: when the calendar cannot produce a
result they return the original date.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from datehelper.calendars.calendar import Calendar
from datehelper.calendars.timezone import TimeZoneLike, is_current_time_zone, offset_from_current
from datehelper.config.constants import (
    CalendarUnit,
    FULL_COMPONENTS,
    JUMUAH_WEEKDAY,
    SECONDS_PER_DAY,
)
from datehelper.utils.error_handlers import COMPUTATION_ERRORS
from datehelper.utils.time_interval import interval_hours, interval_minutes, interval_seconds
from datehelper.utils.weekday_converter import weekday_from_date


logger = logging.getLogger(__name__)


def _calendar(calendar: Optional[Calendar]) -> Calendar:
    return calendar if calendar is not None else Calendar.current()


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def _instant(value: datetime, calendar: Calendar) -> datetime:
    # Naive dates are wall-clock time in the calendar's zone
    return calendar.localize(value) if value.tzinfo is None else value


# ── past / future ─────────────────────────────────────────────────────────

def is_past(value: datetime, calendar: Optional[Calendar] = None,
            now: Optional[datetime] = None) -> bool:
    """
    Determines if date is in the past.

        >>> is_past(datetime.now(timezone.utc) - timedelta(seconds=100))
        True
    """
    calendar = _calendar(calendar)
    return _instant(value, calendar) < _instant(_now(now), calendar)


def is_future(value: datetime, calendar: Optional[Calendar] = None,
              now: Optional[datetime] = None) -> bool:
    """Determines if date is in the future."""
    calendar = _calendar(calendar)
    return _instant(value, calendar) > _instant(_now(now), calendar)


# ── relative days ─────────────────────────────────────────────────────────

def is_today(value: datetime, calendar: Optional[Calendar] = None,
             now: Optional[datetime] = None) -> bool:
    """Determines if date is in today's calendar day."""
    return _calendar(calendar).is_date_in_today(value, _now(now))


def is_yesterday(value: datetime, calendar: Optional[Calendar] = None,
                 now: Optional[datetime] = None) -> bool:
    """Determines if date is in yesterday's calendar day."""
    return _calendar(calendar).is_date_in_yesterday(value, _now(now))


def is_tomorrow(value: datetime, calendar: Optional[Calendar] = None,
                now: Optional[datetime] = None) -> bool:
    """Determines if date is in tomorrow's calendar day."""
    return _calendar(calendar).is_date_in_tomorrow(value, _now(now))


def is_weekday(value: datetime, calendar: Optional[Calendar] = None) -> bool:
    """Determines if date is within a weekday period for the calendar's locale."""
    return not _calendar(calendar).is_date_in_weekend(value)


def is_weekend(value: datetime, calendar: Optional[Calendar] = None) -> bool:
    """Determines if date is within a weekend period for the calendar's locale."""
    return _calendar(calendar).is_date_in_weekend(value)


def is_current_week(value: datetime, calendar: Optional[Calendar] = None,
                    now: Optional[datetime] = None) -> bool:
    return _calendar(calendar).is_date(value, equal_to=_now(now), granularity=CalendarUnit.WEEK_OF_YEAR)


def is_current_month(value: datetime, calendar: Optional[Calendar] = None,
                     now: Optional[datetime] = None) -> bool:
    return _calendar(calendar).is_date(value, equal_to=_now(now), granularity=CalendarUnit.MONTH)


def is_current_year(value: datetime, calendar: Optional[Calendar] = None,
                    now: Optional[datetime] = None) -> bool:
    return _calendar(calendar).is_date(value, equal_to=_now(now), granularity=CalendarUnit.YEAR)


# ── derived dates ─────────────────────────────────────────────────────────

def _raw_day_shift(value: datetime, calendar: Calendar, days: int) -> datetime:
    logger.debug(f"Falling back to a raw {days * SECONDS_PER_DAY}s shift of {value}")
    instant = _instant(value, calendar)
    try:
        return instant + timedelta(seconds=days * SECONDS_PER_DAY)
    except OverflowError as e:
        logger.debug(f"Raw day shift fell back to the original date: {str(e)}")
        return instant


def yesterday(value: datetime, calendar: Optional[Calendar] = None) -> datetime:
    """
    Return yesterday's date at the same wall-clock time.

        >>> yesterday(datetime(2018, 10, 3, 10, 57, 11))  # 2018-10-02 10:57:11
    """
    calendar = _calendar(calendar)
    result = calendar.date_by_adding(CalendarUnit.DAY, -1, value)
    return result if result is not None else _raw_day_shift(value, calendar, -1)


def tomorrow(value: datetime, calendar: Optional[Calendar] = None) -> datetime:
    """
    Return tomorrow's date at the same wall-clock time.

        >>> tomorrow(datetime(2018, 10, 3, 10, 57, 11))  # 2018-10-04 10:57:11
    """
    calendar = _calendar(calendar)
    result = calendar.date_by_adding(CalendarUnit.DAY, 1, value)
    return result if result is not None else _raw_day_shift(value, calendar, 1)


def start_of_day(value: datetime, calendar: Optional[Calendar] = None) -> datetime:
    """
    Returns the beginning of the day.

        >>> start_of_day(datetime(2018, 11, 21, 18, 15))  # 2018-11-21 00:00:00
    """
    calendar = _calendar(calendar)
    return calendar.start_of_day(value) or _instant(value, calendar)


def end_of_day(value: datetime, calendar: Optional[Calendar] = None) -> datetime:
    """
    Returns the end of the day (one second before the next day starts).

        >>> end_of_day(datetime(2018, 11, 21, 18, 15))  # 2018-11-21 23:59:59
    """
    calendar = _calendar(calendar)
    day_start = calendar.start_of_day(value)
    if day_start is None:
        return _instant(value, calendar)

    result = calendar.date_by_adding_components(day_start, days=1, seconds=-1)
    return result or _instant(value, calendar)


def start_of_month(value: datetime, calendar: Optional[Calendar] = None) -> datetime:
    """
    Returns the beginning of the month.

        >>> start_of_month(datetime(2018, 11, 21, 18, 15))  # 2018-11-01 00:00:00
    """
    calendar = _calendar(calendar)
    day_start = calendar.start_of_day(value)
    if day_start is None:
        return _instant(value, calendar)

    try:
        components = calendar.date_components(day_start, [CalendarUnit.YEAR, CalendarUnit.MONTH])
    except COMPUTATION_ERRORS as e:
        logger.debug(f"start_of_month fell back to the original date: {str(e)}")
        return _instant(value, calendar)

    return calendar.date_from_components(components) or _instant(value, calendar)


def end_of_month(value: datetime, calendar: Optional[Calendar] = None) -> datetime:
    """
    Returns the end of the month (one second before the next month starts).

        >>> end_of_month(datetime(2018, 11, 21, 18, 15))  # 2018-11-30 23:59:59
    """
    calendar = _calendar(calendar)
    month_start = start_of_month(value, calendar)

    result = calendar.date_by_adding_components(month_start, months=1, seconds=-1)
    return result or _instant(value, calendar)


# ── comparisons ───────────────────────────────────────────────────────────

def _compare(left: datetime, right: datetime) -> int:
    return (left > right) - (left < right)


def _elapsed(value: datetime, reference: datetime) -> timedelta:
    # Wall-clock difference corrected by the UTC offsets, so no instant leaves datetime's range
    wall = value.replace(tzinfo=None) - reference.replace(tzinfo=None)
    return wall - (value.utcoffset() - reference.utcoffset())


def is_between(value: datetime, date1: datetime, date2: datetime,
               calendar: Optional[Calendar] = None) -> bool:
    """
    Determine if a date is strictly between two other dates.

    The two bounds do not have to be in sequential order.

        >>> now = datetime.now(timezone.utc)
        >>> is_between(now, now + timedelta(seconds=1000), now - timedelta(seconds=1000))
        True
    """
    calendar = _calendar(calendar)
    value, date1, date2 = (_instant(d, calendar) for d in (value, date1, date2))
    return _compare(date1, value) * _compare(value, date2) > 0


def is_beyond(value: datetime, reference: datetime, *,
              seconds: Optional[int] = None,
              minutes: Optional[float] = None,
              hours: Optional[float] = None,
              calendar: Optional[Calendar] = None) -> bool:
    """
    Specifies if the date is beyond a time window after a reference date.

    Exactly one of seconds, minutes or hours must be given. Seconds compare
    whole elapsed seconds; minutes and hours compare fractional values.

        >>> is_beyond(parse("2016/03/22 09:40"), parse("2016/03/22 09:30"), seconds=300)
        True
        >>> is_beyond(parse("2016/03/22 09:40"), parse("2016/03/22 09:30"), minutes=10)
        False

    Raises:
        ValueError: If not exactly one time window is given
    """
    windows = [w for w in (seconds, minutes, hours) if w is not None]
    if len(windows) != 1:
        raise ValueError("Exactly one of seconds, minutes or hours must be given")

    calendar = _calendar(calendar)
    elapsed = _elapsed(_instant(value, calendar), _instant(reference, calendar))

    if seconds is not None:
        return interval_seconds(elapsed) > seconds
    if minutes is not None:
        return interval_minutes(elapsed) > minutes
    return interval_hours(elapsed) > hours


# ── clock readings ────────────────────────────────────────────────────────

def time_to_decimal(value: datetime, calendar: Optional[Calendar] = None) -> float:
    """
    Gets the decimal representation of the time of day.

        >>> time_to_decimal(datetime(2012, 10, 23, 18, 15))
        18.25
    """
    try:
        components = _calendar(calendar).date_components(value, [CalendarUnit.HOUR, CalendarUnit.MINUTE])
        hour = components.hour or 0
        minute = components.minute or 0
    except COMPUTATION_ERRORS as e:
        logger.debug(f"time_to_decimal fell back to the date's own clock: {str(e)}")
        hour, minute = value.hour, value.minute
    return float(hour) + (float(minute) / 60.0)


def is_jumuah(value: datetime, calendar: Optional[Calendar] = None) -> bool:
    """Determines if the date is Friday / Jumuah."""
    try:
        weekday = _calendar(calendar).date_components(value, [CalendarUnit.WEEKDAY]).weekday
    except COMPUTATION_ERRORS as e:
        logger.debug(f"is_jumuah fell back to the date's own weekday: {str(e)}")
        weekday = weekday_from_date(value)
    return weekday == JUMUAH_WEEKDAY


# ── time zones ────────────────────────────────────────────────────────────

def shift(value: datetime, time_zone: TimeZoneLike, calendar: Optional[Calendar] = None,
          now: Optional[datetime] = None) -> datetime:
    """
    Moves the date to the specified time zone.

    The date's full components are recomputed with the seconds field replaced
    by the difference between the device zone and the target zone. Returns
    the date unchanged when the target zone is already the device's zone.

    Args:
        value: Date to shift
        time_zone: The target time zone
        calendar: Calendar used for calculation
        now: Instant at which zone offsets are measured

    Returns:
        The shifted date
    """
    calendar = _calendar(calendar)
    if is_current_time_zone(time_zone, now):
        return _instant(value, calendar)

    try:
        components = calendar.date_components(value, FULL_COMPONENTS)
    except COMPUTATION_ERRORS as e:
        logger.debug(f"shift fell back to the original date: {str(e)}")
        return _instant(value, calendar)

    # Shift from GMT using difference of current and specified time zone
    shifted = components.model_copy(update={"second": -offset_from_current(time_zone, now)})

    return calendar.date_from_components(shifted) or _instant(value, calendar)
