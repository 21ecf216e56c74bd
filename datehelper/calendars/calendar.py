"""
Calendar engine adapter.

A Calendar binds a calendar system to a time zone and a locale and answers the
questions the rest of the library delegates: component extraction and
construction, "add N units", start of day/week, weekend classification and
granularity equality. The heavy lifting is done by established libraries:

- zoneinfo for wall-clock <-> instant conversion (DST rules)
- dateutil.relativedelta for Gregorian month/year arithmetic
- hijridate for the Umm al-Qura Islamic calendar
- babel for locale rules (first weekday, weekend, month names)

Computations that cannot produce a value (out-of-range years, dates outside
the Umm al-Qura tables) return None, mirroring an optional result; callers
decide the fallback.
"""

import functools
import logging
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Dict, Iterable, Optional, Tuple, Union

from babel import Locale
from babel.dates import get_month_names
from dateutil.relativedelta import relativedelta
from hijridate import Gregorian, Hijri

from datehelper.config.constants import (
    CalendarIdentifier,
    CalendarUnit,
    DayOfWeek,
    HIJRI_MONTH_NAME_LANGUAGES,
)
from datehelper.config.settings import get_settings
from datehelper.calendars.locale import LocaleLike, current_locale, get_locale
from datehelper.calendars.timezone import TimeZoneLike, current_time_zone, get_time_zone
from datehelper.models.components import DateComponents
from datehelper.utils.error_handlers import (
    COMPUTATION_ERRORS,
    ConfigurationError,
    safe_compute,
)
from datehelper.utils.weekday_converter import python_weekday_to_calendar, weekday_from_date


logger = logging.getLogger(__name__)


# Coarsest to finest; granularity equality compares every unit up to the requested one
GRANULARITY_ORDER = (
    CalendarUnit.YEAR,
    CalendarUnit.MONTH,
    CalendarUnit.DAY,
    CalendarUnit.HOUR,
    CalendarUnit.MINUTE,
    CalendarUnit.SECOND,
)

ABSOLUTE_UNITS = {
    CalendarUnit.SECOND: "seconds",
    CalendarUnit.MINUTE: "minutes",
    CalendarUnit.HOUR: "hours",
}

DEFAULT_COMPONENTS = frozenset(set(CalendarUnit) - {CalendarUnit.WEEK_OF_YEAR})


class Calendar:
    """
    A calendar system bound to a time zone and a locale.

    Omitted time zone and locale default to the device's current ones at
    construction time. Settings never change after construction.

        >>> cal = Calendar("gregorian", time_zone="Europe/Paris", locale="fr_FR")
        >>> cal.first_weekday
        2
    """

    __slots__ = ("_identifier", "_time_zone", "_locale")

    def __init__(
        self,
        identifier: Union[str, CalendarIdentifier] = CalendarIdentifier.GREGORIAN,
        time_zone: Optional[TimeZoneLike] = None,
        locale: Optional[LocaleLike] = None,
    ) -> None:
        try:
            self._identifier = CalendarIdentifier(identifier)
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown calendar identifier: {identifier}",
                config_key="identifier",
                config_value=identifier
            ) from e

        self._time_zone: tzinfo = get_time_zone(time_zone) if time_zone is not None else current_time_zone()
        self._locale: Locale = get_locale(locale) if locale is not None else current_locale()

    @classmethod
    def current(cls) -> "Calendar":
        """The device's current calendar, re-read from settings on every call."""
        return cls(get_settings().calendar.identifier)

    def replace(self, time_zone: Optional[TimeZoneLike] = None,
                locale: Optional[LocaleLike] = None) -> "Calendar":
        """A new calendar of the same system with the given overrides applied."""
        return Calendar(
            self._identifier,
            time_zone=time_zone if time_zone is not None else self._time_zone,
            locale=locale if locale is not None else self._locale,
        )

    # ── settings ─────────────────────────────────────────────────────────

    @property
    def identifier(self) -> CalendarIdentifier:
        return self._identifier

    @property
    def time_zone(self) -> tzinfo:
        return self._time_zone

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def is_islamic(self) -> bool:
        return self._identifier is CalendarIdentifier.ISLAMIC_UMM_AL_QURA

    @property
    def first_weekday(self) -> int:
        """First day of the week in Sunday=1 numbering."""
        if self._identifier is CalendarIdentifier.ISO8601:
            return DayOfWeek.MONDAY.value
        return python_weekday_to_calendar(self._locale.first_week_day)

    # ── wall clock ───────────────────────────────────────────────────────

    def localize(self, value: datetime) -> datetime:
        """Express a date in this calendar's time zone; naive dates are wall-clock time here."""
        if value.tzinfo is None:
            return value.replace(tzinfo=self._time_zone)
        return value.astimezone(self._time_zone)

    def _to_wall(self, value: datetime) -> datetime:
        return self.localize(value).replace(tzinfo=None)

    def _from_wall(self, wall: datetime) -> datetime:
        # Round trip through UTC so wall times inside a DST gap land on a real instant
        aware = wall.replace(tzinfo=self._time_zone)
        return aware.astimezone(timezone.utc).astimezone(self._time_zone)

    def _ymd(self, day: date) -> Tuple[int, int, int]:
        if self.is_islamic:
            hijri = Gregorian(day.year, day.month, day.day).to_hijri()
            return hijri.year, hijri.month, hijri.day
        return day.year, day.month, day.day

    def _first_of_month(self, year: int, month: int) -> date:
        # Month overflow rolls into the year, in either direction
        year, month_index = divmod(year * 12 + month - 1, 12)
        if self.is_islamic:
            gregorian = Hijri(year, month_index + 1, 1).to_gregorian()
            return date(gregorian.year, gregorian.month, gregorian.day)
        return date(year, month_index + 1, 1)

    def _add_months(self, wall: datetime, months: int) -> datetime:
        if not self.is_islamic:
            return wall + relativedelta(months=months)

        year, month, day = self._ymd(wall.date())
        year, month_index = divmod(year * 12 + month - 1 + months, 12)
        month_length = Hijri(year, month_index + 1, 1).month_length()
        gregorian = Hijri(year, month_index + 1, min(day, month_length)).to_gregorian()
        return datetime.combine(date(gregorian.year, gregorian.month, gregorian.day), wall.time())

    # ── components ───────────────────────────────────────────────────────

    def date_components(self, value: datetime,
                        components: Optional[Iterable[CalendarUnit]] = None) -> DateComponents:
        """
        Extract calendar components of a date.

        Args:
            value: Date to decompose
            components: Units to extract (default: every unit plus microseconds)

        Returns:
            DateComponents with the requested fields set

        Raises:
            CalendarComputationError: If the date is outside the calendar's supported range
        """
        units = set(components) if components is not None else DEFAULT_COMPONENTS
        ok, wall = safe_compute(self._to_wall, "date_components", logger, value)
        if not ok:
            raise wall
        fields: Dict[str, int] = {}

        if units & {CalendarUnit.YEAR, CalendarUnit.MONTH, CalendarUnit.DAY}:
            ok, ymd = safe_compute(self._ymd, "date_components", logger, wall.date())
            if not ok:
                raise ymd
            year, month, day = ymd
            if CalendarUnit.YEAR in units:
                fields["year"] = year
            if CalendarUnit.MONTH in units:
                fields["month"] = month
            if CalendarUnit.DAY in units:
                fields["day"] = day

        if CalendarUnit.HOUR in units:
            fields["hour"] = wall.hour
        if CalendarUnit.MINUTE in units:
            fields["minute"] = wall.minute
        if CalendarUnit.SECOND in units:
            fields["second"] = wall.second
        if CalendarUnit.WEEKDAY in units:
            fields["weekday"] = weekday_from_date(wall)
        if components is None:
            fields["microsecond"] = wall.microsecond

        return DateComponents(**fields)

    def date_from_components(self, components: DateComponents) -> Optional[datetime]:
        """
        Build a date from components, normalizing out-of-range values.

        Missing fields default to the start of their range (year 1, month 1,
        day 1, midnight). Overflowing or negative fields roll over, so
        second=-3600 means "one hour before the given minute".

        Returns:
            The date, or None if it cannot be represented
        """
        def build() -> datetime:
            first = self._first_of_month(
                components.year if components.year is not None else 1,
                components.month if components.month is not None else 1,
            )
            wall = datetime.combine(first, time()) + timedelta(
                days=(components.day if components.day is not None else 1) - 1,
                hours=components.hour or 0,
                minutes=components.minute or 0,
                seconds=components.second or 0,
                microseconds=components.microsecond or 0,
            )
            return self._from_wall(wall)

        ok, result = safe_compute(build, "date_from_components", logger)
        return result if ok else None

    # ── arithmetic ───────────────────────────────────────────────────────

    def date_by_adding(self, unit: CalendarUnit, value: int, to: datetime) -> Optional[datetime]:
        """
        Add a number of calendar units to a date.

        Seconds, minutes and hours are elapsed time. Days, weeks, months and
        years move the wall clock, so the local time of day is kept across
        DST transitions; month and year steps clamp the day to the target
        month's length.

        Returns:
            The new date, or None if the result cannot be represented
        """
        def compute() -> datetime:
            local = self.localize(to)
            if unit in ABSOLUTE_UNITS:
                delta = timedelta(**{ABSOLUTE_UNITS[unit]: value})
                return (local.astimezone(timezone.utc) + delta).astimezone(self._time_zone)

            wall = local.replace(tzinfo=None)
            if unit in (CalendarUnit.DAY, CalendarUnit.WEEKDAY):
                wall = wall + timedelta(days=value)
            elif unit is CalendarUnit.WEEK_OF_YEAR:
                wall = wall + timedelta(days=7 * value)
            elif unit is CalendarUnit.MONTH:
                wall = self._add_months(wall, value)
            elif unit is CalendarUnit.YEAR:
                wall = self._add_months(wall, 12 * value)
            return self._from_wall(wall)

        ok, result = safe_compute(compute, f"date_by_adding({unit.value}, {value})", logger)
        return result if ok else None

    def date_by_adding_components(self, to: datetime, years: int = 0, months: int = 0,
                                  days: int = 0, hours: int = 0, minutes: int = 0,
                                  seconds: int = 0) -> Optional[datetime]:
        """Add several units at once, largest unit first."""
        ok, result = safe_compute(self.localize, "date_by_adding_components", logger, to)
        if not ok:
            return None
        steps = (
            (CalendarUnit.YEAR, years),
            (CalendarUnit.MONTH, months),
            (CalendarUnit.DAY, days),
            (CalendarUnit.HOUR, hours),
            (CalendarUnit.MINUTE, minutes),
            (CalendarUnit.SECOND, seconds),
        )
        for unit, amount in steps:
            if amount:
                result = self.date_by_adding(unit, amount, result)
                if result is None:
                    return None
        return result

    # ── boundaries ───────────────────────────────────────────────────────

    def start_of_day(self, value: datetime) -> Optional[datetime]:
        """First instant of the calendar day containing the date."""
        def compute() -> datetime:
            wall = self._to_wall(value)
            return self._from_wall(datetime.combine(wall.date(), time()))

        ok, result = safe_compute(compute, "start_of_day", logger)
        return result if ok else None

    def start_of_week(self, value: datetime) -> Optional[datetime]:
        """First instant of the week containing the date, per first_weekday."""
        day_start = self.start_of_day(value)
        if day_start is None:
            return None

        try:
            weekday = self.date_components(day_start, [CalendarUnit.WEEKDAY]).weekday
        except COMPUTATION_ERRORS as e:
            logger.debug(f"start_of_week produced no value: {str(e)}")
            return None

        days_back = (weekday - self.first_weekday) % 7
        return self.date_by_adding(CalendarUnit.DAY, -days_back, day_start)

    # ── classification ───────────────────────────────────────────────────

    def is_date_in_weekend(self, value: datetime) -> bool:
        """Weekend rule of the calendar's locale (Saturday-Sunday, Friday-Saturday, ...)."""
        try:
            weekday = self._to_wall(value).weekday()
        except COMPUTATION_ERRORS as e:
            logger.debug(f"Weekend check uses the date's own weekday: {str(e)}")
            weekday = value.weekday()
        start = self._locale.weekend_start
        end = self._locale.weekend_end

        if start <= end:
            return start <= weekday <= end
        return weekday >= start or weekday <= end

    def is_date(self, value: datetime, equal_to: datetime, granularity: CalendarUnit) -> bool:
        """
        Whether two dates fall in the same calendar unit.

        Args:
            value: First date
            equal_to: Second date
            granularity: YEAR, MONTH, WEEK_OF_YEAR, DAY, HOUR, MINUTE or SECOND

        Raises:
            ValueError: If the granularity cannot be compared
        """
        if granularity is CalendarUnit.WEEK_OF_YEAR:
            week = self.start_of_week(value)
            return week is not None and week == self.start_of_week(equal_to)

        if granularity not in GRANULARITY_ORDER:
            raise ValueError(f"Invalid granularity: {granularity}. Must be one of "
                             f"{[unit.value for unit in GRANULARITY_ORDER + (CalendarUnit.WEEK_OF_YEAR,)]}")

        units = GRANULARITY_ORDER[:GRANULARITY_ORDER.index(granularity) + 1]
        try:
            left = self.date_components(value, units)
            right = self.date_components(equal_to, units)
        except COMPUTATION_ERRORS as e:
            logger.debug(f"Granularity comparison failed: {str(e)}")
            return False

        return left == right

    def is_date_in_today(self, value: datetime, now: datetime) -> bool:
        return self.is_date(value, equal_to=now, granularity=CalendarUnit.DAY)

    def is_date_in_yesterday(self, value: datetime, now: datetime) -> bool:
        yesterday = self.date_by_adding(CalendarUnit.DAY, -1, now)
        return yesterday is not None and self.is_date(value, equal_to=yesterday, granularity=CalendarUnit.DAY)

    def is_date_in_tomorrow(self, value: datetime, now: datetime) -> bool:
        tomorrow = self.date_by_adding(CalendarUnit.DAY, 1, now)
        return tomorrow is not None and self.is_date(value, equal_to=tomorrow, granularity=CalendarUnit.DAY)

    # ── symbols ──────────────────────────────────────────────────────────

    def month_symbols(self, width: str = "wide") -> Dict[int, str]:
        """
        Month names keyed 1..12 for the calendar's locale.

        The Umm al-Qura calendar has a single name per month, available in
        English, Arabic and Bengali; other locales get the English names.
        """
        if not self.is_islamic:
            return dict(get_month_names(width, context="format", locale=self._locale))

        language = self._locale.language if self._locale.language in HIJRI_MONTH_NAME_LANGUAGES else "en"
        names = {month: Hijri(1445, month, 1).month_name(language) for month in range(1, 13)}
        if width == "narrow":
            return {month: name[:1] for month, name in names.items()}
        return names

    # ── dunder ───────────────────────────────────────────────────────────

    def _key(self) -> tuple:
        return self._identifier, str(self._time_zone), str(self._locale)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Calendar(identifier={self._identifier.value!r}, "
            f"time_zone={str(self._time_zone)!r}, "
            f"locale={str(self._locale)!r})"
        )


def current_calendar() -> Calendar:
    """The device's current calendar; never cached."""
    return Calendar.current()


@functools.lru_cache(maxsize=None)
def islamic_calendar() -> Calendar:
    """
    Process-wide Umm al-Qura calendar, built on first use.

    Immutable once built, so it is shared without locking.
    """
    logger.debug("Initializing shared Umm al-Qura calendar")
    return Calendar(CalendarIdentifier.ISLAMIC_UMM_AL_QURA)
