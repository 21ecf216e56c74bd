"""
Date-time interval models: a number of calendar units, optionally bound to a calendar.

Intervals are the right-hand operand of calendar arithmetic:

    >>> from datetime import datetime
    >>> datetime(2024, 1, 31, 9, 0) + DateTimeInterval.months(1)   # device calendar
    >>> deadline - DateTimeIntervalWithCalendar.days(3, islamic_calendar())
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from datehelper.calendars.calendar import Calendar
from datehelper.config.constants import IntervalUnit


class DateTimeInterval(BaseModel):
    """A number of calendar units, computed with the device's current calendar"""

    model_config = ConfigDict(frozen=True)

    unit: IntervalUnit = Field(description="Calendar granularity")
    value: int = Field(description="Signed magnitude; negative moves the other way")

    @classmethod
    def seconds(cls, value: int) -> "DateTimeInterval":
        return cls(unit=IntervalUnit.SECONDS, value=value)

    @classmethod
    def minutes(cls, value: int) -> "DateTimeInterval":
        return cls(unit=IntervalUnit.MINUTES, value=value)

    @classmethod
    def hours(cls, value: int) -> "DateTimeInterval":
        return cls(unit=IntervalUnit.HOURS, value=value)

    @classmethod
    def days(cls, value: int) -> "DateTimeInterval":
        return cls(unit=IntervalUnit.DAYS, value=value)

    @classmethod
    def weeks(cls, value: int) -> "DateTimeInterval":
        return cls(unit=IntervalUnit.WEEKS, value=value)

    @classmethod
    def months(cls, value: int) -> "DateTimeInterval":
        return cls(unit=IntervalUnit.MONTHS, value=value)

    @classmethod
    def years(cls, value: int) -> "DateTimeInterval":
        return cls(unit=IntervalUnit.YEARS, value=value)

    def __radd__(self, other):
        if not isinstance(other, datetime):
            return NotImplemented
        from datehelper.dates.arithmetic import add_interval
        return add_interval(other, self)

    def __rsub__(self, other):
        if not isinstance(other, datetime):
            return NotImplemented
        from datehelper.dates.arithmetic import subtract_interval
        return subtract_interval(other, self)


class DateTimeIntervalWithCalendar(DateTimeInterval):
    """A number of calendar units, computed with the carried calendar"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    calendar: Calendar = Field(description="Calendar the arithmetic is anchored to")

    @classmethod
    def seconds(cls, value: int, calendar: Calendar) -> "DateTimeIntervalWithCalendar":
        return cls(unit=IntervalUnit.SECONDS, value=value, calendar=calendar)

    @classmethod
    def minutes(cls, value: int, calendar: Calendar) -> "DateTimeIntervalWithCalendar":
        return cls(unit=IntervalUnit.MINUTES, value=value, calendar=calendar)

    @classmethod
    def hours(cls, value: int, calendar: Calendar) -> "DateTimeIntervalWithCalendar":
        return cls(unit=IntervalUnit.HOURS, value=value, calendar=calendar)

    @classmethod
    def days(cls, value: int, calendar: Calendar) -> "DateTimeIntervalWithCalendar":
        return cls(unit=IntervalUnit.DAYS, value=value, calendar=calendar)

    @classmethod
    def weeks(cls, value: int, calendar: Calendar) -> "DateTimeIntervalWithCalendar":
        return cls(unit=IntervalUnit.WEEKS, value=value, calendar=calendar)

    @classmethod
    def months(cls, value: int, calendar: Calendar) -> "DateTimeIntervalWithCalendar":
        return cls(unit=IntervalUnit.MONTHS, value=value, calendar=calendar)

    @classmethod
    def years(cls, value: int, calendar: Calendar) -> "DateTimeIntervalWithCalendar":
        return cls(unit=IntervalUnit.YEARS, value=value, calendar=calendar)
