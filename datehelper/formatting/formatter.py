"""
One-shot date formatter configured with a pattern or a style pair.

Patterns use Unicode LDML field letters ("yyyy/MM/dd HH:mm", "MMM d, h:mm a",
"yyyy-MM-dd'T'HH:mm:ssxxx"). Tokenizing and rendering are delegated to babel;
for the Umm al-Qura calendar the year, month and day fields are filled in from
the Hijri components first. Parsing matches the pattern field by field and
rebuilds the date through the calendar, rejecting anything that does not
round-trip (month 13, February 30, trailing text).
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple, Union

from babel import Locale
from babel.dates import (
    format_datetime,
    get_date_format,
    get_datetime_format,
    get_day_names,
    get_period_names,
    get_time_format,
    get_timezone_name,
    tokenize_pattern,
    untokenize_pattern,
)

from datehelper.calendars.calendar import Calendar
from datehelper.calendars.locale import POSIX_LOCALE, LocaleLike, current_locale, get_locale
from datehelper.calendars.timezone import POSIX_TIME_ZONE, TimeZoneLike, current_time_zone, get_time_zone
from datehelper.config.constants import (
    CalendarIdentifier,
    CalendarUnit,
    FULL_COMPONENTS,
    FormatterStyle,
    PARSE_REFERENCE_YEAR,
    TWO_DIGIT_YEAR_PIVOT,
)
from datehelper.models.components import DateComponents
from datehelper.utils.error_handlers import COMPUTATION_ERRORS, ConfigurationError, DateParsingError


logger = logging.getLogger(__name__)


StyleLike = Union[str, FormatterStyle]

MONTH_WIDTHS = {3: "abbreviated", 4: "wide", 5: "narrow"}
CALENDAR_DATE_FIELDS = frozenset("yuMLd")
NUMERIC_FIELDS = frozenset("dHhKkms")

OFFSET_BASIC = r"[+-]\d{4}"
OFFSET_EXTENDED = r"Z|[+-]\d{2}:\d{2}"
OFFSET_ISO = r"Z|[+-]\d{2}(?::?\d{2})?"
OFFSET_DIGITS = re.compile(r"([+-])(\d{2}):?(\d{2})?")
ZONE_ID = r"[A-Za-z_]+(?:/[A-Za-z0-9_+\-]+)*"


def _untokenize(tokens) -> str:
    parts = []
    for kind, value in tokens:
        # untokenize_pattern leaves literals without field letters unquoted, apostrophes included
        if kind == "chars" and "'" in value:
            parts.append("'%s'" % value.replace("'", "''"))
        else:
            parts.append(untokenize_pattern([(kind, value)]))
    return "".join(parts)


def _numeric(count: int, delimited: bool) -> str:
    # A field followed by a literal may be written shorter than its pattern width
    if count == 1 or delimited:
        return r"\d{1,%d}" % max(count, 2)
    return r"\d{%d}" % count


def _alternation(names) -> str:
    unique = sorted({name for name in names if name}, key=len, reverse=True)
    return "|".join(re.escape(name) for name in unique)


def _resolve_style(style: Optional[StyleLike]) -> FormatterStyle:
    if style is None:
        return FormatterStyle.NONE
    try:
        return FormatterStyle(style)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown formatter style: {style}",
            config_key="style",
            config_value=style
        ) from e


def style_pattern(date_style: StyleLike, time_style: Optional[StyleLike], locale: Locale) -> str:
    """
    Resolve a (date style, time style) pair into an LDML pattern from CLDR data.

        >>> style_pattern("medium", None, Locale.parse("en_US"))
        'MMM d, y'
    """
    date_style = _resolve_style(date_style)
    time_style = _resolve_style(time_style)

    date_part = get_date_format(date_style.value, locale=locale).pattern if date_style is not FormatterStyle.NONE else ""
    time_part = get_time_format(time_style.value, locale=locale).pattern if time_style is not FormatterStyle.NONE else ""

    if date_part and time_part:
        glue = get_datetime_format(date_style.value, locale=locale)
        return glue.replace("{1}", date_part).replace("{0}", time_part)
    return date_part or time_part


class DateFormatter:
    """
    Converts between dates and strings with a fixed configuration.

    Configuration is set once at construction; omitted time zone, calendar
    and locale default to the device's current ones.

        >>> DateFormatter("yyyy/MM/dd").string_from(datetime(2018, 11, 30))
        '2018/11/30'
    """

    def __init__(self, date_format: str, time_zone: Optional[TimeZoneLike] = None,
                 calendar: Optional[Calendar] = None, locale: Optional[LocaleLike] = None) -> None:
        self._pattern = date_format
        self._time_zone = get_time_zone(time_zone) if time_zone is not None else current_time_zone()
        self._locale = get_locale(locale) if locale is not None else current_locale()
        base_calendar = calendar if calendar is not None else Calendar.current()
        self._calendar = base_calendar.replace(time_zone=self._time_zone, locale=self._locale)
        self._tokens = tokenize_pattern(date_format)

    @classmethod
    def styled(cls, date_style: StyleLike, time_style: Optional[StyleLike] = None,
               time_zone: Optional[TimeZoneLike] = None, calendar: Optional[Calendar] = None,
               locale: Optional[LocaleLike] = None) -> "DateFormatter":
        """A formatter using CLDR date/time styles of the locale."""
        resolved_locale = get_locale(locale) if locale is not None else current_locale()
        pattern = style_pattern(date_style, time_style, resolved_locale)
        return cls(pattern, time_zone=time_zone, calendar=calendar, locale=resolved_locale)

    @classmethod
    def iso8601(cls, date_format: str) -> "DateFormatter":
        """A formatter for fixed-format ISO 8601 strings: ISO calendar, POSIX locale, GMT."""
        calendar = Calendar(CalendarIdentifier.ISO8601, time_zone=POSIX_TIME_ZONE, locale=POSIX_LOCALE)
        return cls(date_format, time_zone=POSIX_TIME_ZONE, calendar=calendar, locale=POSIX_LOCALE)

    @property
    def date_format(self) -> str:
        return self._pattern

    @property
    def time_zone(self):
        return self._time_zone

    @property
    def calendar(self) -> Calendar:
        return self._calendar

    @property
    def locale(self) -> Locale:
        return self._locale

    # ── rendering ────────────────────────────────────────────────────────

    def string_from(self, value: datetime) -> str:
        """Render a date; naive dates are wall-clock time in the formatter's zone."""
        if not self._pattern:
            return ""

        local = self._calendar.localize(value)
        pattern = self._pattern
        if self._calendar.is_islamic:
            try:
                pattern = self._substitute_calendar_fields(local)
            except COMPUTATION_ERRORS as e:
                logger.debug(f"Rendering Gregorian fields for {local}: {str(e)}")

        return format_datetime(local, pattern, tzinfo=self._time_zone, locale=self._locale)

    def _substitute_calendar_fields(self, local: datetime) -> str:
        components = self._calendar.date_components(
            local, [CalendarUnit.YEAR, CalendarUnit.MONTH, CalendarUnit.DAY]
        )
        tokens = []
        literal: List[str] = []
        for kind, value in self._tokens:
            if kind == "chars":
                literal.append(value)
            elif value[0] in CALENDAR_DATE_FIELDS:
                literal.append(self._render_calendar_field(value[0], value[1], components))
            else:
                # Each literal stretch becomes a single quoted run
                if literal:
                    tokens.append(("chars", "".join(literal)))
                    literal = []
                tokens.append((kind, value))
        if literal:
            tokens.append(("chars", "".join(literal)))
        return _untokenize(tokens)

    def _render_calendar_field(self, field: str, count: int, components: DateComponents) -> str:
        if field in "yu":
            if count == 2:
                return f"{components.year % 100:02d}"
            return str(components.year).zfill(count)
        if field in "ML":
            if count <= 2:
                return str(components.month).zfill(count)
            return self._calendar.month_symbols(MONTH_WIDTHS.get(count, "wide"))[components.month]
        return str(components.day).zfill(count)

    # ── parsing ──────────────────────────────────────────────────────────

    def date_from(self, string: str) -> Optional[datetime]:
        """
        Parse a string; returns None when it is empty or does not match the pattern.
        """
        if not string:
            return None

        try:
            regex, groups = self._compile()
        except DateParsingError as e:
            logger.warning(f"Cannot parse with pattern {self._pattern!r}: {str(e)}")
            return None

        match = regex.fullmatch(string)
        if match is None:
            logger.debug(f"{string!r} does not match pattern {self._pattern!r}")
            return None

        try:
            return self._build(match, groups)
        except (DateParsingError, ConfigurationError) + COMPUTATION_ERRORS as e:
            logger.debug(f"{string!r} is not a valid date for pattern {self._pattern!r}: {str(e)}")
            return None

    def _compile(self) -> Tuple["re.Pattern", Dict[str, Tuple[str, int]]]:
        parts = []
        groups: Dict[str, Tuple[str, int]] = {}
        last = len(self._tokens) - 1
        for index, (kind, value) in enumerate(self._tokens):
            if kind == "chars":
                parts.append(re.escape(value))
                continue
            field, count = value
            following = self._tokens[index + 1] if index < last else ("chars", "")
            delimited = following[0] == "chars" and not following[1][:1].isdigit()
            name = f"f{index}"
            groups[name] = (field, count)
            parts.append(f"(?P<{name}>{self._field_regex(field, count, delimited)})")
        return re.compile("".join(parts), re.IGNORECASE), groups

    def _field_regex(self, field: str, count: int, delimited: bool = False) -> str:
        if field in "yu":
            if count == 2:
                return r"\d{2}"
            return r"\d{%d,}" % count if count > 1 else r"\d+"
        if field in "ML":
            if count <= 2:
                return _numeric(count, delimited)
            return _alternation(self._calendar.month_symbols(MONTH_WIDTHS.get(count, "wide")).values())
        if field in NUMERIC_FIELDS:
            return _numeric(count, delimited)
        if field == "S":
            return r"\d{%d}" % count
        if field == "a":
            return _alternation(get_period_names("abbreviated", context="format", locale=self._locale).values())
        if field == "E":
            names = list(get_day_names("abbreviated", locale=self._locale).values())
            names += list(get_day_names("wide", locale=self._locale).values())
            return _alternation(names)
        if field in "zv" and count <= 4:
            return _alternation(self._zone_names(field, count))
        if (field == "O" or field == "Z") and count == 4:
            prefix, _, suffix = self._locale.zone_formats["gmt"].partition("%s")
            return re.escape(prefix) + r"[+-]\d{2}:\d{2}" + re.escape(suffix)
        if field == "Z":
            return OFFSET_EXTENDED if count == 5 else OFFSET_BASIC
        if field in "xX":
            if count == 1:
                return r"Z|[+-]\d{2}(?:\d{2})?" if field == "X" else r"[+-]\d{2}(?:\d{2})?"
            if count in (3, 5):
                return OFFSET_EXTENDED if field == "X" else r"[+-]\d{2}:\d{2}"
            return OFFSET_ISO if field == "X" else OFFSET_BASIC
        if field == "V" and count == 2:
            return ZONE_ID

        raise DateParsingError(f"Unsupported pattern field {field * count!r}", pattern=self._pattern)

    def _zone_names(self, field: str, count: int) -> List[str]:
        """Display names babel renders for the formatter's zone, standard and daylight."""
        width = "long" if count == 4 else "short"
        if field == "v":
            return [get_timezone_name(self._time_zone, width, locale=self._locale)]

        names = []
        for year in (PARSE_REFERENCE_YEAR, datetime.now(timezone.utc).year):
            for month in (1, 7):
                sample = datetime(year, month, 1, tzinfo=self._time_zone)
                names.append(get_timezone_name(sample, width, locale=self._locale))
        return names

    def _build(self, match: "re.Match", groups: Dict[str, Tuple[str, int]]) -> datetime:
        fields: Dict[str, int] = {}
        hour12: Optional[int] = None
        is_pm: Optional[bool] = None
        parsed_zone = None

        for name, (field, count) in groups.items():
            text = match.group(name)
            if field in "yu":
                year = int(text)
                if count == 2:
                    year = self._expand_two_digit_year(year)
                fields["year"] = year
            elif field in "ML":
                fields["month"] = int(text) if count <= 2 else self._month_number(text, count)
            elif field == "d":
                fields["day"] = int(text)
            elif field == "H":
                fields["hour"] = int(text)
            elif field == "k":
                fields["hour"] = int(text) % 24
            elif field in "hK":
                hour12 = int(text) % 12
            elif field == "m":
                fields["minute"] = int(text)
            elif field == "s":
                fields["second"] = int(text)
            elif field == "S":
                fields["microsecond"] = int(text.ljust(6, "0")[:6])
            elif field == "a":
                is_pm = text.lower() == get_period_names("abbreviated", context="format", locale=self._locale)["pm"].lower()
            elif field in "ZxXO":
                parsed_zone = self._offset_zone(text)
            elif field == "V":
                parsed_zone = get_time_zone(text)

        if hour12 is not None:
            fields["hour"] = hour12 + (12 if is_pm else 0)

        calendar = self._calendar if parsed_zone is None else self._calendar.replace(time_zone=parsed_zone)

        components = DateComponents(
            year=fields.get("year", self._reference_year(calendar)),
            month=fields.get("month", 1),
            day=fields.get("day", 1),
            hour=fields.get("hour", 0),
            minute=fields.get("minute", 0),
            second=fields.get("second", 0),
            microsecond=fields.get("microsecond", 0),
        )

        result = calendar.date_from_components(components)
        if result is None:
            raise DateParsingError("Components do not form a date", pattern=self._pattern)

        # Lenient construction rolls invalid fields over; a strict parse must round-trip
        check = calendar.date_components(result, FULL_COMPONENTS)
        expected = components.model_copy(update={"microsecond": None})
        if check != expected:
            raise DateParsingError("Components out of range", pattern=self._pattern)

        return result.astimezone(self._time_zone) if parsed_zone is None else result

    def _expand_two_digit_year(self, year: int) -> int:
        if self._calendar.is_islamic:
            return 1400 + year
        return (2000 if year < TWO_DIGIT_YEAR_PIVOT else 1900) + year

    def _month_number(self, text: str, count: int) -> int:
        wanted = text.lower()
        for number, name in self._calendar.month_symbols(MONTH_WIDTHS.get(count, "wide")).items():
            if name.lower() == wanted:
                return number
        raise DateParsingError(f"Unknown month name {text!r}", pattern=self._pattern, value=text)

    @staticmethod
    def _offset_zone(text: str) -> timezone:
        # "Z", "+0900", "+09:00" and localized "GMT+09:00"
        match = OFFSET_DIGITS.search(text)
        if match is None:
            return timezone.utc
        sign, hours, minutes = match.groups()
        offset = timedelta(hours=int(hours), minutes=int(minutes or 0))
        return timezone(-offset if sign == "-" else offset)

    @staticmethod
    def _reference_year(calendar: Calendar) -> int:
        reference = datetime(PARSE_REFERENCE_YEAR, 1, 1)
        return calendar.date_components(reference, [CalendarUnit.YEAR]).year

    def __repr__(self) -> str:
        return (
            f"DateFormatter(date_format={self._pattern!r}, "
            f"time_zone={str(self._time_zone)!r}, "
            f"calendar={self._calendar.identifier.value!r}, "
            f"locale={str(self._locale)!r})"
        )
