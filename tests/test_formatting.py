"""
Tests for string conversion: patterns, styles, parsing and timer strings.
"""

import logging
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from datehelper.calendars import Calendar
from datehelper.formatting import (
    DateFormatter,
    date_from_string,
    date_to_string,
    date_to_styled_string,
    short_string,
    style_pattern,
    timer_string,
)
from datehelper.calendars.locale import get_locale
from datehelper.utils.error_handlers import ConfigurationError


UTC = ZoneInfo("UTC")


@pytest.fixture
def formatter_options(utc_calendar):
    """Fixed zone, calendar and locale for formatter calls."""
    return {"time_zone": "UTC", "calendar": utc_calendar, "locale": "en_US"}


@pytest.fixture
def umm_al_qura():
    """Umm al-Qura calendar in UTC."""
    return Calendar("islamic-umalqura", time_zone="UTC", locale="en_US")


class TestQuotedLiterals:
    """Test quoted literal text in patterns."""

    def test_quoted_text_renders_verbatim(self, formatter_options):
        """Quoted letters are text, and two quotes are an apostrophe."""
        value = datetime(2018, 11, 30, 9, 5)
        assert date_to_string(value, "yyyy/MM/dd 'at' h 'o''clock'", **formatter_options) == "2018/11/30 at 9 o'clock"
        assert date_to_string(value, "HH''mm", **formatter_options) == "09'05"

    def test_quoted_text_parses(self, formatter_options):
        """Quoted text must appear literally in the parsed string."""
        pattern = "yyyy/MM/dd 'at' h 'o''clock'"
        assert date_from_string("2018/11/30 at 9 o'clock", pattern, **formatter_options) == \
            datetime(2018, 11, 30, 9, 0, tzinfo=UTC)
        assert date_from_string("2018/11/30 on 9 o'clock", pattern, **formatter_options) is None

    def test_quoted_text_around_islamic_fields(self, umm_al_qura):
        """Hijri fields keep the pattern's quoted text intact."""
        value = datetime(2024, 3, 11, 9, 0)
        assert date_to_string(value, "yyyy/MM/dd 'at' h 'o''clock'", time_zone="UTC",
                              calendar=umm_al_qura, locale="en_US") == "1445/09/01 at 9 o'clock"
        assert date_to_string(value, "yyyy''MM''dd", time_zone="UTC",
                              calendar=umm_al_qura, locale="en_US") == "1445'09'01"


class TestRendering:
    """Test date -> string."""

    def test_pattern(self, formatter_options):
        """Explicit LDML pattern."""
        value = datetime(2018, 11, 30, 9, 5)
        assert date_to_string(value, "yyyy/MM/dd HH:mm", **formatter_options) == "2018/11/30 09:05"
        assert date_to_string(value, "EEEE, MMM d", **formatter_options) == "Friday, Nov 30"
        assert date_to_string(value, "yyyy-MM-dd h:mm a", **formatter_options) == "2018-11-30 9:05 AM"

    def test_rendering_uses_formatter_zone(self, utc_calendar):
        """Aware dates are converted to the formatter's zone."""
        value = datetime(2018, 11, 30, 23, 30, tzinfo=UTC)
        assert date_to_string(value, "yyyy/MM/dd HH:mm", time_zone="Asia/Tokyo",
                              calendar=utc_calendar, locale="en_US") == "2018/12/01 08:30"

    def test_localized_names(self, utc_calendar):
        """Month and day names follow the locale."""
        value = datetime(2018, 11, 30)
        assert date_to_string(value, "EEEE d MMMM", time_zone="UTC",
                              calendar=utc_calendar, locale="fr_FR") == "vendredi 30 novembre"

    def test_styles(self, formatter_options):
        """Date and time styles come from CLDR data."""
        value = datetime(2018, 11, 30, 14, 5)

        assert date_to_styled_string(value, "medium", **formatter_options) == "Nov 30, 2018"
        assert date_to_styled_string(value, "short", **formatter_options) == "11/30/18"

        with_time = date_to_styled_string(value, "medium", "short", **formatter_options)
        assert with_time.startswith("Nov 30, 2018")
        assert "2:05" in with_time

    def test_time_only_and_empty_styles(self, formatter_options):
        """Style none drops that part; both none renders nothing."""
        value = datetime(2018, 11, 30, 14, 5)
        assert "2:05" in date_to_styled_string(value, "none", "short", **formatter_options)
        assert date_to_styled_string(value, "none", "none", **formatter_options) == ""

    def test_unknown_style(self, formatter_options):
        """Unknown style names are configuration errors."""
        with pytest.raises(ConfigurationError, match="Unknown formatter style"):
            date_to_styled_string(datetime(2018, 11, 30), "tiny", **formatter_options)

    def test_style_pattern(self):
        """Style pairs resolve to LDML patterns."""
        assert style_pattern("medium", None, get_locale("en_US")) == "MMM d, y"
        assert style_pattern("none", None, get_locale("en_US")) == ""

    def test_short_string(self, formatter_options):
        """Fixed yyyy-MM-dd."""
        assert short_string(datetime(2018, 11, 30, 23, 0), **formatter_options) == "2018-11-30"

    def test_islamic_fields(self, umm_al_qura):
        """Umm al-Qura calendars render Hijri year, month and day."""
        value = datetime(2024, 3, 11, 12, 0)
        assert date_to_string(value, "yyyy/MM/dd HH:mm", time_zone="UTC",
                              calendar=umm_al_qura, locale="en_US") == "1445/09/01 12:00"

    def test_islamic_month_names(self, umm_al_qura):
        """Hijri month names replace the Gregorian ones."""
        value = datetime(2024, 3, 11)
        rendered = date_to_string(value, "d MMMM yyyy", time_zone="UTC", calendar=umm_al_qura, locale="en_US")
        assert rendered == f"1 {umm_al_qura.month_symbols()[9]} 1445"

    @pytest.mark.parametrize("value, expected", [
        (datetime(1900, 1, 1), "1900/01/01"),
        (datetime(2100, 1, 1, 8, 30), "2100/01/01"),
    ])
    def test_islamic_out_of_range_renders_gregorian(self, umm_al_qura, value, expected):
        """Dates outside the Umm al-Qura tables render their Gregorian fields."""
        assert date_to_string(value, "yyyy/MM/dd", time_zone="UTC", calendar=umm_al_qura, locale="en_US") == expected
        assert short_string(value, time_zone="UTC", calendar=umm_al_qura, locale="en_US") == expected.replace("/", "-")


class TestParsing:
    """Test string -> date."""

    def test_default_format(self, formatter_options):
        """yyyy/MM/dd HH:mm is the default pattern."""
        assert date_from_string("2018/11/30 09:05", **formatter_options) == datetime(2018, 11, 30, 9, 5, tzinfo=UTC)

    def test_default_format_from_settings(self, monkeypatch, formatter_options):
        """DATEHELPER_DATE_FORMAT changes the default pattern."""
        monkeypatch.setenv("DATEHELPER_DATE_FORMAT", "dd.MM.yyyy")
        assert date_from_string("30.11.2018", **formatter_options) == datetime(2018, 11, 30, tzinfo=UTC)

    def test_empty_string(self, formatter_options):
        """An empty string has no date."""
        assert date_from_string("", **formatter_options) is None

    @pytest.mark.parametrize("text", [
        "hello",
        "2018/13/01 00:00",
        "2018/02/30 10:00",
        "2018/11/30 24:00",
        "2018/11/30 09:05 extra",
        "2018-11-30 09:05",
    ])
    def test_invalid_strings(self, formatter_options, text):
        """Anything that does not match or round-trip has no date."""
        assert date_from_string(text, **formatter_options) is None

    def test_wall_clock_in_formatter_zone(self, utc_calendar):
        """Parsed wall-clock time is read in the formatter's zone."""
        result = date_from_string("2018/11/30 09:05", time_zone="Asia/Tokyo", calendar=utc_calendar, locale="en_US")
        assert result == datetime(2018, 11, 30, 0, 5, tzinfo=UTC)

    def test_missing_fields(self, formatter_options):
        """Missing year comes from 2000, missing day and time from their start."""
        assert date_from_string("11", "MM", **formatter_options) == datetime(2000, 11, 1, tzinfo=UTC)
        assert date_from_string("2018", "yyyy", **formatter_options) == datetime(2018, 1, 1, tzinfo=UTC)

    def test_month_names(self, formatter_options):
        """Month names match case-insensitively."""
        expected = datetime(2018, 11, 30, tzinfo=UTC)
        assert date_from_string("Nov 30, 2018", "MMM d, yyyy", **formatter_options) == expected
        assert date_from_string("nov 30, 2018", "MMM d, yyyy", **formatter_options) == expected
        assert date_from_string("30 November 2018", "d MMMM yyyy", **formatter_options) == expected
        assert date_from_string("Nox 30, 2018", "MMM d, yyyy", **formatter_options) is None

    def test_day_periods(self, formatter_options):
        """Twelve-hour clock with AM/PM."""
        assert date_from_string("2018-11-30 2:05 PM", "yyyy-MM-dd h:mm a", **formatter_options) == \
            datetime(2018, 11, 30, 14, 5, tzinfo=UTC)
        assert date_from_string("2018-11-30 12:05 AM", "yyyy-MM-dd h:mm a", **formatter_options) == \
            datetime(2018, 11, 30, 0, 5, tzinfo=UTC)

    def test_weekday_names_are_accepted(self, formatter_options):
        """Weekday names match but do not decide the date."""
        assert date_from_string("Friday, 2018-11-30", "EEEE, yyyy-MM-dd", **formatter_options) == \
            datetime(2018, 11, 30, tzinfo=UTC)

    def test_two_digit_years(self, formatter_options):
        """Two-digit years below 69 are in the 2000s."""
        assert date_from_string("11/30/18", "M/d/yy", **formatter_options) == datetime(2018, 11, 30, tzinfo=UTC)
        assert date_from_string("11/30/75", "M/d/yy", **formatter_options) == datetime(1975, 11, 30, tzinfo=UTC)

    def test_styled_parsing(self, formatter_options):
        """Style formatters parse their own output."""
        formatter = DateFormatter.styled("short", **formatter_options)
        assert formatter.date_from("11/30/18") == datetime(2018, 11, 30, tzinfo=UTC)

    def test_short_numeric_fields(self, formatter_options):
        """Numeric fields followed by a literal may be written without padding."""
        assert date_from_string("2016/3/22 9:40", **formatter_options) == datetime(2016, 3, 22, 9, 40, tzinfo=UTC)
        assert date_from_string("2016/03/22 09:40", **formatter_options) == datetime(2016, 3, 22, 9, 40, tzinfo=UTC)

    def test_adjacent_numeric_fields_keep_their_width(self, formatter_options):
        """A field followed directly by another field takes exactly its pattern width."""
        assert date_from_string("20160322", "yyyyMMdd", **formatter_options) == datetime(2016, 3, 22, tzinfo=UTC)
        assert date_from_string("2016322", "yyyyMMdd", **formatter_options) is None

    def test_localized_gmt_offsets(self, formatter_options):
        """Localized GMT offsets override the formatter's zone."""
        assert date_from_string("2018-11-30 09:05 GMT+09:00", "yyyy-MM-dd HH:mm OOOO", **formatter_options) == \
            datetime(2018, 11, 30, 0, 5, tzinfo=UTC)

    def test_offsets_and_zones(self, formatter_options):
        """Parsed offsets and zone identifiers override the formatter's zone."""
        expected = datetime(2018, 11, 30, 0, 5, tzinfo=UTC)
        assert date_from_string("2018-11-30T09:05:00+09:00", "yyyy-MM-dd'T'HH:mm:ssxxx",
                                **formatter_options) == expected
        assert date_from_string("2018-11-30 09:05 Asia/Tokyo", "yyyy-MM-dd HH:mm VV",
                                **formatter_options) == expected
        assert date_from_string("2018-11-30T00:05:00Z", "yyyy-MM-dd'T'HH:mm:ssXXX",
                                **formatter_options) == expected

    def test_unsupported_field(self, formatter_options, caplog):
        """Patterns with fields that cannot be parsed yield no date."""
        with caplog.at_level(logging.WARNING):
            assert date_from_string("2018 Q4", "yyyy QQ", **formatter_options) is None
        assert "Unsupported pattern field" in caplog.text

    def test_islamic_parsing(self, umm_al_qura):
        """Hijri fields are parsed back into the Gregorian instant."""
        result = date_from_string("1445/09/01 12:00", time_zone="UTC", calendar=umm_al_qura, locale="en_US")
        assert result == datetime(2024, 3, 11, 12, 0, tzinfo=UTC)
        assert date_from_string("1445/09/31 12:00", time_zone="UTC", calendar=umm_al_qura, locale="en_US") is None


class TestRoundTrip:
    """Parsing a rendered date gives the date back at the pattern's precision."""

    @pytest.mark.parametrize("pattern", [
        "yyyy/MM/dd HH:mm",
        "yyyy-MM-dd'T'HH:mm:ss.SSS",
        "EEEE, MMMM d, yyyy h:mm:ss a",
        "dd.MM.yy HH:mm:ss",
    ])
    def test_round_trip(self, formatter_options, pattern):
        """render -> parse -> render is stable."""
        value = datetime(2019, 2, 3, 16, 7, 8, 123000, tzinfo=UTC)
        formatter = DateFormatter(pattern, **formatter_options)

        rendered = formatter.string_from(value)
        parsed = formatter.date_from(rendered)

        assert parsed is not None
        assert formatter.string_from(parsed) == rendered
        assert abs(parsed - value) < timedelta(minutes=1)

    @pytest.mark.parametrize("style", ["full", "long", "medium"])
    def test_styled_round_trip(self, formatter_options, style):
        """Styled formatters parse their own output, zone names included."""
        formatter = DateFormatter.styled(style, style, **formatter_options)
        value = datetime(2020, 1, 1, 13, 5, 7, tzinfo=UTC)

        assert formatter.date_from(formatter.string_from(value)) == value

    @pytest.mark.parametrize("style", ["full", "long"])
    def test_styled_round_trip_in_daylight_time(self, utc_calendar, style):
        """Daylight and standard zone names both parse."""
        formatter = DateFormatter.styled(style, style, time_zone="America/New_York",
                                         calendar=utc_calendar, locale="en_US")
        summer = datetime(2020, 7, 1, 13, 5, 7, tzinfo=ZoneInfo("America/New_York"))
        winter = datetime(2020, 1, 1, 13, 5, 7, tzinfo=ZoneInfo("America/New_York"))

        assert formatter.date_from(formatter.string_from(summer)) == summer
        assert formatter.date_from(formatter.string_from(winter)) == winter

    def test_iso8601(self):
        """ISO formatters use GMT and the POSIX locale whatever the device says."""
        formatter = DateFormatter.iso8601("yyyy-MM-dd'T'HH:mm:ssxxx")
        value = datetime(2018, 11, 30, 9, 5, tzinfo=ZoneInfo("Asia/Tokyo"))

        rendered = formatter.string_from(value)
        assert rendered == "2018-11-30T00:05:00+00:00"
        assert formatter.date_from(rendered) == value


class TestTimerString:
    """Test HH:mm:ss timer rendering."""

    def test_elapsed_since_start(self):
        """A date after the start renders without a prefix."""
        assert timer_string(datetime(2016, 3, 22, 9, 45), from_date=datetime(2016, 3, 22, 9, 40)) == "00:05:00"

    def test_date_before_start_gets_prefix(self):
        """A date before the start gets the positive prefix."""
        assert timer_string(datetime(2016, 3, 22, 9, 40), from_date=datetime(2016, 3, 22, 9, 45)) == "+00:05:00"
        assert timer_string(datetime(2016, 3, 22, 9, 40), from_date=datetime(2016, 3, 22, 9, 45),
                            positive_prefix="-") == "-00:05:00"

    def test_prefix_from_settings(self, monkeypatch):
        """DATEHELPER_TIMER_PREFIX changes the default prefix."""
        monkeypatch.setenv("DATEHELPER_TIMER_PREFIX", "T-")
        assert timer_string(datetime(2016, 3, 22, 9, 40), from_date=datetime(2016, 3, 22, 9, 45)) == "T-00:05:00"

    def test_hours_are_not_capped(self):
        """Hours run past 24 and seconds are truncated."""
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert timer_string(start + timedelta(hours=26, minutes=3, seconds=4.9), from_date=start) == "26:03:04"

    def test_defaults_to_now(self, now):
        """Without a start date the countdown runs from now."""
        assert timer_string(now - timedelta(hours=1, seconds=1), now=now) == "+01:00:01"
