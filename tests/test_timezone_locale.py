"""
Tests for time-zone and locale helpers.
"""

import logging
from datetime import datetime, timezone, timedelta
from zoneinfo import ZoneInfo

import pytest
from babel import Locale

from datehelper.calendars import (
    POSIX_LOCALE,
    POSIX_TIME_ZONE,
    character_direction,
    current_locale,
    current_time_zone,
    get_locale,
    get_time_zone,
    is_current_time_zone,
    language_name,
    offset_from_current,
    seconds_from_gmt,
)
from datehelper.config.constants import LanguageDirection
from datehelper.utils.error_handlers import ConfigurationError


WINTER = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
SUMMER = datetime(2024, 7, 15, 12, 0, tzinfo=timezone.utc)


class TestTimeZoneRegistry:
    """Test time-zone lookups."""

    def test_lookup_by_identifier(self):
        """IANA identifiers resolve to ZoneInfo."""
        assert get_time_zone("Europe/Paris") == ZoneInfo("Europe/Paris")

    def test_tzinfo_passes_through(self):
        """tzinfo instances are returned unchanged."""
        fixed = timezone(timedelta(hours=3))
        assert get_time_zone(fixed) is fixed

    def test_unknown_identifier(self):
        """Unknown identifiers are configuration errors."""
        with pytest.raises(ConfigurationError, match="Unknown time zone"):
            get_time_zone("Nowhere/Atlantis")

    def test_posix_time_zone(self):
        """The normalizing zone has no offset."""
        assert seconds_from_gmt(POSIX_TIME_ZONE, WINTER) == 0


class TestCurrentTimeZone:
    """Test the device time zone."""

    def test_from_settings(self, monkeypatch):
        """DATEHELPER_TIME_ZONE wins."""
        monkeypatch.setenv("DATEHELPER_TIME_ZONE", "Asia/Tokyo")
        assert current_time_zone() == ZoneInfo("Asia/Tokyo")

    def test_from_operating_system(self, monkeypatch):
        """Without an override the system zone is used."""
        monkeypatch.delenv("DATEHELPER_TIME_ZONE")
        monkeypatch.setattr("datehelper.calendars.timezone.get_localzone_name", lambda: "America/Chicago")
        assert current_time_zone() == ZoneInfo("America/Chicago")

    def test_unreadable_system_zone(self, monkeypatch, caplog):
        """An unreadable system zone falls back to UTC with a warning."""
        def unreadable():
            raise LookupError("no zone configured")

        monkeypatch.delenv("DATEHELPER_TIME_ZONE")
        monkeypatch.setattr("datehelper.calendars.timezone.get_localzone_name", unreadable)

        with caplog.at_level(logging.WARNING):
            assert current_time_zone() == ZoneInfo("UTC")
        assert "Could not determine system time zone" in caplog.text


class TestOffsets:
    """Test offset comparisons against the device zone (UTC in these tests)."""

    def test_seconds_from_gmt(self):
        """Offsets follow DST at the given instant."""
        assert seconds_from_gmt("Asia/Kolkata", WINTER) == 19800
        assert seconds_from_gmt("Europe/Paris", WINTER) == 3600
        assert seconds_from_gmt("Europe/Paris", SUMMER) == 7200

    def test_naive_instant_is_utc(self):
        """Naive instants are read as UTC."""
        assert seconds_from_gmt("Europe/Paris", datetime(2024, 7, 15, 12, 0)) == 7200

    def test_is_current_time_zone_compares_offsets(self):
        """Any zone sharing the device offset counts as current."""
        assert is_current_time_zone("UTC", WINTER)
        assert is_current_time_zone("Europe/London", WINTER)
        assert not is_current_time_zone("Europe/London", SUMMER)
        assert not is_current_time_zone("Europe/Paris", WINTER)

    def test_offset_from_current(self):
        """Device offset minus zone offset."""
        assert offset_from_current("Europe/Paris", WINTER) == -3600
        assert offset_from_current("America/New_York", WINTER) == 18000
        assert offset_from_current("UTC", SUMMER) == 0


class TestLocaleRegistry:
    """Test locale lookups."""

    def test_underscore_and_hyphen(self):
        """Both separator spellings are accepted."""
        assert get_locale("fr_FR") == Locale("fr", "FR")
        assert get_locale("fr-FR") == Locale("fr", "FR")

    def test_locale_passes_through(self):
        """babel Locale instances are returned unchanged."""
        locale = Locale("ar", "SA")
        assert get_locale(locale) is locale

    def test_unknown_locale(self):
        """Unknown identifiers are configuration errors."""
        with pytest.raises(ConfigurationError, match="Unknown locale"):
            get_locale("xx_YY")

    def test_posix_locale(self):
        """The normalizing locale is English."""
        assert POSIX_LOCALE.language == "en"


class TestCurrentLocale:
    """Test the device locale."""

    def test_from_settings(self, monkeypatch):
        """DATEHELPER_LOCALE wins."""
        monkeypatch.setenv("DATEHELPER_LOCALE", "de_DE")
        assert current_locale() == Locale("de", "DE")

    def test_from_process_locale(self, monkeypatch):
        """Without an override the process locale is used."""
        monkeypatch.delenv("DATEHELPER_LOCALE")
        monkeypatch.setattr("datehelper.calendars.locale.default_locale", lambda category=None: "fr_FR")
        assert current_locale() == Locale("fr", "FR")

    def test_no_process_locale(self, monkeypatch):
        """No process locale means the POSIX locale."""
        monkeypatch.delenv("DATEHELPER_LOCALE")
        monkeypatch.setattr("datehelper.calendars.locale.default_locale", lambda category=None: None)
        assert current_locale() is POSIX_LOCALE

    def test_unknown_process_locale(self, monkeypatch, caplog):
        """An unknown process locale falls back to POSIX with a warning."""
        monkeypatch.delenv("DATEHELPER_LOCALE")
        monkeypatch.setattr("datehelper.calendars.locale.default_locale", lambda category=None: "xx_YY")

        with caplog.at_level(logging.WARNING):
            assert current_locale() is POSIX_LOCALE
        assert "Unknown process locale" in caplog.text


class TestLocaleQueries:
    """Test language names and character direction."""

    def test_language_name_in_own_language(self):
        """Language names are localized in the language itself."""
        assert language_name("fr_FR") == "français"
        assert language_name("de") == "Deutsch"
        assert language_name("en_US") == "English"

    def test_character_direction(self):
        """Direction comes from the language's layout data."""
        assert character_direction("en_US") is LanguageDirection.LEFT_TO_RIGHT
        assert character_direction("ar_SA") is LanguageDirection.RIGHT_TO_LEFT
        assert character_direction("he") is LanguageDirection.RIGHT_TO_LEFT
