"""
Shared fixtures: every test runs against a fixed device configuration
(UTC, en_US, Gregorian) unless it overrides the environment itself.
"""

import logging
from datetime import datetime, timezone

import pytest

from datehelper.calendars import Calendar, islamic_calendar
from datehelper.config.constants import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def device_environment(monkeypatch):
    """Pin the device time zone and locale, and clear the other overrides."""
    monkeypatch.setenv("DATEHELPER_TIME_ZONE", "UTC")
    monkeypatch.setenv("DATEHELPER_LOCALE", "en_US")
    for name in ("DATEHELPER_CALENDAR", "DATEHELPER_DATE_FORMAT",
                 "DATEHELPER_TIMER_PREFIX", "DATEHELPER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    islamic_calendar.cache_clear()
    yield
    islamic_calendar.cache_clear()


@pytest.fixture(autouse=True)
def reset_library_logger():
    """Undo handler and level changes made by logging tests."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def utc_calendar():
    """Gregorian calendar in UTC with US week rules."""
    return Calendar("gregorian", time_zone="UTC", locale="en_US")


@pytest.fixture
def now():
    """A fixed 'now': Wednesday 2025-07-16 12:00 UTC."""
    return datetime(2025, 7, 16, 12, 0, tzinfo=timezone.utc)
