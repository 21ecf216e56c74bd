"""
Configuration for datehelper: constants, enumerations and environment-driven settings.
"""

from .settings import AppSettings, CalendarSettings, FormattingSettings, get_settings

__all__ = [
    "AppSettings",
    "CalendarSettings",
    "FormattingSettings",
    "get_settings",
]
