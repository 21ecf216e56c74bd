"""
Configuration settings for the datehelper library.
The "device" calendar, time zone and locale are read from the environment on every call.
"""

import os
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from dotenv import load_dotenv

from datehelper.utils.error_handlers import ConfigurationError
from .constants import (
    CalendarIdentifier,
    DEFAULT_CALENDAR_IDENTIFIER,
    DEFAULT_DATE_FORMAT,
    DEFAULT_TIMER_PREFIX,
)

# Load environment variables
load_dotenv()


class CalendarSettings(BaseModel):
    """Device calendar configuration"""

    model_config = ConfigDict(validate_default=True)

    # Calendar system used when no calendar is passed explicitly
    identifier: CalendarIdentifier = Field(
        default_factory=lambda: os.getenv("DATEHELPER_CALENDAR", DEFAULT_CALENDAR_IDENTIFIER),
        description="Device calendar identifier"
    )

    # None means "ask the operating system"
    time_zone: Optional[str] = Field(
        default_factory=lambda: os.getenv("DATEHELPER_TIME_ZONE") or None,
        description="Device time zone identifier (IANA)"
    )

    # None means "ask the process locale"
    locale: Optional[str] = Field(
        default_factory=lambda: os.getenv("DATEHELPER_LOCALE") or None,
        description="Device locale identifier (CLDR)"
    )


class FormattingSettings(BaseModel):
    """String conversion defaults"""

    model_config = ConfigDict(validate_default=True)

    date_format: str = Field(
        default_factory=lambda: os.getenv("DATEHELPER_DATE_FORMAT", DEFAULT_DATE_FORMAT),
        description="Default pattern used to parse date strings",
        min_length=1
    )

    timer_positive_prefix: str = Field(
        default_factory=lambda: os.getenv("DATEHELPER_TIMER_PREFIX", DEFAULT_TIMER_PREFIX),
        description="Prefix prepended to timer strings counting towards a future date"
    )


class AppSettings(BaseModel):
    """Main library settings combining all configuration"""

    model_config = ConfigDict(validate_default=True)

    calendar: CalendarSettings = Field(default_factory=CalendarSettings)
    formatting: FormattingSettings = Field(default_factory=FormattingSettings)

    log_level: str = Field(
        default_factory=lambda: os.getenv("DATEHELPER_LOG_LEVEL", "INFO"),
        description="Logging level for the library"
    )


def get_settings() -> AppSettings:
    """Get a fresh settings instance (environment is re-read each time)"""
    try:
        return AppSettings()
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid datehelper settings: {e.error_count()} error(s)",
            errors=[f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        ) from e
