"""
Time-zone helpers: registry lookups, the device time zone and offset comparisons.
"""

import logging
from datetime import datetime, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzlocal import get_localzone_name

from datehelper.config.constants import POSIX_TIME_ZONE_IDENTIFIER, FALLBACK_TIME_ZONE_IDENTIFIER
from datehelper.config.settings import get_settings
from datehelper.utils.error_handlers import ConfigurationError


logger = logging.getLogger(__name__)


TimeZoneLike = Union[str, tzinfo]

# Unix representation of time zone usually used for normalizing
POSIX_TIME_ZONE = ZoneInfo(POSIX_TIME_ZONE_IDENTIFIER)


def get_time_zone(time_zone: TimeZoneLike) -> tzinfo:
    """
    Resolve a time zone identifier (or pass through a tzinfo).

    Args:
        time_zone: IANA identifier such as "Europe/Paris", or a tzinfo instance

    Returns:
        tzinfo instance

    Raises:
        ConfigurationError: If the identifier is unknown
    """
    if isinstance(time_zone, tzinfo):
        return time_zone

    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
        raise ConfigurationError(
            f"Unknown time zone: {time_zone}",
            config_key="time_zone",
            config_value=time_zone
        ) from e


def _system_time_zone_name() -> str:
    try:
        name = get_localzone_name()
    except (LookupError, ValueError, OSError) as e:
        logger.warning(f"Could not determine system time zone ({str(e)}), using {FALLBACK_TIME_ZONE_IDENTIFIER}")
        return FALLBACK_TIME_ZONE_IDENTIFIER

    return name or FALLBACK_TIME_ZONE_IDENTIFIER


def current_time_zone() -> tzinfo:
    """
    The device's current time zone.

    DATEHELPER_TIME_ZONE wins over the operating system setting. Read on every
    call so a changed setting is picked up immediately.
    """
    configured = get_settings().calendar.time_zone
    if configured:
        return get_time_zone(configured)

    return get_time_zone(_system_time_zone_name())


def _instant(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def seconds_from_gmt(time_zone: TimeZoneLike, now: Optional[datetime] = None) -> int:
    """
    UTC offset of a time zone in seconds at the given instant (default: now).

    Naive instants are read as UTC.
    """
    zone = get_time_zone(time_zone)
    offset = _instant(now).astimezone(zone).utcoffset()
    return int(offset.total_seconds()) if offset is not None else 0


def is_current_time_zone(time_zone: TimeZoneLike, now: Optional[datetime] = None) -> bool:
    """
    Determines if the time zone is the current time zone of the device.

    This compares UTC offsets at the instant, so two distinct zones that
    currently share the device's offset both count as current.

        >>> is_current_time_zone("Europe/Paris")  # device in America/Chicago
        False
    """
    instant = _instant(now)
    return seconds_from_gmt(current_time_zone(), instant) == seconds_from_gmt(time_zone, instant)


def offset_from_current(time_zone: TimeZoneLike, now: Optional[datetime] = None) -> int:
    """
    Device UTC offset minus the time zone's UTC offset, in seconds.

    Positive means the device is ahead of the time zone.

        >>> offset_from_current("Europe/Paris")  # device in America/Chicago, winter
        -25200
    """
    instant = _instant(now)
    return seconds_from_gmt(current_time_zone(), instant) - seconds_from_gmt(time_zone, instant)
