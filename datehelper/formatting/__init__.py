"""
String conversion: LDML patterns, CLDR styles and timer strings.
"""

from .formatter import DateFormatter, style_pattern
from .strings import (
    date_from_string,
    date_to_string,
    date_to_styled_string,
    short_string,
    timer_string,
)

__all__ = [
    "DateFormatter",
    "style_pattern",
    "date_from_string",
    "date_to_string",
    "date_to_styled_string",
    "short_string",
    "timer_string",
]
