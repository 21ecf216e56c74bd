"""
Locale helpers backed by babel's CLDR data.
"""

import logging
from typing import Optional, Union

from babel import Locale, UnknownLocaleError, default_locale

from datehelper.config.constants import LanguageDirection, POSIX_LOCALE_IDENTIFIER
from datehelper.config.settings import get_settings
from datehelper.utils.error_handlers import ConfigurationError


logger = logging.getLogger(__name__)


LocaleLike = Union[str, Locale]

# Unix representation of locale usually used for normalizing
POSIX_LOCALE = Locale.parse(POSIX_LOCALE_IDENTIFIER)

CHARACTER_ORDER_DIRECTIONS = {
    "left-to-right": LanguageDirection.LEFT_TO_RIGHT,
    "right-to-left": LanguageDirection.RIGHT_TO_LEFT,
    "top-to-bottom": LanguageDirection.TOP_TO_BOTTOM,
    "bottom-to-top": LanguageDirection.BOTTOM_TO_TOP,
}


def get_locale(locale: LocaleLike) -> Locale:
    """
    Resolve a locale identifier (or pass through a babel Locale).

    Both "fr_FR" and "fr-FR" spellings are accepted.

    Raises:
        ConfigurationError: If the identifier is unknown or malformed
    """
    if isinstance(locale, Locale):
        return locale

    try:
        sep = "-" if "-" in locale else "_"
        return Locale.parse(locale, sep=sep)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise ConfigurationError(
            f"Unknown locale: {locale}",
            config_key="locale",
            config_value=locale
        ) from e


def current_locale() -> Locale:
    """
    The device's current locale.

    DATEHELPER_LOCALE wins over the process locale (LC_TIME, LANG, ...);
    en_US_POSIX is used when neither yields a known locale.
    """
    configured = get_settings().calendar.locale
    if configured:
        return get_locale(configured)

    system = default_locale("LC_TIME")
    if not system:
        return POSIX_LOCALE

    try:
        return get_locale(system)
    except ConfigurationError:
        logger.warning(f"Unknown process locale {system}, using {POSIX_LOCALE_IDENTIFIER}")
        return POSIX_LOCALE


def language_name(locale: LocaleLike) -> Optional[str]:
    """
    Returns the language name of the locale in its own language, or None if it has none.

        >>> language_name("fr_FR")
        'français'
    """
    resolved = get_locale(locale)
    if not resolved.language or resolved.language == "und":
        return None

    return resolved.get_language_name(resolved)


def character_direction(locale: LocaleLike) -> LanguageDirection:
    """
    Returns the character direction for the locale's language code.

        >>> character_direction("ar_SA")
        <LanguageDirection.RIGHT_TO_LEFT: 'right-to-left'>
    """
    resolved = get_locale(locale)
    if not resolved.language or resolved.language == "und":
        return LanguageDirection.UNKNOWN

    try:
        order = Locale(resolved.language).character_order
    except (UnknownLocaleError, KeyError) as e:
        logger.debug(f"No layout data for language {resolved.language}: {str(e)}")
        return LanguageDirection.UNKNOWN

    return CHARACTER_ORDER_DIRECTIONS.get(order, LanguageDirection.UNKNOWN)
