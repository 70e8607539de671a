"""Locale utilities for BCP-47 to POSIX conversion and locale validation.

Centralizes locale format normalization used when checking configured
locale identifiers against CLDR data.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from i18nschema.core.babel_compat import get_locale_class, get_unknown_locale_error

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "is_known_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    locale_cls = get_locale_class()
    return locale_cls.parse(normalize_locale(locale_code))


def is_known_locale(locale_code: str) -> str | None:
    """Check a locale identifier against CLDR data.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        None if the locale is known, otherwise the reason it was rejected
    """
    unknown_locale_error = get_unknown_locale_error()
    try:
        get_babel_locale(locale_code)
    except (unknown_locale_error, ValueError) as e:
        return str(e)
    return None


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()
