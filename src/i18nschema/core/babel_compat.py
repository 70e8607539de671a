"""Babel access layer.

Imports Babel lazily so that CLDR locale data is only loaded when
configuration actually validates locale identifiers.

Usage Pattern:
    # At module top-level (for type hints only):
    from typing import TYPE_CHECKING
    if TYPE_CHECKING:
        from babel import Locale

    # At function call site (for runtime use):
    from i18nschema.core.babel_compat import get_locale_class

    def my_function(locale_code: str) -> None:
        locale_cls = get_locale_class()
        ...

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType

__all__ = ["get_locale_class", "get_unknown_locale_error"]


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class."""
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class."""
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError
