"""i18nschema exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust/Elm-inspired error messages.
All exceptions store Diagnostic objects for rich error information.

Every exception here is fatal: it aborts the whole resolution and no partial
schema is produced. Non-fatal discrepancies are KeyWarning values instead
(see diagnostics.validation).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from i18nschema.syntax.keys import KeyPath

__all__ = [
    "ConfigError",
    "DecodeError",
    "ExplicitDefaultInDefaultError",
    "I18nSchemaError",
    "LocaleFileDeserError",
    "LocaleFileNotFoundError",
    "SubKeyMismatchError",
]


class I18nSchemaError(Exception):
    """Base exception for all i18nschema errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nSchemaError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigError(I18nSchemaError):
    """Invalid or missing project configuration.

    Attributes:
        path: Configuration file involved (None if not file-related)
    """

    def __init__(self, message: str | Diagnostic, *, path: Path | None = None) -> None:
        """Initialize ConfigError.

        Args:
            message: Error message string OR Diagnostic object
            path: Configuration file involved
        """
        super().__init__(message)
        self.path = path


class DecodeError(I18nSchemaError):
    """A locale document is not a well-formed tree of translations.

    Raised by seeded decoding. Carries the locale and the key path where
    decoding stopped, plus the line/column when the format decoder reported
    one (syntax errors). The loader wraps it in LocaleFileDeserError.
    """


class LocaleFileNotFoundError(I18nSchemaError):
    """Locale file could not be opened at its derived path.

    Attributes:
        path: Path that was attempted
        cause: Underlying OS error
    """

    def __init__(self, message: str | Diagnostic, *, path: Path, cause: OSError) -> None:
        """Initialize LocaleFileNotFoundError.

        Args:
            message: Error message string OR Diagnostic object
            path: Path that was attempted
            cause: Underlying OS error
        """
        super().__init__(message)
        self.path = path
        self.cause = cause


class LocaleFileDeserError(I18nSchemaError):
    """Locale file content could not be decoded.

    Attributes:
        path: Path of the offending file
        error: Location-aware decode error
    """

    def __init__(self, message: str | Diagnostic, *, path: Path, error: DecodeError) -> None:
        """Initialize LocaleFileDeserError.

        Args:
            message: Error message string OR Diagnostic object
            path: Path of the offending file
            error: Location-aware decode error
        """
        super().__init__(message)
        self.path = path
        self.error = error


class ExplicitDefaultInDefaultError(I18nSchemaError):
    """The default locale uses the inherit-from-default marker.

    There is nothing for the default locale to inherit from, so this can only
    originate in the default locale's own tree.

    Attributes:
        key_path: Location of the offending entry
    """

    def __init__(self, message: str | Diagnostic, *, key_path: KeyPath) -> None:
        """Initialize ExplicitDefaultInDefaultError.

        Args:
            message: Error message string OR Diagnostic object
            key_path: Location of the offending entry
        """
        super().__init__(message)
        self.key_path = key_path


class SubKeyMismatchError(I18nSchemaError):
    """A locale value has a different shape (leaf vs subtree) than the schema.

    Attributes:
        locale: Locale holding the mismatching value
        key_path: Location of the mismatching value
        expected: Shape required by the default locale
        received: Shape found in this locale
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale: str,
        key_path: KeyPath,
        expected: str,
        received: str,
    ) -> None:
        """Initialize SubKeyMismatchError.

        Args:
            message: Error message string OR Diagnostic object
            locale: Locale holding the mismatching value
            key_path: Location of the mismatching value
            expected: Shape required by the default locale
            received: Shape found in this locale
        """
        super().__init__(message)
        self.locale = locale
        self.key_path = key_path
        self.expected = expected
        self.received = received
