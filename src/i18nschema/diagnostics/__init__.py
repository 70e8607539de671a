"""Diagnostic system for i18nschema errors and warnings.

Provides structured error diagnostics with codes, locations and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    ConfigError,
    DecodeError,
    ExplicitDefaultInDefaultError,
    I18nSchemaError,
    LocaleFileDeserError,
    LocaleFileNotFoundError,
    SubKeyMismatchError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import KeyWarning, WarningCollector

__all__ = [
    "ConfigError",
    "DecodeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "ExplicitDefaultInDefaultError",
    "I18nSchemaError",
    "KeyWarning",
    "LocaleFileDeserError",
    "LocaleFileNotFoundError",
    "OutputFormat",
    "SourceSpan",
    "SubKeyMismatchError",
    "WarningCollector",
]
