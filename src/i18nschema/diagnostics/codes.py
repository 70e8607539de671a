"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1099: Locale file loading errors
        1100-1199: Locale file decoding errors (shape of the decoded tree)
        2000-2999: Structural errors found while building or merging the schema
        3000-3999: Key warnings (non-fatal discrepancies between locales)
        4000-4999: Configuration errors
    """

    # Loading errors (1000-1099)
    LOCALE_FILE_NOT_FOUND = 1001
    LOCALE_FILE_DESER = 1002
    LOCALE_FILE_TOO_LARGE = 1003

    # Decoding errors (1100-1199)
    DECODE_SYNTAX = 1100
    DECODE_NOT_A_MAP = 1101
    DECODE_INVALID_KEY = 1102
    DECODE_INVALID_VALUE = 1103
    DECODE_INVALID_PLURAL = 1104

    # Structural errors (2000-2999)
    EXPLICIT_DEFAULT_IN_DEFAULT = 2001
    SUBKEY_MISMATCH = 2002
    MAX_DEPTH_EXCEEDED = 2003

    # Key warnings (3000-3999)
    MISSING_KEY = 3001
    SURPLUS_KEY = 3002
    UNDECLARED_INTERPOLATION_KEY = 3003

    # Configuration errors (4000-4999)
    CONFIG_NOT_FOUND = 4001
    CONFIG_TABLE_MISSING = 4002
    CONFIG_INVALID_VALUE = 4003
    CONFIG_DEFAULT_NOT_IN_LOCALES = 4004
    CONFIG_DUPLICATE_ENTRY = 4005
    CONFIG_UNKNOWN_LOCALE = 4006


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside a locale file, as reported by the format decoder.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If line or column is less than 1 (both are 1-indexed).
        """
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (build output, editors).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Line/column in the locale file (decode errors only)
        hint: Suggestion for fixing the error
        severity: Error severity level
        locale: Locale the diagnostic is attributed to
        key_path: Rendered key path (``ns::a.b``) of the offending entry
        file_path: Locale or configuration file involved
        expected_shape: Shape the schema requires (shape mismatches)
        received_shape: Shape the locale provided (shape mismatches)
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"
    locale: str | None = None
    key_path: str | None = None
    file_path: str | None = None
    expected_shape: str | None = None
    received_shape: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[SUBKEY_MISMATCH]: Value at 'nested' in locale 'fr' is a leaf, ...
              --> locale 'fr', key nested
              = expected: subtree
              = received: leaf

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
