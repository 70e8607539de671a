"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import KeyWarning

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate messages to prevent oversized build output
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum message length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.missing_key("fr", "nested.a")
        >>> print(formatter.format(diagnostic))
        warning[MISSING_KEY]: Missing key 'nested.a' in locale 'fr'
          --> locale 'fr', key nested.a
          = help: The default locale value is used for this key

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        MISSING_KEY: Missing key 'nested.a' in locale 'fr'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 200

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics separated by blank lines
            (newlines only for the single-line formats)
        """
        separator = "\n\n" if self.output_format == OutputFormat.RUST else "\n"
        return separator.join(self.format(d) for d in diagnostics)

    def format_warnings(self, warnings: Iterable["KeyWarning"]) -> str:
        """Format collected key warnings.

        Args:
            warnings: Warnings collected by a merge pass

        Returns:
            Formatted string, empty if there are no warnings
        """
        return self.format_all(w.to_diagnostic() for w in warnings)

    def _location(self, diagnostic: Diagnostic) -> str | None:
        """Build the ``-->`` location line content, if anything is known."""
        parts: list[str] = []
        if diagnostic.file_path:
            if diagnostic.span:
                parts.append(
                    f"{diagnostic.file_path}:{diagnostic.span.line}:{diagnostic.span.column}"
                )
            else:
                parts.append(diagnostic.file_path)
        elif diagnostic.span:
            parts.append(f"line {diagnostic.span.line}, column {diagnostic.span.column}")
        if diagnostic.locale:
            parts.append(f"locale '{diagnostic.locale}'")
        if diagnostic.key_path:
            parts.append(f"key {diagnostic.key_path}")
        return ", ".join(parts) if parts else None

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[SUBKEY_MISMATCH]: Value at 'a' in locale 'de' is a subtree, ...
              --> locale 'de', key a
              = expected: leaf
              = received: subtree
              = help: The default locale decides the shape of every key
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        location = self._location(diagnostic)
        if location:
            parts.append(f"  --> {location}")

        if diagnostic.expected_shape:
            parts.append(f"  = expected: {diagnostic.expected_shape}")

        if diagnostic.received_shape:
            parts.append(f"  = received: {diagnostic.received_shape}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            MISSING_KEY: Missing key 'a' in locale 'de'
        """
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "MISSING_KEY", "code_value": 3001, "message": "...", "severity": "warning"}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column

        if diagnostic.file_path:
            data["file_path"] = diagnostic.file_path

        if diagnostic.locale:
            data["locale"] = diagnostic.locale

        if diagnostic.key_path:
            data["key_path"] = diagnostic.key_path

        if diagnostic.expected_shape:
            data["expected_shape"] = diagnostic.expected_shape

        if diagnostic.received_shape:
            data["received_shape"] = diagnostic.received_shape

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
