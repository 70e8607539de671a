"""Enumerations for i18nschema type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FileFormat(StrEnum):
    """Structured-data format of the locale files.

    Fixed for the whole project by configuration, never chosen per file.
    The value doubles as the file extension.
    """

    JSON = "json"
    """JSON documents: locales/en.json"""

    YAML = "yaml"
    """YAML documents: locales/en.yaml"""

    @property
    def extension(self) -> str:
        """File extension (without leading dot) for this format."""
        return self.value


class InterpolationKind(StrEnum):
    """Kind of argument a translation leaf requires from its caller.

    StrEnum provides automatic string conversion: str(InterpolationKind.VARIABLE) == "variable"
    """

    VARIABLE = "variable"
    """Placeholder in text: "hello {name}" """

    COMPONENT = "component"
    """Wrapping component: "click <b>here</b>" """

    COUNT = "count"
    """Implicit plural count: [["one item", 1], "{count} items"]"""


class ValueShape(StrEnum):
    """Shape of a translation entry as seen by the schema."""

    LEAF = "leaf"
    """A string or plural value."""

    SUBTREE = "subtree"
    """A nested map of keys."""


class WarningKind(StrEnum):
    """Kind of non-fatal discrepancy found while merging a locale."""

    MISSING_KEY = "missing-key"
    """Locale lacks a key the default locale declares."""

    SURPLUS_KEY = "surplus-key"
    """Locale declares a key the default locale never declared."""

    UNDECLARED_INTERPOLATION_KEY = "undeclared-interpolation-key"
    """Locale leaf uses an interpolation key the default leaf does not require."""


__all__ = [
    "FileFormat",
    "InterpolationKind",
    "ValueShape",
    "WarningKind",
]
