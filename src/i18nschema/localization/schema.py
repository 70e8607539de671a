"""Schema types: the validated shape of every translation key.

The schema is derived from the default locale only, once per namespace (or
once in flat mode). Every entry is classified as:

    LeafValue     - a string or plural, with the interpolation keys it needs
    SubkeysValue  - a nested map, with its own schema and the per-locale
                    subtrees (default first) for literal emission

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from i18nschema.diagnostics import ErrorTemplate, KeyWarning, SubKeyMismatchError
from i18nschema.enums import ValueShape, WarningKind
from i18nschema.syntax.ast import (
    Default,
    InterpolateKey,
    ParsedValue,
    Subkeys,
    interpolation_keys,
    reduce_value,
    shape_name,
)

if TYPE_CHECKING:
    from i18nschema.diagnostics import WarningCollector
    from i18nschema.syntax.keys import Key, KeyPath

    from .locale import Locale, Namespace

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Entries
    "LeafValue",
    "SubkeysValue",
    "LocaleValue",
    # Schemas
    "SchemaKeys",
    "FlatBuildersKeys",
    "NamespacedBuildersKeys",
    "BuildersKeys",
    # Operations
    "classify",
    "merge_value",
]


@dataclass(frozen=True, slots=True)
class LeafValue:
    """Schema entry for a string or plural.

    Attributes:
        interpolation_keys: Arguments callers must supply, None if none
    """

    interpolation_keys: frozenset[InterpolateKey] | None = None

    @property
    def shape(self) -> ValueShape:
        """Always LEAF."""
        return ValueShape.LEAF


@dataclass(slots=True)
class SubkeysValue:
    """Schema entry for a nested map.

    Attributes:
        keys: Schema of the subtree
        locales: The subtree of every merged locale, default locale first
    """

    keys: SchemaKeys
    locales: list[Locale] = field(default_factory=list)

    @property
    def shape(self) -> ValueShape:
        """Always SUBTREE."""
        return ValueShape.SUBTREE


type LocaleValue = LeafValue | SubkeysValue
"""Classification of one schema entry."""


@dataclass(slots=True)
class SchemaKeys:
    """Mapping from key to classified entry for one scope.

    Attributes:
        entries: Classified entries, in default-locale order
    """

    entries: dict[Key, LocaleValue] = field(default_factory=dict)

    def __getitem__(self, key: Key) -> LocaleValue:
        return self.entries[key]

    def __setitem__(self, key: Key, value: LocaleValue) -> None:
        self.entries[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[Key]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: Key) -> LocaleValue | None:
        """Entry for key, None if the schema does not declare it."""
        return self.entries.get(key)

    def items(self) -> Iterator[tuple[Key, LocaleValue]]:
        """Iterate (key, entry) pairs."""
        return iter(self.entries.items())

    def key_names(self) -> set[str]:
        """Names of the top-level keys of this scope."""
        return {key.name for key in self.entries}


@dataclass(slots=True)
class FlatBuildersKeys:
    """Schema of a project without namespaces.

    Attributes:
        locales: Every locale tree, default first
        keys: Schema built from the default locale
    """

    locales: list[Locale]
    keys: SchemaKeys


@dataclass(slots=True)
class NamespacedBuildersKeys:
    """Schemas of a project with namespaces, one per namespace.

    Attributes:
        namespaces: Every namespace with its locale trees
        keys: Schema per namespace key
    """

    namespaces: list[Namespace]
    keys: dict[Key, SchemaKeys]


type BuildersKeys = FlatBuildersKeys | NamespacedBuildersKeys
"""Validated schema(s) handed to code generation."""


def classify(value: ParsedValue) -> LocaleValue:
    """Classify a reduced default-locale value.

    Subtrees build their nested schema recursively (reducing them in place).

    Args:
        value: Reduced value from the default locale

    Returns:
        Schema entry for the value
    """
    match value:
        case Subkeys(locale=locale):
            return SubkeysValue(keys=locale.make_builder_keys(), locales=[locale])
        case _:
            keys = interpolation_keys(value)
            return LeafValue(keys or None)


def merge_value(
    value: ParsedValue,
    entry: LocaleValue,
    default_locale: Key,
    top_locale: Key,
    key_path: KeyPath,
    warnings: WarningCollector,
) -> ParsedValue:
    """Reconcile one non-default value with its schema entry.

    Args:
        value: Value from the locale being merged
        entry: Schema entry for the same key
        default_locale: Locale that defines the schema
        top_locale: Top-level locale being merged
        key_path: Current position (points at this value)
        warnings: Sink for non-fatal discrepancies

    Returns:
        The reduced value, to be stored back in the locale

    Raises:
        SubKeyMismatchError: If the value is a subtree where the schema has
            a leaf, or a leaf where the schema has a subtree
    """
    match value, entry:
        case Default(), _:
            return value
        case Subkeys(locale=subtree), SubkeysValue(keys=keys, locales=locales):
            subtree.merge(keys, default_locale, top_locale, key_path, warnings)
            # The default locale's subtree is already listed first.
            if subtree.top_locale_name != default_locale:
                locales.append(subtree)
            return value
        case (Subkeys(), LeafValue()) | (_, SubkeysValue()):
            expected = entry.shape
            received = shape_name(value)
            raise SubKeyMismatchError(
                ErrorTemplate.subkey_mismatch(
                    top_locale.name, default_locale.name, str(key_path), expected, received
                ),
                locale=top_locale.name,
                key_path=key_path.copy(),
                expected=expected,
                received=received,
            )
        case _, LeafValue(interpolation_keys=declared):
            value = reduce_value(value)
            undeclared = interpolation_keys(value) - (declared or frozenset())
            for key in sorted(undeclared, key=str):
                warnings.emit(
                    KeyWarning(
                        WarningKind.UNDECLARED_INTERPOLATION_KEY,
                        top_locale,
                        key_path.copy(),
                        key,
                    )
                )
            return value
    # Unreachable: entry is always LeafValue or SubkeysValue
    msg = f"Unknown schema entry: {entry!r}"
    raise TypeError(msg)
