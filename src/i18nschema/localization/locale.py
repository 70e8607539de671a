"""Parsed locale trees and their containers.

Locale:
    One locale's (or one locale's one namespace's) translations: a mapping
    from Key to value AST, tagged with the owning locale identity.

Namespace:
    A namespace key and its per-locale trees, in configuration order.

LocaleTreeSet:
    The whole project: FlatLocales (no namespaces) or NamespacedLocales.
    Which one is fixed by configuration and never mixed.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from i18nschema.diagnostics import KeyWarning
from i18nschema.enums import WarningKind
from i18nschema.syntax.ast import Default, ParsedValue, Subkeys, reduce_value

from .schema import SchemaKeys, classify, merge_value

if TYPE_CHECKING:
    from i18nschema.diagnostics import WarningCollector
    from i18nschema.syntax.keys import Key, KeyPath

__all__ = [
    "FlatLocales",
    "Locale",
    "LocaleTreeSet",
    "Namespace",
    "NamespacedLocales",
]


@dataclass(slots=True)
class Locale:
    """Translation tree of one locale file or one subtree of it.

    Attributes:
        top_locale_name: Locale of the file the tree was decoded from
        name: top_locale_name for a file's root tree, the subtree key otherwise
        keys: Entries, in file order
    """

    top_locale_name: Key
    name: Key
    keys: dict[Key, ParsedValue] = field(default_factory=dict)

    @property
    def is_top_level(self) -> bool:
        """True for the root tree of a locale file."""
        return self.name == self.top_locale_name

    def get_value_at(self, path: Sequence[Key]) -> ParsedValue | None:
        """Look up a value by key segments, descending through subtrees.

        Args:
            path: Key segments from this tree's root

        Returns:
            The value, or None if any segment is missing or not a subtree
        """
        if not path:
            return None
        value = self.keys.get(path[0])
        if len(path) == 1 or value is None:
            return value
        if not isinstance(value, Subkeys):
            return None
        return value.locale.get_value_at(path[1:])

    def reduce(self) -> None:
        """Replace every value by its reduced form, in place."""
        for key, value in self.keys.items():
            self.keys[key] = reduce_value(value)

    def find_explicit_default(self, key_path: KeyPath) -> KeyPath | None:
        """Find the first inherit-from-default marker, at any depth.

        Args:
            key_path: Position of this tree; restored before returning

        Returns:
            Snapshot of the marker's key path, None if there is none
        """
        for key, value in self.keys.items():
            with key_path.descend(key):
                match value:
                    case Default():
                        return key_path.copy()
                    case Subkeys(locale=subtree):
                        found = subtree.find_explicit_default(key_path)
                        if found is not None:
                            return found
        return None

    def make_builder_keys(self) -> SchemaKeys:
        """Reduce this (default) tree in place and build its schema.

        Returns:
            Schema with one classified entry per key
        """
        schema = SchemaKeys()
        for key, value in self.keys.items():
            reduced = reduce_value(value)
            self.keys[key] = reduced
            schema[key] = classify(reduced)
        return schema

    def merge(
        self,
        schema: SchemaKeys,
        default_locale: Key,
        top_locale: Key,
        key_path: KeyPath,
        warnings: WarningCollector,
    ) -> None:
        """Validate this (non-default) tree against the schema.

        Forward pass: every schema key is reconciled with this tree's value,
        or reported MISSING_KEY. Reverse pass: every key of this tree absent
        from the schema is reported SURPLUS_KEY. Warnings never stop the
        scan; shape mismatches raise immediately.

        Args:
            schema: Schema of this scope
            default_locale: Locale that defines the schema
            top_locale: Locale the warnings are attributed to
            key_path: Position of this tree; restored before returning
            warnings: Sink for non-fatal discrepancies

        Raises:
            SubKeyMismatchError: On a leaf/subtree disagreement
        """
        for key, entry in schema.items():
            with key_path.descend(key):
                value = self.keys.get(key)
                if value is None:
                    warnings.emit(KeyWarning(WarningKind.MISSING_KEY, top_locale, key_path.copy()))
                    continue
                self.keys[key] = merge_value(
                    value, entry, default_locale, top_locale, key_path, warnings
                )

        for key in self.keys:
            if key not in schema:
                with key_path.descend(key):
                    warnings.emit(KeyWarning(WarningKind.SURPLUS_KEY, top_locale, key_path.copy()))


@dataclass(slots=True)
class Namespace:
    """A namespace and its per-locale trees.

    Attributes:
        key: Namespace identifier
        locales: One tree per configured locale, default first
    """

    key: Key
    locales: list[Locale] = field(default_factory=list)

    def get_locale(self, locale: Key) -> Locale | None:
        """Tree of one locale in this namespace."""
        return next((loc for loc in self.locales if loc.name == locale), None)


@dataclass(slots=True)
class FlatLocales:
    """Project without namespaces: one tree per locale, default first."""

    locales: list[Locale]

    def get_value_at(self, top_locale: Key, key_path: KeyPath) -> ParsedValue | None:
        """Look up a parsed value by locale and key path.

        Returns:
            The value, or None if the path has a namespace, the locale is
            unknown or the path does not resolve
        """
        if key_path.namespace is not None:
            return None
        locale = next((loc for loc in self.locales if loc.name == top_locale), None)
        if locale is None:
            return None
        return locale.get_value_at(key_path.path)


@dataclass(slots=True)
class NamespacedLocales:
    """Project with namespaces, in configuration order."""

    namespaces: list[Namespace]

    def get_value_at(self, top_locale: Key, key_path: KeyPath) -> ParsedValue | None:
        """Look up a parsed value by locale and namespaced key path.

        Returns:
            The value, or None if the path has no namespace, the namespace
            or locale is unknown or the path does not resolve
        """
        if key_path.namespace is None:
            return None
        namespace = next((ns for ns in self.namespaces if ns.key == key_path.namespace), None)
        if namespace is None:
            return None
        locale = namespace.get_locale(top_locale)
        if locale is None:
            return None
        return locale.get_value_at(key_path.path)


type LocaleTreeSet = FlatLocales | NamespacedLocales
"""Every parsed locale tree of the project."""
