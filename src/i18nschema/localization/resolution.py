"""Schema resolution: build from the default locale, merge the others.

For every scope (each namespace, or the whole project in flat mode) the first
locale is the default. Its tree is checked for inherit markers, reduced and
classified into a SchemaKeys. Every other locale is then merged against that
schema: shape mismatches raise, missing and surplus keys are collected as
warnings.

Usage:
    >>> tree_set = load_locales(config)
    >>> resolved = check_locales(tree_set)
    >>> for warning in resolved.warnings:
    ...     print(warning)

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from i18nschema.diagnostics import (
    ErrorTemplate,
    ExplicitDefaultInDefaultError,
    KeyWarning,
    WarningCollector,
)
from i18nschema.syntax.keys import KeyPath

from .locale import FlatLocales, Locale, LocaleTreeSet, NamespacedLocales
from .schema import BuildersKeys, FlatBuildersKeys, NamespacedBuildersKeys, SchemaKeys

if TYPE_CHECKING:
    from i18nschema.syntax.keys import Key

__all__ = [
    "ResolvedLocales",
    "build_schema",
    "check_locales",
    "check_locales_inner",
    "merge_locale",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedLocales:
    """Outcome of a successful resolution.

    Attributes:
        builders_keys: Validated schema(s) with the per-locale trees
        warnings: Non-fatal discrepancies, in detection order
    """

    builders_keys: BuildersKeys
    warnings: tuple[KeyWarning, ...] = ()

    @property
    def has_warnings(self) -> bool:
        """True if any locale deviates from the default locale's keys."""
        return bool(self.warnings)


def build_schema(default_locale: Locale, namespace: Key | None = None) -> SchemaKeys:
    """Build the schema of one scope from its default locale.

    The tree is reduced in place.

    Args:
        default_locale: Root tree of the default locale
        namespace: Scope of the tree (None in flat mode)

    Returns:
        Classified schema of the scope

    Raises:
        ExplicitDefaultInDefaultError: If the tree inherits anywhere
    """
    found = default_locale.find_explicit_default(KeyPath(namespace))
    if found is not None:
        raise ExplicitDefaultInDefaultError(
            ErrorTemplate.explicit_default_in_default(str(found)),
            key_path=found,
        )
    return default_locale.make_builder_keys()


def merge_locale(
    locale: Locale,
    schema: SchemaKeys,
    default_locale: Key,
    namespace: Key | None,
    warnings: WarningCollector,
) -> None:
    """Merge one non-default root tree against its scope's schema.

    Raises:
        SubKeyMismatchError: On a leaf/subtree disagreement
    """
    logger.debug("Merging locale '%s' into the schema of '%s'", locale.name, default_locale)
    locale.merge(schema, default_locale, locale.top_locale_name, KeyPath(namespace), warnings)


def check_locales_inner(
    locales: list[Locale], namespace: Key | None, warnings: WarningCollector
) -> SchemaKeys:
    """Resolve one scope: the first locale is the default.

    Args:
        locales: Root trees of the scope, default first
        namespace: Scope (None in flat mode)
        warnings: Sink for non-fatal discrepancies

    Returns:
        Schema of the scope; SubkeysValue entries list every locale's subtree

    Raises:
        ValueError: If locales is empty
        ExplicitDefaultInDefaultError: If the default tree inherits anywhere
        SubKeyMismatchError: If a locale disagrees on a value's shape
    """
    if not locales:
        msg = "At least one locale is required to build a schema"
        raise ValueError(msg)

    default, *others = locales
    schema = build_schema(default, namespace)
    for locale in others:
        merge_locale(locale, schema, default.name, namespace, warnings)
    return schema


def check_locales(
    tree_set: LocaleTreeSet, *, warnings: WarningCollector | None = None
) -> ResolvedLocales:
    """Resolve every scope of a project.

    Args:
        tree_set: Every parsed locale tree, default locale first
        warnings: Collector to accumulate into (a fresh one if None)

    Returns:
        Schema(s) plus every warning collected

    Raises:
        ExplicitDefaultInDefaultError: If a default tree inherits anywhere
        SubKeyMismatchError: If a locale disagrees on a value's shape
    """
    collector = warnings if warnings is not None else WarningCollector()

    match tree_set:
        case NamespacedLocales(namespaces=namespaces):
            keys: dict[Key, SchemaKeys] = {}
            for namespace in namespaces:
                logger.info(
                    "Resolving namespace '%s' (%d locales)", namespace.key, len(namespace.locales)
                )
                keys[namespace.key] = check_locales_inner(
                    namespace.locales, namespace.key, collector
                )
            builders_keys: BuildersKeys = NamespacedBuildersKeys(namespaces, keys)
        case FlatLocales(locales=locales):
            logger.info("Resolving %d locales", len(locales))
            builders_keys = FlatBuildersKeys(locales, check_locales_inner(locales, None, collector))

    logger.info("Resolution finished with %d warnings", len(collector))
    return ResolvedLocales(builders_keys, collector.warnings)
