"""Locale trees, schema types, loading and resolution.

Submodules:
    types       - PEP 695 type alias RawTree (decoded document)
    locale      - Locale, Namespace, FlatLocales, NamespacedLocales
    schema      - LeafValue, SubkeysValue, SchemaKeys, BuildersKeys
    decoding    - LocaleSeed (seeded decoding), decode_source
    loading     - LocaleLoader, locale_file_path, load_locales
    resolution  - check_locales, build_schema, ResolvedLocales

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from i18nschema.localization.decoding import LocaleSeed, decode_source
from i18nschema.localization.loading import LocaleLoader, load_locales, locale_file_path
from i18nschema.localization.locale import (
    FlatLocales,
    Locale,
    LocaleTreeSet,
    Namespace,
    NamespacedLocales,
)
from i18nschema.localization.resolution import (
    ResolvedLocales,
    build_schema,
    check_locales,
    check_locales_inner,
    merge_locale,
)
from i18nschema.localization.schema import (
    BuildersKeys,
    FlatBuildersKeys,
    LeafValue,
    LocaleValue,
    NamespacedBuildersKeys,
    SchemaKeys,
    SubkeysValue,
)
from i18nschema.localization.types import RawTree

__all__ = [
    # Resolution
    "check_locales",
    "check_locales_inner",
    "build_schema",
    "merge_locale",
    "ResolvedLocales",
    # Loading
    "LocaleLoader",
    "LocaleSeed",
    "decode_source",
    "load_locales",
    "locale_file_path",
    # Locale trees
    "Locale",
    "Namespace",
    "FlatLocales",
    "NamespacedLocales",
    "LocaleTreeSet",
    # Schema
    "LeafValue",
    "SubkeysValue",
    "LocaleValue",
    "SchemaKeys",
    "FlatBuildersKeys",
    "NamespacedBuildersKeys",
    "BuildersKeys",
    # Type aliases
    "RawTree",
]
