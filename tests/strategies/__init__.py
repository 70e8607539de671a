"""Hypothesis strategies for i18nschema property-based testing.

Strategies are organized by domain:

- i18n: Keys, translation strings and locale trees

Usage:
    from tests.strategies import translation_keys, locale_trees
"""

from .i18n import (
    KEY_FIRST_CHARS,
    KEY_REST_CHARS,
    literal_texts,
    locale_trees,
    plural_selectors,
    translation_keys,
    translation_texts,
)

__all__ = [
    "KEY_FIRST_CHARS",
    "KEY_REST_CHARS",
    "literal_texts",
    "locale_trees",
    "plural_selectors",
    "translation_keys",
    "translation_texts",
]
