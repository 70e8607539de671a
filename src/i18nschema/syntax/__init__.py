"""Translation value syntax package.

Provides interned keys and key paths, the translation value AST and the
placeholder/component lexer. Independent of the localization layer so that
tooling can lex a single string without loading any locale files.

Python 3.13+.
"""

from .ast import (
    Bloc,
    Component,
    Default,
    InterpolateKey,
    Literal,
    ParsedValue,
    Plural,
    PluralForm,
    PluralRange,
    Subkeys,
    Variable,
    interpolation_keys,
    reduce_value,
)
from .keys import Key, KeyPath
from .parser import parse_text

__all__ = [
    "Bloc",
    "Component",
    "Default",
    "InterpolateKey",
    "Key",
    "KeyPath",
    "Literal",
    "ParsedValue",
    "Plural",
    "PluralForm",
    "PluralRange",
    "Subkeys",
    "Variable",
    "interpolation_keys",
    "parse_text",
    "reduce_value",
]
