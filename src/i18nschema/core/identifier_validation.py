"""Key validation for translation keys.

Translation keys become attribute and method names in generated accessor
code, so they follow Python identifier rules:

    - Start: letter or underscore
    - Continue: letter, digit or underscore
    - Not a Python keyword (soft keywords such as 'match' are allowed)
    - Length: Maximum 256 characters (DoS prevention)

Interpolation placeholders and component tags share the same grammar, so
the string lexer uses the character-level predicates for streaming checks.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import keyword

from i18nschema.constants import MAX_KEY_LENGTH

__all__ = [
    "is_identifier_char",
    "is_identifier_start",
    "is_valid_key",
]


def is_identifier_start(ch: str) -> bool:
    """Check if character can start a key.

    Example:
        >>> is_identifier_start('a')
        True
        >>> is_identifier_start('_')
        True
        >>> is_identifier_start('1')
        False
    """
    return len(ch) == 1 and (ch == "_" or ch.isalpha()) and ("_" + ch).isidentifier()


def is_identifier_char(ch: str) -> bool:
    """Check if character can continue a key.

    Example:
        >>> is_identifier_char('5')
        True
        >>> is_identifier_char('-')
        False
    """
    return len(ch) == 1 and ("_" + ch).isidentifier()


def is_valid_key(name: str) -> bool:
    """Validate a complete key.

    Args:
        name: Key string to validate

    Returns:
        True if the key can be used as a generated accessor name

    Example:
        >>> is_valid_key("greeting")
        True
        >>> is_valid_key("click_count_2")
        True
        >>> is_valid_key("2fa")
        False
        >>> is_valid_key("class")
        False
        >>> is_valid_key("")
        False
    """
    if not name or len(name) > MAX_KEY_LENGTH:
        return False
    return name.isidentifier() and not keyword.iskeyword(name)
