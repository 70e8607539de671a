"""Shared constants for i18nschema.

Constants are grouped by domain:
- Depth limits: Recursion protection for decoding and schema traversal
- Input limits: DoS prevention via size constraints
- Interpolation: Implicit plural argument
- Configuration: pyproject.toml table and defaults

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    "MAX_KEY_LENGTH",
    # Interpolation
    "PLURAL_COUNT_KEY",
    # Configuration
    "CONFIG_TABLE",
    "DEFAULT_LOCALES_DIR",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Unified maximum nesting depth for translation trees.
# Counts map nesting plus component tag nesting inside strings, enforced by
# seeded decoding; later traversals only walk decoded trees.
# Real translation files nest 2-4 levels; 100 is clearly malformed input.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum locale file size in bytes (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# Keys become accessor names in generated code.
MAX_KEY_LENGTH: int = 256

# ============================================================================
# INTERPOLATION
# ============================================================================

# Implicit interpolation key required by every plural value.
PLURAL_COUNT_KEY: str = "count"

# ============================================================================
# CONFIGURATION
# ============================================================================

# pyproject.toml table holding the project configuration: [tool.i18nschema]
CONFIG_TABLE: str = "i18nschema"

# Locales directory used when the configuration does not name one.
DEFAULT_LOCALES_DIR: str = "locales"
