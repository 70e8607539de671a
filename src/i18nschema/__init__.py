"""i18nschema - typed schema resolution for per-locale translation files.

Loads one translation tree per (locale, namespace), elects the default
locale's tree as the canonical schema, and reconciles every other locale
against it. Structural disagreements are fatal; missing and surplus keys are
collected as warnings for the code-generation stage.

Public API:
    load_config - Read [tool.i18nschema] from a pyproject.toml
    load_locales - Load every locale file of a project
    check_locales - Build the schema(s) and merge every locale
    LocaleLoader - Load a single locale file
    parse_text - Lex one translation string

Exceptions:
    I18nSchemaError - Base exception class
    ConfigError - Invalid configuration
    LocaleFileNotFoundError - Locale file cannot be opened
    LocaleFileDeserError - Locale file cannot be decoded
    ExplicitDefaultInDefaultError - Default locale inherits from itself
    SubKeyMismatchError - Leaf/subtree disagreement with the default locale

Submodules:
    i18nschema.syntax - Keys, key paths, value AST and lexer
    i18nschema.localization - Locale trees, schema, loading and resolution
    i18nschema.diagnostics - Error types, warnings and formatting
"""

from .config import I18nConfig, load_config
from .core import DepthLimitExceededError
from .diagnostics import (
    ConfigError,
    ExplicitDefaultInDefaultError,
    I18nSchemaError,
    KeyWarning,
    LocaleFileDeserError,
    LocaleFileNotFoundError,
    SubKeyMismatchError,
    WarningCollector,
)
from .localization import LocaleLoader, ResolvedLocales, check_locales, load_locales
from .syntax import Key, KeyPath, parse_text

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nschema")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigError",
    "DepthLimitExceededError",
    "ExplicitDefaultInDefaultError",
    "I18nConfig",
    "I18nSchemaError",
    "Key",
    "KeyPath",
    "KeyWarning",
    "LocaleFileDeserError",
    "LocaleFileNotFoundError",
    "LocaleLoader",
    "ResolvedLocales",
    "SubKeyMismatchError",
    "WarningCollector",
    "__version__",
    "check_locales",
    "load_config",
    "load_locales",
    "parse_text",
]
