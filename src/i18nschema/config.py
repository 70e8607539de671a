"""Project configuration from pyproject.toml.

The configuration lives in the [tool.i18nschema] table:

    [tool.i18nschema]
    default = "en"
    locales = ["en", "fr", "de"]
    namespaces = ["common", "home"]    # optional
    locales-dir = "locales"            # optional, relative to pyproject.toml
    file-format = "json"               # optional, "json" or "yaml"
    suppress-key-warnings = false      # optional

The default locale is always moved to the front of the locale list: the
first locale of every scope is the one that shapes the schema.

Python 3.13+.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from i18nschema.constants import CONFIG_TABLE, DEFAULT_LOCALES_DIR
from i18nschema.core.identifier_validation import is_valid_key
from i18nschema.diagnostics import ConfigError, ErrorTemplate
from i18nschema.enums import FileFormat
from i18nschema.locale_utils import is_known_locale
from i18nschema.syntax.keys import Key

__all__ = ["I18nConfig", "load_config"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class I18nConfig:
    """Validated project configuration.

    Attributes:
        default: Default locale (shapes the schema)
        locales: Every locale, default first
        namespaces: Namespaces in order, None for a flat layout
        locales_dir: Directory holding the locale files
        file_format: Format of every locale file
        suppress_key_warnings: Collect key warnings without logging them
    """

    default: Key
    locales: tuple[Key, ...]
    namespaces: tuple[Key, ...] | None = None
    locales_dir: Path = Path(DEFAULT_LOCALES_DIR)
    file_format: FileFormat = FileFormat.JSON
    suppress_key_warnings: bool = False

    @classmethod
    def from_mapping(
        cls,
        table: Mapping[str, object],
        base_dir: Path,
        *,
        path: Path | None = None,
    ) -> I18nConfig:
        """Validate a configuration table.

        Args:
            table: Contents of [tool.i18nschema]
            base_dir: Directory locales-dir is relative to
            path: Configuration file (for diagnostics)

        Returns:
            Validated configuration

        Raises:
            ConfigError: If any field is missing or invalid
        """
        default = table.get("default")
        if not isinstance(default, str) or not default:
            raise ConfigError(
                ErrorTemplate.config_invalid_value("default", "a locale string", default),
                path=path,
            )

        locale_names = _string_list(table, "locales", path)
        if not locale_names:
            raise ConfigError(
                ErrorTemplate.config_invalid_value("locales", "a non-empty list", []),
                path=path,
            )
        _reject_duplicates("locales", locale_names, path)
        if default not in locale_names:
            raise ConfigError(ErrorTemplate.config_default_not_in_locales(default), path=path)
        for name in locale_names:
            cause = is_known_locale(name)
            if cause is not None:
                raise ConfigError(ErrorTemplate.config_unknown_locale(name, cause), path=path)

        namespaces: tuple[Key, ...] | None = None
        if "namespaces" in table:
            ns_names = _string_list(table, "namespaces", path)
            _reject_duplicates("namespaces", ns_names, path)
            for name in ns_names:
                if not is_valid_key(name):
                    raise ConfigError(
                        ErrorTemplate.config_invalid_value(
                            "namespaces", "identifiers usable as keys", name
                        ),
                        path=path,
                    )
            namespaces = tuple(Key.intern(name) for name in ns_names)

        locales_dir = table.get("locales-dir", DEFAULT_LOCALES_DIR)
        if not isinstance(locales_dir, str) or not locales_dir:
            raise ConfigError(
                ErrorTemplate.config_invalid_value("locales-dir", "a directory path", locales_dir),
                path=path,
            )

        raw_format = table.get("file-format", FileFormat.JSON.value)
        try:
            file_format = FileFormat(raw_format)
        except ValueError:
            expected = " or ".join(f'"{f.value}"' for f in FileFormat)
            raise ConfigError(
                ErrorTemplate.config_invalid_value("file-format", expected, raw_format),
                path=path,
            ) from None

        suppress = table.get("suppress-key-warnings", False)
        if not isinstance(suppress, bool):
            raise ConfigError(
                ErrorTemplate.config_invalid_value("suppress-key-warnings", "a boolean", suppress),
                path=path,
            )

        ordered = [default, *(name for name in locale_names if name != default)]
        return cls(
            default=Key.intern(default),
            locales=tuple(Key.intern(name) for name in ordered),
            namespaces=namespaces,
            locales_dir=base_dir / locales_dir,
            file_format=file_format,
            suppress_key_warnings=suppress,
        )


def load_config(manifest_path: Path | str = "pyproject.toml") -> I18nConfig:
    """Read and validate [tool.i18nschema] from a pyproject.toml.

    Args:
        manifest_path: Path of the pyproject.toml

    Returns:
        Validated configuration; locales-dir is resolved against the
        manifest's directory

    Raises:
        ConfigError: If the file cannot be read or the table is invalid
    """
    path = Path(manifest_path)
    try:
        with path.open("rb") as f:
            document = tomllib.load(f)
    except OSError as e:
        raise ConfigError(
            ErrorTemplate.config_not_found(str(path), e.strerror or str(e)), path=path
        ) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(ErrorTemplate.config_not_found(str(path), str(e)), path=path) from e

    tool = document.get("tool", {})
    table = tool.get(CONFIG_TABLE) if isinstance(tool, dict) else None
    if not isinstance(table, dict):
        raise ConfigError(ErrorTemplate.config_table_missing(str(path), CONFIG_TABLE), path=path)

    config = I18nConfig.from_mapping(table, path.parent, path=path)
    logger.debug(
        "Loaded configuration from %s: default=%s, %d locales, %s",
        path,
        config.default,
        len(config.locales),
        "flat" if config.namespaces is None else f"{len(config.namespaces)} namespaces",
    )
    return config


def _string_list(table: Mapping[str, object], name: str, path: Path | None) -> list[str]:
    value = table.get(name)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(
            ErrorTemplate.config_invalid_value(name, "a list of strings", value), path=path
        )
    return value


def _reject_duplicates(name: str, values: list[str], path: Path | None) -> None:
    seen: set[str] = set()
    for value in values:
        if value in seen:
            raise ConfigError(ErrorTemplate.config_duplicate_entry(name, value), path=path)
        seen.add(value)
