"""Locale file loading.

Derives the path of every (locale, namespace) file, reads it and runs seeded
decoding. Layouts:

    flat:        {base}/{locale}.{ext}
    namespaced:  {base}/{locale}/{namespace}.{ext}

The extension is fixed by the configured FileFormat. Paths are immutable
pathlib.Path values derived per call, so a failed load leaves nothing shared
in a modified state.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from i18nschema.constants import MAX_SOURCE_SIZE
from i18nschema.diagnostics import (
    DecodeError,
    ErrorTemplate,
    LocaleFileDeserError,
    LocaleFileNotFoundError,
)
from i18nschema.enums import FileFormat
from i18nschema.syntax.keys import Key

from .decoding import LocaleSeed, decode_source
from .locale import FlatLocales, Locale, LocaleTreeSet, Namespace, NamespacedLocales

if TYPE_CHECKING:
    from i18nschema.config import I18nConfig

__all__ = ["LocaleLoader", "load_locales", "locale_file_path"]

logger = logging.getLogger(__name__)


def locale_file_path(
    base_dir: Path, locale: Key, namespace: Key | None, file_format: FileFormat
) -> Path:
    """Derive the path of one locale file.

    Args:
        base_dir: Locales directory
        locale: Locale of the file
        namespace: Namespace of the file (None in flat mode)
        file_format: Configured file format

    Returns:
        {base}/{locale}/{namespace}.{ext} or {base}/{locale}.{ext}
    """
    if namespace is None:
        return base_dir / f"{locale.name}.{file_format.extension}"
    return base_dir / locale.name / f"{namespace.name}.{file_format.extension}"


@dataclass(frozen=True, slots=True)
class LocaleLoader:
    """Loads locale files from a directory.

    Example:
        >>> loader = LocaleLoader(Path("locales"), FileFormat.JSON)
        >>> en = loader.load(Key.intern("en"))
        # Loads from: locales/en.json

    Attributes:
        base_dir: Locales directory
        file_format: Format of every file
        max_source_size: Largest accepted file, in bytes
    """

    base_dir: Path
    file_format: FileFormat = FileFormat.JSON
    max_source_size: int = MAX_SOURCE_SIZE

    @staticmethod
    def _validate_segment(segment: str) -> None:
        """Reject path segments that could escape base_dir.

        Raises:
            ValueError: If segment is empty or contains separators or '..'
        """
        if not segment:
            msg = "Locale and namespace names cannot be empty"
            raise ValueError(msg)
        if ".." in segment or "/" in segment or "\\" in segment:
            msg = f"Path separators and traversal sequences not allowed: '{segment}'"
            raise ValueError(msg)

    def path_for(self, locale: Key, namespace: Key | None = None) -> Path:
        """Path of the file for locale (and namespace)."""
        self._validate_segment(locale.name)
        if namespace is not None:
            self._validate_segment(namespace.name)
        return locale_file_path(self.base_dir, locale, namespace, self.file_format)

    def load(self, locale: Key, namespace: Key | None = None) -> Locale:
        """Load and decode the file of one locale.

        Args:
            locale: Locale to load
            namespace: Namespace to load (None in flat mode)

        Returns:
            Root tree of the file, named after the locale

        Raises:
            LocaleFileNotFoundError: If the file cannot be opened
            LocaleFileDeserError: If the file is not a tree of translations
            DepthLimitExceededError: If the file nests maps too deeply
            ValueError: If locale or namespace contains path separators
        """
        path = self.path_for(locale, namespace)
        logger.debug("Loading locale file %s", path)

        try:
            size = path.stat().st_size
            if size > self.max_source_size:
                diagnostic = ErrorTemplate.locale_file_too_large(
                    str(path), size, self.max_source_size
                )
                raise LocaleFileDeserError(diagnostic, path=path, error=DecodeError(diagnostic))
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            raise LocaleFileNotFoundError(
                ErrorTemplate.locale_file_not_found(str(path), e.strerror or str(e)),
                path=path,
                cause=e,
            ) from e
        except UnicodeDecodeError as e:
            error = DecodeError(ErrorTemplate.decode_syntax(locale.name, str(e), None, None))
            raise LocaleFileDeserError(
                ErrorTemplate.locale_file_deser(str(path), error.diagnostic, str(e)),
                path=path,
                error=error,
            ) from e

        try:
            raw = decode_source(source, self.file_format, locale)
            tree = LocaleSeed.for_locale(locale, namespace).deserialize(raw)
        except DecodeError as e:
            raise LocaleFileDeserError(
                ErrorTemplate.locale_file_deser(str(path), e.diagnostic, str(e)),
                path=path,
                error=e,
            ) from e

        logger.debug("Loaded %d top-level keys from %s", len(tree.keys), path)
        return tree

    def load_namespace(self, namespace: Key, locales: tuple[Key, ...]) -> Namespace:
        """Load one namespace for every locale, in the given order."""
        return Namespace(
            key=namespace,
            locales=[self.load(locale, namespace) for locale in locales],
        )


def load_locales(config: I18nConfig) -> LocaleTreeSet:
    """Load every locale file of a project.

    Args:
        config: Project configuration (locales in order, default first)

    Returns:
        FlatLocales when no namespaces are configured, NamespacedLocales
        otherwise; locales in configuration order

    Raises:
        LocaleFileNotFoundError: If a file cannot be opened
        LocaleFileDeserError: If a file cannot be decoded
    """
    loader = LocaleLoader(config.locales_dir, config.file_format)
    if config.namespaces is None:
        return FlatLocales([loader.load(locale) for locale in config.locales])
    return NamespacedLocales(
        [loader.load_namespace(ns, config.locales) for ns in config.namespaces]
    )
