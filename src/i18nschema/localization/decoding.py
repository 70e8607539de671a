"""Seeded decoding of locale documents into Locale trees.

Decoding happens in two steps:

1. decode_source() runs the format decoder (json or PyYAML) and turns its
   syntax errors into DecodeError with line and column.
2. LocaleSeed.deserialize() walks the decoded document. The seed threads the
   locale identity and the current KeyPath through every nested decode, so a
   shape error reports exactly which key of which locale is wrong.

Value mapping:
    string    -> lexed text (see syntax.parser)
    mapping   -> Subkeys (a nested Locale)
    sequence  -> Plural
    null      -> Default (inherit from the default locale)

Python 3.13+.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NoReturn

import yaml

from i18nschema.core.depth_guard import DepthGuard, DepthLimitExceededError
from i18nschema.core.identifier_validation import is_valid_key
from i18nschema.diagnostics import DecodeError, ErrorTemplate
from i18nschema.enums import FileFormat
from i18nschema.syntax.ast import Default, ParsedValue, Plural, PluralForm, PluralRange, Subkeys
from i18nschema.syntax.keys import Key, KeyPath
from i18nschema.syntax.parser import parse_text

from .locale import Locale

if TYPE_CHECKING:
    from .types import RawTree

__all__ = ["LocaleSeed", "decode_source"]


def decode_source(source: str, file_format: FileFormat, locale: Key) -> RawTree:
    """Run the format decoder on a locale document.

    Args:
        source: Document text
        file_format: Format fixed by configuration
        locale: Locale being decoded (for diagnostics)

    Returns:
        Decoded document (an empty mapping for an empty YAML document)

    Raises:
        DecodeError: If the document is not well-formed
    """
    match file_format:
        case FileFormat.JSON:
            try:
                return json.loads(source)
            except json.JSONDecodeError as e:
                raise DecodeError(
                    ErrorTemplate.decode_syntax(locale.name, e.msg, e.lineno, e.colno)
                ) from e
        case FileFormat.YAML:
            try:
                document = yaml.safe_load(source)
            except yaml.MarkedYAMLError as e:
                mark = e.problem_mark or e.context_mark
                line = mark.line + 1 if mark is not None else None
                column = mark.column + 1 if mark is not None else None
                detail = e.problem or e.context or str(e)
                raise DecodeError(
                    ErrorTemplate.decode_syntax(locale.name, detail, line, column)
                ) from e
            except yaml.YAMLError as e:
                raise DecodeError(
                    ErrorTemplate.decode_syntax(locale.name, str(e), None, None)
                ) from e
            return {} if document is None else document


@dataclass(slots=True)
class LocaleSeed:
    """Decoding context for one locale document.

    Attributes:
        name: Name of the tree being decoded
        top_locale_name: Locale of the file
        key_path: Current position, starting at the namespace root
        depth_guard: Nesting limit shared by the whole document
    """

    name: Key
    top_locale_name: Key
    key_path: KeyPath
    depth_guard: DepthGuard = field(default_factory=DepthGuard)

    @classmethod
    def for_locale(cls, locale: Key, namespace: Key | None = None) -> LocaleSeed:
        """Seed for the root tree of a locale file."""
        return cls(name=locale, top_locale_name=locale, key_path=KeyPath(namespace))

    def deserialize(self, raw: RawTree) -> Locale:
        """Decode a document into the root Locale tree.

        Args:
            raw: Document as produced by decode_source()

        Returns:
            Decoded tree

        Raises:
            DecodeError: If the document is not a mapping of keys to values
            DepthLimitExceededError: If maps and component tags nest deeper
                than MAX_DEPTH
        """
        keys = self._decode_map(raw)
        return Locale(top_locale_name=self.top_locale_name, name=self.name, keys=keys)

    @property
    def _locale(self) -> str:
        return self.top_locale_name.name

    def _decode_map(self, raw: RawTree) -> dict[Key, ParsedValue]:
        if not isinstance(raw, dict):
            raise DecodeError(
                ErrorTemplate.decode_not_a_map(self._locale, str(self.key_path), _type_name(raw))
            )
        keys: dict[Key, ParsedValue] = {}
        self._check_depth()
        with self.depth_guard:
            for raw_key, raw_value in raw.items():
                if not isinstance(raw_key, str) or not is_valid_key(raw_key):
                    raise DecodeError(
                        ErrorTemplate.decode_invalid_key(self._locale, str(self.key_path), raw_key)
                    )
                key = Key.intern(raw_key)
                with self.key_path.descend(key):
                    keys[key] = self._decode_value(raw_value, key)
        return keys

    def _check_depth(self) -> None:
        try:
            self.depth_guard.check()
        except DepthLimitExceededError:
            raise self._depth_error() from None

    def _parse_text(self, text: str) -> ParsedValue:
        try:
            return parse_text(text, self.depth_guard)
        except DepthLimitExceededError:
            raise self._depth_error() from None

    def _depth_error(self) -> DepthLimitExceededError:
        return DepthLimitExceededError(
            ErrorTemplate.depth_exceeded(
                self.depth_guard.max_depth, self._locale, str(self.key_path)
            )
        )

    def _decode_value(self, raw: RawTree, key: Key) -> ParsedValue:
        match raw:
            case None:
                return Default()
            case bool() | int() | float():
                raise DecodeError(
                    ErrorTemplate.decode_invalid_value(
                        self._locale, str(self.key_path), _type_name(raw)
                    )
                )
            case str():
                return self._parse_text(raw)
            case dict():
                subtree = Locale(
                    top_locale_name=self.top_locale_name,
                    name=key,
                    keys=self._decode_map(raw),
                )
                return Subkeys(subtree)
            case list():
                return self._decode_plural(raw)
            case _:
                raise DecodeError(
                    ErrorTemplate.decode_invalid_value(
                        self._locale, str(self.key_path), _type_name(raw)
                    )
                )

    def _decode_plural(self, raw: list[object]) -> Plural:
        if not raw:
            self._plural_error("a plural needs at least one form")
        forms: list[PluralForm] = []
        for index, item in enumerate(raw):
            match item:
                case str():
                    forms.append(PluralForm(self._parse_text(item), (PluralRange(),)))
                case list() if not item:
                    self._plural_error(f"form {index} is empty")
                case [str() as text, *selectors]:
                    ranges = tuple(self._parse_selector(index, s) for s in selectors)
                    forms.append(PluralForm(self._parse_text(text), ranges or (PluralRange(),)))
                case list():
                    self._plural_error(
                        f"form {index} must start with its text, found {_type_name(item[0])}"
                    )
                case dict():
                    self._plural_error(f"form {index} is a map; plurals cannot contain subkeys")
                case None:
                    self._plural_error(f"form {index} is null; plurals cannot inherit")
                case _:
                    self._plural_error(
                        f"form {index} must be a string or a [text, selector...] sequence, "
                        f"found {_type_name(item)}"
                    )
        return Plural(tuple(forms))

    def _parse_selector(self, index: int, selector: object) -> PluralRange:
        if isinstance(selector, list):
            self._plural_error(f"form {index} contains a nested sequence; plurals cannot nest")
        if isinstance(selector, bool) or not isinstance(selector, (int, str)):
            self._plural_error(
                f"form {index} selector must be an integer or a range string, "
                f"found {_type_name(selector)}"
            )
        try:
            return PluralRange.parse(selector)
        except ValueError as e:
            self._plural_error(f"form {index}: {e}")

    def _plural_error(self, reason: str) -> NoReturn:
        raise DecodeError(
            ErrorTemplate.decode_invalid_plural(self._locale, str(self.key_path), reason)
        )


def _type_name(raw: object) -> str:
    """Format-neutral name of a decoded value's type."""
    match raw:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list():
            return "sequence"
        case dict():
            return "map"
        case _:
            return type(raw).__name__
