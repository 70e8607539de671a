"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases

    Key paths are passed already rendered (``str(key_path)``) so this module
    stays independent of the syntax layer.
    """

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @staticmethod
    def locale_file_not_found(path: str, cause: str) -> Diagnostic:
        """Locale file could not be opened.

        Args:
            path: Attempted path
            cause: Underlying OS error description

        Returns:
            Diagnostic for LOCALE_FILE_NOT_FOUND
        """
        msg = f"Could not open locale file '{path}': {cause}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_FILE_NOT_FOUND,
            message=msg,
            hint="Every configured locale needs a file for every configured namespace",
            file_path=path,
        )

    @staticmethod
    def locale_file_deser(path: str, inner: Diagnostic | None, detail: str) -> Diagnostic:
        """Locale file content could not be decoded.

        Args:
            path: Path of the offending file
            inner: Diagnostic of the underlying decode error (if any)
            detail: Fallback description when no inner diagnostic exists

        Returns:
            Diagnostic for LOCALE_FILE_DESER, carrying the inner location
        """
        reason = inner.message if inner is not None else detail
        msg = f"Failed to decode locale file '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_FILE_DESER,
            message=msg,
            span=inner.span if inner is not None else None,
            hint=inner.hint if inner is not None else None,
            locale=inner.locale if inner is not None else None,
            key_path=inner.key_path if inner is not None else None,
            file_path=path,
        )

    @staticmethod
    def locale_file_too_large(path: str, size: int, limit: int) -> Diagnostic:
        """Locale file exceeds the source size limit.

        Args:
            path: Path of the offending file
            size: Actual size in bytes
            limit: Maximum allowed size in bytes

        Returns:
            Diagnostic for LOCALE_FILE_TOO_LARGE
        """
        msg = f"Locale file '{path}' is {size} bytes, limit is {limit} bytes"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_FILE_TOO_LARGE,
            message=msg,
            hint="Split the translations into namespaces",
            file_path=path,
        )

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    @staticmethod
    def decode_syntax(
        locale: str, detail: str, line: int | None, column: int | None
    ) -> Diagnostic:
        """Format decoder rejected the document.

        Args:
            locale: Locale being decoded
            detail: Decoder error description
            line: Line of the failure (1-indexed, None if unknown)
            column: Column of the failure (1-indexed, None if unknown)

        Returns:
            Diagnostic for DECODE_SYNTAX
        """
        msg = f"Syntax error in locale '{locale}': {detail}"
        return Diagnostic(
            code=DiagnosticCode.DECODE_SYNTAX,
            message=msg,
            span=(
                SourceSpan(line=max(line, 1), column=max(column or 1, 1))
                if line is not None
                else None
            ),
            locale=locale,
        )

    @staticmethod
    def decode_not_a_map(locale: str, key_path: str, found: str) -> Diagnostic:
        """Document (or subtree) is not a mapping.

        Args:
            locale: Locale being decoded
            key_path: Rendered key path ("" for the document root)
            found: Name of the type found instead

        Returns:
            Diagnostic for DECODE_NOT_A_MAP
        """
        where = f"at '{key_path}'" if key_path else "at document root"
        msg = f"Expected a map of string keys {where} in locale '{locale}', found {found}"
        return Diagnostic(
            code=DiagnosticCode.DECODE_NOT_A_MAP,
            message=msg,
            hint="A locale file is a map of keys to strings, maps, sequences or null",
            locale=locale,
            key_path=key_path or None,
        )

    @staticmethod
    def decode_invalid_key(locale: str, key_path: str, key: object) -> Diagnostic:
        """Key cannot be used as an accessor name.

        Args:
            locale: Locale being decoded
            key_path: Rendered key path of the enclosing map
            key: The offending key as decoded

        Returns:
            Diagnostic for DECODE_INVALID_KEY
        """
        msg = f"Invalid key {key!r} in locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.DECODE_INVALID_KEY,
            message=msg,
            hint="Keys must be identifiers: a letter or '_' followed by letters, digits or '_'",
            locale=locale,
            key_path=key_path or None,
        )

    @staticmethod
    def decode_invalid_value(locale: str, key_path: str, found: str) -> Diagnostic:
        """Value is neither string, map, sequence nor null.

        Args:
            locale: Locale being decoded
            key_path: Rendered key path of the value
            found: Name of the type found

        Returns:
            Diagnostic for DECODE_INVALID_VALUE
        """
        msg = (
            f"Invalid value at '{key_path}' in locale '{locale}': "
            f"expected a string, a map, a sequence or null, found {found}"
        )
        return Diagnostic(
            code=DiagnosticCode.DECODE_INVALID_VALUE,
            message=msg,
            hint="Quote numbers and booleans to use them as text",
            locale=locale,
            key_path=key_path,
        )

    @staticmethod
    def decode_invalid_plural(locale: str, key_path: str, reason: str) -> Diagnostic:
        """Sequence value is not a valid plural.

        Args:
            locale: Locale being decoded
            key_path: Rendered key path of the plural
            reason: What is wrong with it

        Returns:
            Diagnostic for DECODE_INVALID_PLURAL
        """
        msg = f"Invalid plural at '{key_path}' in locale '{locale}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.DECODE_INVALID_PLURAL,
            message=msg,
            hint='Plural forms look like ["text", 0] or ["text", "2..5"], fallback "_"',
            locale=locale,
            key_path=key_path,
        )

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @staticmethod
    def explicit_default_in_default(key_path: str) -> Diagnostic:
        """Default locale uses the inherit-from-default marker.

        Args:
            key_path: Rendered key path of the offending entry

        Returns:
            Diagnostic for EXPLICIT_DEFAULT_IN_DEFAULT
        """
        msg = f"Explicit default (null) at '{key_path}' in the default locale"
        return Diagnostic(
            code=DiagnosticCode.EXPLICIT_DEFAULT_IN_DEFAULT,
            message=msg,
            hint="The default locale has nothing to inherit from; give the key a value",
            key_path=key_path,
        )

    @staticmethod
    def subkey_mismatch(
        locale: str, default_locale: str, key_path: str, expected: str, received: str
    ) -> Diagnostic:
        """Locale value shape differs from the schema.

        Args:
            locale: Locale holding the mismatching value
            default_locale: Locale that defines the schema
            key_path: Rendered key path
            expected: Shape required by the default locale
            received: Shape found in this locale

        Returns:
            Diagnostic for SUBKEY_MISMATCH
        """
        msg = (
            f"Value at '{key_path}' in locale '{locale}' is a {received}, "
            f"but the default locale '{default_locale}' defines a {expected}"
        )
        return Diagnostic(
            code=DiagnosticCode.SUBKEY_MISMATCH,
            message=msg,
            hint="The default locale decides the shape of every key",
            locale=locale,
            key_path=key_path,
            expected_shape=expected,
            received_shape=received,
        )

    @staticmethod
    def depth_exceeded(
        max_depth: int, locale: str | None = None, key_path: str | None = None
    ) -> Diagnostic:
        """Translation tree nests deeper than allowed.

        Maps and component tags count toward the same limit.

        Args:
            max_depth: Maximum allowed nesting depth
            locale: Locale being decoded (None outside decoding)
            key_path: Rendered key path where the limit was hit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        if key_path:
            msg = f"{msg} at '{key_path}' in locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten deeply nested translation keys and component tags",
            locale=locale,
            key_path=key_path or None,
        )

    # ------------------------------------------------------------------
    # Key warnings
    # ------------------------------------------------------------------

    @staticmethod
    def missing_key(locale: str, key_path: str) -> Diagnostic:
        """Locale lacks a key declared by the default locale.

        Args:
            locale: Locale lacking the key
            key_path: Rendered key path

        Returns:
            Warning diagnostic for MISSING_KEY
        """
        msg = f"Missing key '{key_path}' in locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_KEY,
            message=msg,
            hint="The default locale value is used for this key",
            severity="warning",
            locale=locale,
            key_path=key_path,
        )

    @staticmethod
    def surplus_key(locale: str, key_path: str) -> Diagnostic:
        """Locale declares a key the default locale does not.

        Args:
            locale: Locale declaring the key
            key_path: Rendered key path

        Returns:
            Warning diagnostic for SURPLUS_KEY
        """
        msg = f"Key '{key_path}' in locale '{locale}' is not declared in the default locale"
        return Diagnostic(
            code=DiagnosticCode.SURPLUS_KEY,
            message=msg,
            hint="This value is ignored; add the key to the default locale to use it",
            severity="warning",
            locale=locale,
            key_path=key_path,
        )

    @staticmethod
    def undeclared_interpolation_key(locale: str, key_path: str, name: str) -> Diagnostic:
        """Locale leaf uses an interpolation key the default leaf does not require.

        Args:
            locale: Locale holding the leaf
            key_path: Rendered key path
            name: Rendered interpolation key

        Returns:
            Warning diagnostic for UNDECLARED_INTERPOLATION_KEY
        """
        msg = (
            f"Value at '{key_path}' in locale '{locale}' uses {name}, "
            "which the default locale does not declare"
        )
        return Diagnostic(
            code=DiagnosticCode.UNDECLARED_INTERPOLATION_KEY,
            message=msg,
            hint="Callers are never asked for it; use it in the default locale too",
            severity="warning",
            locale=locale,
            key_path=key_path,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @staticmethod
    def config_not_found(path: str, cause: str) -> Diagnostic:
        """Configuration file could not be read.

        Args:
            path: Configuration file path
            cause: Underlying error description

        Returns:
            Diagnostic for CONFIG_NOT_FOUND
        """
        msg = f"Could not read configuration file '{path}': {cause}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_NOT_FOUND,
            message=msg,
            file_path=path,
        )

    @staticmethod
    def config_table_missing(path: str, table: str) -> Diagnostic:
        """Configuration table is absent.

        Args:
            path: Configuration file path
            table: Expected table name

        Returns:
            Diagnostic for CONFIG_TABLE_MISSING
        """
        msg = f"Missing [tool.{table}] table in '{path}'"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_TABLE_MISSING,
            message=msg,
            hint=f'Add [tool.{table}] with at least default = "en" and locales = ["en"]',
            file_path=path,
        )

    @staticmethod
    def config_invalid_value(field: str, expected: str, found: object) -> Diagnostic:
        """Configuration field has the wrong type or value.

        Args:
            field: Configuration field name
            expected: Description of the expected value
            found: Value found

        Returns:
            Diagnostic for CONFIG_INVALID_VALUE
        """
        msg = f"Invalid configuration value for '{field}': expected {expected}, found {found!r}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_INVALID_VALUE,
            message=msg,
        )

    @staticmethod
    def config_default_not_in_locales(default: str) -> Diagnostic:
        """Default locale is not one of the configured locales.

        Args:
            default: Configured default locale

        Returns:
            Diagnostic for CONFIG_DEFAULT_NOT_IN_LOCALES
        """
        msg = f"Default locale '{default}' is not listed in 'locales'"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_DEFAULT_NOT_IN_LOCALES,
            message=msg,
            hint="Add the default locale to the locales list",
        )

    @staticmethod
    def config_duplicate_entry(field: str, value: str) -> Diagnostic:
        """Configuration list contains a duplicate.

        Args:
            field: Configuration field name
            value: Duplicated value

        Returns:
            Diagnostic for CONFIG_DUPLICATE_ENTRY
        """
        msg = f"Duplicate entry '{value}' in '{field}'"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_DUPLICATE_ENTRY,
            message=msg,
        )

    @staticmethod
    def config_unknown_locale(locale: str, cause: str) -> Diagnostic:
        """Locale identifier is not recognized.

        Args:
            locale: Offending locale identifier
            cause: Why it was rejected

        Returns:
            Diagnostic for CONFIG_UNKNOWN_LOCALE
        """
        msg = f"Unknown locale '{locale}': {cause}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_UNKNOWN_LOCALE,
            message=msg,
            hint="Use BCP-47 identifiers such as 'en', 'fr-CA' or 'zh-Hans'",
            locale=locale,
        )
