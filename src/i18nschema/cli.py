"""Command line checker.

Loads the configuration, loads and resolves every locale, then prints the
collected warnings and a one-line summary.

Usage:
    python -m i18nschema
    python -m i18nschema --manifest path/to/pyproject.toml --format json
    python -m i18nschema --strict

Exit Codes:
    0   Locales resolved (warnings allowed unless --strict)
    1   Fatal locale error, or any warning with --strict
    2   Configuration error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from i18nschema.config import load_config
from i18nschema.diagnostics import (
    ConfigError,
    DiagnosticFormatter,
    I18nSchemaError,
    OutputFormat,
    WarningCollector,
)
from i18nschema.localization import check_locales, load_locales

__all__ = ["main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOCALE_ERROR = 1
EXIT_CONFIG_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18nschema",
        description="Check translation files against the default locale's schema.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check the project in the current directory:
  python -m i18nschema

  # Machine-readable diagnostics, fail on any warning:
  python -m i18nschema --format json --strict
""",
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        default=Path("pyproject.toml"),
        help="pyproject.toml holding [tool.i18nschema] (default: ./pyproject.toml)",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Diagnostic output format (default: rust)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any warning is reported",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or every file (-vv)",
    )
    return parser


def _report_error(formatter: DiagnosticFormatter, error: I18nSchemaError) -> None:
    if error.diagnostic is not None:
        print(formatter.format(error.diagnostic), file=sys.stderr)
    else:
        print(f"error: {error}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = _build_parser().parse_args(argv)

    level = {0: logging.ERROR, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    formatter = DiagnosticFormatter(output_format=OutputFormat(args.format))

    try:
        config = load_config(args.manifest)
    except ConfigError as e:
        _report_error(formatter, e)
        return EXIT_CONFIG_ERROR
    logger.info("Using configuration from %s", args.manifest)

    # Reported through the formatter below, not the log.
    warnings = WarningCollector(suppress_logging=True)
    try:
        resolved = check_locales(load_locales(config), warnings=warnings)
    except I18nSchemaError as e:
        _report_error(formatter, e)
        return EXIT_LOCALE_ERROR

    if resolved.warnings and not config.suppress_key_warnings:
        print(formatter.format_warnings(resolved.warnings))

    scopes = "flat" if config.namespaces is None else f"{len(config.namespaces)} namespace(s)"
    print(
        f"Checked {len(config.locales)} locale(s), {scopes}: "
        f"{len(resolved.warnings)} warning(s)",
        file=sys.stderr,
    )

    if args.strict and resolved.warnings:
        return EXIT_LOCALE_ERROR
    return EXIT_OK
