"""
Command-line interface for generating translation catalogs from .proto files.

Enum value names and validation rule ids found in the definition files
become catalog keys. Existing translations are preserved on every run.

Usage Examples:
    Generate en.toml and zh.toml from the default definitions:
        proto-i18n

    Scan another directory and write three languages:
        proto-i18n -P api/errors/errors.proto -O locales/ -L en,zh,ja

    Only use enums whose name ends with "Error":
        proto-i18n -suffix Error

    Fail in CI when catalogs are out of date:
        proto-i18n --check
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple

from .config.manager import ConfigManager
from .config.schema import DEFAULT_LANGUAGES, DEFAULT_OUTPUT_DIR, DEFAULT_PROTO_PATTERN
from .generator import generate_catalogs
from .utils.core.exceptions import ProtoI18nError


class GenerateArgs(NamedTuple):
    """Type-safe container for command-line arguments."""

    proto_pattern: str | None
    output_dir: Path | None
    languages: str | None
    prefix: str | None
    suffix: str | None
    config: Path | None
    verbose: bool
    dry_run: bool
    check: bool


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: Enable verbose logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command-line interface."""
    parser = argparse.ArgumentParser(
        prog="proto-i18n",
        description="Generate translation catalogs from .proto enum values and validation rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Use the default definitions path
  %(prog)s -P api/errors.proto -O locales/  # Custom source and output
  %(prog)s -L en,zh,ja                      # Custom language list
  %(prog)s -prefix Biz -suffix Error        # Filter enums by name
  %(prog)s --check                          # Exit 1 if catalogs are stale
        """,
    )

    _ = parser.add_argument(
        "-P",
        dest="proto_pattern",
        default=None,
        help=f"Path pattern to the .proto files; its directory is searched recursively (default: {DEFAULT_PROTO_PATTERN})",
    )

    _ = parser.add_argument(
        "-O",
        dest="output_dir",
        type=Path,
        default=None,
        help=f"Path to the output directory (default: {DEFAULT_OUTPUT_DIR})",
    )

    _ = parser.add_argument(
        "-L",
        dest="languages",
        default=None,
        help=f"Comma-separated list of languages (default: {DEFAULT_LANGUAGES})",
    )

    _ = parser.add_argument(
        "-prefix",
        dest="prefix",
        default=None,
        help="Only process enums with this prefix (optional)",
    )

    _ = parser.add_argument(
        "-suffix",
        dest="suffix",
        default=None,
        help="Only process enums with this suffix (optional)",
    )

    _ = parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with default values for the options above",
    )

    _ = parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose logging"
    )

    _ = parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be done without writing any catalog",
    )

    _ = parser.add_argument(
        "--check",
        action="store_true",
        help="Check mode: exit with status 1 if any catalog is out of date",
    )

    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> GenerateArgs:
    """
    Parse command-line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments in a type-safe container
    """
    args = create_argument_parser().parse_args(argv)

    # Convert to type-safe container - argparse returns Any types
    return GenerateArgs(
        proto_pattern=args.proto_pattern,  # pyright: ignore[reportAny]
        output_dir=args.output_dir,  # pyright: ignore[reportAny]
        languages=args.languages,  # pyright: ignore[reportAny]
        prefix=args.prefix,  # pyright: ignore[reportAny]
        suffix=args.suffix,  # pyright: ignore[reportAny]
        config=args.config,  # pyright: ignore[reportAny]
        verbose=args.verbose,  # pyright: ignore[reportAny]
        dry_run=args.dry_run,  # pyright: ignore[reportAny]
        check=args.check,  # pyright: ignore[reportAny]
    )


def build_overrides(args: GenerateArgs) -> dict[str, object]:
    """Map explicitly given command-line values onto configuration fields."""
    overrides: dict[str, object] = {
        "proto_pattern": args.proto_pattern,
        "output_dir": args.output_dir,
        "languages": args.languages,
        "enum_prefix": args.prefix,
        "enum_suffix": args.suffix,
    }
    # Flags only override the config file when set
    if args.dry_run:
        overrides["dry_run"] = True
    if args.check:
        overrides["check"] = True
    return overrides


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for catalog generation.

    Returns:
        Exit code (0 for success, 1 for error or stale catalogs)
    """
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    try:
        config = ConfigManager.build_config(args.config, build_overrides(args))
        result = generate_catalogs(config)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 1
    except ProtoI18nError as e:
        logger.error(str(e))
        if args.verbose:
            logger.exception("Full traceback:")
        return 1

    logger.info(str(result))
    if result.written_languages:
        logger.info(f"Written catalogs: {', '.join(result.written_languages)}")
    if result.has_failures:
        logger.warning(
            f"Completed with errors: {len(result.skipped_files)} source files skipped, "
            f"{len(result.failed_languages)} catalogs failed"
        )

    if config.check:
        stale = result.stale_languages
        failed = [lang for lang, _ in result.failed_languages]
        if stale:
            logger.info(f"Catalogs need update: {', '.join(stale)}")
        if failed:
            logger.error(f"Catalogs could not be checked: {', '.join(failed)}")
        if stale or failed:
            return 1
        logger.info("All catalogs are up to date")

    return 0


if __name__ == "__main__":
    sys.exit(main())
