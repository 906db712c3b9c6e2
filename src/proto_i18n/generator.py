"""
Catalog generation pipeline.

This module runs one complete generation pass: discover definition files,
extract and aggregate keys, then create or update one catalog per target
language. Failures of a single source file or a single language are logged
and skipped; failures that leave nothing to generate are raised.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import override

from .catalog.writer import CatalogStatus, generate_catalog
from .config.schema import GeneratorConfig
from .extraction.aggregator import aggregate_results
from .extraction.discovery import find_proto_files
from .extraction.proto_keys import extract_keys_from_file
from .extraction.types import ExtractionResult
from .utils.core.exceptions import (
    CatalogReadError,
    CatalogWriteError,
    NoFilesFoundError,
    NoKeysFoundError,
    OutputDirError,
    ProtoParseError,
)

logger = logging.getLogger(__name__)

CATALOG_EXTENSION = ".toml"


class GenerationResult:
    """Result of a generation run."""

    def __init__(self) -> None:
        self.source_files: list[Path] = []
        self.skipped_files: list[tuple[Path, Exception]] = []
        self.key_count: int = 0
        self.catalogs: dict[str, CatalogStatus] = {}
        self.failed_languages: list[tuple[str, Exception]] = []

    @property
    def written_languages(self) -> list[str]:
        """Languages whose catalog was written."""
        return [
            lang
            for lang, status in self.catalogs.items()
            if status is CatalogStatus.WRITTEN
        ]

    @property
    def stale_languages(self) -> list[str]:
        """Languages whose catalog differs from the freshly rendered one."""
        return [
            lang
            for lang, status in self.catalogs.items()
            if status is CatalogStatus.STALE
        ]

    @property
    def has_failures(self) -> bool:
        return bool(self.skipped_files or self.failed_languages)

    @override
    def __str__(self) -> str:
        return (
            f"Generation Results: "
            f"{self.key_count} keys from {len(self.source_files)} files "
            f"({len(self.skipped_files)} skipped), "
            f"{len(self.catalogs)} catalogs processed, "
            f"{len(self.failed_languages)} failed"
        )


def catalog_path(output_dir: Path, language: str) -> Path:
    """Path of the catalog for a language, e.g. ``i18n/en.toml``."""
    return output_dir / f"{language}{CATALOG_EXTENSION}"


def extract_all(
    proto_files: list[Path], config: GeneratorConfig, result: GenerationResult
) -> ExtractionResult:
    """
    Extract keys from every file and aggregate them.

    Files that fail to parse are logged and recorded in ``result``.
    """
    per_file: list[ExtractionResult] = []
    for proto_file in proto_files:
        try:
            per_file.append(
                extract_keys_from_file(
                    proto_file, config.enum_prefix, config.enum_suffix
                )
            )
        except ProtoParseError as e:
            logger.error(f"Failed to parse proto file {proto_file}: {e}")
            result.skipped_files.append((proto_file, e))

    return aggregate_results(per_file)


def generate_catalogs(config: GeneratorConfig) -> GenerationResult:
    """
    Run a full generation pass.

    Args:
        config: Configuration for the run

    Returns:
        GenerationResult with per-file and per-language outcomes

    Raises:
        DiscoveryError: If source files cannot be enumerated
        NoFilesFoundError: If no .proto files were found
        NoKeysFoundError: If no keys were extracted
        OutputDirError: If the output directory cannot be created
    """
    result = GenerationResult()

    search_root = config.search_root
    proto_files = find_proto_files(search_root)
    if not proto_files:
        raise NoFilesFoundError(
            f"No proto files found in directory: {search_root}", path=search_root
        )
    result.source_files = proto_files
    logger.info(f"Scanning {len(proto_files)} proto files in {search_root}")

    extracted = extract_all(proto_files, config, result)
    result.key_count = len(extracted)
    if not extracted.keys:
        raise NoKeysFoundError("No entries found in any proto files")
    logger.info(f"Extracted {result.key_count} unique keys")

    writing = not (config.dry_run or config.check)
    if writing:
        try:
            config.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirError(
                f"Failed to create output directory {config.output_dir}: {e}",
                path=config.output_dir,
            ) from e

    for lang in config.languages:
        path = catalog_path(config.output_dir, lang)
        try:
            status = generate_catalog(
                extracted, path, dry_run=config.dry_run, check=config.check
            )
        except (CatalogReadError, CatalogWriteError) as e:
            logger.error(f"Failed to generate {lang}{CATALOG_EXTENSION}: {e}")
            result.failed_languages.append((lang, e))
            continue

        result.catalogs[lang] = status
        if status is CatalogStatus.WRITTEN:
            logger.info(f"{lang}{CATALOG_EXTENSION} generated/updated successfully.")

    return result
