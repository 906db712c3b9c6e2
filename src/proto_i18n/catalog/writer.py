"""
Catalog merging and writing.

This module combines freshly extracted keys with the translations already
present in a catalog and writes the result back. Each key becomes one
block::

    [<key>]
    other = "<translated text>"

Values are written literally so files produced by earlier runs round-trip
unchanged through the line-based reader.
"""

from __future__ import annotations

import logging
import tempfile
from enum import Enum
from pathlib import Path

from ..extraction.types import ExtractionResult
from ..utils.core.exceptions import CatalogWriteError
from ..utils.core.text import split_lines
from .reader import VALUE_PREFIX, parse_catalog, read_catalog_text

logger = logging.getLogger(__name__)


class CatalogStatus(Enum):
    """Outcome of generating one catalog."""

    WRITTEN = "written"
    UNCHANGED = "unchanged"
    STALE = "stale"
    DRY_RUN = "dry_run"


def merge_catalog(
    extracted: ExtractionResult, existing: dict[str, str]
) -> dict[str, str]:
    """
    Merge extracted keys with existing translations.

    A non-empty existing translation is kept; otherwise the key's default
    message is used, falling back to an empty string. Keys missing from
    ``extracted`` are dropped.

    Args:
        extracted: Aggregated keys and default messages
        existing: Translations loaded from the current catalog

    Returns:
        Ordered mapping of key to translated text, in extraction order
    """
    merged: dict[str, str] = {}
    for key in extracted.keys:
        translated = existing.get(key, "")
        merged[key] = translated or extracted.default_message(key)
    return merged


def render_catalog(entries: dict[str, str]) -> str:
    """Serialize merged entries to catalog text."""
    return "".join(
        f'[{key}]\n{VALUE_PREFIX}"{value}"\n\n' for key, value in entries.items()
    )


def write_catalog(file_path: Path, content: str) -> None:
    """
    Replace a catalog file with new content.

    The content is written to a temporary file next to the target and then
    moved into place.

    Args:
        file_path: Destination catalog path
        content: Full catalog text

    Raises:
        CatalogWriteError: If the file cannot be written
    """
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="\n",
            dir=file_path.parent,
            prefix=f".{file_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            _ = temp_file.write(content)

        _ = temp_path.replace(file_path)
    except OSError as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise CatalogWriteError(f"write TOML file {file_path}: {e}", path=file_path) from e


def generate_catalog(
    extracted: ExtractionResult,
    file_path: Path,
    dry_run: bool = False,
    check: bool = False,
) -> CatalogStatus:
    """
    Create or update one catalog file.

    Args:
        extracted: Aggregated keys and default messages
        file_path: Catalog path, e.g. ``i18n/en.toml``
        dry_run: Render only, never write
        check: Compare with the file on disk instead of writing

    Returns:
        CatalogStatus describing what happened

    Raises:
        CatalogReadError: If the existing catalog cannot be read
        CatalogWriteError: If the new catalog cannot be written
    """
    current = read_catalog_text(file_path)
    existing = parse_catalog(split_lines(current)) if current is not None else {}
    content = render_catalog(merge_catalog(extracted, existing))

    if check:
        if current == content:
            return CatalogStatus.UNCHANGED
        logger.info(f"{file_path} is out of date")
        return CatalogStatus.STALE

    if dry_run:
        logger.info(f"DRY RUN: would write {len(extracted)} entries to {file_path}")
        return CatalogStatus.DRY_RUN

    write_catalog(file_path, content)
    return CatalogStatus.WRITTEN
