"""
Reader for catalog files written by this tool.

The reader matches lines literally instead of parsing TOML: a ``[key]``
line opens an entry and an ``other = "..."`` line sets its value. Anything
else is ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..utils.core.exceptions import CatalogReadError
from ..utils.core.text import split_lines

logger = logging.getLogger(__name__)

VALUE_PREFIX = "other = "


def parse_catalog(lines: Iterable[str]) -> dict[str, str]:
    """
    Parse catalog lines into a key to translated text mapping.

    Args:
        lines: Catalog content split into lines

    Returns:
        Mapping of key to translated text; later entries override earlier ones
    """
    entries: dict[str, str] = {}
    current_key = ""

    for raw_line in lines:
        line = raw_line.strip()
        if line.startswith("[") and line.endswith("]"):
            current_key = line[1:-1]
        elif line.startswith(VALUE_PREFIX) and current_key:
            entries[current_key] = line[len(VALUE_PREFIX) :].strip('"')

    return entries


def read_catalog_text(file_path: Path) -> str | None:
    """
    Read the raw text of a catalog file.

    Args:
        file_path: Path to the ``<lang>.toml`` catalog

    Returns:
        File content, or None if the file does not exist

    Raises:
        CatalogReadError: If the file exists but cannot be read
    """
    if not file_path.exists():
        logger.debug(f"No existing catalog at {file_path}")
        return None

    try:
        with file_path.open("r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogReadError(f"load existing TOML {file_path}: {e}", path=file_path) from e


def load_catalog(file_path: Path) -> dict[str, str]:
    """
    Load an existing catalog file.

    Args:
        file_path: Path to the ``<lang>.toml`` catalog

    Returns:
        Mapping of key to translated text, empty if the file does not exist

    Raises:
        CatalogReadError: If the file exists but cannot be read
    """
    content = read_catalog_text(file_path)
    if content is None:
        return {}

    entries = parse_catalog(split_lines(content))
    logger.debug(f"Loaded {len(entries)} existing entries from {file_path}")
    return entries
