"""
Discovery of Protocol Buffers definition files.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..utils.core.exceptions import DiscoveryError

logger = logging.getLogger(__name__)

PROTO_GLOB = "*.proto"


def find_proto_files(search_root: Path) -> list[Path]:
    """
    Find all .proto files below a directory.

    Args:
        search_root: Directory to search recursively

    Returns:
        List of .proto file paths sorted alphabetically

    Raises:
        DiscoveryError: If the directory does not exist or cannot be searched
    """
    if not search_root.exists():
        raise DiscoveryError(
            f"Failed to find proto files: directory does not exist: {search_root}",
            path=search_root,
        )
    if not search_root.is_dir():
        raise DiscoveryError(
            f"Failed to find proto files: not a directory: {search_root}",
            path=search_root,
        )

    try:
        proto_files = sorted(
            path for path in search_root.rglob(PROTO_GLOB) if path.is_file()
        )
    except OSError as e:
        raise DiscoveryError(
            f"Failed to find proto files in {search_root}: {e}", path=search_root
        ) from e

    logger.debug(f"Found {len(proto_files)} proto files in {search_root}")
    return proto_files
