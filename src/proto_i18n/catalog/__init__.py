"""Reading, merging and writing per-language translation catalogs."""

from .reader import load_catalog, parse_catalog, read_catalog_text
from .writer import (
    CatalogStatus,
    generate_catalog,
    merge_catalog,
    render_catalog,
    write_catalog,
)

__all__ = [
    "CatalogStatus",
    "generate_catalog",
    "load_catalog",
    "merge_catalog",
    "parse_catalog",
    "read_catalog_text",
    "render_catalog",
    "write_catalog",
]
