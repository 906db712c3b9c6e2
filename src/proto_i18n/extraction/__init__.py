"""
Key extraction from Protocol Buffers definition files.

This package discovers .proto files, extracts enum value names and
validation rule ids from each of them and merges the results.
"""

from .aggregator import aggregate_results
from .discovery import find_proto_files
from .proto_keys import (
    ValidationRuleScanner,
    extract_keys_from_file,
    extract_keys_from_text,
)
from .types import ExtractionResult

__all__ = [
    "ExtractionResult",
    "ValidationRuleScanner",
    "aggregate_results",
    "extract_keys_from_file",
    "extract_keys_from_text",
    "find_proto_files",
]
