"""
Aggregation of per-file extraction results.
"""

from __future__ import annotations

from collections.abc import Iterable

from .types import ExtractionResult


def aggregate_results(results: Iterable[ExtractionResult]) -> ExtractionResult:
    """
    Merge per-file results into one de-duplicated result.

    The first occurrence of a key fixes its position and its default
    message; later duplicates are dropped.

    Args:
        results: Per-file results in file order

    Returns:
        Combined ExtractionResult
    """
    combined = ExtractionResult()
    seen: set[str] = set()

    for result in results:
        for key in result.keys:
            if key in seen:
                continue
            seen.add(key)
            combined.keys.append(key)
            if key in result.messages:
                combined.messages[key] = result.messages[key]

    return combined
