"""
Shared types for key extraction.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ExtractionResult:
    """
    Keys extracted from one or more definition files.

    Attributes:
        keys: Keys in first-seen order
        messages: Default message for each key that has one
    """

    keys: list[str] = field(default_factory=list)
    messages: dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.keys)

    def default_message(self, key: str) -> str:
        """Default message for a key, or an empty string."""
        return self.messages.get(key, "")
