"""
Text helpers shared by the extraction and catalog modules.
"""

from __future__ import annotations


def split_lines(content: str) -> list[str]:
    """
    Split text on ``\\n`` only, dropping one trailing ``\\r`` per line.

    Unlike ``str.splitlines`` this keeps characters such as ``\\u2028`` or
    ``\\x0c`` inside a line, so catalog values containing them survive a
    read and write cycle unchanged.

    Args:
        content: Text to split

    Returns:
        Lines without their terminators
    """
    return [line.removesuffix("\r") for line in content.split("\n")]
