"""
Key extraction from Protocol Buffers definition files.

Keys come from two places:

- enum value names, taken from the syntax tree produced by
  proto-schema-parser, optionally limited to enums whose name carries a
  given prefix or suffix;
- validation rule ids, found by scanning the raw text for
  ``(buf.validate.field).cel`` option blocks. The ``message`` of a rule
  becomes the default translation for its id.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from pathlib import Path

from antlr4.error.ErrorListener import ErrorListener
from proto_schema_parser import ast
from proto_schema_parser.parser import Parser

from ..utils.core.exceptions import ProtoParseError
from ..utils.core.text import split_lines
from .types import ExtractionResult

logger = logging.getLogger(__name__)

VALIDATION_MARKER = "(buf.validate.field).cel"
ID_PREFIX = "id:"
MESSAGE_PREFIX = "message:"
BLOCK_CLOSERS = ("}];", "},")


class ProtoSyntaxError(ValueError):
    """Syntax error reported by the .proto lexer or parser."""

    def __init__(self, line: int, column: int, msg: str) -> None:
        super().__init__(f"line {line}:{column} {msg}")
        self.line: int = line
        self.column: int = column


class RaisingErrorListener(ErrorListener):
    """ANTLR error listener that fails on the first syntax error."""

    def syntaxError(  # noqa: N802
        self,
        recognizer: object,
        offendingSymbol: object,  # noqa: N803
        line: int,
        column: int,
        msg: str,
        e: object,
    ) -> None:
        raise ProtoSyntaxError(line, column, msg)


def install_error_listener(recognizer: object) -> None:
    """Replace the console error listener of an ANTLR lexer or parser."""
    recognizer.removeErrorListeners()  # pyright: ignore[reportAttributeAccessIssue]
    recognizer.addErrorListener(RaisingErrorListener())  # pyright: ignore[reportAttributeAccessIssue]


def create_parser() -> Parser:
    """Create a .proto parser that raises instead of recovering from syntax errors."""
    return Parser(
        setup_lexer=install_error_listener,
        setup_parser=install_error_listener,
    )


def extract_quoted(line: str) -> str:
    """
    Return the text between the first and last double quote of a line.

    Args:
        line: Line such as ``id: "invalid_input"``

    Returns:
        The quoted text, or an empty string if there is no non-empty quoted value
    """
    start = line.find('"') + 1
    end = line.rfind('"')
    if start > 0 and end > start:
        return line[start:end]
    return ""


class ScannerState(Enum):
    """States of the validation rule scanner."""

    SEEKING = "seeking"
    IN_BLOCK = "in_block"


class ValidationRuleScanner:
    """
    Line-oriented scanner for validation rule blocks.

    In ``SEEKING`` the scanner waits for a line containing the validation
    marker. In ``IN_BLOCK`` it collects ``id:`` and ``message:`` lines until
    a line starting with ``}];`` or ``},`` closes the block.
    """

    def __init__(self) -> None:
        self.state: ScannerState = ScannerState.SEEKING
        self.keys: list[str] = []
        self.messages: dict[str, str] = {}
        self._current_id: str = ""
        self._current_message: str = ""

    def feed(self, line: str) -> None:
        """Process a single line of source text."""
        match self.state:
            case ScannerState.SEEKING:
                if VALIDATION_MARKER in line:
                    self.state = ScannerState.IN_BLOCK
            case ScannerState.IN_BLOCK:
                self._feed_block_line(line.strip())

    def _feed_block_line(self, line: str) -> None:
        if line.startswith(ID_PREFIX):
            rule_id = extract_quoted(line)
            if rule_id:
                self._current_id = rule_id
                self.keys.append(rule_id)
        elif line.startswith(MESSAGE_PREFIX):
            message = extract_quoted(line)
            if message:
                self._current_message = message
        elif line.startswith(BLOCK_CLOSERS):
            if self._current_id:
                self.messages[self._current_id] = self._current_message
            self._current_id = ""
            self._current_message = ""
            self.state = ScannerState.SEEKING

    def scan(self, lines: Iterable[str]) -> ExtractionResult:
        """
        Feed every line and return the collected rule ids and messages.

        Args:
            lines: Source text split into lines

        Returns:
            ExtractionResult with rule ids in order of appearance
        """
        for line in lines:
            self.feed(line)
        return ExtractionResult(keys=list(self.keys), messages=dict(self.messages))


def enum_matches(name: str, prefix: str = "", suffix: str = "") -> bool:
    """Check an enum name against optional prefix and suffix filters."""
    if prefix and not name.startswith(prefix):
        return False
    if suffix and not name.endswith(suffix):
        return False
    return True


def iter_enums(elements: Iterable[object]) -> Iterator[ast.Enum]:
    """
    Yield every enum declaration in a syntax tree, depth first.

    Enums nested in messages (and other element containers) are included in
    declaration order.
    """
    for element in elements:
        if isinstance(element, ast.Enum):
            yield element
            continue
        nested: object = getattr(element, "elements", None)
        if isinstance(nested, list):
            yield from iter_enums(nested)  # pyright: ignore[reportUnknownArgumentType]


def extract_enum_keys(
    tree: ast.File, prefix: str = "", suffix: str = ""
) -> list[str]:
    """
    Collect enum value names from a parsed definition file.

    Args:
        tree: Syntax tree returned by proto-schema-parser
        prefix: Only enums whose name starts with this are used
        suffix: Only enums whose name ends with this are used

    Returns:
        Enum value names in declaration order
    """
    keys: list[str] = []
    for enum in iter_enums(tree.file_elements):
        if not enum_matches(enum.name, prefix, suffix):
            logger.debug(f"Skipping enum {enum.name} (filtered)")
            continue
        keys.extend(
            element.name
            for element in enum.elements
            if isinstance(element, ast.EnumValue)
        )
    return keys


def extract_keys_from_text(
    content: str,
    prefix: str = "",
    suffix: str = "",
    source: Path | None = None,
) -> ExtractionResult:
    """
    Extract keys and default messages from the content of a .proto file.

    Args:
        content: Full text of the definition file
        prefix: Enum name prefix filter (empty means no filtering)
        suffix: Enum name suffix filter (empty means no filtering)
        source: Path the content came from, used in error messages

    Returns:
        ExtractionResult with enum keys first, then validation rule ids

    Raises:
        ProtoParseError: If the content cannot be parsed
    """
    label = str(source) if source is not None else "<string>"
    try:
        tree = create_parser().parse(content)
    except Exception as e:
        raise ProtoParseError(f"parse proto {label}: {e}", path=source) from e

    keys = extract_enum_keys(tree, prefix, suffix)
    rules = ValidationRuleScanner().scan(split_lines(content))

    return ExtractionResult(keys=keys + rules.keys, messages=rules.messages)


def extract_keys_from_file(
    file_path: Path, prefix: str = "", suffix: str = ""
) -> ExtractionResult:
    """
    Extract keys and default messages from a .proto file.

    Args:
        file_path: Path to the definition file
        prefix: Enum name prefix filter
        suffix: Enum name suffix filter

    Returns:
        ExtractionResult for the file

    Raises:
        ProtoParseError: If the file cannot be read or parsed
    """
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ProtoParseError(f"open proto file {file_path}: {e}", path=file_path) from e

    result = extract_keys_from_text(content, prefix, suffix, source=file_path)
    logger.debug(f"Extracted {len(result)} keys from {file_path}")
    return result
