"""
Basic exception classes for proto-i18n.

This module contains the exception hierarchy used by every stage of the
catalog generation pipeline. Each exception carries a category and a
severity so the command-line layer can decide whether a failure ends the run
or only skips one file or one language.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors for appropriate handling strategies."""

    DISCOVERY = "discovery"
    EXTRACTION = "extraction"
    OUTPUT = "output"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class ProtoI18nError(Exception):
    """Base exception class for proto-i18n specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        path: Path | None = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.path: Path | None = path
        self.recoverable: bool = recoverable


class DiscoveryError(ProtoI18nError):
    """Source files could not be enumerated."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.DISCOVERY,
            severity=ErrorSeverity.CRITICAL,
            path=path,
            recoverable=False,
        )


class NoFilesFoundError(ProtoI18nError):
    """The search directory contains no definition files."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.DISCOVERY,
            severity=ErrorSeverity.HIGH,
            path=path,
            recoverable=False,
        )


class NoKeysFoundError(ProtoI18nError):
    """No keys were extracted from any definition file."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message,
            category=ErrorCategory.EXTRACTION,
            severity=ErrorSeverity.HIGH,
            recoverable=False,
        )


class ProtoParseError(ProtoI18nError):
    """A single definition file could not be read or parsed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.EXTRACTION,
            severity=ErrorSeverity.MEDIUM,
            path=path,
            recoverable=True,
        )


class OutputDirError(ProtoI18nError):
    """The output directory could not be created."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.OUTPUT,
            severity=ErrorSeverity.CRITICAL,
            path=path,
            recoverable=False,
        )


class CatalogReadError(ProtoI18nError):
    """An existing catalog file exists but could not be read."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.OUTPUT,
            severity=ErrorSeverity.MEDIUM,
            path=path,
            recoverable=True,
        )


class CatalogWriteError(ProtoI18nError):
    """A catalog file could not be written."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.OUTPUT,
            severity=ErrorSeverity.MEDIUM,
            path=path,
            recoverable=True,
        )


class ConfigurationError(ProtoI18nError):
    """Configuration-related errors."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            path=path,
            recoverable=False,
        )
