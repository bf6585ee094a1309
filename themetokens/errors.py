"""Error codes and error handling utilities for themetokens."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any

import yaml


class ErrorCode(Enum):
    """Standardized error codes for theme-token operations."""

    # Theme file errors
    THEME_PATH_MISSING = auto()
    THEME_FILE_NOT_FOUND = auto()
    THEME_FILE_UNREADABLE = auto()
    THEME_FILE_INVALID = auto()
    THEME_FILE_UNSUPPORTED = auto()

    # Theme data errors
    THEME_STRUCTURE_INVALID = auto()

    # Configuration errors
    CONFIG_INVALID = auto()

    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.THEME_PATH_MISSING: "No theme file path was given.",
    ErrorCode.THEME_FILE_NOT_FOUND: "The theme file was not found. Check the path in @theme-tokens.",
    ErrorCode.THEME_FILE_UNREADABLE: "The theme file could not be read. Check file permissions.",
    ErrorCode.THEME_FILE_INVALID: "The theme file could not be parsed.",
    ErrorCode.THEME_FILE_UNSUPPORTED: "Unsupported theme file type. Use .json, .yaml, .yml or .py.",
    ErrorCode.THEME_STRUCTURE_INVALID: "Invalid theme structure: expected { themes: { ... } }",
    ErrorCode.CONFIG_INVALID: "Compiler options are invalid.",
    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}


@dataclass(eq=False)
class ThemeTokensError(Exception):
    """Base exception for themetokens with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or report output."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


@dataclass(eq=False)
class ThemeStructureError(ThemeTokensError):
    """Raised when theme data does not have the expected top-level shape."""

    code: ErrorCode = ErrorCode.THEME_STRUCTURE_INVALID


@dataclass(eq=False)
class ThemeLoadError(ThemeTokensError):
    """Raised when a theme file cannot be read or parsed."""

    code: ErrorCode = ErrorCode.THEME_FILE_INVALID


class ColorParseError(ValueError):
    """Raised when a string is not a recognizable CSS color."""


def classify_exception(exc: Exception, path: Path | None = None) -> ThemeTokensError:
    """Classify a generic exception into a ThemeTokensError with appropriate code."""
    if isinstance(exc, ThemeTokensError):
        return exc

    original = str(exc)
    if isinstance(exc, FileNotFoundError):
        return ThemeLoadError(
            ErrorCode.THEME_FILE_NOT_FOUND,
            message=f"Theme file not found: {path or exc.filename}",
            path=path,
            details={"original": original},
        )
    if isinstance(exc, (PermissionError, IsADirectoryError, UnicodeDecodeError)):
        return ThemeLoadError(
            ErrorCode.THEME_FILE_UNREADABLE,
            message=f"Unable to read {path}: {exc}",
            path=path,
            details={"original": original},
        )
    if isinstance(exc, (json.JSONDecodeError, yaml.YAMLError, SyntaxError)):
        return ThemeLoadError(
            ErrorCode.THEME_FILE_INVALID,
            message=f"Invalid theme data in {path}: {exc}",
            path=path,
            details={"original": original},
        )
    if isinstance(exc, OSError):
        return ThemeLoadError(
            ErrorCode.THEME_FILE_UNREADABLE,
            message=f"Unable to read {path}: {exc}",
            path=path,
            details={"original": original},
        )

    return ThemeTokensError(
        ErrorCode.OPERATION_FAILED,
        message=f"{type(exc).__name__}: {exc}",
        path=path,
        details={"original": original},
    )


def format_error_for_user(error: ThemeTokensError | Exception) -> str:
    """Format an error for display with actionable suggestions."""
    if isinstance(error, ThemeTokensError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\nHint: {error.suggestion}")
        if error.path:
            parts.append(f"\n\nFile: {error.path.name}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
