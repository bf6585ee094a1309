"""Compiler and processor configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

logger = logging.getLogger(__name__)

OUTPUT_FORMATS: tuple[str, ...] = ("hex", "hsl", "rgb")
DEFAULT_OUTPUT_FORMAT = "hex"


@dataclass(frozen=True, slots=True)
class CompilerOptions:
    """Output options for the theme compiler."""

    prefix: str = ""
    format: str = DEFAULT_OUTPUT_FORMAT

    @classmethod
    def from_mapping(cls, options: Mapping[str, object] | None = None) -> CompilerOptions:
        """Build options from a loosely-typed mapping, normalizing each value."""
        options = options or {}
        return cls(
            prefix=_normalize_prefix(options.get("prefix")),
            format=_normalize_format(options.get("format")),
        )

    def property_name(self, token: str) -> str:
        """Return the custom-property name for a color token, e.g. ``--ds-brand-50``."""
        if self.prefix:
            return f"--{self.prefix}-{token}"
        return f"--{token}"


@dataclass(frozen=True, slots=True)
class ProcessorSettings:
    """Settings for expanding @theme-tokens at-rules in a stylesheet."""

    root_dir: Path = field(default_factory=lambda: Path(os.getcwd()))
    options: CompilerOptions = field(default_factory=CompilerOptions)

    @classmethod
    def from_mapping(cls, options: Mapping[str, object] | None = None) -> ProcessorSettings:
        """Build settings from plugin-style options (``root_dir``, ``prefix``, ``format``).

        A missing or blank ``root_dir`` means the current working directory.
        """
        options = options or {}
        raw_root = options.get("root_dir")
        if isinstance(raw_root, (str, os.PathLike)) and str(raw_root).strip():
            root_dir = Path(raw_root)
        else:
            root_dir = Path(os.getcwd())
        return cls(root_dir=root_dir, options=CompilerOptions.from_mapping(options))


def _normalize_prefix(value: object) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()


def _normalize_format(value: object) -> str:
    if value is None:
        return DEFAULT_OUTPUT_FORMAT
    fmt = value.strip().lower() if isinstance(value, str) else ""
    if fmt in OUTPUT_FORMATS:
        return fmt
    logger.warning("unknown color format %r; falling back to %s", value, DEFAULT_OUTPUT_FORMAT)
    return DEFAULT_OUTPUT_FORMAT
