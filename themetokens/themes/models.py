"""Theme compiler models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class FlatColor:
    """A color token with a single value."""

    value: str


@dataclass(frozen=True, slots=True)
class ShadedColor:
    """A color token with named shades, in declaration order."""

    shades: tuple[tuple[str, str], ...]


ColorEntry = Union[FlatColor, ShadedColor]


@dataclass(frozen=True, slots=True)
class ThemeDefinition:
    """One theme: its name, optional scheme directive and color tokens."""

    name: str
    color_scheme: str | None
    colors: tuple[tuple[str, ColorEntry], ...]


@dataclass(frozen=True, slots=True)
class CompilerOutput:
    """Generated stylesheet fragment plus non-fatal diagnostics."""

    fragment: str
    warnings: tuple[str, ...] = ()
