"""Theme compiler exports."""

from themetokens.themes.compiler import compile_theme, compile_themes, parse_theme_set
from themetokens.themes.loader import load_theme_file
from themetokens.themes.models import (
    ColorEntry,
    CompilerOutput,
    FlatColor,
    ShadedColor,
    ThemeDefinition,
)

__all__ = [
    "ColorEntry",
    "CompilerOutput",
    "FlatColor",
    "ShadedColor",
    "ThemeDefinition",
    "compile_theme",
    "compile_themes",
    "load_theme_file",
    "parse_theme_set",
]
