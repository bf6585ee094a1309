"""Theme compilation into a stylesheet fragment of custom properties."""

from __future__ import annotations

import logging
from typing import Mapping

from themetokens.config.settings import CompilerOptions
from themetokens.errors import ColorParseError, ThemeStructureError
from themetokens.themes.colors import resolve_color_value
from themetokens.themes.constants import (
    COLOR_SCHEME_KEY,
    COLORS_KEY,
    DEFAULT_SHADE_KEY,
    THEMES_KEY,
)
from themetokens.themes.models import (
    ColorEntry,
    CompilerOutput,
    FlatColor,
    ShadedColor,
    ThemeDefinition,
)
from themetokens.themes.scheme import normalize_color_scheme

logger = logging.getLogger(__name__)


def compile_themes(data: object, options: CompilerOptions | None = None) -> CompilerOutput:
    """Compile a theme set into one CSS class rule per theme.

    Raises ``ThemeStructureError`` when ``data`` does not have the
    ``{"themes": {...}}`` shape. Bad color values and bad scheme directives
    are reported as warnings and left out of the fragment.
    """
    options = options or CompilerOptions()
    themes = parse_theme_set(data)

    blocks: list[str] = []
    warnings: list[str] = []
    for theme in themes:
        block, theme_warnings = compile_theme(theme, options)
        blocks.append(block)
        warnings.extend(theme_warnings)

    logger.debug("compiled %d themes with %d warnings", len(blocks), len(warnings))
    return CompilerOutput(fragment="\n\n".join(blocks), warnings=tuple(warnings))


def parse_theme_set(data: object) -> tuple[ThemeDefinition, ...]:
    """Validate the top-level shape and build typed theme definitions."""
    if not isinstance(data, Mapping) or data.get(THEMES_KEY) is None:
        raise ThemeStructureError(message="Invalid theme structure: expected { themes: { ... } }")

    raw_themes = data[THEMES_KEY]
    if not isinstance(raw_themes, Mapping):
        raise ThemeStructureError(
            message=f"Invalid theme structure: 'themes' must be an object, got {type(raw_themes).__name__}"
        )

    themes: list[ThemeDefinition] = []
    for raw_name, config in raw_themes.items():
        name = str(raw_name)
        if not isinstance(config, Mapping):
            raise ThemeStructureError(message=f'Invalid theme "{name}": expected an object')
        raw_colors = config.get(COLORS_KEY)
        if not isinstance(raw_colors, Mapping):
            raise ThemeStructureError(
                message=f'Invalid theme "{name}": expected {{ colors: {{ ... }} }}'
            )

        colors: list[tuple[str, ColorEntry]] = []
        for token, value in raw_colors.items():
            entry = _parse_color_entry(value)
            if entry is not None:
                colors.append((str(token), entry))

        scheme = config.get(COLOR_SCHEME_KEY)
        themes.append(
            ThemeDefinition(
                name=name,
                color_scheme=scheme if isinstance(scheme, str) else None,
                colors=tuple(colors),
            )
        )
    return tuple(themes)


def compile_theme(theme: ThemeDefinition, options: CompilerOptions) -> tuple[str, list[str]]:
    """Build a single ``.<name> { ... }`` block and its warnings."""
    lines = [f".{theme.name} {{"]
    warnings: list[str] = []

    declaration, warning = normalize_color_scheme(theme.color_scheme, theme.name)
    if declaration:
        lines.append(f"  {declaration}")
    if warning:
        warnings.append(warning)

    for token, entry in theme.colors:
        if isinstance(entry, FlatColor):
            items = [(token, entry.value, f"{theme.name}.{token}")]
        else:
            items = [
                (_shade_token(token, shade), value, f"{theme.name}.{token}.{shade}")
                for shade, value in entry.shades
            ]
        for name, value, location in items:
            try:
                encoded = resolve_color_value(value, options.format)
            except ColorParseError:
                warnings.append(f"Invalid color: {value} for {location}")
                continue
            lines.append(f"  {options.property_name(name)}: {encoded};")

    lines.append("}")
    return "\n".join(lines), warnings


def _parse_color_entry(value: object) -> ColorEntry | None:
    if isinstance(value, str):
        return FlatColor(value)
    if isinstance(value, Mapping):
        # Non-string shades are structurally absent rather than invalid.
        shades = tuple(
            (str(shade), shade_value)
            for shade, shade_value in value.items()
            if isinstance(shade_value, str)
        )
        return ShadedColor(shades)
    return None


def _shade_token(token: str, shade: str) -> str:
    if shade == DEFAULT_SHADE_KEY:
        return token
    return f"{token}-{shade}"
