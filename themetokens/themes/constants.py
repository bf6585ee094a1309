"""Theme compiler constants."""

from __future__ import annotations

THEMES_KEY = "themes"
COLOR_SCHEME_KEY = "colorScheme"
COLORS_KEY = "colors"

VALID_COLOR_SCHEMES: tuple[str, ...] = (
    "light",
    "dark",
)

DEFAULT_SHADE_KEY = "DEFAULT"

AT_RULE_NAME = "theme-tokens"
DEFAULT_SOURCE_NAME = "virtual.css"
