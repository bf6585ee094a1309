"""Normalization of a theme's color-scheme directive."""

from __future__ import annotations

from themetokens.themes.constants import VALID_COLOR_SCHEMES


def normalize_color_scheme(raw: object, theme_name: str) -> tuple[str | None, str | None]:
    """Return ``(declaration, warning)`` for a raw ``colorScheme`` value.

    At most one of the two is set. A missing or non-string value yields
    ``(None, None)``: the theme simply has no directive.
    """
    if not isinstance(raw, str):
        return None, None

    scheme = raw.strip()
    if not scheme:
        return None, f'Empty colorScheme in theme "{theme_name}"'

    parts = [part.lower() for part in scheme.split()]
    if any(part not in VALID_COLOR_SCHEMES for part in parts):
        allowed = ", ".join(VALID_COLOR_SCHEMES)
        return None, (
            f'Invalid colorScheme "{scheme}" in theme "{theme_name}". '
            f'Allowed: {allowed} (or combinations like "light dark")'
        )

    normalized = " ".join(dict.fromkeys(parts))
    return f"color-scheme: {normalized};", None
