"""CSS color parsing and custom-property value encoding.

Colors are held as ``QColor`` values. Hex literals and named colors map
directly onto Qt's parser; functional notations (``rgb()``, ``hsl()``,
``hwb()`` and their alpha variants) are parsed here and built through the
matching ``QColor`` factory. HSL output is computed exactly rather than
read back from ``QColor``.
"""

from __future__ import annotations

import colorsys
import re

from PySide6.QtGui import QColor

from themetokens.errors import ColorParseError

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_KEYWORD_RE = re.compile(r"^[A-Za-z]+$")
_FUNC_COLOR_RE = re.compile(r"^(rgba?|hsla?|hwb)\(\s*([^()]*?)\s*\)$", re.IGNORECASE)
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_HUE_RE = re.compile(r"^([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)(?:deg)?$", re.IGNORECASE)


def parse_css_color(value: str) -> QColor:
    """Parse a CSS color expression, raising ``ColorParseError`` on failure."""
    if not isinstance(value, str) or not value:
        raise ColorParseError(f"Unable to parse color from {value!r}")

    if _HEX_COLOR_RE.match(value):
        return _parse_hex(value[1:])

    if _KEYWORD_RE.match(value):
        if not QColor.isValidColorName(value):
            raise ColorParseError(f"Unknown color name {value!r}")
        return QColor(value.lower())

    match = _FUNC_COLOR_RE.match(value)
    if match is None:
        raise ColorParseError(f"Unable to parse color from {value!r}")

    func = match.group(1).lower()
    channels, alpha = _split_arguments(match.group(2), value)
    if func.startswith("rgb"):
        return _build_rgb(channels, alpha)
    if func.startswith("hsl"):
        return _build_hsl(channels, alpha)
    return _build_hwb(channels, alpha)


def encode_color(color: QColor, fmt: str) -> str:
    """Render a color as a custom-property value in the given output format.

    HSL is derived in floating point from the 8-bit channels; QColor's own
    HSL accessors are quantized to 16 bits and can shift the second decimal.
    """
    if fmt == "hsl":
        # colorsys uses HLS (not HSL): (h, l, s) in 0..1
        hue, lightness, saturation = colorsys.rgb_to_hls(
            color.red() / 255.0, color.green() / 255.0, color.blue() / 255.0
        )
        return _format_hsl(hue * 360.0, saturation * 100.0, lightness * 100.0)
    if fmt == "rgb":
        return f"{color.red()}, {color.green()}, {color.blue()}"
    return color.name().lower()


def resolve_color_value(value: str, fmt: str) -> str:
    """Parse ``value`` and encode it; ``hsl()`` inputs keep their own components."""
    color = parse_css_color(value)
    if fmt == "hsl":
        components = _hsl_components(value)
        if components is not None:
            return _format_hsl(*components)
    return encode_color(color, fmt)


def _hsl_components(value: str) -> tuple[float, float, float] | None:
    match = _FUNC_COLOR_RE.match(value)
    if match is None or not match.group(1).lower().startswith("hsl"):
        return None
    channels, _ = _split_arguments(match.group(2), value)
    return _parse_hue(channels[0]), _parse_percent(channels[1]), _parse_percent(channels[2])


def _format_hsl(hue: float, saturation: float, lightness: float) -> str:
    return f"{hue:.2f} {saturation:.2f}% {lightness:.2f}%"


def _parse_hex(digits: str) -> QColor:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    red = int(digits[0:2], 16)
    green = int(digits[2:4], 16)
    blue = int(digits[4:6], 16)
    # CSS puts alpha last (#rrggbbaa); Qt's own parser reads #aarrggbb.
    alpha = int(digits[6:8], 16) if len(digits) == 8 else 255
    return QColor(red, green, blue, alpha)


def _split_arguments(body: str, original: str) -> tuple[list[str], str | None]:
    alpha: str | None = None
    if "," in body:
        if "/" in body:
            raise ColorParseError(f"Mixed argument syntax in {original!r}")
        parts = [part.strip() for part in body.split(",")]
        if len(parts) == 4:
            alpha = parts.pop()
    else:
        if "/" in body:
            body, alpha = body.split("/", 1)
            alpha = alpha.strip()
        parts = body.split()

    if len(parts) != 3 or any(not part for part in parts) or alpha == "":
        raise ColorParseError(f"Expected three color components in {original!r}")
    return parts, alpha


def _parse_number(token: str) -> float:
    if not _NUMBER_RE.match(token):
        raise ColorParseError(f"Invalid number {token!r}")
    return float(token)


def _parse_percent(token: str) -> float:
    if not token.endswith("%"):
        raise ColorParseError(f"Expected a percentage, got {token!r}")
    return _clamp(_parse_number(token[:-1]), 0.0, 100.0)


def _parse_hue(token: str) -> float:
    match = _HUE_RE.match(token)
    if match is None:
        raise ColorParseError(f"Invalid hue {token!r}")
    return float(match.group(1)) % 360.0


def _parse_alpha(token: str | None) -> float:
    if token is None:
        return 1.0
    if token.endswith("%"):
        return _parse_percent(token) / 100.0
    return _clamp(_parse_number(token), 0.0, 1.0)


def _parse_rgb_channel(token: str) -> int:
    if token.endswith("%"):
        return round(_parse_percent(token) * 2.55)
    return round(_clamp(_parse_number(token), 0.0, 255.0))


def _build_rgb(channels: list[str], alpha: str | None) -> QColor:
    red, green, blue = (_parse_rgb_channel(token) for token in channels)
    return QColor(red, green, blue, round(_parse_alpha(alpha) * 255))


def _build_hsl(channels: list[str], alpha: str | None) -> QColor:
    hue = _parse_hue(channels[0])
    saturation = _parse_percent(channels[1])
    lightness = _parse_percent(channels[2])
    return QColor.fromHslF(hue / 360.0, saturation / 100.0, lightness / 100.0, _parse_alpha(alpha))


def _build_hwb(channels: list[str], alpha: str | None) -> QColor:
    hue = _parse_hue(channels[0])
    whiteness = _parse_percent(channels[1]) / 100.0
    blackness = _parse_percent(channels[2]) / 100.0
    if whiteness + blackness >= 1.0:
        gray = whiteness / (whiteness + blackness)
        return QColor.fromRgbF(gray, gray, gray, _parse_alpha(alpha))

    pure = QColor.fromHslF(hue / 360.0, 1.0, 0.5)
    scale = 1.0 - whiteness - blackness
    return QColor.fromRgbF(
        pure.redF() * scale + whiteness,
        pure.greenF() * scale + whiteness,
        pure.blueF() * scale + whiteness,
        _parse_alpha(alpha),
    )


def _clamp(value: float, low: float, high: float) -> float:
    return low if value < low else high if value > high else value
