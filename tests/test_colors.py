"""Tests for CSS color parsing and encoding."""

from __future__ import annotations

import pytest

from themetokens.errors import ColorParseError
from themetokens.themes.colors import encode_color, parse_css_color, resolve_color_value


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("#abc", "#aabbcc"),
        ("#ABCDEF", "#abcdef"),
        ("#1a2b3c", "#1a2b3c"),
        ("#1a2b3c80", "#1a2b3c"),
        ("#abcd", "#aabbcc"),
        ("steelblue", "#4682b4"),
        ("Red", "#ff0000"),
        ("transparent", "#000000"),
        ("rgb(26, 43, 60)", "#1a2b3c"),
        ("rgb(26 43 60 / 50%)", "#1a2b3c"),
        ("rgba(26, 43, 60, 0.25)", "#1a2b3c"),
        ("rgb(100%, 0%, 0%)", "#ff0000"),
        ("rgb(300, -5, 0)", "#ff0000"),
        ("RGB(0, 0, 255)", "#0000ff"),
        ("hsl(120deg 100% 25%)", "#008000"),
        ("hsla(0, 100%, 50%, 0.5)", "#ff0000"),
        ("hsl(-240, 100%, 50%)", "#00ff00"),
        ("hwb(0 0% 0%)", "#ff0000"),
        ("hwb(90, 100%, 100%)", "#808080"),
    ],
)
def test_hex_encoding(value: str, expected: str) -> None:
    assert resolve_color_value(value, "hex") == expected


def test_css_alpha_is_last_in_eight_digit_hex() -> None:
    color = parse_css_color("#11223344")
    assert (color.red(), color.green(), color.blue(), color.alpha()) == (17, 34, 51, 68)


def test_rgb_encoding_is_comma_separated_integers() -> None:
    assert resolve_color_value("#336699", "rgb") == "51, 102, 153"
    assert resolve_color_value("hsl(210, 50%, 40%)", "rgb") == "51, 102, 153"
    assert resolve_color_value("rgba(255, 0, 0, 0.5)", "rgb") == "255, 0, 0"


def test_hsl_encoding_has_two_decimals() -> None:
    assert resolve_color_value("#336699", "hsl") == "210.00 50.00% 40.00%"
    assert resolve_color_value("hsl(210, 50%, 40%)", "hsl") == "210.00 50.00% 40.00%"
    assert resolve_color_value("#ff0000", "hsl") == "0.00 100.00% 50.00%"
    assert resolve_color_value("white", "hsl") == "0.00 0.00% 100.00%"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("#c95756", "0.52 51.57% 56.27%"),
        ("#e6720f", "27.63 87.76% 48.04%"),
        ("#970607", "359.59 92.36% 30.78%"),
        ("#808080", "0.00 0.00% 50.20%"),
        ("rgb(201, 87, 86)", "0.52 51.57% 56.27%"),
    ],
)
def test_hsl_encoding_is_not_quantized(value: str, expected: str) -> None:
    assert resolve_color_value(value, "hsl") == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("hsl(359.999, 50%, 50%)", "360.00 50.00% 50.00%"),
        ("hsl(200.5 33.3% 66.7% / 0.5)", "200.50 33.30% 66.70%"),
        ("hsla(-90deg, 120%, 25%, 1)", "270.00 100.00% 25.00%"),
    ],
)
def test_hsl_input_keeps_parsed_components(value: str, expected: str) -> None:
    assert resolve_color_value(value, "hsl") == expected


def test_encode_falls_back_to_hex_for_unknown_format() -> None:
    assert encode_color(parse_css_color("#336699"), "oklch") == "#336699"


@pytest.mark.parametrize(
    "value",
    [
        "",
        " #fff",
        "#12",
        "#ggg",
        "#1234567",
        "notacolor",
        "blue-ish",
        "rgb(1, 2)",
        "rgb(1, 2, 3, 4, 5)",
        "rgb(1, 2, 3 / 0.5)",
        "rgb(a, b, c)",
        "hsl(10, 20, 30)",
        "hsl(10turn, 20%, 30%)",
        "url(#fff)",
        "rgb(1 2 3 /)",
    ],
)
def test_invalid_colors_raise(value: str) -> None:
    with pytest.raises(ColorParseError):
        parse_css_color(value)


def test_non_string_raises() -> None:
    with pytest.raises(ColorParseError):
        parse_css_color(None)  # type: ignore[arg-type]
