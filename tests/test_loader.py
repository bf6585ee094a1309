"""Tests for theme-data file loading."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from themetokens.errors import ErrorCode, ThemeLoadError, ThemeTokensError
from themetokens.themes import loader
from themetokens.themes.loader import load_theme_file

_THEMES = {"themes": {"light": {"colorScheme": "light", "colors": {"primary": "#336699"}}}}


def test_load_json(tmp_path: Path) -> None:
    path = tmp_path / "themes.json"
    path.write_text(json.dumps(_THEMES), encoding="utf-8")
    assert load_theme_file(path) == _THEMES


@pytest.mark.parametrize("suffix", [".yaml", ".yml", ".YAML"])
def test_load_yaml(tmp_path: Path, suffix: str) -> None:
    path = tmp_path / f"themes{suffix}"
    path.write_text(
        "themes:\n"
        "  light:\n"
        "    colorScheme: light\n"
        "    colors:\n"
        "      primary: '#336699'\n",
        encoding="utf-8",
    )
    assert load_theme_file(path) == _THEMES


def test_load_module_public_names(tmp_path: Path) -> None:
    path = tmp_path / "themes.py"
    path.write_text(
        "import os\n"
        "_private = 1\n"
        "themes = {'light': {'colorScheme': 'light', 'colors': {'primary': '#336699'}}}\n",
        encoding="utf-8",
    )
    assert load_theme_file(path) == _THEMES


def test_load_module_default_export(tmp_path: Path) -> None:
    path = tmp_path / "themes.py"
    path.write_text(f"default = {_THEMES!r}\nthemes = None\n", encoding="utf-8")
    assert load_theme_file(path) == _THEMES


def test_module_is_reexecuted_on_each_load(tmp_path: Path) -> None:
    path = tmp_path / "themes.py"
    path.write_text("themes = {'a': {'colors': {}}}\n", encoding="utf-8")
    assert load_theme_file(path) == {"themes": {"a": {"colors": {}}}}

    path.write_text("themes = {'b': {'colors': {}}}\n", encoding="utf-8")
    assert load_theme_file(path) == {"themes": {"b": {"colors": {}}}}


def test_module_load_leaves_no_import_state(tmp_path: Path) -> None:
    path = tmp_path / "palette.py"
    path.write_text("themes = {}\n", encoding="utf-8")

    load_theme_file(path)

    assert not (tmp_path / "__pycache__").exists()
    assert not any(name.startswith("_themetokens_data_") for name in sys.modules)


def test_unsupported_extension(tmp_path: Path) -> None:
    path = tmp_path / "themes.toml"
    path.write_text("[themes]\n", encoding="utf-8")
    with pytest.raises(ThemeLoadError) as excinfo:
        load_theme_file(path)
    assert excinfo.value.code is ErrorCode.THEME_FILE_UNSUPPORTED


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ThemeLoadError) as excinfo:
        load_theme_file(tmp_path / "nope.json")
    assert excinfo.value.code is ErrorCode.THEME_FILE_NOT_FOUND


@pytest.mark.parametrize(
    ("name", "content"),
    [
        ("themes.json", "{ not json"),
        ("themes.yaml", "themes: [unclosed"),
        ("themes.py", "themes = {\n"),
    ],
)
def test_parse_failures(tmp_path: Path, name: str, content: str) -> None:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ThemeLoadError) as excinfo:
        load_theme_file(path)
    assert excinfo.value.code is ErrorCode.THEME_FILE_INVALID
    assert excinfo.value.path == path


def test_module_runtime_error_is_reported(tmp_path: Path) -> None:
    path = tmp_path / "themes.py"
    path.write_text("raise RuntimeError('boom')\n", encoding="utf-8")
    with pytest.raises(ThemeTokensError, match="boom"):
        load_theme_file(path)


def test_oversized_file_rejected(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(loader, "_MAX_THEME_FILE_BYTES", 8)
    path = tmp_path / "themes.json"
    path.write_text(json.dumps(_THEMES), encoding="utf-8")
    with pytest.raises(ThemeLoadError, match="exceeds max size"):
        load_theme_file(path)
