"""Theme-data file loading."""

from __future__ import annotations

import importlib.machinery
import importlib.util
import json
import logging
from pathlib import Path
from types import ModuleType
from typing import Mapping

import yaml

from themetokens.errors import ErrorCode, ThemeLoadError, classify_exception

logger = logging.getLogger(__name__)

_JSON_SUFFIXES = frozenset({".json"})
_YAML_SUFFIXES = frozenset({".yaml", ".yml"})
_MODULE_SUFFIXES = frozenset({".py"})

_MAX_THEME_FILE_BYTES = 1024 * 1024


def load_theme_file(path: Path) -> Mapping[str, object]:
    """Load a theme-data file and return the materialized theme set.

    The shape of the returned mapping is not validated here; the compiler
    owns that check.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in _MODULE_SUFFIXES:
        data = _load_module(path)
    elif suffix in _JSON_SUFFIXES:
        data = _load_json(path)
    elif suffix in _YAML_SUFFIXES:
        data = _load_yaml(path)
    else:
        raise ThemeLoadError(
            ErrorCode.THEME_FILE_UNSUPPORTED,
            message=f"Unsupported theme file type {suffix or '(none)'!r}: {path}",
            path=path,
        )
    logger.debug("loaded theme data from %s", path)
    return data


def _load_json(path: Path) -> object:
    content = _read_text_limited(path, max_bytes=_MAX_THEME_FILE_BYTES)
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise classify_exception(exc, path) from exc


def _load_yaml(path: Path) -> object:
    content = _read_text_limited(path, max_bytes=_MAX_THEME_FILE_BYTES)
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise classify_exception(exc, path) from exc


def _load_module(path: Path) -> object:
    """Execute a Python theme module from scratch and export its data.

    The module is never registered in ``sys.modules`` and bypasses the
    bytecode cache, so edits to the file are picked up on the next load.
    """
    _check_size(path, max_bytes=_MAX_THEME_FILE_BYTES)
    name = f"_themetokens_data_{path.stem}"
    spec = importlib.util.spec_from_file_location(
        name, path, loader=_UncachedSourceLoader(name, str(path))
    )
    if spec is None or spec.loader is None:
        raise ThemeLoadError(message=f"Unable to load theme module {path}", path=path)
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise classify_exception(exc, path) from exc
    return _module_exports(module)


class _UncachedSourceLoader(importlib.machinery.SourceFileLoader):
    """Source loader that never reads or writes ``__pycache__``."""

    def path_stats(self, path):
        # Without source stats the loader skips bytecode validation and caching.
        raise OSError(f"bytecode cache disabled for {path}")


def _module_exports(module: ModuleType) -> object:
    default = getattr(module, "default", None)
    if default is not None:
        return default
    return {
        name: value
        for name, value in vars(module).items()
        if not name.startswith("_") and not isinstance(value, ModuleType)
    }


def _check_size(path: Path, *, max_bytes: int) -> None:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise classify_exception(exc, path) from exc
    if size > max_bytes:
        raise ThemeLoadError(
            ErrorCode.THEME_FILE_UNREADABLE,
            message=f"{path}: file exceeds max size ({max_bytes} bytes)",
            path=path,
        )


def _read_text_limited(path: Path, *, max_bytes: int) -> str:
    _check_size(path, max_bytes=max_bytes)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise classify_exception(exc, path) from exc
