"""Expansion of ``@theme-tokens`` at-rules inside a stylesheet."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from themetokens.config.settings import ProcessorSettings
from themetokens.errors import ThemeTokensError, classify_exception
from themetokens.themes.compiler import compile_themes
from themetokens.themes.constants import AT_RULE_NAME, DEFAULT_SOURCE_NAME
from themetokens.themes.loader import load_theme_file

logger = logging.getLogger(__name__)

_AT_RULE_RE = re.compile(rf"@{re.escape(AT_RULE_NAME)}(?![\w-])([^;{{}}]*)(?:;|(?=[{{}}])|$)")
_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_QUOTES_RE = re.compile(r"['\"]")


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Outcome of processing one stylesheet."""

    css: str
    source: str = DEFAULT_SOURCE_NAME
    warnings: tuple[str, ...] = ()
    errors: tuple[ThemeTokensError, ...] = ()
    dependencies: tuple[Path, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class _Collector:
    rule_warnings: list[str] = field(default_factory=list)
    theme_warnings: list[str] = field(default_factory=list)
    errors: list[ThemeTokensError] = field(default_factory=list)
    dependencies: list[Path] = field(default_factory=list)


class ThemeTokensProcessor:
    """Replaces each ``@theme-tokens "<file>";`` with the compiled theme classes.

    A failing invocation is reported in ``ProcessResult.errors`` and left in
    place; the remaining invocations in the stylesheet are still expanded.
    """

    def __init__(self, settings: ProcessorSettings | None = None) -> None:
        self._settings = settings or ProcessorSettings()

    @property
    def settings(self) -> ProcessorSettings:
        return self._settings

    def process(self, css: str, *, source: str | None = None) -> ProcessResult:
        collected = _Collector()
        comments = [match.span() for match in _COMMENT_RE.finditer(css)]

        pieces: list[str] = []
        cursor = 0
        for match in _AT_RULE_RE.finditer(css):
            if any(start <= match.start() < end for start, end in comments):
                continue
            replacement = self._expand(match.group(1), collected)
            if replacement is None:
                continue
            pieces.append(css[cursor:match.start()])
            pieces.append(replacement)
            cursor = match.end()
        pieces.append(css[cursor:])

        warnings = collected.rule_warnings + collected.theme_warnings
        for warning in warnings:
            logger.warning("%s", warning)

        return ProcessResult(
            css="".join(pieces),
            source=source or DEFAULT_SOURCE_NAME,
            warnings=tuple(warnings),
            errors=tuple(collected.errors),
            dependencies=tuple(collected.dependencies),
        )

    def process_file(self, path: Path) -> ProcessResult:
        path = Path(path)
        try:
            css = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise classify_exception(exc, path) from exc
        return self.process(css, source=str(path))

    def _expand(self, params: str, collected: _Collector) -> str | None:
        theme_path = _QUOTES_RE.sub("", params.strip())
        if not theme_path:
            collected.rule_warnings.append(f"Missing path in @{AT_RULE_NAME}")
            return None

        full_path = Path(os.path.abspath(self._settings.root_dir / theme_path))
        collected.dependencies.append(full_path)

        try:
            output = compile_themes(load_theme_file(full_path), self._settings.options)
        except ThemeTokensError as exc:
            error = type(exc)(
                code=exc.code,
                message=f"Failed to load or parse theme file: {full_path}\n{exc.message}",
                path=full_path,
                details=dict(exc.details),
            )
            logger.error("%s", error.message)
            collected.errors.append(error)
            return None

        collected.theme_warnings.extend(output.warnings)
        return output.fragment
