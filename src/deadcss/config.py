"""Analysis configuration: a read-only snapshot of recognised options."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

from deadcss.errors import ConfigurationError
from deadcss.model.report import SourceKind

DEFAULT_EXCLUDE_PATTERNS = (
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/.git/**",
)

# Option names as hosts spell them, mapped to dataclass fields.
OPTION_NAMES = {
    "includeFileTypes": "include_file_types",
    "componentFileTypes": "component_file_types",
    "jsxFileTypes": "jsx_file_types",
    "decoratorFileTypes": "decorator_file_types",
    "excludePatterns": "exclude_patterns",
    "minFilesForAnalysis": "min_files_for_analysis",
    "maxStylesheetBytes": "max_stylesheet_bytes",
    "maxComponentBytes": "max_component_bytes",
    "debounceDelay": "debounce_delay",
}

_LIST_FIELDS = (
    "include_file_types",
    "component_file_types",
    "jsx_file_types",
    "decorator_file_types",
)


@dataclass(frozen=True)
class AnalysisConfig:
    include_file_types: tuple[str, ...] = (".css", ".scss", ".less")
    component_file_types: tuple[str, ...] = (".jsx", ".tsx", ".ts", ".js")
    jsx_file_types: tuple[str, ...] = (".jsx", ".tsx", ".js", ".mjs", ".cjs")
    decorator_file_types: tuple[str, ...] = (".ts",)
    exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS
    min_files_for_analysis: int = 1
    max_stylesheet_bytes: int = 5 * 1024 * 1024
    max_component_bytes: int = 2 * 1024 * 1024
    debounce_delay: int = 500  # ms; only hosts that re-trigger runs use it

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> AnalysisConfig:
        """Build a config from host-style option names.

        Unknown keys are ignored. Values are stored as given (lists become
        tuples) so that :meth:`validate` can report type problems.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = OPTION_NAMES.get(key, key)
            if name not in known:
                continue
            if isinstance(value, list):
                value = tuple(value)
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> AnalysisConfig:
        """Load options from a JSON object file."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigurationError(f"Cannot load configuration: {exc}", file=str(path)) from exc
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration file must hold a JSON object", file=str(path))
        return cls.from_mapping(data)

    def validate(self) -> AnalysisConfig:
        """Raise :class:`ConfigurationError` if any option is out of range."""
        for name in _LIST_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, tuple) or not value:
                raise ConfigurationError(f"{name} must be a non-empty list")
            for ext in value:
                if not isinstance(ext, str) or not ext.startswith("."):
                    raise ConfigurationError(
                        f"{name} entries must be extensions starting with '.', got {ext!r}"
                    )

        if not isinstance(self.exclude_patterns, tuple) or not all(
            isinstance(p, str) for p in self.exclude_patterns
        ):
            raise ConfigurationError("exclude_patterns must be a list of glob strings")

        _check_int("min_files_for_analysis", self.min_files_for_analysis, minimum=1)
        _check_int("max_stylesheet_bytes", self.max_stylesheet_bytes, minimum=1)
        _check_int("max_component_bytes", self.max_component_bytes, minimum=1)
        _check_int("debounce_delay", self.debounce_delay, minimum=0, maximum=10000)
        return self

    def source_kind(self, path: str) -> SourceKind | None:
        """Which extractor a discovered component file belongs to, if any."""
        ext = os.path.splitext(path)[1].lower()
        if ext in self.decorator_file_types:
            return SourceKind.DECORATOR
        if ext in self.jsx_file_types:
            return SourceKind.JSX
        return None


def _check_int(name: str, value: object, *, minimum: int, maximum: int | None = None) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer")
    if value < minimum or (maximum is not None and value > maximum):
        bounds = f">= {minimum}" if maximum is None else f"between {minimum} and {maximum}"
        raise ConfigurationError(f"{name} must be {bounds}, got {value}")
