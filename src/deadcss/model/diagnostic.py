"""Diagnostic model: host-independent records for unused selectors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DIAGNOSTIC_SOURCE = "deadcss"
UNUSED_SELECTOR_CODE = "unused-selector"


class Severity(Enum):
    """Severity level handed to the diagnostics sink."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Position:
    """0-based line/character pair, as editors address text."""

    line: int
    character: int


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position


@dataclass(frozen=True)
class Diagnostic:
    """A single finding attached to a stylesheet location.

    Attributes:
        file: Stylesheet the finding belongs to.
        range: 0-based span covering the selector text at the rule start.
        line: 1-based line of the declaring rule.
        column: 1-based column of the declaring rule.
        severity: How serious the finding is.
        message: Human-readable explanation.
        code: Machine-readable identifier of the check.
        related: One-line summary suitable for related-information panes.
    """

    file: str
    range: Range
    line: int
    column: int
    severity: Severity
    message: str
    code: str = UNUSED_SELECTOR_CODE
    source: str = DIAGNOSTIC_SOURCE
    related: str | None = None

    def summary_line(self) -> str:
        first = self.message.splitlines()[0] if self.message else ""
        return f"{self.file}:{self.line}:{self.column}: {self.severity.value} [{self.code}] {first}"

    def __str__(self) -> str:
        return self.summary_line()
