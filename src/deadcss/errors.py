"""Exception types raised while analysing a project.

Every per-file failure is one of the :class:`AnalysisFailure` subclasses; the
orchestrator maps each onto an :class:`~deadcss.model.report.ErrorKind` and
keeps going with the next file.
"""

from __future__ import annotations

from enum import Enum


class AnalysisFailure(Exception):
    """Base class for failures confined to one file, rule or selector."""

    def __init__(
        self,
        message: str,
        *,
        file: str | None = None,
        line: int | None = None,
        column: int | None = None,
        details: str | None = None,
    ):
        self.file = file
        self.line = line
        self.column = column
        self.details = details
        super().__init__(message)


class StylesheetParseError(AnalysisFailure):
    """Raised when stylesheet text cannot be scanned into rules."""


class MarkupParseError(AnalysisFailure):
    """Raised when a JSX component cannot be turned into a syntax tree."""


class TemplateParseError(AnalysisFailure):
    """Raised when a decorated component module cannot be parsed."""


class FileAccessReason(Enum):
    NOT_FOUND = "not-found"
    UNREADABLE = "unreadable"
    TOO_LARGE = "too-large"


class FileAccessError(AnalysisFailure):
    """Raised by a file reader when a path cannot be turned into text."""

    def __init__(self, message: str, *, reason: FileAccessReason, file: str | None = None):
        self.reason = reason
        super().__init__(message, file=file)


class ConfigurationError(AnalysisFailure):
    """Raised when the configuration snapshot is invalid.

    Unlike the other failures this one is never recoverable: the run stops
    before any file is read.
    """
