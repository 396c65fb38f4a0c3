"""Shared interface of the component usage extractors."""

from __future__ import annotations

from typing import Protocol

from deadcss.model.report import ErrorLog, SourceKind
from deadcss.model.selector import UsedIdentifier, is_identifier


class UsageExtractor(Protocol):
    """Turns one component file into the identifiers its markup uses.

    Implementations record recoverable problems in *errors* and raise an
    :class:`~deadcss.errors.AnalysisFailure` subclass when the whole file
    has to be given up.
    """

    kind: SourceKind

    def extract(
        self, source: str, file: str, errors: ErrorLog
    ) -> list[UsedIdentifier]: ...


def static_tokens(text: str) -> list[str]:
    """Whitespace-split literal text, keeping only valid identifiers."""
    return [token for token in text.split() if is_identifier(token)]
