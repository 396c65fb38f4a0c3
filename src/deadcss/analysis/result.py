"""Outcome of one analysis run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from deadcss.analysis.reconciler import distinct_unused
from deadcss.model.diagnostic import Diagnostic
from deadcss.model.report import ErrorLog, ScanCounts
from deadcss.model.selector import Selector, UsedIdentifier


class AnalysisStatus(Enum):
    COMPLETED = "completed"
    SKIPPED = "skipped"
    ABORTED = "aborted"


@dataclass
class AnalysisResult:
    """Everything one run produced.

    Owned by a single run: the error log and collections are never shared
    with another run.
    """

    root: str
    status: AnalysisStatus = AnalysisStatus.COMPLETED
    selectors: list[Selector] = field(default_factory=list)
    used: list[UsedIdentifier] = field(default_factory=list)
    unused: list[Selector] = field(default_factory=list)
    diagnostics: dict[str, list[Diagnostic]] = field(default_factory=dict)
    counts: ScanCounts = field(default_factory=ScanCounts)
    errors: ErrorLog = field(default_factory=ErrorLog)
    skip_reason: str | None = None
    generation: int = 0
    published: bool = False

    @property
    def completed(self) -> bool:
        return self.status is AnalysisStatus.COMPLETED

    @property
    def aborted(self) -> bool:
        return self.status is AnalysisStatus.ABORTED

    @property
    def unused_count(self) -> int:
        return len(self.unused)

    @property
    def distinct_unused_count(self) -> int:
        return len(distinct_unused(self.unused))

    def discard_findings(self) -> None:
        """Drop partial results so an aborted run reports nothing."""
        self.selectors = []
        self.used = []
        self.unused = []
        self.diagnostics = {}
