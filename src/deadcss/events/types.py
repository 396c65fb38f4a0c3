"""Event types emitted during an analysis run."""

from dataclasses import dataclass

from deadcss.model.report import SourceKind


@dataclass(frozen=True)
class RunEvent:
    """Base of the events that mark a run's lifecycle, keyed by project root."""

    root: str


@dataclass(frozen=True)
class AnalysisStarted(RunEvent):
    generation: int


@dataclass(frozen=True)
class FileAnalyzed:
    path: str
    kind: SourceKind
    ok: bool
    records: int


@dataclass(frozen=True)
class AnalysisCompleted(RunEvent):
    selectors: int
    unused: int


@dataclass(frozen=True)
class AnalysisSkipped(RunEvent):
    reason: str


@dataclass(frozen=True)
class AnalysisAborted(RunEvent):
    error: str
