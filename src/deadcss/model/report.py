"""Run bookkeeping: error records, the per-run error log, and file tallies."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class ErrorKind(Enum):
    STYLESHEET_PARSE = "stylesheet-parse"
    JSX_PARSE = "jsx-parse"
    TEMPLATE_PARSE = "template-parse"
    FILE_ACCESS = "file-access"
    CONFIGURATION = "configuration"
    GENERAL = "general"


class SourceKind(Enum):
    """Which extractor a file is handed to."""

    STYLESHEET = "stylesheet"
    JSX = "jsx"
    DECORATOR = "decorator"


@dataclass(frozen=True)
class AnalysisError:
    """A structured failure record surfaced to the host.

    Attributes:
        kind: Taxonomy bucket.
        message: Short description.
        file: The file involved, if any.
        details: Underlying exception text or extra context.
        recoverable: False only for failures that abort the run.
    """

    kind: ErrorKind
    message: str
    file: str | None = None
    details: str | None = None
    recoverable: bool = True

    def __str__(self) -> str:
        location = f" [{self.file}]" if self.file else ""
        text = f"{self.kind.value}{location}: {self.message}"
        if self.details:
            text += f" ({self.details})"
        return text


class ErrorLog:
    """Bounded log of the most recent errors of one analysis run.

    Records are kept newest first. Once ``capacity`` is reached the oldest
    record is evicted, but the per-kind counts keep covering every record.
    """

    DEFAULT_CAPACITY = 50

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._records: deque[AnalysisError] = deque(maxlen=capacity)
        self._counts: Counter[ErrorKind] = Counter()

    def record(self, error: AnalysisError) -> AnalysisError:
        self._records.appendleft(error)
        self._counts[error.kind] += 1
        return error

    def add(
        self,
        kind: ErrorKind,
        message: str,
        *,
        file: str | None = None,
        details: str | None = None,
        recoverable: bool = True,
    ) -> AnalysisError:
        return self.record(
            AnalysisError(
                kind=kind,
                message=message,
                file=file,
                details=details,
                recoverable=recoverable,
            )
        )

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def count(self, kind: ErrorKind) -> int:
        return self._counts[kind]

    def by_kind(self) -> dict[str, int]:
        return {kind.value: n for kind, n in self._counts.items()}

    @property
    def has_fatal(self) -> bool:
        return any(not e.recoverable for e in self._records)

    def __iter__(self) -> Iterator[AnalysisError]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return self.total > 0


@dataclass
class FileTally:
    """Per-source-kind counters of processed files."""

    succeeded: int = 0
    failed: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        return self.succeeded + self.failed + self.skipped


@dataclass
class ScanCounts:
    """How many files of each kind a run looked at."""

    tallies: dict[SourceKind, FileTally] = field(
        default_factory=lambda: {kind: FileTally() for kind in SourceKind}
    )

    def __getitem__(self, kind: SourceKind) -> FileTally:
        return self.tallies[kind]

    def scanned(self, kind: SourceKind) -> int:
        return self.tallies[kind].total
