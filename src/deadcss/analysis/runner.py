"""Analysis orchestrator and the session guard around it."""

from __future__ import annotations

import logging
import os
import threading
from typing import Callable, Iterable, TypeVar

from deadcss.analysis.projection import project, publish
from deadcss.analysis.reconciler import find_unused
from deadcss.analysis.result import AnalysisResult, AnalysisStatus
from deadcss.config import AnalysisConfig
from deadcss.errors import AnalysisFailure, ConfigurationError, FileAccessError
from deadcss.events.bus import EventBus
from deadcss.events.types import (
    AnalysisAborted,
    AnalysisCompleted,
    AnalysisSkipped,
    AnalysisStarted,
    FileAnalyzed,
)
from deadcss.host.files import FileReader, LocalFileReader, discover_files
from deadcss.host.sink import DiagnosticsSink
from deadcss.markup.base import UsageExtractor
from deadcss.markup.decorator import DecoratorUsageExtractor
from deadcss.markup.jsx import JsxUsageExtractor
from deadcss.model.report import ErrorKind, SourceKind
from deadcss.model.selector import Selector, UsedIdentifier
from deadcss.stylesheet.extractor import extract_selectors

logger = logging.getLogger(__name__)

T = TypeVar("T")

Discover = Callable[[str, Iterable[str], Iterable[str]], list[str]]

_PARSE_ERROR_KINDS = {
    SourceKind.STYLESHEET: ErrorKind.STYLESHEET_PARSE,
    SourceKind.JSX: ErrorKind.JSX_PARSE,
    SourceKind.DECORATOR: ErrorKind.TEMPLATE_PARSE,
}


class Analyzer:
    """Runs one complete analysis of a project root.

    Files are read and parsed one at a time. Per-file failures are recorded
    on the result and never stop the run; an invalid configuration or an
    unexpected exception aborts it with zero findings.
    """

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        *,
        reader: FileReader | None = None,
        discover: Discover = discover_files,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config or AnalysisConfig()
        self.reader = reader or LocalFileReader()
        self._discover = discover
        self._bus = event_bus or EventBus()

    def run(self, root: str | os.PathLike[str], *, generation: int = 0) -> AnalysisResult:
        root = str(root)
        result = AnalysisResult(root=root, generation=generation)
        self._bus.emit(AnalysisStarted(root=root, generation=generation))

        try:
            config = self.config.validate()
        except ConfigurationError as exc:
            return self._abort(result, ErrorKind.CONFIGURATION, str(exc))

        try:
            stylesheets = self._discover(root, config.include_file_types, config.exclude_patterns)
            components = self._discover(root, config.component_file_types, config.exclude_patterns)
        except OSError as exc:
            return self._abort(
                result, ErrorKind.FILE_ACCESS, "Failed to scan workspace files", details=str(exc)
            )

        if len(stylesheets) < config.min_files_for_analysis:
            result.status = AnalysisStatus.SKIPPED
            result.skip_reason = (
                f"Found {len(stylesheets)} stylesheet(s), "
                f"minimum required: {config.min_files_for_analysis}"
            )
            logger.info("Skipping analysis of %s: %s", root, result.skip_reason)
            self._bus.emit(AnalysisSkipped(root=root, reason=result.skip_reason))
            return result

        try:
            self._analyze(result, config, stylesheets, components)
        except Exception as exc:  # anything uncaught voids the whole run
            logger.exception("Critical error during CSS analysis of %s", root)
            return self._abort(
                result, ErrorKind.GENERAL, "Critical error during CSS analysis", details=str(exc)
            )
        return result

    # -- stages -------------------------------------------------------------

    def _analyze(
        self,
        result: AnalysisResult,
        config: AnalysisConfig,
        stylesheets: list[str],
        components: list[str],
    ) -> None:
        jsx_files: list[str] = []
        decorator_files: list[str] = []
        for path in components:
            kind = config.source_kind(path)
            if kind is SourceKind.JSX:
                jsx_files.append(path)
            elif kind is SourceKind.DECORATOR:
                decorator_files.append(path)
            else:
                logger.debug("No component dialect handles %s", path)

        logger.info(
            "Found %d stylesheets, %d JSX files, %d decorator files",
            len(stylesheets),
            len(jsx_files),
            len(decorator_files),
        )

        selectors: list[Selector] = []
        for path in stylesheets:
            selectors.extend(
                self._process(
                    result,
                    path,
                    SourceKind.STYLESHEET,
                    config.max_stylesheet_bytes,
                    lambda source, file: extract_selectors(source, file, result.errors),
                )
            )
        logger.info("Extracted %d selectors", len(selectors))

        extractors: list[tuple[UsageExtractor, list[str]]] = [
            (JsxUsageExtractor(), jsx_files),
            (DecoratorUsageExtractor(self.reader, config.max_component_bytes), decorator_files),
        ]
        used: list[UsedIdentifier] = []
        for extractor, paths in extractors:
            for path in paths:
                used.extend(
                    self._process(
                        result,
                        path,
                        extractor.kind,
                        config.max_component_bytes,
                        lambda source, file, ex=extractor: ex.extract(source, file, result.errors),
                    )
                )
        logger.info("Found %d used identifiers", len(used))

        for kind in SourceKind:
            tally = result.counts[kind]
            if tally.failed:
                logger.warning(
                    "%s analysis: %d files processed, %d files failed",
                    kind.value,
                    tally.succeeded,
                    tally.failed,
                )

        result.selectors = selectors
        result.used = used
        result.unused = find_unused(selectors, used)
        result.diagnostics = project(result.unused, result.counts)
        result.status = AnalysisStatus.COMPLETED
        logger.info(
            "Analysis complete: %d unused selectors out of %d",
            result.unused_count,
            len(selectors),
        )
        self._bus.emit(
            AnalysisCompleted(root=result.root, selectors=len(selectors), unused=result.unused_count)
        )

    def _process(
        self,
        result: AnalysisResult,
        path: str,
        kind: SourceKind,
        max_bytes: int,
        extract: Callable[[str, str], list[T]],
    ) -> list[T]:
        tally = result.counts[kind]
        try:
            source = self.reader.read(path, max_bytes)
        except FileAccessError as exc:
            logger.warning("Cannot read %s: %s", path, exc)
            result.errors.add(
                ErrorKind.FILE_ACCESS, str(exc), file=path, details=exc.reason.value
            )
            tally.failed += 1
            self._bus.emit(FileAnalyzed(path=path, kind=kind, ok=False, records=0))
            return []

        if not source.strip():
            tally.skipped += 1
            self._bus.emit(FileAnalyzed(path=path, kind=kind, ok=True, records=0))
            return []

        try:
            records = extract(source, path)
        except AnalysisFailure as exc:
            logger.warning("Failed to analyse %s: %s", path, exc)
            result.errors.add(
                _PARSE_ERROR_KINDS[kind],
                str(exc),
                file=path,
                details=exc.details or _location(exc),
            )
            tally.failed += 1
            self._bus.emit(FileAnalyzed(path=path, kind=kind, ok=False, records=0))
            return []

        tally.succeeded += 1
        logger.debug("%s: %d records from %s", kind.value, len(records), path)
        self._bus.emit(FileAnalyzed(path=path, kind=kind, ok=True, records=len(records)))
        return records

    def _abort(
        self,
        result: AnalysisResult,
        kind: ErrorKind,
        message: str,
        *,
        details: str | None = None,
    ) -> AnalysisResult:
        logger.error("Analysis of %s aborted: %s", result.root, message)
        result.errors.add(kind, message, details=details, recoverable=False)
        result.status = AnalysisStatus.ABORTED
        result.discard_findings()
        self._bus.emit(AnalysisAborted(root=result.root, error=message))
        return result


def _location(exc: AnalysisFailure) -> str | None:
    if exc.line is None:
        return None
    return f"line {exc.line}, column {exc.column}"


class AnalysisSession:
    """Serializes runs against one diagnostics sink.

    Each run takes a generation number. A run only publishes if no newer run
    was requested (and no :meth:`invalidate` happened) while it executed;
    otherwise its results are dropped and the newer run's publication
    replaces the sink contents.
    """

    def __init__(self, analyzer: Analyzer, sink: DiagnosticsSink) -> None:
        self.analyzer = analyzer
        self.sink = sink
        self._run_lock = threading.Lock()
        self._counter_lock = threading.Lock()
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def invalidate(self) -> int:
        """Supersede any in-flight run; returns the new generation."""
        with self._counter_lock:
            self._generation += 1
            return self._generation

    def run(self, root: str | os.PathLike[str]) -> AnalysisResult:
        generation = self.invalidate()
        with self._run_lock:
            result = self.analyzer.run(root, generation=generation)
            if generation == self._generation:
                publish(self.sink, result.diagnostics)
                result.published = True
            else:
                logger.info("Discarding results of superseded run %d", generation)
        return result
