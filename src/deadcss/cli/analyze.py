"""CLI command: deadcss analyze -- report unused selectors under a root."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import replace

import click

from deadcss.analysis.result import AnalysisResult
from deadcss.analysis.runner import AnalysisSession, Analyzer
from deadcss.config import AnalysisConfig
from deadcss.errors import ConfigurationError
from deadcss.host.sink import MemoryDiagnosticsSink

EXIT_CLEAN = 0
EXIT_UNUSED = 1
EXIT_ABORTED = 2


def _build_config(
    config_file: str | None,
    include_types: tuple[str, ...],
    component_types: tuple[str, ...],
    excludes: tuple[str, ...],
    min_files: int | None,
) -> AnalysisConfig:
    config = AnalysisConfig.from_file(config_file) if config_file else AnalysisConfig()
    overrides: dict[str, object] = {}
    if include_types:
        overrides["include_file_types"] = include_types
    if component_types:
        overrides["component_file_types"] = component_types
    if excludes:
        overrides["exclude_patterns"] = config.exclude_patterns + excludes
    if min_files is not None:
        overrides["min_files_for_analysis"] = min_files
    return replace(config, **overrides) if overrides else config


def _result_payload(result: AnalysisResult, root: str) -> dict[str, object]:
    return {
        "status": result.status.value,
        "skip_reason": result.skip_reason,
        "selectors": len(result.selectors),
        "unused": [
            {
                "selector": s.text,
                "kind": s.kind.value,
                "file": os.path.relpath(s.file, root),
                "line": s.line,
                "column": s.column,
            }
            for s in result.unused
        ],
        "files": {
            kind.value: {
                "succeeded": tally.succeeded,
                "failed": tally.failed,
                "skipped": tally.skipped,
            }
            for kind, tally in result.counts.tallies.items()
        },
        "errors": [
            {
                "kind": e.kind.value,
                "message": e.message,
                "file": e.file,
                "details": e.details,
                "recoverable": e.recoverable,
            }
            for e in result.errors
        ],
    }


@click.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False), default=None,
              help="JSON file with analysis options")
@click.option("--include-type", "include_types", multiple=True, help="Stylesheet extension (repeatable)")
@click.option("--component-type", "component_types", multiple=True, help="Component extension (repeatable)")
@click.option("--exclude", "excludes", multiple=True, help="Extra exclusion glob (repeatable)")
@click.option("--min-files", type=int, default=None, help="Skip the run below this many stylesheets")
@click.option("--json", "as_json", is_flag=True, help="Print a machine-readable report")
@click.option("--show-errors", is_flag=True, help="List recorded errors after the summary")
def analyze(
    root: str,
    config_file: str | None,
    include_types: tuple[str, ...],
    component_types: tuple[str, ...],
    excludes: tuple[str, ...],
    min_files: int | None,
    as_json: bool,
    show_errors: bool,
) -> None:
    """Find CSS class and id selectors that no component under ROOT uses.

    Exits with code 0 when every selector is used, 1 when unused selectors
    were found, and 2 when the analysis was aborted.
    """
    root = os.path.abspath(root)
    try:
        config = _build_config(config_file, include_types, component_types, excludes, min_files)
    except ConfigurationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(EXIT_ABORTED)

    sink = MemoryDiagnosticsSink()
    result = AnalysisSession(Analyzer(config), sink).run(root)

    if as_json:
        click.echo(json.dumps(_result_payload(result, root), indent=2))
    else:
        _print_report(result, sink, root, show_errors)

    if result.aborted:
        sys.exit(EXIT_ABORTED)
    sys.exit(EXIT_UNUSED if result.unused else EXIT_CLEAN)


def _print_report(
    result: AnalysisResult, sink: MemoryDiagnosticsSink, root: str, show_errors: bool
) -> None:
    if result.aborted:
        for error in result.errors:
            if not error.recoverable:
                click.echo(f"Analysis aborted: {error}", err=True)
        return

    if result.skip_reason:
        click.echo(f"Skipping analysis: {result.skip_reason}")
        return

    for file in sink.files:
        click.echo(os.path.relpath(file, root))
        for diag in sink.get(file):
            click.echo(f"  {diag.line}:{diag.column}  {diag.message.splitlines()[0]}")
    if sink.files:
        click.echo()

    if result.unused:
        click.echo(
            f"Found {result.unused_count} unused selector(s) "
            f"({result.distinct_unused_count} distinct) out of {len(result.selectors)} total"
        )
    else:
        click.echo(f"All {len(result.selectors)} CSS selectors are in use")

    if result.errors:
        click.echo(f"{result.errors.total} error(s) recorded during analysis")
        if show_errors:
            for kind, count in sorted(result.errors.by_kind().items()):
                click.echo(f"  {kind}: {count}")
            for error in result.errors:
                click.echo(f"  - {error}")
