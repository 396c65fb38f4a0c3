"""Diagnostics projection: unused selectors to grouped diagnostic records."""

from __future__ import annotations

import os
from typing import Iterable

from deadcss.host.sink import DiagnosticsSink
from deadcss.model.diagnostic import Diagnostic, Position, Range, Severity
from deadcss.model.report import ScanCounts, SourceKind
from deadcss.model.selector import Selector


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def diagnostic_message(selector: Selector, counts: ScanCounts) -> str:
    label = selector.kind.label
    return "\n".join([
        f'Unused CSS {label}: "{selector.text}"',
        "",
        f"File: {os.path.basename(selector.file)}",
        f"Line: {selector.line}, Column: {selector.column}",
        "",
        "Analysis summary:",
        f"- Scanned {plural(counts.scanned(SourceKind.STYLESHEET), 'stylesheet')}",
        f"- Checked {plural(counts.scanned(SourceKind.JSX), 'JSX component')}",
        f"- Checked {plural(counts.scanned(SourceKind.DECORATOR), 'decorated component')}",
        "",
        f'The {label} "{selector.name}" is not referenced in any component file.',
    ])


def to_diagnostic(selector: Selector, counts: ScanCounts) -> Diagnostic:
    line = max(0, selector.line - 1)
    character = max(0, selector.column - 1)
    return Diagnostic(
        file=selector.file,
        range=Range(
            start=Position(line, character),
            end=Position(line, character + len(selector.text)),
        ),
        line=selector.line,
        column=selector.column,
        severity=Severity.WARNING,
        message=diagnostic_message(selector, counts),
        related=f'This CSS selector "{selector.text}" is not used in any component',
    )


def project(unused: Iterable[Selector], counts: ScanCounts) -> dict[str, list[Diagnostic]]:
    """Group diagnostics by stylesheet, files in first-seen order."""
    grouped: dict[str, list[Diagnostic]] = {}
    for selector in unused:
        grouped.setdefault(selector.file, []).append(to_diagnostic(selector, counts))
    return grouped


def publish(sink: DiagnosticsSink, grouped: dict[str, list[Diagnostic]]) -> None:
    """Replace everything *sink* holds with *grouped*."""
    sink.clear()
    for file, diagnostics in grouped.items():
        sink.set(file, diagnostics)
