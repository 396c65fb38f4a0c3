"""CLI commands: deadcss selectors / deadcss usage -- inspect a single file."""

from __future__ import annotations

import os
import sys

import click

from deadcss.config import AnalysisConfig
from deadcss.errors import AnalysisFailure
from deadcss.host.files import LocalFileReader
from deadcss.markup.decorator import DecoratorUsageExtractor
from deadcss.markup.jsx import JsxUsageExtractor
from deadcss.model.report import ErrorLog, SourceKind
from deadcss.stylesheet.extractor import extract_selectors


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
def selectors(stylesheet: str) -> None:
    """List the class and id selectors declared in STYLESHEET."""
    errors = ErrorLog()
    try:
        with open(stylesheet, encoding="utf-8", errors="replace") as fh:
            found = extract_selectors(fh.read(), stylesheet, errors)
    except AnalysisFailure as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    for selector in found:
        click.echo(f"{selector.line}:{selector.column}  {selector.text}")
    for error in errors:
        click.echo(f"warning: {error}", err=True)
    click.echo(f"{len(found)} selector(s)")


@click.command()
@click.argument("component", type=click.Path(exists=True, dir_okay=False))
def usage(component: str) -> None:
    """List the identifiers COMPONENT's markup uses."""
    config = AnalysisConfig()
    kind = config.source_kind(component)
    if kind is SourceKind.JSX:
        extractor = JsxUsageExtractor()
    elif kind is SourceKind.DECORATOR:
        extractor = DecoratorUsageExtractor(LocalFileReader(), config.max_component_bytes)
    else:
        click.echo(f"Unsupported component type: {os.path.splitext(component)[1]}", err=True)
        sys.exit(1)

    errors = ErrorLog()
    path = os.path.abspath(component)
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            used = extractor.extract(fh.read(), path, errors)
    except AnalysisFailure as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    for name in sorted({u.name for u in used}):
        click.echo(name)
    for error in errors:
        click.echo(f"warning: {error}", err=True)
