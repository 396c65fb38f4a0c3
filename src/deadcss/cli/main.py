"""deadcss CLI entry point: Click group with subcommands."""

import logging

import click

from deadcss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="deadcss")
@click.option("-v", "--verbose", is_flag=True, help="Log per-file progress")
def cli(verbose: bool) -> None:
    """deadcss - find CSS selectors no component references."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


# Import and register subcommands
from deadcss.cli.analyze import analyze  # noqa: E402
from deadcss.cli.inspect import selectors, usage  # noqa: E402

cli.add_command(analyze)
cli.add_command(selectors)
cli.add_command(usage)
