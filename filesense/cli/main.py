"""
Main CLI entry point for FileSense.
"""

import click
from rich.console import Console
from rich.logging import RichHandler

from ..shared.file_utils import setup_logging
from ..version import get_version_string
from .analyze import analyze
from .organize import organize, undo

log_console = Console(stderr=True)


@click.group()
@click.version_option(get_version_string(), prog_name="filesense")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Enable verbose logging",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Only log warnings and errors",
)
def cli(verbose: bool, quiet: bool) -> None:
    """Sort the files of a folder into category subfolders, and undo it."""
    setup_logging(
        verbose=verbose,
        quiet=quiet,
        handler=RichHandler(rich_tracebacks=True, console=log_console),
    )


cli.add_command(analyze)
cli.add_command(organize)
cli.add_command(undo)


if __name__ == "__main__":
    cli()
