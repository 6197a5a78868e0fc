"""
CLI command for analyzing a folder.
"""

import json
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ..analysis.scanner import FolderScanner
from ..core.errors import FileSenseError
from ..core.types import FolderAnalysis
from ..shared.file_utils import format_bytes
from .prompts import select_folder

console = Console()


@click.command()
@click.argument("folder", required=False, type=click.Path())
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the analysis as JSON",
)
@click.option(
    "--hidden/--no-hidden",
    default=None,
    help="Include dot-files (default: FILESENSE_INCLUDE_HIDDEN or yes)",
)
@click.option(
    "--smart/--no-smart",
    default=None,
    help="Refine categories using filename keywords",
)
def analyze(
    folder: Optional[str],
    as_json: bool,
    hidden: Optional[bool],
    smart: Optional[bool],
) -> None:
    """
    Show how the files in FOLDER would be categorized.

    Only files directly inside FOLDER are considered; subfolders are
    skipped. Prompts for the folder when it is not given.
    """
    if not folder:
        folder = select_folder()
        if not folder:
            console.print("[yellow]Cancelled[/yellow]")
            return

    try:
        analysis = FolderScanner(include_hidden=hidden, smart=smart).analyze(folder)
    except FileSenseError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(analysis.model_dump(mode="json"), indent=2))
        return

    display_analysis(analysis)


def display_analysis(analysis: FolderAnalysis) -> None:
    """Print a per-category table for an analysis."""
    console.print(f"\n[bold cyan]Folder:[/bold cyan] {analysis.folder_path}\n")

    table = Table(title="Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Files", style="green", justify="right")
    table.add_column("Size", justify="right")

    for label, files in analysis.categories.items():
        if not files:
            continue
        size = sum(f.size for f in files)
        table.add_row(label.value, str(len(files)), format_bytes(size))

    table.add_row(
        "[bold]Total[/bold]",
        f"[bold]{analysis.total_files}[/bold]",
        format_bytes(analysis.total_size),
    )
    console.print(table)
