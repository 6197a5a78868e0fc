"""
CLI commands for organizing a folder and undoing it.

Sorts the files of a folder into category subfolders and writes the move
log needed to put them back.
"""

import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.table import Table

from ..analysis.scanner import FolderScanner
from ..core.errors import FileSenseError
from ..core.types import MoveRecord, MoveStatus, OrganizationPlan
from ..organization import (
    ExecutionResult,
    MoveExecutor,
    MoveLog,
    MovePlanner,
    MoveUndoer,
    cleanup_empty_directories,
)

console = Console()

LOG_DIRECTORY = ".filesense"
PREVIEW_LIMIT = 30


def default_log_path(target_root: Path, log_id: str) -> Path:
    """Where a move log is written when no --log-file is given."""
    return target_root / LOG_DIRECTORY / f"{log_id}.json"


@click.command()
@click.argument("folder", type=click.Path())
@click.option(
    "--target-root",
    "-t",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory to create category folders in (default: FOLDER)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Show the planned moves without moving anything",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Where to write the move log (default: TARGET_ROOT/.filesense/<id>.json)",
)
@click.option(
    "--yes",
    "-y",
    is_flag=True,
    default=False,
    help="Do not ask for confirmation",
)
@click.option(
    "--hidden/--no-hidden",
    default=None,
    help="Include dot-files",
)
@click.option(
    "--smart/--no-smart",
    default=None,
    help="Refine categories using filename keywords",
)
def organize(
    folder: str,
    target_root: Optional[str],
    dry_run: bool,
    log_file: Optional[str],
    yes: bool,
    hidden: Optional[bool],
    smart: Optional[bool],
) -> None:
    """
    Move the files of FOLDER into category subfolders.

    \b
    Examples:
        # Preview first
        filesense organize ~/Downloads --dry-run

        # Organize, keeping the move log next to the files
        filesense organize ~/Downloads

        # Put everything back
        filesense undo ~/Downloads/.filesense/<id>.json
    """
    try:
        analysis = FolderScanner(include_hidden=hidden, smart=smart).analyze(folder)

        root = (
            str(Path(target_root).expanduser().absolute())
            if target_root
            else str(analysis.folder_path)
        )
        plan = OrganizationPlan.from_analysis(analysis, target_root=root)
        moves = MovePlanner().plan(plan)
    except FileSenseError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)

    if not moves:
        console.print("[yellow]Nothing to organize[/yellow]")
        return

    console.print("\n[cyan]Organization Configuration:[/cyan]")
    console.print(f"  Folder: {analysis.folder_path}")
    console.print(f"  Target root: {root}")
    console.print(f"  Files: {len(moves)}")
    console.print(f"  Dry run: {'YES' if dry_run else 'NO'}")

    _display_plan(moves)

    if dry_run:
        console.print("\n[yellow]This was a DRY RUN - no files were modified[/yellow]")
        return

    if not yes and not click.confirm("Proceed with moving these files?"):
        console.print("[yellow]Cancelled[/yellow]")
        return

    result = MoveExecutor(show_progress=True).execute(moves)
    _display_result(result)

    if not result.moves:
        return

    move_log = MoveLog(target_root=root, moves=result.moves)
    log_path = (
        Path(log_file).expanduser().absolute()
        if log_file
        else default_log_path(Path(root), move_log.log_id)
    )
    move_log.save(log_path)

    console.print(f"\n[dim]Move log: {log_path}[/dim]")
    console.print("[dim]You can undo this operation with:[/dim]")
    console.print(f"[dim]  filesense undo {log_path}[/dim]")


@click.command()
@click.argument("log_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--cleanup",
    is_flag=True,
    default=False,
    help="Remove category folders left empty afterwards",
)
def undo(log_file: str, cleanup: bool) -> None:
    """
    Move files back to where LOG_FILE says they came from.

    Files that were deleted or whose original location is now taken are
    reported and left alone; everything else is restored.
    """
    try:
        move_log = MoveLog.load(Path(log_file))
    except FileSenseError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)

    result = MoveUndoer().undo(move_log.moves)

    style = "green" if not result.failed else "yellow"
    console.print(f"\n[{style}]{result.message.splitlines()[0]}[/{style}]")
    _display_errors(result.errors)

    if cleanup:
        removed = cleanup_empty_directories(move_log.moves)
        for folder in removed:
            console.print(f"[dim]Removed empty folder {folder}[/dim]")


def _display_plan(moves: List[MoveRecord]) -> None:
    """Show the first planned moves."""
    table = Table(title="Planned moves")
    table.add_column("File", style="cyan")
    table.add_column("Category")
    table.add_column("Destination", style="green")

    for move in moves[:PREVIEW_LIMIT]:
        if move.status == MoveStatus.FAILED:
            destination = f"[red]{move.error_message}[/red]"
        elif move.is_noop:
            destination = "[dim](already in place)[/dim]"
        else:
            destination = move.destination_path.name
            if move.renamed:
                destination += " [yellow](renamed)[/yellow]"
        table.add_row(move.source_path.name, move.category.value, destination)

    console.print(table)
    if len(moves) > PREVIEW_LIMIT:
        console.print(f"[dim]... and {len(moves) - PREVIEW_LIMIT} more[/dim]")


def _display_result(result: ExecutionResult) -> None:
    """Display execution result."""
    console.print("\n[green]✓ Organization complete![/green]\n")

    table = Table(title="Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="green", justify="right")

    table.add_row("Total files", str(result.total))
    table.add_row("Moved", str(result.moved))
    table.add_row("Already in place", str(result.unchanged))
    table.add_row("Skipped", str(result.skipped))
    table.add_row("Failed", str(result.failed))

    console.print(table)
    _display_errors(result.errors)


def _display_errors(errors: List[str]) -> None:
    if not errors:
        return
    console.print("\n[red]Errors:[/red]")
    for error in errors[:10]:  # Show first 10
        console.print(f"  [red]• {error}[/red]")
    if len(errors) > 10:
        console.print(f"  [dim]... and {len(errors) - 10} more[/dim]")
