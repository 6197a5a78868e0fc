"""Interactive prompts for the command line."""

from pathlib import Path

from rich.console import Console
from rich.prompt import Confirm, Prompt

console = Console()


def select_folder(prompt_text: str = "Folder to organize") -> str:
    """
    Ask the user for a folder.

    Keeps asking until an existing directory is entered. An empty answer,
    or declining to try again, cancels.

    Returns:
        Absolute folder path, or an empty string if cancelled
    """
    while True:
        path_str = Prompt.ask(prompt_text, default="", show_default=False).strip()
        if not path_str:
            return ""

        path = Path(path_str).expanduser().absolute()

        if not path.exists():
            console.print(f"[red]Directory '{path}' does not exist.[/red]")
        elif not path.is_dir():
            console.print(f"[red]'{path}' is not a directory.[/red]")
        else:
            return str(path)

        if not Confirm.ask("Try again?", default=True):
            return ""
