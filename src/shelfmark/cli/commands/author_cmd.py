# ABOUTME: The `shelfmark author` command for one entry's author.
# ABOUTME: Shows the stored author, or looks it up on Open Library and saves it.

from pathlib import Path

import click
from rich.console import Console

from shelfmark.cli import services
from shelfmark.cli.options import db_option, user_option
from shelfmark.db.mapping import Shelf

console = Console()


@click.command("author")
@click.argument("entry_id")
@db_option
@user_option
def author(entry_id: str, db_path: Path | None, user_id: str) -> None:
    """Show the author of ENTRY_ID, looking it up if it is missing."""
    with services.open_coordinator(db_path) as coordinator:
        entry = coordinator.store.find_by_prefix(user_id, entry_id, Shelf.LIBRARY)
        if entry is None:
            console.print(f"[red]Entry {entry_id} not found in the library.[/red]")
            raise SystemExit(1)
        result = coordinator.find_author(user_id, entry.id)

    if result.author is None:
        console.print(f"[yellow]No author found for {entry.title}.[/yellow]")
        return
    if result.was_updated:
        console.print(f"Found [green]{result.author}[/green] for [bold]{entry.title}[/bold].")
    else:
        console.print(f"[bold]{entry.title}[/bold] is by {result.author}.")
