# ABOUTME: The `shelfmark rm` command for deleting a catalog entry.
# ABOUTME: Accepts a full entry id or the short id prefix shown by `ls`.

from pathlib import Path

import click
from rich.console import Console

from shelfmark.cli import services
from shelfmark.cli.options import db_option, user_option
from shelfmark.db.mapping import Shelf

console = Console()


@click.command("rm")
@click.argument("entry_id")
@click.option("-w", "--wishlist", is_flag=True, default=False, help="Delete from the wishlist.")
@db_option
@user_option
def rm(entry_id: str, wishlist: bool, db_path: Path | None, user_id: str) -> None:
    """Delete ENTRY_ID from the library (or wishlist)."""
    shelf = Shelf.WISHLIST if wishlist else Shelf.LIBRARY
    with services.open_coordinator(db_path, enrich=False) as coordinator:
        entry = coordinator.store.find_by_prefix(user_id, entry_id, shelf)
        if entry is None or not coordinator.delete_book(user_id, entry.id, shelf):
            console.print(f"[red]Entry {entry_id} not found in the {shelf.value}.[/red]")
            raise SystemExit(1)

    console.print(f"Deleted [bold]{entry.title}[/bold].")
