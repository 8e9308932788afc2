# ABOUTME: The `shelfmark ls` command for listing cataloged books.
# ABOUTME: Displays a Rich table of the library or wishlist, optionally filtered by genre.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from shelfmark.cli import services
from shelfmark.cli.options import db_option, user_option
from shelfmark.db.mapping import Shelf

console = Console()


@click.command("ls")
@click.option("-w", "--wishlist", is_flag=True, default=False, help="List the wishlist instead.")
@click.option("--genre", "genre_filter", default=None, help="Only books tagged with this genre.")
@db_option
@user_option
def ls(wishlist: bool, genre_filter: str | None, db_path: Path | None, user_id: str) -> None:
    """List the books in a catalog shelf."""
    shelf = Shelf.WISHLIST if wishlist else Shelf.LIBRARY
    with services.open_store(db_path) as store:
        entries = store.list_entries(user_id, shelf)

    if genre_filter:
        wanted = genre_filter.lower()
        entries = [e for e in entries if any(g.lower() == wanted for g in e.genres)]

    if not entries:
        console.print(f"[yellow]No books in the {shelf.value}.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=8)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Genres")

    for entry in entries:
        table.add_row(
            entry.id[:8],
            entry.title,
            entry.author or "[dim]unknown[/dim]",
            ", ".join(entry.genres),
        )

    console.print(table)
    console.print(f"\n[dim]{len(entries)} book(s)[/dim]")
