# ABOUTME: The `shelfmark genres` command for listing genres in the library.
# ABOUTME: Shows each distinct genre with the number of books carrying it.

from collections import Counter
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from shelfmark.cli import services
from shelfmark.cli.options import db_option, user_option
from shelfmark.db.mapping import Shelf

console = Console()


@click.command("genres")
@db_option
@user_option
def genres(db_path: Path | None, user_id: str) -> None:
    """List the genres found across the library."""
    with services.open_store(db_path) as store:
        names = store.list_genres(user_id)
        counts = Counter(g for e in store.list_entries(user_id, Shelf.LIBRARY) for g in e.genres)

    if not names:
        console.print("[yellow]No genres yet. Try `shelfmark backfill genres`.[/yellow]")
        return

    table = Table()
    table.add_column("Genre", style="bold")
    table.add_column("Books", justify="right")
    for name in names:
        table.add_row(name, str(counts[name]))
    console.print(table)
