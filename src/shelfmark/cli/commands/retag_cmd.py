# ABOUTME: The `shelfmark retag` command for setting an entry's genres by hand.
# ABOUTME: Replaces whatever genres a lookup or backfill stored for the entry.

from pathlib import Path

import click
from rich.console import Console

from shelfmark.cli import services
from shelfmark.cli.options import db_option, user_option
from shelfmark.db.mapping import Shelf

console = Console()


@click.command("retag")
@click.argument("entry_id")
@click.argument("genre_names", metavar="GENRE...", nargs=-1)
@click.option("--clear", is_flag=True, default=False, help="Remove every genre from the entry.")
@db_option
@user_option
def retag(
    entry_id: str, genre_names: tuple[str, ...], clear: bool, db_path: Path | None, user_id: str
) -> None:
    """Replace the genres of ENTRY_ID with GENRE... (at most five)."""
    if not genre_names and not clear:
        console.print("[red]Give at least one genre, or --clear.[/red]")
        raise SystemExit(1)

    with services.open_coordinator(db_path, enrich=False) as coordinator:
        entry = coordinator.store.find_by_prefix(user_id, entry_id, Shelf.LIBRARY)
        if entry is None:
            console.print(f"[red]Entry {entry_id} not found in the library.[/red]")
            raise SystemExit(1)
        updated = coordinator.set_genres(user_id, entry.id, [] if clear else list(genre_names))

    if updated.genres:
        console.print(f"[bold]{updated.title}[/bold]: {', '.join(updated.genres)}")
    else:
        console.print(f"Cleared the genres of [bold]{updated.title}[/bold].")
