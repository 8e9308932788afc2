# ABOUTME: The `shelfmark backfill` command for bulk author/genre enrichment.
# ABOUTME: Re-runs lookups for entries missing a field, one at a time with a fixed delay.

from pathlib import Path

import click
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn

from shelfmark.cli import services
from shelfmark.cli.options import db_option, user_option
from shelfmark.core.backfill import DEFAULT_BACKFILL_DELAY, backfill_authors, backfill_genres
from shelfmark.db.mapping import CatalogEntry, Shelf

console = Console()


@click.command("backfill")
@click.argument("field", type=click.Choice(["authors", "genres"]))
@click.option(
    "--delay",
    type=click.FloatRange(min=0.0),
    default=DEFAULT_BACKFILL_DELAY,
    show_default=True,
    envvar="SHELFMARK_BACKFILL_DELAY",
    help="Seconds to wait between lookups.",
)
@click.option("--all-users", is_flag=True, default=False, help="Backfill every user's library.")
@db_option
@user_option
def backfill(field: str, delay: float, all_users: bool, db_path: Path | None, user_id: str) -> None:
    """Look up missing FIELD (authors or genres) for library entries."""
    run = backfill_authors if field == "authors" else backfill_genres
    with services.create_enricher() as enricher, services.open_store(db_path) as store:
        user_ids = store.list_users() if all_users else [user_id]
        if not user_ids:
            console.print("[yellow]No books in the catalog.[/yellow]")
            return

        updated = failed = 0
        for uid in user_ids:
            total = len(store.list_entries(uid, Shelf.LIBRARY))
            with Progress(
                SpinnerColumn(),
                TextColumn("[bold]{task.description}"),
                BarColumn(),
                MofNCompleteColumn(),
                console=console,
            ) as progress:
                task_id = progress.add_task(uid, total=total)

                def advance(entry: CatalogEntry, task_id=task_id, progress=progress) -> None:
                    progress.update(task_id, description=entry.title, advance=1)

                result = run(store, enricher, uid, delay=delay, on_entry=advance)
            console.print(
                f"{uid}: [green]{result.updated} updated[/green], "
                f"[red]{result.failed} not found[/red], [dim]{result.skipped} skipped[/dim]"
            )
            updated += result.updated
            failed += result.failed

    console.print(f"\nDone: {updated} updated, {failed} not found")
