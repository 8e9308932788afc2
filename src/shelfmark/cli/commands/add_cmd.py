# ABOUTME: The `shelfmark add` command for adding a single title to the library.
# ABOUTME: Runs the duplicate check and optional author/genre enrichment before saving.

from pathlib import Path

import click
from rich.console import Console

from shelfmark.cli import services
from shelfmark.cli.options import db_option, enrich_option, user_option

console = Console()


@click.command("add")
@click.argument("title")
@click.option("-a", "--author", default=None, help="Author, if already known.")
@db_option
@user_option
@enrich_option
def add(title: str, author: str | None, db_path: Path | None, user_id: str, enrich: bool) -> None:
    """Add TITLE to the library unless it is already cataloged."""
    with services.open_coordinator(db_path, enrich=enrich) as coordinator:
        try:
            result = coordinator.add_book(user_id, title, author=author)
        except ValueError as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc

    if result.is_duplicate:
        matched = result.match.matched_entry
        if matched is not None:
            console.print(
                f"[yellow]Already cataloged:[/yellow] {matched.title} "
                f"[dim]({result.match.similarity:.0%} similar)[/dim]"
            )
        else:
            console.print(f"[yellow]Already cataloged:[/yellow] {title}")
        return

    entry = result.entry
    assert entry is not None
    console.print(f"[green]Added:[/green] {entry.title} [dim]({entry.id})[/dim]")
    if entry.author:
        console.print(f"  [dim]Author:[/dim] {entry.author}")
    if entry.genres:
        console.print(f"  [dim]Genres:[/dim] {', '.join(entry.genres)}")
