# ABOUTME: The `shelfmark quote` command group for passages saved from books.
# ABOUTME: Provides add, scan (from OCR text), ls, search, and rm subcommands.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from shelfmark.cli import services
from shelfmark.cli.options import db_option, user_option
from shelfmark.core.coordinator import CatalogCoordinator
from shelfmark.db.mapping import CatalogEntry, Quote, Shelf

console = Console()

page_option = click.option(
    "-p", "--page", "page_number", type=click.IntRange(min=1), default=None, help="Page number."
)


def _resolve_entry(coordinator: CatalogCoordinator, user_id: str, entry_id: str) -> CatalogEntry:
    entry = coordinator.store.find_by_prefix(user_id, entry_id, Shelf.LIBRARY)
    if entry is None:
        console.print(f"[red]Entry {entry_id} not found in the library.[/red]")
        raise SystemExit(1)
    return entry


def _saved(entry: CatalogEntry, quote: Quote) -> None:
    page = f", page {quote.page_number}" if quote.page_number else ""
    console.print(
        f"Saved quote [dim]{quote.id[:8]}[/dim] from [bold]{entry.title}[/bold]{page}."
    )


@click.group("quote")
def quote() -> None:
    """Save and search passages from your books."""


@quote.command("add")
@click.argument("entry_id")
@click.argument("text")
@page_option
@db_option
@user_option
def quote_add(
    entry_id: str, text: str, page_number: int | None, db_path: Path | None, user_id: str
) -> None:
    """Save TEXT as a quote from ENTRY_ID."""
    with services.open_coordinator(db_path, enrich=False) as coordinator:
        entry = _resolve_entry(coordinator, user_id, entry_id)
        try:
            saved = coordinator.add_quote(user_id, entry.id, text, page_number=page_number)
        except ValueError as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc
    _saved(entry, saved)


@quote.command("scan")
@click.argument("entry_id")
@click.argument("text_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@page_option
@db_option
@user_option
def quote_scan(
    entry_id: str,
    text_file: Path,
    page_number: int | None,
    db_path: Path | None,
    user_id: str,
) -> None:
    """Save the OCR text of a page photo, read from TEXT_FILE, as a quote."""
    raw_text = text_file.read_text(encoding="utf-8")
    with services.open_coordinator(db_path, enrich=False) as coordinator:
        entry = _resolve_entry(coordinator, user_id, entry_id)
        try:
            saved = coordinator.quote_from_text(
                user_id, entry.id, raw_text, page_number=page_number, source_image=text_file.name
            )
        except ValueError as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc
    _saved(entry, saved)


@quote.command("ls")
@click.argument("entry_id")
@db_option
@user_option
def quote_ls(entry_id: str, db_path: Path | None, user_id: str) -> None:
    """List the quotes saved from ENTRY_ID."""
    with services.open_coordinator(db_path, enrich=False) as coordinator:
        entry = _resolve_entry(coordinator, user_id, entry_id)
        quotes = coordinator.list_quotes(user_id, entry.id)

    if not quotes:
        console.print(f"[yellow]No quotes saved from {entry.title}.[/yellow]")
        return

    table = Table(title=entry.title)
    table.add_column("ID", style="dim")
    table.add_column("Page", justify="right")
    table.add_column("Quote")
    for q in quotes:
        table.add_row(q.id[:8], str(q.page_number or ""), q.text)
    console.print(table)


@quote.command("search")
@click.argument("term")
@db_option
@user_option
def quote_search(term: str, db_path: Path | None, user_id: str) -> None:
    """Find saved quotes containing TERM (case-insensitive)."""
    with services.open_coordinator(db_path, enrich=False) as coordinator:
        try:
            results = coordinator.search_quotes(user_id, term)
        except ValueError as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc

    if not results:
        console.print(f'[yellow]No quotes found matching "{term}".[/yellow]')
        return

    table = Table()
    table.add_column("ID", style="dim")
    table.add_column("Book", style="bold")
    table.add_column("Page", justify="right")
    table.add_column("Quote")
    for entry, q in results:
        table.add_row(q.id[:8], entry.title, str(q.page_number or ""), q.text)
    console.print(table)


@quote.command("rm")
@click.argument("quote_id")
@db_option
@user_option
def quote_rm(quote_id: str, db_path: Path | None, user_id: str) -> None:
    """Delete the quote QUOTE_ID (full id or the short prefix shown by ls)."""
    with services.open_coordinator(db_path, enrich=False) as coordinator:
        found = coordinator.store.find_quote_by_prefix(user_id, quote_id)
        if found is None or not coordinator.delete_quote(user_id, found.id):
            console.print(f"[red]Quote {quote_id} not found.[/red]")
            raise SystemExit(1)

    console.print(f"Deleted quote {found.id[:8]}.")
