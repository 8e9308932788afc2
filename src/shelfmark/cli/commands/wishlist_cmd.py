# ABOUTME: The `shelfmark wishlist` command group for books you want but don't own.
# ABOUTME: Provides add, buy (move to library), and shelve (move back) subcommands.

from pathlib import Path

import click
from rich.console import Console

from shelfmark.cli import services
from shelfmark.cli.options import db_option, user_option
from shelfmark.core.coordinator import AddResult, CatalogCoordinator
from shelfmark.db.mapping import Shelf

console = Console()


def _report(result: AddResult, destination: Shelf) -> None:
    if result.is_duplicate:
        matched = result.match.matched_entry
        name = matched.title if matched is not None else "this title"
        console.print(f"[yellow]The {destination.value} already has {name}.[/yellow]")
        return
    assert result.entry is not None
    console.print(
        f"[green]{result.entry.title}[/green] is on the {destination.value} "
        f"[dim]({result.entry.id[:8]})[/dim]."
    )


def _move(
    coordinator: CatalogCoordinator, user_id: str, entry_id: str, source: Shelf, destination: Shelf
) -> None:
    entry = coordinator.store.find_by_prefix(user_id, entry_id, source)
    if entry is None:
        console.print(f"[red]Entry {entry_id} not found in the {source.value}.[/red]")
        raise SystemExit(1)
    if destination is Shelf.LIBRARY:
        result = coordinator.move_to_library(user_id, entry.id)
    else:
        result = coordinator.move_to_wishlist(user_id, entry.id)
    _report(result, destination)


@click.group("wishlist")
def wishlist() -> None:
    """Manage the wishlist."""


@wishlist.command("add")
@click.argument("title")
@db_option
@user_option
def wishlist_add(title: str, db_path: Path | None, user_id: str) -> None:
    """Add TITLE to the wishlist."""
    with services.open_coordinator(db_path, enrich=False) as coordinator:
        try:
            result = coordinator.add_to_wishlist(user_id, title)
        except ValueError as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc
    _report(result, Shelf.WISHLIST)


@wishlist.command("buy")
@click.argument("entry_id")
@db_option
@user_option
def wishlist_buy(entry_id: str, db_path: Path | None, user_id: str) -> None:
    """Move ENTRY_ID from the wishlist into the library."""
    with services.open_coordinator(db_path, enrich=False) as coordinator:
        _move(coordinator, user_id, entry_id, Shelf.WISHLIST, Shelf.LIBRARY)


@wishlist.command("shelve")
@click.argument("entry_id")
@db_option
@user_option
def wishlist_shelve(entry_id: str, db_path: Path | None, user_id: str) -> None:
    """Move ENTRY_ID from the library back onto the wishlist."""
    with services.open_coordinator(db_path, enrich=False) as coordinator:
        _move(coordinator, user_id, entry_id, Shelf.LIBRARY, Shelf.WISHLIST)
