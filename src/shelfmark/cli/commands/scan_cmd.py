# ABOUTME: The `shelfmark scan` command for turning OCR output into catalog entries.
# ABOUTME: Lists candidate titles found in recognized text and optionally adds them.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from shelfmark.cli import services
from shelfmark.cli.options import db_option, enrich_option, user_option
from shelfmark.ocr.candidates import rejection_reason

console = Console()


def _explain(raw_text: str) -> None:
    """Print every non-empty line with the rule that rejected it, if any."""
    table = Table()
    table.add_column("Line")
    table.add_column("Result")
    for raw_line in raw_text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        reason = rejection_reason(line)
        table.add_row(line, f"[red]{reason}[/red]" if reason else "[green]title[/green]")
    console.print(table)


@click.command("scan")
@click.argument("text_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--add/--no-add",
    "do_add",
    default=False,
    help="Add every candidate title to the library (default: just list them).",
)
@click.option(
    "--explain", is_flag=True, default=False, help="Show why each line was kept or dropped."
)
@db_option
@user_option
@enrich_option
def scan(
    text_file: Path,
    do_add: bool,
    explain: bool,
    db_path: Path | None,
    user_id: str,
    enrich: bool,
) -> None:
    """Extract candidate titles from OCR text saved in TEXT_FILE."""
    raw_text = text_file.read_text(encoding="utf-8")

    if explain:
        _explain(raw_text)

    with services.open_coordinator(db_path, enrich=enrich) as coordinator:
        ocr = coordinator.process_text(raw_text)
        if not ocr.titles:
            console.print("[yellow]No candidate titles found.[/yellow]")
            return

        if ocr.author:
            console.print(f"[dim]Author on page:[/dim] {ocr.author}")

        if not do_add:
            for title in ocr.titles:
                console.print(f"  {title}")
            console.print(f"\n[dim]{len(ocr.titles)} candidate(s)[/dim]")
            return

        added = 0
        duplicates = 0
        for title in ocr.titles:
            result = coordinator.add_book(
                user_id, title, source_image=text_file.name, ocr_text=raw_text
            )
            if result.is_duplicate:
                duplicates += 1
                console.print(f"  [yellow]duplicate:[/yellow] {title}")
            else:
                added += 1
                console.print(f"  [green]added:[/green] {title}")

    parts = []
    if added:
        parts.append(f"[green]{added} added[/green]")
    if duplicates:
        parts.append(f"[yellow]{duplicates} duplicate(s)[/yellow]")
    console.print(f"\nDone: {', '.join(parts)}")
