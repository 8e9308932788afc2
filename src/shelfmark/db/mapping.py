# ABOUTME: The CatalogEntry and Quote records and their conversion from SQLite rows.
# ABOUTME: Genres are stored as a JSON array column.

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Shelf(str, Enum):
    """Which of a user's collections an entry lives on."""

    LIBRARY = "library"
    WISHLIST = "wishlist"


@dataclass
class CatalogEntry:
    """A cataloged book on one user's library or wishlist."""

    id: str
    user_id: str
    title: str
    shelf: Shelf = Shelf.LIBRARY
    author: str | None = None
    genres: list[str] = field(default_factory=list)
    added_at: str = ""
    source_image: str | None = None


def entry_to_row(entry: CatalogEntry) -> dict[str, Any]:
    """Convert a CatalogEntry to a dict suitable for INSERT (position excluded)."""
    row: dict[str, Any] = {
        "id": entry.id,
        "user_id": entry.user_id,
        "shelf": entry.shelf.value,
        "title": entry.title,
        "author": entry.author,
        "genres": json.dumps(entry.genres),
        "source_image": entry.source_image,
    }
    if entry.added_at:
        row["added_at"] = entry.added_at
    return row


def row_to_entry(row: Any) -> CatalogEntry:
    """Convert a database row (dict-like) back to a CatalogEntry."""
    return CatalogEntry(
        id=row["id"],
        user_id=row["user_id"],
        title=row["title"],
        shelf=Shelf(row["shelf"]),
        author=row["author"],
        genres=json.loads(row["genres"]) if row["genres"] else [],
        added_at=row["added_at"],
        source_image=row["source_image"],
    )


@dataclass
class Quote:
    """A passage saved from one of a user's books."""

    id: str
    user_id: str
    entry_id: str
    text: str
    page_number: int | None = None
    source_image: str | None = None
    added_at: str = ""


def row_to_quote(row: Any) -> Quote:
    return Quote(
        id=row["id"],
        user_id=row["user_id"],
        entry_id=row["entry_id"],
        text=row["text"],
        page_number=row["page_number"],
        source_image=row["source_image"],
        added_at=row["added_at"],
    )
