# ABOUTME: CRUD operations for per-user library and wishlist entries.
# ABOUTME: Also stores the quotes saved against each entry, with substring search.

import json
import sqlite3
import uuid

from shelfmark.db.mapping import (
    CatalogEntry,
    Quote,
    Shelf,
    entry_to_row,
    row_to_entry,
    row_to_quote,
)
from shelfmark.metadata.genres import MAX_GENRES


def _clean_genres(genres: list[str] | None) -> list[str]:
    """Distinct genres in original order, capped at MAX_GENRES."""
    cleaned: list[str] = []
    for genre in genres or []:
        if genre and genre not in cleaned:
            cleaned.append(genre)
    return cleaned[:MAX_GENRES]


class CatalogStore:
    """Wraps a sqlite3 connection and provides typed CRUD for catalog entries.

    Every operation is scoped to one user_id. Entries on a shelf keep the
    order in which they were added (or moved onto it).
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def add_entry(
        self,
        user_id: str,
        title: str,
        *,
        shelf: Shelf = Shelf.LIBRARY,
        author: str | None = None,
        genres: list[str] | None = None,
        source_image: str | None = None,
    ) -> CatalogEntry:
        """Append a new entry to the end of a user's shelf.

        Returns:
            The stored entry, including its generated id and added_at.
        """
        entry = CatalogEntry(
            id=uuid.uuid4().hex,
            user_id=user_id,
            title=title,
            shelf=shelf,
            author=author,
            genres=_clean_genres(genres),
            source_image=source_image,
        )
        row = entry_to_row(entry)
        row["position"] = self._next_position(user_id, shelf)
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)

        self._conn.execute(
            f"INSERT INTO entries ({columns}) VALUES ({placeholders})",
            list(row.values()),
        )
        self._conn.commit()

        stored = self.get_entry(user_id, entry.id)
        assert stored is not None
        return stored

    def get_entry(self, user_id: str, entry_id: str) -> CatalogEntry | None:
        """Retrieve one of a user's entries by id."""
        cursor = self._conn.execute(
            "SELECT * FROM entries WHERE user_id = ? AND id = ?", (user_id, entry_id)
        )
        row = cursor.fetchone()
        return row_to_entry(row) if row else None

    def list_entries(self, user_id: str, shelf: Shelf = Shelf.LIBRARY) -> list[CatalogEntry]:
        """Return a user's entries on one shelf, in shelf order."""
        cursor = self._conn.execute(
            "SELECT * FROM entries WHERE user_id = ? AND shelf = ? ORDER BY position",
            (user_id, shelf.value),
        )
        return [row_to_entry(row) for row in cursor.fetchall()]

    def find_by_prefix(self, user_id: str, prefix: str, shelf: Shelf) -> CatalogEntry | None:
        """Resolve a short id prefix (as shown by `ls`) to the single matching entry."""
        if not prefix:
            return None
        matches = [e for e in self.list_entries(user_id, shelf) if e.id.startswith(prefix)]
        return matches[0] if len(matches) == 1 else None

    def delete_entry(self, user_id: str, entry_id: str, shelf: Shelf | None = None) -> bool:
        """Delete an entry. Returns False if the user has no such entry (on that shelf)."""
        if shelf is None:
            cursor = self._conn.execute(
                "DELETE FROM entries WHERE user_id = ? AND id = ?", (user_id, entry_id)
            )
        else:
            cursor = self._conn.execute(
                "DELETE FROM entries WHERE user_id = ? AND id = ? AND shelf = ?",
                (user_id, entry_id, shelf.value),
            )
        self._conn.commit()
        return cursor.rowcount > 0

    def move_entry(self, user_id: str, entry_id: str, shelf: Shelf) -> CatalogEntry:
        """Move an entry to the end of another shelf.

        Raises:
            ValueError: If the user has no entry with this id.
        """
        self._update(
            user_id,
            entry_id,
            shelf=shelf.value,
            position=self._next_position(user_id, shelf),
        )
        moved = self.get_entry(user_id, entry_id)
        assert moved is not None
        return moved

    def update_author(self, user_id: str, entry_id: str, author: str) -> None:
        """Set the author of an entry.

        Raises:
            ValueError: If the user has no entry with this id.
        """
        self._update(user_id, entry_id, author=author)

    def update_genres(self, user_id: str, entry_id: str, genres: list[str]) -> None:
        """Replace the genres of an entry (deduplicated, at most MAX_GENRES).

        Raises:
            ValueError: If the user has no entry with this id.
        """
        self._update(user_id, entry_id, genres=json.dumps(_clean_genres(genres)))

    def list_genres(self, user_id: str) -> list[str]:
        """All distinct genres on a user's library shelf, alphabetically sorted."""
        genres: set[str] = set()
        for entry in self.list_entries(user_id, Shelf.LIBRARY):
            genres.update(entry.genres)
        return sorted(genres)

    def list_users(self) -> list[str]:
        """Every user id that has at least one entry."""
        cursor = self._conn.execute("SELECT DISTINCT user_id FROM entries ORDER BY user_id")
        return [row[0] for row in cursor.fetchall()]

    def add_quote(
        self,
        user_id: str,
        entry_id: str,
        text: str,
        *,
        page_number: int | None = None,
        source_image: str | None = None,
    ) -> Quote:
        """Save a quote against one of the user's entries.

        Raises:
            ValueError: If the user has no entry with this id.
        """
        if self.get_entry(user_id, entry_id) is None:
            raise ValueError(f"Entry {entry_id} not found")
        quote_id = uuid.uuid4().hex
        self._conn.execute(
            "INSERT INTO quotes (id, user_id, entry_id, text, page_number, source_image) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (quote_id, user_id, entry_id, text, page_number, source_image),
        )
        self._conn.commit()
        cursor = self._conn.execute("SELECT * FROM quotes WHERE id = ?", (quote_id,))
        return row_to_quote(cursor.fetchone())

    def list_quotes(self, user_id: str, entry_id: str) -> list[Quote]:
        """Quotes saved for one entry, oldest first."""
        cursor = self._conn.execute(
            "SELECT * FROM quotes WHERE user_id = ? AND entry_id = ? ORDER BY rowid",
            (user_id, entry_id),
        )
        return [row_to_quote(row) for row in cursor.fetchall()]

    def search_quotes(self, user_id: str, term: str) -> list[tuple[CatalogEntry, Quote]]:
        """Case-insensitive substring search over all of a user's quotes.

        Returns:
            (entry, quote) pairs, in the order the quotes were saved.
        """
        cursor = self._conn.execute(
            "SELECT * FROM quotes WHERE user_id = ? AND instr(lower(text), lower(?)) > 0 "
            "ORDER BY rowid",
            (user_id, term),
        )
        results: list[tuple[CatalogEntry, Quote]] = []
        for row in cursor.fetchall():
            entry = self.get_entry(user_id, row["entry_id"])
            assert entry is not None
            results.append((entry, row_to_quote(row)))
        return results

    def find_quote_by_prefix(self, user_id: str, prefix: str) -> Quote | None:
        """Resolve a short quote id prefix to the single matching quote."""
        if not prefix:
            return None
        cursor = self._conn.execute(
            "SELECT * FROM quotes WHERE user_id = ? AND substr(id, 1, ?) = ?",
            (user_id, len(prefix), prefix),
        )
        rows = cursor.fetchall()
        return row_to_quote(rows[0]) if len(rows) == 1 else None

    def delete_quote(self, user_id: str, quote_id: str) -> bool:
        """Delete a quote. Returns False if the user has no such quote."""
        cursor = self._conn.execute(
            "DELETE FROM quotes WHERE user_id = ? AND id = ?", (user_id, quote_id)
        )
        self._conn.commit()
        return cursor.rowcount > 0

    def _next_position(self, user_id: str, shelf: Shelf) -> int:
        cursor = self._conn.execute(
            "SELECT COALESCE(MAX(position), 0) + 1 FROM entries WHERE user_id = ? AND shelf = ?",
            (user_id, shelf.value),
        )
        return cursor.fetchone()[0]

    def _update(self, user_id: str, entry_id: str, **fields: str | int | None) -> None:
        set_clause = ", ".join(f"{k} = ?" for k in fields)
        values = [*fields.values(), user_id, entry_id]
        cursor = self._conn.execute(
            f"UPDATE entries SET {set_clause} WHERE user_id = ? AND id = ?",
            values,
        )
        self._conn.commit()

        if cursor.rowcount == 0:
            raise ValueError(f"Entry {entry_id} not found")
