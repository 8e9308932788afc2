# ABOUTME: SQLite connection management for the shelfmark catalog.
# ABOUTME: Opens or creates the database file, applies the schema and any pending migrations.

import sqlite3
from pathlib import Path

from shelfmark.db.schema import MIGRATIONS, SCHEMA_V1

DEFAULT_DB_PATH = Path.home() / ".shelfmark" / "catalog.db"


def _schema_exists(conn: sqlite3.Connection) -> bool:
    """Check if the schema has already been applied."""
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
    )
    return cursor.fetchone() is not None


def _get_schema_version(conn: sqlite3.Connection) -> int:
    cursor = conn.execute("SELECT version FROM schema_version ORDER BY version DESC LIMIT 1")
    row = cursor.fetchone()
    return row[0] if row else 0


def _apply_migrations(conn: sqlite3.Connection) -> None:
    """Apply every migration newer than the database's current version, in order."""
    current = _get_schema_version(conn)
    for version, sql in MIGRATIONS:
        if version > current:
            conn.executescript(sql)


def open_catalog(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the shelfmark catalog database.

    Creates the file and parent directories if needed, applies the schema on
    first creation, brings older databases up to date, and sets WAL journal
    mode, foreign keys and sqlite3.Row rows.

    Args:
        path: Path to the database file. Defaults to ~/.shelfmark/catalog.db.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")

    if not _schema_exists(conn):
        conn.executescript(SCHEMA_V1)

    _apply_migrations(conn)

    return conn
