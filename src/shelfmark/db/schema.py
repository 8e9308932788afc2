# ABOUTME: SQL DDL statements for the shelfmark catalog database schema.
# ABOUTME: An entries table holds every user's library and wishlist; migrations add quotes.

SCHEMA_V1 = """
-- Catalog entries; position orders entries within one user's shelf
CREATE TABLE entries (
    id           TEXT PRIMARY KEY,
    user_id      TEXT NOT NULL,
    shelf        TEXT NOT NULL CHECK (shelf IN ('library', 'wishlist')),
    position     INTEGER NOT NULL,
    title        TEXT NOT NULL,
    author       TEXT,
    genres       TEXT,
    source_image TEXT,
    added_at     TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ', 'now'))
);

CREATE INDEX idx_entries_user_shelf ON entries(user_id, shelf, position);

-- Schema versioning for future migrations
CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""

MIGRATION_V2 = """
-- Quotes saved from page photos, each tied to one catalog entry
CREATE TABLE quotes (
    id           TEXT PRIMARY KEY,
    user_id      TEXT NOT NULL,
    entry_id     TEXT NOT NULL REFERENCES entries(id) ON DELETE CASCADE,
    text         TEXT NOT NULL,
    page_number  INTEGER,
    source_image TEXT,
    added_at     TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ', 'now'))
);

CREATE INDEX idx_quotes_user_entry ON quotes(user_id, entry_id);

INSERT INTO schema_version (version) VALUES (2);
"""

MIGRATIONS: list[tuple[int, str]] = [
    (2, MIGRATION_V2),
]
