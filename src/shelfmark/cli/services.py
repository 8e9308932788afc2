# ABOUTME: Builds the coordinator and its collaborators for CLI commands.
# ABOUTME: Keeps the connection and HTTP client in context managers so commands never leak them.

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from shelfmark.core.coordinator import CatalogCoordinator
from shelfmark.db.catalog import CatalogStore
from shelfmark.db.connection import DEFAULT_DB_PATH, open_catalog
from shelfmark.metadata.enricher import BookEnricher
from shelfmark.metadata.http import ShelfmarkHttpClient
from shelfmark.metadata.openlibrary import OpenLibraryLookup


@contextmanager
def create_enricher() -> Iterator[BookEnricher]:
    """Yield the default enricher (Open Library, in-memory genre cache).

    The underlying HTTP client is closed on exit.
    """
    http_client = ShelfmarkHttpClient()
    try:
        yield BookEnricher(OpenLibraryLookup(http_client=http_client))
    finally:
        http_client.close()


@contextmanager
def open_store(db_path: Path | None) -> Iterator[CatalogStore]:
    conn = open_catalog(db_path or DEFAULT_DB_PATH)
    try:
        yield CatalogStore(conn)
    finally:
        conn.close()


@contextmanager
def open_coordinator(db_path: Path | None, *, enrich: bool = True) -> Iterator[CatalogCoordinator]:
    with open_store(db_path) as store:
        if not enrich:
            yield CatalogCoordinator(store)
            return
        with create_enricher() as enricher:
            yield CatalogCoordinator(store, enricher=enricher)
