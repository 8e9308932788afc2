# ABOUTME: Public API for the shelfmark catalog database layer.
# ABOUTME: Exports connection management, catalog operations, and data types.

from shelfmark.db.catalog import CatalogStore
from shelfmark.db.connection import DEFAULT_DB_PATH, open_catalog
from shelfmark.db.mapping import CatalogEntry, Quote, Shelf

__all__ = [
    "DEFAULT_DB_PATH",
    "CatalogEntry",
    "CatalogStore",
    "Quote",
    "Shelf",
    "open_catalog",
]
