# ABOUTME: Shared pytest fixtures for shelfmark tests.
# ABOUTME: Provides a temporary catalog store, a canned metadata lookup, and an enricher over it.

from pathlib import Path

import pytest

from shelfmark.db.catalog import CatalogStore
from shelfmark.db.connection import open_catalog
from shelfmark.metadata.enricher import BookEnricher

from tests.fixtures.fakes import FakeLookup


@pytest.fixture
def store(tmp_path: Path) -> CatalogStore:
    """A CatalogStore backed by a temporary database."""
    conn = open_catalog(tmp_path / "catalog.db")
    yield CatalogStore(conn)
    conn.close()


@pytest.fixture
def fake_lookup() -> FakeLookup:
    """A lookup that knows a couple of classic books."""
    return FakeLookup(
        authors={
            "The Hobbit": "J.R.R. Tolkien",
            "Dune": "Frank Herbert",
        },
        subjects={
            "The Hobbit": ["Fantasy fiction", "Hobbits", "Juvenile fiction"],
            "Dune": ["Science fiction", "Desert ecology"],
        },
    )


@pytest.fixture
def enricher(fake_lookup: FakeLookup) -> BookEnricher:
    """An enricher over the fake lookup with a fresh cache."""
    return BookEnricher(fake_lookup)
