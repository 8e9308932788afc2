# ABOUTME: Integration tests wiring the real HTTP client, Open Library lookup, and enricher.
# ABOUTME: An httpx fake transport stands in for openlibrary.org.

import httpx

from shelfmark.core.coordinator import CatalogCoordinator
from shelfmark.db.catalog import CatalogStore
from shelfmark.metadata.enricher import BookEnricher
from shelfmark.metadata.http import ShelfmarkHttpClient
from shelfmark.metadata.openlibrary import OpenLibraryLookup

from tests.fixtures.openlibrary_responses import (
    SEARCH_RESPONSE,
    SEARCH_RESPONSE_EMPTY,
    WORKS_RESPONSE,
)


class OpenLibraryTransport(httpx.BaseTransport):
    """Routes search and works requests to fixtures, optionally failing first."""

    def __init__(self, failures_before_success: int = 0) -> None:
        self._failures = failures_before_success
        self.paths: list[str] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.paths.append(request.url.path)
        if self._failures > 0:
            self._failures -= 1
            return httpx.Response(503)
        if request.url.path == "/search.json":
            if request.url.params.get("title") == "The Hobbit":
                return httpx.Response(200, json=SEARCH_RESPONSE)
            return httpx.Response(200, json=SEARCH_RESPONSE_EMPTY)
        if request.url.path == "/works/OL27482W.json":
            return httpx.Response(200, json=WORKS_RESPONSE)
        return httpx.Response(404)


def _enricher(transport: OpenLibraryTransport) -> BookEnricher:
    client = ShelfmarkHttpClient(
        min_request_interval=0.0, transport=transport, sleep=lambda _: None
    )
    return BookEnricher(OpenLibraryLookup(client))


class TestOpenLibraryEnrichment:
    """End-to-end enrichment through the HTTP stack."""

    def test_author_and_genres(self) -> None:
        """Author comes from search, genres from the works record."""
        transport = OpenLibraryTransport()
        enricher = _enricher(transport)
        assert enricher.get_author("The Hobbit") == "J.R.R. Tolkien"
        assert enricher.get_genres("The Hobbit") == ["Fantasy Fiction", "Juvenile Fiction"]
        assert transport.paths == ["/search.json", "/search.json", "/works/OL27482W.json"]

    def test_genres_cached_across_calls(self) -> None:
        """A second genre request for the same title makes no HTTP calls."""
        transport = OpenLibraryTransport()
        enricher = _enricher(transport)
        enricher.get_genres("The Hobbit")
        calls = len(transport.paths)
        enricher.get_genres("the hobbit")
        assert len(transport.paths) == calls

    def test_transient_failures_retried(self) -> None:
        """Server errors are retried before giving up."""
        transport = OpenLibraryTransport(failures_before_success=2)
        assert _enricher(transport).get_author("The Hobbit") == "J.R.R. Tolkien"
        assert transport.paths[:3] == ["/search.json"] * 3

    def test_outage_degrades_to_not_found(self, store: CatalogStore) -> None:
        """When every attempt fails the book is still cataloged, unenriched."""
        transport = OpenLibraryTransport(failures_before_success=100)
        coordinator = CatalogCoordinator(store, enricher=_enricher(transport))
        result = coordinator.add_book("alice", "The Hobbit")
        assert result.entry is not None
        assert result.entry.author is None
        assert result.entry.genres == []

    def test_unknown_title_not_enriched(self, store: CatalogStore) -> None:
        """Titles Open Library does not know are stored bare."""
        coordinator = CatalogCoordinator(store, enricher=_enricher(OpenLibraryTransport()))
        result = coordinator.add_book("alice", "Zzyzx Road")
        assert result.entry.author is None
        assert result.entry.genres == []
