# ABOUTME: Unit tests for the CLI service factories.
# ABOUTME: Checks that the HTTP client behind the enricher is closed when its context exits.

from pathlib import Path

import pytest

from shelfmark.cli import services
from shelfmark.metadata.enricher import BookEnricher


class RecordingHttpClient:
    instances: list["RecordingHttpClient"] = []

    def __init__(self) -> None:
        self.closed = False
        RecordingHttpClient.instances.append(self)

    def get(self, url: str, params: dict[str, str] | None = None) -> dict:
        return {"docs": []}

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def http_clients(monkeypatch: pytest.MonkeyPatch) -> list[RecordingHttpClient]:
    RecordingHttpClient.instances = []
    monkeypatch.setattr(services, "ShelfmarkHttpClient", RecordingHttpClient)
    return RecordingHttpClient.instances


class TestCreateEnricher:
    """Tests for create_enricher."""

    def test_closes_client_on_exit(self, http_clients: list[RecordingHttpClient]) -> None:
        """The HTTP client stays open inside the block and is closed after it."""
        with services.create_enricher() as enricher:
            assert isinstance(enricher, BookEnricher)
            assert not http_clients[0].closed
        assert http_clients[0].closed

    def test_closes_client_on_error(self, http_clients: list[RecordingHttpClient]) -> None:
        """An exception inside the block still closes the client."""
        with pytest.raises(RuntimeError):
            with services.create_enricher():
                raise RuntimeError("boom")
        assert http_clients[0].closed


class TestOpenCoordinator:
    """Tests for open_coordinator."""

    def test_enriching_coordinator_closes_client(
        self, tmp_path: Path, http_clients: list[RecordingHttpClient]
    ) -> None:
        """Leaving the coordinator context closes its HTTP client."""
        with services.open_coordinator(tmp_path / "catalog.db") as coordinator:
            result = coordinator.add_book("alice", "Dune")
            assert result.entry is not None
        assert len(http_clients) == 1
        assert http_clients[0].closed

    def test_no_enrich_creates_no_client(
        self, tmp_path: Path, http_clients: list[RecordingHttpClient]
    ) -> None:
        """With enrichment off, no HTTP client is created."""
        with services.open_coordinator(tmp_path / "catalog.db", enrich=False) as coordinator:
            coordinator.add_book("alice", "Dune")
        assert http_clients == []
