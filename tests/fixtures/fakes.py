# ABOUTME: In-memory fakes for the lookup and HTTP seams.
# ABOUTME: Let tests drive enrichment and Open Library parsing without network access.

from typing import Any

from tests.fixtures.openlibrary_responses import SEARCH_RESPONSE_EMPTY


class FakeLookup:
    """MetadataLookup with canned authors and subjects.

    A title mapped to None in subjects simulates a failed lookup.
    """

    def __init__(
        self,
        authors: dict[str, str] | None = None,
        subjects: dict[str, list[str] | None] | None = None,
    ) -> None:
        self._authors = authors or {}
        self._subjects = subjects or {}
        self.author_calls: list[str] = []
        self.subject_calls: list[tuple[str, str | None]] = []

    @property
    def name(self) -> str:
        return "fake"

    def search_author(self, title: str) -> str | None:
        self.author_calls.append(title)
        return self._authors.get(title)

    def search_subjects(self, title: str, author: str | None = None) -> list[str] | None:
        self.subject_calls.append((title, author))
        if title in self._subjects:
            return self._subjects[title]
        return []


class FakeOpenLibraryClient:
    """HttpClient that answers search.json by title and works URLs by key.

    Values may be exceptions, which are raised instead of returned.
    """

    def __init__(
        self,
        searches: dict[str, Any] | None = None,
        works: dict[str, Any] | None = None,
    ) -> None:
        self._searches = searches or {}
        self._works = works or {}
        self.requests: list[tuple[str, dict[str, str] | None]] = []

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        self.requests.append((url, params))
        if url.endswith("/search.json"):
            response = self._searches.get((params or {}).get("title", ""), SEARCH_RESPONSE_EMPTY)
        else:
            key = url.removeprefix("https://openlibrary.org").removesuffix(".json")
            response = self._works.get(key, {})
        if isinstance(response, Exception):
            raise response
        return response

    def search_titles(self) -> list[str]:
        """Titles queried against search.json, in order."""
        return [p["title"] for url, p in self.requests if url.endswith("/search.json") and p]
