# ABOUTME: Open Library lookup implementation for authors and subject lists.
# ABOUTME: Searches openlibrary.org by title (and author) and degrades to not-found on failure.

import logging
import re
from collections.abc import Iterator
from typing import Any

from shelfmark.matching.normalizer import split_concatenated
from shelfmark.metadata.http import HttpClient, LookupFetchError
from shelfmark.metadata.openlibrary_parser import (
    first_search_doc,
    parse_doc_author,
    parse_doc_subjects,
    parse_work_key,
    parse_works_subjects,
)

logger = logging.getLogger(__name__)

_OL_BASE = "https://openlibrary.org"
_SEARCH_LIMIT = "1"

# Matches a colon followed by a space and remaining text (subtitle pattern).
_SUBTITLE_RE = re.compile(r"\s*:\s+.+$")


def _query_variants(title: str) -> Iterator[str]:
    """The title as given, then de-concatenated and subtitle-free variants."""
    seen: set[str] = set()
    for variant in (title.strip(), split_concatenated(title.strip())):
        for candidate in (variant, _SUBTITLE_RE.sub("", variant).strip()):
            if candidate and candidate not in seen:
                seen.add(candidate)
                yield candidate


class OpenLibraryLookup:
    """MetadataLookup backed by the Open Library search and works APIs.

    Network failures are logged and reported as not-found; they never
    propagate to the caller.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "openlibrary"

    def search_author(self, title: str) -> str | None:
        """Best-guess author for a title: the first author of the top hit."""
        try:
            doc = self._search_doc(title)
        except LookupFetchError as exc:
            logger.warning("Author search failed for title=%s: %s", title, exc)
            return None
        if doc is None:
            return None
        return parse_doc_author(doc)

    def search_subjects(self, title: str, author: str | None = None) -> list[str] | None:
        """Subject strings for the top hit, preferring the works record.

        Returns an empty list when the book is unknown or has no subjects,
        and None when the search itself failed.
        """
        try:
            doc = self._search_doc(title, author)
        except LookupFetchError as exc:
            logger.warning("Subject search failed for title=%s author=%s: %s", title, author, exc)
            return None
        if doc is None:
            return []

        works_key = parse_work_key(doc)
        if works_key:
            try:
                works_data = self._http.get(f"{_OL_BASE}{works_key}.json")
            except LookupFetchError as exc:
                logger.warning("Works lookup failed for %s: %s", works_key, exc)
            else:
                subjects = parse_works_subjects(works_data)
                if subjects:
                    return subjects

        return parse_doc_subjects(doc)

    def _search_doc(self, title: str, author: str | None = None) -> dict[str, Any] | None:
        """Run search.json for each query variant until one returns a hit."""
        for query in _query_variants(title):
            params: dict[str, str] = {"title": query, "limit": _SEARCH_LIMIT}
            if author:
                params["author"] = author
            data = self._http.get(f"{_OL_BASE}/search.json", params=params)
            doc = first_search_doc(data)
            if doc is not None:
                return doc
        return None
