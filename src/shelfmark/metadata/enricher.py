# ABOUTME: Author and genre enrichment for new and existing catalog entries.
# ABOUTME: Prefers OCR-derived authors, falls back to the lookup service, caches genre results.

import logging

from shelfmark.metadata.authors import extract_author
from shelfmark.metadata.cache import TtlCache, lookup_key
from shelfmark.metadata.genres import extract_genres
from shelfmark.metadata.provider import MetadataLookup

logger = logging.getLogger(__name__)


class BookEnricher:
    """Finds authors and genres for a title.

    Never raises for lookup problems: anything that cannot be found comes
    back as None or an empty list, so enrichment cannot block an add.
    """

    def __init__(
        self,
        lookup: MetadataLookup,
        cache: TtlCache[list[str]] | None = None,
    ) -> None:
        self._lookup = lookup
        self._cache: TtlCache[list[str]] = cache if cache is not None else TtlCache()

    def get_author(self, title: str, ocr_text: str | None = None) -> str | None:
        """Author from the OCR text if it names one, else from the lookup service."""
        if ocr_text:
            author = extract_author(ocr_text)
            if author:
                logger.debug("Author for %r found in OCR text: %s", title, author)
                return author
        author = self._lookup.search_author(title)
        if author:
            logger.debug("Author for %r found via %s: %s", title, self._lookup.name, author)
        return author

    def get_genres(self, title: str, author: str | None = None) -> list[str]:
        """Genre labels for a title, served from the cache when still fresh.

        Completed lookups are cached even when they produce no genres, so
        unresolvable titles are not looked up again within the TTL. Failed
        lookups are not cached.
        """
        key = lookup_key(title, author)
        cached = self._cache.get(key)
        if cached is not None:
            return list(cached)

        subjects = self._lookup.search_subjects(title, author)
        if subjects is None:
            return []

        genres = extract_genres(subjects)
        self._cache.set(key, genres)
        return list(genres)
