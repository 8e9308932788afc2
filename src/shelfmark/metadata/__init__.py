# ABOUTME: Metadata package: author/genre extraction and external catalog lookups.
# ABOUTME: Exports the extractors, the lookup protocol, and the enricher.

from shelfmark.metadata.authors import extract_author
from shelfmark.metadata.cache import TtlCache, lookup_key
from shelfmark.metadata.enricher import BookEnricher
from shelfmark.metadata.genres import GENRE_MAPPINGS, extract_genres, normalize_genre
from shelfmark.metadata.provider import MetadataLookup

__all__ = [
    "GENRE_MAPPINGS",
    "BookEnricher",
    "MetadataLookup",
    "TtlCache",
    "extract_author",
    "extract_genres",
    "lookup_key",
    "normalize_genre",
]
