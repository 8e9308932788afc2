# ABOUTME: Parsing functions for Open Library search and works JSON responses.
# ABOUTME: Pulls out the first hit's author, work key, and subject lists.

from typing import Any


def first_search_doc(data: dict[str, Any]) -> dict[str, Any] | None:
    """Return the top document of a search.json response, if any."""
    docs = data.get("docs")
    if not isinstance(docs, list) or not docs or not isinstance(docs[0], dict):
        return None
    return docs[0]


def parse_doc_author(doc: dict[str, Any]) -> str | None:
    """First listed author name of a search document."""
    names = doc.get("author_name")
    if isinstance(names, list) and names and isinstance(names[0], str) and names[0].strip():
        return names[0].strip()
    return None


def parse_work_key(doc: dict[str, Any]) -> str | None:
    """Normalize a search document's key to the "/works/OL...W" form."""
    key = doc.get("key")
    if not key or not isinstance(key, str):
        return None
    return key if key.startswith("/works/") else f"/works/{key}"


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item.strip()]


def parse_doc_subjects(doc: dict[str, Any]) -> list[str]:
    """Subject strings attached to a search document ("subject" field)."""
    return _string_list(doc.get("subject"))


def parse_works_subjects(data: dict[str, Any]) -> list[str]:
    """Subject strings from a works endpoint response ("subjects" field)."""
    return _string_list(data.get("subjects"))
