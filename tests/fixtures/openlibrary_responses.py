# ABOUTME: Canned Open Library API response fixtures for testing.
# ABOUTME: Provides realistic JSON dicts matching OL search and works response shapes.

SEARCH_RESPONSE = {
    "numFound": 1,
    "start": 0,
    "docs": [
        {
            "key": "/works/OL27482W",
            "title": "The Hobbit",
            "author_name": ["J.R.R. Tolkien"],
            "first_publish_year": 1937,
            "subject": ["Fantasy", "Dwarves", "Dragons"],
        }
    ],
}

SEARCH_RESPONSE_BARE_KEY = {
    "numFound": 1,
    "start": 0,
    "docs": [
        {
            "key": "OL893415W",
            "title": "Dune",
            "author_name": ["Frank Herbert"],
            "subject": ["Science fiction"],
        }
    ],
}

SEARCH_RESPONSE_NO_AUTHOR = {
    "numFound": 1,
    "start": 0,
    "docs": [
        {
            "key": "/works/OL1W",
            "title": "Beowulf",
            "author_key": ["OL2A"],
        }
    ],
}

SEARCH_RESPONSE_EMPTY = {"numFound": 0, "start": 0, "docs": []}

WORKS_RESPONSE = {
    "key": "/works/OL27482W",
    "title": "The Hobbit",
    "subjects": [
        "Fantasy fiction",
        "Juvenile fiction",
        "Hobbits",
        "Dragons",
    ],
}

WORKS_RESPONSE_NO_SUBJECTS = {
    "key": "/works/OL27482W",
    "title": "The Hobbit",
}
