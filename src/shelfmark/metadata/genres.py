# ABOUTME: Maps free-text subject taxonomies (e.g. Open Library subjects) to genre labels.
# ABOUTME: Produces at most five distinct, Title-Cased genres per book.

MAX_GENRES = 5

# Subjects of this length or more are too descriptive to serve as fallback genres.
_FALLBACK_MAX_LENGTH = 30
_FALLBACK_SUBJECTS = 3

_GENRE_HINTS = ("fiction", "nonfiction", "novel", "story", "tale")

GENRE_MAPPINGS: dict[str, str] = {
    "fiction": "Fiction",
    "nonfiction": "Non-Fiction",
    "science fiction": "Science Fiction",
    "fantasy": "Fantasy",
    "mystery": "Mystery",
    "thriller": "Thriller",
    "romance": "Romance",
    "horror": "Horror",
    "biography": "Biography",
    "autobiography": "Autobiography",
    "history": "History",
    "philosophy": "Philosophy",
    "psychology": "Psychology",
    "self-help": "Self-Help",
    "business": "Business",
    "economics": "Economics",
    "science": "Science",
    "technology": "Technology",
    "art": "Art",
    "poetry": "Poetry",
    "drama": "Drama",
    "comedy": "Comedy",
    "adventure": "Adventure",
    "crime": "Crime",
    "young adult": "Young Adult",
    "children": "Children's",
    "cooking": "Cooking",
    "travel": "Travel",
    "religion": "Religion",
    "spirituality": "Spirituality",
    "health": "Health",
    "fitness": "Fitness",
    "education": "Education",
    "reference": "Reference",
}


def _title_case(text: str) -> str:
    """Capitalize each space-separated word, lowercasing the rest of it."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def normalize_genre(subject: str) -> str:
    """Canonical label for a subject: the mapping table entry, else Title Case."""
    return GENRE_MAPPINGS.get(subject.lower().strip()) or _title_case(subject)


def _is_genre_subject(subject: str) -> bool:
    lower = subject.lower()
    if any(hint in lower for hint in _GENRE_HINTS):
        return True
    if lower in GENRE_MAPPINGS:
        return True
    return any(key in lower for key in GENRE_MAPPINGS)


def extract_genres(subjects: list[str]) -> list[str]:
    """Pick genre labels out of a subject list.

    Subjects that look like genres (fiction/novel/story hints, or a mapping
    table key anywhere in the text) are normalized and kept in order of first
    acceptance. If none qualify, the first few short subjects are used
    instead. Duplicates are dropped and the result is capped at MAX_GENRES.
    """
    if not subjects:
        return []

    genres: list[str] = []
    for subject in subjects:
        if not _is_genre_subject(subject):
            continue
        label = normalize_genre(subject)
        if label and label not in genres:
            genres.append(label)

    if not genres:
        for subject in subjects[:_FALLBACK_SUBJECTS]:
            label = normalize_genre(subject)
            if label and len(label) < _FALLBACK_MAX_LENGTH and label not in genres:
                genres.append(label)

    return genres[:MAX_GENRES]
