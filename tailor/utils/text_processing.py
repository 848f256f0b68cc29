"""
Text processing utilities shared by the intake and targeting contexts.

All matching in the pipeline is literal: phrases are compared case-insensitively,
never stemmed or expanded. Phrases match as plain substrings ("sql" is found in
"PostgreSQL", "lead" in "leadership"); only one- and two-letter terms such as
"r" and "ai" must stand alone, since as substrings they occur in most words.
"""

import re
from functools import lru_cache
from typing import Iterable, List

from rapidfuzz.distance import Levenshtein

# Minimum length for a word to count as a content word in overlap checks
CONTENT_WORD_MIN_LENGTH = 4

# Terms up to this length only match when not glued to other word characters
SHORT_TERM_MAX_LENGTH = 2


@lru_cache(maxsize=256)
def _short_term_pattern(term: str) -> re.Pattern:
    return re.compile(r"(?<!\w)" + re.escape(term) + r"(?!\w)")


def contains_term(text: str, term: str) -> bool:
    """
    Check whether a phrase occurs in text (case-insensitive substring).

    Terms of one or two characters must not be glued to surrounding word
    characters, so "r" does not match "docker" and "ai" does not match
    "maintained". Punctuation inside a phrase ("ci/cd", "node.js") is literal.

    Example:
        >>> contains_term("Experience with MySQL and CI/CD", "sql")
        True
        >>> contains_term("Strong leadership", "lead")
        True
        >>> contains_term("Maintained pipelines", "ai")
        False
    """
    if not text or not term:
        return False
    text, term = text.lower(), term.lower()
    if len(term) <= SHORT_TERM_MAX_LENGTH:
        return _short_term_pattern(term).search(text) is not None
    return term in text


def find_terms(text: str, terms: Iterable[str]) -> List[str]:
    """Return the terms (in the given order) that occur in text."""
    return [term for term in terms if contains_term(text, term)]


def terms_overlap(a: str, b: str) -> bool:
    """True when either string contains the other."""
    return contains_term(a, b) or contains_term(b, a)


def string_similarity(a: str, b: str) -> float:
    """
    Edit-distance similarity in [0, 1].

    Computed as (len(longer) - distance) / len(longer); two empty strings are
    identical (1.0).
    """
    a, b = a.lower(), b.lower()
    if not a and not b:
        return 1.0
    return Levenshtein.normalized_similarity(a, b)


def content_words(text: str) -> List[str]:
    """
    Split text on whitespace and keep words longer than three characters.

    Example:
        >>> content_words("Led a team of 8 engineers")
        ['team', 'engineers']
    """
    return [w for w in text.lower().split() if len(w) >= CONTENT_WORD_MIN_LENGTH]


def has_content_overlap(a: str, b: str) -> bool:
    """True when a content word of one text contains, or is contained in, one of the other."""
    words_b = content_words(b)
    return any(wa in wb or wb in wa for wa in content_words(a) for wb in words_b)


def strip_non_alphanumeric(text: str) -> str:
    """Remove every character that is not an ASCII letter or digit."""
    return re.sub(r"[^a-zA-Z0-9]", "", text or "")


def numeric_tokens(text: str) -> List[str]:
    """
    Extract quantitative tokens (numbers with attached %, +, $, K/M suffixes).

    Example:
        >>> numeric_tokens("Managed $50K+ budgets with 4.2x ROAS and 95% delivery")
        ['$50K+', '4.2x', '95%']
    """
    return re.findall(r"\$?\d[\d,.]*(?:[%+xKMkm]+)?", text or "")


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
