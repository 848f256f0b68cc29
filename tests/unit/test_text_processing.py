"""Unit tests for shared text processing helpers."""

import pytest

from tailor.utils.text_processing import (
    contains_term,
    content_words,
    find_terms,
    has_content_overlap,
    numeric_tokens,
    string_similarity,
    strip_non_alphanumeric,
    terms_overlap,
    truncate_display,
)


@pytest.mark.unit
def test_contains_term_matches_substrings():
    """Phrases of three or more characters match anywhere, inside words too."""
    assert contains_term("Experience with MySQL and PostgreSQL", "sql")
    assert contains_term("Strong leadership", "lead")
    assert contains_term("Raise capital", "api")
    assert contains_term("Python3 required", "python")


@pytest.mark.unit
def test_short_terms_need_word_boundaries():
    """One- and two-letter terms must not match inside longer words."""
    assert not contains_term("We ship Docker images", "r")
    assert not contains_term("Maintained pipelines", "ai")
    assert contains_term("Experience with R and Python", "r")
    assert contains_term("Applied AI, machine learning", "ai")


@pytest.mark.unit
def test_contains_term_keeps_punctuation_literal():
    """Punctuation inside a term is matched literally."""
    assert contains_term("Experience with Node.js and CI/CD", "node.js")
    assert contains_term("Experience with Node.js and CI/CD", "ci/cd")
    assert not contains_term("Experience with Nodexjs", "node.js")


@pytest.mark.unit
def test_contains_term_is_case_insensitive():
    assert contains_term("Google Analytics power user", "google analytics")
    assert contains_term("google analytics", "Google Analytics")


@pytest.mark.unit
def test_contains_term_empty_inputs():
    assert not contains_term("", "seo")
    assert not contains_term("seo", "")


@pytest.mark.unit
def test_find_terms_preserves_given_order():
    found = find_terms("sql, python and aws", ("aws", "docker", "python", "sql"))
    assert found == ["aws", "python", "sql"]


@pytest.mark.unit
def test_terms_overlap_either_direction():
    assert terms_overlap("SEO Strategy", "seo")
    assert terms_overlap("seo", "SEO Strategy")
    assert terms_overlap("Search Console", "google search console")
    assert terms_overlap("Python3", "python")
    assert not terms_overlap("Python", "Java")


@pytest.mark.unit
def test_string_similarity_edit_distance():
    """kitten -> sitting needs 3 edits over 7 characters."""
    assert string_similarity("kitten", "sitting") == pytest.approx(4 / 7)
    assert string_similarity("SEO", "seo") == 1.0
    assert string_similarity("", "") == 1.0
    assert string_similarity("abc", "") == 0.0


@pytest.mark.unit
def test_content_words_keeps_words_of_four_or_more_characters():
    assert content_words("Led a team of 8 engineers") == ["team", "engineers"]


@pytest.mark.unit
def test_has_content_overlap_uses_containment():
    assert has_content_overlap("Managed annual budgets", "Own the budget")
    assert not has_content_overlap("Grew organic engagement", "Daily use of Google Analytics")


@pytest.mark.unit
def test_numeric_tokens():
    text = "Managed $50K+ budgets with 4.2x ROAS and 95% delivery"
    assert numeric_tokens(text) == ["$50K+", "4.2x", "95%"]
    assert numeric_tokens("") == []


@pytest.mark.unit
def test_strip_non_alphanumeric():
    assert strip_non_alphanumeric("Acme, Inc.") == "AcmeInc"
    assert strip_non_alphanumeric("") == ""


@pytest.mark.unit
def test_truncate_display():
    assert truncate_display("short", 10) == "short"
    assert truncate_display("this is a very long string", 10) == "this is..."
