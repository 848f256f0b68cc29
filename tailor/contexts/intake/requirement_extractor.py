"""
Requirement extraction for the Intake context.

Turns raw posting text into a JobProfile using literal substring matching against
the fixed tables in keyword_tables.py. Every function here is pure and tolerant:
absent signal yields empty collections and defaults, never an exception.

Stages (in the order analyze() runs them):
1. Build one lower-cased search buffer from title + body + company
2. Skills per category
3. Industry detection with fixed confidence normalization
4. Experience level (last matching level in scan order wins)
5. Required / preferred qualification bullets
6. Keyword set
7. Company context (size, culture, values)
"""

from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Tuple

from tailor.contexts.intake.job_profile import (
    CompanyContext,
    IndustryContext,
    JobProfile,
    empty_industry_context,
)
from tailor.contexts.intake.keyword_tables import (
    DEFAULT_EXPERIENCE_LEVEL,
    EXPERIENCE_LEVEL_KEYWORDS,
    INDUSTRY_CONFIDENCE_DIVISOR,
    INDUSTRY_KEYWORDS,
    SKILL_KEYWORDS,
    UNKNOWN_COMPANY_SIZE,
    CompanyContextKeywords,
)
from tailor.contexts.intake.logger import _log_debug, _log_warning, log_analysis_result
from tailor.contexts.intake.normalizer import preprocess_posting_text
from tailor.contexts.intake.section_patterns import (
    MAX_KEY_REQUIREMENTS,
    MAX_PREFERRED_QUALIFICATIONS,
    QualificationSectionPhrases,
    is_heading_with,
    match_bullet,
)
from tailor.utils.text_processing import contains_term, find_terms


def build_search_buffer(raw_text: str, title: str, company: str) -> str:
    """
    Concatenate title, body, and company into one lower-cased buffer.

    Args:
        raw_text: Posting body (already normalized)
        title: Job title
        company: Company name

    Returns:
        Lower-cased text used for every phrase lookup
    """
    parts = [title or "", raw_text or "", company or ""]
    return " \n".join(parts).lower()


def extract_skills(buffer: str) -> Mapping[str, FrozenSet[str]]:
    """
    Match each category's skill phrases against the buffer.

    Categories are independent, so a phrase listed in two categories appears in both.

    Returns:
        Read-only mapping of every category to its matched phrases
    """
    return MappingProxyType(
        {
            category: frozenset(find_terms(buffer, keywords))
            for category, keywords in SKILL_KEYWORDS.items()
        }
    )


def identify_industry(buffer: str) -> IndustryContext:
    """
    Score each industry by the number of its phrases present in the buffer.

    Confidence is count / 5 capped at 1.0. The primary industry is the highest
    confidence; ties go to the earliest industry in declaration order
    (technology > marketing > finance > healthcare > consulting). A posting
    with no industry phrase at all gets empty_industry_context().

    Returns:
        IndustryContext
    """
    confidence = {
        industry: min(len(find_terms(buffer, keywords)) / INDUSTRY_CONFIDENCE_DIVISOR, 1.0)
        for industry, keywords in INDUSTRY_KEYWORDS.items()
    }
    if not any(confidence.values()):
        return empty_industry_context()

    primary = next(iter(confidence))
    for industry, value in confidence.items():
        # Strictly greater keeps the earlier industry on ties
        if value > confidence[primary]:
            primary = industry

    return IndustryContext(primary=primary, confidence_per_category=MappingProxyType(confidence))


def determine_experience_level(buffer: str) -> str:
    """
    Determine the seniority a posting asks for.

    Levels are scanned entry -> mid -> senior -> executive without early exit,
    and every level with a matching indicator overwrites the previous result.
    The LAST matching level therefore wins: a title with both "senior" and
    "director" resolves to "executive".

    Returns:
        Experience level, "mid" when nothing matches
    """
    level = DEFAULT_EXPERIENCE_LEVEL
    for candidate_level, indicators in EXPERIENCE_LEVEL_KEYWORDS.items():
        if any(contains_term(buffer, indicator) for indicator in indicators):
            level = candidate_level
    return level


def _scan_section(
    lines: List[str], start_phrases: tuple, stop_phrases: tuple, limit: int
) -> Tuple[str, ...]:
    """
    Collect bullet items from the first section opened by a start heading.

    The section starts after the first non-bullet line containing a start phrase
    and ends at the first later non-bullet line containing a stop phrase.
    Non-bullet lines in between are skipped.

    Args:
        lines: Posting lines
        start_phrases: Phrases that open the section
        stop_phrases: Phrases that close it
        limit: Maximum number of items returned

    Returns:
        Bullet texts without markers, in posting order
    """
    items = []
    in_section = False

    for line in lines:
        if not in_section:
            # "Preferred Qualifications" contains "qualifications" but must not open
            # the required section
            if is_heading_with(line, start_phrases) and not is_heading_with(line, stop_phrases):
                in_section = True
            continue

        if is_heading_with(line, stop_phrases):
            break

        item = match_bullet(line)
        if item:
            items.append(item)

    return tuple(items[:limit])


def extract_key_requirements(text: str) -> Tuple[str, ...]:
    """
    Extract up to 10 required-qualification bullets.

    Example:
        >>> extract_key_requirements("Requirements:\\n- 5+ years SEO\\nPreferred:\\n- PPC")
        ('5+ years SEO',)
    """
    return _scan_section(
        text.split("\n"),
        QualificationSectionPhrases.REQUIRED_START,
        QualificationSectionPhrases.REQUIRED_STOP,
        MAX_KEY_REQUIREMENTS,
    )


def extract_preferred_qualifications(text: str) -> Tuple[str, ...]:
    """Extract up to 5 preferred-qualification bullets."""
    return _scan_section(
        text.split("\n"),
        QualificationSectionPhrases.PREFERRED_START,
        QualificationSectionPhrases.PREFERRED_STOP,
        MAX_PREFERRED_QUALIFICATIONS,
    )


def extract_keywords(
    skills_by_category: Mapping[str, FrozenSet[str]], buffer: str
) -> FrozenSet[str]:
    """
    Union of matched skill phrases and industry phrases, lower-cased.

    Args:
        skills_by_category: Output of extract_skills()
        buffer: Search buffer

    Returns:
        Keyword set used for density scoring
    """
    keywords = set()
    for skills in skills_by_category.values():
        keywords.update(skill.lower() for skill in skills)
    for industry_keywords in INDUSTRY_KEYWORDS.values():
        keywords.update(k.lower() for k in find_terms(buffer, industry_keywords))
    return frozenset(keywords)


def analyze_company_context(buffer: str, company: str) -> CompanyContext:
    """
    Read company size, culture traits, and values from the buffer.

    Size takes the first matching entry in table order (startup, enterprise,
    mid-size); culture and values keep table order.
    """
    size = UNKNOWN_COMPANY_SIZE
    for size_name, phrases in CompanyContextKeywords.SIZE:
        if any(phrase in buffer for phrase in phrases):
            size = size_name
            break

    culture = tuple(
        trait
        for trait, phrases in CompanyContextKeywords.CULTURE
        if any(phrase in buffer for phrase in phrases)
    )
    values = tuple(value for value in CompanyContextKeywords.VALUES if value in buffer)

    return CompanyContext(name=company or "", size=size, culture=culture, values=values)


def analyze(raw_text: str, title: str = "", company: str = "") -> JobProfile:
    """
    Analyze a job posting into a JobProfile.

    This is the main extraction function. It never raises on malformed or empty
    text: an empty posting yields empty collections, experience level "mid", and
    industry "technology" with zero confidence.

    Args:
        raw_text: Posting body
        title: Job title
        company: Company name

    Returns:
        JobProfile
    """
    title = preprocess_posting_text(title).strip()
    company = preprocess_posting_text(company).strip()
    body = preprocess_posting_text(raw_text)
    if not body.strip():
        _log_warning(f"Empty posting text for '{title}'; profile will be neutral")

    buffer = build_search_buffer(body, title, company)

    skills_by_category = extract_skills(buffer)
    industry = identify_industry(buffer)
    experience_level = determine_experience_level(buffer)
    key_requirements = extract_key_requirements(body)
    preferred_qualifications = extract_preferred_qualifications(body)
    keywords = extract_keywords(skills_by_category, buffer)
    company_context = analyze_company_context(buffer, company)

    _log_debug(
        "Skill matches: "
        + ", ".join(f"{c}={len(s)}" for c, s in skills_by_category.items())
    )
    _log_debug(
        f"Qualification bullets: {len(key_requirements)} required, "
        f"{len(preferred_qualifications)} preferred"
    )

    profile = JobProfile(
        title=title,
        company=company,
        raw_text=raw_text if isinstance(raw_text, str) else body,
        skills_by_category=skills_by_category,
        industry=industry,
        experience_level=experience_level,
        key_requirements=key_requirements,
        preferred_qualifications=preferred_qualifications,
        keywords=keywords,
        company_context=company_context,
    )
    log_analysis_result(profile)
    return profile
