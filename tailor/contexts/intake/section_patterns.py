"""
Pattern matching for qualification sections in job postings.

Postings arrive as loosely formatted text: a heading line ("Required Qualifications:",
"**Nice to have**") followed by bulleted items. These phrases decide where a
qualification section starts and where it stops.

Pattern classes follow the convention of keyword_tables.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for phrases
- Helper functions that use them
"""

import re
from dataclasses import dataclass
from typing import Optional

# =============================================================================
# BULLET PATTERNS
# =============================================================================


@dataclass(frozen=True)
class BulletPatterns:
    """Regex patterns for bulleted and numbered list items."""

    # "- item", "* item", "• item", "1. item", "2) item"
    # Markers need trailing whitespace so "**Bold Header**" is not read as a bullet
    BULLET_ITEM: str = r"^(?:[-*]\s+|•\s*|\d+[.)]\s+)(?P<text>.+)$"


# =============================================================================
# QUALIFICATION SECTION PHRASES
# =============================================================================


@dataclass(frozen=True)
class QualificationSectionPhrases:
    """
    Lower-case phrases that open and close qualification sections.

    A heading is any non-bullet line containing one of the phrases. The scan for
    required qualifications stops at the first preferred/benefits heading; the scan
    for preferred qualifications stops at the first benefits heading.
    """

    REQUIRED_START: tuple = (
        "requirements",
        "qualifications",
        "must have",
        "must-have",
        "required",
    )

    REQUIRED_STOP: tuple = (
        "preferred",
        "nice to have",
        "benefits",
    )

    PREFERRED_START: tuple = (
        "preferred",
        "nice to have",
        "bonus",
        "plus",
    )

    PREFERRED_STOP: tuple = (
        "benefits",
        "what we offer",
        "compensation",
    )


# Caps on extracted snippets
MAX_KEY_REQUIREMENTS = 10
MAX_PREFERRED_QUALIFICATIONS = 5


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def match_bullet(line: str) -> Optional[str]:
    """
    Return the text of a bulleted/numbered line without its marker.

    Args:
        line: Single line of posting text

    Returns:
        Item text, or None if the line is not a list item

    Example:
        >>> match_bullet("  • 5+ years of SEO experience")
        '5+ years of SEO experience'
        >>> match_bullet("Required Qualifications:") is None
        True
    """
    match = re.match(BulletPatterns.BULLET_ITEM, line.strip())
    if not match:
        return None
    text = match.group("text").strip()
    return text or None


def is_heading_with(line: str, phrases: tuple) -> bool:
    """
    Check whether a non-bullet line contains any of the phrases.

    Args:
        line: Single line of posting text
        phrases: Lower-case phrases to look for

    Returns:
        True if the line is not a list item and contains a phrase
    """
    if match_bullet(line) is not None:
        return False
    lowered = line.lower()
    return any(phrase in lowered for phrase in phrases)
