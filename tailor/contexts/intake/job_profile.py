"""
Job profile data structure for the Intake context.

Provides JobProfile, the structured extraction of a job posting consumed by the
Targeting context. Instances are immutable: collections are frozensets, tuples,
and read-only mappings.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

from tailor.contexts.intake.keyword_tables import (
    EXPERIENCE_LEVELS,
    INDUSTRY_PRIORITY,
    SKILL_CATEGORIES,
    UNKNOWN_COMPANY_SIZE,
)

# Bumped whenever the JobProfile shape changes in a way consumers must notice
JOB_PROFILE_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class IndustryContext:
    """
    Detected industry of a posting.

    Attributes:
        primary: Industry with the highest confidence (ties go to the earliest
            industry in INDUSTRY_PRIORITY)
        confidence_per_category: Industry -> confidence in [0, 1]
    """

    primary: str
    confidence_per_category: Mapping[str, float]

    @property
    def confidence(self) -> float:
        """Confidence of the primary industry."""
        return self.confidence_per_category.get(self.primary, 0.0)


@dataclass(frozen=True)
class CompanyContext:
    """
    Company signals mentioned in a posting.

    Attributes:
        name: Company name as given by the caller
        size: startup | enterprise | mid-size | unknown
        culture: Culture traits in table order (e.g. ("innovative", "fast_paced"))
        values: Company value words in table order
    """

    name: str
    size: str = UNKNOWN_COMPANY_SIZE
    culture: Tuple[str, ...] = ()
    values: Tuple[str, ...] = ()


def empty_industry_context() -> IndustryContext:
    """Industry context for a posting with no industry signal."""
    return IndustryContext(
        primary=INDUSTRY_PRIORITY[0],
        confidence_per_category=MappingProxyType({name: 0.0 for name in INDUSTRY_PRIORITY}),
    )


@dataclass(frozen=True)
class JobProfile:
    """
    Structured requirement profile extracted from a job posting.

    Factory methods:
        from_text(raw_text, title, company) - Analyze raw posting text

    Attributes:
        title: Job title as given by the caller
        company: Company name as given by the caller
        raw_text: Posting text exactly as received
        skills_by_category: Category -> matched skill phrases (all five categories present)
        industry: Detected industry and per-industry confidence
        experience_level: entry | mid | senior | executive
        key_requirements: Up to 10 verbatim requirement bullets
        preferred_qualifications: Up to 5 verbatim preferred-qualification bullets
        keywords: Lower-cased union of matched skill and industry phrases
        company_context: Company size / culture / values signals
        schema_version: Shape version checked by the FitScorer
    """

    title: str
    company: str
    raw_text: str
    skills_by_category: Mapping[str, FrozenSet[str]]
    industry: IndustryContext
    experience_level: str
    key_requirements: Tuple[str, ...] = ()
    preferred_qualifications: Tuple[str, ...] = ()
    keywords: FrozenSet[str] = frozenset()
    company_context: Optional[CompanyContext] = None
    schema_version: int = field(default=JOB_PROFILE_SCHEMA_VERSION)

    def __post_init__(self):
        if self.experience_level not in EXPERIENCE_LEVELS:
            raise ValueError(
                f"Unknown experience level '{self.experience_level}'. "
                f"Expected one of: {list(EXPERIENCE_LEVELS)}"
            )
        missing = [c for c in SKILL_CATEGORIES if c not in self.skills_by_category]
        if missing:
            raise ValueError(f"skills_by_category is missing categories: {missing}")

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_text(cls, raw_text: str, title: str = "", company: str = "") -> "JobProfile":
        """
        Analyze posting text and create a JobProfile.

        Never raises on malformed or empty text.

        Args:
            raw_text: Posting body
            title: Job title
            company: Company name

        Returns:
            JobProfile instance
        """
        # Import here to avoid circular dependency
        from tailor.contexts.intake.requirement_extractor import analyze

        return analyze(raw_text, title, company)

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def skills_in(self, category: str) -> FrozenSet[str]:
        """Matched skills for a category (empty for unknown categories)."""
        return self.skills_by_category.get(category, frozenset())

    def all_skills(self) -> Tuple[str, ...]:
        """Union of matched skills across categories, sorted."""
        union = set()
        for skills in self.skills_by_category.values():
            union.update(skills)
        return tuple(sorted(union))

    def skill_counts(self) -> Dict[str, int]:
        """Number of matched skills per category, in category order."""
        return {category: len(self.skills_in(category)) for category in SKILL_CATEGORIES}

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain-data view of the profile.

        Sets are emitted as sorted lists so the result is JSON-serializable and
        identical across runs.
        """
        company_context = self.company_context or CompanyContext(name=self.company)
        return {
            "schema_version": self.schema_version,
            "title": self.title,
            "company": self.company,
            "skills_by_category": {
                category: sorted(self.skills_in(category)) for category in SKILL_CATEGORIES
            },
            "industry": {
                "primary": self.industry.primary,
                "confidence": self.industry.confidence,
                "confidence_per_category": dict(self.industry.confidence_per_category),
            },
            "experience_level": self.experience_level,
            "key_requirements": list(self.key_requirements),
            "preferred_qualifications": list(self.preferred_qualifications),
            "keywords": sorted(self.keywords),
            "company_context": {
                "name": company_context.name,
                "size": company_context.size,
                "culture": list(company_context.culture),
                "values": list(company_context.values),
            },
        }
