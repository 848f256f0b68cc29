"""
Fit scorer: weighted match score between a CustomizedDocument and its JobProfile.

Five dimensions, each in [0, 1]:

| Dimension              | Weight |
|------------------------|--------|
| skills_match           | 0.35   |
| experience_relevance   | 0.25   |
| industry_alignment     | 0.15   |
| keyword_density        | 0.15   |
| achievements_relevance | 0.10   |

The weighted sum is scaled to 0-100 and compared with MATCH_THRESHOLD. Scoring is
pure: the same document and profile always give the same report, including the
order of recommendations.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from tailor.contexts.intake.job_profile import JOB_PROFILE_SCHEMA_VERSION, JobProfile
from tailor.contexts.targeting.exceptions import SchemaMismatchError
from tailor.contexts.targeting.logger import log_score_result
from tailor.contexts.templating.customized_document import (
    DOCUMENT_SCHEMA_VERSION,
    CustomizedDocument,
)
from tailor.utils.text_processing import (
    contains_term,
    has_content_overlap,
    string_similarity,
    terms_overlap,
)

MATCH_THRESHOLD = 80
TARGET_SCORE = 90
EXCELLENT_SCORE = 95

SCORING_WEIGHTS = MappingProxyType(
    {
        "skills_match": 0.35,
        "experience_relevance": 0.25,
        "industry_alignment": 0.15,
        "keyword_density": 0.15,
        "achievements_relevance": 0.10,
    }
)

# Score used when a dimension has nothing to compare
NEUTRAL_SCORE = 0.5

# Similarity above which a near-miss skill earns partial credit
FUZZY_SIMILARITY_THRESHOLD = 0.6
FUZZY_CREDIT = 0.5

# Expected years of experience per level (min, max)
EXPECTED_YEARS = MappingProxyType(
    {
        "entry": (0, 2),
        "mid": (2, 5),
        "senior": (5, 10),
        "executive": (10, 20),
    }
)

# Words whose presence in the document signals alignment with an industry
INDUSTRY_ALIGNMENT_TERMS = MappingProxyType(
    {
        "technology": ("software", "development", "engineering", "technical", "programming"),
        "marketing": ("marketing", "campaigns", "digital", "content", "advertising"),
        "finance": ("financial", "investment", "banking", "analysis", "accounting"),
        "healthcare": ("healthcare", "medical", "patient", "clinical", "health"),
        "consulting": ("consulting", "strategy", "advisory", "client", "stakeholder"),
    }
)

BELOW_THRESHOLD_WARNING = (
    f"Overall match score below {MATCH_THRESHOLD}% threshold - significant improvements needed"
)

# (dimension, cutoff, message) in report order
DIMENSION_RECOMMENDATIONS = (
    ("skills_match", 0.7, "Add more job-relevant skills to resume"),
    ("experience_relevance", 0.7, "Better align experience section with job requirements"),
    ("industry_alignment", 0.6, "Include more industry-specific terminology"),
    ("keyword_density", 0.6, "Incorporate more keywords from job description"),
    ("achievements_relevance", 0.6, "Tailor achievements to match job requirements"),
)


@dataclass(frozen=True)
class ScoreReport:
    """
    Result of scoring a document against a job profile.

    Attributes:
        total_score: Weighted score in [0, 100], rounded to 2 decimals
        breakdown: Dimension -> score in [0, 1]
        meets_threshold: total_score >= MATCH_THRESHOLD
        quality_level: excellent | good | acceptable | needs_improvement
        recommendations: Improvement suggestions in dimension order
    """

    total_score: float
    breakdown: Mapping[str, float]
    meets_threshold: bool
    quality_level: str
    recommendations: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_score": self.total_score,
            "breakdown": dict(self.breakdown),
            "meets_threshold": self.meets_threshold,
            "quality_level": self.quality_level,
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class ThresholdValidation:
    """
    Submission decision derived from a ScoreReport.

    Attributes:
        is_valid: Report meets the match threshold
        score: Total score
        threshold: MATCH_THRESHOLD
        quality_level: Report quality level
        can_submit: score >= threshold
        needs_improvement: score below TARGET_SCORE
        recommendations: Report recommendations
    """

    is_valid: bool
    score: float
    threshold: int
    quality_level: str
    can_submit: bool
    needs_improvement: bool
    recommendations: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "score": self.score,
            "threshold": self.threshold,
            "quality_level": self.quality_level,
            "can_submit": self.can_submit,
            "needs_improvement": self.needs_improvement,
            "recommendations": list(self.recommendations),
        }


# =============================================================================
# DIMENSIONS
# =============================================================================


def skills_match(document: CustomizedDocument, job_profile: JobProfile) -> float:
    """
    Share of the job's matched skills covered by the document's skills.

    A job skill earns full credit when a document skill contains it as a substring or
    is contained in it, half credit when the closest document skill is more than
    60% similar by edit distance, and nothing otherwise.
    """
    job_skills = job_profile.all_skills()
    if not job_skills:
        return NEUTRAL_SCORE

    document_skills = document.skills.combined()
    credit = 0.0
    for job_skill in job_skills:
        if any(terms_overlap(skill, job_skill) for skill in document_skills):
            credit += 1.0
        elif any(
            string_similarity(skill, job_skill) > FUZZY_SIMILARITY_THRESHOLD
            for skill in document_skills
        ):
            credit += FUZZY_CREDIT

    return min(credit / len(job_skills), 1.0)


def experience_relevance(document: CustomizedDocument, job_profile: JobProfile) -> float:
    """
    How well the document's years fit the range expected for the job's level.

    1.0 inside [min, 1.5 * max], 0.8 from 0.8 * min, 0.6 from 0.5 * min, else 0.3.
    """
    low, high = EXPECTED_YEARS.get(job_profile.experience_level, EXPECTED_YEARS["mid"])
    years = document.experience.years

    if low <= years <= high * 1.5:
        return 1.0
    if years >= low * 0.8:
        return 0.8
    if years >= low * 0.5:
        return 0.6
    return 0.3


def industry_alignment(document_text: str, job_profile: JobProfile) -> float:
    """Fraction of the industry's alignment terms in the document, scaled by confidence."""
    industry = job_profile.industry
    terms = INDUSTRY_ALIGNMENT_TERMS.get(industry.primary, INDUSTRY_ALIGNMENT_TERMS["technology"])
    mentioned = sum(1 for term in terms if contains_term(document_text, term))
    return (mentioned / len(terms)) * industry.confidence


def keyword_density(document_text: str, job_profile: JobProfile) -> float:
    """Fraction of the job keywords present in the document text."""
    keywords = job_profile.keywords
    if not keywords:
        return NEUTRAL_SCORE
    return sum(1 for keyword in keywords if contains_term(document_text, keyword)) / len(keywords)


def achievements_relevance(document: CustomizedDocument, job_profile: JobProfile) -> float:
    """Average share of key requirements each achievement shares a content word with."""
    achievements = document.achievements
    requirements = job_profile.key_requirements
    if not achievements or not requirements:
        return NEUTRAL_SCORE

    total = 0.0
    for achievement in achievements:
        relevant = sum(1 for req in requirements if has_content_overlap(achievement, req))
        total += relevant / len(requirements)

    return min(total / len(achievements), 1.0)


# =============================================================================
# REPORT
# =============================================================================


def get_quality_level(total_score: float) -> str:
    """Map a 0-100 score onto a quality level."""
    if total_score >= EXCELLENT_SCORE:
        return "excellent"
    if total_score >= TARGET_SCORE:
        return "good"
    if total_score >= MATCH_THRESHOLD:
        return "acceptable"
    return "needs_improvement"


def generate_recommendations(breakdown: Mapping[str, float], total_score: float) -> Tuple[str, ...]:
    """Below-threshold warning first, then one message per weak dimension in order."""
    recommendations = []
    if total_score < MATCH_THRESHOLD:
        recommendations.append(BELOW_THRESHOLD_WARNING)
    for dimension, cutoff, message in DIMENSION_RECOMMENDATIONS:
        if breakdown[dimension] < cutoff:
            recommendations.append(message)
    return tuple(recommendations)


def _check_contract(document, job_profile) -> None:
    if not isinstance(document, CustomizedDocument):
        raise SchemaMismatchError(
            "score() expects a CustomizedDocument", "CustomizedDocument", type(document).__name__
        )
    if not isinstance(job_profile, JobProfile):
        raise SchemaMismatchError(
            "score() expects a JobProfile", "JobProfile", type(job_profile).__name__
        )
    if document.schema_version != DOCUMENT_SCHEMA_VERSION:
        raise SchemaMismatchError(
            "Unsupported CustomizedDocument schema version",
            DOCUMENT_SCHEMA_VERSION,
            document.schema_version,
        )
    if job_profile.schema_version != JOB_PROFILE_SCHEMA_VERSION:
        raise SchemaMismatchError(
            "Unsupported JobProfile schema version",
            JOB_PROFILE_SCHEMA_VERSION,
            job_profile.schema_version,
        )


def score(document: CustomizedDocument, job_profile: JobProfile) -> ScoreReport:
    """
    Score a document against the job profile it was built for.

    Args:
        document: Output of customize()
        job_profile: Profile the document was customized against

    Returns:
        ScoreReport

    Raises:
        SchemaMismatchError: If either argument has the wrong type or schema version
    """
    _check_contract(document, job_profile)

    document_text = document.to_text().lower()
    breakdown = {
        "skills_match": skills_match(document, job_profile),
        "experience_relevance": experience_relevance(document, job_profile),
        "industry_alignment": industry_alignment(document_text, job_profile),
        "keyword_density": keyword_density(document_text, job_profile),
        "achievements_relevance": achievements_relevance(document, job_profile),
    }

    weighted = sum(breakdown[name] * weight for name, weight in SCORING_WEIGHTS.items())
    total_score = min(max(round(weighted * 100, 2), 0.0), 100.0)

    report = ScoreReport(
        total_score=total_score,
        breakdown=MappingProxyType(breakdown),
        meets_threshold=total_score >= MATCH_THRESHOLD,
        quality_level=get_quality_level(total_score),
        recommendations=generate_recommendations(breakdown, total_score),
    )

    log_score_result(report)
    return report


def validate_threshold(report: ScoreReport) -> ThresholdValidation:
    """
    Turn a score report into a submission decision.

    Example:
        >>> validation = validate_threshold(report)
        >>> if not validation.can_submit:
        ...     print(validation.recommendations)
    """
    return ThresholdValidation(
        is_valid=report.meets_threshold,
        score=report.total_score,
        threshold=MATCH_THRESHOLD,
        quality_level=report.quality_level,
        can_submit=report.total_score >= MATCH_THRESHOLD,
        needs_improvement=report.total_score < TARGET_SCORE,
        recommendations=report.recommendations,
    )
