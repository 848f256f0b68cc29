"""
Keyword tables for job posting analysis.

Every table is process-wide static data: tuples inside frozen dataclasses, exposed
through read-only mappings. Nothing in the pipeline writes to them, so they can be
shared freely between concurrent analyses.

Pattern classes follow the convention from section_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for keyword lists
- Module-level mappings built from them, in a fixed declaration order
"""

from dataclasses import dataclass
from types import MappingProxyType

# =============================================================================
# SKILL KEYWORDS
# =============================================================================


@dataclass(frozen=True)
class SkillKeywords:
    """
    Skill phrases grouped by category.

    Categories are independent: a phrase listed under two categories (e.g. "sql",
    "kpi") is recorded under both when it appears in a posting.
    """

    TECHNICAL: tuple = (
        "javascript",
        "python",
        "react",
        "node.js",
        "aws",
        "docker",
        "kubernetes",
        "sql",
        "mongodb",
        "api",
        "rest",
        "graphql",
        "git",
        "ci/cd",
        "devops",
        "microservices",
        "cloud",
        "azure",
        "gcp",
    )

    SEO: tuple = (
        "seo",
        "sem",
        "google analytics",
        "search engine optimization",
        "keyword research",
        "content optimization",
        "link building",
        "serp",
        "organic traffic",
        "google ads",
        "ppc",
        "conversion optimization",
        "a/b testing",
        "google search console",
        "technical seo",
    )

    MARKETING: tuple = (
        "digital marketing",
        "content marketing",
        "social media",
        "email marketing",
        "marketing automation",
        "lead generation",
        "conversion rate",
        "roi",
        "kpi",
        "campaign management",
        "brand management",
        "market research",
        "customer acquisition",
    )

    LEADERSHIP: tuple = (
        "team leadership",
        "project management",
        "strategic planning",
        "budget management",
        "stakeholder management",
        "cross-functional",
        "mentoring",
        "coaching",
        "performance management",
        "agile",
        "scrum",
        "kanban",
    )

    ANALYTICS: tuple = (
        "data analysis",
        "reporting",
        "dashboard",
        "metrics",
        "kpi",
        "excel",
        "tableau",
        "power bi",
        "sql",
        "python",
        "r",
        "statistics",
        "data visualization",
        "business intelligence",
    )


SKILL_KEYWORDS = MappingProxyType(
    {
        "technical": SkillKeywords.TECHNICAL,
        "seo": SkillKeywords.SEO,
        "marketing": SkillKeywords.MARKETING,
        "leadership": SkillKeywords.LEADERSHIP,
        "analytics": SkillKeywords.ANALYTICS,
    }
)

SKILL_CATEGORIES = tuple(SKILL_KEYWORDS)

# =============================================================================
# INDUSTRY KEYWORDS
# =============================================================================


@dataclass(frozen=True)
class IndustryKeywords:
    """Phrases that signal the industry of the hiring company."""

    TECHNOLOGY: tuple = (
        "software",
        "saas",
        "tech",
        "startup",
        "fintech",
        "edtech",
        "healthtech",
        "ai",
        "machine learning",
        "artificial intelligence",
    )

    MARKETING: tuple = (
        "agency",
        "advertising",
        "media",
        "publishing",
        "ecommerce",
        "retail",
        "consumer goods",
        "brand",
    )

    FINANCE: tuple = (
        "financial services",
        "banking",
        "investment",
        "insurance",
        "accounting",
        "fintech",
    )

    HEALTHCARE: tuple = (
        "healthcare",
        "medical",
        "pharmaceutical",
        "biotech",
        "hospital",
        "clinic",
    )

    CONSULTING: tuple = (
        "consulting",
        "advisory",
        "professional services",
        "strategy",
        "management consulting",
    )


# Declaration order is the tie-break priority for industry detection
INDUSTRY_KEYWORDS = MappingProxyType(
    {
        "technology": IndustryKeywords.TECHNOLOGY,
        "marketing": IndustryKeywords.MARKETING,
        "finance": IndustryKeywords.FINANCE,
        "healthcare": IndustryKeywords.HEALTHCARE,
        "consulting": IndustryKeywords.CONSULTING,
    }
)

INDUSTRY_PRIORITY = tuple(INDUSTRY_KEYWORDS)

# Fixed normalization for industry confidence (matches / 5, capped at 1.0)
INDUSTRY_CONFIDENCE_DIVISOR = 5

# =============================================================================
# EXPERIENCE LEVEL INDICATORS
# =============================================================================


@dataclass(frozen=True)
class ExperienceLevelKeywords:
    """
    Literal phrases indicating the seniority of a posting.

    Levels are scanned in declaration order and the last level with a match wins.
    The bare word "manager" is not an executive indicator: it appears in most
    individual-contributor titles ("SEO Manager").
    """

    ENTRY: tuple = (
        "entry level",
        "entry-level",
        "junior",
        "associate",
        "0-2 years",
        "new grad",
        "recent graduate",
    )

    MID: tuple = (
        "mid level",
        "mid-level",
        "experienced",
        "3-5 years",
        "2-5 years",
        "senior associate",
    )

    SENIOR: tuple = (
        "senior",
        "lead",
        "principal",
        "5+ years",
        "7+ years",
        "expert",
        "specialist",
    )

    EXECUTIVE: tuple = (
        "director",
        "vp",
        "vice president",
        "head of",
        "chief",
        "executive",
        "10+ years",
    )


EXPERIENCE_LEVEL_KEYWORDS = MappingProxyType(
    {
        "entry": ExperienceLevelKeywords.ENTRY,
        "mid": ExperienceLevelKeywords.MID,
        "senior": ExperienceLevelKeywords.SENIOR,
        "executive": ExperienceLevelKeywords.EXECUTIVE,
    }
)

EXPERIENCE_LEVELS = tuple(EXPERIENCE_LEVEL_KEYWORDS)
DEFAULT_EXPERIENCE_LEVEL = "mid"

# =============================================================================
# COMPANY CONTEXT
# =============================================================================


@dataclass(frozen=True)
class CompanyContextKeywords:
    """Phrases describing company size, culture, and values."""

    # Checked in order; first size with a match wins
    SIZE: tuple = (
        ("startup", ("startup", "small team")),
        ("enterprise", ("enterprise", "fortune")),
        ("mid-size", ("mid-size", "growing company")),
    )

    CULTURE: tuple = (
        ("innovative", ("innovative", "cutting-edge", "disruptive", "pioneering")),
        ("collaborative", ("collaborative", "team-oriented", "cross-functional", "partnership")),
        ("fast_paced", ("fast-paced", "dynamic", "agile", "rapid growth")),
        ("data_driven", ("data-driven", "analytical", "metrics", "evidence-based")),
    )

    VALUES: tuple = (
        "integrity",
        "innovation",
        "excellence",
        "customer-focused",
        "diversity",
        "inclusion",
        "sustainability",
        "quality",
    )


UNKNOWN_COMPANY_SIZE = "unknown"
