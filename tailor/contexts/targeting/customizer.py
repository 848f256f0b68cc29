"""
Document customizer: builds a CustomizedDocument from a JobProfile and a CandidateProfile.

Steps:
1. Select a template kind from the job's skill counts (hybrid for diverse postings)
2. Resolve the candidate content for that kind (blend for hybrid, fallback when missing)
3. Prioritize skills against the job keywords
4. Tailor achievements to the job's industry without touching their numbers
5. Assemble summary, experience entry, credentials, notes and version id

Deterministic given identical inputs and version_date. Neither input is modified.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Optional, Sequence, Tuple

from tailor.contexts.intake.job_profile import JobProfile
from tailor.contexts.targeting.candidate_profile import (
    CandidateProfile,
    ExperienceBlock,
    credentials_for,
)
from tailor.contexts.targeting.exceptions import SchemaMismatchError
from tailor.contexts.targeting.logger import _log_debug, log_customization_result
from tailor.contexts.targeting.summary_templates import get_title_variant, render_summary
from tailor.contexts.templating.customized_document import (
    HYBRID_TEMPLATE,
    MAX_ACHIEVEMENTS,
    MAX_EXPERIENCE_ACHIEVEMENTS,
    MAX_EXPERIENCE_SKILLS,
    MAX_PRIMARY_SKILLS,
    MAX_SECONDARY_SKILLS,
    CustomizedDocument,
    ExperienceEntry,
    SkillSet,
)
from tailor.utils.text_processing import (
    contains_term,
    numeric_tokens,
    strip_non_alphanumeric,
    terms_overlap,
)
from tailor.utils.timestamp import format_date

# Skill categories that drive template selection; on equal counts the later one wins
SELECTION_CATEGORIES = ("technical", "seo", "marketing", "leadership")

# Hybrid when at least this many categories match and the total exceeds HYBRID_MIN_TOTAL
HYBRID_MIN_CATEGORIES = 3
HYBRID_MIN_TOTAL = 8

EXPERIENCE_COMPANY = "Various Organizations"
VERSION_TITLE_LENGTH = 20


@dataclass(frozen=True)
class AchievementRewrite:
    """
    Industry-specific phrasing substitutions for achievements.

    Attributes:
        industry: Primary industry that triggers the rewrite
        skip_if_present: Achievements already containing this word are left alone
        replacements: (old, new) pairs, each applied to the first occurrence
    """

    industry: str
    skip_if_present: str
    replacements: Tuple[Tuple[str, str], ...]


ACHIEVEMENT_REWRITES = (
    AchievementRewrite(
        industry="technology",
        skip_if_present="tech",
        replacements=(("applications", "technology solutions"),),
    ),
    AchievementRewrite(
        industry="marketing",
        skip_if_present="marketing",
        replacements=(("users", "customers"), ("traffic", "engagement")),
    ),
)


# =============================================================================
# TEMPLATE SELECTION
# =============================================================================


def select_template(job_profile: JobProfile) -> str:
    """
    Choose the template kind for a job.

    The category with the most matched skills wins (ties go to the later
    category in SELECTION_CATEGORIES). Postings that match at least three
    categories with more than eight matches in total get the hybrid template,
    even when one category has the highest count.

    Args:
        job_profile: Analyzed job posting

    Returns:
        technical | seo | marketing | leadership | hybrid
    """
    counts = {category: len(job_profile.skills_in(category)) for category in SELECTION_CATEGORIES}

    diversity = sum(1 for count in counts.values() if count > 0)
    total = sum(counts.values())
    if diversity >= HYBRID_MIN_CATEGORIES and total > HYBRID_MIN_TOTAL:
        return HYBRID_TEMPLATE

    best = SELECTION_CATEGORIES[0]
    for category in SELECTION_CATEGORIES[1:]:
        if counts[category] >= counts[best]:
            best = category
    return best


# =============================================================================
# SOURCE CONTENT
# =============================================================================


def _dedupe(items: Iterable[str]) -> List[str]:
    """Case-insensitive dedupe keeping first occurrences."""
    seen = set()
    result = []
    for item in items:
        if item.lower() not in seen:
            seen.add(item.lower())
            result.append(item)
    return result


def blend_blocks(blocks: Sequence[ExperienceBlock]) -> ExperienceBlock:
    """
    Merge experience blocks for the hybrid template.

    Skills are concatenated in block order and deduplicated, achievements are
    interleaved round-robin so every domain is represented near the top, and
    years is the maximum across blocks.
    """
    if not blocks:
        return ExperienceBlock()

    skills = _dedupe(skill for block in blocks for skill in block.skills)

    achievements = []
    depth = max(len(block.achievements) for block in blocks)
    for i in range(depth):
        for block in blocks:
            if i < len(block.achievements):
                achievements.append(block.achievements[i])

    return ExperienceBlock(
        years=max(block.years for block in blocks),
        skills=tuple(skills),
        achievements=tuple(_dedupe(achievements)),
    )


def resolve_source(
    template_kind: str, candidate: CandidateProfile
) -> Tuple[str, ExperienceBlock, Optional[str]]:
    """
    Find the candidate content backing a template kind.

    Args:
        template_kind: Selected template kind
        candidate: Candidate profile

    Returns:
        Tuple of (source_domain, block, degraded_reason). degraded_reason is None
        when the template kind's own data was used.
    """
    if template_kind == HYBRID_TEMPLATE:
        blocks = [candidate.block(d) for d in candidate.domains() if candidate.has_data_for(d)]
        if blocks:
            return HYBRID_TEMPLATE, blend_blocks(blocks), None
    elif candidate.has_data_for(template_kind):
        return template_kind, candidate.block(template_kind), None

    fallback = candidate.fallback_domain
    if fallback is None:
        return template_kind, ExperienceBlock(), "Candidate profile has no experience data"

    reason = f"No candidate data for '{template_kind}'; used '{fallback}' experience"
    return fallback, candidate.block(fallback), reason


# =============================================================================
# CONTENT TAILORING
# =============================================================================


def prioritize_skills(skills: Sequence[str], keywords: Iterable[str]) -> SkillSet:
    """
    Split candidate skills into primary (matching a job keyword) and secondary.

    A skill matches when it contains a keyword as a substring or the keyword
    contains it, case-insensitively. Candidate order is kept. Matched skills
    beyond the primary cap are dropped rather than demoted.

    Example:
        >>> prioritize_skills(["SEO Strategy", "Python", "Figma"], {"seo", "python"})
        SkillSet(primary=('SEO Strategy', 'Python'), secondary=('Figma',))
    """
    keywords = sorted(keywords)
    matched = []
    unmatched = []
    for skill in skills:
        if any(terms_overlap(skill, keyword) for keyword in keywords):
            matched.append(skill)
        else:
            unmatched.append(skill)

    return SkillSet(
        primary=tuple(matched[:MAX_PRIMARY_SKILLS]),
        secondary=tuple(unmatched[:MAX_SECONDARY_SKILLS]),
    )


def tailor_achievement(achievement: str, industry: str) -> str:
    """
    Rephrase an achievement for the job's industry.

    Substitutions that would change the achievement's numeric tokens are
    discarded, so quantities always survive verbatim.

    Example:
        >>> tailor_achievement("Grew traffic by 300% for 2M users", "marketing")
        'Grew engagement by 300% for 2M customers'
    """
    for rewrite in ACHIEVEMENT_REWRITES:
        if rewrite.industry != industry or rewrite.skip_if_present in achievement.lower():
            continue
        for old, new in rewrite.replacements:
            candidate = achievement.replace(old, new, 1)
            if numeric_tokens(candidate) == numeric_tokens(achievement):
                achievement = candidate
    return achievement


def tailor_achievements(achievements: Sequence[str], industry: str) -> Tuple[str, ...]:
    """Tailor the first MAX_ACHIEVEMENTS achievements."""
    return tuple(tailor_achievement(a, industry) for a in achievements[:MAX_ACHIEVEMENTS])


def build_experience_entry(
    block: ExperienceBlock, job_profile: JobProfile, achievements: Sequence[str]
) -> ExperienceEntry:
    """Experience entry: title variant, tailored achievements, and keyword-matching tools."""
    keywords = sorted(job_profile.keywords)
    skills = [
        skill for skill in block.skills if any(contains_term(skill, kw) for kw in keywords)
    ]
    return ExperienceEntry(
        title=f"Senior {get_title_variant(job_profile.title)}",
        company=EXPERIENCE_COMPANY,
        years=block.years,
        achievements=tuple(achievements[:MAX_EXPERIENCE_ACHIEVEMENTS]),
        skills=tuple(skills[:MAX_EXPERIENCE_SKILLS]),
    )


def build_version(title: str, company: str, version_date=None) -> str:
    """
    Traceability id: "{title[:20]}_{company}_{YYYY-MM-DD}" with non-alphanumerics removed.

    Never raises. Distinct postings can share an id.

    Example:
        >>> build_version("Senior SEO Manager", "Acme, Inc.", "2024-03-01")
        'SeniorSEOManager_AcmeInc_2024-03-01'
    """
    title_part = strip_non_alphanumeric(title)[:VERSION_TITLE_LENGTH]
    company_part = strip_non_alphanumeric(company)
    return f"{title_part}_{company_part}_{format_date(version_date)}"


def build_customization_notes(
    template_kind: str,
    skills: SkillSet,
    job_profile: JobProfile,
    source_domain: str,
    degraded_reason: Optional[str],
) -> Tuple[str, ...]:
    """Human-readable notes describing what was tailored."""
    notes = [
        f"Used {template_kind} template for optimal job alignment",
        f"Emphasized {len(skills.primary)} relevant skills",
        f"Tailored for {job_profile.industry.primary} industry",
        f"Customized for {job_profile.experience_level} level position",
    ]
    if degraded_reason:
        notes.append(f"Fallback to {source_domain} content: {degraded_reason}")
    return tuple(notes)


# =============================================================================
# PUBLIC ENTRY POINT
# =============================================================================


def customize(
    job_profile: JobProfile, candidate: CandidateProfile, *, version_date=None
) -> CustomizedDocument:
    """
    Generate a document tailored to a job profile.

    Args:
        job_profile: Output of the intake context
        candidate: Normalized candidate profile
        version_date: Date used in the version id (date, datetime or ISO string;
            defaults to today)

    Returns:
        CustomizedDocument. When the selected template has no candidate data the
        fallback domain is used and the document is flagged degraded.

    Raises:
        SchemaMismatchError: If an argument has the wrong type
    """
    if not isinstance(job_profile, JobProfile):
        raise SchemaMismatchError(
            "customize() expects a JobProfile", "JobProfile", type(job_profile).__name__
        )
    if not isinstance(candidate, CandidateProfile):
        raise SchemaMismatchError(
            "customize() expects a CandidateProfile",
            "CandidateProfile",
            type(candidate).__name__,
        )

    template_kind = select_template(job_profile)
    _log_debug(f"Selected {template_kind} template (skill counts: {job_profile.skill_counts()})")

    source_domain, block, degraded_reason = resolve_source(template_kind, candidate)

    skills = prioritize_skills(block.skills, job_profile.keywords)
    achievements = tailor_achievements(block.achievements, job_profile.industry.primary)
    summary_skills = skills.primary or block.skills

    header = {"name": candidate.name} if candidate.name else {}
    header.update(candidate.contact)
    header = MappingProxyType(header)

    document = CustomizedDocument(
        template_kind=template_kind,
        source_domain=source_domain,
        summary=render_summary(
            template_kind,
            years=block.years,
            job_title=job_profile.title,
            skills=summary_skills,
            industry=job_profile.industry.primary,
        ),
        skills=skills,
        achievements=achievements,
        experience=build_experience_entry(block, job_profile, achievements),
        header=header,
        education=tuple(credentials_for(candidate.education, template_kind)),
        certifications=tuple(credentials_for(candidate.certifications, template_kind)),
        customizations=build_customization_notes(
            template_kind, skills, job_profile, source_domain, degraded_reason
        ),
        version=build_version(job_profile.title, job_profile.company, version_date),
        degraded=degraded_reason is not None,
        degraded_reason=degraded_reason,
    )

    log_customization_result(document)
    return document
