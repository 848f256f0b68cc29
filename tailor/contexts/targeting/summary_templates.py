"""
Professional summary skeletons, one per template kind.

Skeletons are small Jinja2 templates held in a DictLoader. Each is filled with
the candidate's years in the source domain, a title variant derived from the job
title, up to three matched skills, and the detected industry name.
"""

from typing import Sequence

from jinja2 import DictLoader, Environment, StrictUndefined

# Number of skills named in a summary
SUMMARY_SKILL_COUNT = 3

SUMMARY_SKELETONS = {
    "technical": (
        "Experienced {{ years }}+ year {{ title_variant }} specializing in full-stack "
        "development, cloud architecture, and scalable web applications. "
        "{% if skills %}Proficient in {{ skills | join(', ') }}, with{% else %}With{% endif %} "
        "experience building enterprise-grade solutions for the {{ industry }} industry."
    ),
    "seo": (
        "Experienced {{ years }}+ year {{ title_variant }} with proven track record in "
        "search engine optimization, digital marketing, and organic growth. "
        "{% if skills %}Expertise in {{ skills | join(', ') }}, with{% else %}With{% endif %} "
        "demonstrated success improving search rankings in the {{ industry }} industry."
    ),
    "marketing": (
        "Experienced {{ years }}+ year {{ title_variant }} with expertise in digital "
        "marketing, content strategy, and lead generation. "
        "{% if skills %}Skilled in {{ skills | join(', ') }}, with{% else %}With{% endif %} "
        "proven ability to drive customer acquisition in the {{ industry }} industry."
    ),
    "leadership": (
        "Experienced {{ years }}+ year {{ title_variant }} with extensive experience in "
        "team leadership, project management, and strategic planning. "
        "{% if skills %}Strengths include {{ skills | join(', ') }}, with{% else %}With{% endif %} "
        "a record of leading cross-functional teams in the {{ industry }} industry."
    ),
    "hybrid": (
        "Experienced {{ years }}+ year {{ title_variant }} combining technical expertise "
        "with business acumen and leadership skills. "
        "{% if skills %}Versatile across {{ skills | join(', ') }}, with{% else %}With{% endif %} "
        "experience in software development, digital marketing, and team management "
        "across the {{ industry }} industry."
    ),
}

_env = Environment(
    loader=DictLoader(SUMMARY_SKELETONS),
    undefined=StrictUndefined,
    autoescape=False,
)


def get_title_variant(job_title: str) -> str:
    """
    Map a job title onto the role name used in summaries and the experience entry.

    Example:
        >>> get_title_variant("Senior SEO Manager")
        'SEO Specialist'
    """
    title = (job_title or "").lower()
    if "seo" in title:
        return "SEO Specialist"
    if "marketing" in title:
        return "Digital Marketing Professional"
    if "engineer" in title or "developer" in title:
        return "Software Engineer"
    if "lead" in title or "manager" in title:
        return "Technical Leader"
    return "Technology Professional"


def render_summary(
    template_kind: str, years: int, job_title: str, skills: Sequence[str], industry: str
) -> str:
    """
    Fill the skeleton for a template kind.

    Args:
        template_kind: technical | seo | marketing | leadership | hybrid
        years: Years of experience in the source domain
        job_title: Job title the variant is derived from
        skills: Matched skills, most relevant first (only the first three are used)
        industry: Detected industry name

    Returns:
        Summary text
    """
    template = _env.get_template(template_kind)
    return template.render(
        years=years,
        title_variant=get_title_variant(job_title),
        skills=list(skills)[:SUMMARY_SKILL_COUNT],
        industry=industry,
    )
