"""
Intake Context

Responsibilities:
- Normalizes raw job posting text
- Extracts skills by category, industry, seniority, and qualification bullets
- Produces the immutable JobProfile consumed by the Targeting context

Owns: Job posting analysis and the keyword tables it relies on
Never: Makes targeting decisions or reads candidate data
"""

from tailor.contexts.intake.job_profile import (
    JOB_PROFILE_SCHEMA_VERSION,
    CompanyContext,
    IndustryContext,
    JobProfile,
)
from tailor.contexts.intake.requirement_extractor import analyze

__all__ = [
    "analyze",
    "JobProfile",
    "IndustryContext",
    "CompanyContext",
    "JOB_PROFILE_SCHEMA_VERSION",
]
