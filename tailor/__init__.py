"""
TAILOR - Targeted Applicant Itemization via Listing-Oriented Requirements

A three-stage text-analysis pipeline that turns a raw job posting into a structured
requirement profile, tailors a candidate document to it, and scores the fit.

Architecture:
- Intake Context: Posting normalization and requirement extraction
- Targeting Context: Candidate profile, content prioritization, and fit scoring
- Templating Context: Tailored document structure and text rendering
"""

__version__ = "0.1.0"

from tailor.contexts.intake import JobProfile, analyze
from tailor.contexts.targeting import (
    CandidateProfile,
    ScoreReport,
    customize,
    score,
    validate_threshold,
)
from tailor.contexts.templating import CustomizedDocument
from tailor.pipeline import PipelineResult, run_pipeline

__all__ = [
    "analyze",
    "customize",
    "score",
    "validate_threshold",
    "run_pipeline",
    "CandidateProfile",
    "JobProfile",
    "CustomizedDocument",
    "ScoreReport",
    "PipelineResult",
]
