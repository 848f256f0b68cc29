"""
Targeting Context

Responsibilities:
- Loads and normalizes the static candidate profile
- Selects a template kind and tailors candidate content to a JobProfile
- Scores the tailored document against the JobProfile and validates the threshold

Owns: Content prioritization decisions and fit scoring policy
Never: Parses raw posting text or renders documents itself
"""

from tailor.contexts.targeting.candidate_profile import CandidateProfile, ExperienceBlock
from tailor.contexts.targeting.customizer import customize, select_template
from tailor.contexts.targeting.exceptions import CandidateProfileError, SchemaMismatchError
from tailor.contexts.targeting.fit_scorer import (
    MATCH_THRESHOLD,
    SCORING_WEIGHTS,
    ScoreReport,
    ThresholdValidation,
    score,
    validate_threshold,
)

__all__ = [
    # Candidate data
    "CandidateProfile",
    "ExperienceBlock",
    # Customization
    "customize",
    "select_template",
    # Scoring
    "score",
    "validate_threshold",
    "ScoreReport",
    "ThresholdValidation",
    "MATCH_THRESHOLD",
    "SCORING_WEIGHTS",
    # Exceptions
    "CandidateProfileError",
    "SchemaMismatchError",
]
