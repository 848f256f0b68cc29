"""Shared fixtures: sample postings and candidate profiles."""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from tailor.contexts.targeting import CandidateProfile

load_dotenv()
FIXTURES_PATH = Path(os.getenv("TAILOR_FIXTURES_PATH", Path(__file__).parent / "fixtures"))


@pytest.fixture
def seo_posting() -> str:
    return (FIXTURES_PATH / "seo_manager_posting.md").read_text(encoding="utf-8")


@pytest.fixture
def platform_posting() -> str:
    return (FIXTURES_PATH / "platform_engineer_posting.md").read_text(encoding="utf-8")


@pytest.fixture
def candidate() -> CandidateProfile:
    """Four-domain candidate (technical, seo, leadership, marketing)."""
    return CandidateProfile.from_file(FIXTURES_PATH / "candidate_profile.yaml")


@pytest.fixture
def unrelated_candidate() -> CandidateProfile:
    """Candidate whose only domain shares nothing with typical postings."""
    return CandidateProfile.from_dict(
        {
            "name": "Casey Doe",
            "experience": {
                "technical": {
                    "years": 1,
                    "skills": ["Watercolor Painting", "Pottery", "Calligraphy"],
                    "achievements": ["Sold 12 paintings at a local fair"],
                }
            },
        }
    )
