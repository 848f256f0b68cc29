"""
Integration tests for the full pipeline: posting -> profile -> document -> score.
"""

import json

import pytest

from tailor import run_pipeline
from tailor.contexts.targeting.fit_scorer import BELOW_THRESHOLD_WARNING, MATCH_THRESHOLD

VERSION_DATE = "2024-03-01"


@pytest.mark.integration
def test_seo_posting_meets_threshold(seo_posting, candidate):
    """An SEO candidate applying to an SEO posting clears the threshold."""
    result = run_pipeline(
        "Senior SEO Manager", "Northwind Media", seo_posting, candidate, version_date=VERSION_DATE
    )

    assert result.job_profile.industry.primary == "marketing"
    assert result.job_profile.experience_level == "senior"
    assert result.document.template_kind == "seo"
    assert not result.document.degraded
    assert result.document.version == "SeniorSEOManager_NorthwindMedia_2024-03-01"
    assert result.report.total_score >= MATCH_THRESHOLD
    assert result.report.quality_level == "acceptable"
    assert result.validation.can_submit
    assert result.validation.needs_improvement


@pytest.mark.integration
def test_unrelated_candidate_fails_threshold(seo_posting, unrelated_candidate):
    """A candidate with nothing relevant is flagged with the warning first."""
    result = run_pipeline(
        "Senior SEO Manager",
        "Northwind Media",
        seo_posting,
        unrelated_candidate,
        version_date=VERSION_DATE,
    )

    assert result.document.degraded
    assert result.document.source_domain == "technical"
    assert result.document.customizations[-1].startswith("Fallback to technical content")
    assert not result.validation.can_submit
    assert not result.validation.is_valid
    assert result.report.recommendations[0] == BELOW_THRESHOLD_WARNING


@pytest.mark.integration
def test_diverse_posting_uses_hybrid(platform_posting, candidate):
    """Postings spanning several skill categories blend every candidate domain."""
    result = run_pipeline(
        "Platform Engineer", "Initech", platform_posting, candidate, version_date=VERSION_DATE
    )
    document = result.document

    assert document.template_kind == "hybrid"
    assert document.source_domain == "hybrid"
    assert not document.degraded
    assert document.experience.years == 15
    assert "SEO Strategy" in document.skills.primary
    assert "Python" in document.skills.primary
    assert len(document.education) == 2
    assert len(document.certifications) == 4


@pytest.mark.integration
def test_empty_inputs_do_not_raise(candidate):
    """Blank postings produce a neutral, low-confidence result."""
    result = run_pipeline("", "", "", candidate, version_date=VERSION_DATE)

    assert result.job_profile.industry.confidence == 0
    assert result.document.template_kind == "leadership"
    assert result.report.total_score == pytest.approx(50.0)
    assert not result.validation.can_submit


@pytest.mark.integration
def test_pipeline_is_deterministic(seo_posting, candidate):
    """Identical inputs and version date give identical results."""
    first = run_pipeline("Senior SEO Manager", "Northwind Media", seo_posting, candidate, version_date=VERSION_DATE)
    second = run_pipeline("Senior SEO Manager", "Northwind Media", seo_posting, candidate, version_date=VERSION_DATE)

    assert first.to_dict() == second.to_dict()


@pytest.mark.integration
def test_result_is_json_serializable(seo_posting, candidate):
    result = run_pipeline(
        "Senior SEO Manager", "Northwind Media", seo_posting, candidate, version_date=VERSION_DATE
    )
    data = json.loads(json.dumps(result.to_dict()))

    assert set(data) == {"job_profile", "document", "report", "validation"}
    assert data["document"]["template_kind"] == "seo"
    assert data["validation"]["threshold"] == MATCH_THRESHOLD
