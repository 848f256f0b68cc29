"""Unit tests for fit scoring and threshold validation."""

import dataclasses
from types import SimpleNamespace

import pytest

from tailor.contexts.intake import analyze
from tailor.contexts.targeting import SchemaMismatchError, customize
from tailor.contexts.targeting.fit_scorer import (
    BELOW_THRESHOLD_WARNING,
    SCORING_WEIGHTS,
    ScoreReport,
    experience_relevance,
    keyword_density,
    generate_recommendations,
    get_quality_level,
    score,
    skills_match,
    validate_threshold,
)
from tailor.contexts.templating import SkillSet

SEO_TITLE = "Senior SEO Manager"
SEO_COMPANY = "Northwind Media"
VERSION_DATE = "2024-03-01"


@pytest.fixture
def seo_profile(seo_posting):
    return analyze(seo_posting, SEO_TITLE, SEO_COMPANY)


@pytest.fixture
def seo_document(seo_profile, candidate):
    return customize(seo_profile, candidate, version_date=VERSION_DATE)


@pytest.mark.unit
def test_weights_sum_to_one():
    assert sum(SCORING_WEIGHTS.values()) == pytest.approx(1.0)
    assert list(SCORING_WEIGHTS) == [
        "skills_match",
        "experience_relevance",
        "industry_alignment",
        "keyword_density",
        "achievements_relevance",
    ]


class TestSeoScore:
    """Score of the SEO candidate against the SEO posting."""

    @pytest.mark.unit
    def test_breakdown(self, seo_document, seo_profile):
        report = score(seo_document, seo_profile)

        assert report.breakdown["skills_match"] == 1.0
        assert report.breakdown["experience_relevance"] == 1.0
        assert report.breakdown["industry_alignment"] == pytest.approx(0.8)
        assert report.breakdown["keyword_density"] == pytest.approx(8 / 13)
        assert report.breakdown["achievements_relevance"] == pytest.approx(0.1875)

    @pytest.mark.unit
    def test_total_and_decision(self, seo_document, seo_profile):
        report = score(seo_document, seo_profile)

        assert report.total_score == pytest.approx(83.11, abs=0.01)
        assert report.meets_threshold
        assert report.quality_level == "acceptable"
        assert report.recommendations == ("Tailor achievements to match job requirements",)

    @pytest.mark.unit
    def test_scoring_is_deterministic(self, seo_document, seo_profile):
        assert score(seo_document, seo_profile) == score(seo_document, seo_profile)


@pytest.mark.unit
def test_unrelated_candidate_scores_low(seo_posting, unrelated_candidate):
    profile = analyze(seo_posting, SEO_TITLE, SEO_COMPANY)
    document = customize(profile, unrelated_candidate, version_date=VERSION_DATE)
    report = score(document, profile)

    assert report.breakdown["skills_match"] == 0.0
    assert report.breakdown["experience_relevance"] == 0.3
    assert report.total_score < 50
    assert not report.meets_threshold
    assert report.quality_level == "needs_improvement"
    assert report.recommendations[0] == BELOW_THRESHOLD_WARNING
    assert len(report.recommendations) == 6


class TestDimensions:
    """Individual dimension rules."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "level,years,expected",
        [
            ("senior", 5, 1.0),
            ("senior", 15, 1.0),
            ("senior", 16, 0.8),
            ("senior", 4, 0.8),
            ("senior", 3, 0.6),
            ("senior", 2, 0.3),
            ("entry", 0, 1.0),
            ("entry", 4, 0.8),
            ("executive", 9, 0.8),
            ("executive", 5, 0.6),
            ("executive", 4, 0.3),
        ],
    )
    def test_experience_relevance(self, level, years, expected):
        document = SimpleNamespace(experience=SimpleNamespace(years=years))
        profile = SimpleNamespace(experience_level=level)
        assert experience_relevance(document, profile) == expected

    @pytest.mark.unit
    def test_skills_match_neutral_without_job_skills(self, seo_document):
        profile = analyze("We are hiring.", "Role", "Acme")
        assert skills_match(seo_document, profile) == 0.5

    @pytest.mark.unit
    def test_skills_match_partial_credit_for_near_miss(self, seo_document, seo_profile):
        """'Link Bulding' is one edit away from 'link building' but neither contains the other."""
        near_miss = dataclasses.replace(
            seo_document, skills=SkillSet(primary=("Link Bulding",), secondary=())
        )
        assert skills_match(near_miss, seo_profile) == pytest.approx(0.5 / 7)

    @pytest.mark.unit
    def test_keyword_density_guards_short_keywords(self):
        """'ai' is credited only as a standalone word, never inside 'maintained'."""
        profile = analyze("An AI company", "Painter", "Acme")

        assert profile.keywords == frozenset({"ai"})
        assert keyword_density("maintained the painting archive", profile) == 0.0
        assert keyword_density("built ai tooling", profile) == 1.0

    @pytest.mark.unit
    def test_keyword_density_matches_substrings(self, seo_profile):
        """'tech' is credited from 'Technical SEO'."""
        assert keyword_density("technical seo audits", seo_profile) == pytest.approx(3 / 13)

    @pytest.mark.unit
    def test_adding_matching_skill_never_lowers_score(self, seo_document, seo_profile):
        fewer = dataclasses.replace(
            seo_document, skills=SkillSet(primary=("SEO Strategy",), secondary=())
        )
        more = dataclasses.replace(
            seo_document, skills=SkillSet(primary=("SEO Strategy", "Link Building"), secondary=())
        )
        assert skills_match(more, seo_profile) > skills_match(fewer, seo_profile)
        assert score(more, seo_profile).total_score >= score(fewer, seo_profile).total_score

    @pytest.mark.unit
    def test_outputs_bounded(self, seo_document, seo_profile):
        report = score(seo_document, seo_profile)
        assert 0 <= report.total_score <= 100
        assert all(0.0 <= value <= 1.0 for value in report.breakdown.values())


class TestContract:
    """Wrong types and schema versions are contract violations."""

    @pytest.mark.unit
    def test_wrong_document_type(self, seo_profile):
        with pytest.raises(SchemaMismatchError):
            score({"summary": "text"}, seo_profile)

    @pytest.mark.unit
    def test_wrong_profile_type(self, seo_document):
        with pytest.raises(TypeError):
            score(seo_document, "Senior SEO Manager")

    @pytest.mark.unit
    def test_schema_version_mismatch(self, seo_document, seo_profile):
        with pytest.raises(SchemaMismatchError, match="schema version"):
            score(dataclasses.replace(seo_document, schema_version=2), seo_profile)
        with pytest.raises(SchemaMismatchError, match="schema version"):
            score(seo_document, dataclasses.replace(seo_profile, schema_version=99))


class TestReportPolicy:
    """Quality levels, recommendations, and threshold validation."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "total,level",
        [
            (100, "excellent"),
            (95, "excellent"),
            (94.99, "good"),
            (90, "good"),
            (80, "acceptable"),
            (79.99, "needs_improvement"),
            (0, "needs_improvement"),
        ],
    )
    def test_quality_levels(self, total, level):
        assert get_quality_level(total) == level

    @pytest.mark.unit
    def test_no_recommendations_when_strong(self):
        breakdown = {name: 1.0 for name in SCORING_WEIGHTS}
        assert generate_recommendations(breakdown, 100.0) == ()

    @pytest.mark.unit
    def test_warning_comes_first_then_dimension_order(self):
        breakdown = {
            "skills_match": 0.69,
            "experience_relevance": 1.0,
            "industry_alignment": 0.59,
            "keyword_density": 0.6,
            "achievements_relevance": 0.0,
        }
        assert generate_recommendations(breakdown, 60.0) == (
            BELOW_THRESHOLD_WARNING,
            "Add more job-relevant skills to resume",
            "Include more industry-specific terminology",
            "Tailor achievements to match job requirements",
        )

    @pytest.mark.unit
    def test_validate_threshold(self):
        report = ScoreReport(
            total_score=85.0,
            breakdown={},
            meets_threshold=True,
            quality_level="acceptable",
            recommendations=("Tailor achievements to match job requirements",),
        )
        validation = validate_threshold(report)

        assert validation.is_valid
        assert validation.can_submit
        assert validation.needs_improvement
        assert validation.threshold == 80
        assert validation.score == 85.0
        assert validation.recommendations == report.recommendations

    @pytest.mark.unit
    def test_validate_threshold_below(self):
        report = ScoreReport(
            total_score=79.99, breakdown={}, meets_threshold=False, quality_level="needs_improvement"
        )
        validation = validate_threshold(report)
        assert not validation.can_submit
        assert not validation.is_valid

    @pytest.mark.unit
    def test_report_to_dict(self, seo_document, seo_profile):
        data = score(seo_document, seo_profile).to_dict()
        assert set(data) == {
            "total_score",
            "breakdown",
            "meets_threshold",
            "quality_level",
            "recommendations",
        }
        assert isinstance(data["recommendations"], list)
