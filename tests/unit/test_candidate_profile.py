"""Unit tests for candidate profile loading and normalization."""

import pytest

from tailor.contexts.targeting import CandidateProfile, CandidateProfileError
from tailor.contexts.targeting.candidate_profile import (
    credentials_for,
    normalize_credential,
    normalize_skills,
    normalize_years,
)


class TestNormalizeSkills:
    """Skill entries of mixed shapes become ordered names."""

    @pytest.mark.unit
    def test_plain_names_keep_order(self):
        assert normalize_skills(["Python", "SQL", "AWS"]) == ("Python", "SQL", "AWS")

    @pytest.mark.unit
    def test_mixed_shapes_sorted_by_weight(self):
        entries = [
            "Python",
            {"name": "SQL", "weight": 3},
            {"Docker": 5},
            {"name": "AWS"},
        ]
        assert normalize_skills(entries) == ("Docker", "SQL", "Python", "AWS")

    @pytest.mark.unit
    def test_equal_weights_are_stable(self):
        entries = [{"B": 1}, {"A": 1}, {"C": 2}]
        assert normalize_skills(entries) == ("C", "B", "A")

    @pytest.mark.unit
    def test_case_insensitive_dedupe(self):
        assert normalize_skills(["SEO", "seo", "Seo Strategy"]) == ("SEO", "Seo Strategy")

    @pytest.mark.unit
    def test_none_is_empty(self):
        assert normalize_skills(None) == ()

    @pytest.mark.unit
    @pytest.mark.parametrize("entry", [42, {"name": ""}, {"a": 1, "b": 2}, {"name": "X", "weight": "high"}])
    def test_malformed_entries_raise(self, entry):
        with pytest.raises(CandidateProfileError) as exc_info:
            normalize_skills([entry], "experience.seo.skills")
        assert exc_info.value.field_path == "experience.seo.skills[0]"


class TestNormalizeYears:
    """Years coercion."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected", [(5, 5), (7.9, 7), ("5", 5), ("5+ years", 5), (None, 0)]
    )
    def test_coercion(self, value, expected):
        assert normalize_years(value) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [True, -1, "many", [3], float("inf"), float("-inf"), float("nan")])
    def test_invalid_years_raise(self, value):
        with pytest.raises(CandidateProfileError):
            normalize_years(value)

    @pytest.mark.unit
    def test_infinite_years_in_yaml_raise(self, tmp_path):
        """YAML reads .inf as a float; it must be rejected, not crash int()."""
        path = tmp_path / "profile.yaml"
        path.write_text("experience:\n  seo:\n    years: .inf\n", encoding="utf-8")

        with pytest.raises(CandidateProfileError) as exc_info:
            CandidateProfile.from_file(path)
        assert exc_info.value.field_path == "experience.seo.years"


@pytest.mark.unit
def test_normalize_credential_accepts_aliases():
    credential = normalize_credential(
        {"degree": "MS Computer Science", "school": "State University", "year": 2010, "relevant": "technical"},
        "education[0]",
    )
    assert credential.name == "MS Computer Science"
    assert credential.institution == "State University"
    assert credential.year == "2010"
    assert credential.relevant_domains == ("technical",)


@pytest.mark.unit
def test_normalize_credential_requires_name():
    with pytest.raises(CandidateProfileError, match="name or degree"):
        normalize_credential({"school": "Somewhere"}, "education[0]")


class TestCandidateProfile:
    """Profile construction and lookups."""

    @pytest.mark.unit
    def test_from_file(self, candidate):
        assert candidate.name == "Jordan Avery"
        assert candidate.domains() == ("technical", "seo", "leadership", "marketing")
        assert candidate.block("seo").years == 5
        assert candidate.block("seo").skills[0] == "SEO Strategy"
        assert len(candidate.block("technical").achievements) == 4
        assert candidate.contact["email"] == "jordan.avery@example.com"
        assert len(candidate.education) == 2
        assert len(candidate.certifications) == 4

    @pytest.mark.unit
    def test_contact_fields_at_top_level(self):
        profile = CandidateProfile.from_dict({"name": "A", "email": "a@example.com"})
        assert dict(profile.contact) == {"email": "a@example.com"}

    @pytest.mark.unit
    def test_default_domain_must_exist(self):
        with pytest.raises(CandidateProfileError, match="default_domain"):
            CandidateProfile.from_dict(
                {"experience": {"seo": {"skills": ["SEO"]}}, "default_domain": "marketing"}
            )

    @pytest.mark.unit
    def test_fallback_domain_priority(self):
        data = {
            "experience": {
                "marketing": {"skills": ["Email Marketing"]},
                "technical": {"skills": ["Python"]},
                "seo": {"skills": ["SEO"]},
            }
        }
        assert CandidateProfile.from_dict(data).fallback_domain == "technical"
        assert CandidateProfile.from_dict({**data, "default_domain": "seo"}).fallback_domain == "seo"

    @pytest.mark.unit
    def test_fallback_skips_empty_blocks(self):
        profile = CandidateProfile.from_dict(
            {"experience": {"technical": {"years": 3}, "marketing": {"skills": ["SEO"]}}}
        )
        assert not profile.has_data_for("technical")
        assert profile.fallback_domain == "marketing"

    @pytest.mark.unit
    def test_no_experience(self):
        profile = CandidateProfile.from_dict({"name": "Empty"})
        assert profile.domains() == ()
        assert profile.fallback_domain is None

    @pytest.mark.unit
    def test_profile_is_read_only(self, candidate):
        with pytest.raises(TypeError):
            candidate.experience["seo"] = None

    @pytest.mark.unit
    def test_invalid_root_raises(self):
        with pytest.raises(CandidateProfileError):
            CandidateProfile.from_dict(["not", "a", "mapping"])

    @pytest.mark.unit
    def test_to_dict_round_trips_normalized_data(self, candidate):
        assert CandidateProfile.from_dict(candidate.to_dict()) == candidate


@pytest.mark.unit
def test_credentials_for(candidate):
    names = [c.name for c in credentials_for(candidate.certifications, "seo")]
    assert names == ["Google Analytics Certified", "Google Ads Certified"]
    assert len(credentials_for(candidate.certifications, "hybrid")) == 4
