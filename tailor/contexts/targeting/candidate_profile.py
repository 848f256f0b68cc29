"""
Candidate profile for the Targeting context.

The candidate profile is static, pre-authored data: one experience block per
domain (years, skills, achievements) plus education and certifications tagged
with the domains they support. It is loaded once (YAML through OmegaConf, or a
plain dict) and normalized at that boundary so the customizer never has to deal
with loosely typed entries.

Accepted skill entry shapes (normalized to plain names):
    - "Google Analytics"                      plain name
    - {name: "Google Analytics", weight: 3}   weighted record
    - {"Google Analytics": 3}                 single-key weighted record

Skills are ordered by descending weight (unweighted entries count as 0, ties keep
the authored order) and deduplicated case-insensitively.

Example YAML:
    name: Jordan Avery
    contact:
      email: jordan@example.com
    default_domain: technical
    experience:
      seo:
        years: 5
        skills: [SEO Strategy, {name: Google Analytics, weight: 2}]
        achievements:
          - Increased organic traffic by 300% through comprehensive SEO strategy
    education:
      - degree: Master of Science in Computer Science
        school: Stanford University
        year: 2010
        relevant: [technical, leadership]
"""

import math
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

from tailor.contexts.targeting.exceptions import CandidateProfileError
from tailor.contexts.templating.customized_document import Credential

load_dotenv()
CANDIDATE_PROFILE_PATH = os.getenv("CANDIDATE_PROFILE_PATH", "data/candidate_profile.yaml")

# Preferred fallback domain when the profile does not name one
GENERAL_DOMAIN = "technical"

CONTACT_FIELDS = ("email", "phone", "location", "linkedin")


@dataclass(frozen=True)
class ExperienceBlock:
    """
    Candidate experience in one domain.

    Attributes:
        years: Years of experience in the domain
        skills: Skill names ordered by relevance
        achievements: Quantified achievement statements, in authored order
    """

    years: int = 0
    skills: Tuple[str, ...] = ()
    achievements: Tuple[str, ...] = ()

    def is_empty(self) -> bool:
        """True when the block has neither skills nor achievements."""
        return not self.skills and not self.achievements


# =============================================================================
# NORMALIZATION
# =============================================================================


def _normalize_skill_entry(entry: Any, field_path: str) -> Tuple[str, float]:
    """Coerce one skill entry into (name, weight)."""
    if isinstance(entry, str):
        name, weight = entry, 0.0
    elif isinstance(entry, Mapping) and "name" in entry:
        name, weight = entry["name"], entry.get("weight", 0.0)
    elif isinstance(entry, Mapping) and len(entry) == 1:
        ((name, weight),) = entry.items()
    else:
        raise CandidateProfileError("Unrecognized skill entry", field_path, entry)

    if not isinstance(name, str) or not name.strip():
        raise CandidateProfileError("Skill name must be a non-empty string", field_path, entry)
    if weight is None:
        weight = 0.0
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise CandidateProfileError("Skill weight must be a number", field_path, entry)

    return name.strip(), float(weight)


def normalize_skills(entries: Any, field_path: str = "skills") -> Tuple[str, ...]:
    """
    Normalize a list of skill entries into names ordered by relevance.

    Args:
        entries: List of skill entries (see module docstring for accepted shapes)
        field_path: Dotted path used in error messages

    Returns:
        Deduplicated skill names, highest weight first

    Raises:
        CandidateProfileError: If an entry has an unrecognized shape
    """
    if entries is None:
        return ()
    if isinstance(entries, (str, Mapping)):
        entries = [entries]

    normalized = [
        _normalize_skill_entry(entry, f"{field_path}[{i}]") for i, entry in enumerate(entries)
    ]
    # sorted() is stable, so equal weights keep authored order
    ranked = sorted(normalized, key=lambda pair: -pair[1])

    seen = set()
    names = []
    for name, _ in ranked:
        if name.lower() not in seen:
            seen.add(name.lower())
            names.append(name)
    return tuple(names)


def normalize_years(value: Any, field_path: str = "years") -> int:
    """
    Coerce a years value into a non-negative integer.

    Accepts ints, floats (truncated), and strings such as "5" or "5+ years".

    Raises:
        CandidateProfileError: If no finite number can be read or it is negative
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise CandidateProfileError("Years must be a number", field_path, value)
    if isinstance(value, float) and not math.isfinite(value):
        raise CandidateProfileError("Years must be a finite number", field_path, value)
    if isinstance(value, (int, float)):
        years = int(value)
    elif isinstance(value, str):
        match = re.search(r"\d+", value)
        if not match:
            raise CandidateProfileError("Years must contain a number", field_path, value)
        years = int(match.group(0))
    else:
        raise CandidateProfileError("Years must be a number", field_path, value)

    if years < 0:
        raise CandidateProfileError("Years must not be negative", field_path, value)
    return years


def normalize_achievements(entries: Any, field_path: str = "achievements") -> Tuple[str, ...]:
    """Normalize achievements into a tuple of non-empty strings."""
    if entries is None:
        return ()
    if isinstance(entries, str):
        entries = [entries]

    achievements = []
    for i, entry in enumerate(entries):
        if isinstance(entry, (Mapping, list, tuple)):
            raise CandidateProfileError("Achievement must be text", f"{field_path}[{i}]", entry)
        text = str(entry).strip()
        if text:
            achievements.append(text)
    return tuple(achievements)


def normalize_credential(entry: Any, field_path: str) -> Credential:
    """
    Normalize an education or certification entry.

    Accepts "name" or "degree" for the title, "institution", "school" or "issuer"
    for the awarding body, and "relevant" or "relevant_domains" for the domains
    (a single domain string is allowed).
    """
    if isinstance(entry, str):
        return Credential(name=entry.strip())
    if not isinstance(entry, Mapping):
        raise CandidateProfileError("Unrecognized credential entry", field_path, entry)

    name = entry.get("name") or entry.get("degree")
    if not isinstance(name, str) or not name.strip():
        raise CandidateProfileError("Credential needs a name or degree", field_path, entry)

    relevant = entry.get("relevant_domains", entry.get("relevant")) or ()
    if isinstance(relevant, str):
        relevant = (relevant,)

    institution = entry.get("institution") or entry.get("school") or entry.get("issuer")
    year = entry.get("year")

    return Credential(
        name=name.strip(),
        relevant_domains=tuple(str(domain) for domain in relevant),
        institution=str(institution) if institution else None,
        year=str(year) if year is not None else None,
    )


def normalize_experience_block(data: Any, field_path: str) -> ExperienceBlock:
    """Normalize one domain's experience data into an ExperienceBlock."""
    if data is None:
        return ExperienceBlock()
    if not isinstance(data, Mapping):
        raise CandidateProfileError("Experience block must be a mapping", field_path, data)

    return ExperienceBlock(
        years=normalize_years(data.get("years"), f"{field_path}.years"),
        skills=normalize_skills(data.get("skills"), f"{field_path}.skills"),
        achievements=normalize_achievements(
            data.get("achievements"), f"{field_path}.achievements"
        ),
    )


# =============================================================================
# CANDIDATE PROFILE
# =============================================================================


@dataclass(frozen=True)
class CandidateProfile:
    """
    Static description of the applicant.

    Factory methods:
        from_dict(data) - Normalize a plain dict
        from_file(path) - Load YAML with OmegaConf (defaults to CANDIDATE_PROFILE_PATH)

    Attributes:
        name: Candidate name
        contact: Contact fields (email, phone, location, linkedin)
        experience: Domain -> ExperienceBlock, in authored order
        education: Education entries
        certifications: Certification entries
        default_domain: Domain used when the selected one has no data
    """

    name: str = ""
    contact: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    experience: Mapping[str, ExperienceBlock] = field(
        default_factory=lambda: MappingProxyType({})
    )
    education: Tuple[Credential, ...] = ()
    certifications: Tuple[Credential, ...] = ()
    default_domain: Optional[str] = None

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CandidateProfile":
        """
        Build a normalized CandidateProfile from plain data.

        Args:
            data: Profile data (see module docstring)

        Returns:
            CandidateProfile

        Raises:
            CandidateProfileError: If any entry cannot be normalized
        """
        if not isinstance(data, Mapping):
            raise CandidateProfileError("Candidate profile must be a mapping", value=data)

        experience_data = data.get("experience") or {}
        if not isinstance(experience_data, Mapping):
            raise CandidateProfileError(
                "Experience must map domains to blocks", "experience", experience_data
            )
        experience = {
            str(domain): normalize_experience_block(block, f"experience.{domain}")
            for domain, block in experience_data.items()
        }

        contact_data = data.get("contact") or {}
        if not isinstance(contact_data, Mapping):
            raise CandidateProfileError("Contact must be a mapping", "contact", contact_data)
        contact = {}
        for key in CONTACT_FIELDS:
            value = contact_data.get(key, data.get(key))
            if value:
                contact[key] = str(value)

        default_domain = data.get("default_domain")
        if default_domain is not None and str(default_domain) not in experience:
            raise CandidateProfileError(
                "default_domain must name an experience domain", "default_domain", default_domain
            )

        return cls(
            name=str(data.get("name") or ""),
            contact=MappingProxyType(contact),
            experience=MappingProxyType(experience),
            education=tuple(
                normalize_credential(entry, f"education[{i}]")
                for i, entry in enumerate(data.get("education") or [])
            ),
            certifications=tuple(
                normalize_credential(entry, f"certifications[{i}]")
                for i, entry in enumerate(data.get("certifications") or [])
            ),
            default_domain=str(default_domain) if default_domain is not None else None,
        )

    @classmethod
    def from_file(cls, file_path: Path = None) -> "CandidateProfile":
        """
        Load a candidate profile from YAML.

        Args:
            file_path: Path to YAML file (defaults to CANDIDATE_PROFILE_PATH env variable)

        Returns:
            CandidateProfile
        """
        if file_path is None:
            file_path = CANDIDATE_PROFILE_PATH

        data = OmegaConf.to_container(OmegaConf.load(Path(file_path)), resolve=True)
        return cls.from_dict(data)

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def domains(self) -> Tuple[str, ...]:
        """Experience domains in authored order."""
        return tuple(self.experience)

    def block(self, domain: str) -> Optional[ExperienceBlock]:
        """Experience block for a domain, or None if the candidate has none."""
        return self.experience.get(domain)

    def has_data_for(self, domain: str) -> bool:
        """True if the candidate has a non-empty block for the domain."""
        block = self.block(domain)
        return block is not None and not block.is_empty()

    @property
    def fallback_domain(self) -> Optional[str]:
        """
        Domain used when the selected one has no data.

        Priority:
        1. default_domain, if it has data
        2. "technical", if it has data
        3. First authored domain with data
        """
        for domain in (self.default_domain, GENERAL_DOMAIN):
            if domain and self.has_data_for(domain):
                return domain
        for domain in self.experience:
            if self.has_data_for(domain):
                return domain
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view of the normalized profile."""
        return {
            "name": self.name,
            "contact": dict(self.contact),
            "default_domain": self.default_domain,
            "experience": {
                domain: {
                    "years": block.years,
                    "skills": list(block.skills),
                    "achievements": list(block.achievements),
                }
                for domain, block in self.experience.items()
            },
            "education": [c.to_dict() for c in self.education],
            "certifications": [c.to_dict() for c in self.certifications],
        }


def credentials_for(credentials: Tuple[Credential, ...], domain: str) -> List[Credential]:
    """Credentials supporting a domain; every credential for "hybrid"."""
    if domain == "hybrid":
        return list(credentials)
    return [c for c in credentials if c.supports(domain)]
