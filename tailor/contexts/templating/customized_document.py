"""
Customized Document Data Structures

Defines the tailored candidate document produced by the Targeting context and
its components (skills, experience entry, credentials). The document owns its
rendering to markdown and plain text through DocumentFormatter.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

# Bumped whenever the CustomizedDocument shape changes in a way consumers must notice
DOCUMENT_SCHEMA_VERSION = 1

# Size caps for document sections
MAX_PRIMARY_SKILLS = 8
MAX_SECONDARY_SKILLS = 6
MAX_ACHIEVEMENTS = 4
MAX_EXPERIENCE_ACHIEVEMENTS = 3
MAX_EXPERIENCE_SKILLS = 8

TEMPLATE_KINDS = ("technical", "seo", "marketing", "leadership", "hybrid")
HYBRID_TEMPLATE = "hybrid"


@dataclass(frozen=True)
class Credential:
    """
    Education or certification entry.

    Attributes:
        name: Degree or certification name
        relevant_domains: Candidate domains this credential supports
        institution: School or issuing body (optional)
        year: Year awarded (optional, kept as text)
    """

    name: str
    relevant_domains: Tuple[str, ...] = ()
    institution: Optional[str] = None
    year: Optional[str] = None

    def supports(self, domain: str) -> bool:
        """True if the credential is tagged with the domain."""
        return domain in self.relevant_domains

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "relevant_domains": list(self.relevant_domains),
            "institution": self.institution,
            "year": self.year,
        }


@dataclass(frozen=True)
class SkillSet:
    """
    Prioritized skills.

    Attributes:
        primary: Candidate skills that match job keywords (max 8)
        secondary: Remaining candidate skills (max 6)
    """

    primary: Tuple[str, ...] = ()
    secondary: Tuple[str, ...] = ()

    def __post_init__(self):
        if len(self.primary) > MAX_PRIMARY_SKILLS:
            raise ValueError(f"At most {MAX_PRIMARY_SKILLS} primary skills allowed")
        if len(self.secondary) > MAX_SECONDARY_SKILLS:
            raise ValueError(f"At most {MAX_SECONDARY_SKILLS} secondary skills allowed")

    def combined(self) -> Tuple[str, ...]:
        """Primary followed by secondary skills."""
        return self.primary + self.secondary


@dataclass(frozen=True)
class ExperienceEntry:
    """
    Experience section of the document.

    Attributes:
        title: Role title shown on the document
        company: Employer line
        years: Years of experience in the source domain
        achievements: Tailored achievements (max 3)
        skills: Source-domain skills matching job keywords (max 8)
    """

    title: str
    company: str
    years: int
    achievements: Tuple[str, ...] = ()
    skills: Tuple[str, ...] = ()

    @property
    def duration(self) -> str:
        """Human-readable duration, e.g. "5 years"."""
        return f"{self.years} year" if self.years == 1 else f"{self.years} years"


@dataclass(frozen=True)
class CustomizedDocument:
    """
    Candidate document tailored to one job profile.

    Owned by the caller after return; nothing in the pipeline keeps a reference.

    Attributes:
        template_kind: technical | seo | marketing | leadership | hybrid
        source_domain: Candidate domain whose content was used ("hybrid" when blended)
        summary: Generated professional summary
        skills: Prioritized skill lists
        achievements: Tailored achievements (max 4)
        experience: Experience entry
        header: Candidate name and contact fields
        education: Education entries relevant to the template kind
        certifications: Certifications relevant to the template kind
        customizations: Notes describing what was tailored
        version: Traceability identifier (title_company_date), may collide
        degraded: True when the fallback domain replaced missing candidate data
        degraded_reason: Why the fallback was used
        schema_version: Shape version checked by the FitScorer
    """

    template_kind: str
    source_domain: str
    summary: str
    skills: SkillSet
    achievements: Tuple[str, ...]
    experience: ExperienceEntry
    header: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    education: Tuple[Credential, ...] = ()
    certifications: Tuple[Credential, ...] = ()
    customizations: Tuple[str, ...] = ()
    version: str = ""
    degraded: bool = False
    degraded_reason: Optional[str] = None
    schema_version: int = DOCUMENT_SCHEMA_VERSION

    def __post_init__(self):
        if self.template_kind not in TEMPLATE_KINDS:
            raise ValueError(
                f"Unknown template kind '{self.template_kind}'. Expected one of: {list(TEMPLATE_KINDS)}"
            )
        if len(self.achievements) > MAX_ACHIEVEMENTS:
            raise ValueError(f"At most {MAX_ACHIEVEMENTS} achievements allowed")

    # =========================================================================
    # RENDERING
    # =========================================================================

    def to_markdown(self) -> str:
        """Render the document as markdown (for hand-off to document generation)."""
        # Import here to avoid circular dependency
        from tailor.contexts.templating.document_formatter import get_default_formatter

        return get_default_formatter().render(self, "markdown")

    def to_text(self) -> str:
        """Render the document as plain text (used for keyword and industry scoring)."""
        from tailor.contexts.templating.document_formatter import get_default_formatter

        return get_default_formatter().render(self, "plaintext")

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view of the document, JSON-serializable and deterministically ordered."""
        return {
            "schema_version": self.schema_version,
            "version": self.version,
            "template_kind": self.template_kind,
            "source_domain": self.source_domain,
            "degraded": self.degraded,
            "degraded_reason": self.degraded_reason,
            "header": dict(self.header),
            "summary": self.summary,
            "skills": {
                "primary": list(self.skills.primary),
                "secondary": list(self.skills.secondary),
            },
            "achievements": list(self.achievements),
            "experience": {
                "title": self.experience.title,
                "company": self.experience.company,
                "duration": self.experience.duration,
                "achievements": list(self.experience.achievements),
                "skills": list(self.experience.skills),
            },
            "education": [c.to_dict() for c in self.education],
            "certifications": [c.to_dict() for c in self.certifications],
            "customizations": list(self.customizations),
        }
