"""
Templating Context

Responsibilities:
- Defines the tailored document structure (CustomizedDocument and its parts)
- Renders documents to markdown and plain text through Jinja2 templates

Owns: Document representation and rendering
Never: Makes content prioritization decisions
"""

from tailor.contexts.templating.customized_document import (
    DOCUMENT_SCHEMA_VERSION,
    HYBRID_TEMPLATE,
    TEMPLATE_KINDS,
    Credential,
    CustomizedDocument,
    ExperienceEntry,
    SkillSet,
)
from tailor.contexts.templating.document_formatter import DocumentFormatter, get_default_formatter

__all__ = [
    # Data structure classes
    "CustomizedDocument",
    "SkillSet",
    "ExperienceEntry",
    "Credential",
    "DOCUMENT_SCHEMA_VERSION",
    "TEMPLATE_KINDS",
    "HYBRID_TEMPLATE",
    # Rendering
    "DocumentFormatter",
    "get_default_formatter",
]
