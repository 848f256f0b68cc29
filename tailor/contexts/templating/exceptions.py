"""Errors raised while rendering CustomizedDocument instances."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    A document template failed to render.

    Usually a template references a field the document does not have, which
    StrictUndefined turns into an error instead of an empty string.

    Attributes:
        message: Error description
        format_name: Output format being rendered ("markdown" or "plaintext")
        document_version: Version id of the document being rendered
        template_path: Template file that failed
        original_error: Underlying Jinja2 exception
    """

    def __init__(
        self,
        message: str,
        format_name: Optional[str] = None,
        document_version: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.format_name = format_name
        self.document_version = document_version
        self.template_path = template_path
        self.original_error = original_error

        details = {
            "Format": format_name,
            "Document": document_version,
            "Template": template_path,
            "Cause": original_error,
        }
        lines = [message] + [f"  {key}: {value}" for key, value in details.items() if value]
        super().__init__("\n".join(lines))
