"""
Document formatter: renders CustomizedDocument instances with Jinja2 templates.

Templates live in tailor/contexts/templating/types/{format_name}/template.jinja.
"""

from pathlib import Path
from typing import Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from tailor.contexts.templating.exceptions import TemplateRenderError
from tailor.contexts.templating.logger import _log_debug, log_render_failure

TYPES_BASE_PATH = Path(__file__).parent / "types"


class DocumentFormatter:
    """
    Registry for loading and caching Jinja2 document templates.

    One template per output format. StrictUndefined makes a template referencing
    a missing document field fail loudly instead of rendering blanks.
    """

    def __init__(self, types_base_path: Path = None):
        """
        Initialize the formatter.

        Args:
            types_base_path: Base path for format directories. Defaults to
                           tailor/contexts/templating/types/
        """
        if types_base_path is None:
            types_base_path = TYPES_BASE_PATH

        self.types_base_path = Path(types_base_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.types_base_path)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def get_template(self, format_name: str) -> Template:
        """
        Get a template by output format, loading and caching it if necessary.

        Args:
            format_name: "markdown" or "plaintext"

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        if format_name in self._cache:
            return self._cache[format_name]

        template_path = f"{format_name}/template.jinja"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for format '{format_name}' at {self.types_base_path / template_path}"
            ) from e

        _log_debug(f"Loaded {format_name} template from {self.types_base_path / template_path}")
        self._cache[format_name] = template
        return template

    def render(self, document, format_name: str = "markdown") -> str:
        """
        Render a CustomizedDocument.

        Args:
            document: CustomizedDocument to render
            format_name: "markdown" or "plaintext"

        Returns:
            Rendered text

        Raises:
            TemplateRenderError: If the template fails to render
        """
        template = self.get_template(format_name)
        try:
            return template.render(doc=document)
        except Exception as e:
            log_render_failure(format_name, document.version, e)
            raise TemplateRenderError(
                "Failed to render document",
                format_name=format_name,
                document_version=document.version,
                template_path=self.types_base_path / format_name / "template.jinja",
                original_error=e,
            ) from e


_default_formatter: DocumentFormatter = None


def get_default_formatter() -> DocumentFormatter:
    """Shared formatter for the built-in templates, created on first use."""
    global _default_formatter
    if _default_formatter is None:
        _default_formatter = DocumentFormatter()
    return _default_formatter
