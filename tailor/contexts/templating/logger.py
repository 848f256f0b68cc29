"""
Templating context logger.

Records from document rendering carry the [template] prefix. Templating
modules log through these helpers rather than importing loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_render_failure(format_name: str, document_version: str, error: Exception) -> None:
    """Log a failed render before the TemplateRenderError propagates."""
    logger.error(
        f"{CONTEXT_PREFIX} {format_name} render failed for {document_version!r}: "
        f"{type(error).__name__}: {error}"
    )
