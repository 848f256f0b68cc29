"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_analysis_result(profile) -> None:
    """
    Log a one-line summary of a finished posting analysis.

    Args:
        profile: JobProfile returned by analyze()
    """
    skill_count = sum(len(skills) for skills in profile.skills_by_category.values())
    _log_info(
        f"Analyzed '{profile.title}' at '{profile.company}': {skill_count} skills, "
        f"industry={profile.industry.primary} "
        f"({profile.industry.confidence:.0%} confidence), level={profile.experience_level}"
    )
    if not profile.key_requirements:
        _log_debug("No requirements section detected")
