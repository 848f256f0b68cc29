"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from tailor.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(log_dir: Path, candidate_source: str = None) -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this targeting session
        candidate_source: Where the candidate profile was loaded from (for provenance)

    Returns:
        Path to log file

    Example:
        from tailor.contexts.targeting.logger import setup_targeting_logger, _log_info

        log_file = setup_targeting_logger(log_dir, candidate_source="data/candidate_profile.yaml")
        _log_info("Starting customization...")
    """
    return _setup_logger(
        context_name="target",
        log_dir=log_dir,
        extra_provenance={"Candidate profile": candidate_source} if candidate_source else None,
    )


# Wrapper functions with automatic [target] prefix


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [target] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [target] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level targeting-specific logging helpers


def log_customization_result(document) -> None:
    """
    Log the outcome of document customization.

    Args:
        document: CustomizedDocument returned by customize()
    """
    if document.degraded:
        _log_warning(f"Degraded document {document.version}: {document.degraded_reason}")
    _log_info(
        f"Generated {document.template_kind} document {document.version} "
        f"({len(document.skills.primary)} primary skills, "
        f"{len(document.achievements)} achievements)"
    )


def log_score_result(report) -> None:
    """
    Log a score report.

    Args:
        report: ScoreReport returned by score()
    """
    breakdown = ", ".join(f"{name}={value:.2f}" for name, value in report.breakdown.items())
    _log_debug(f"Score breakdown: {breakdown}")

    if report.meets_threshold:
        _log_success(f"Match score {report.total_score:.2f} ({report.quality_level})")
    else:
        _log_warning(
            f"Match score {report.total_score:.2f} below threshold "
            f"({len(report.recommendations)} recommendations)"
        )
