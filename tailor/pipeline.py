"""
End-to-end pipeline: posting text -> JobProfile -> CustomizedDocument -> ScoreReport.

Each phase is delegated to its context; this module only wires them together
and logs one line per phase. Apart from logging, run_pipeline is pure.
"""

from dataclasses import dataclass
from typing import Any, Dict

from loguru import logger

from tailor.contexts.intake import JobProfile, analyze
from tailor.contexts.targeting import (
    CandidateProfile,
    ScoreReport,
    ThresholdValidation,
    customize,
    score,
    validate_threshold,
)
from tailor.contexts.templating import CustomizedDocument

CONTEXT_PREFIX = "[pipeline]"


@dataclass(frozen=True)
class PipelineResult:
    """
    Outputs of one pipeline run.

    Attributes:
        job_profile: Analyzed posting
        document: Document tailored to the posting
        report: Fit score of the document
        validation: Submission decision derived from the report
    """

    job_profile: JobProfile
    document: CustomizedDocument
    report: ScoreReport
    validation: ThresholdValidation

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view suitable for an external application tracker."""
        return {
            "job_profile": self.job_profile.to_dict(),
            "document": self.document.to_dict(),
            "report": self.report.to_dict(),
            "validation": self.validation.to_dict(),
        }


def run_pipeline(
    title: str,
    company: str,
    posting_text: str,
    candidate: CandidateProfile,
    *,
    version_date=None,
) -> PipelineResult:
    """
    Analyze a posting, tailor the candidate document, and score the fit.

    Args:
        title: Job title
        company: Company name
        posting_text: Raw posting body
        candidate: Normalized candidate profile
        version_date: Date used in the document version id (defaults to today)

    Returns:
        PipelineResult

    Example:
        candidate = CandidateProfile.from_file("data/candidate_profile.yaml")
        result = run_pipeline("Senior SEO Manager", "Acme", posting_text, candidate)
        if result.validation.can_submit:
            print(result.document.to_markdown())
    """
    logger.info(f"{CONTEXT_PREFIX} Analyzing posting '{title}' at '{company}'")
    job_profile = analyze(posting_text, title, company)

    logger.info(f"{CONTEXT_PREFIX} Customizing document")
    document = customize(job_profile, candidate, version_date=version_date)

    logger.info(f"{CONTEXT_PREFIX} Scoring document {document.version}")
    report = score(document, job_profile)
    validation = validate_threshold(report)

    logger.info(
        f"{CONTEXT_PREFIX} Done: {report.total_score:.2f} ({report.quality_level}), "
        f"can_submit={validation.can_submit}"
    )
    return PipelineResult(
        job_profile=job_profile, document=document, report=report, validation=validation
    )
