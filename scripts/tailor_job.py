#!/usr/bin/env python3
"""
Tailor a candidate document to a job posting and score the fit.

Usage:
    python scripts/tailor_job.py posting.md --title "Senior SEO Manager" --company "Acme"
    python scripts/tailor_job.py posting.md -t "Data Engineer" -c "Initech" --markdown
    python scripts/tailor_job.py posting.md -t "Data Engineer" -c "Initech" --log-dir outs/logs
    python scripts/tailor_job.py posting.md -t "Data Engineer" -c "Initech" --log

Exits with status 1 when the document scores below the match threshold and
status 2 when an input cannot be loaded.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from loguru import logger
from typing_extensions import Annotated

from tailor.contexts.targeting import CandidateProfile, CandidateProfileError
from tailor.contexts.targeting.candidate_profile import CANDIDATE_PROFILE_PATH
from tailor.contexts.targeting.logger import setup_targeting_logger
from tailor.pipeline import run_pipeline
from tailor.utils.logger import session_log_dir
from tailor.utils.report_formatter import format_pipeline_report

load_dotenv()

app = typer.Typer(
    help="Tailor a candidate document to a job posting and score the fit",
    add_completion=False,
)


@app.command()
def main(
    posting_file: Annotated[
        Path,
        typer.Argument(help="Path to the job posting (plain text or markdown)"),
    ],
    title: Annotated[str, typer.Option("--title", "-t", help="Job title")],
    company: Annotated[str, typer.Option("--company", "-c", help="Company name")],
    candidate: Annotated[
        Optional[Path],
        typer.Option(
            "--candidate",
            help="Candidate profile YAML (default: CANDIDATE_PROFILE_PATH)",
        ),
    ] = None,
    markdown: Annotated[
        bool,
        typer.Option("--markdown", "-m", help="Also print the rendered document"),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the full result as JSON instead of the report"),
    ] = False,
    version_date: Annotated[
        Optional[str],
        typer.Option("--version-date", help="Date used in the version id (default: today)"),
    ] = None,
    log: Annotated[
        bool,
        typer.Option("--log", help="Write a session log under LOGS_PATH"),
    ] = False,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Write a session log to this directory"),
    ] = None,
):
    """
    Run the tailoring pipeline for one posting.

    Examples:\n

        $ tailor_job.py posting.md -t "Senior SEO Manager" -c Acme           # Report

        $ tailor_job.py posting.md -t "Senior SEO Manager" -c Acme --json    # Full result

        $ tailor_job.py posting.md -t "Senior SEO Manager" -c Acme -m        # Report + document
    """
    candidate_path = candidate or Path(CANDIDATE_PROFILE_PATH)

    if log and not log_dir:
        log_dir = session_log_dir("tailor")
    if log_dir:
        log_file = setup_targeting_logger(log_dir, candidate_source=str(candidate_path))
        typer.echo(f"Logging to {log_file}")
    else:
        logger.remove()
        logger.add(sys.stderr, level="WARNING")

    if not posting_file.exists():
        typer.secho(f"ERROR: Posting not found: {posting_file}", fg=typer.colors.RED, err=True)
        raise typer.Exit(2)

    try:
        candidate_profile = CandidateProfile.from_file(candidate_path)
    except (FileNotFoundError, CandidateProfileError) as e:
        typer.secho(f"ERROR: Could not load candidate profile: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(2)

    posting_text = posting_file.read_text(encoding="utf-8")
    result = run_pipeline(title, company, posting_text, candidate_profile, version_date=version_date)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        typer.echo(format_pipeline_report(result))

    if markdown:
        typer.echo("")
        typer.echo(result.document.to_markdown())

    if result.validation.can_submit:
        typer.secho(f"\n✓ Ready to submit ({result.document.version})", fg=typer.colors.GREEN)
    else:
        typer.secho(
            f"\n✗ Below {result.validation.threshold} threshold ({result.document.version})",
            fg=typer.colors.RED,
        )
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
