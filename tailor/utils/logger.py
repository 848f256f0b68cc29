"""
Session logging for scripts and notebooks.

Library modules only emit records through the context wrappers in
contexts/{context}/logger.py; configuring sinks is left to the entry point,
which calls setup_logger() once per session.
"""

import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from tailor.utils.timestamp import now_exact

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"


def session_log_dir(label: str, root: Path = None) -> Path:
    """
    Directory name for a new logging session, e.g. outs/logs/tailor_20261018_093000.

    Not created here; setup_logger() creates it.
    """
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Path(root or LOGS_PATH) / f"{label}_{stamp}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console_level: str = "INFO",
) -> Path:
    """
    Route loguru output to a session file (DEBUG) and the console.

    Existing sinks are removed first, so calling this twice starts a fresh
    session rather than duplicating output.

    Args:
        context_name: Log file stem (e.g., "intake", "target")
        log_dir: Session directory, created if missing
        extra_provenance: Extra "key: value" lines for the session header
        console_level: Minimum level echoed to stderr

    Returns:
        Path to the log file

    Example:
        log_file = setup_logger(
            "target",
            session_log_dir("tailor"),
            extra_provenance={"Candidate profile": "data/candidate_profile.yaml"},
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Write a session header: start time, command line, cwd, interpreter, and extras."""
    header = {
        "Started": now_exact(),
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        **(extra_context or {}),
    }
    logger.info("=" * 72)
    for key, value in header.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 72)
