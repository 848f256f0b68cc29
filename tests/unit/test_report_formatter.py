"""Unit tests for text report formatting and session logging helpers."""

import pytest
from loguru import logger

from tailor import run_pipeline
from tailor.utils.logger import session_log_dir, setup_logger
from tailor.utils.report_formatter import (
    Column,
    ScoreTable,
    format_fraction,
    format_pipeline_report,
    score_bar,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [(0.0, "...................."), (1.0, "####################"), (1.7, "####################")],
)
def test_score_bar(value, expected):
    assert score_bar(value) == expected


@pytest.mark.unit
def test_format_fraction():
    assert format_fraction(0.8333) == "83.3%"
    assert format_fraction(1.0, 0) == "100%"


@pytest.mark.unit
def test_score_table_rows():
    table = ScoreTable(columns=(Column("Name", 6), Column("Value", 6, ">")), width=13)
    table.add_header_row().add_row("skills", "0.5")

    assert table.render().splitlines() == [
        "-------------",
        "Name    Value",
        "-------------",
        "skills    0.5",
    ]


@pytest.mark.unit
def test_score_table_rejects_wrong_width():
    table = ScoreTable(columns=(Column("Name", 6),))
    with pytest.raises(ValueError, match="Expected 1 values"):
        table.add_row("a", "b")


@pytest.mark.unit
def test_pipeline_report(seo_posting, candidate):
    result = run_pipeline(
        "Senior SEO Manager", "Northwind Media", seo_posting, candidate, version_date="2024-03-01"
    )
    text = format_pipeline_report(result)

    assert "Senior SEO Manager @ Northwind Media" in text
    assert "Industry: marketing (100% confidence)" in text
    assert "Template: seo, content from seo" in text
    assert "skills_match" in text
    assert f"Total: {result.report.total_score:.2f} (acceptable)" in text
    assert "  - Tailor achievements to match job requirements" in text
    assert "Incorporate more keywords" not in text


@pytest.mark.unit
def test_setup_logger_writes_session_file(tmp_path):
    log_file = setup_logger("target", tmp_path / "session", extra_provenance={"Candidate profile": "x.yaml"})
    logger.debug("[target] hello")
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert log_file.name == "target.log"
    assert "Candidate profile: x.yaml" in content
    assert "[target] hello" in content


@pytest.mark.unit
def test_session_log_dir(tmp_path):
    path = session_log_dir("tailor", root=tmp_path)
    assert path.parent == tmp_path
    assert path.name.startswith("tailor_")
    assert not path.exists()
