"""
Text reports for pipeline results.

Used by scripts/tailor_job.py to print a profile summary, the per-dimension
score table and the recommendations in a fixed-width layout.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from tailor.utils.text_processing import truncate_display

BAR_WIDTH = 20


@dataclass(frozen=True)
class Column:
    """Fixed-width column. align is a format-spec alignment: '<', '>' or '^'."""

    name: str
    width: int
    align: str = "<"

    def cell(self, value) -> str:
        return f"{value:{self.align}{self.width}}"


@dataclass
class ScoreTable:
    """Accumulates report lines; every add_* method returns self for chaining."""

    columns: Sequence[Column]
    width: int = 60
    lines: List[str] = field(default_factory=list)

    def add_banner(self, title: str) -> "ScoreTable":
        rule = "=" * self.width
        self.lines.extend([rule, title, rule])
        return self

    def add_line(self, text: str = "") -> "ScoreTable":
        self.lines.append(text)
        return self

    def add_rule(self) -> "ScoreTable":
        self.lines.append("-" * self.width)
        return self

    def add_row(self, *values) -> "ScoreTable":
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")
        self.lines.append(" ".join(col.cell(v) for col, v in zip(self.columns, values)))
        return self

    def add_header_row(self) -> "ScoreTable":
        self.add_rule()
        self.add_row(*(col.name for col in self.columns))
        return self.add_rule()

    def render(self) -> str:
        return "\n".join(self.lines)


def format_fraction(value: float, decimal_places: int = 1) -> str:
    """
    Format a [0, 1] fraction as a percentage string.

    Example:
        >>> format_fraction(0.8333)
        '83.3%'
    """
    return f"{value * 100:.{decimal_places}f}%"


def score_bar(value: float, width: int = BAR_WIDTH) -> str:
    """
    Horizontal bar for a [0, 1] value.

    Example:
        >>> score_bar(0.5, width=10)
        '#####.....'
    """
    filled = round(min(max(value, 0.0), 1.0) * width)
    return "#" * filled + "." * (width - filled)


def format_pipeline_report(result) -> str:
    """
    Render a PipelineResult as a fixed-width text report.

    Sections: posting summary (industry, level, matched skills, template),
    dimension table with bars, total, and recommendations when present.
    """
    profile = result.job_profile
    document = result.document
    report = result.report

    table = ScoreTable(
        columns=(Column("Dimension", 24), Column("Score", 7, ">"), Column("", BAR_WIDTH + 2))
    )
    table.add_banner(f"{profile.title} @ {profile.company}")
    table.add_line(
        f"Industry: {profile.industry.primary} "
        f"({format_fraction(profile.industry.confidence, 0)} confidence)"
    )
    table.add_line(f"Level: {profile.experience_level}")
    for category, count in profile.skill_counts().items():
        if count:
            skills = ", ".join(sorted(profile.skills_in(category)))
            table.add_line(f"  {category:<11} {truncate_display(skills, 44)}")
    source = document.source_domain
    if document.degraded:
        source += " (fallback)"
    table.add_line(f"Template: {document.template_kind}, content from {source}")

    table.add_header_row()
    for dimension, value in report.breakdown.items():
        table.add_row(dimension, format_fraction(value), f"  {score_bar(value)}")
    table.add_rule()
    table.add_line(f"Total: {report.total_score:.2f} ({report.quality_level})")

    if report.recommendations:
        table.add_line()
        table.add_line("Recommendations:")
        for recommendation in report.recommendations:
            table.add_line(f"  - {recommendation}")

    return table.render()
