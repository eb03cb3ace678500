"""Plain text report rendering."""

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from repo_activity.config import ReportOptions
from repo_activity.types.activity import ActivityRecord, ActivityReport

TAB_WIDTH = 8
COLUMNS = ("Number", "Status", "Age", "Author", "Title", "URL")


def _text(value: object | None) -> str:
    return "" if value is None else str(value)


def record_row(record: ActivityRecord) -> tuple[str, ...]:
    """Table cells for one record; absent fields render as empty text."""
    return (
        _text(record.number),
        _text(record.status),
        record.age,
        _text(record.author.display_name),
        _text(record.title),
        _text(record.url),
    )


def align_columns(rows: Sequence[Sequence[str]], tab_width: int = TAB_WIDTH) -> list[str]:
    """
    Align rows into tab separated columns.

    Every column but the last is padded with tabs up to the smallest tab
    stop past its widest cell, so columns line up on a terminal with
    ``tab_width`` tab stops.
    """
    if not rows:
        return []

    ncols = max(len(row) for row in rows)
    widths = [0] * ncols
    for row in rows:
        for i, cell in enumerate(row[:-1]):
            widths[i] = max(widths[i], len(cell))
    stops = [(width // tab_width + 1) * tab_width for width in widths]

    lines = []
    for row in rows:
        parts = []
        for i, cell in enumerate(row):
            if i == len(row) - 1:
                parts.append(cell)
            else:
                tabs = -(-(stops[i] - len(cell)) // tab_width)
                parts.append(cell + "\t" * tabs)
        lines.append("".join(parts))
    return lines


def render_table(records: Iterable[ActivityRecord]) -> list[str]:
    rows: list[tuple[str, ...]] = [COLUMNS, tuple("----" for _ in COLUMNS)]
    rows.extend(record_row(record) for record in records)
    return align_columns(rows)


def report_repos(report: ActivityReport, options: ReportOptions) -> list[str]:
    """Configured repos first, then any other repo present in the report."""
    extra = [repo for repo in report.repos if repo not in options.repos]
    return list(options.repos) + extra


def render_text(report: ActivityReport, options: ReportOptions) -> str:
    """Render the report as plain text grouped by repository."""
    days = options.days_old
    lines: list[str] = []

    for repo in report_repos(report, options):
        activity = report.get(repo)
        issues = activity.issues if activity else []
        pull_requests = activity.pull_requests if activity else []

        lines += ["", f"## Repo: {repo}", ""]
        lines += [f"### New issues opened in the past {days} days", ""]
        lines += render_table(issues)
        lines.append("")
        lines += [f"### New PRs opened in the past {days} days", ""]
        lines += render_table(pull_requests)
        lines.append("")

    return "\n".join(lines) + "\n"


def write_text(
    report: ActivityReport,
    options: ReportOptions,
    stream: TextIO | None = None,
) -> None:
    """Write the text report to ``stream`` (default: stdout)."""
    (stream or sys.stdout).write(render_text(report, options))
