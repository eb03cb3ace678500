"""Search query construction."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from enum import StrEnum


class ActivityKind(StrEnum):
    """Kind of activity to search for; the value is the ``is:`` qualifier."""

    ISSUE = "issue"
    PULL_REQUEST = "pr"

    @property
    def label(self) -> str:
        return "issue" if self is ActivityKind.ISSUE else "pull request"


def cutoff_date(days_old: int, now: datetime | None = None) -> date:
    """
    Date ``days_old`` days before ``now``; 0 means today.

    Windows reaching past the earliest representable date clamp to it.
    """
    if now is None:
        now = datetime.now()
    if days_old > (now.date() - date.min).days:
        return date.min
    return (now - timedelta(days=days_old)).date()


def build_query(
    kind: ActivityKind,
    repos: Iterable[str],
    days_old: int,
    now: datetime | None = None,
) -> str:
    """
    Build an issue search query.

    The result holds the type qualifier, one ``repo:`` qualifier per
    repository and a ``created:>=`` cutoff, e.g.
    ``is:issue repo:a/b repo:c/d created:>=2024-01-01``. The search backend
    ORs the repo qualifiers and ANDs the rest.

    Args:
        kind: Issues or pull requests
        repos: Repositories in "owner/name" form (non-empty)
        days_old: Lookback window in days (>= 0)
        now: Reference time (default: current local time)

    Raises:
        ValueError: If repos is empty or days_old is negative
    """
    kind = ActivityKind(kind)
    unique_repos = list(dict.fromkeys(repos))
    if not unique_repos:
        raise ValueError("at least one repo is required")
    if days_old < 0:
        raise ValueError(f"days_old must be >= 0, got {days_old}")

    created = cutoff_date(days_old, now).isoformat()
    repo_filters = " ".join(f"repo:{repo}" for repo in unique_repos)

    return f"is:{kind.value} {repo_filters} created:>={created}"
