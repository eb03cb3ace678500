"""Activity report data models."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class ActivityAuthor:
    """Author of an issue or pull request."""

    display_name: str | None
    profile_url: str | None


@dataclass(frozen=True)
class ActivityRecord:
    """One issue or one pull request, normalized from a search result."""

    id: int | None
    number: int | None
    title: str | None
    author: ActivityAuthor
    repo: str  # "owner/name"
    url: str | None
    status: str | None  # "open", "closed"
    age: str  # "3 days", "today"
    created_at: datetime | None = None


@dataclass
class RepoActivity:
    """Issues and pull requests of a single repository, in API order."""

    issues: list[ActivityRecord] = field(default_factory=list)
    pull_requests: list[ActivityRecord] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.issues and not self.pull_requests


@dataclass
class ActivityReport:
    """Per-repository activity plus totals across all repositories."""

    repos: dict[str, RepoActivity]
    total_issues: int
    total_pull_requests: int

    def get(self, repo: str) -> RepoActivity | None:
        """Bucket for ``repo``, or None when it had no activity."""
        return self.repos.get(repo)

    @property
    def is_empty(self) -> bool:
        return self.total_issues == 0 and self.total_pull_requests == 0
