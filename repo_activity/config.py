"""
Report configuration.

A ``ReportOptions`` value is immutable for the duration of one report build.
Per-request overrides (the server's ``days`` parameter) derive a new value
with ``with_days`` instead of touching the shared one.
"""

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from repo_activity.exceptions import ConfigurationError

DEFAULT_DAYS = 14
DEFAULT_API_ENDPOINT = "https://api.github.com"


def parse_repos(value: str | Iterable[str]) -> tuple[str, ...]:
    """
    Parse a repository list.

    Accepts a comma separated string (``"a/b, c/d"``) or an iterable of names.
    Surrounding whitespace, empty entries and repeated names are dropped.
    """
    if isinstance(value, str):
        value = value.split(",")
    return tuple(dict.fromkeys(repo.strip() for repo in value if repo and repo.strip()))


def parse_days(value: str | int, source: str = "days") -> int:
    """Parse a day-count cutoff, raising ConfigurationError when invalid."""
    try:
        days = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"can not parse {source}: {value!r}") from e
    if days < 0:
        raise ConfigurationError(f"{source} must be >= 0, got {days}")
    return days


@dataclass(frozen=True)
class ReportOptions:
    """Configuration for one report build."""

    repos: tuple[str, ...]
    days_old: int = DEFAULT_DAYS
    api_endpoint: str | None = None
    token: str | None = None

    def __post_init__(self) -> None:
        repos = parse_repos(self.repos)
        if not repos:
            raise ConfigurationError("Must set at least one repo...")
        for repo in repos:
            owner, _, name = repo.partition("/")
            if not owner or not name:
                raise ConfigurationError(
                    f"Invalid repo {repo!r}. Must be in the form 'owner/name'"
                )
        if isinstance(self.days_old, bool) or not isinstance(self.days_old, int):
            raise ConfigurationError(f"days must be an integer, got {self.days_old!r}")
        if self.days_old < 0:
            raise ConfigurationError(f"days must be >= 0, got {self.days_old}")

        # Normalize without breaking immutability for callers
        object.__setattr__(self, "repos", repos)
        object.__setattr__(self, "api_endpoint", self.api_endpoint or None)
        object.__setattr__(self, "token", self.token or None)

    @property
    def base_url(self) -> str:
        """API base URL, the custom endpoint when one is configured."""
        return (self.api_endpoint or DEFAULT_API_ENDPOINT).rstrip("/")

    @property
    def authenticated(self) -> bool:
        return self.token is not None

    def with_days(self, days_old: int) -> "ReportOptions":
        """Return a copy of these options covering ``days_old`` days."""
        return replace(self, days_old=days_old)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ReportOptions":
        """
        Create options from environment variables.

        Environment variables:
            REPORT_REPOS: Comma separated list of repositories (required)
            REPORT_DAYS: Number of days to cover (optional, default: 14)
            GITHUB_ENDPOINT: API endpoint for GitHub Enterprise (optional)
            GITHUB_TOKEN: API token (optional, anonymous access when unset)

        Raises:
            ConfigurationError: If REPORT_REPOS is missing or REPORT_DAYS is invalid
        """
        env = os.environ if environ is None else environ

        repos = parse_repos(env.get("REPORT_REPOS", ""))
        if not repos:
            raise ConfigurationError("REPORT_REPOS environment variable not set")

        days = env.get("REPORT_DAYS", "").strip()
        days_old = parse_days(days, "REPORT_DAYS") if days else DEFAULT_DAYS

        return cls(
            repos=repos,
            days_old=days_old,
            api_endpoint=env.get("GITHUB_ENDPOINT") or None,
            token=env.get("GITHUB_TOKEN") or None,
        )
