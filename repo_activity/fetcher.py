"""
Activity fetching.

Runs one search query across all of its result pages and normalizes the raw
items into ``ActivityRecord`` values. A failure on any page fails the whole
fetch; records from earlier pages are never returned.
"""

from datetime import datetime
from typing import Any, Protocol

import httpx

from repo_activity.age import format_age
from repo_activity.clients.search import DEFAULT_PER_PAGE
from repo_activity.config import ReportOptions
from repo_activity.exceptions import FetchError, RepoActivityError
from repo_activity.logging import get_logger
from repo_activity.query import ActivityKind, build_query
from repo_activity.types.activity import ActivityAuthor, ActivityRecord
from repo_activity.types.search import SearchPage

logger = get_logger("fetcher")


class IssueSearch(Protocol):
    """Anything that can run an issue search page by page."""

    def issues(self, query: str, page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> SearchPage:
        ...


def parse_timestamp(value: str) -> datetime:
    """Parse an API timestamp such as ``2024-01-15T10:30:00Z``."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def repo_from_url(repository_url: str, prefix: str) -> str:
    """
    Extract "owner/name" from an item's ``repository_url``.

    Strips ``prefix`` (``<api endpoint>/repos/``). URLs served from another
    host fall back to whatever follows the last ``/repos/`` segment.
    """
    if repository_url.startswith(prefix):
        return repository_url[len(prefix):]

    _, sep, tail = repository_url.rpartition("/repos/")
    return tail if sep else repository_url


def normalize_item(
    item: dict[str, Any],
    repos_prefix: str,
    now: datetime | None = None,
) -> ActivityRecord:
    """Build an ActivityRecord from one raw search result item."""
    created_at = parse_timestamp(item["created_at"])
    user = item.get("user") or {}

    return ActivityRecord(
        id=item.get("id"),
        number=item.get("number"),
        title=item.get("title"),
        author=ActivityAuthor(
            display_name=user.get("login"),
            profile_url=user.get("html_url"),
        ),
        repo=repo_from_url(item["repository_url"], repos_prefix),
        url=item.get("html_url"),
        status=item.get("state"),
        age=format_age(created_at, now),
        created_at=created_at,
    )


class ActivityFetcher:
    """Fetches every issue or pull request matching the configured repos and window."""

    def __init__(
        self,
        search: IssueSearch,
        options: ReportOptions,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> None:
        self.search = search
        self.options = options
        self.per_page = per_page

    @property
    def repos_prefix(self) -> str:
        return f"{self.options.base_url}/repos/"

    def query(self, kind: ActivityKind, now: datetime | None = None) -> str:
        return build_query(kind, self.options.repos, self.options.days_old, now)

    def fetch(self, kind: ActivityKind) -> list[ActivityRecord]:
        """
        Fetch all records of ``kind``.

        Returns:
            Records in API result order

        Raises:
            FetchError: If any page fails, or returns an item that can not be normalized
        """
        kind = ActivityKind(kind)
        query = self.query(kind)
        logger.debug("fetching %s activity: %s", kind.label, query)

        records: list[ActivityRecord] = []
        page: int | None = 1
        pages = 0
        try:
            while page is not None:
                result = self.search.issues(query, page=page, per_page=self.per_page)
                pages += 1
                now = datetime.now().astimezone()
                records.extend(
                    normalize_item(item, self.repos_prefix, now) for item in result.items
                )
                page = result.next_page
        except (RepoActivityError, httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            logger.warning("%s fetch failed on page %s: %s", kind.label, page, e)
            raise FetchError(kind.label, e) from e

        logger.info("fetched %d %s records in %d pages", len(records), kind.label, pages)
        return records
