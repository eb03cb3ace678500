"""Grouping of fetched activity into a per-repository report."""

from collections.abc import Sequence

from repo_activity.types.activity import ActivityRecord, ActivityReport, RepoActivity


def build_report(
    issues: Sequence[ActivityRecord],
    pull_requests: Sequence[ActivityRecord],
) -> ActivityReport:
    """
    Group issues and pull requests by repository.

    Buckets are created on first sight of a repository and shared between
    issues and pull requests. Input order is kept within each bucket.
    Repositories without records get no bucket at all.
    """
    repos: dict[str, RepoActivity] = {}

    for issue in issues:
        repos.setdefault(issue.repo, RepoActivity()).issues.append(issue)

    for pr in pull_requests:
        repos.setdefault(pr.repo, RepoActivity()).pull_requests.append(pr)

    return ActivityReport(
        repos=repos,
        total_issues=len(issues),
        total_pull_requests=len(pull_requests),
    )
