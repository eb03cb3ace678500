"""HTML report rendering."""

from functools import lru_cache
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

from repo_activity.config import DEFAULT_API_ENDPOINT, ReportOptions
from repo_activity.render.text import report_repos
from repo_activity.types.activity import ActivityReport, RepoActivity

DAY_CHOICES = (7, 14, 30, 60, 90)

STATUS_TAGS = {
    "open": "is-success",
    "closed": "is-danger",
}


def status_tag(status: str | None) -> str:
    """Bulma tag class for an issue status."""
    if status is None:
        return ""
    return STATUS_TAGS.get(status, "")


def or_empty(value: Any) -> Any:
    return "" if value is None else value


@lru_cache(maxsize=1)
def environment() -> Environment:
    env = Environment(
        loader=PackageLoader("repo_activity", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["status_tag"] = status_tag
    env.filters["or_empty"] = or_empty
    return env


def repo_link(repo: str, activity: RepoActivity | None, options: ReportOptions) -> str | None:
    """
    Web page of a repository.

    github.com for the public API, otherwise derived from the URL of any
    record in the repo. None when a custom endpoint has no records to go by.
    """
    if options.base_url == DEFAULT_API_ENDPOINT:
        return f"https://github.com/{repo}"
    if activity is None:
        return None
    marker = f"/{repo}/"
    for record in [*activity.issues, *activity.pull_requests]:
        if record.url and marker in record.url:
            return record.url[: record.url.index(marker)] + f"/{repo}"
    return None


def day_choices(days: int) -> list[int]:
    """Options for the days selector, the current value first."""
    return [days] + [choice for choice in DAY_CHOICES if choice != days]


def render_html(report: ActivityReport, options: ReportOptions) -> str:
    """Render the report as a full HTML document."""
    template = environment().get_template("report.html")
    repos = report_repos(report, options)
    return template.render(
        days=options.days_old,
        day_choices=day_choices(options.days_old),
        repos=repos,
        repo_links={repo: repo_link(repo, report.get(repo), options) for repo in repos},
        report=report,
    )
