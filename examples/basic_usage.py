#!/usr/bin/env python3
"""
Basic repo activity usage example.

Builds a report offline from a mock search and prints it as text.
Run with: python examples/basic_usage.py
"""

from repo_activity import ActivityKind, ReportOptions, build_query, build_report
from repo_activity.fetcher import ActivityFetcher
from repo_activity.render import render_text
from repo_activity.testing import MockSearchClient, create_search_item

print("=== Repo Activity Basic Usage Example ===\n")

options = ReportOptions(repos=("octo/widgets", "octo/gadgets"), days_old=7)

# 1. Queries
print("1. Search queries...")
print(f"   {build_query(ActivityKind.ISSUE, options.repos, options.days_old)}")
print(f"   {build_query(ActivityKind.PULL_REQUEST, options.repos, options.days_old)}\n")

# 2. Fetch two pages of issues and one pull request
print("2. Fetching from a mock search...")
search = MockSearchClient()
search.configure_pages(
    "issue",
    [
        [create_search_item(number=1, repo="octo/widgets", title="Crash on start")],
        [create_search_item(number=2, repo="octo/gadgets", state="closed", title="Typo in docs")],
    ],
)
search.configure_pages("pr", [[create_search_item(number=3, repo="octo/widgets", title="Fix crash")]])

fetcher = ActivityFetcher(search, options)
issues = fetcher.fetch(ActivityKind.ISSUE)
pull_requests = fetcher.fetch(ActivityKind.PULL_REQUEST)
print(f"   {search.call_count()} search calls\n")

# 3. Aggregate and render
report = build_report(issues, pull_requests)
print(f"3. {report.total_issues} issues, {report.total_pull_requests} pull requests")
print(render_text(report, options))
