"""Command-line report generator."""

import argparse
import logging
import os
import sys
from collections.abc import Sequence

from repo_activity import __version__
from repo_activity.client import RepoActivityClient
from repo_activity.config import DEFAULT_DAYS, ReportOptions, parse_repos
from repo_activity.exceptions import ConfigurationError, FetchError
from repo_activity.logging import configure_logging
from repo_activity.render.text import write_text


def non_negative_int(value: str) -> int:
    try:
        days = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if days < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {days}")
    return days


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo-activity",
        description="Report issues and pull requests recently opened in GitHub repositories.",
    )
    parser.add_argument(
        "--repos",
        default="",
        help="A comma separated list of GitHub repositories (required)",
    )
    parser.add_argument(
        "--days",
        type=non_negative_int,
        default=DEFAULT_DAYS,
        help="The number of days to cover in the report (default: %(default)s)",
    )
    parser.add_argument(
        "--api-endpoint",
        default="",
        help="API endpoint for use with GitHub Enterprise",
    )
    parser.add_argument(
        "--token",
        default=os.environ.get("GITHUB_TOKEN", ""),
        help="GitHub API token (default: $GITHUB_TOKEN)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log API requests to stderr",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"Version: {__version__}")
        return 0

    if not parse_repos(args.repos):
        print("Must set at least one repo...", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    if args.verbose:
        configure_logging(level=logging.DEBUG)

    try:
        options = ReportOptions(
            repos=parse_repos(args.repos),
            days_old=args.days,
            api_endpoint=args.api_endpoint,
            token=args.token,
        )
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    try:
        with RepoActivityClient(options) as client:
            report = client.build_report()
    except FetchError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    write_text(report, options)
    return 0


if __name__ == "__main__":
    sys.exit(main())
