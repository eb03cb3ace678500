"""Tests for report configuration."""

import dataclasses

import pytest

from repo_activity.config import DEFAULT_DAYS, ReportOptions, parse_days, parse_repos
from repo_activity.exceptions import ConfigurationError


class TestParseRepos:
    def test_splits_and_strips(self) -> None:
        assert parse_repos(" a/b, c/d ,,") == ("a/b", "c/d")

    def test_accepts_iterables(self) -> None:
        assert parse_repos(["a/b", " ", "c/d"]) == ("a/b", "c/d")

    def test_empty(self) -> None:
        assert parse_repos("") == ()

    def test_drops_repeats(self) -> None:
        assert parse_repos("a/b,c/d, a/b") == ("a/b", "c/d")
        assert ReportOptions(repos=("a/b", "a/b")).repos == ("a/b",)


class TestParseDays:
    def test_valid(self) -> None:
        assert parse_days("30") == 30

    @pytest.mark.parametrize("value", ["abc", "1.5", "-1"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ConfigurationError):
            parse_days(value)


class TestReportOptions:
    def test_defaults(self) -> None:
        options = ReportOptions(repos=("a/b",))

        assert options.days_old == DEFAULT_DAYS == 14
        assert options.api_endpoint is None
        assert options.token is None
        assert not options.authenticated
        assert options.base_url == "https://api.github.com"

    def test_repos_normalized_to_tuple(self) -> None:
        assert ReportOptions(repos=["a/b", "c/d"]).repos == ("a/b", "c/d")
        assert ReportOptions(repos="a/b, c/d").repos == ("a/b", "c/d")

    def test_empty_strings_mean_unset(self) -> None:
        options = ReportOptions(repos=("a/b",), api_endpoint="", token="")

        assert options.api_endpoint is None
        assert options.token is None

    def test_custom_endpoint(self) -> None:
        options = ReportOptions(repos=("a/b",), api_endpoint="https://ghe.example.com/api/v3/")

        assert options.base_url == "https://ghe.example.com/api/v3"

    def test_requires_repos(self) -> None:
        with pytest.raises(ConfigurationError):
            ReportOptions(repos=())

    def test_rejects_malformed_repo(self) -> None:
        with pytest.raises(ConfigurationError):
            ReportOptions(repos=("just-a-name",))

    @pytest.mark.parametrize("days", [-1, "7", True])
    def test_rejects_invalid_days(self, days: object) -> None:
        with pytest.raises(ConfigurationError):
            ReportOptions(repos=("a/b",), days_old=days)

    def test_immutable(self) -> None:
        options = ReportOptions(repos=("a/b",))

        with pytest.raises(dataclasses.FrozenInstanceError):
            options.days_old = 30  # type: ignore[misc]

    def test_with_days_returns_new_value(self) -> None:
        options = ReportOptions(repos=("a/b",), days_old=14, token="t")

        wider = options.with_days(30)

        assert wider.days_old == 30
        assert wider.repos == options.repos
        assert wider.token == "t"
        assert options.days_old == 14


class TestFromEnv:
    def test_reads_all_variables(self) -> None:
        options = ReportOptions.from_env(
            {
                "REPORT_REPOS": "a/b,c/d",
                "REPORT_DAYS": "30",
                "GITHUB_ENDPOINT": "https://ghe.example.com/api/v3",
                "GITHUB_TOKEN": "t0ken",
            }
        )

        assert options == ReportOptions(
            repos=("a/b", "c/d"),
            days_old=30,
            api_endpoint="https://ghe.example.com/api/v3",
            token="t0ken",
        )

    def test_days_default(self) -> None:
        assert ReportOptions.from_env({"REPORT_REPOS": "a/b"}).days_old == 14

    def test_missing_repos(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ReportOptions.from_env({"REPORT_DAYS": "7"})

        assert "REPORT_REPOS" in exc_info.value.message

    def test_unparseable_days(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ReportOptions.from_env({"REPORT_REPOS": "a/b", "REPORT_DAYS": "soon"})

        assert "REPORT_DAYS" in exc_info.value.message

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REPORT_REPOS", "x/y")
        monkeypatch.delenv("REPORT_DAYS", raising=False)
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        monkeypatch.delenv("GITHUB_ENDPOINT", raising=False)

        options = ReportOptions.from_env()

        assert options.repos == ("x/y",)
        assert options.token is None
