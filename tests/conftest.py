"""Pytest configuration and fixtures."""

from datetime import datetime, timezone

import pytest

from git_wrapped.config import Config, set_config
from git_wrapped.models.repository import RepositoryRecord
from git_wrapped.utils.rate_limiter import reset_rate_limiter

YEAR = 2025
NOW = datetime(2025, 12, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset global state before each test."""
    reset_rate_limiter()
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def test_config():
    """Create a test configuration with both tokens set."""
    config = Config(
        github_token="ghp_test_token",
        gitlab_token="glpat-test-token",
        github_api_url="https://api.github.com",
        github_graphql_url="https://api.github.com/graphql",
        gitlab_api_url="https://gitlab.com/api/v4",
    )
    set_config(config)
    return config


@pytest.fixture
def make_repo():
    """Factory for repository records with sensible defaults."""

    def _make(name: str = "repo", **overrides) -> RepositoryRecord:
        fields = {
            "name": name,
            "full_name": f"octocat/{name}",
            "html_url": f"https://github.com/octocat/{name}",
        }
        fields.update(overrides)
        return RepositoryRecord(**fields)

    return _make
