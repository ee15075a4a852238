"""Tests for the command line interface."""

import json
import time
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from git_wrapped import __version__
from git_wrapped.cli import app
from git_wrapped.config import Config, set_config
from git_wrapped.exceptions import UserNotFoundError

runner = CliRunner()

RATE_INFO = {
    "core": {"limit": 60, "remaining": 60, "reset": time.time() + 3600},
    "search": {"limit": 10, "remaining": 10, "reset": time.time() + 60},
}


class TestVersion:
    """Tests for --version."""

    def test_version(self):
        """Test printing the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestWrapCommand:
    """Tests for the wrap command."""

    def test_demo_writes_json(self, tmp_path):
        """Test a full demo run with a JSON report."""
        set_config(Config())
        output = tmp_path / "report.json"

        result = runner.invoke(app, ["wrap", "demo", "--year", "2024", "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert "Archetype" in result.output
        data = json.loads(output.read_text())
        assert data["year"] == 2024
        assert data["archetype_title"].startswith("The ")
        assert len(data["velocity"]) == 366

    def test_json_only(self, tmp_path):
        """Test that --json-only skips the summary."""
        set_config(Config())
        output = tmp_path / "report.json"

        result = runner.invoke(app, ["wrap", "demo", "--json-only", "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert "Top Languages" not in result.output
        assert str(output) in result.output
        assert output.exists()

    def test_unknown_platform(self):
        """Test rejecting an unsupported platform."""
        result = runner.invoke(app, ["wrap", "octocat", "--platform", "bitbucket"])

        assert result.exit_code == 1
        assert "Unknown platform" in result.output

    def test_unknown_timezone(self):
        """Test rejecting an invalid timezone."""
        set_config(Config())

        result = runner.invoke(app, ["wrap", "demo", "--timezone", "Mars/Olympus_Mons"])

        assert result.exit_code == 1
        assert "Unknown timezone" in result.output

    def test_user_not_found(self, tmp_path):
        """Test that a missing user exits with an error message."""
        set_config(Config())

        with (
            patch("git_wrapped.cli.check_rate_limit_from_api", AsyncMock(return_value=RATE_INFO)),
            patch(
                "git_wrapped.cli.GitWrapped.wrap",
                AsyncMock(side_effect=UserNotFoundError("ghost")),
            ),
        ):
            result = runner.invoke(app, ["wrap", "ghost", "--output", str(tmp_path / "r.json")])

        assert result.exit_code == 1
        assert "User not found" in result.output

    def test_exhausted_rate_limit(self, tmp_path):
        """Test stopping before collection when the budget is gone."""
        set_config(Config())
        exhausted = {"core": {"limit": 60, "remaining": 0, "reset": time.time() + 600}}
        wrap = AsyncMock()

        with (
            patch("git_wrapped.cli.check_rate_limit_from_api", AsyncMock(return_value=exhausted)),
            patch("git_wrapped.cli.GitWrapped.wrap", wrap),
        ):
            result = runner.invoke(app, ["wrap", "octocat", "--output", str(tmp_path / "r.json")])

        assert result.exit_code == 1
        wrap.assert_not_awaited()


class TestCheckToken:
    """Tests for the check-token command."""

    def test_with_tokens(self):
        """Test reporting configured tokens."""
        set_config(Config(github_token="ghp_x", gitlab_token="glpat"))

        result = runner.invoke(app, ["check-token"])

        assert result.exit_code == 0
        assert "GitHub token is configured" in result.output
        assert "GitLab token is configured" in result.output

    def test_without_tokens(self):
        """Test reporting missing tokens."""
        set_config(Config())

        result = runner.invoke(app, ["check-token"])

        assert result.exit_code == 0
        assert "No GitHub token configured" in result.output
        assert "No GitLab token configured" in result.output
