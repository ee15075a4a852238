"""Tests for the JSON report writer."""

import json
from datetime import datetime, timezone
from pathlib import Path

from git_wrapped.output.json_writer import (
    default_report_path,
    report_to_dict,
    write_json_report,
)
from git_wrapped.services.demo import build_demo_report


def _report():
    return build_demo_report(2025, now=datetime(2025, 12, 31, 12, tzinfo=timezone.utc))


class TestJsonWriter:
    """Tests for report serialization."""

    def test_default_path(self):
        """Test the platform_username_year naming."""
        assert default_report_path(_report()) == Path("output/github_creative-dev_2025.json")

    def test_dict_carries_archetype_title(self):
        report = _report()
        data = report_to_dict(report)

        assert data["archetype"] == report.archetype.value
        assert data["archetype_title"] == report.archetype.title
        assert data["year"] == 2025

    def test_writes_to_explicit_path(self, tmp_path):
        """Test that missing parent directories are created."""
        target = tmp_path / "nested" / "report.json"

        written = write_json_report(_report(), target)

        assert written == target
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["username"] == "creative-dev"
        assert len(data["velocity"]) == 365

    def test_writes_to_default_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        written = write_json_report(_report())

        assert (tmp_path / written).exists()
        assert written.name == "github_creative-dev_2025.json"
