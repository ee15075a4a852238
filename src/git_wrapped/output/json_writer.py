"""JSON output writer for wrapped reports."""

import json
from pathlib import Path
from typing import Any, Optional

from git_wrapped.models.wrapped import WrappedReport


def default_report_path(report: WrappedReport, output_dir: Path = Path("output")) -> Path:
    return output_dir / f"{report.platform}_{report.username}_{report.year}.json"


def report_to_dict(report: WrappedReport) -> dict[str, Any]:
    """JSON-ready dict with the archetype headline alongside its label."""
    data = report.model_dump(mode="json")
    data["archetype_title"] = report.archetype.title
    return data


def write_json_report(
    report: WrappedReport,
    output_path: Optional[Path] = None,
) -> Path:
    """Write a wrapped report to a JSON file.

    Args:
        report: Report to serialize
        output_path: Output file path; defaults to
            ``output/{platform}_{username}_{year}.json``

    Returns:
        Path to written file
    """
    if output_path is None:
        output_path = default_report_path(report)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report_to_dict(report), f, indent=2, ensure_ascii=False)

    return output_path
