"""Output handlers for Git Wrapped."""

from git_wrapped.output.console import Console
from git_wrapped.output.json_writer import report_to_dict, write_json_report

__all__ = [
    "write_json_report",
    "report_to_dict",
    "Console",
]
