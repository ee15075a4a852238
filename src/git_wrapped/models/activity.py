"""Activity event models."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any
from zoneinfo import ZoneInfo

from pydantic import BaseModel, field_validator

from git_wrapped.models._parsing import ensure_utc, parse_datetime


class ActivityKind(str, Enum):
    """What an event contributes to the breakdown."""

    COMMIT = "commit"
    PULL_REQUEST = "pull_request"
    ISSUE = "issue"
    REVIEW = "review"
    OTHER = "other"


GITLAB_PUSH_ACTIONS = {"pushed to", "pushed new"}


class ActivityEvent(BaseModel):
    """A single timestamped event from a platform activity feed."""

    id: str = ""
    action: str
    target_type: str | None = None
    noteable_type: str | None = None
    repo: str = ""
    created_at: datetime
    commit_count: int = 0

    @field_validator("created_at")
    @classmethod
    def _normalize_timezone(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @classmethod
    def from_github(cls, data: dict[str, Any]) -> "ActivityEvent":
        """Create from GitHub Events API response."""
        payload = data.get("payload") or {}
        commit_count = 0
        if data.get("type") == "PushEvent":
            commit_count = payload.get("size") or len(payload.get("commits") or [])
        return cls(
            id=str(data.get("id", "")),
            action=data.get("type", ""),
            repo=(data.get("repo") or {}).get("name", ""),
            created_at=parse_datetime(data.get("created_at")) or datetime.now(timezone.utc),
            commit_count=commit_count,
        )

    @classmethod
    def from_gitlab(cls, data: dict[str, Any]) -> "ActivityEvent":
        """Create from GitLab Events API response."""
        action = data.get("action_name", "")
        commit_count = 0
        if action in GITLAB_PUSH_ACTIONS:
            commit_count = (data.get("push_data") or {}).get("commit_count") or 1
        return cls(
            id=str(data.get("id", "")),
            action=action,
            target_type=data.get("target_type"),
            noteable_type=(data.get("note") or {}).get("noteable_type"),
            repo=str(data.get("project_id", "")),
            created_at=parse_datetime(data.get("created_at")) or datetime.now(timezone.utc),
            commit_count=commit_count,
        )

    @property
    def gitlab_kind(self) -> ActivityKind:
        """Classify a GitLab event into the contribution breakdown."""
        if self.action in GITLAB_PUSH_ACTIONS:
            return ActivityKind.COMMIT
        if self.action == "opened" and self.target_type == "MergeRequest":
            return ActivityKind.PULL_REQUEST
        if self.action == "opened" and self.target_type == "Issue":
            return ActivityKind.ISSUE
        # Merge request comments arrive as Note/DiffNote targets
        if self.action == "commented on" and "MergeRequest" in (
            self.target_type,
            self.noteable_type,
        ):
            return ActivityKind.REVIEW
        return ActivityKind.OTHER

    def local_time(self, tz: str = "UTC") -> datetime:
        return self.created_at.astimezone(ZoneInfo(tz))


def hour_histogram(events: list[ActivityEvent], tz: str = "UTC") -> dict[int, int]:
    """Count events per local hour of day."""
    counts: dict[int, int] = {}
    for event in events:
        hour = event.local_time(tz).hour
        counts[hour] = counts.get(hour, 0) + 1
    return counts
