"""Repository data models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from git_wrapped.models._parsing import ensure_utc, parse_datetime


class RepositoryRecord(BaseModel):
    """Platform-neutral repository metadata consumed by the scorers.

    Built once per API page by the collectors. Missing counts default to 0
    and timestamps are normalized to UTC here so the scorers never see raw
    payloads.
    """

    name: str
    full_name: str = ""
    description: str | None = None
    html_url: str = ""
    language: str | None = None
    stargazers_count: int = 0
    forks_count: int = 0
    watchers_count: int = 0
    open_issues_count: int = 0
    size: int = 0  # Size in KB
    topics: list[str] = Field(default_factory=list)
    is_fork: bool = False
    is_archived: bool = False
    created_at: datetime | None = None
    pushed_at: datetime | None = None

    @field_validator("created_at", "pushed_at")
    @classmethod
    def _normalize_timezone(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value)

    @field_validator(
        "stargazers_count",
        "forks_count",
        "watchers_count",
        "open_issues_count",
        "size",
        mode="before",
    )
    @classmethod
    def _none_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @classmethod
    def from_github(cls, data: dict[str, Any]) -> "RepositoryRecord":
        """Create from GitHub REST API response."""
        return cls(
            name=data.get("name", ""),
            full_name=data.get("full_name", ""),
            description=data.get("description"),
            html_url=data.get("html_url", ""),
            language=data.get("language") or None,
            stargazers_count=data.get("stargazers_count") or 0,
            forks_count=data.get("forks_count") or 0,
            watchers_count=data.get("watchers_count") or 0,
            open_issues_count=data.get("open_issues_count") or 0,
            size=data.get("size") or 0,
            topics=data.get("topics") or [],
            is_fork=bool(data.get("fork", False)),
            is_archived=bool(data.get("archived", False)),
            created_at=parse_datetime(data.get("created_at")),
            pushed_at=parse_datetime(data.get("pushed_at")),
        )

    @classmethod
    def from_gitlab(
        cls, data: dict[str, Any], language: str | None = None
    ) -> "RepositoryRecord":
        """Create from GitLab Projects API response.

        GitLab does not report a primary language in the project listing, so
        the collector passes the dominant language separately.
        """
        statistics = data.get("statistics") or {}
        return cls(
            name=data.get("name", ""),
            full_name=data.get("path_with_namespace", ""),
            description=data.get("description"),
            html_url=data.get("web_url", ""),
            language=language or data.get("language") or None,
            stargazers_count=data.get("star_count") or 0,
            forks_count=data.get("forks_count") or 0,
            open_issues_count=data.get("open_issues_count") or 0,
            size=(statistics.get("repository_size") or 0) // 1024,
            topics=data.get("topics") or data.get("tag_list") or [],
            is_fork=data.get("forked_from_project") is not None,
            is_archived=bool(data.get("archived", False)),
            created_at=parse_datetime(data.get("created_at")),
            pushed_at=parse_datetime(data.get("last_activity_at")),
        )


class RepoScore(BaseModel):
    """A repository paired with its interest score."""

    repo: RepositoryRecord
    score: float


class RepositoryCard(BaseModel):
    """Display form of a ranked repository."""

    name: str
    description: str = "No description provided."
    stars: int = 0
    language: str = "Unknown"
    topics: list[str] = Field(default_factory=list)
    url: str = ""
    score: float | None = None

    @classmethod
    def from_score(cls, scored: RepoScore) -> "RepositoryCard":
        repo = scored.repo
        return cls(
            name=repo.name,
            description=repo.description or "No description provided.",
            stars=repo.stargazers_count,
            language=repo.language or "Unknown",
            topics=list(repo.topics),
            url=repo.html_url,
            score=round(scored.score, 2),
        )

    @classmethod
    def placeholder(cls) -> "RepositoryCard":
        """Card shown when the user has no repositories."""
        return cls(
            name="No Public Repos",
            description="Start coding to write history.",
            stars=0,
            language="N/A",
        )
