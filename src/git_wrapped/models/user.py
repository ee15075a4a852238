"""User profile and community models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from git_wrapped.models._parsing import parse_datetime


class UserProfile(BaseModel):
    """Profile fields needed to assemble a wrapped report."""

    username: str
    name: str | None = None
    avatar_url: str = ""
    platform_id: int | None = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    created_at: datetime | None = None

    @classmethod
    def from_github(cls, data: dict[str, Any]) -> "UserProfile":
        """Create from GitHub REST API response."""
        return cls(
            username=data.get("login", ""),
            name=data.get("name"),
            avatar_url=data.get("avatar_url") or "",
            platform_id=data.get("id"),
            public_repos=data.get("public_repos") or 0,
            followers=data.get("followers") or 0,
            following=data.get("following") or 0,
            created_at=parse_datetime(data.get("created_at")),
        )

    @classmethod
    def from_gitlab(cls, data: dict[str, Any]) -> "UserProfile":
        """Create from GitLab /user response."""
        return cls(
            username=data.get("username", ""),
            name=data.get("name"),
            avatar_url=data.get("avatar_url") or "",
            platform_id=data.get("id"),
            followers=data.get("followers") or 0,
            following=data.get("following") or 0,
            created_at=parse_datetime(data.get("created_at")),
        )


class CommunityStats(BaseModel):
    """Community reach; purely additive aggregates."""

    followers: int = 0
    following: int = 0
    total_stars: int = 0
    public_repos: int = 0
