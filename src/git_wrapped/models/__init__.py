"""Data models for Git Wrapped."""

from git_wrapped.models.activity import ActivityEvent, ActivityKind, hour_histogram
from git_wrapped.models.contribution import (
    ContributionBreakdown,
    DailyContribution,
    VelocityStats,
    calendar_from_graphql,
    fill_calendar,
)
from git_wrapped.models.repository import RepositoryCard, RepositoryRecord, RepoScore
from git_wrapped.models.user import CommunityStats, UserProfile
from git_wrapped.models.wrapped import (
    Archetype,
    LanguageScore,
    LanguageShare,
    ProductivityResult,
    TimeOfDay,
    WrappedReport,
)

__all__ = [
    "ActivityEvent",
    "ActivityKind",
    "hour_histogram",
    "ContributionBreakdown",
    "DailyContribution",
    "VelocityStats",
    "calendar_from_graphql",
    "fill_calendar",
    "RepositoryRecord",
    "RepoScore",
    "RepositoryCard",
    "UserProfile",
    "CommunityStats",
    "Archetype",
    "LanguageScore",
    "LanguageShare",
    "ProductivityResult",
    "TimeOfDay",
    "WrappedReport",
]
