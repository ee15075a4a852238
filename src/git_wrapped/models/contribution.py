"""Contribution calendar and statistics models."""

from datetime import date, timedelta
from typing import Any

from pydantic import BaseModel, Field, NonNegativeInt


class DailyContribution(BaseModel):
    """Single day in a contribution calendar."""

    date: date
    count: NonNegativeInt = 0

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "DailyContribution":
        """Create from a GraphQL contributionDays entry."""
        return cls(
            date=date.fromisoformat(data["date"]),
            count=data.get("contributionCount") or 0,
        )

    @classmethod
    def from_contributions_api(cls, data: dict[str, Any]) -> "DailyContribution":
        """Create from the public contributions calendar API."""
        return cls(
            date=date.fromisoformat(data["date"]),
            count=data.get("count") or 0,
        )


def calendar_from_graphql(data: dict[str, Any]) -> list[DailyContribution]:
    """Flatten a GraphQL contributionCalendar into a daily series."""
    days = []
    for week in data.get("weeks", []):
        for day in week.get("contributionDays", []):
            if day.get("date"):
                days.append(DailyContribution.from_graphql(day))
    return days


def fill_calendar(
    counts: dict[date, int],
    start: date,
    end: date,
) -> list[DailyContribution]:
    """Expand sparse per-date counts into one entry per day in [start, end]."""
    days = []
    current = start
    while current <= end:
        days.append(DailyContribution(date=current, count=counts.get(current, 0)))
        current += timedelta(days=1)
    return days


class ContributionBreakdown(BaseModel):
    """Contribution counts attributed to the user within the year."""

    commits: NonNegativeInt = 0
    prs: NonNegativeInt = 0
    issues: NonNegativeInt = 0
    reviews: NonNegativeInt = 0

    @property
    def total(self) -> int:
        return self.commits + self.prs + self.issues + self.reviews

    def share(self, count: int) -> float:
        """Fraction of total activity represented by ``count`` (0 when empty)."""
        total = self.total
        return count / total if total > 0 else 0.0


class VelocityStats(BaseModel):
    """Output of the velocity/streak aggregator."""

    total_commits: int = 0
    longest_streak: int = 0
    weekday_histogram: list[int] = Field(default_factory=lambda: [0] * 7)  # Sun..Sat
    busiest_day_index: int = 0
    busiest_day: str = "Sundays"
