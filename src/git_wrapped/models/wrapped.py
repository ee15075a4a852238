"""Year-in-review result models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from git_wrapped.models.contribution import ContributionBreakdown, DailyContribution
from git_wrapped.models.repository import RepositoryCard
from git_wrapped.models.user import CommunityStats


class LanguageScore(BaseModel):
    """Weighted score accumulated for one language during a scoring pass."""

    name: str
    weight: float = 0.0
    repo_count: int = 0
    recent_count: int = 0


class LanguageShare(BaseModel):
    """A top language as displayed, with its normalized percentage."""

    name: str
    percentage: int
    repo_count: int = 0
    weight: float = 0.0
    color: str = "#A3A3A3"


class TimeOfDay(str, Enum):
    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"
    LATE_NIGHT = "Late Night"


class ProductivityResult(BaseModel):
    """Peak hour of activity and the time-of-day bucket it falls in."""

    peak_hour: int = 14
    time_of_day: TimeOfDay = TimeOfDay.AFTERNOON


class Archetype(str, Enum):
    """The fixed set of archetype labels, in classifier priority order."""

    PULL_REQUEST_PRO = "Pull Request Pro"
    REVIEWER = "Reviewer"
    NIGHT_OWL = "Night Owl"
    EARLY_BIRD = "Early Bird"
    WEEKEND_WARRIOR = "Weekend Warrior"
    GRID_PAINTER = "Grid Painter"
    CONSISTENT = "Consistent"
    PLANNER = "Planner"
    COMMUNITY_STAR = "Community Star"
    TINKERER = "Tinkerer"

    @property
    def title(self) -> str:
        """Headline form used on the poster, e.g. "The Night Owl"."""
        return f"The {self.value}"


class WrappedReport(BaseModel):
    """Complete year-in-review for one user."""

    platform: str
    username: str
    display_name: str | None = None
    avatar_url: str = ""
    year: int
    total_commits: int = 0
    longest_streak: int = 0
    busiest_day: str = "Sundays"
    top_languages: list[LanguageShare] = Field(default_factory=list)
    top_repo: RepositoryCard = Field(default_factory=RepositoryCard.placeholder)
    top_repos: list[RepositoryCard] = Field(default_factory=list)
    velocity: list[DailyContribution] = Field(default_factory=list)
    weekday_stats: list[int] = Field(default_factory=lambda: [0] * 7)
    productivity: ProductivityResult = Field(default_factory=ProductivityResult)
    archetype: Archetype = Archetype.TINKERER
    contribution_breakdown: ContributionBreakdown = Field(
        default_factory=ContributionBreakdown
    )
    community: CommunityStats = Field(default_factory=CommunityStats)
    generated_at: datetime | None = None
