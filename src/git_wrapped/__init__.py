"""Git Wrapped - Your year in code, from GitHub or GitLab activity.

The package turns a user's repositories, contribution calendar and event
history into a year-in-review report:
- Top languages, weighted by recent activity
- Top repositories, ranked by popularity, activity and documentation
- Commit velocity, longest streak and weekly routine
- Peak productivity hour
- A developer archetype

Example usage:
    ```python
    from git_wrapped import GitWrapped

    async with GitWrapped(github_token="ghp_xxx") as client:
        report = await client.wrap("torvalds", year=2025)
        print(f"{report.total_commits} commits, {report.archetype.title}")
    ```
"""

__version__ = "0.1.0"

from git_wrapped.config import Config
from git_wrapped.exceptions import (
    AuthenticationError,
    GitWrappedError,
    GraphQLError,
    NotFoundError,
    PlatformAPIError,
    RateLimitError,
    RateLimitExceededError,
    UserNotFoundError,
)
from git_wrapped.models import (
    Archetype,
    CommunityStats,
    ContributionBreakdown,
    DailyContribution,
    LanguageShare,
    ProductivityResult,
    RepositoryCard,
    RepositoryRecord,
    TimeOfDay,
    UserProfile,
    WrappedReport,
)
from git_wrapped.scoring import DEFAULT_SCORING_CONFIG, ScoringConfig
from git_wrapped.sdk import GitWrapped
from git_wrapped.services import build_demo_report, build_wrapped_report

__all__ = [
    # Main SDK class
    "GitWrapped",
    # Configuration
    "Config",
    "ScoringConfig",
    "DEFAULT_SCORING_CONFIG",
    # Assembly
    "build_wrapped_report",
    "build_demo_report",
    # Exceptions
    "GitWrappedError",
    "PlatformAPIError",
    "RateLimitError",
    "NotFoundError",
    "GraphQLError",
    "RateLimitExceededError",
    "UserNotFoundError",
    "AuthenticationError",
    # Models
    "WrappedReport",
    "Archetype",
    "TimeOfDay",
    "ProductivityResult",
    "LanguageShare",
    "RepositoryRecord",
    "RepositoryCard",
    "DailyContribution",
    "ContributionBreakdown",
    "CommunityStats",
    "UserProfile",
]
