"""Assemble a WrappedReport from normalized platform data."""

import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime, timezone

from git_wrapped.models.contribution import ContributionBreakdown, DailyContribution
from git_wrapped.models.repository import RepositoryCard, RepositoryRecord
from git_wrapped.models.user import CommunityStats, UserProfile
from git_wrapped.models.wrapped import WrappedReport
from git_wrapped.scoring import (
    DEFAULT_SCORING_CONFIG,
    ScoringConfig,
    aggregate_velocity,
    calculate_archetype,
    calculate_language_scores,
    calculate_productivity,
    rank_repositories,
    select_top_languages,
)
from git_wrapped.utils.colors import language_color

logger = logging.getLogger(__name__)


def build_wrapped_report(
    *,
    platform: str,
    profile: UserProfile,
    repos: Sequence[RepositoryRecord],
    daily: Sequence[DailyContribution],
    hour_counts: Mapping[int, int],
    prs: int,
    issues: int,
    reviews: int,
    year: int,
    now: datetime | None = None,
    public_repos: int | None = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
    palette: Callable[[str], str] = language_color,
) -> WrappedReport:
    """Run the scoring pipeline and assemble the report.

    Commits in the breakdown always come from the daily series; PR, issue and
    review counts are taken as given from the platform.

    Args:
        platform: "github" or "gitlab"
        profile: Normalized user profile
        repos: All repositories owned or contributed to
        daily: Daily contribution series for the year (any order)
        hour_counts: Events per local hour of day
        prs: Pull/merge requests opened during the year
        issues: Issues opened during the year
        reviews: Reviews given during the year
        year: Target year
        now: Reference time for recency decay (defaults to current UTC time)
        public_repos: Override for the public repository count
        config: Scoring weights
        palette: Language -> display color lookup
    """
    now = now or datetime.now(timezone.utc)

    velocity = aggregate_velocity(daily)

    languages = select_top_languages(calculate_language_scores(repos, year, config), config)
    for share in languages:
        share.color = palette(share.name)

    ranked = rank_repositories(repos, year, now, config)
    top_repos = [RepositoryCard.from_score(scored) for scored in ranked]
    top_repo = top_repos[0] if top_repos else RepositoryCard.placeholder()

    productivity = calculate_productivity(hour_counts, config)

    breakdown = ContributionBreakdown(
        commits=velocity.total_commits,
        prs=prs,
        issues=issues,
        reviews=reviews,
    )
    community = CommunityStats(
        followers=profile.followers,
        following=profile.following,
        total_stars=sum(repo.stargazers_count for repo in repos),
        public_repos=public_repos if public_repos is not None else profile.public_repos,
    )

    archetype = calculate_archetype(
        breakdown,
        community,
        velocity.total_commits,
        productivity,
        velocity.weekday_histogram,
        config,
    )

    logger.info(
        "Built %s wrapped for %s: %d commits, archetype %s",
        platform,
        profile.username,
        velocity.total_commits,
        archetype.value,
    )

    return WrappedReport(
        platform=platform,
        username=profile.username,
        display_name=profile.name,
        avatar_url=profile.avatar_url,
        year=year,
        total_commits=velocity.total_commits,
        longest_streak=velocity.longest_streak,
        busiest_day=velocity.busiest_day,
        top_languages=languages,
        top_repo=top_repo,
        top_repos=top_repos,
        velocity=sorted(daily, key=lambda d: d.date),
        weekday_stats=velocity.weekday_histogram,
        productivity=productivity,
        archetype=archetype,
        contribution_breakdown=breakdown,
        community=community,
        generated_at=now,
    )
