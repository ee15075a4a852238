"""Archetype classification.

An ordered rule cascade: the first matching rule wins. The order encodes
priority (a user with a high PR share is a Pull Request Pro even with 2000
commits) and must not be rearranged.
"""

from collections.abc import Sequence

from git_wrapped.models.contribution import ContributionBreakdown
from git_wrapped.models.user import CommunityStats
from git_wrapped.models.wrapped import Archetype, ProductivityResult
from git_wrapped.scoring.weights import DEFAULT_SCORING_CONFIG, ScoringConfig


def weekend_share(weekday_histogram: Sequence[int]) -> float:
    """Fraction of histogram commits made on Saturday or Sunday."""
    total = sum(weekday_histogram)
    if total <= 0:
        return 0.0
    return (weekday_histogram[0] + weekday_histogram[6]) / total


def calculate_archetype(
    breakdown: ContributionBreakdown,
    community: CommunityStats,
    total_commits: int,
    productivity: ProductivityResult,
    weekday_histogram: Sequence[int],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> Archetype:
    t = config.archetype
    pr_pct = breakdown.share(breakdown.prs) * 100
    review_pct = breakdown.share(breakdown.reviews) * 100
    issue_pct = breakdown.share(breakdown.issues) * 100
    weekend_pct = weekend_share(weekday_histogram) * 100
    peak = productivity.peak_hour

    if pr_pct > t.pr_share_pct:
        return Archetype.PULL_REQUEST_PRO
    if review_pct > t.review_share_pct:
        return Archetype.REVIEWER
    if peak >= t.night_owl_from_hour or peak <= t.night_owl_until_hour:
        return Archetype.NIGHT_OWL
    if t.early_bird_hours[0] <= peak <= t.early_bird_hours[1]:
        return Archetype.EARLY_BIRD
    if weekend_pct > t.weekend_share_pct:
        return Archetype.WEEKEND_WARRIOR
    if total_commits >= t.grid_painter_commits:
        return Archetype.GRID_PAINTER
    if total_commits >= t.consistent_commits:
        return Archetype.CONSISTENT
    if issue_pct > t.issue_share_pct:
        return Archetype.PLANNER
    if community.followers >= t.community_followers or community.total_stars >= t.community_stars:
        return Archetype.COMMUNITY_STAR

    return Archetype.TINKERER
