"""Tests for archetype classification."""

import pytest

from git_wrapped.models.contribution import ContributionBreakdown
from git_wrapped.models.user import CommunityStats
from git_wrapped.models.wrapped import Archetype, ProductivityResult
from git_wrapped.scoring.archetype import calculate_archetype, weekend_share
from git_wrapped.scoring.productivity import time_of_day

WEEKDAYS_ONLY = [0, 10, 10, 10, 10, 10, 0]


def classify(
    commits: int = 0,
    prs: int = 0,
    issues: int = 0,
    reviews: int = 0,
    total_commits: int | None = None,
    peak_hour: int = 14,
    histogram: list[int] | None = None,
    followers: int = 0,
    total_stars: int = 0,
) -> Archetype:
    breakdown = ContributionBreakdown(commits=commits, prs=prs, issues=issues, reviews=reviews)
    community = CommunityStats(followers=followers, total_stars=total_stars)
    productivity = ProductivityResult(peak_hour=peak_hour, time_of_day=time_of_day(peak_hour))
    return calculate_archetype(
        breakdown,
        community,
        commits if total_commits is None else total_commits,
        productivity,
        histogram or WEEKDAYS_ONLY,
    )


class TestWeekendShare:
    """Tests for weekend_share."""

    def test_share(self):
        """Test Saturday plus Sunday over the total."""
        assert weekend_share([1, 1, 0, 0, 0, 0, 2]) == pytest.approx(0.75)

    def test_empty(self):
        """Test that an empty histogram has no weekend share."""
        assert weekend_share([0] * 7) == 0.0


class TestCalculateArchetype:
    """Tests for the archetype rule cascade."""

    def test_pull_request_pro_beats_volume(self):
        """Test that a high PR share wins even with thousands of commits."""
        assert classify(commits=2000, prs=600) is Archetype.PULL_REQUEST_PRO

    def test_pr_share_threshold_is_strict(self):
        """Test that exactly 20% PRs is not enough."""
        assert classify(commits=80, prs=20) is Archetype.TINKERER

    def test_reviewer(self):
        """Test a high review share."""
        assert classify(commits=85, reviews=15) is Archetype.REVIEWER

    @pytest.mark.parametrize("hour", [22, 23, 0, 2, 4])
    def test_night_owl(self, hour):
        """Test late-night peak hours."""
        assert classify(commits=50, peak_hour=hour) is Archetype.NIGHT_OWL

    @pytest.mark.parametrize("hour", [5, 8, 11])
    def test_early_bird(self, hour):
        """Test morning peak hours."""
        assert classify(commits=50, peak_hour=hour) is Archetype.EARLY_BIRD

    def test_early_bird_outranks_volume(self):
        """Test that a morning peak wins over a high commit count."""
        assert classify(commits=1500, peak_hour=10) is Archetype.EARLY_BIRD

    def test_weekend_warrior(self):
        """Test a weekend-heavy histogram."""
        histogram = [40, 10, 10, 10, 10, 10, 20]

        assert classify(commits=110, histogram=histogram) is Archetype.WEEKEND_WARRIOR

    def test_grid_painter(self):
        """Test high commit volume with an afternoon peak."""
        assert classify(commits=1200) is Archetype.GRID_PAINTER

    def test_consistent(self):
        """Test moderate commit volume."""
        assert classify(commits=1199) is Archetype.CONSISTENT
        assert classify(commits=400) is Archetype.CONSISTENT

    def test_planner(self):
        """Test a high issue share."""
        assert classify(commits=100, issues=20) is Archetype.PLANNER

    def test_community_star_by_followers(self):
        """Test the follower threshold."""
        assert classify(commits=10, followers=500) is Archetype.COMMUNITY_STAR

    def test_community_star_by_stars(self):
        """Test the star threshold."""
        assert classify(commits=10, total_stars=1000) is Archetype.COMMUNITY_STAR

    def test_tinkerer_fallback(self):
        """Test the default when no rule matches."""
        assert classify(commits=10, followers=499, total_stars=999) is Archetype.TINKERER

    def test_empty_activity(self):
        """Test that a user with no activity is a Tinkerer."""
        assert classify(histogram=[0] * 7) is Archetype.TINKERER

    def test_title(self):
        """Test the headline form of a label."""
        assert Archetype.NIGHT_OWL.title == "The Night Owl"
        assert Archetype.GRID_PAINTER.value == "Grid Painter"
