"""Tests for data models."""

from datetime import date, datetime, timezone

from git_wrapped.models.activity import ActivityEvent, ActivityKind, hour_histogram
from git_wrapped.models.contribution import (
    ContributionBreakdown,
    DailyContribution,
    calendar_from_graphql,
    fill_calendar,
)
from git_wrapped.models.repository import RepositoryCard, RepositoryRecord, RepoScore
from git_wrapped.models.user import UserProfile


class TestUserProfile:
    """Tests for UserProfile model."""

    def test_from_github(self):
        """Test creating UserProfile from a GitHub response."""
        profile = UserProfile.from_github(
            {
                "login": "octocat",
                "id": 583231,
                "name": "The Octocat",
                "avatar_url": "https://github.com/avatar.png",
                "public_repos": 8,
                "followers": 100,
                "following": 9,
                "created_at": "2011-01-25T18:44:36Z",
            }
        )

        assert profile.username == "octocat"
        assert profile.platform_id == 583231
        assert profile.followers == 100
        assert profile.created_at == datetime(2011, 1, 25, 18, 44, 36, tzinfo=timezone.utc)

    def test_from_github_missing_fields(self):
        """Test creating UserProfile with missing optional fields."""
        profile = UserProfile.from_github({"login": "minimal", "followers": None})

        assert profile.name is None
        assert profile.followers == 0
        assert profile.avatar_url == ""

    def test_from_gitlab(self):
        """Test creating UserProfile from a GitLab response."""
        profile = UserProfile.from_gitlab(
            {"id": 42, "username": "tanuki", "name": "Tanuki", "followers": 3}
        )

        assert profile.username == "tanuki"
        assert profile.platform_id == 42
        assert profile.followers == 3


class TestRepositoryRecord:
    """Tests for RepositoryRecord model."""

    def test_from_github(self):
        """Test creating a record from a GitHub response."""
        repo = RepositoryRecord.from_github(
            {
                "name": "hello-world",
                "full_name": "octocat/hello-world",
                "html_url": "https://github.com/octocat/hello-world",
                "language": "Python",
                "stargazers_count": 10,
                "forks_count": None,
                "fork": True,
                "archived": False,
                "topics": ["demo"],
                "pushed_at": "2025-03-01T10:00:00Z",
            }
        )

        assert repo.language == "Python"
        assert repo.forks_count == 0
        assert repo.is_fork is True
        assert repo.pushed_at == datetime(2025, 3, 1, 10, tzinfo=timezone.utc)

    def test_from_gitlab(self):
        """Test creating a record from a GitLab project."""
        repo = RepositoryRecord.from_gitlab(
            {
                "id": 7,
                "name": "runner",
                "path_with_namespace": "tanuki/runner",
                "web_url": "https://gitlab.com/tanuki/runner",
                "star_count": 12,
                "forks_count": 2,
                "tag_list": ["ci"],
                "statistics": {"repository_size": 2048 * 1024},
                "forked_from_project": {"id": 1},
                "last_activity_at": "2025-05-05T05:05:05.000Z",
            },
            language="Go",
        )

        assert repo.full_name == "tanuki/runner"
        assert repo.language == "Go"
        assert repo.stargazers_count == 12
        assert repo.topics == ["ci"]
        assert repo.size == 2048
        assert repo.is_fork is True
        assert repo.pushed_at.year == 2025

    def test_naive_timestamps_become_utc(self):
        """Test that naive datetimes are treated as UTC."""
        repo = RepositoryRecord(name="x", pushed_at=datetime(2025, 1, 1))

        assert repo.pushed_at.tzinfo is timezone.utc


class TestRepositoryCard:
    """Tests for RepositoryCard model."""

    def test_from_score(self):
        """Test card defaults for missing description and language."""
        scored = RepoScore(repo=RepositoryRecord(name="bare", stargazers_count=3), score=12.3456)

        card = RepositoryCard.from_score(scored)

        assert card.description == "No description provided."
        assert card.language == "Unknown"
        assert card.score == 12.35

    def test_placeholder(self):
        """Test the card shown when there are no repositories."""
        card = RepositoryCard.placeholder()

        assert card.name == "No Public Repos"
        assert card.language == "N/A"


class TestContributionCalendar:
    """Tests for contribution calendar helpers."""

    def test_calendar_from_graphql(self):
        """Test flattening weeks into days."""
        data = {
            "weeks": [
                {"contributionDays": [{"date": "2025-01-01", "contributionCount": 2}]},
                {"contributionDays": [{"date": "2025-01-08", "contributionCount": 0}]},
            ]
        }

        days = calendar_from_graphql(data)

        assert [(d.date, d.count) for d in days] == [
            (date(2025, 1, 1), 2),
            (date(2025, 1, 8), 0),
        ]

    def test_from_contributions_api(self):
        """Test parsing the public calendar format."""
        day = DailyContribution.from_contributions_api({"date": "2025-02-02", "count": 4, "level": 2})

        assert day.count == 4

    def test_fill_calendar(self):
        """Test zero-filling a sparse series."""
        days = fill_calendar({date(2025, 1, 2): 3}, date(2025, 1, 1), date(2025, 1, 3))

        assert [d.count for d in days] == [0, 3, 0]


class TestContributionBreakdown:
    """Tests for ContributionBreakdown."""

    def test_total_and_share(self):
        """Test the aggregate and per-type share."""
        breakdown = ContributionBreakdown(commits=6, prs=2, issues=1, reviews=1)

        assert breakdown.total == 10
        assert breakdown.share(breakdown.prs) == 0.2

    def test_share_when_empty(self):
        """Test that shares are zero without activity."""
        assert ContributionBreakdown().share(0) == 0.0


class TestActivityEvent:
    """Tests for ActivityEvent model."""

    def test_github_push_event(self):
        """Test reading the commit count of a push."""
        event = ActivityEvent.from_github(
            {
                "id": "1",
                "type": "PushEvent",
                "repo": {"name": "octocat/hello"},
                "payload": {"size": 3},
                "created_at": "2025-04-01T22:15:00Z",
            }
        )

        assert event.commit_count == 3
        assert event.repo == "octocat/hello"

    def test_gitlab_kinds(self):
        """Test classifying GitLab events."""

        def kind(**data) -> ActivityKind:
            data.setdefault("created_at", "2025-01-01T00:00:00Z")
            return ActivityEvent.from_gitlab(data).gitlab_kind

        assert kind(action_name="pushed to", push_data={"commit_count": 4}) is ActivityKind.COMMIT
        assert kind(action_name="opened", target_type="MergeRequest") is ActivityKind.PULL_REQUEST
        assert kind(action_name="opened", target_type="Issue") is ActivityKind.ISSUE
        assert (
            kind(action_name="commented on", target_type="DiffNote", note={"noteable_type": "MergeRequest"})
            is ActivityKind.REVIEW
        )
        assert kind(action_name="commented on", target_type="Note") is ActivityKind.OTHER
        assert kind(action_name="joined") is ActivityKind.OTHER

    def test_gitlab_push_defaults_to_one_commit(self):
        """Test a push without push_data."""
        event = ActivityEvent.from_gitlab(
            {"action_name": "pushed new", "created_at": "2025-01-01T00:00:00Z"}
        )

        assert event.commit_count == 1

    def test_hour_histogram_timezone(self):
        """Test bucketing event hours in a local timezone."""
        events = [
            ActivityEvent(action="PushEvent", created_at=datetime(2025, 6, 1, 22, tzinfo=timezone.utc)),
            ActivityEvent(action="PushEvent", created_at=datetime(2025, 6, 1, 23, tzinfo=timezone.utc)),
        ]

        assert hour_histogram(events) == {22: 1, 23: 1}
        # CEST is UTC+2 in June
        assert hour_histogram(events, "Europe/Berlin") == {0: 1, 1: 1}
