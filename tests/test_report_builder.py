"""Tests for report assembly and the demo report."""

from datetime import date, datetime, timedelta, timezone

from git_wrapped.models.contribution import DailyContribution
from git_wrapped.models.user import UserProfile
from git_wrapped.models.wrapped import Archetype, TimeOfDay
from git_wrapped.services.demo import build_demo_report
from git_wrapped.services.report_builder import build_wrapped_report

YEAR = 2025
NOW = datetime(2025, 12, 15, 12, 0, tzinfo=timezone.utc)


def _profile(**overrides) -> UserProfile:
    fields = {"username": "octocat", "name": "The Octocat", "followers": 20, "public_repos": 8}
    fields.update(overrides)
    return UserProfile(**fields)


class TestBuildWrappedReport:
    """Tests for build_wrapped_report."""

    def test_assembles_every_section(self, make_repo):
        """Test that every component feeds the report."""
        repos = [
            make_repo(
                "alpha",
                language="Python",
                stargazers_count=50,
                description="Primary project of the year",
                pushed_at=NOW - timedelta(days=2),
            ),
            make_repo("beta", language="Rust", stargazers_count=5),
        ]
        daily = [
            DailyContribution(date=date(2025, 3, 3), count=4),
            DailyContribution(date=date(2025, 3, 4), count=2),
        ]

        report = build_wrapped_report(
            platform="github",
            profile=_profile(),
            repos=repos,
            daily=daily,
            hour_counts={9: 3, 15: 1},
            prs=1,
            issues=0,
            reviews=0,
            year=YEAR,
            now=NOW,
        )

        assert report.username == "octocat"
        assert report.display_name == "The Octocat"
        assert report.total_commits == 6
        assert report.longest_streak == 2
        assert report.busiest_day == "Mondays"
        assert report.top_repo.name == "alpha"
        assert [c.name for c in report.top_repos] == ["alpha", "beta"]
        assert report.top_languages[0].name == "Python"
        assert report.top_languages[0].color == "#3572A5"
        assert sum(s.percentage for s in report.top_languages) == 100
        assert report.productivity.peak_hour == 9
        assert report.productivity.time_of_day is TimeOfDay.MORNING
        assert report.archetype is Archetype.EARLY_BIRD
        assert report.contribution_breakdown.commits == 6
        assert report.community.total_stars == 55
        assert report.community.public_repos == 8
        assert report.generated_at == NOW

    def test_empty_user(self):
        """Test fallbacks for a user with no data at all."""
        report = build_wrapped_report(
            platform="github",
            profile=_profile(followers=0),
            repos=[],
            daily=[],
            hour_counts={},
            prs=0,
            issues=0,
            reviews=0,
            year=YEAR,
            now=NOW,
        )

        assert report.total_commits == 0
        assert report.top_repo.name == "No Public Repos"
        assert report.top_repos == []
        assert [(s.name, s.percentage, s.color) for s in report.top_languages] == [
            ("Polyglot", 100, "#FFFFFF")
        ]
        assert report.productivity.peak_hour == 14
        assert report.archetype is Archetype.TINKERER

    def test_public_repos_override(self):
        """Test that collectors can override the profile's repo count."""
        report = build_wrapped_report(
            platform="gitlab",
            profile=_profile(public_repos=0),
            repos=[],
            daily=[],
            hour_counts={},
            prs=0,
            issues=0,
            reviews=0,
            year=YEAR,
            now=NOW,
            public_repos=12,
        )

        assert report.platform == "gitlab"
        assert report.community.public_repos == 12

    def test_velocity_sorted(self):
        """Test that the daily series is returned in date order."""
        daily = [
            DailyContribution(date=date(2025, 1, 2), count=1),
            DailyContribution(date=date(2025, 1, 1), count=1),
        ]

        report = build_wrapped_report(
            platform="github",
            profile=_profile(),
            repos=[],
            daily=daily,
            hour_counts={},
            prs=0,
            issues=0,
            reviews=0,
            year=YEAR,
            now=NOW,
        )

        assert [d.date.day for d in report.velocity] == [1, 2]

    def test_json_roundtrip_fields(self):
        """Test that the report serializes to plain JSON types."""
        report = build_wrapped_report(
            platform="github",
            profile=_profile(),
            repos=[],
            daily=[DailyContribution(date=date(2025, 1, 1), count=1)],
            hour_counts={},
            prs=0,
            issues=0,
            reviews=0,
            year=YEAR,
            now=NOW,
        )

        data = report.model_dump(mode="json")

        assert data["velocity"][0]["date"] == "2025-01-01"
        assert data["archetype"] == "Tinkerer"


class TestDemoReport:
    """Tests for the synthetic demo report."""

    def test_deterministic(self):
        """Test that the same seed gives the same report."""
        first = build_demo_report(2024, seed=7)
        second = build_demo_report(2024, seed=7)

        assert first.velocity == second.velocity
        assert first.total_commits == second.total_commits

    def test_covers_whole_year(self):
        """Test the calendar length, including leap years."""
        assert len(build_demo_report(2024).velocity) == 366
        assert len(build_demo_report(2025).velocity) == 365

    def test_shape(self):
        """Test the sample repositories and the late-night peak."""
        report = build_demo_report(2025)

        assert report.top_repo.name == "neuro-net-v2"
        assert len(report.top_repos) == 5
        assert report.productivity.peak_hour == 23
        assert report.archetype is Archetype.NIGHT_OWL
        assert report.total_commits > 0
