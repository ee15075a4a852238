"""Synthetic report for the ``demo`` user."""

import random
from datetime import date, datetime, timedelta, timezone

from git_wrapped.models.contribution import DailyContribution
from git_wrapped.models.repository import RepositoryRecord
from git_wrapped.models.user import UserProfile
from git_wrapped.models.wrapped import WrappedReport
from git_wrapped.services.report_builder import build_wrapped_report

DEMO_USERNAME = "demo"

# (name, description, language, stars, topics, months since last push)
_DEMO_REPOS = [
    (
        "neuro-net-v2",
        "Distributed inference engine for LLMs on consumer hardware.",
        "Python",
        3420,
        ["ai", "machine-learning", "inference"],
        0,
    ),
    (
        "rust-gpu-compute",
        "High-performance GPU computing library written in Rust.",
        "Rust",
        1850,
        ["rust", "gpu", "cuda"],
        1,
    ),
    (
        "ai-code-reviewer",
        "AI-powered code review assistant for GitHub PRs.",
        "TypeScript",
        920,
        ["ai", "code-review", "github-action"],
        2,
    ),
    (
        "ml-notebooks",
        "Collection of machine learning experiments and tutorials.",
        "Jupyter Notebook",
        540,
        ["machine-learning", "tutorials"],
        4,
    ),
    (
        "dotfiles",
        "Personal development environment configuration.",
        "Shell",
        180,
        ["dotfiles", "config"],
        7,
    ),
    ("scratch", None, "Python", 0, [], 13),
]


def _demo_calendar(rng: random.Random, year: int) -> list[DailyContribution]:
    """Weekday-heavy commit pattern with occasional crunch spikes."""
    days = []
    day = date(year, 1, 1)
    while day.year == year:
        if day.weekday() >= 5:
            count = rng.randint(1, 8) if rng.random() > 0.8 else 0
        else:
            count = rng.randint(3, 17) if rng.random() > 0.15 else 0
            if rng.random() > 0.96:
                count += rng.randint(15, 54)
        days.append(DailyContribution(date=day, count=count))
        day += timedelta(days=1)
    return days


def _demo_repos(year: int, now: datetime) -> list[RepositoryRecord]:
    repos = []
    for name, description, language, stars, topics, months_idle in _DEMO_REPOS:
        repos.append(
            RepositoryRecord(
                name=name,
                full_name=f"creative-dev/{name}",
                description=description,
                html_url=f"https://github.com/creative-dev/{name}",
                language=language,
                stargazers_count=stars,
                forks_count=stars // 10,
                watchers_count=stars,
                open_issues_count=stars // 100,
                size=2048,
                topics=topics,
                created_at=datetime(year - 2, 3, 1, tzinfo=timezone.utc),
                pushed_at=now - timedelta(days=30 * months_idle),
            )
        )
    return repos


def build_demo_report(year: int, seed: int = 2025, now: datetime | None = None) -> WrappedReport:
    """Deterministic synthetic report run through the real scoring pipeline.

    The same ``year`` and ``seed`` always produce the same calendar.
    """
    rng = random.Random(seed)
    now = now or datetime(year, 12, 31, 12, tzinfo=timezone.utc)

    profile = UserProfile(
        username="creative-dev",
        name="Creative Dev",
        avatar_url="https://picsum.photos/200/200",
        public_repos=42,
        followers=1204,
        following=85,
    )
    # Mostly late-night activity
    hour_counts = {hour: rng.randint(0, 6) for hour in range(24)}
    hour_counts[23] += 40

    return build_wrapped_report(
        platform="github",
        profile=profile,
        repos=_demo_repos(year, now),
        daily=_demo_calendar(rng, year),
        hour_counts=hour_counts,
        prs=45,
        issues=12,
        reviews=8,
        year=year,
        now=now,
    )
