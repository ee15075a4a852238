"""Repository interest scoring and ranking."""

import logging
import math
from collections.abc import Iterable
from datetime import datetime, timezone

from git_wrapped.models.repository import RepositoryRecord, RepoScore
from git_wrapped.scoring._time import year_start
from git_wrapped.scoring.weights import DEFAULT_SCORING_CONFIG, ScoringConfig

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


def score_repository(
    repo: RepositoryRecord,
    year: int,
    now: datetime | None = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """Score how interesting a repository is for the year in review.

    The score is a plain sum of independently capped terms:

    - stars and forks on a log10 scale, so a single viral project cannot
      dominate the ranking
    - recency: up to 25 points for repos pushed this year, losing one point
      every 15 days since the last push
    - flat bonuses for original work, a real description, topics, a primary
      language and creation during the year
    - watchers, size and open issues as smaller activity signals
    - a flat penalty for archived repositories

    The result can be negative. Missing counts are already 0 on the record.
    """
    w = config.repo
    boundary = year_start(year)
    now = now or datetime.now(timezone.utc)

    score = 0.0
    score += min(math.log10(repo.stargazers_count + 1) * w.stars_log_multiplier, w.stars_max_points)
    score += min(math.log10(repo.forks_count + 1) * w.forks_log_multiplier, w.forks_max_points)

    if repo.pushed_at is not None and repo.pushed_at >= boundary:
        days_since_push = max(0.0, (now - repo.pushed_at).total_seconds() / SECONDS_PER_DAY)
        score += max(0.0, w.recency_max_points - days_since_push / w.recency_decay_days)

    if not repo.is_fork:
        score += w.original_work

    if repo.description and len(repo.description.strip()) > w.description_min_length:
        score += w.has_description

    if repo.topics:
        score += w.has_topics

    if repo.language:
        score += w.has_language

    score += min(repo.watchers_count * w.watchers_multiplier, w.watchers_max_points)

    if repo.is_archived:
        score += w.archived_penalty

    if repo.size > 0:
        score += min(math.log10(repo.size) * w.size_log_multiplier, w.size_max_points)

    if repo.open_issues_count > 0:
        score += min(
            math.log10(repo.open_issues_count + 1) * w.open_issues_log_multiplier,
            w.open_issues_max_points,
        )

    if repo.created_at is not None and repo.created_at >= boundary:
        score += w.created_this_year_bonus

    return score


def rank_repositories(
    repos: Iterable[RepositoryRecord],
    year: int,
    now: datetime | None = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[RepoScore]:
    """Score every repository and return the top N, best first.

    Ties keep input order. An empty input gives an empty list; substituting
    a placeholder is left to the report builder.
    """
    now = now or datetime.now(timezone.utc)
    scored = [
        RepoScore(repo=repo, score=score_repository(repo, year, now, config))
        for repo in repos
    ]
    scored.sort(key=lambda s: s.score, reverse=True)

    logger.debug("Ranked %d repositories", len(scored))
    return scored[: config.repo.top_n]
