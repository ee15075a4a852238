"""Pure scoring and aggregation engine."""

from git_wrapped.scoring.archetype import calculate_archetype, weekend_share
from git_wrapped.scoring.languages import calculate_language_scores, select_top_languages
from git_wrapped.scoring.productivity import calculate_productivity, time_of_day
from git_wrapped.scoring.repositories import rank_repositories, score_repository
from git_wrapped.scoring.velocity import WEEKDAY_LABELS, aggregate_velocity
from git_wrapped.scoring.weights import DEFAULT_SCORING_CONFIG, ScoringConfig

__all__ = [
    "ScoringConfig",
    "DEFAULT_SCORING_CONFIG",
    "calculate_language_scores",
    "select_top_languages",
    "score_repository",
    "rank_repositories",
    "aggregate_velocity",
    "WEEKDAY_LABELS",
    "calculate_productivity",
    "time_of_day",
    "calculate_archetype",
    "weekend_share",
]
