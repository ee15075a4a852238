"""Tunable weights, caps and thresholds for the scoring engine.

Every scoring function takes a ``ScoringConfig`` argument so alternate weight
sets can be swapped in without touching module state.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LanguageWeights:
    base_weight: float = 1.0  # Each non-fork repo counts once
    recent_activity_bonus: float = 1.0  # Pushed during the scoring year
    diversity_threshold: int = 3  # Minimum repos before the diversity bonus applies
    diversity_bonus_per_repo: float = 0.5
    top_n: int = 3


@dataclass(frozen=True)
class RepoWeights:
    stars_log_multiplier: float = 10.0
    stars_max_points: float = 30.0
    forks_log_multiplier: float = 5.0
    forks_max_points: float = 15.0
    recency_max_points: float = 25.0
    recency_decay_days: float = 15.0
    original_work: float = 15.0
    has_description: float = 5.0
    description_min_length: int = 10
    has_topics: float = 5.0
    has_language: float = 3.0
    watchers_multiplier: float = 0.5
    watchers_max_points: float = 5.0
    archived_penalty: float = -20.0
    size_log_multiplier: float = 3.0
    size_max_points: float = 15.0
    open_issues_log_multiplier: float = 4.0
    open_issues_max_points: float = 8.0
    created_this_year_bonus: float = 10.0
    top_n: int = 5


@dataclass(frozen=True)
class ProductivityWindows:
    """Half-open hour ranges; anything outside them is Late Night."""

    default_peak_hour: int = 14
    morning: tuple[int, int] = (5, 12)
    afternoon: tuple[int, int] = (12, 17)
    evening: tuple[int, int] = (17, 21)


@dataclass(frozen=True)
class ArchetypeThresholds:
    """Percent thresholds are strict (>), commit and community ones inclusive (>=)."""

    pr_share_pct: float = 20.0
    review_share_pct: float = 10.0
    night_owl_from_hour: int = 22
    night_owl_until_hour: int = 4
    early_bird_hours: tuple[int, int] = (5, 11)  # inclusive
    weekend_share_pct: float = 35.0
    grid_painter_commits: int = 1200
    consistent_commits: int = 400
    issue_share_pct: float = 15.0
    community_followers: int = 500
    community_stars: int = 1000


@dataclass(frozen=True)
class ScoringConfig:
    language: LanguageWeights = field(default_factory=LanguageWeights)
    repo: RepoWeights = field(default_factory=RepoWeights)
    productivity: ProductivityWindows = field(default_factory=ProductivityWindows)
    archetype: ArchetypeThresholds = field(default_factory=ArchetypeThresholds)


DEFAULT_SCORING_CONFIG = ScoringConfig()
