"""Language scoring.

Each non-fork repository with a primary language contributes a base weight,
plus a bonus when it was pushed during the scoring year. Languages used
across many repositories get a diversity bonus on top. The top languages are
then normalized to integer percentages that always add up to 100.
"""

import logging
import math
from collections.abc import Iterable

from git_wrapped.models.repository import RepositoryRecord
from git_wrapped.models.wrapped import LanguageScore, LanguageShare
from git_wrapped.scoring._time import year_start
from git_wrapped.scoring.weights import DEFAULT_SCORING_CONFIG, ScoringConfig

logger = logging.getLogger(__name__)

POLYGLOT = "Polyglot"


def calculate_language_scores(
    repos: Iterable[RepositoryRecord],
    year: int,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> dict[str, LanguageScore]:
    """Accumulate per-language weights.

    Forks and repositories without a language are skipped. The returned dict
    preserves discovery order, which ``select_top_languages`` relies on to
    break ties.
    """
    weights = config.language
    boundary = year_start(year)
    scores: dict[str, LanguageScore] = {}

    for repo in repos:
        if repo.is_fork or not repo.language:
            continue

        is_recent = repo.pushed_at is not None and repo.pushed_at >= boundary

        score = scores.get(repo.language)
        if score is None:
            score = scores[repo.language] = LanguageScore(name=repo.language)

        score.repo_count += 1
        score.weight += weights.base_weight
        if is_recent:
            score.recent_count += 1
            score.weight += weights.recent_activity_bonus

    for score in scores.values():
        if score.repo_count >= weights.diversity_threshold:
            extra_repos = score.repo_count - weights.diversity_threshold
            score.weight += extra_repos * weights.diversity_bonus_per_repo

    logger.debug("Scored %d languages", len(scores))
    return scores


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def select_top_languages(
    scores: dict[str, LanguageScore],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[LanguageShare]:
    """Pick the top-N languages and normalize them to percentages.

    Percentages are relative to the selected languages only. Independent
    rounding can leave the sum at 99 or 101; the whole residual is added to
    the highest-ranked language, never spread across entries.

    With no scored languages a single synthetic "Polyglot" entry at 100% is
    returned so callers never see an empty list.
    """
    # sorted() is stable, so equal weights keep discovery order
    ranked = sorted(scores.values(), key=lambda s: s.weight, reverse=True)
    selected = ranked[: config.language.top_n]

    total_weight = sum(s.weight for s in selected)
    if not selected or total_weight <= 0:
        return [LanguageShare(name=POLYGLOT, percentage=100, repo_count=1)]

    shares = [
        LanguageShare(
            name=s.name,
            percentage=_round_half_up(s.weight / total_weight * 100),
            repo_count=s.repo_count,
            weight=s.weight,
        )
        for s in selected
    ]

    residual = 100 - sum(share.percentage for share in shares)
    shares[0].percentage += residual

    return shares
