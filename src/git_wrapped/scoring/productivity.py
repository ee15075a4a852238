"""Peak-hour detection."""

from collections.abc import Mapping

from git_wrapped.models.wrapped import ProductivityResult, TimeOfDay
from git_wrapped.scoring.weights import DEFAULT_SCORING_CONFIG, ScoringConfig


def time_of_day(hour: int, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> TimeOfDay:
    windows = config.productivity
    if windows.morning[0] <= hour < windows.morning[1]:
        return TimeOfDay.MORNING
    if windows.afternoon[0] <= hour < windows.afternoon[1]:
        return TimeOfDay.AFTERNOON
    if windows.evening[0] <= hour < windows.evening[1]:
        return TimeOfDay.EVENING
    # Wraps past midnight: 21-23 and 0-4
    return TimeOfDay.LATE_NIGHT


def calculate_productivity(
    hour_counts: Mapping[int, int],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> ProductivityResult:
    """Find the busiest hour of the day from an hour -> event count map.

    Ties go to the earliest hour. With no events the default peak hour (14)
    is used.
    """
    peak_hour = config.productivity.default_peak_hour
    max_count = 0

    for hour in sorted(hour_counts):
        count = hour_counts[hour]
        if count > max_count:
            max_count = count
            peak_hour = hour

    return ProductivityResult(peak_hour=peak_hour, time_of_day=time_of_day(peak_hour, config))
