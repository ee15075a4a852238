"""Commit velocity, streak and weekday aggregation."""

from collections.abc import Iterable
from datetime import date, timedelta

from git_wrapped.models.contribution import DailyContribution, VelocityStats

WEEKDAY_LABELS = [
    "Sundays",
    "Mondays",
    "Tuesdays",
    "Wednesdays",
    "Thursdays",
    "Fridays",
    "Saturdays",
]


def sunday_index(day: date) -> int:
    """Weekday index with Sunday=0 ... Saturday=6."""
    return (day.weekday() + 1) % 7


def aggregate_velocity(days: Iterable[DailyContribution]) -> VelocityStats:
    """Compute total commits, longest streak and the weekday histogram.

    Input may be unsorted, and repeated entries for a date are summed. A
    streak counts consecutive calendar days with at least one contribution:
    a zero-count day, or a missing date between two entries, ends the
    current run.
    """
    per_day: dict[date, int] = {}
    for day in days:
        per_day[day.date] = per_day.get(day.date, 0) + day.count

    total = 0
    histogram = [0] * 7
    longest = 0
    current = 0
    previous: date | None = None

    for day in sorted(per_day):
        count = per_day[day]
        total += count
        histogram[sunday_index(day)] += count

        if previous is not None and day - previous > timedelta(days=1):
            current = 0

        if count > 0:
            current += 1
            longest = max(longest, current)
        else:
            current = 0

        previous = day

    # max() keeps the first maximum, so ties go to the earlier weekday
    busiest = max(range(7), key=histogram.__getitem__)

    return VelocityStats(
        total_commits=total,
        longest_streak=longest,
        weekday_histogram=histogram,
        busiest_day_index=busiest,
        busiest_day=WEEKDAY_LABELS[busiest],
    )
