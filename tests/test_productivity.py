"""Tests for peak-hour detection."""

import pytest

from git_wrapped.models.wrapped import TimeOfDay
from git_wrapped.scoring.productivity import calculate_productivity, time_of_day


class TestTimeOfDay:
    """Tests for time_of_day bucketing."""

    @pytest.mark.parametrize(
        "hour,expected",
        [
            (0, TimeOfDay.LATE_NIGHT),
            (4, TimeOfDay.LATE_NIGHT),
            (5, TimeOfDay.MORNING),
            (11, TimeOfDay.MORNING),
            (12, TimeOfDay.AFTERNOON),
            (16, TimeOfDay.AFTERNOON),
            (17, TimeOfDay.EVENING),
            (20, TimeOfDay.EVENING),
            (21, TimeOfDay.LATE_NIGHT),
            (23, TimeOfDay.LATE_NIGHT),
        ],
    )
    def test_boundaries(self, hour, expected):
        """Test every window edge."""
        assert time_of_day(hour) is expected


class TestCalculateProductivity:
    """Tests for calculate_productivity."""

    def test_no_events_defaults_to_afternoon(self):
        """Test the default peak hour when nothing was recorded."""
        result = calculate_productivity({})

        assert result.peak_hour == 14
        assert result.time_of_day is TimeOfDay.AFTERNOON

    def test_zero_counts_use_default(self):
        """Test that hours with no events never become the peak."""
        assert calculate_productivity({3: 0}).peak_hour == 14

    def test_peak_hour(self):
        """Test that the busiest hour wins."""
        result = calculate_productivity({23: 10, 1: 3, 14: 9})

        assert result.peak_hour == 23
        assert result.time_of_day is TimeOfDay.LATE_NIGHT

    def test_tie_goes_to_earliest_hour(self):
        """Test that the lowest hour wins a tie."""
        result = calculate_productivity({23: 5, 9: 5})

        assert result.peak_hour == 9
        assert result.time_of_day is TimeOfDay.MORNING

    def test_morning_peak_over_afternoon(self):
        """Test that five events at 9 AM beat three at 2 PM."""
        result = calculate_productivity({9: 5, 14: 3})

        assert result.peak_hour == 9
        assert result.time_of_day is TimeOfDay.MORNING
