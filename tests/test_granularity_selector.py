"""
Granularity selector unit tests
Tests for span calculation and main-chart granularity thresholds.
"""

import pytest
from datetime import date, datetime, timedelta, timezone

from focusboard.server.exceptions import InvalidRangeError
from focusboard.server.services.granularity_selector import (
    Granularity,
    range_days,
    select_granularity,
    span_days,
)


def _range(days, hours=0):
    start = datetime(2023, 1, 1, tzinfo=timezone.utc)
    return start, start + timedelta(days=days, hours=hours)


class TestSelectGranularity:
    """Threshold behaviour of select_granularity"""

    @pytest.mark.parametrize("days, expected", [
        (0, Granularity.DAILY),
        (1, Granularity.DAILY),
        (45, Granularity.DAILY),
        (46, Granularity.WEEKLY),
        (90, Granularity.WEEKLY),
        (91, Granularity.MONTHLY),
        (366, Granularity.MONTHLY),
        (367, Granularity.YEARLY),
        (3000, Granularity.YEARLY),
    ])
    def test_thresholds_are_inclusive_on_lower_bucket(self, days, expected):
        start, end = _range(days)
        assert select_granularity(start, end) == expected

    def test_partial_days_are_truncated(self):
        """45 days and 23 hours still counts as 45 days"""
        start, end = _range(45, hours=23)
        assert span_days(start, end) == 45
        assert select_granularity(start, end) == Granularity.DAILY

    def test_end_before_start_raises(self):
        start, end = _range(3)
        with pytest.raises(InvalidRangeError):
            select_granularity(end, start)

    def test_invalid_range_is_a_value_error(self):
        start, end = _range(3)
        with pytest.raises(ValueError):
            span_days(end, start)

    def test_accepts_plain_dates(self):
        assert select_granularity(date(2023, 1, 1), date(2023, 3, 1)) == Granularity.WEEKLY

    def test_granularity_values(self):
        assert [g.value for g in Granularity] == ["daily", "weekly", "monthly", "yearly"]


class TestEndToEndRanges:
    """Ranges as they arrive from snapshots (start of day to end of day)"""

    def test_original_sample_range_is_yearly(self):
        start = datetime.fromisoformat("2022-08-25T00:00:00+01:00")
        end = datetime.fromisoformat("2023-09-08T23:59:59+02:00")
        assert span_days(start, end) == 379
        assert select_granularity(start, end) == Granularity.YEARLY

    @pytest.mark.parametrize("days, expected", [
        (10, Granularity.DAILY),
        (60, Granularity.WEEKLY),
        (200, Granularity.MONTHLY),
    ])
    def test_typical_ranges(self, days, expected):
        start, end = _range(days)
        assert select_granularity(start, end) == expected


class TestRangeDays:
    """Rounded day count shown in the page heading"""

    def test_week_ending_at_end_of_day(self):
        start = datetime(2023, 9, 2, tzinfo=timezone.utc)
        end = datetime(2023, 9, 8, 23, 59, 59, tzinfo=timezone.utc)
        assert range_days(start, end) == 7

    def test_half_day_rounds_up(self):
        start, end = _range(2, hours=12)
        assert range_days(start, end) == 3

    def test_invalid_range(self):
        start, end = _range(1)
        with pytest.raises(InvalidRangeError):
            range_days(end, start)


class TestMixedTimestamps:
    """Dates, naive and aware datetimes can be passed together"""

    def test_date_and_naive_datetime(self):
        assert span_days(date(2023, 9, 1), datetime(2023, 9, 20, 12)) == 19

    def test_reversed_mixed_range_raises_typed_error(self):
        with pytest.raises(InvalidRangeError):
            span_days(date(2023, 9, 8), datetime(2023, 9, 1, tzinfo=timezone.utc))

    def test_range_days_with_mixed_bounds(self):
        with pytest.raises(InvalidRangeError):
            range_days(datetime(2023, 9, 8, 12), date(2023, 9, 1))
