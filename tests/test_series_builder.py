"""
Series builder unit tests
"""

import pytest
from datetime import date

from focusboard.server.exceptions import EmptyBucketError, MalformedSnapshotError
from focusboard.server.schemas.snapshot_schemas import Record
from focusboard.server.services.granularity_selector import Granularity
from focusboard.server.services.series_builder import (
    default_daily_label,
    extract_granularity_series,
    extract_series,
    extract_timeline,
    ns_to_minutes,
)


class TestNsToMinutes:

    def test_floor_conversion(self):
        assert ns_to_minutes(0) == 0
        assert ns_to_minutes(59_999_999_999) == 0
        assert ns_to_minutes(60_000_000_000) == 1
        assert ns_to_minutes(119_999_999_999) == 1

    def test_large_durations(self):
        assert ns_to_minutes(2447581122309040) == 40793


class TestExtractSeries:

    def test_preserves_length_and_order(self, snapshot):
        series = extract_series(snapshot.tags)

        assert len(series.labels) == len(series.values) == len(snapshot.tags)
        for i, record in enumerate(snapshot.tags):
            assert series.labels[i] == record.name
        assert series.values == [90, 45, 0]

    def test_uses_stored_keys_verbatim(self, snapshot):
        series = extract_series(snapshot.hourly)
        assert series.labels == ["09:00", "10:00", "11:00"]
        assert series.values == [60, 45, 0]

    def test_custom_label_formatter(self):
        buckets = [Record(name="a", duration=0), Record(name="b", duration=60_000_000_000)]
        series = extract_series(buckets, label_formatter=str.upper)
        assert series.labels == ["A", "B"]
        assert series.values == [0, 1]

    def test_empty_collection_raises(self):
        with pytest.raises(EmptyBucketError) as exc_info:
            extract_series([], dimension="weekday")
        assert exc_info.value.dimension == "weekday"


class TestGranularitySeries:

    def test_daily_labels_are_month_and_day(self, snapshot):
        series = extract_granularity_series(snapshot, Granularity.DAILY)

        assert series.labels[0] == "Sep 1"
        assert series.labels[-1] == "Sep 8"
        assert series.values == [30, 0, 0, 45, 0, 0, 0, 60]

    def test_injected_daily_formatter(self, snapshot):
        series = extract_granularity_series(
            snapshot, "daily", daily_formatter=lambda d: d.strftime("%d/%m")
        )
        assert series.labels[:2] == ["01/09", "02/09"]

    @pytest.mark.parametrize("granularity, labels", [
        (Granularity.WEEKLY, ["2023-W35", "2023-W36"]),
        (Granularity.MONTHLY, ["September"]),
        (Granularity.YEARLY, ["2023"]),
    ])
    def test_other_granularities_use_stored_keys(self, snapshot, granularity, labels):
        series = extract_granularity_series(snapshot, granularity)
        assert series.labels == labels

    def test_invalid_daily_key(self, raw_snapshot):
        from focusboard.server.schemas.snapshot_schemas import Snapshot

        raw_snapshot["daily"] = [{"name": "not-a-date", "duration": 0}]
        snapshot = Snapshot.model_validate(raw_snapshot)
        with pytest.raises(MalformedSnapshotError):
            extract_granularity_series(snapshot, Granularity.DAILY)

    def test_default_daily_label_has_no_padding(self):
        assert default_daily_label(date(2023, 9, 8)) == "Sep 8"
        assert default_daily_label(date(2023, 12, 25)) == "Dec 25"


class TestExtractTimeline:

    def test_timeline_minutes_and_tags(self, snapshot):
        items = extract_timeline(snapshot)

        assert len(items) == 2
        assert items[0].tags == ["writing"]
        assert items[0].minutes == 25
        assert items[1].tags == []
        # 35m 30s floors to 35
        assert items[1].minutes == 35

    def test_empty_timeline(self, raw_snapshot):
        from focusboard.server.schemas.snapshot_schemas import Snapshot

        raw_snapshot["timeline"] = None
        assert extract_timeline(Snapshot.model_validate(raw_snapshot)) == []
