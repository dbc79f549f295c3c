"""
Shared pytest fixtures: a small but complete stats snapshot
"""

import copy

import pytest

NS_PER_MINUTE = 60_000_000_000


def _record(name, minutes):
    return {"name": name, "duration": minutes * NS_PER_MINUTE}


SAMPLE_SNAPSHOT = {
    "start_time": "2023-09-01T00:00:00+02:00",
    "end_time": "2023-09-08T23:59:59+02:00",
    "tags": [
        _record("writing", 90),
        _record("side-project", 45),
        {"name": "uncategorized", "duration": 59_999_999_999},
    ],
    "hourly": [
        _record("09:00", 60),
        _record("10:00", 45),
        _record("11:00", 0),
    ],
    "daily": [
        _record("2023-09-01", 30),
        _record("2023-09-02", 0),
        _record("2023-09-03", 0),
        _record("2023-09-04", 45),
        _record("2023-09-05", 0),
        _record("2023-09-06", 0),
        _record("2023-09-07", 0),
        _record("2023-09-08", 60),
    ],
    "weekday": [
        _record("Sunday", 0),
        _record("Monday", 45),
        _record("Tuesday", 0),
        _record("Wednesday", 0),
        _record("Thursday", 0),
        _record("Friday", 90),
        _record("Saturday", 0),
    ],
    "weekly": [
        _record("2023-W35", 30),
        _record("2023-W36", 105),
    ],
    "monthly": [_record("September", 135)],
    "yearly": [_record("2023", 135)],
    "timeline": [
        {
            "start_time": "2023-09-08T09:00:54.765580865+02:00",
            "tags": ["writing"],
            "duration": 25 * NS_PER_MINUTE,
        },
        {
            "start_time": "2023-09-08T10:00:00+02:00",
            "tags": None,
            "duration": 35 * NS_PER_MINUTE + 30_000_000_000,
        },
    ],
    "totals": {"completed": 5, "abandoned": 1, "duration": 135 * NS_PER_MINUTE},
    "averages": {"completed": 1, "abandoned": 0, "duration": 15 * NS_PER_MINUTE},
}


@pytest.fixture
def raw_snapshot():
    """A fresh, mutable copy of the sample snapshot JSON"""
    return copy.deepcopy(SAMPLE_SNAPSHOT)


@pytest.fixture
def snapshot(raw_snapshot):
    from focusboard.server.schemas.snapshot_schemas import Snapshot

    return Snapshot.model_validate(raw_snapshot)
