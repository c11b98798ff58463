from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time

from transvoucher.webhooks import is_event_recent

NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


def _iso(moment: datetime) -> str:
    return moment.isoformat().replace("+00:00", "Z")


@freeze_time("2025-01-01 12:00:00")
def test_now_is_recent():
    assert is_event_recent(_iso(NOW), 300)


@freeze_time("2025-01-01 12:00:00")
def test_ten_minutes_old_is_stale():
    assert not is_event_recent(_iso(NOW - timedelta(seconds=600)), 300)


@freeze_time("2025-01-01 12:00:00")
def test_future_skew_counts_too():
    assert is_event_recent(_iso(NOW + timedelta(seconds=120)), 300)
    assert not is_event_recent(_iso(NOW + timedelta(seconds=301)), 300)


@freeze_time("2025-01-01 12:00:00")
def test_tolerance_boundary_is_inclusive():
    assert is_event_recent(_iso(NOW - timedelta(seconds=300)), 300)


@freeze_time("2025-01-01 12:00:00")
def test_numeric_epoch_seconds():
    assert is_event_recent(NOW.timestamp())
    assert is_event_recent(int(NOW.timestamp()) - 299)
    assert not is_event_recent(NOW.timestamp() - 3600)


@freeze_time("2025-01-01 12:00:00")
def test_offset_and_naive_timestamps():
    assert is_event_recent("2025-01-01T14:00:00+02:00")
    assert is_event_recent("2025-01-01T12:00:00")


def test_default_tolerance_uses_wall_clock():
    assert is_event_recent(datetime.now(UTC).isoformat())


def test_explicit_now():
    assert is_event_recent("2025-01-01T12:00:00Z", 60, now=NOW.timestamp() + 30)
    assert not is_event_recent("2025-01-01T12:00:00Z", 60, now=NOW.timestamp() + 90)


@pytest.mark.parametrize(
    "timestamp", ["not a date", "", None, True, float("nan"), float("inf"), {"t": 1}]
)
def test_unparseable_is_not_recent(timestamp):
    assert is_event_recent(timestamp) is False
