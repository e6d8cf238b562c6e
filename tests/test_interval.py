from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from timerange import Interval, InvalidInterval, TimeRangeError, from_millis, to_millis
from timerange.util import DAY, HOUR, MAX_INSTANT, MIN_INSTANT


def test_interval_rejects_start_after_end() -> None:
    with pytest.raises(InvalidInterval) as excinfo:
        Interval(start=10, end=5)

    assert excinfo.value.field == "both"
    assert isinstance(excinfo.value, TimeRangeError)
    assert isinstance(excinfo.value, ValueError)


def test_zero_duration_interval_is_valid() -> None:
    instant = Interval(start=7, end=7)
    assert instant.duration == 0


def test_interval_is_frozen() -> None:
    ivl = Interval(start=0, end=10)
    with pytest.raises(FrozenInstanceError):
        ivl.start = 5  # type: ignore[misc]


def test_intervals_with_equal_endpoints_are_equal() -> None:
    assert Interval(start=0, end=HOUR) == Interval(start=0, end=HOUR)
    assert hash(Interval(start=0, end=HOUR)) == hash(Interval(start=0, end=HOUR))


def test_str_shows_range_and_duration() -> None:
    assert str(Interval(start=100, end=350)) == "Interval(100→350, 250ms)"


class TestConversions:
    """Tests for converting between datetimes and epoch milliseconds."""

    def test_to_millis(self):
        dt = datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert to_millis(dt) == 1735689600000

    def test_to_millis_floors_microseconds(self):
        dt = datetime(2025, 1, 1, 0, 0, 0, 999_999, tzinfo=timezone.utc)
        assert to_millis(dt) == 1735689600999

    def test_to_millis_before_epoch_floors_toward_past(self):
        dt = datetime(1969, 12, 31, 23, 59, 59, 999_500, tzinfo=timezone.utc)
        assert to_millis(dt) == -1

    def test_to_millis_honours_offset(self):
        plus_two = timezone(timedelta(hours=2))
        dt = datetime(2025, 1, 1, 2, 0, tzinfo=plus_two)
        assert to_millis(dt) == 1735689600000

    def test_to_millis_rejects_naive(self):
        with pytest.raises(TypeError, match="timezone-aware"):
            to_millis(datetime(2025, 1, 1))

    def test_from_millis(self):
        assert from_millis(1735689600000 + DAY) == datetime(
            2025, 1, 2, tzinfo=timezone.utc
        )

    def test_representable_bounds(self):
        assert from_millis(MIN_INSTANT).year == 1
        assert from_millis(MAX_INSTANT).year == 9999
