"""Tests for the timedelta and relativedelta bridges."""

from datetime import timedelta

import pytest
from dateutil.relativedelta import relativedelta

from float_duration import Duration, OutOfRangeError
from float_duration.calendar_duration import (
    from_calendar,
    from_relativedelta,
    from_timedelta,
    to_relativedelta,
    to_timedelta,
)


def test_from_timedelta():
    """Test converting timedelta values of various sizes and signs."""
    assert from_timedelta(timedelta(minutes=10)) == Duration.from_minutes(10.0)
    assert from_timedelta(timedelta(hours=72)) == Duration.from_days(3.0)
    assert from_timedelta(timedelta(microseconds=500)) == Duration.from_microseconds(
        500.0
    )
    assert from_timedelta(
        timedelta(microseconds=-20000)
    ) == Duration.from_milliseconds(-20.0)
    assert from_timedelta(timedelta(0)) == Duration.zero()
    assert from_timedelta(timedelta(hours=10000)) == Duration.from_hours(10000.0)


def test_from_timedelta_keeps_sign_of_zero():
    """Test that a zero timedelta becomes a non-negative zero."""
    assert from_timedelta(timedelta(0)).is_positive()


def test_to_timedelta():
    """Test converting durations to timedelta."""
    assert Duration.from_minutes(2.5).to_calendar() == timedelta(seconds=150)
    assert Duration.from_milliseconds(250.050).to_calendar() == timedelta(
        microseconds=250050
    )
    assert Duration.from_minutes(-2.5).to_calendar() == timedelta(seconds=-150)
    assert to_timedelta(Duration.zero()) == timedelta(0)


def test_to_timedelta_truncates_below_microseconds():
    """Test that sub-microsecond magnitudes are truncated toward zero."""
    assert Duration.from_nanoseconds(-20.0).to_calendar() == timedelta(0)
    assert Duration.from_nanoseconds(20.0).to_calendar() == timedelta(0)


def test_to_timedelta_out_of_range():
    """Test that oversized durations raise OutOfRangeError."""
    with pytest.raises(OutOfRangeError):
        Duration.max_value().to_calendar()
    with pytest.raises(OutOfRangeError):
        Duration.min_value().to_calendar()

    with pytest.raises(OutOfRangeError, match="calendar duration range") as excinfo:
        Duration.from_days(1e9).to_calendar()
    assert isinstance(excinfo.value.wrapped, OverflowError)
    assert isinstance(excinfo.value.__cause__, OverflowError)


def test_timedelta_round_trip():
    """Test that to_calendar then from_calendar reproduces the duration."""
    for duration in (
        Duration.from_hours(36.25),
        Duration.from_seconds(-1234.5),
        Duration.from_milliseconds(-20.0),
        Duration.from_days(200000.0),
    ):
        assert Duration.from_calendar(duration.to_calendar()) == duration


def test_from_timedelta_beyond_nanosecond_integer_range():
    """Test magnitudes too large for a 64-bit nanosecond count."""
    # 200000 days is past 2**63 nanoseconds
    assert from_timedelta(timedelta(days=200000)) == Duration.from_days(200000.0)
    assert from_timedelta(-timedelta(days=200000)) == Duration.from_days(-200000.0)

    largest = from_timedelta(timedelta.max)
    assert largest.isclose(
        Duration.from_days(999999999.0) + Duration.from_seconds(86399.999999)
    )


def test_to_relativedelta():
    """Test converting durations to normalized relativedelta values."""
    assert to_relativedelta(Duration.from_minutes(2.5)) == relativedelta(
        minutes=2, seconds=30
    )
    assert to_relativedelta(Duration.from_hours(-26.0)) == relativedelta(
        days=-1, hours=-2
    )
    assert to_relativedelta(Duration.from_microseconds(1500.0)) == relativedelta(
        microseconds=1500
    )


def test_from_relativedelta():
    """Test converting fixed-length relativedelta values."""
    assert from_relativedelta(relativedelta(weeks=1, hours=12)) == Duration.from_days(
        7.5
    )
    assert Duration.from_calendar(
        relativedelta(minutes=-90)
    ) == Duration.from_hours(-1.5)


def test_from_relativedelta_rejects_calendar_fields():
    """Test that month, year and absolute fields are refused."""
    with pytest.raises(ValueError, match="calendar-dependent fields: months"):
        from_relativedelta(relativedelta(months=1))
    with pytest.raises(ValueError, match="years"):
        from_relativedelta(relativedelta(years=1, days=2))
    with pytest.raises(ValueError, match="day"):
        from_relativedelta(relativedelta(day=31))


def test_from_calendar_rejects_other_types():
    """Test that unsupported inputs raise TypeError."""
    with pytest.raises(TypeError, match="Expected timedelta or relativedelta"):
        from_calendar("1h")


def test_to_timedelta_negative_out_of_range():
    """Test negative magnitudes that fit timedelta.max but not timedelta.min."""
    assert Duration.from_days(-999999999.0).to_calendar() == timedelta.min

    with pytest.raises(OutOfRangeError, match="calendar duration range") as excinfo:
        Duration.from_days(-999999999.5).to_calendar()
    assert isinstance(excinfo.value.__cause__, OverflowError)

    with pytest.raises(OutOfRangeError):
        to_relativedelta(Duration.from_days(-999999999.5))
