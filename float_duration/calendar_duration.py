"""Conversions between Duration and calendar-library durations.

Two calendar duration types are supported:

- ``datetime.timedelta``: signed, microsecond granularity, limited to
  +/-999999999 days.
- ``dateutil.relativedelta.relativedelta``: only when it holds fixed-length
  fields (weeks, days, hours, minutes, seconds, microseconds). Years, months,
  leap days and absolute fields depend on a calendar date and are rejected.

Both directions handle the sign explicitly and go through the unsigned
SystemDuration bridge for the magnitude.

The relativedelta functions need python-dateutil (the ``calendar`` extra),
which is imported only when one of them is used.

Precision:
    ``to_timedelta`` truncates to whole microseconds. ``from_timedelta`` reads
    the magnitude as exact integers (seconds and microseconds), so it never
    overflows; the only loss is the float itself, which keeps full
    microsecond precision up to about 2**53 microseconds (~285 years) and
    rounds to the nearest representable value beyond that.

Example:
    >>> from datetime import timedelta
    >>> from float_duration import Duration
    >>> Duration.from_minutes(2.5).to_calendar()
    datetime.timedelta(seconds=150)
    >>> Duration.from_calendar(timedelta(hours=72)) == Duration.from_days(3.0)
    True
"""

import logging
import sys
from datetime import timedelta
from typing import TYPE_CHECKING

from float_duration.core import Duration
from float_duration.errors import ERR_MSG_CALENDAR_OVERFLOW, OutOfRangeError
from float_duration.system import SystemDuration

if TYPE_CHECKING:
    from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

_NANOS_PER_MICRO = 1_000
_ZERO = timedelta(0)

# relativedelta fields that need a reference date to resolve
_CALENDAR_FIELDS = ("years", "months", "leapdays")
_ABSOLUTE_FIELDS = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)


def to_timedelta(duration: Duration) -> timedelta:
    """Convert a Duration to a ``timedelta``, truncating below one microsecond.

    Raises:
        OutOfRangeError: If the magnitude does not fit a SystemDuration or
            exceeds the ``timedelta`` range
    """
    is_negative = duration.is_negative()
    system = duration.abs().to_system()
    try:
        magnitude = timedelta(
            seconds=system.seconds, microseconds=system.nanos // _NANOS_PER_MICRO
        )
        # Negating can still overflow: timedelta.min is above -timedelta.max
        return -magnitude if is_negative else magnitude
    except OverflowError as exc:
        logger.debug("timedelta rejected %r: %s", duration, exc)
        raise OutOfRangeError(
            ERR_MSG_CALENDAR_OVERFLOW,
            f"{duration!r} exceeds the timedelta range "
            f"(+/-{timedelta.max.days} days)",
            wrapped=exc,
        ) from exc


def from_timedelta(duration: timedelta) -> Duration:
    """Convert a ``timedelta`` to a Duration. Always succeeds."""
    is_negative = duration < _ZERO
    magnitude = abs(duration)
    system = SystemDuration(
        seconds=magnitude.days * 86400 + magnitude.seconds,
        nanos=magnitude.microseconds * _NANOS_PER_MICRO,
    )
    result = Duration.from_system(system)
    return -result if is_negative else result


def to_relativedelta(duration: Duration) -> "relativedelta":
    """Convert a Duration to a normalized ``relativedelta``.

    Same truncation and range rules as :func:`to_timedelta`; the result holds
    days, hours, minutes, seconds and microseconds, all with one sign.
    """
    from dateutil.relativedelta import relativedelta

    magnitude = abs(to_timedelta(duration))
    result = relativedelta(
        days=magnitude.days,
        seconds=magnitude.seconds,
        microseconds=magnitude.microseconds,
    )
    return -result if duration.is_negative() else result


def from_relativedelta(duration: "relativedelta") -> Duration:
    """Convert a fixed-length ``relativedelta`` to a Duration.

    Raises:
        ValueError: If the relativedelta uses years, months, leap days or
            absolute fields
        OutOfRangeError: If the fixed fields exceed the ``timedelta`` range
    """
    calendar = [name for name in _CALENDAR_FIELDS if getattr(duration, name)]
    absolute = [
        name for name in _ABSOLUTE_FIELDS if getattr(duration, name) is not None
    ]
    if calendar or absolute:
        raise ValueError(
            f"Only fixed-length relativedelta values can become a Duration.\n"
            f"Got {duration!r} with calendar-dependent fields: "
            f"{', '.join(calendar + absolute)}\n"
            f"Hint: apply it to a datetime first and measure the difference:\n"
            f"  duration_since(start + delta, start)"
        )
    try:
        fixed = timedelta(
            days=duration.days,
            hours=duration.hours,
            minutes=duration.minutes,
            seconds=duration.seconds,
            microseconds=duration.microseconds,
        )
    except OverflowError as exc:
        logger.debug("timedelta rejected %r: %s", duration, exc)
        raise OutOfRangeError(
            ERR_MSG_CALENDAR_OVERFLOW,
            f"{duration!r} exceeds the timedelta range",
            wrapped=exc,
        ) from exc
    return from_timedelta(fixed)


def from_calendar(duration: "timedelta | relativedelta") -> Duration:
    """Convert either supported calendar duration type to a Duration."""
    if isinstance(duration, timedelta):
        return from_timedelta(duration)
    # A relativedelta can only exist once dateutil has been imported
    dateutil_module = sys.modules.get("dateutil.relativedelta")
    if dateutil_module is not None and isinstance(
        duration, dateutil_module.relativedelta
    ):
        return from_relativedelta(duration)
    raise TypeError(
        f"Expected timedelta or relativedelta.\n"
        f"Got {type(duration).__name__!r}: {duration!r}"
    )
