"""Instants that can measure the Duration elapsed since another instant.

``TimePoint`` is a structural protocol; ``Instant`` (monotonic clock) and
``SystemTime`` (wall clock) satisfy it without inheriting from it. Calendar instants from
the standard library (``date`` and ``datetime``) cannot gain methods, so the
module-level :func:`duration_since` dispatches on the instant type instead.

Example:
    >>> start = Instant.now()
    >>> ...  # do some work
    >>> elapsed = Instant.now().duration_since(start)
    >>> from datetime import datetime
    >>> duration_since(datetime(2025, 1, 2), datetime(2025, 1, 1))
    Duration(seconds=86400.0)
"""

import logging
import time
from dataclasses import dataclass
from datetime import date
from functools import singledispatch
from typing import Any, ClassVar, Protocol, runtime_checkable

from typing_extensions import Self

from float_duration.core import Duration
from float_duration.errors import ERR_MSG_CLOCK_ORDER, WallClockOrderingError
from float_duration.system import SystemDuration

logger = logging.getLogger(__name__)


@runtime_checkable
class TimePoint(Protocol):
    """A point in time that can compute the Duration since an earlier one."""

    def duration_since(self, since: Self) -> Duration: ...


@dataclass(frozen=True, order=True)
class Instant:
    """Reading of the monotonic clock, in nanoseconds."""

    nanoseconds: int

    @classmethod
    def now(cls) -> "Instant":
        return cls(time.monotonic_ns())

    def duration_since(self, since: "Instant") -> Duration:
        """Duration since ``since``; zero if ``since`` is the later instant."""
        delta = max(self.nanoseconds - since.nanoseconds, 0)
        return Duration.from_system(SystemDuration.from_nanoseconds(delta))

    def elapsed(self) -> Duration:
        return Instant.now().duration_since(self)


@dataclass(frozen=True, order=True)
class SystemTime:
    """Reading of the wall clock, in nanoseconds since the Unix epoch.

    The wall clock can move backwards, so measuring against a later
    reading is an error rather than a negative Duration.
    """

    nanoseconds: int

    UNIX_EPOCH: ClassVar["SystemTime"]

    @classmethod
    def now(cls) -> "SystemTime":
        return cls(time.time_ns())

    def duration_since(self, since: "SystemTime") -> Duration:
        """Duration since ``since``.

        Raises:
            WallClockOrderingError: If ``since`` is later than this time; the
                backwards gap is available as ``.gap``
        """
        delta = self.nanoseconds - since.nanoseconds
        if delta < 0:
            gap = Duration.from_system(SystemDuration.from_nanoseconds(-delta))
            logger.debug("Wall clock ordering violated by %s", gap)
            raise WallClockOrderingError(ERR_MSG_CLOCK_ORDER, gap=gap)
        return Duration.from_system(SystemDuration.from_nanoseconds(delta))

    def elapsed(self) -> Duration:
        return SystemTime.now().duration_since(self)


SystemTime.UNIX_EPOCH = SystemTime(0)


@singledispatch
def duration_since(now: Any, since: Any) -> Duration:
    """Return the Duration elapsed from ``since`` to ``now``.

    Supports ``Instant``, ``SystemTime``, ``date`` and ``datetime``. Calendar
    instants never fail and may yield a negative Duration.
    """
    raise TypeError(
        f"Cannot compute a duration between {type(now).__name__!r} instants.\n"
        f"Supported: Instant, SystemTime, date, datetime"
    )


@duration_since.register
def _(now: Instant, since: Instant) -> Duration:
    return now.duration_since(since)


@duration_since.register
def _(now: SystemTime, since: SystemTime) -> Duration:
    return now.duration_since(since)


@duration_since.register
def _(now: date, since: date) -> Duration:
    # Also covers datetime; mixing naive and aware values raises TypeError
    from float_duration.calendar_duration import from_timedelta

    return from_timedelta(now - since)
