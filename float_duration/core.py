import logging
import math
import sys
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from numbers import Real
from typing import TYPE_CHECKING

from float_duration.errors import (
    ERR_MSG_NEGATIVE,
    ERR_MSG_TOO_LARGE,
    OutOfRangeError,
)
from float_duration.system import SystemDuration
from float_duration.util import (
    MICROS_PER_SEC,
    MILLIS_PER_SEC,
    NANOS_PER_SEC,
    NANOS_PER_SEC_INT,
    SECS_PER_DAY,
    SECS_PER_HOUR,
    SECS_PER_MINUTE,
    SECS_PER_YEAR,
    U64_MAX,
)

if TYPE_CHECKING:
    from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

# Smallest float whose whole seconds no longer fit an unsigned 64-bit integer
_SYSTEM_SECONDS_LIMIT = float(U64_MAX + 1)


@dataclass(frozen=True, order=True)
class Duration:
    """A time duration stored as floating-point seconds.

    Meant for simulation and mathematical expressions rather than calendar
    work: it is exactly as precise as a float and carries no notion of
    months, leap years or time zones.

    Example:
        >>> Duration.from_minutes(5.0) + Duration.from_seconds(30.0)
        Duration(seconds=330.0)
        >>> str(Duration.from_minutes(90.0))
        '1.5 hours'
    """

    seconds: float = 0.0

    # Constructors

    @classmethod
    def from_years(cls, years: float) -> "Duration":
        """Create a duration from 365-day years."""
        return cls(years * SECS_PER_YEAR)

    @classmethod
    def from_days(cls, days: float) -> "Duration":
        return cls(days * SECS_PER_DAY)

    @classmethod
    def from_hours(cls, hours: float) -> "Duration":
        return cls(hours * SECS_PER_HOUR)

    @classmethod
    def from_minutes(cls, minutes: float) -> "Duration":
        return cls(minutes * SECS_PER_MINUTE)

    @classmethod
    def from_seconds(cls, seconds: float) -> "Duration":
        return cls(float(seconds))

    @classmethod
    def from_milliseconds(cls, millis: float) -> "Duration":
        return cls(millis / MILLIS_PER_SEC)

    @classmethod
    def from_microseconds(cls, micros: float) -> "Duration":
        return cls(micros / MICROS_PER_SEC)

    @classmethod
    def from_nanoseconds(cls, nanos: float) -> "Duration":
        return cls(nanos / NANOS_PER_SEC)

    # Accessors

    def as_years(self) -> float:
        return self.seconds / SECS_PER_YEAR

    def as_days(self) -> float:
        return self.seconds / SECS_PER_DAY

    def as_hours(self) -> float:
        return self.seconds / SECS_PER_HOUR

    def as_minutes(self) -> float:
        return self.seconds / SECS_PER_MINUTE

    def as_seconds(self) -> float:
        return self.seconds

    def as_milliseconds(self) -> float:
        return self.seconds * MILLIS_PER_SEC

    def as_microseconds(self) -> float:
        return self.seconds * MICROS_PER_SEC

    def as_nanoseconds(self) -> float:
        return self.seconds * NANOS_PER_SEC

    # Queries

    @classmethod
    def zero(cls) -> "Duration":
        return cls(0.0)

    @classmethod
    def min_value(cls) -> "Duration":
        """Most negative finite duration."""
        return cls(-sys.float_info.max)

    @classmethod
    def max_value(cls) -> "Duration":
        """Most positive finite duration."""
        return cls(sys.float_info.max)

    def abs(self) -> "Duration":
        return Duration(abs(self.seconds))

    def is_zero(self) -> bool:
        return self.seconds == 0.0

    def is_positive(self) -> bool:
        """True if the sign bit is clear (so ``-0.0`` is not positive)."""
        return math.copysign(1.0, self.seconds) > 0

    def is_negative(self) -> bool:
        """True if the sign bit is set (so ``-0.0`` is negative)."""
        return math.copysign(1.0, self.seconds) < 0

    def isclose(
        self, other: "Duration", *, rel_tol: float = 1e-09, abs_tol: float = 0.0
    ) -> bool:
        """Approximate equality on the seconds value, as ``math.isclose``."""
        return math.isclose(
            self.seconds, other.seconds, rel_tol=rel_tol, abs_tol=abs_tol
        )

    # Arithmetic

    def __neg__(self) -> "Duration":
        return Duration(-self.seconds)

    def __pos__(self) -> "Duration":
        return self

    def __abs__(self) -> "Duration":
        return self.abs()

    def __float__(self) -> float:
        return self.seconds

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds + other.seconds)

    def __sub__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds - other.seconds)

    def __mul__(self, factor: float) -> "Duration":
        if isinstance(factor, Duration) or not isinstance(factor, Real):
            return NotImplemented
        return Duration(self.seconds * factor)

    def __rmul__(self, factor: float) -> "Duration":
        if isinstance(factor, Duration) or not isinstance(factor, Real):
            return NotImplemented
        return Duration(factor * self.seconds)

    def __truediv__(self, other: "Duration | float") -> "Duration | float":
        """Divide by a scalar (giving a Duration) or by a Duration (giving a ratio)."""
        if isinstance(other, Duration):
            return _divide(self.seconds, other.seconds)
        if not isinstance(other, Real):
            return NotImplemented
        return Duration(_divide(self.seconds, other))

    # Display

    def __str__(self) -> str:
        """Human-friendly text in the largest unit the value strictly exceeds."""
        secs = self.seconds
        if secs > SECS_PER_DAY:
            return f"{_format_number(self.as_days())} days"
        if secs > SECS_PER_HOUR:
            return f"{_format_number(self.as_hours())} hours"
        if secs > SECS_PER_MINUTE:
            return f"{_format_number(self.as_minutes())} minutes"
        if secs > 1.0:
            return f"{_format_number(self.as_seconds())} seconds"
        if secs > 1.0e-3:
            return f"{_format_number(self.as_milliseconds())} milliseconds"
        if secs > 1.0e-6:
            return f"{_format_number(self.as_microseconds())} microseconds"
        return f"{_format_number(self.as_nanoseconds())} nanoseconds"

    # System duration bridge

    def to_system(self) -> SystemDuration:
        """Convert to an unsigned, nanosecond-granularity SystemDuration.

        Whole seconds and nanoseconds are both truncated, never rounded.

        Raises:
            OutOfRangeError: If the sign bit is set (including ``-0.0``) or the
                whole seconds do not fit an unsigned 64-bit integer (or are NaN)
        """
        if self.is_negative():
            logger.debug("Rejected negative duration %r for SystemDuration", self)
            raise OutOfRangeError(
                ERR_MSG_NEGATIVE,
                f"{self!r} is negative; SystemDuration has no sign.\n"
                f"Hint: convert abs() and track the sign separately",
            )
        if math.isnan(self.seconds):
            logger.debug("Rejected NaN duration for SystemDuration")
            raise OutOfRangeError(
                ERR_MSG_TOO_LARGE, "NaN has no SystemDuration equivalent"
            )
        if self.seconds >= _SYSTEM_SECONDS_LIMIT:
            logger.debug("Rejected oversized duration %r for SystemDuration", self)
            raise OutOfRangeError(
                ERR_MSG_TOO_LARGE,
                f"{self!r} has more whole seconds than SystemDuration "
                f"can hold (max {U64_MAX})",
            )

        fraction, whole = math.modf(self.seconds)
        seconds = int(whole)
        nanos = int(fraction * NANOS_PER_SEC)
        # A fraction just below 1.0 can scale up to a full second
        if nanos >= NANOS_PER_SEC_INT:
            seconds += 1
            nanos -= NANOS_PER_SEC_INT
        return SystemDuration(seconds=seconds, nanos=nanos)

    @classmethod
    def from_system(cls, duration: SystemDuration) -> "Duration":
        return cls(duration.seconds + duration.nanos / NANOS_PER_SEC)

    # Calendar duration bridge

    def to_calendar(self) -> timedelta:
        """Convert to a signed ``datetime.timedelta``.

        See :func:`float_duration.calendar_duration.to_timedelta`.
        """
        from float_duration.calendar_duration import to_timedelta

        return to_timedelta(self)

    @classmethod
    def from_calendar(cls, duration: "timedelta | relativedelta") -> "Duration":
        """Convert a ``timedelta`` or fixed-length ``relativedelta``.

        See :mod:`float_duration.calendar_duration`.
        """
        from float_duration.calendar_duration import from_calendar

        return from_calendar(duration)


def _divide(numerator: float, denominator: float) -> float:
    """IEEE 754 division: a zero divisor gives a signed infinity, or NaN for 0/0."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _format_number(value: float) -> str:
    """Shortest round-trip text for a float, without exponent or trailing ``.0``."""
    if not math.isfinite(value):
        return repr(value)
    if value == 0.0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")
