from .core import Duration
from .errors import DurationError, OutOfRangeError, WallClockOrderingError
from .system import SystemDuration
from .timepoint import Instant, SystemTime, TimePoint, duration_since
from .util import (
    MICROS_PER_SEC,
    MILLIS_PER_SEC,
    NANOS_PER_SEC,
    SECS_PER_DAY,
    SECS_PER_HOUR,
    SECS_PER_MINUTE,
    SECS_PER_YEAR,
)

__all__ = [
    "Duration",
    "SystemDuration",
    "Instant",
    "SystemTime",
    "TimePoint",
    "duration_since",
    "DurationError",
    "OutOfRangeError",
    "WallClockOrderingError",
    "MILLIS_PER_SEC",
    "MICROS_PER_SEC",
    "NANOS_PER_SEC",
    "SECS_PER_MINUTE",
    "SECS_PER_HOUR",
    "SECS_PER_DAY",
    "SECS_PER_YEAR",
]
