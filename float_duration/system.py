"""Unsigned, nanosecond-granularity system duration.

SystemDuration is the non-negative counterpart of Duration: a whole number
of seconds plus a sub-second nanosecond count, both integers. It is what
monotonic and wall-clock instants produce when subtracted.
"""

from dataclasses import dataclass

from float_duration.errors import ERR_MSG_TOO_LARGE, OutOfRangeError
from float_duration.util import NANOS_PER_SEC_INT, U64_MAX

_MAX_NANOS = (U64_MAX + 1) * NANOS_PER_SEC_INT - 1


@dataclass(frozen=True, order=True, kw_only=True)
class SystemDuration:
    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.seconds <= U64_MAX:
            raise ValueError(
                f"SystemDuration seconds must be within 0..{U64_MAX}, "
                f"got {self.seconds}"
            )
        if not 0 <= self.nanos < NANOS_PER_SEC_INT:
            raise ValueError(
                f"SystemDuration nanos must be within 0..{NANOS_PER_SEC_INT - 1}, "
                f"got {self.nanos}\n"
                f"Hint: use SystemDuration.from_nanoseconds() to carry "
                f"whole seconds automatically"
            )

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> "SystemDuration":
        """Build from a non-negative total nanosecond count."""
        seconds, nanos = divmod(nanoseconds, NANOS_PER_SEC_INT)
        return cls(seconds=seconds, nanos=nanos)

    def as_nanoseconds(self) -> int:
        return self.seconds * NANOS_PER_SEC_INT + self.nanos

    def __add__(self, other: "SystemDuration") -> "SystemDuration":
        if not isinstance(other, SystemDuration):
            return NotImplemented
        total = self.as_nanoseconds() + other.as_nanoseconds()
        if total > _MAX_NANOS:
            raise OutOfRangeError(
                ERR_MSG_TOO_LARGE,
                f"{self} + {other} overflows SystemDuration (max {U64_MAX}s)",
            )
        return SystemDuration.from_nanoseconds(total)

    def __str__(self) -> str:
        return f"{self.seconds}.{self.nanos:09d}s"
