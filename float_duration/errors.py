"""Exception hierarchy for duration conversions."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from float_duration.core import Duration


class DurationError(Exception):
    """Base exception for duration conversion errors.

    Carries a short user-facing message plus optional internal details
    and the library exception it wraps, if any.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class OutOfRangeError(DurationError, OverflowError):
    """Raised when a duration does not fit the target duration type."""


class WallClockOrderingError(DurationError, ValueError):
    """Raised when a wall-clock instant is measured against a later one."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        gap: "Duration | None" = None,
    ) -> None:
        super().__init__(
            user_message,
            internal_details or f"{user_message} (gap: {gap})",
            wrapped,
        )
        self.gap: "Duration | None" = gap


ERR_MSG_NEGATIVE = "negative duration cannot be represented"
ERR_MSG_TOO_LARGE = "duration exceeds the representable range"
ERR_MSG_CALENDAR_OVERFLOW = "duration exceeds the calendar duration range"
ERR_MSG_CLOCK_ORDER = "second time provided was later than self"
