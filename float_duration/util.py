"""Unit constants for float_duration.

Durations are stored as floating-point seconds; these constants convert
between seconds and the other supported units.
"""

# Sub-second units per second
MILLIS_PER_SEC = 1.0e3
MICROS_PER_SEC = 1.0e6
NANOS_PER_SEC = 1.0e9

# Seconds per larger unit (no leap seconds, no calendar adjustment)
SECS_PER_MINUTE = 60.0
SECS_PER_HOUR = SECS_PER_MINUTE * 60.0
SECS_PER_DAY = SECS_PER_HOUR * 24.0
SECS_PER_YEAR = SECS_PER_DAY * 365.0

# Integer limits of the unsigned system duration
U64_MAX = 2**64 - 1
NANOS_PER_SEC_INT = 1_000_000_000
