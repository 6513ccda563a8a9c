"""Current UTC time as Unix timestamps."""

from __future__ import annotations

import time

_NANOS_PER_SECOND = 1_000_000_000
_NANOS_PER_MILLI = 1_000_000


def utc_timestamp() -> int:
    """Whole seconds since the Unix epoch."""
    return time.time_ns() // _NANOS_PER_SECOND


def utc_timestamp_millis() -> int:
    """Whole milliseconds since the Unix epoch."""
    return time.time_ns() // _NANOS_PER_MILLI