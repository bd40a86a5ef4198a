from __future__ import annotations

# --- duration units (integer nanoseconds, same unit as time.time_ns()) ---

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

# durations are bounded to a signed 64-bit counter
INT64_MAX = (1 << 63) - 1

# --- conversions ---

def to_seconds(ns: int) -> float:
    """Nanoseconds -> float seconds (for time.sleep / asyncio.sleep)."""
    return ns / SECOND

def from_seconds(s: float | int) -> int:
    """Float seconds -> integer nanoseconds (truncated)."""
    return int(s * SECOND)