from __future__ import annotations

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from jitterbackoff.utils.time import HOUR, INT64_MAX, MINUTE, from_seconds

# Used by Backoff.setup() when interval / max_duration are zero.
# Read at call time, so overrides apply to counters not yet used.
DEFAULT_INTERVAL: int = 5 * MINUTE
DEFAULT_MAX_DURATION: int = 6 * HOUR

ENV_INTERVAL = "BACKOFF_DEFAULT_INTERVAL_S"
ENV_MAX_DURATION = "BACKOFF_DEFAULT_MAX_DURATION_S"


def set_defaults(interval: Optional[int] = None, max_duration: Optional[int] = None) -> None:
    """Override the process-wide defaults (ns). None leaves a value as is."""
    global DEFAULT_INTERVAL, DEFAULT_MAX_DURATION
    if interval is not None and not 0 < interval <= INT64_MAX:
        raise ValueError(f"default interval must be in (0, INT64_MAX] ns, got {interval}")
    if max_duration is not None and not 0 < max_duration <= INT64_MAX:
        raise ValueError(f"default max duration must be in (0, INT64_MAX] ns, got {max_duration}")

    if interval is not None:
        DEFAULT_INTERVAL = int(interval)
    if max_duration is not None:
        DEFAULT_MAX_DURATION = int(max_duration)


def _env_seconds(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        val = from_seconds(float(raw))
    except (ValueError, OverflowError) as e:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from e
    if not 0 < val <= INT64_MAX:
        raise ValueError(f"{name} must be > 0 and fit in int64 ns, got {raw!r}")
    return val


def defaults_from_env() -> tuple[int, int]:
    """
    Load .env (if any) and apply BACKOFF_DEFAULT_INTERVAL_S /
    BACKOFF_DEFAULT_MAX_DURATION_S. Returns the effective (interval, max_duration).
    """
    load_dotenv(find_dotenv(usecwd=True))
    interval = _env_seconds(ENV_INTERVAL)
    max_duration = _env_seconds(ENV_MAX_DURATION)
    if interval is not None or max_duration is not None:
        set_defaults(interval=interval, max_duration=max_duration)
    return DEFAULT_INTERVAL, DEFAULT_MAX_DURATION
