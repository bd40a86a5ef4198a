from __future__ import annotations

import threading
from typing import Iterator, Optional

import jitterbackoff.config as config
from jitterbackoff.rng import SharedRandom, shared_random
from jitterbackoff.utils.time import INT64_MAX, to_seconds


class Backoff:
    """
    Exponential backoff with "full jitter" (AWS architecture blog,
    "Exponential Backoff And Jitter").

    Each next() returns a duration in nanoseconds bounded by
    interval * 2^n, capped at max_duration, where n counts the doublings
    applied so far. With jitter the value is drawn uniformly from
    [0, bound); without it the bound itself is returned.

    Zero interval / max_duration mean "use config.DEFAULT_*"; defaults are
    filled on first next(), so Backoff() works with no configuration.

    Usage:
        b = Backoff(max_duration=30 * SECOND, interval=250 * MILLISECOND)
        while True:
            try:
                do_thing()
                b.reset()
                break
            except TransientError:
                time.sleep(b.next_s())

    Thread-safe: state is guarded by a per-instance lock.
    """
    def __init__(
        self,
        max_duration: int = 0,
        interval: int = 0,
        jitter: bool = True,
        rng: Optional[SharedRandom] = None,
    ):
        self.max_duration = max_duration
        self.interval = interval
        self._jitter = jitter  # fixed at construction
        self.rng = rng  # None -> process-wide shared_random()

        self.exponent = 0
        self._tries = 0
        self._lock = threading.Lock()  # guards exponent, _tries

    @property
    def jitter(self) -> bool:
        return self._jitter

    def setup(self) -> None:
        """Fill zero fields from the process-wide defaults. Idempotent."""
        if self.interval == 0:
            self.interval = config.DEFAULT_INTERVAL
        if self.max_duration == 0:
            self.max_duration = config.DEFAULT_MAX_DURATION

    def next(self) -> int:
        """Duration (ns) to wait before the next attempt; counts one try."""
        self.setup()
        with self._lock:
            self._tries += 1

            t = self.interval * (1 << self.exponent)

            # grow only while the next doubling still fits in int64
            pow_next = 1 << (self.exponent + 1)
            if pow_next <= INT64_MAX and abs(self.interval) * pow_next <= INT64_MAX:
                self.exponent += 1

            if t > self.max_duration:
                t = self.max_duration

            if self._jitter:
                if t <= 0:
                    return 0
                src = self.rng if self.rng is not None else shared_random()
                t = src.randrange(t)

            return t

    def next_s(self) -> float:
        """next() in seconds."""
        return to_seconds(self.next())

    def reset(self) -> None:
        """
        Reset the attempt counter.

        Call when the retried operation succeeds.
        """
        with self._lock:
            self._tries = 0
            self.exponent = 0

    def tries_count(self) -> int:
        with self._lock:
            return self._tries


def new(max_duration: int, interval: int) -> Backoff:
    """Backoff with jitter; zero arguments pick up the defaults."""
    return Backoff(max_duration=max_duration, interval=interval, jitter=True)


def new_without_jitter(max_duration: int, interval: int) -> Backoff:
    """Deterministic Backoff (no jitter)."""
    return Backoff(max_duration=max_duration, interval=interval, jitter=False)


def backoff_iter(b: Backoff, limit: Optional[int] = None) -> Iterator[int]:
    """
    Iterator of successive b.next() durations (ns), `limit` values or forever.
    Never sleeps; the caller waits.
    """
    n = 0
    while limit is None or n < limit:
        yield b.next()
        n += 1
