from __future__ import annotations

import os
import random
import threading
from typing import Optional

import structlog

log = structlog.get_logger("rng")


class EntropyError(RuntimeError):
    """The OS entropy source could not seed the shared random source."""


class SharedRandom:
    """
    Lock-guarded wrapper around a random.Random.

    One instance is shared by every jittered Backoff in the process (see
    shared_random()). Draws are serialized by the instance lock, so the
    wrapped generator's state is never mutated concurrently.

    Pass a pre-seeded random.Random (or any object with randrange)
    to get deterministic draws in tests.
    """
    def __init__(self, source: Optional[random.Random] = None):
        self._src = source if source is not None else random.Random()
        self._lock = threading.Lock()

    @classmethod
    def from_entropy(cls) -> "SharedRandom":
        """
        Seed from os.urandom. Raises EntropyError if no entropy source is
        available; there is no time-based fallback.
        """
        try:
            seed = int.from_bytes(os.urandom(8), "big")
        except (NotImplementedError, OSError) as e:
            log.error("rng_entropy_unavailable", err=str(e))
            raise EntropyError("cannot seed shared random source from OS entropy") from e
        return cls(random.Random(seed))

    def randrange(self, n: int) -> int:
        """Uniform integer in [0, n). n must be > 0."""
        with self._lock:
            return self._src.randrange(n)


# --------- process-wide instance ----------

_shared: Optional[SharedRandom] = None
_shared_lock = threading.Lock()


def shared_random() -> SharedRandom:
    """
    Return the process-wide SharedRandom, seeding it from OS entropy on
    first use. Creation happens exactly once even under concurrent callers.
    """
    global _shared
    inst = _shared
    if inst is not None:
        return inst
    with _shared_lock:
        if _shared is None:
            _shared = SharedRandom.from_entropy()
        return _shared


def set_shared_random(src: Optional[SharedRandom]) -> None:
    """
    Replace the process-wide source. None drops it so the next
    shared_random() call seeds a fresh one.
    """
    global _shared
    with _shared_lock:
        _shared = src
