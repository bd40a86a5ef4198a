import pytest

import jitterbackoff.config as config
import jitterbackoff.rng as rng


@pytest.fixture(autouse=True)
def restore_globals(monkeypatch):
    """Process-wide defaults and the shared RNG are module state; undo test changes."""
    monkeypatch.setattr(config, "DEFAULT_INTERVAL", config.DEFAULT_INTERVAL)
    monkeypatch.setattr(config, "DEFAULT_MAX_DURATION", config.DEFAULT_MAX_DURATION)
    monkeypatch.setattr(rng, "_shared", rng._shared)
