"""
tests/conftest.py
=================
Shared pytest fixtures — scripted random sources, no real config files touched.
"""
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import logging
import pytest

from utils.secure_random import SecureRandom


# ─── Random sources ──────────────────────────────────────────────────────────

class ScriptedRandom:
    """
    Returns pre-recorded values from randbelow().

    Once the script runs out it either starts over (cycle=True) or keeps
    returning ``fallback``. Every value is checked against the bound so a
    wrong script fails loudly.
    """

    def __init__(self, values, cycle=False, fallback=0):
        self.values = list(values)
        self.cycle = cycle
        self.fallback = fallback
        self.calls = []

    def randbelow(self, n):
        i = len(self.calls)
        if i < len(self.values):
            value = self.values[i]
        elif self.cycle and self.values:
            value = self.values[i % len(self.values)]
        else:
            value = self.fallback
        assert 0 <= value < n, f"scripted value {value} out of range for n={n}"
        self.calls.append(n)
        return value


class CounterRandom:
    """Deterministic source: the k-th call returns ``k % n``."""

    def __init__(self):
        self.count = 0

    def randbelow(self, n):
        value = self.count % n
        self.count += 1
        return value


class CountingRandom(SecureRandom):
    """Real CSPRNG source that records how many draws were made."""

    def __init__(self):
        self.count = 0

    def randbelow(self, n):
        self.count += 1
        return super().randbelow(n)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def counter_rng():
    return CounterRandom()


@pytest.fixture
def counting_rng():
    return CountingRandom()


# ─── Config / logging isolation ──────────────────────────────────────────────

@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Each test gets its own Config instance and a clean PASSFORGE_* env."""
    from core.config import Config
    for key in ("PASSFORGE_DEFAULT_LENGTH", "PASSFORGE_MAX_ATTEMPTS", "LOG_LEVEL", "LOG_DIR",
                "LOG_TO_FILE", "LOG_RETENTION_DAYS"):
        monkeypatch.delenv(key, raising=False)
    Config.clear_instance()
    yield
    Config.clear_instance()


@pytest.fixture
def restore_root_logger():
    """Snapshot root logger handlers/level and put them back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
