"""Shared pytest fixtures for the hearing tracker test suite.

Provides a deterministic clock, a scripted courtroom scenario, and
settings-cache isolation so tests can toggle strict mode via env vars.
"""

import pytest

from hearing_tracker.core.config import get_settings
from hearing_tracker.services.tracking import (
    ManualClock,
    initialize_speaking_time,
    start_speaking,
    stop_tracking,
)

# 2023-11-14 22:13:20 UTC; any non-zero epoch works for report timestamps
EPOCH_MS = 1_700_000_000_000
MINUTE_MS = 60_000


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Drop the cached Settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def strict_mode(monkeypatch):
    """Enable strict mode: defensive wrappers re-raise, invariants are asserted."""
    monkeypatch.setenv("HEARING_TRACKER_STRICT_MODE", "true")
    get_settings.cache_clear()
    return get_settings()


# ---------------------------------------------------------------------------
# Clock & scenarios
# ---------------------------------------------------------------------------


@pytest.fixture
def clock():
    """A manual clock parked at a fixed, non-zero epoch."""
    return ManualClock(start_ms=EPOCH_MS)


@pytest.fixture
def hearing():
    """Docket row for the scripted hearing."""
    return {
        "Case Number": "123-2024",
        "Client Name": "John Doe",
        "Division": "Criminal",
        "Time": "9:00 AM",
        "id": "123-2024-test",
    }


@pytest.fixture
def court_scenario(clock):
    """Court 2 min, State 15 min, Defense 12 min, then recess.

    Returns:
        TrackingState: The finalized snapshot.
    """
    state = initialize_speaking_time(["State", "Defense", "Court"])
    for party, minutes in (("Court", 2), ("State", 15), ("Defense", 12)):
        state = start_speaking(state, party, clock=clock)
        clock.advance_minutes(minutes)
    return stop_tracking(state, clock=clock)
