"""Shared fixtures for the UL-I tracker test suite."""

import os

# calendar-day math in the tests assumes UTC days
os.environ["ULI_TIMEZONE"] = "UTC"

import pytest
from datetime import date, datetime, timedelta, timezone

from core.models import HistoryPoint, ReflectionEntry, default_scores
from core.store import LocalStore
from core.time_utils import iso_timestamp


# ── Time ─────────────────────────────────────────────────────────────────

@pytest.fixture
def frozen_now():
    """Fixed 'now': 2026-02-15T12:00:00Z (noon UTC)."""
    return datetime(2026, 2, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def today(frozen_now):
    return frozen_now.date()


# ── Store ────────────────────────────────────────────────────────────────

@pytest.fixture
def store(tmp_path):
    """Empty JSON store in a per-test temp dir."""
    return LocalStore(tmp_path / "uli_store.json")


@pytest.fixture
def uid():
    return "tester"


# ── Record factories ─────────────────────────────────────────────────────

@pytest.fixture
def make_point(frozen_now):
    """HistoryPoint factory relative to frozen_now.

    Usage:
        p = make_point(days_ago=2, hours=-3, r3=7)
    """
    def _factory(days_ago=0, hours=0, **scores):
        s = default_scores()
        s.update(scores)
        moment = frozen_now - timedelta(days=days_ago) + timedelta(hours=hours)
        return HistoryPoint(timestamp=iso_timestamp(moment), scores=s)

    return _factory


@pytest.fixture
def make_entry(frozen_now):
    def _factory(text="A reflection", tags=(), days_ago=0, **scores):
        s = default_scores()
        s.update(scores)
        moment = frozen_now - timedelta(days=days_ago)
        return ReflectionEntry(reflection=text, tags=tuple(tags), scores=s, timestamp=iso_timestamp(moment))

    return _factory
