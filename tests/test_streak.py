from datetime import date, timedelta

import pytz

from core import config, time_utils
from core.models import HistoryPoint, default_scores
from services.streak_service import compute_streak, compute_best_streak


def test_empty_history_has_no_streak(today):
    assert compute_streak([], today=today) == 0
    assert compute_best_streak([]) == 0


def test_single_entry_today_is_one(make_point, today):
    assert compute_streak([make_point(days_ago=0)], today=today) == 1


def test_single_entry_yesterday_is_one(make_point, today):
    assert compute_streak([make_point(days_ago=1)], today=today) == 1


def test_single_entry_two_days_ago_is_zero(make_point, today):
    assert compute_streak([make_point(days_ago=2)], today=today) == 0


def test_three_consecutive_days(make_point, today):
    history = [make_point(days_ago=d) for d in (0, 1, 2)]
    assert compute_streak(history, today=today) == 3


def test_duplicate_same_day_does_not_inflate(make_point, today):
    history = [make_point(days_ago=d) for d in (0, 1, 2)] + [make_point(days_ago=1, hours=-5)]
    assert compute_streak(history, today=today) == 3


def test_gap_day_caps_streak(make_point, today):
    history = [make_point(days_ago=0), make_point(days_ago=2), make_point(days_ago=3)]
    assert compute_streak(history, today=today) == 1


def test_unsorted_input(make_point, today):
    history = [make_point(days_ago=2), make_point(days_ago=0), make_point(days_ago=1), make_point(days_ago=5)]
    assert compute_streak(history, today=today) == 3


def test_streak_anchored_at_yesterday(make_point, today):
    history = [make_point(days_ago=d) for d in (1, 2, 3, 4)]
    assert compute_streak(history, today=today) == 4


def test_future_only_entry_has_no_streak(make_point, today):
    assert compute_streak([make_point(days_ago=-2)], today=today) == 0


def test_streak_uses_calendar_days_not_24h_windows(make_point, today):
    # 00:30 today and 23:30 two days earlier are 2 calendar days apart
    late = make_point(days_ago=2, hours=11.5)   # 23:30 on D-2
    early = make_point(days_ago=0, hours=-11.5)  # 00:30 on D
    assert compute_streak([late, early], today=today) == 1
    mid = make_point(days_ago=1)
    assert compute_streak([late, early, mid], today=today) == 3


def test_best_streak_finds_longest_run(make_point):
    history = [make_point(days_ago=d) for d in (0, 1, 5, 6, 7, 8, 12)]
    assert compute_best_streak(history) == 4


def test_best_streak_ignores_duplicates(make_point):
    history = [make_point(days_ago=3), make_point(days_ago=3, hours=2), make_point(days_ago=4)]
    assert compute_best_streak(history) == 2


def test_local_zone_sets_day_boundaries(monkeypatch):
    # 19:30 Monday and 08:00 Tuesday in New York, both Tuesday in UTC
    history = [
        HistoryPoint("2026-02-17T00:30:00.000Z", default_scores()),
        HistoryPoint("2026-02-17T13:00:00.000Z", default_scores()),
    ]
    assert compute_streak(history, today=date(2026, 2, 17)) == 1

    monkeypatch.setattr(time_utils, "LOCAL_TZ", pytz.timezone("America/New_York"))
    assert compute_streak(history, today=date(2026, 2, 17)) == 2
    assert compute_best_streak(history) == 2


def test_timezone_defaults_to_host_zone(monkeypatch):
    monkeypatch.delenv("ULI_TIMEZONE", raising=False)
    monkeypatch.setattr(config, "get_localzone_name", lambda: "America/New_York")
    assert config.resolve_timezone() == "America/New_York"

    monkeypatch.setenv("ULI_TIMEZONE", " Asia/Kolkata ")
    assert config.resolve_timezone() == "Asia/Kolkata"
