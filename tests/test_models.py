from datetime import datetime, timezone

import pytest

from core.errors import MalformedRecord
from core.models import (
    HistoryPoint, ReflectionEntry, default_scores, with_score, validate_scores,
    parse_history, parse_reflections,
)
from core.time_utils import iso_timestamp, parse_iso_instant, month_day_label


def test_default_scores_cover_all_principles():
    assert default_scores() == {"r3": 5, "phcb": 5, "apd": 5, "lps": 5, "cdr": 5, "eia": 5}


def test_with_score_updates_one_key():
    s = with_score(default_scores(), "apd", 9)
    assert s["apd"] == 9
    assert sum(s.values()) == 34


def test_with_score_rejects_unknown_key():
    with pytest.raises(KeyError):
        with_score(default_scores(), "xyz", 3)


def test_validate_scores_rejects_extra_keys():
    raw = dict(default_scores(), extra=4)
    with pytest.raises(MalformedRecord, match="unknown principle"):
        validate_scores(raw)


def test_iso_timestamp_format():
    dt = datetime(2026, 2, 15, 12, 0, 0, tzinfo=timezone.utc)
    assert iso_timestamp(dt) == "2026-02-15T12:00:00.000Z"


def test_parse_iso_instant_variants():
    z = parse_iso_instant("2026-02-15T12:00:00.000Z")
    off = parse_iso_instant("2026-02-15T14:00:00+02:00")
    naive = parse_iso_instant("2026-02-15T12:00:00")  # read as local (UTC in tests)
    assert z == off == naive
    assert z.tzinfo is not None
    assert month_day_label(z) == "2/15"


def test_history_point_from_dict_keeps_timestamp_text():
    raw = {"timestamp": "2026-02-15T12:00:00.000Z", "scores": default_scores()}
    p = HistoryPoint.from_dict(raw)
    assert p.to_dict() == raw
    assert p.moment == datetime(2026, 2, 15, 12, tzinfo=timezone.utc)


@pytest.mark.parametrize("raw", [
    {"timestamp": "yesterday", "scores": {"r3": 5, "phcb": 5, "apd": 5, "lps": 5, "cdr": 5, "eia": 5}},
    {"scores": {"r3": 5, "phcb": 5, "apd": 5, "lps": 5, "cdr": 5, "eia": 5}},
    {"timestamp": "2026-02-15T12:00:00.000Z"},
    {"timestamp": 12345, "scores": {"r3": 5, "phcb": 5, "apd": 5, "lps": 5, "cdr": 5, "eia": 5}},
    "not an object",
])
def test_malformed_history_is_reported(raw):
    with pytest.raises(MalformedRecord):
        parse_history([raw])


def test_malformed_record_names_its_position():
    good = {"timestamp": "2026-02-15T12:00:00.000Z", "scores": default_scores()}
    with pytest.raises(MalformedRecord) as exc:
        parse_history([good, {"timestamp": "nope", "scores": default_scores()}])
    assert exc.value.index == 1
    assert exc.value.collection == "history"


def test_reflection_entry_round_trip():
    raw = {
        "reflection": "Noticed a pattern",
        "tags": ["focus", "work"],
        "scores": default_scores(),
        "timestamp": "2026-02-15T12:00:00.000Z",
    }
    entry = ReflectionEntry.from_dict(raw)
    assert entry.tags == ("focus", "work")
    assert entry.to_dict() == raw


def test_reflection_without_tags_is_accepted():
    entry = ReflectionEntry.from_dict({
        "reflection": "Old entry", "scores": default_scores(), "timestamp": "2026-02-15T12:00:00.000Z",
    })
    assert entry.tags == ()
    assert ReflectionEntry.from_dict({
        "reflection": "Null tags", "tags": None, "scores": default_scores(),
        "timestamp": "2026-02-15T12:00:00.000Z",
    }).tags == ()


@pytest.mark.parametrize("patch", [
    {"reflection": "   "},
    {"reflection": None},
    {"tags": ["ok", ""]},
    {"tags": "focus"},
    {"tags": ""},
    {"tags": 0},
    {"tags": {}},
])
def test_malformed_reflections_are_reported(patch):
    raw = {"reflection": "x", "tags": [], "scores": default_scores(), "timestamp": "2026-02-15T12:00:00.000Z"}
    raw.update(patch)
    with pytest.raises(MalformedRecord):
        parse_reflections([raw])


def test_collections_must_be_lists():
    assert parse_history(None) == []
    with pytest.raises(MalformedRecord):
        parse_history({"timestamp": "2026-02-15T12:00:00.000Z"})
    with pytest.raises(MalformedRecord):
        parse_reflections("abc")
