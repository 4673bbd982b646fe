import json

import pytest

from core.errors import MalformedRecord
from core.models import HistoryPoint, ReflectionEntry, default_scores
from core.store import LocalStore
from data_access.records_repo import (
    append_submission, clear_user_data, count_user_records, history_key, load_current_scores,
    load_history, load_reflections, reflections_key, replace_user_data, scores_key,
)


def test_missing_file_reads_empty(store):
    assert store.get("anything") is None
    assert store.keys() == []


def test_set_get_and_remove(store):
    store.set("a", [1, 2])
    store.set_many({"b": {"x": 1}})
    assert store.get("a") == [1, 2]
    assert store.keys() == ["a", "b"]
    store.remove("a")
    assert store.get("a") is None
    assert LocalStore(store.path).get("b") == {"x": 1}


def test_corrupt_file_is_reported(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(MalformedRecord):
        LocalStore(path).get("x")


def test_non_object_file_is_reported(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(MalformedRecord):
        LocalStore(path).keys()


def test_fresh_user_has_no_data(store, uid):
    assert load_current_scores(store, uid) is None
    assert load_history(store, uid) == []
    assert load_reflections(store, uid) == []


def test_append_submission_writes_all_three(store, uid, make_entry):
    entry = make_entry(text="one", r3=9)
    append_submission(store, uid, entry, HistoryPoint(entry.timestamp, dict(entry.scores)))
    entry2 = make_entry(text="two", days_ago=-1, r3=2)
    append_submission(store, uid, entry2, HistoryPoint(entry2.timestamp, dict(entry2.scores)))

    assert [e.reflection for e in load_reflections(store, uid)] == ["one", "two"]
    assert [p.scores["r3"] for p in load_history(store, uid)] == [9, 2]
    assert load_current_scores(store, uid)["r3"] == 2
    assert count_user_records(store, uid) == {"scores": 1, "reflections": 2, "history": 2}


def test_identities_are_isolated(store, make_entry):
    entry = make_entry()
    append_submission(store, "alice", entry, HistoryPoint(entry.timestamp, dict(entry.scores)))
    assert load_reflections(store, "bob") == []
    clear_user_data(store, "bob")
    assert len(load_reflections(store, "alice")) == 1


def test_corrupt_history_entry_surfaces(store, uid):
    store.set(history_key(uid), [{"timestamp": "garbage", "scores": default_scores()}])
    with pytest.raises(MalformedRecord):
        load_history(store, uid)


def test_replace_user_data_drops_absent_collections(store, uid, make_entry):
    entry = make_entry()
    append_submission(store, uid, entry, HistoryPoint(entry.timestamp, dict(entry.scores)))
    replace_user_data(store, uid, {scores_key(uid): default_scores(), "uli_scores_other": {}})
    assert load_reflections(store, uid) == []
    assert load_current_scores(store, uid) == default_scores()
    assert store.get("uli_scores_other") is None


def test_store_file_is_plain_json(store, uid):
    store.set(scores_key(uid), default_scores())
    data = json.loads(store.path.read_text(encoding="utf-8"))
    assert data == {scores_key(uid): default_scores()}


def test_non_utf8_file_is_reported(tmp_path):
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe{\x00}")
    with pytest.raises(MalformedRecord):
        LocalStore(path).get("x")


@pytest.mark.parametrize("key_of", [reflections_key, history_key])
def test_non_list_collection_is_reported(store, uid, make_entry, key_of):
    store.set(key_of(uid), {"not": "a list"})
    entry = make_entry()
    with pytest.raises(MalformedRecord):
        append_submission(store, uid, entry, HistoryPoint(entry.timestamp, dict(entry.scores)))
    with pytest.raises(MalformedRecord):
        count_user_records(store, uid)
    assert store.get(key_of(uid)) == {"not": "a list"}
