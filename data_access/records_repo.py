# data_access/records_repo.py
from typing import Any, Dict, List, Optional
import logging

from core.errors import MalformedRecord
from core.models import (
    HISTORY, REFLECTIONS, ScoreSet, HistoryPoint, ReflectionEntry, validate_scores, parse_history,
    parse_reflections,
)
from core.store import LocalStore

logger = logging.getLogger(__name__)

def scores_key(uid: str) -> str:
    return f"uli_scores_{uid}"

def reflections_key(uid: str) -> str:
    return f"uli_reflections_{uid}"

def history_key(uid: str) -> str:
    return f"uli_history_{uid}"

def user_keys(uid: str) -> List[str]:
    return [scores_key(uid), reflections_key(uid), history_key(uid)]

def _stored_list(store: LocalStore, key: str, collection: str) -> list:
    raw = store.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise MalformedRecord(collection, f"{key} must be a list")
    return raw

def load_history(store: LocalStore, uid: str) -> List[HistoryPoint]:
    return parse_history(store.get(history_key(uid)))

def load_reflections(store: LocalStore, uid: str) -> List[ReflectionEntry]:
    return parse_reflections(store.get(reflections_key(uid)))

def load_current_scores(store: LocalStore, uid: str) -> Optional[ScoreSet]:
    raw = store.get(scores_key(uid))
    return validate_scores(raw) if raw is not None else None

def load_raw_user_data(store: LocalStore, uid: str) -> Dict[str, Any]:
    """Stored values exactly as persisted, absent keys omitted."""
    out = {}
    for key in user_keys(uid):
        val = store.get(key)
        if val is not None:
            out[key] = val
    return out

def append_submission(store: LocalStore, uid: str, entry: ReflectionEntry, point: HistoryPoint):
    reflections = _stored_list(store, reflections_key(uid), REFLECTIONS)
    history = _stored_list(store, history_key(uid), HISTORY)
    store.set_many({
        reflections_key(uid): reflections + [entry.to_dict()],
        history_key(uid): history + [point.to_dict()],
        scores_key(uid): dict(entry.scores),
    })
    logger.info("Appended reflection for %s at %s (%d total)", uid, entry.timestamp, len(reflections) + 1)

def replace_user_data(store: LocalStore, uid: str, bundle: Dict[str, Any]):
    """Drop every collection of ``uid`` and write the ones present in ``bundle``."""
    allowed = set(user_keys(uid))
    items = {k: v for k, v in bundle.items() if k in allowed}
    store.set_many(items, remove=user_keys(uid))
    logger.info("Replaced data for %s: %s", uid, sorted(items))

def clear_user_data(store: LocalStore, uid: str):
    store.remove(*user_keys(uid))
    logger.info("Cleared data for %s", uid)

def count_user_records(store: LocalStore, uid: str) -> Dict[str, int]:
    return {
        "scores": 1 if store.get(scores_key(uid)) is not None else 0,
        "reflections": len(_stored_list(store, reflections_key(uid), REFLECTIONS)),
        "history": len(_stored_list(store, history_key(uid), HISTORY)),
    }
