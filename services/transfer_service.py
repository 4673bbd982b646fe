# services/transfer_service.py
from datetime import date
from typing import Any, Dict
import json
import logging

from core.errors import ImportRejected
from core.models import validate_scores, parse_history, parse_reflections
from core.store import LocalStore
from data_access.records_repo import (
    scores_key, reflections_key, history_key, load_raw_user_data, replace_user_data
)

logger = logging.getLogger(__name__)

def export_filename(uid: str, day: date) -> str:
    return f"uli_data_{uid}_{day.isoformat()}.json"

def export_bundle(store: LocalStore, uid: str) -> Dict[str, Any]:
    return load_raw_user_data(store, uid)

def dumps_bundle(bundle: Dict[str, Any]) -> str:
    return json.dumps(bundle, ensure_ascii=False, indent=2)

def export_json(store: LocalStore, uid: str) -> str:
    bundle = export_bundle(store, uid)
    logger.debug("Exported %s for %s", sorted(bundle), uid)
    return dumps_bundle(bundle)

def validate_bundle(bundle: Dict[str, Any], uid: str) -> Dict[str, Any]:
    """Keep the identity's own keys and check every record; raises on the first bad one."""
    own = {scores_key(uid), reflections_key(uid), history_key(uid)}
    foreign = sorted(k for k in bundle if k not in own)
    if foreign:
        logger.warning("Import for %s ignores keys of other identities: %s", uid, foreign)
    kept = {k: v for k, v in bundle.items() if k in own}
    if not kept:
        raise ImportRejected(f"The file holds no data for user '{uid}'.")
    if scores_key(uid) in kept:
        validate_scores(kept[scores_key(uid)])
    if reflections_key(uid) in kept:
        parse_reflections(kept[reflections_key(uid)])
    if history_key(uid) in kept:
        parse_history(kept[history_key(uid)])
    return kept

def import_json(store: LocalStore, uid: str, text: str) -> Dict[str, Any]:
    """Replace the identity's collections with the file's; the store is untouched on error."""
    try:
        bundle = json.loads(text)
    except json.JSONDecodeError as e:
        raise ImportRejected(f"Not a valid JSON file: {e.msg}") from e
    if not isinstance(bundle, dict):
        raise ImportRejected("Invalid data format.")
    kept = validate_bundle(bundle, uid)
    replace_user_data(store, uid, kept)
    logger.info("Imported %s for %s", sorted(kept), uid)
    return kept
