# services/reflection_service.py
from datetime import datetime
from typing import Iterable, List, Optional
import pandas as pd

from core.errors import InvalidSubmission
from core.models import ScoreSet, ReflectionEntry, HistoryPoint, validate_scores
from core.principles import PRINCIPLE_KEYS, PRINCIPLE_LABELS
from core.store import LocalStore
from core.time_utils import iso_timestamp, local_display
from data_access.records_repo import append_submission

ALL_TAGS = "all"

def parse_tags(text: Optional[str]) -> List[str]:
    return [t.strip() for t in (text or "").split(",") if t.strip()]

def build_submission(reflection: str, tags_text: str, scores: ScoreSet,
                     now: Optional[datetime] = None) -> ReflectionEntry:
    if not reflection or not reflection.strip():
        raise InvalidSubmission("Please write a reflection before logging.")
    return ReflectionEntry(
        reflection=reflection,
        tags=tuple(parse_tags(tags_text)),
        scores=validate_scores(scores),
        timestamp=iso_timestamp(now),
    )

def submit_reflection(store: LocalStore, uid: str, reflection: str, tags_text: str,
                      scores: ScoreSet, now: Optional[datetime] = None) -> ReflectionEntry:
    """Log one reflection: entry, history point and current scores share one timestamp."""
    entry = build_submission(reflection, tags_text, scores, now)
    point = HistoryPoint(timestamp=entry.timestamp, scores=dict(entry.scores))
    append_submission(store, uid, entry, point)
    return entry

def newest_first(entries: Iterable[ReflectionEntry]) -> List[ReflectionEntry]:
    return sorted(entries, key=lambda e: e.moment, reverse=True)

def all_tags(entries: Iterable[ReflectionEntry]) -> List[str]:
    return sorted({t for e in entries for t in e.tags})

def filter_reflections(entries: Iterable[ReflectionEntry], search_text: str = "",
                       tag: str = ALL_TAGS) -> List[ReflectionEntry]:
    needle = (search_text or "").lower()

    def matches(e: ReflectionEntry) -> bool:
        if needle and needle not in e.reflection.lower() and not any(needle in t.lower() for t in e.tags):
            return False
        return tag == ALL_TAGS or tag in e.tags

    return [e for e in newest_first(entries) if matches(e)]

def reflections_frame(entries: Iterable[ReflectionEntry]) -> pd.DataFrame:
    rows = []
    for e in entries:
        row = {"Date": local_display(e.moment), "Tags": ", ".join(e.tags), "Reflection": e.reflection}
        row.update({PRINCIPLE_LABELS[k]: e.scores[k] for k in PRINCIPLE_KEYS})
        rows.append(row)
    return pd.DataFrame(rows, columns=["Date", "Tags", "Reflection"] + [PRINCIPLE_LABELS[k] for k in PRINCIPLE_KEYS])
