# core/models.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from core.errors import MalformedRecord
from core.principles import PRINCIPLE_KEYS, MIN_SCORE, MAX_SCORE, DEFAULT_SCORE
from core.time_utils import parse_iso_instant

ScoreSet = Dict[str, int]

SCORES = "scores"
REFLECTIONS = "reflections"
HISTORY = "history"


def default_scores() -> ScoreSet:
    return {k: DEFAULT_SCORE for k in PRINCIPLE_KEYS}


def validate_scores(raw: Any, collection: str = SCORES, index: Optional[int] = None) -> ScoreSet:
    """Return a ScoreSet in fixed key order or raise MalformedRecord."""
    if not isinstance(raw, dict):
        raise MalformedRecord(collection, "scores must be an object", index)
    missing = [k for k in PRINCIPLE_KEYS if k not in raw]
    if missing:
        raise MalformedRecord(collection, f"missing principle(s): {', '.join(missing)}", index)
    extra = sorted(set(raw) - set(PRINCIPLE_KEYS))
    if extra:
        raise MalformedRecord(collection, f"unknown principle(s): {', '.join(extra)}", index)
    for k in PRINCIPLE_KEYS:
        v = raw[k]
        if isinstance(v, bool) or not isinstance(v, int) or not (MIN_SCORE <= v <= MAX_SCORE):
            raise MalformedRecord(collection, f"score {k}={v!r} outside {MIN_SCORE}-{MAX_SCORE}", index)
    return {k: int(raw[k]) for k in PRINCIPLE_KEYS}


def with_score(scores: ScoreSet, key: str, value: int) -> ScoreSet:
    if key not in PRINCIPLE_KEYS:
        raise KeyError(key)
    updated = dict(scores)
    updated[key] = int(value)
    return validate_scores(updated)


def _parse_moment(timestamp: Any, collection: str, index: Optional[int]) -> datetime:
    try:
        return parse_iso_instant(timestamp)
    except (TypeError, ValueError) as e:
        raise MalformedRecord(collection, f"bad timestamp {timestamp!r}: {e}", index) from e


@dataclass(frozen=True)
class HistoryPoint:
    timestamp: str
    scores: ScoreSet
    moment: datetime = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "moment", _parse_moment(self.timestamp, HISTORY, None))

    @classmethod
    def from_dict(cls, raw: Any, index: Optional[int] = None) -> "HistoryPoint":
        if not isinstance(raw, dict):
            raise MalformedRecord(HISTORY, "entry must be an object", index)
        if "timestamp" not in raw:
            raise MalformedRecord(HISTORY, "missing timestamp", index)
        _parse_moment(raw["timestamp"], HISTORY, index)
        return cls(timestamp=raw["timestamp"], scores=validate_scores(raw.get("scores"), HISTORY, index))

    def to_dict(self) -> Dict[str, Any]:
        return {"timestamp": self.timestamp, "scores": dict(self.scores)}


@dataclass(frozen=True)
class ReflectionEntry:
    reflection: str
    tags: Tuple[str, ...]
    scores: ScoreSet
    timestamp: str
    moment: datetime = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "moment", _parse_moment(self.timestamp, REFLECTIONS, None))

    @classmethod
    def from_dict(cls, raw: Any, index: Optional[int] = None) -> "ReflectionEntry":
        if not isinstance(raw, dict):
            raise MalformedRecord(REFLECTIONS, "entry must be an object", index)
        text = raw.get("reflection")
        if not isinstance(text, str) or not text.strip():
            raise MalformedRecord(REFLECTIONS, "reflection text is missing or empty", index)
        tags = raw.get("tags")
        if tags is None:  # entries saved before tags existed have none
            tags = []
        if not isinstance(tags, list) or not all(isinstance(t, str) and t.strip() for t in tags):
            raise MalformedRecord(REFLECTIONS, "tags must be a list of non-empty strings", index)
        if "timestamp" not in raw:
            raise MalformedRecord(REFLECTIONS, "missing timestamp", index)
        _parse_moment(raw["timestamp"], REFLECTIONS, index)
        return cls(
            reflection=text,
            tags=tuple(t.strip() for t in tags),
            scores=validate_scores(raw.get("scores"), REFLECTIONS, index),
            timestamp=raw["timestamp"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reflection": self.reflection,
            "tags": list(self.tags),
            "scores": dict(self.scores),
            "timestamp": self.timestamp,
        }


def parse_history(raw: Any) -> List[HistoryPoint]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise MalformedRecord(HISTORY, "history must be a list")
    return [HistoryPoint.from_dict(item, i) for i, item in enumerate(raw)]


def parse_reflections(raw: Any) -> List[ReflectionEntry]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise MalformedRecord(REFLECTIONS, "reflections must be a list")
    return [ReflectionEntry.from_dict(item, i) for i, item in enumerate(raw)]
