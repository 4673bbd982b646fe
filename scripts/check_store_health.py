#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Store Health Checker for the UL-I tracker.
Run:
  python -m scripts.check_store_health [--store data/uli_store.json] [--user local_user_id]

Parses every record of a user and reports the malformed ones. Nothing is modified.
Exit code is 1 when problems were found.
"""

import argparse
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Callable, Dict, List

from core.config import STORE_FILE, USER_ID
from core.errors import MalformedRecord
from core.models import HistoryPoint, ReflectionEntry, validate_scores
from core.store import LocalStore
from data_access.records_repo import scores_key, reflections_key, history_key
from services.streak_service import compute_streak, compute_best_streak


def parse_args(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("--store", default=str(STORE_FILE), help="Path to the JSON store file")
    p.add_argument("--user", default=USER_ID, help="Identity whose records are checked")
    return p.parse_args(argv)


def check_collection(raw: Any, name: str, parse: Callable[[Any, int], Any]) -> Dict[str, Any]:
    """Parse each item on its own so one bad record does not hide the others."""
    summary = {"total": 0, "ok": [], "errors": []}
    if raw is None:
        return summary
    if not isinstance(raw, list):
        summary["errors"].append(str(MalformedRecord(name, f"{name} must be a list")))
        return summary
    summary["total"] = len(raw)
    for i, item in enumerate(raw):
        try:
            summary["ok"].append(parse(item, i))
        except MalformedRecord as e:
            summary["errors"].append(str(e))
    return summary


def find_orphans(reflections: List[ReflectionEntry], history: List[HistoryPoint]) -> List[str]:
    """Timestamps present in one collection but not the other."""
    r = Counter(e.timestamp for e in reflections)
    h = Counter(p.timestamp for p in history)
    return sorted(set(r) ^ set(h))


def main(argv=None) -> int:
    args = parse_args(argv)
    path = Path(args.store)
    uid = args.user
    print(f"[cfg] STORE={path} USER={uid}")
    if not path.exists():
        print("No store file yet. Nothing to check.")
        return 0

    store = LocalStore(path)
    problems = 0

    print("\n== Current scores ==")
    raw_scores = store.get(scores_key(uid))
    if raw_scores is None:
        print("  (absent; the app falls back to all 5s)")
    else:
        try:
            validate_scores(raw_scores)
            print("  ok")
        except MalformedRecord as e:
            problems += 1
            print(f"  ✗ {e}")

    refl = check_collection(store.get(reflections_key(uid)), "reflections", ReflectionEntry.from_dict)
    hist = check_collection(store.get(history_key(uid)), "history", HistoryPoint.from_dict)
    for title, summary in (("Reflections", refl), ("History", hist)):
        print(f"\n== {title} ==")
        print(f"  total={summary['total']} ok={len(summary['ok'])} bad={len(summary['errors'])}")
        for err in summary["errors"]:
            print(f"  ✗ {err}")
        problems += len(summary["errors"])

    orphans = find_orphans(refl["ok"], hist["ok"])
    if orphans:
        print(f"\n⚠️ {len(orphans)} timestamp(s) appear in only one of reflections/history:")
        for ts in orphans[:20]:
            print(f"  - {ts}")

    if not hist["errors"] and hist["ok"]:
        print(f"\nStreak: current={compute_streak(hist['ok'])} best={compute_best_streak(hist['ok'])}")

    print("\n" + ("✅ Store looks healthy." if problems == 0 else f"❌ {problems} problem(s) found."))
    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
