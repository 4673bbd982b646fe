#!/usr/bin/env python3
"""
Reset stored data for a single user: current scores, reflections and history.
Run from the repo root: python -m scripts.reset

Env:
  ULI_STORE_FILE  (default: data/uli_store.json)
  ULI_USER_ID     (default: local_user_id)
  DRY_RUN         (default: true)  -> set to "false" to actually delete
"""
import os
from datetime import datetime, timezone

from core.config import STORE_FILE, USER_ID
from core.errors import MalformedRecord
from core.store import LocalStore
from data_access.records_repo import clear_user_data, count_user_records

DRY_RUN = (os.getenv("DRY_RUN", "true").lower() != "false")


def print_counts(store: LocalStore, stage: str) -> dict:
    try:
        counts = count_user_records(store, USER_ID)
    except MalformedRecord as e:
        print(f"\n[{stage}] unreadable: {e}")
        return {}
    print(f"\n[{stage}] per-collection record counts")
    for c, n in counts.items():
        print(f"  {c:12} : {n}")
    return counts


def main():
    store = LocalStore(STORE_FILE)
    print(f"[cfg] STORE={STORE_FILE} USER={USER_ID} DRY_RUN={DRY_RUN}")
    print("Keys:", ", ".join(store.keys()) or "(none)")

    before = print_counts(store, "before")

    if DRY_RUN:
        print("\n[dry-run] No deletes performed. Set DRY_RUN=false to apply.")
    else:
        clear_user_data(store, USER_ID)
        print(f"\n[done] Cleared {sum(before.values())} records @ {datetime.now(timezone.utc).isoformat()}")

    print_counts(store, "after")


if __name__ == "__main__":
    main()
