# services/streak_service.py
from datetime import date, timedelta
from typing import List, Optional, Sequence

from core.models import HistoryPoint
from core.time_utils import local_day, today_local

def _distinct_days_desc(history: Sequence[HistoryPoint]) -> List[date]:
    return sorted({local_day(p.moment) for p in history}, reverse=True)

def compute_streak(history: Sequence[HistoryPoint], today: Optional[date] = None) -> int:
    """Consecutive local days with at least one entry, anchored at today or yesterday.

    Several entries on one day count once. A most recent day older than
    yesterday (or in the future) means there is no running streak.
    """
    days = _distinct_days_desc(history)
    if not days:
        return 0
    today = today or today_local()
    if days[0] not in (today, today - timedelta(days=1)):
        return 0
    streak = 1
    for prev, cur in zip(days, days[1:]):
        if (prev - cur).days != 1:
            break
        streak += 1
    return streak

def compute_best_streak(history: Sequence[HistoryPoint]) -> int:
    days = _distinct_days_desc(history)
    best, run = 0, 0
    prev = None
    for d in days:
        run = run + 1 if prev is not None and (prev - d).days == 1 else 1
        best = max(best, run)
        prev = d
    return best
