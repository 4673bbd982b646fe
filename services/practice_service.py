# services/practice_service.py
from datetime import datetime, timedelta
from typing import Any, Dict
import math

from core.errors import InvalidSubmission

Timer = Dict[str, Any]

def new_timer(duration: int) -> Timer:
    duration = max(1, int(duration))
    return {"duration": duration, "remaining": duration, "running": False, "end_ts": None}

def remaining_seconds(timer: Timer, now: datetime) -> int:
    if not timer["running"]:
        return int(timer["remaining"])
    return max(int(math.ceil((timer["end_ts"] - now).total_seconds())), 0)

def start_timer(timer: Timer, now: datetime) -> Timer:
    """Start, or resume from the paused remainder. A spent timer restarts at full length."""
    if timer["running"]:
        return timer
    left = int(timer["remaining"]) or int(timer["duration"])
    timer.update({"running": True, "remaining": left, "end_ts": now + timedelta(seconds=left)})
    return timer

def pause_timer(timer: Timer, now: datetime) -> Timer:
    if timer["running"]:
        timer.update({"running": False, "remaining": remaining_seconds(timer, now), "end_ts": None})
    return timer

def reset_timer(timer: Timer) -> Timer:
    timer.update({"running": False, "remaining": int(timer["duration"]), "end_ts": None})
    return timer

def finish_timer(timer: Timer) -> Timer:
    timer.update({"running": False, "remaining": 0, "end_ts": None})
    return timer

def is_finished(timer: Timer, now: datetime) -> bool:
    return bool(timer["running"]) and remaining_seconds(timer, now) <= 0

def is_paused(timer: Timer) -> bool:
    return not timer["running"] and 0 < int(timer["remaining"]) < int(timer["duration"])

def progress_fraction(timer: Timer, now: datetime) -> float:
    total = max(int(timer["duration"]), 1)
    return min(max((total - remaining_seconds(timer, now)) / total, 0.0), 1.0)

def format_clock(seconds: int) -> str:
    seconds = max(int(seconds), 0)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"

def validate_feedback(text: str) -> str:
    if not text or not text.strip():
        raise InvalidSubmission("Please provide your feedback before submitting.")
    return text.strip()
