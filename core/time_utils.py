# core/time_utils.py
from datetime import datetime, timezone, date
from typing import Optional
import pytz

from core.config import TIMEZONE

LOCAL_TZ = pytz.timezone(TIMEZONE)

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

def now_local() -> datetime:
    return datetime.now(LOCAL_TZ)

def today_local() -> date:
    return now_local().date()

def parse_iso_instant(value: str) -> datetime:
    """Parse an ISO-8601 instant into an aware UTC datetime.

    A trailing ``Z`` is accepted. Values without an offset are read as local time,
    the way a browser reads them.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"not an ISO-8601 timestamp: {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = LOCAL_TZ.localize(dt)
    return dt.astimezone(timezone.utc)

def ensure_aware(dt: datetime) -> datetime:
    """Naive datetimes are local wall time."""
    if dt.tzinfo is None:
        dt = LOCAL_TZ.localize(dt)
    return dt

def iso_timestamp(dt: Optional[datetime] = None) -> str:
    """UTC, millisecond precision, ``Z`` suffix: 2025-03-01T08:15:00.000Z"""
    dt = ensure_aware(dt or utc_now())
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def to_local(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(LOCAL_TZ)

def local_day(dt: datetime) -> date:
    return to_local(dt).date()

def month_day_label(dt: datetime) -> str:
    d = to_local(dt)
    return f"{d.month}/{d.day}"

def local_display(dt: datetime) -> str:
    return to_local(dt).strftime("%Y-%m-%d %H:%M")
