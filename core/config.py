# core/config.py
import os
from pathlib import Path

from tzlocal import get_localzone_name

APP_TITLE = "UL-I Engineering App"
PAGE_ICON = "🧠"
APP_TAGLINE = "Train your inner awareness to its highest potential."

USER_ID = (os.getenv("ULI_USER_ID") or "local_user_id").strip()

DATA_DIR = Path(os.getenv("ULI_DATA_DIR", "data"))
STORE_FILE = Path(os.getenv("ULI_STORE_FILE") or DATA_DIR / "uli_store.json")


def resolve_timezone() -> str:
    """pytz zone used for calendar days and chart labels; the host's zone unless overridden."""
    return (os.getenv("ULI_TIMEZONE") or "").strip() or get_localzone_name()


TIMEZONE = resolve_timezone()

LOG_FILE = Path(os.getenv("ULI_LOG_FILE") or DATA_DIR / "logs" / "uli.log")
LOG_LEVEL = (os.getenv("ULI_LOG_LEVEL") or "INFO").upper()

# trend chart drawing area (plot-space units)
CHART_WIDTH = 600
CHART_HEIGHT = 300
CHART_PADDING = 40
MAX_X_LABELS = 5

MESSAGE_SECONDS = 5
