# core/logger.py
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from core.config import LOG_FILE, LOG_LEVEL

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(log_file: Path = LOG_FILE, level: str = LOG_LEVEL,
                 max_bytes: int = 10_000_000, backup_count: int = 5) -> logging.Logger:
    logger = logging.getLogger()
    # streamlit re-executes app.py on every rerun
    if getattr(logger, "_uli_configured", False):
        return logger
    Path(log_file).parent.mkdir(exist_ok=True, parents=True)
    logger.setLevel(level)
    formatter = logging.Formatter(FORMAT)

    handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    logger._uli_configured = True
    return logger
