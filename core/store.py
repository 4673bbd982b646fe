# core/store.py
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import streamlit as st

from core.config import STORE_FILE
from core.errors import MalformedRecord

logger = logging.getLogger(__name__)


class LocalStore:
    """JSON key/value file, one document holding every storage key."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedRecord("store", f"{self.path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise MalformedRecord("store", f"{self.path} must hold a JSON object")
        return data

    def _write_all(self, data: Dict[str, Any]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=".uli_", suffix=".json", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self._read_all().get(key, default)

    def keys(self) -> List[str]:
        return sorted(self._read_all())

    def set_many(self, items: Dict[str, Any], remove: Iterable[str] = ()):
        """Apply removals then writes in a single file replace."""
        data = self._read_all()
        for key in remove:
            data.pop(key, None)
        data.update(items)
        self._write_all(data)
        logger.debug("store %s: wrote %s, removed %s", self.path, sorted(items), sorted(remove))

    def set(self, key: str, value: Any):
        self.set_many({key: value})

    def remove(self, *keys: str):
        self.set_many({}, remove=keys)


@st.cache_resource
def get_store() -> LocalStore:
    logger.info("Using local store at %s", STORE_FILE)
    return LocalStore(STORE_FILE)
