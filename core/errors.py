# core/errors.py
from typing import Optional


class UliError(Exception):
    """Base class for errors surfaced to the UI."""


class MalformedRecord(UliError):
    """A stored record failed to parse or is missing required fields."""

    def __init__(self, collection: str, reason: str, index: Optional[int] = None):
        self.collection = collection
        self.reason = reason
        self.index = index
        where = f"{collection}[{index}]" if index is not None else collection
        super().__init__(f"Malformed record in {where}: {reason}")


class InvalidSubmission(UliError):
    pass


class ImportRejected(UliError):
    pass
