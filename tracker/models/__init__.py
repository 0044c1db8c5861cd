"""
Data models for the record store.
"""

from tracker.models.exceptions import DuplicateKeyError, StoreClosedError
from tracker.models.record import Record

__all__ = [
    "DuplicateKeyError",
    "Record",
    "StoreClosedError",
]
