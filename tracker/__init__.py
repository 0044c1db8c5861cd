"""
AVL-tree backed employee record store.

This package provides an in-memory store keyed by unique integer id with:
- add(record) - O(log N), duplicate ids rejected
- find(id) - O(log N)
- all() - every record in ascending id order
- close() - release every record
"""

from tracker.engine.store import RecordStore
from tracker.models.record import Record

__all__ = ["Record", "RecordStore"]
