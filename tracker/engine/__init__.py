"""
Store layer on top of the sorted index.
"""

from tracker.engine.store import RecordStore

__all__ = ["RecordStore"]
