"""
Abstract base classes and protocols for the record store.
"""

from tracker.interfaces.sorted_index import SortedIndex
from tracker.interfaces.sorted_iterable import SortedIterable

__all__ = ["SortedIndex", "SortedIterable"]
