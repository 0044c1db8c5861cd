"""
SortedIterable protocol for data structures that enumerate records in key order.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from tracker.models.record import Record


class SortedIterable(ABC):
    """
    Protocol for data structures that support ordered full scans.

    Implementations must support:
    - Full iteration via __iter__
    - Explicit iterator construction via iterator()
    - Materialized snapshots via records()
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Record]:
        """Return an iterator over all records in ascending key order."""
        pass

    @abstractmethod
    def iterator(self) -> Iterator[Record]:
        """
        Return a fresh iterator over all records.

        Returns:
            Iterator yielding records in strictly increasing key order.
        """
        pass

    @abstractmethod
    def records(self) -> list[Record]:
        """
        Return every record as a list.

        Returns:
            List of records sorted by key. Empty if nothing is stored.
        """
        pass
