"""
SortedIndex abstract base class for unique-key record indexes.
"""

from abc import abstractmethod

from tracker.interfaces.sorted_iterable import SortedIterable
from tracker.models.record import Record


class SortedIndex(SortedIterable):
    """
    Abstract base class for sorted record indexes keyed by record id.

    Provides O(log N) insert and lookup. Keys are unique: inserting a
    record whose id is already present is rejected, never merged.
    Inherits ordered iteration from SortedIterable.

    Implementations:
    - AVLTree: height-balanced binary search tree
    """

    @abstractmethod
    def insert(self, record: Record) -> bool:
        """
        Insert a record.

        Args:
            record: The record to store. Its id is the key.

        Returns:
            True if the record was stored, False if the id already exists.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def get(self, key: int) -> Record | None:
        """
        Retrieve the record for a given id.

        Args:
            key: The id to look up.

        Returns:
            The record if found, None otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: int) -> bool:
        """
        Check if an id exists.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored records.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def clear(self) -> int:
        """
        Release every stored record and leave the index empty.

        Returns:
            The number of records released.
        """
        pass
