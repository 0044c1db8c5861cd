"""
RecordStore - Main record store API.
"""

import logging

from tracker.interfaces.sorted_index import SortedIndex
from tracker.models.exceptions import StoreClosedError
from tracker.models.record import Record
from tracker.models.sortedcontainers import AVLTree

logger = logging.getLogger(__name__)


class RecordStore:
    """
    In-memory employee record store.

    Provides:
    - add(record): Insert a record with a new id
    - find(id): Retrieve a record by id
    - all(): Every record, sorted by id
    - close(): Release every record

    Records are held in a SortedIndex (an AVLTree unless another index
    is supplied). Nothing is persisted: closing the store discards it.
    """

    def __init__(self, index: SortedIndex | None = None) -> None:
        """
        Initialize the record store.

        Args:
            index: Backing index. Defaults to an empty AVLTree.
        """
        self._index = index if index is not None else AVLTree()
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    def add(self, record: Record) -> bool:
        """
        Insert a record.

        Args:
            record: The record to store.

        Returns:
            True if stored, False if a record with the same id already exists.
        """
        self._check_open()
        return self._index.insert(record)

    def add_employee(self, id: int, name: str, score: float) -> bool:
        """Build a record from raw field values and insert it."""
        return self.add(Record.create(id, name, score))

    def find(self, id: int) -> Record | None:
        """
        Retrieve a record by id.

        Returns:
            The record if found, None otherwise.
        """
        self._check_open()
        return self._index.get(id)

    def all(self) -> list[Record]:
        """Return every record in ascending id order."""
        self._check_open()
        return self._index.records()

    def size(self) -> int:
        self._check_open()
        return self._index.size()

    def __len__(self) -> int:
        return self.size()

    def close(self) -> int:
        """
        Release every record held by the store.

        Safe to call more than once; only the first call releases anything.

        Returns:
            Number of records released.
        """
        if self._closed:
            return 0

        released = self._index.clear()
        self._closed = True
        logger.info("Record store closed, released %d records", released)
        return released

    def _check_open(self) -> None:
        if self._closed:
            raise StoreClosedError("Record store is closed")

    def __enter__(self) -> "RecordStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
