"""
Custom exceptions for the record store.
"""


class DuplicateKeyError(Exception):
    """
    Raised when a record is inserted with an id that is already stored.

    The index is left unchanged. This is a recoverable condition: the
    new record is discarded and the caller decides how to report it.
    """

    def __init__(self, key: int):
        """
        Initialize duplicate key error.

        Args:
            key: The id that already exists.
        """
        self.key = key
        super().__init__(f"Record ID {key} already exists")


class StoreClosedError(Exception):
    """Raised when a RecordStore is used after close()."""
