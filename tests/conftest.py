"""
Shared pytest fixtures for record store tests.
"""

import io

import pytest

from console import Menu, register_commands
from tracker.engine.store import RecordStore
from tracker.models.record import Record
from tracker.models.sortedcontainers import AVLTree


@pytest.fixture
def tree():
    """Provide a fresh AVLTree instance."""
    return AVLTree()


@pytest.fixture
def store():
    """Provide a RecordStore that is closed after the test."""
    with RecordStore() as s:
        yield s


@pytest.fixture
def sample_records():
    """Provide sample employee records."""
    return [
        Record.create(30, "Carol", 91.5),
        Record.create(20, "Bob", 72.25),
        Record.create(40, "Dave", 65.0),
        Record.create(10, "Alice", 88.0),
    ]


@pytest.fixture
def run_menu():
    """Run the interactive menu over scripted input and return (store, output)."""

    def _run(script: str, store: RecordStore | None = None) -> tuple[RecordStore, str]:
        store = store if store is not None else RecordStore()
        stdout = io.StringIO()
        menu = Menu(io.StringIO(script), stdout)
        register_commands(menu, store)
        menu.run()
        return store, stdout.getvalue()

    return _run
