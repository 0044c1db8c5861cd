"""
AVL Tree implementation for unique-key record storage.

Height-balanced, so search and insert are O(log N) in the worst case.
The node-level functions take a root and return the new root; AVLTree
holds the root handle and replaces it after every insert.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from tracker.interfaces.sorted_index import SortedIndex
from tracker.models.exceptions import DuplicateKeyError
from tracker.models.record import Record

logger = logging.getLogger(__name__)


@dataclass
class Node:
    """Node in the AVL Tree. Owns its children exclusively."""

    record: Record
    left: "Node | None" = None
    right: "Node | None" = None
    height: int = 1

    @property
    def key(self) -> int:
        return self.record.id


def height(node: Node | None) -> int:
    """Height of a subtree. An absent subtree has height 0."""
    if node is None:
        return 0
    return node.height


def balance_factor(node: Node | None) -> int:
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: Node) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def rotate_right(node: Node) -> Node:
    """
    Right rotation around node.

    The left child becomes the local root and its right subtree moves
    across to become node's left subtree. Only the heights of node and
    the new local root change.

    Returns:
        The new local root.
    """
    pivot = node.left
    moved = pivot.right

    pivot.right = node
    node.left = moved

    _update_height(node)
    _update_height(pivot)
    return pivot


def rotate_left(node: Node) -> Node:
    """Left rotation around node. Mirror of rotate_right."""
    pivot = node.right
    moved = pivot.left

    pivot.left = node
    node.right = moved

    _update_height(node)
    _update_height(pivot)
    return pivot


def insert(root: Node | None, record: Record) -> Node:
    """
    Insert a record below root and rebalance on the way back up.

    Child links are only reassigned after the recursive call returns, so
    a duplicate found on the descent leaves every node untouched.

    Args:
        root: Root of the subtree, or None for an empty subtree.
        record: The record to insert.

    Returns:
        The root of the subtree after insertion and rebalancing.

    Raises:
        DuplicateKeyError: If a node with record.id already exists.
    """
    if root is None:
        return Node(record=record)

    key = record.id
    if key < root.key:
        root.left = insert(root.left, record)
    elif key > root.key:
        root.right = insert(root.right, record)
    else:
        raise DuplicateKeyError(key)

    _update_height(root)
    balance = balance_factor(root)

    # Left Left
    if balance > 1 and key < root.left.key:
        return rotate_right(root)

    # Right Right
    if balance < -1 and key > root.right.key:
        return rotate_left(root)

    # Left Right
    if balance > 1 and key > root.left.key:
        root.left = rotate_left(root.left)
        return rotate_right(root)

    # Right Left
    if balance < -1 and key < root.right.key:
        root.right = rotate_right(root.right)
        return rotate_left(root)

    return root


def search(root: Node | None, key: int) -> Node | None:
    """Find the node holding key. O(height), no side effects."""
    current = root
    while current is not None:
        if key > current.key:
            current = current.right
        elif key < current.key:
            current = current.left
        else:
            return current
    return None


def sorted_traversal(root: Node | None) -> list[Record]:
    """Return every record below root in ascending key order."""
    return list(_InOrderIterator(root))


def release(root: Node | None) -> int:
    """
    Release a subtree in post-order, children before their parent.

    Every child link is cleared so no node stays reachable from another.
    Must be called at most once per subtree.

    Returns:
        Number of nodes released.
    """
    if root is None:
        return 0

    released = release(root.left) + release(root.right)
    root.left = None
    root.right = None
    return released + 1


class AVLTree(SortedIndex):
    """
    AVL Tree implementation of SortedIndex.

    Properties maintained after every insert:
    1. BST order: left keys < node key < right keys
    2. Keys are unique
    3. Every node's child heights differ by at most 1
    """

    def __init__(self) -> None:
        self._root: Node | None = None
        self._size: int = 0

    @property
    def root(self) -> Node | None:
        return self._root

    def insert(self, record: Record) -> bool:
        """Insert a record, rejecting duplicate ids. O(log N)"""
        try:
            self._root = insert(self._root, record)
        except DuplicateKeyError as e:
            logger.debug("Record ID %d already exists. Skipping insertion.", e.key)
            return False

        self._size += 1
        logger.debug("Inserted record %d (size=%d, height=%d)", record.id, self._size, self.height())
        return True

    def get(self, key: int) -> Record | None:
        """Retrieve record by id. O(log N)"""
        node = search(self._root, key)
        return node.record if node else None

    def has(self, key: int) -> bool:
        return search(self._root, key) is not None

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        return height(self._root)

    def clear(self) -> int:
        released = release(self._root)
        self._root = None
        self._size = 0
        logger.debug("Released %d nodes", released)
        return released

    def records(self) -> list[Record]:
        return sorted_traversal(self._root)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Record]:
        return self.iterator()

    def iterator(self) -> Iterator[Record]:
        return _InOrderIterator(self._root)


class _InOrderIterator(Iterator[Record]):
    """Explicit-stack in-order iterator over an AVL Tree."""

    def __init__(self, root: Node | None) -> None:
        self._stack: list[Node] = []
        self._push_left_path(root)

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Push right subtree's left path
        self._push_left_path(node.right)

        return node.record

    def _push_left_path(self, node: Node | None) -> None:
        while node:
            self._stack.append(node)
            node = node.left
