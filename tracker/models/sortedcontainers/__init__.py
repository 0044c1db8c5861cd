"""
Sorted index implementations for the record store.
"""

from tracker.models.sortedcontainers.avl_tree import AVLTree

__all__ = ["AVLTree"]
