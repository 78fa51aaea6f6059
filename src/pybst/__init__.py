"""
pybst: Generic binary search tree with range queries

Small teaching example of an unbalanced BST with parent links.
"""

__version__ = "0.1.0"

from .tree import BinarySearchTree, Tree, natural_order
from .methods import (
    EmptyRangeWarning,
    find_elements_between,
    find_elements_between_fast,
    find_max,
    find_min,
    find_next_smallest,
    inorder_successor,
)

__all__ = [
    "BinarySearchTree",
    "Tree",
    "natural_order",
    "EmptyRangeWarning",
    "find_max",
    "find_min",
    "inorder_successor",
    "find_next_smallest",
    "find_elements_between",
    "find_elements_between_fast",
]
