"""
Binary search tree node with parent links.

Every node is also the handle of the subtree it roots. A tree starts as a single
root node built from a seed value and grows only through ``insert``; nodes are
never removed. Equal values are kept (the tree is a multiset) and are routed to
the right subtree.

The tree is not thread-safe. Callers that share one across threads must provide
their own locking. Children only hold weak references to their parents, so
the root must be kept alive for as long as any node of the tree is used.
"""

from __future__ import annotations

from typing import Callable, Generic, Optional, Protocol, TypeVar, runtime_checkable
import weakref

T = TypeVar("T")


def natural_order(a, b) -> int:
    """Three-way comparison using the values' own ordering."""
    return (a > b) - (a < b)


@runtime_checkable
class Tree(Protocol[T]):
    """Interface for trees supporting insertion and search."""

    def insert(self, data: T) -> None:
        """Insert a value into the tree."""
        ...

    def contains(self, data: T) -> Optional["Tree[T]"]:
        """Find the node holding a value, or None."""
        ...


class BinarySearchTree(Generic[T]):
    """
    Unbalanced binary search tree node.

    Values less than ``data`` live in the left subtree, values greater than or
    equal to it live in the right subtree.
    """

    def __init__(self, data: T, compare: Optional[Callable[[T, T], float]] = None):
        """
        Initialize a root node.

        Args:
            data: Value held by this node
            compare: Comparison function returning negative, zero, or positive.
                Defaults to natural ordering.
        """
        if compare is None:
            compare = natural_order
        elif not callable(compare):
            raise TypeError(f"compare must be callable, got {type(compare).__name__}")

        self._data = data
        self._compare = compare
        self._left: Optional[BinarySearchTree[T]] = None
        self._right: Optional[BinarySearchTree[T]] = None
        self._parent: Optional[weakref.ref[BinarySearchTree[T]]] = None

    @property
    def data(self) -> T:
        return self._data

    @property
    def compare(self) -> Callable[[T, T], float]:
        return self._compare

    @property
    def left(self) -> Optional[BinarySearchTree[T]]:
        return self._left

    @property
    def right(self) -> Optional[BinarySearchTree[T]]:
        return self._right

    @property
    def parent(self) -> Optional[BinarySearchTree[T]]:
        """
        Parent node, or None for the root.

        Raises:
            ReferenceError: If the parent was garbage collected because nothing
                holds the tree root any more
        """
        if self._parent is None:
            return None
        parent = self._parent()
        if parent is None:
            raise ReferenceError("parent node no longer exists; keep a reference to the tree root")
        return parent

    def is_leaf(self) -> bool:
        return self._left is None and self._right is None

    def is_root(self) -> bool:
        return self.parent is None

    def _new_child(self, data: T) -> BinarySearchTree[T]:
        child = BinarySearchTree(data, self._compare)
        child._parent = weakref.ref(self)
        return child

    def insert(self, data: T) -> None:
        """
        Insert a value as a new leaf.

        Args:
            data: Value to insert. Equal values go to the right.
        """
        node = self
        while True:
            if node._compare(data, node._data) < 0:
                if node._left is None:
                    node._left = node._new_child(data)
                    return
                node = node._left
            else:
                if node._right is None:
                    node._right = node._new_child(data)
                    return
                node = node._right

    def contains(self, data: T) -> Optional[BinarySearchTree[T]]:
        """
        Find the node holding a value.

        Args:
            data: Value to search for

        Returns:
            The first node on the search path comparing equal, or None
        """
        node = self
        while node is not None:
            c = node._compare(data, node._data)
            if c == 0:
                return node
            node = node._left if c < 0 else node._right
        return None

    def count(self) -> int:
        """Return the number of nodes in this subtree."""
        n = 0
        stack = [self]
        while stack:
            node = stack.pop()
            n += 1
            if node._left is not None:
                stack.append(node._left)
            if node._right is not None:
                stack.append(node._right)
        return n

    def is_bst(self) -> bool:
        """
        Verify ordering and parent links hold for this subtree (for testing).

        Returns:
            True if every node respects the ordering and link invariants
        """
        # low is inclusive, high is exclusive
        stack = [(self, None, None)]
        while stack:
            node, low, high = stack.pop()
            if low is not None and node._compare(node._data, low._data) < 0:
                return False
            if high is not None and node._compare(node._data, high._data) >= 0:
                return False
            for child, lo, hi in ((node._left, low, node), (node._right, node, high)):
                if child is None:
                    continue
                if child._parent is None or child._parent() is not node:
                    return False
                if child._compare is not node._compare:
                    return False
                stack.append((child, lo, hi))
        return True

    def to_string(self, selector: Callable[[T], str] = str) -> str:
        """
        Render the subtree as a comma-separated in-order listing.

        Args:
            selector: Function to convert a value to string

        Returns:
            String such as ``"2, 3, 4"``
        """
        parts = []
        stack = []
        node = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node._left
            node = stack.pop()
            parts.append(selector(node._data))
            node = node._right
        return ", ".join(parts)

    def __str__(self) -> str:
        return self.to_string(str)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self._data!r})"
