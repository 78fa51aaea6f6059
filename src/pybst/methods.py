"""
Query algorithms over binary search trees.

None of these functions mutate the tree. Values are ordered with the tree's own
comparator. Two range queries are provided: a pruned scan and a
successor walk seeded by a floor search. Both return the same set.
"""

from __future__ import annotations

from typing import Optional, TypeVar
import warnings

from .tree import BinarySearchTree

T = TypeVar("T")


class EmptyRangeWarning(UserWarning):
    """Warning about a range query whose lower bound exceeds its upper bound."""
    pass


def _check_range(t: BinarySearchTree[T], low: T, high: T) -> bool:
    if t.compare(low, high) > 0:
        warnings.warn(
            f"Range lower bound {low!r} exceeds upper bound {high!r}; "
            "returning no elements.",
            EmptyRangeWarning,
            stacklevel=3,
        )
        return False
    return True


def find_max(t: BinarySearchTree[T]) -> T:
    """
    Find the largest value in a subtree.

    Args:
        t: Subtree root

    Returns:
        Value of the right-most node
    """
    while t.right is not None:
        t = t.right
    return t.data


def find_min(t: BinarySearchTree[T]) -> BinarySearchTree[T]:
    """Return the left-most node of a subtree."""
    while t.left is not None:
        t = t.left
    return t


def inorder_successor(t: BinarySearchTree[T]) -> Optional[BinarySearchTree[T]]:
    """
    Find the node that follows t in sorted order.

    Args:
        t: Node to start from

    Returns:
        Next node in order, or None if t holds the maximum
    """
    if t.right is not None:
        return find_min(t.right)

    # Climb until we arrive from a left child
    node = t
    parent = node.parent
    while parent is not None and parent.left is not node:
        node = parent
        parent = node.parent
    return parent


def find_next_smallest(t: BinarySearchTree[T], data: T) -> BinarySearchTree[T]:
    """
    Floor search: find the node with the largest value not exceeding data.

    The first equal node met on the way down is returned, so any duplicates of
    it come after it in order. When every value is greater than data the
    descent ends at the subtree minimum, which is returned instead.

    Args:
        t: Subtree root
        data: Target value

    Returns:
        Floor node, or the minimum node when no floor exists
    """
    floor = None
    node = t
    while True:
        c = t.compare(node.data, data)
        if c == 0:
            return node
        if c < 0:
            floor = node
            nxt = node.right
        else:
            nxt = node.left
        if nxt is None:
            return floor if floor is not None else node
        node = nxt


def find_elements_between(t: BinarySearchTree[T], low: T, high: T) -> set[T]:
    """
    Collect values in [low, high] with a pruned depth-first scan.

    Args:
        t: Subtree root
        low: Inclusive lower bound
        high: Inclusive upper bound

    Returns:
        Set of values within the bounds
    """
    vals: set[T] = set()
    if _check_range(t, low, high):
        _find_elements_between(t, low, high, vals)
    return vals


def _find_elements_between(t: BinarySearchTree[T], low: T, high: T, vals: set[T]) -> None:
    compare = t.compare
    stack = [t]
    while stack:
        node = stack.pop()
        curr = node.data
        if compare(curr, low) < 0:
            # Nothing on the left can reach low
            children = (node.right,)
        elif compare(curr, high) > 0:
            # Nothing on the right can stay under high
            children = (node.left,)
        else:
            vals.add(curr)
            children = (node.left, node.right)
        stack.extend(c for c in children if c is not None)


def find_elements_between_fast(t: BinarySearchTree[T], low: T, high: T) -> set[T]:
    """
    Collect values in [low, high] by walking successors from the floor of low.

    Args:
        t: Subtree root
        low: Inclusive lower bound
        high: Inclusive upper bound

    Returns:
        Set of values within the bounds
    """
    vals: set[T] = set()
    if not _check_range(t, low, high):
        return vals

    compare = t.compare
    # Successors past the right-most node belong to t's ancestors
    last = t
    while last.right is not None:
        last = last.right

    node = find_next_smallest(t, low)
    while node is not None and compare(node.data, high) <= 0:
        if compare(node.data, low) >= 0:
            vals.add(node.data)
        if node is last:
            break
        node = inorder_successor(node)
    return vals
