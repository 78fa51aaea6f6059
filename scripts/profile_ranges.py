"""
Profiling script comparing the two range query implementations.

Builds random trees and profiles the pruned scan against the
successor walk, after printing the small demonstration trees.
"""

import cProfile
import pstats
from pstats import SortKey
import time
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
from pybst import (
    BinarySearchTree,
    find_elements_between,
    find_elements_between_fast,
    find_max,
    inorder_successor,
)


def create_tree(n_values, low=-100_000, high=100_000):
    """Create a tree from n random integers."""
    np.random.seed(42)
    values = np.random.randint(low, high, size=n_values)

    tree = BinarySearchTree(int(values[0]))
    for v in values[1:]:
        tree.insert(int(v))
    return tree


def create_queries(n_queries, width, low=-100_000, high=100_000):
    """Create n random [min, max] bounds of the given width."""
    np.random.seed(7)
    starts = np.random.randint(low, high - width, size=n_queries)
    return [(int(s), int(s) + width) for s in starts]


def demo():
    """Print results for the example trees."""
    tree = BinarySearchTree(5)
    for v in (3, 7, 2, 4, 6, 8):
        tree.insert(v)
    print(f"In-order: {tree}")
    print(f"Max: {find_max(tree)}")
    print(f"Successor of 3: {inorder_successor(tree.contains(3))!r}")
    print(f"Successor of 8: {inorder_successor(tree.contains(8))!r}")

    tree = BinarySearchTree(5)
    for v in (1, -10, 4, 26, 14, 34, 9, 17, 7, 11, 15, 25):
        tree.insert(v)
    print(f"Between 13 and 25: {sorted(find_elements_between(tree, 13, 25))}")
    print(f"Between 13 and 25 (fast): {sorted(find_elements_between_fast(tree, 13, 25))}")


def profile_query(name, query, tree, bounds):
    """Time and profile one range query over all bounds."""
    with cProfile.Profile() as profiler:
        start = time.perf_counter()
        for low, high in bounds:
            query(tree, low, high)
        elapsed = time.perf_counter() - start

    print(f"\n--- {name}: {len(bounds)} queries in {elapsed:.3f}s")
    pstats.Stats(profiler).sort_stats(SortKey.TOTAL).print_stats(5)


def main():
    """Run the demo and all profiling scenarios."""
    print("pybst Range Query Profiling")
    print("=" * 60)
    demo()

    tree = create_tree(20_000)
    narrow = create_queries(2_000, 100)
    wide = create_queries(200, 20_000)

    for low, high in narrow[:50] + wide[:50]:
        assert find_elements_between(tree, low, high) == find_elements_between_fast(tree, low, high)

    scenarios = [
        ("Pruned scan, narrow ranges", find_elements_between, narrow),
        ("Successor walk, narrow ranges", find_elements_between_fast, narrow),
        ("Pruned scan, wide ranges", find_elements_between, wide),
        ("Successor walk, wide ranges", find_elements_between_fast, wide),
    ]

    for name, query, bounds in scenarios:
        profile_query(name, query, tree, bounds)


if __name__ == "__main__":
    main()
