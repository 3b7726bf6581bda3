#!/usr/bin/env python3
"""
Binary search tree example.

This example demonstrates:
- Ordered insertion (duplicates are dropped)
- Finding the smallest and largest values
- Height versus the complete-tree node bound
- Mirroring a tree with invert()
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treekit import BinaryTree, UnsupportedOperationError, get_tree_stats


def main():
    """Build a small binary search tree and print facts about it."""
    # Show the library's debug messages (e.g. dropped duplicates)
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    values = [int(arg) for arg in sys.argv[1:]] or [5, 3, 7, 2, 4, 6, 3]

    tree = BinaryTree(values[0])
    for value in values[1:]:
        tree.insert(value)

    print("Tree:")
    print(tree)
    print("-" * 50)

    stats = get_tree_stats(tree)
    print(f"Smallest value:  {stats['min']}")
    print(f"Largest value:   {stats['max']}")
    print(f"Height:          {stats['height']}")
    print(f"Max nodes:       {stats['max_nodes']}")

    try:
        tree.add(42)
    except UnsupportedOperationError as e:
        print(f"\nadd() refused: {e}")

    tree.invert()
    print("\nInverted:")
    print(tree)
    return 0


if __name__ == "__main__":
    sys.exit(main())
