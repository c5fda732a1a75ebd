#!/usr/bin/env python
"""Basic usage of OrderedTreeLib.

Builds a small tree, walks it in several orders, steps through it with
the resumable traversal and deletes a node with two children.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import (
    OrderedTree,
    SumCollector,
    collect_values,
    get_tree_stats,
)


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    tree = OrderedTree()
    for value in [5, 3, 8, 1, 4, 7, 9]:
        tree.insert(value)

    print("\nIn-order:   ", list(tree))
    print("Pre-order:  ", collect_values(tree, strategy="pre_order"))
    print("Level order:", collect_values(tree, strategy="bfs"))
    print("Stats:      ", get_tree_stats(tree))

    total = SumCollector()
    tree.visit_in_order(visitor=total)
    print("Sum:        ", total.result)

    print("\nStepping through the tree:")
    tree.restart()
    for _ in range(3):
        print("  next ->", tree.next_in_order().value)

    four = tree.search(4)
    print("\nsuccessor(4) =", tree.successor(four).value)
    print("predecessor(5) =", tree.predecessor(tree.search(5)).value)

    print("\nDeleting 5 (two children):")
    tree.delete(5)
    print("In-order:   ", list(tree))
    print("New root:   ", tree.value)


if __name__ == "__main__":
    main()
