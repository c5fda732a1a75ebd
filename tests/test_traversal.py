"""Tests for recursive, resumable and strategy-based traversal."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import (
    OrderedTree,
    InOrderCursor,
    OrderedTreeAdapter,
    InOrderTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
    ValueCollector,
    NodeCollector,
    PathCollector,
    CustomCollector,
    CallbackVisitor,
    CountingVisitor,
    SumCollector,
    MaxCollector,
    DataRequirement,
    build_tree,
    collect_tree_data,
)


@pytest.fixture
def tree():
    return build_tree([5, 3, 8, 1, 4, 7, 9])


def values(nodes):
    return [node.value for node in nodes]


# Recursive in-order visit

def test_visit_in_order_with_constructor_visitor():
    collector = ValueCollector()
    tree = OrderedTree(visitor=collector).insert_all([5, 3, 8, 1, 4, 7, 9])

    tree.visit_in_order()

    assert collector.results == [1, 3, 4, 5, 7, 8, 9]


def test_visit_in_order_without_visitor_is_noop(tree):
    tree.visit_in_order()


def test_visit_in_order_explicit_subtree(tree):
    seen = []
    tree.visit_in_order(tree.search(8), visitor=CallbackVisitor(seen.append))
    assert values(seen) == [7, 8, 9]


def test_visit_in_order_empty_tree():
    counter = CountingVisitor()
    OrderedTree().visit_in_order(visitor=counter)
    assert counter.count == 0


def test_visit_overridden_in_subclass():
    class RecordingTree(OrderedTree):
        def __init__(self, value=None):
            super().__init__(value)
            self.seen = []

        def visit(self, node):
            self.seen.append(node.value)

    tree = RecordingTree()
    tree.insert_all([2, 1, 3])
    # New nodes are created with the subclass
    assert isinstance(tree.search(3), RecordingTree)

    tree.visit_in_order()

    assert tree.seen == [1, 2, 3]


def test_aggregate_visitors(tree):
    total = SumCollector()
    largest = MaxCollector()
    tree.visit_in_order(visitor=total)
    tree.visit_in_order(visitor=largest)
    assert total.result == 37
    assert largest.result == 9


def test_aggregate_with_key():
    tree = build_tree(["bb", "a", "cccc"])
    lengths = SumCollector(key=len)
    tree.visit_in_order(visitor=lengths)
    assert lengths.result == 7


def test_collector_reset(tree):
    collector = NodeCollector()
    tree.visit_in_order(visitor=collector)
    assert len(collector.results) == 7
    collector.reset()
    assert collector.results == []


def test_path_collector(tree):
    collector = PathCollector()
    tree.visit_in_order(tree.search(3), visitor=collector)
    assert collector.results == [[5, 3, 1], [5, 3], [5, 3, 4]]


def test_custom_collector_gets_depth(tree):
    collector = CustomCollector(lambda node, depth: (node.value, depth))
    tree.visit_in_order(visitor=collector)
    assert collector.results == [(1, 2), (3, 1), (4, 2), (5, 0), (7, 2), (8, 1), (9, 2)]


def test_custom_collector_depth_on_subtree(tree):
    subtree = tree.search(3)

    visited = CustomCollector(lambda node, depth: (node.value, depth))
    tree.visit_in_order(subtree, visitor=visited)
    assert visited.results == [(1, 2), (3, 1), (4, 2)]

    planned = collect_tree_data(
        subtree,
        data_requirement=DataRequirement.CUSTOM,
        custom_collector=CustomCollector(lambda node, depth: (node.value, depth)),
    )
    assert [data for _, data in planned] == [(1, 1), (3, 0), (4, 1)]


# Resumable traversal embedded in the tree

def test_next_in_order_sequence(tree):
    tree.restart()
    produced = []
    node = tree.next_in_order()
    while node is not None:
        produced.append(node.value)
        node = tree.next_in_order()
    assert produced == [1, 3, 4, 5, 7, 8, 9]
    # Stays exhausted until restarted
    assert tree.next_in_order() is None


def test_next_in_order_starts_without_explicit_restart(tree):
    assert tree.next_in_order().value == 1


def test_next_in_order_resumes_between_calls(tree):
    tree.restart()
    assert tree.next_in_order().value == 1
    assert tree.next_in_order().value == 3
    # Unrelated work in between does not disturb the sequence
    assert tree.search(9) is not None
    assert tree.next_in_order().value == 4


def test_restart_starts_over(tree):
    tree.restart()
    for _ in range(4):
        tree.next_in_order()
    tree.restart()
    assert tree.next_in_order().value == 1


def test_next_in_order_on_empty_tree():
    tree = OrderedTree()
    tree.restart()
    assert tree.next_in_order() is None


def test_next_in_order_matches_recursive(tree):
    collector = NodeCollector()
    tree.visit_in_order(visitor=collector)

    tree.restart()
    iterative = []
    while True:
        node = tree.next_in_order()
        if node is None:
            break
        iterative.append(node)

    assert iterative == collector.results
    assert all(a is b for a, b in zip(iterative, collector.results))


# Independent cursors

def test_cursors_are_independent(tree):
    first = tree.cursor()
    second = tree.cursor()
    first.next_node()
    first.next_node()
    assert second.next_node().value == 1
    assert first.next_node().value == 4


def test_cursor_iteration_and_reset(tree):
    cursor = InOrderCursor(tree)
    assert values(cursor) == [1, 3, 4, 5, 7, 8, 9]
    assert cursor.exhausted
    assert cursor.next_node() is None
    cursor.reset()
    assert not cursor.exhausted
    assert cursor.next_node().value == 1


def test_cursor_over_subtree(tree):
    assert values(tree.search(3).cursor()) == [1, 3, 4]


def test_cursor_on_empty_tree():
    cursor = OrderedTree().cursor()
    assert cursor.exhausted
    assert list(cursor) == []


def test_iter_in_order_yields_nodes(tree):
    nodes = list(tree.iter_in_order())
    assert nodes[0] is tree.minimum()
    assert nodes[-1] is tree.maximum()


def test_embedded_cursor_unaffected_by_iteration(tree):
    tree.restart()
    tree.next_in_order()
    assert list(tree) == [1, 3, 4, 5, 7, 8, 9]
    assert tree.next_in_order().value == 3


@pytest.mark.slow
def test_degenerate_tree_iterates_without_recursion():
    # Sorted input builds a linked list deeper than the recursion limit.
    count = sys.getrecursionlimit() + 500
    tree = build_tree(range(count))
    assert tree.height() == count - 1
    assert len(tree) == count
    assert tree.to_list() == list(range(count))
    assert tree.successor(tree.search(count - 2)).value == count - 1


# Traversal strategies

def test_traversal_orders(tree):
    adapter = OrderedTreeAdapter()
    cases = {
        InOrderTraverser: [1, 3, 4, 5, 7, 8, 9],
        DepthFirstPreOrderTraverser: [5, 3, 1, 4, 8, 7, 9],
        DepthFirstPostOrderTraverser: [1, 4, 3, 7, 9, 8, 5],
        BreadthFirstTraverser: [5, 3, 8, 1, 4, 7, 9],
    }
    for traverser_class, expected in cases.items():
        produced = [node.value for node, _ in traverser_class(adapter).traverse(tree)]
        assert produced == expected, traverser_class.__name__


def test_traverser_depths(tree):
    traverser = BreadthFirstTraverser(OrderedTreeAdapter())
    depths = {node.value: depth for node, depth in traverser.traverse(tree)}
    assert depths == {5: 0, 3: 1, 8: 1, 1: 2, 4: 2, 7: 2, 9: 2}


def test_in_order_depth_limits(tree):
    traverser = InOrderTraverser(OrderedTreeAdapter())
    limited = [node.value for node, _ in traverser.traverse(tree, max_depth=1)]
    assert limited == [3, 5, 8]
    ring = [node.value for node, _ in traverser.traverse(tree, min_depth=1, max_depth=1)]
    assert ring == [3, 8]


def test_traversers_skip_empty_tree():
    adapter = OrderedTreeAdapter()
    for name in ["in_order", "pre_order", "post_order", "bfs"]:
        assert list(create_traverser(name, adapter).traverse(OrderedTree())) == []


def test_create_traverser_aliases():
    adapter = OrderedTreeAdapter()
    assert isinstance(create_traverser("InOrder", adapter), InOrderTraverser)
    assert isinstance(create_traverser("dfs_pre", adapter), DepthFirstPreOrderTraverser)
    assert isinstance(create_traverser("level", adapter), BreadthFirstTraverser)


def test_create_traverser_unknown():
    with pytest.raises(ValueError, match="Unknown traversal strategy"):
        create_traverser("zigzag", OrderedTreeAdapter())
