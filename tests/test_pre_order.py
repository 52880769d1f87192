"""Unit tests for pre-order traversal.

Uses the reference graphs from walktreelib.testing. Every mutating test
works on a private copy made by adjacency_for().
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from walktreelib import PreOrderTraverser, pre_order
from walktreelib.testing import (
    EMPTY,
    SINGLE_EDGE,
    LOOP,
    CYCLE,
    TREE,
    DAG,
    adjacency_for,
    first_vertices,
    path_of,
    vertices_of,
)

FULL_DAG = ["A", "B", "D", "G", "E", "C", "D", "G"]


class TestPreOrderOrder(unittest.TestCase):
    """Visit order on the reference graphs."""

    def test_empty(self):
        self.assertEqual(vertices_of(pre_order("A", adjacency_for(EMPTY))), ["A"])

    def test_single_edge(self):
        self.assertEqual(vertices_of(pre_order("A", adjacency_for(SINGLE_EDGE))), ["A", "B"])

    def test_loop_is_lazy_and_infinite(self):
        traversal = pre_order("A", adjacency_for(LOOP))
        self.assertEqual(first_vertices(traversal, 4), ["A", "A", "A", "A"])
        iterator = iter(traversal)
        for _ in range(50):
            next(iterator)
        self.assertTrue(iterator.has_next())

    def test_cycle(self):
        traversal = pre_order("A", adjacency_for(CYCLE))
        self.assertEqual(first_vertices(traversal, 5), ["A", "B", "C", "A", "B"])

    def test_tree(self):
        self.assertEqual(
            vertices_of(pre_order("A", adjacency_for(TREE))),
            ["A", "B", "D", "E", "C", "F", "G"]
        )

    def test_dag(self):
        self.assertEqual(vertices_of(pre_order("A", adjacency_for(DAG))), FULL_DAG)

    def test_walks_carry_full_path(self):
        walks = list(pre_order("A", adjacency_for(TREE)))

        root = walks[0]
        self.assertEqual(root.from_, "A")
        self.assertEqual(root.to, "A")
        self.assertEqual(root.over, ())

        self.assertEqual([path_of(walk) for walk in walks], [
            ["A"],
            ["A", "B"],
            ["A", "B", "D"],
            ["A", "B", "E"],
            ["A", "C"],
            ["A", "C", "F"],
            ["A", "C", "G"],
        ])
        for walk in walks:
            self.assertEqual(walk.from_, "A")

    def test_plain_dict_adjacency(self):
        graph = {"A": ["B"], "B": ["C"]}
        self.assertEqual(vertices_of(pre_order("A", graph)), ["A", "B", "C"])


class TestPreOrderRemove(unittest.TestCase):
    """remove() deletes the edge just followed from the adjacency."""

    def setUp(self):
        self.adjacency = adjacency_for(DAG)
        self.iterator = iter(PreOrderTraverser(self.adjacency).traverse("A"))

    def advance(self, *expected):
        for vertex in expected:
            self.assertTrue(self.iterator.has_next())
            self.assertEqual(next(self.iterator).to, vertex)

    def test_remove_b(self):
        self.advance("A", "B")
        self.iterator.remove()
        self.assertEqual(vertices_of(self.iterator), ["C", "D", "G"])

        # Check that data structure was actually changed
        self.assertEqual(vertices_of(pre_order("A", self.adjacency)), ["A", "C", "D", "G"])

    def test_remove_d(self):
        self.advance("A", "B", "D")
        self.iterator.remove()
        self.assertEqual(vertices_of(self.iterator), ["E", "C", "D", "G"])

        self.assertEqual(
            vertices_of(pre_order("A", self.adjacency)),
            ["A", "B", "E", "C", "D", "G"]
        )

    def test_remove_e(self):
        self.advance("A", "B", "D", "G", "E")
        self.iterator.remove()
        self.assertEqual(vertices_of(self.iterator), ["C", "D", "G"])

        self.assertEqual(
            vertices_of(pre_order("A", self.adjacency)),
            ["A", "B", "D", "G", "C", "D", "G"]
        )

    def test_remove_after_lookahead(self):
        self.advance("A", "B", "D", "G", "E")
        self.assertTrue(self.iterator.has_next())
        self.iterator.remove()
        self.assertEqual(vertices_of(self.iterator), ["C", "D", "G"])

    def test_remove_inside_cycle_keeps_outer_siblings(self):
        graph = {"A": ["B", "C"], "B": ["A"]}
        iterator = iter(pre_order("A", graph))
        self.assertEqual(
            [path_of(next(iterator)) for _ in range(4)],
            [["A"], ["A", "B"], ["A", "B", "A"], ["A", "B", "A", "B"]]
        )
        iterator.remove()
        self.assertEqual(graph, {"A": ["C"], "B": ["A"]})

        # The outer visit of A still reaches C
        self.assertEqual(
            [path_of(walk) for walk in iterator],
            [["A", "B", "A", "C"], ["A", "C"]]
        )

    def test_remove_mutates_plain_dict(self):
        graph = {"A": ["B", "C"], "B": ["D"]}
        iterator = iter(pre_order("A", graph))
        next(iterator)
        next(iterator)
        iterator.remove()
        self.assertEqual(graph, {"A": ["C"], "B": ["D"]})


class TestPreOrderPrune(unittest.TestCase):
    """prune() skips a subtree for this iteration only."""

    def setUp(self):
        self.adjacency = adjacency_for(DAG)
        self.iterator = iter(PreOrderTraverser(self.adjacency).traverse("A"))

    def advance(self, *expected):
        for vertex in expected:
            self.assertEqual(next(self.iterator).to, vertex)

    def assert_unchanged(self):
        self.assertEqual(vertices_of(pre_order("A", self.adjacency)), FULL_DAG)

    def test_prune_root(self):
        self.advance("A")
        self.iterator.prune()
        self.assertFalse(self.iterator.has_next())
        self.assertEqual(vertices_of(self.iterator), [])
        self.assert_unchanged()

    def test_prune_b(self):
        self.advance("A", "B")
        self.iterator.prune()
        self.assertEqual(vertices_of(self.iterator), ["C", "D", "G"])
        self.assert_unchanged()

    def test_prune_d(self):
        self.advance("A", "B", "D")
        self.iterator.prune()
        self.assertEqual(vertices_of(self.iterator), ["E", "C", "D", "G"])
        self.assert_unchanged()

    def test_prune_e(self):
        self.advance("A", "B", "D", "G", "E")
        self.iterator.prune()
        self.assertEqual(vertices_of(self.iterator), ["C", "D", "G"])
        self.assert_unchanged()

    def test_prune_after_lookahead(self):
        self.advance("A", "B")
        self.assertTrue(self.iterator.has_next())
        self.iterator.prune()
        self.assertEqual(vertices_of(self.iterator), ["C", "D", "G"])

    def test_prune_self_loop(self):
        iterator = iter(pre_order("A", adjacency_for(LOOP)))
        next(iterator)
        next(iterator)
        iterator.prune()
        self.assertFalse(iterator.has_next())


if __name__ == "__main__":
    unittest.main()
