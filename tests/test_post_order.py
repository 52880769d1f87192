"""Unit tests for post-order traversal."""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from walktreelib import (
    CursorState,
    IllegalTraversalStateError,
    PostOrderTraverser,
    post_order,
)
from walktreelib.testing import (
    EMPTY,
    SINGLE_EDGE,
    TREE,
    DAG,
    adjacency_for,
    path_of,
    vertices_of,
)

FULL_DAG = ["G", "D", "E", "B", "G", "D", "C", "A"]


class TestPostOrderOrder(unittest.TestCase):
    """Visit order on the finite reference graphs."""

    def test_empty(self):
        self.assertEqual(vertices_of(post_order("A", adjacency_for(EMPTY))), ["A"])

    def test_single_edge(self):
        self.assertEqual(vertices_of(post_order("A", adjacency_for(SINGLE_EDGE))), ["B", "A"])

    def test_tree(self):
        self.assertEqual(
            vertices_of(post_order("A", adjacency_for(TREE))),
            ["D", "E", "B", "F", "G", "C", "A"]
        )

    def test_dag(self):
        self.assertEqual(vertices_of(post_order("A", adjacency_for(DAG))), FULL_DAG)

    def test_root_walk_is_last(self):
        walks = list(post_order("A", adjacency_for(TREE)))
        self.assertEqual(walks[-1].over, ())
        self.assertEqual(path_of(walks[0]), ["A", "B", "D"])

    def test_children_before_parent(self):
        seen = vertices_of(post_order("A", adjacency_for(TREE)))
        self.assertLess(seen.index("D"), seen.index("B"))
        self.assertLess(seen.index("E"), seen.index("B"))
        self.assertLess(seen.index("B"), seen.index("A"))


class TestPostOrderRemove(unittest.TestCase):
    """remove() deletes the edge into the vertex just produced."""

    def setUp(self):
        self.adjacency = adjacency_for(DAG)
        self.iterator = iter(PostOrderTraverser(self.adjacency).traverse("A"))

    def advance(self, *expected):
        for vertex in expected:
            self.assertTrue(self.iterator.has_next())
            self.assertEqual(next(self.iterator).to, vertex)

    def test_remove_b(self):
        self.advance("G", "D", "E", "B")
        self.iterator.remove()
        self.assertEqual(vertices_of(self.iterator), ["G", "D", "C", "A"])

        # Check that data structure was actually changed
        self.assertEqual(vertices_of(post_order("A", self.adjacency)), ["G", "D", "C", "A"])

    def test_remove_d(self):
        self.advance("G", "D")
        self.iterator.remove()
        self.assertEqual(vertices_of(self.iterator), ["E", "B", "G", "D", "C", "A"])

        self.assertEqual(
            vertices_of(post_order("A", self.adjacency)),
            ["E", "B", "G", "D", "C", "A"]
        )

    def test_remove_e(self):
        self.advance("G", "D", "E")
        self.iterator.remove()
        self.assertEqual(vertices_of(self.iterator), ["B", "G", "D", "C", "A"])

        self.assertEqual(
            vertices_of(post_order("A", self.adjacency)),
            ["G", "D", "B", "G", "D", "C", "A"]
        )

    def test_remove_root_is_illegal(self):
        self.advance(*FULL_DAG)
        with self.assertRaises(IllegalTraversalStateError):
            self.iterator.remove()
        self.assertIs(self.iterator.state, CursorState.ADVANCED)
        self.assertFalse(self.iterator.has_next())


class TestPostOrderPrune(unittest.TestCase):
    """prune() has nothing left to skip in post-order."""

    def test_prune_is_noop(self):
        adjacency = adjacency_for(DAG)
        iterator = iter(PostOrderTraverser(adjacency).traverse("A"))
        for _ in range(4):
            next(iterator)  # G D E B
        iterator.prune()
        self.assertEqual(vertices_of(iterator), ["G", "D", "C", "A"])
        self.assertEqual(vertices_of(post_order("A", adjacency)), FULL_DAG)


if __name__ == "__main__":
    unittest.main()
