#!/usr/bin/env python3
"""Demo script for WalkTreeLib traversals.

Shows the traversal strategies on a small dependency graph, pruning and
removing during iteration, and listing the leaf values of nested data.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from walktreelib import (
    TraversalConfig,
    TraversalStrategy,
    breadth_first,
    element_path,
    leaf_elements,
    post_order,
    pre_order,
    traverse,
)

DEPENDENCIES = {
    "app": ["web", "db"],
    "web": ["http", "templates"],
    "db": ["driver"],
    "http": ["sockets"],
    "driver": ["sockets"],
}


def show(title, walks):
    print(f"\n=== {title} ===")
    for walk in walks:
        indent = "  " * len(walk.steps)
        print(f"{indent}{walk.to}")


def demo_strategies():
    show("Pre-order", pre_order("app", DEPENDENCIES))
    show("Breadth-first", breadth_first("app", DEPENDENCIES))
    show("Post-order (build order)", post_order("app", DEPENDENCIES))


def demo_prune():
    print("\n=== Pre-order, skipping everything below 'web' ===")
    iterator = iter(pre_order("app", DEPENDENCIES))
    for walk in iterator:
        print(" -> ".join(str(vertex) for vertex in walk.vertices()))
        if walk.to == "web":
            iterator.prune()


def demo_remove():
    graph = {vertex: list(targets) for vertex, targets in DEPENDENCIES.items()}
    iterator = iter(pre_order("app", graph))
    for walk in iterator:
        if walk.to == "templates":
            iterator.remove()
    print("\n=== After removing the 'templates' edge ===")
    print(f"  web -> {graph['web']}")


def demo_config():
    cycle = {"ping": ["pong"], "pong": ["ping"]}
    config = TraversalConfig.bounded(5, TraversalStrategy.PRE_ORDER)
    show("First five walks around a cycle", traverse("ping", cycle, config))


def demo_elements():
    document = {
        "service": "billing",
        "replicas": [{"zone": "a", "weight": 2}, {"zone": "b", "weight": 1}],
        "labels": {"team.name": "payments"},
    }
    print("\n=== Leaf values of a nested document ===")
    for walk in leaf_elements(document):
        print(f"  {element_path(walk)} = {walk.to!r}")


def main():
    demo_strategies()
    demo_prune()
    demo_remove()
    demo_config()
    demo_elements()


if __name__ == "__main__":
    main()
