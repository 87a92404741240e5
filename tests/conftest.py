from __future__ import annotations

import pytest

from fconex.graph.graph_builder import GraphBuilder
from fconex.graph.graph_store import Graph


def _build(pairs) -> Graph:
    graph = Graph()
    GraphBuilder(graph).add_pairs(pairs)
    return graph


@pytest.fixture()
def make_graph():
    return _build


@pytest.fixture()
def chain() -> Graph:
    return _build([("A", "B"), ("B", "C"), ("C", "D")])


@pytest.fixture()
def cycle() -> Graph:
    return _build([("A", "B"), ("B", "C"), ("C", "A")])


@pytest.fixture()
def cycle_with_pendant() -> Graph:
    return _build([("A", "B"), ("B", "A"), ("A", "C")])


@pytest.fixture()
def mixed() -> Graph:
    # two cycles joined one way, a self loop, and a sink hanging off b
    return _build(
        [
            ("a", "b"),
            ("b", "c"),
            ("c", "a"),
            ("c", "d"),
            ("d", "e"),
            ("e", "d"),
            ("e", "f"),
            ("f", "f"),
            ("b", "g"),
        ]
    )
