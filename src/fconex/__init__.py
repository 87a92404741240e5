"""
fconex
======

Builds a directed graph from labeled endpoint pairs and splits it into
its connex factors: maximal sets of mutually reachable nodes.

Public API:
- Graph
- GraphBuilder
- ConnexPartitioner
- read_graph / load_graph
"""

from fconex.graph.graph_store import Graph
from fconex.graph.graph_builder import GraphBuilder
from fconex.graph.graph_partition import ConnexPartitioner
from fconex.loaders.edge_list import read_graph, load_graph

__all__ = [
    "Graph",
    "GraphBuilder",
    "ConnexPartitioner",
    "read_graph",
    "load_graph",
]

__version__ = "0.1.0"
