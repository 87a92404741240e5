"""
Graph subsystem for fconex.

Defines the arena graph and the algorithms built on it:
- incremental construction and linking
- forward/backward neighborhood expansion
- induced subgraphs and connex factor partitioning
"""

from fconex.graph.graph_schema import Arrow, Node, NodeId, NodeSet
from fconex.graph.graph_store import Graph
from fconex.graph.graph_builder import GraphBuilder
from fconex.graph.graph_partition import ConnexPartitioner

__all__ = [
    "Arrow",
    "Node",
    "NodeId",
    "NodeSet",
    "Graph",
    "GraphBuilder",
    "ConnexPartitioner",
]
