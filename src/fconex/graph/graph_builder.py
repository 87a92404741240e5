from __future__ import annotations

from typing import Any, Iterable, List, Tuple

from fconex.graph.graph_schema import NodeId
from fconex.graph.graph_store import Graph


class GraphBuilder:
    """
    Grows a graph from labeled endpoint pairs.

    Labels are resolved by value, so repeating a label reuses its node.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def add_pair(self, source: Any, target: Any) -> Tuple[NodeId, NodeId]:
        src = self.graph.new_node_or_get(source)
        dst = self.graph.new_node_or_get(target)
        self.graph.link(src, dst)
        return src, dst

    def add_pairs(self, pairs: Iterable[Tuple[Any, Any]]) -> List[Tuple[NodeId, NodeId]]:
        return [self.add_pair(source, target) for source, target in pairs]
