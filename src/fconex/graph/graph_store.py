from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

import networkx as nx

from fconex.graph.graph_partition import ConnexPartitioner
from fconex.graph.graph_schema import Arrow, Node, NodeId, NodeSet


class Graph:
    """
    Arena-backed directed graph.

    Nodes live in an id-indexed mapping and refer to each other only
    through integer ids. Ids are allocated sequentially and never reused,
    so the mapping is always kept in ascending id order.
    """

    def __init__(self) -> None:
        self._nodes: Dict[NodeId, Node] = {}
        self._next_id: NodeId = 0

    # -------------------- Nodes --------------------

    def new_node(self, value: Any) -> NodeId:
        node_id = self._next_id
        self._nodes[node_id] = Node(id=node_id, value=value)
        self._next_id += 1
        return node_id

    def new_nodes(self, values: Iterable[Any]) -> List[NodeId]:
        return [self.new_node(value) for value in values]

    def new_node_or_get(self, value: Any) -> NodeId:
        """
        Return the id of the node holding ``value``, inserting it if absent.
        """
        found = self.find(value)
        if found is not None:
            return found
        return self.new_node(value)

    def find(self, value: Any) -> Optional[NodeId]:
        for node in self._nodes.values():
            if node.value == value:
                return node.id
        return None

    def __getitem__(self, node_id: NodeId) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise KeyError(f"unknown node id: {node_id}") from None

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    # -------------------- Arrows --------------------

    def link(self, source: NodeId, target: NodeId) -> None:
        # Resolve both ends first so a bad id never leaves half an arrow behind.
        src = self[source]
        dst = self[target]
        src.link(dst)

    def arrows(self) -> Iterator[Arrow]:
        for node in self.iter_sorted():
            yield from node.outgoing

    def edge_count(self) -> int:
        return sum(len(node.outgoing) for node in self._nodes.values())

    # -------------------- Iteration --------------------

    def node_ids(self) -> List[NodeId]:
        return sorted(self._nodes)

    def iter_sorted(self) -> Iterator[Node]:
        for node_id in sorted(self._nodes):
            yield self._nodes[node_id]

    def walk(self, visitor: Callable[[Node], None]) -> None:
        """
        Pre-order depth-first walk along outgoing arrows.

        Starts from the lowest id and only reaches what that node can reach.
        """
        if not self._nodes:
            return

        visited: NodeSet = set()
        stack: List[NodeId] = [min(self._nodes)]
        while stack:
            node_id = stack.pop()
            if node_id in visited:
                continue
            node = self[node_id]
            visitor(node)
            visited.add(node_id)
            stack.extend(arrow.target for arrow in reversed(node.outgoing))

    # -------------------- Neighborhoods --------------------

    def nplus(self, nodes: Iterable[NodeId]) -> NodeSet:
        return {arrow.target for n in nodes for arrow in self[n].outgoing}

    def nminus(self, nodes: Iterable[NodeId]) -> NodeSet:
        return {arrow.source for n in nodes for arrow in self[n].incoming}

    def forward_closure(self, nodes: Iterable[NodeId]) -> NodeSet:
        return self._closure(nodes, self.nplus)

    def backward_closure(self, nodes: Iterable[NodeId]) -> NodeSet:
        return self._closure(nodes, self.nminus)

    @staticmethod
    def _closure(
        nodes: Iterable[NodeId],
        step: Callable[[NodeSet], NodeSet],
    ) -> NodeSet:
        reached: NodeSet = set(nodes)
        while True:
            diff = step(reached) - reached
            if not diff:
                return reached
            reached |= diff

    # -------------------- Subgraphs --------------------

    def subgraph_of(self, nodes: Iterable[NodeId]) -> "Graph":
        """
        Induced subgraph over ``nodes``.

        Values are shared with this graph; arrow lists are copied and every
        arrow with an endpoint outside ``nodes`` is dropped.
        """
        keep: NodeSet = set(nodes)
        g = Graph()
        for node_id in sorted(keep):
            node = self[node_id].clone()
            node.outgoing = [a for a in node.outgoing if a.target in keep]
            node.incoming = [a for a in node.incoming if a.source in keep]
            g._nodes[node_id] = node
        g._next_id = max(keep) + 1 if keep else 0
        return g

    def f_conex(self) -> List["Graph"]:
        return ConnexPartitioner(self).partition()

    # -------------------- Export --------------------

    def to_networkx(self) -> nx.MultiDiGraph:
        # parallel arrows stay distinct edges
        g = nx.MultiDiGraph()
        for node in self.iter_sorted():
            g.add_node(node.id, value=node.value)
        for arrow in self.arrows():
            g.add_edge(arrow.source, arrow.target)
        return g
