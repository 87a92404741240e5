from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Set

NodeId = int
NodeSet = Set[NodeId]


@dataclass(frozen=True)
class Arrow:
    """
    Directed link between two node ids.

    The same arrow is recorded on both endpoints: in the outgoing list of
    ``source`` and in the incoming list of ``target``.
    """

    source: NodeId
    target: NodeId


@dataclass
class Node:
    """
    Vertex of the arena graph.

    The value is treated as an immutable payload and is shared, never
    copied, between a graph and the subgraphs derived from it.
    """

    id: NodeId
    value: Any
    outgoing: List[Arrow] = field(default_factory=list)
    incoming: List[Arrow] = field(default_factory=list)

    def link(self, other: "Node") -> "Node":
        arrow = Arrow(source=self.id, target=other.id)
        self.outgoing.append(arrow)
        other.incoming.append(arrow)
        return self

    def clone(self) -> "Node":
        return Node(
            id=self.id,
            value=self.value,
            outgoing=list(self.outgoing),
            incoming=list(self.incoming),
        )
