from __future__ import annotations

from typing import Iterable, List, TextIO

from fconex.graph.graph_store import Graph


def format_graph(graph: Graph) -> str:
    """
    One tab-indented ``<from> <to>`` line per arrow, naming node values,
    wrapped in braces.
    """
    lines: List[str] = ["{"]
    for arrow in graph.arrows():
        lines.append(f"\t{graph[arrow.source].value} {graph[arrow.target].value}")
    lines.append("}")
    return "\n".join(lines)


def dump_graph(graph: Graph, stream: TextIO) -> None:
    stream.write(format_graph(graph))


def dump_components(components: Iterable[Graph], stream: TextIO) -> None:
    for component in components:
        dump_graph(component, stream)
        stream.write("\n")
