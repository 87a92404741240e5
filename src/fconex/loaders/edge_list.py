from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

from fconex.graph.graph_builder import GraphBuilder
from fconex.graph.graph_store import Graph


def _parse_pairs(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        words = line.split()
        if len(words) < 2:
            raise ValueError(f"line {lineno}: expected '<from> <to>', got {line!r}")
        yield words[0], words[1]


def read_graph(lines: Iterable[str]) -> Graph:
    """
    Build a graph from an edge list, one ``<from> <to>`` pair per line.

    Blank lines are skipped and tokens past the second are ignored.
    """
    graph = Graph()
    GraphBuilder(graph).add_pairs(_parse_pairs(lines))
    return graph


def load_graph(path: Union[str, Path]) -> Graph:
    logger = logging.getLogger("fconex.load_graph")
    t0 = time.perf_counter()
    with open(path, "r", encoding="utf-8") as f:
        graph = read_graph(f)
    logger.info(
        "read %s: nodes=%s arrows=%s in %.3fs",
        path,
        len(graph),
        graph.edge_count(),
        time.perf_counter() - t0,
    )
    return graph
