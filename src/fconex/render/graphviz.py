from __future__ import annotations

import logging
import shutil
import subprocess
import time
from pathlib import Path
from typing import List, Union

from fconex.config.settings import RenderConfig
from fconex.graph.graph_store import Graph


def _escape(label: str) -> str:
    return label.replace("\\", "\\\\").replace('"', '\\"')


def to_dot(graph: Graph) -> str:
    """
    DOT description of ``graph``: node statements, each followed by the
    node's outgoing edges, in ascending id order.
    """
    lines: List[str] = ["digraph {"]
    for node in graph.iter_sorted():
        lines.append(f'{node.id} [label="{_escape(str(node.value))}"];')
        for arrow in node.outgoing:
            lines.append(f"{arrow.source} -> {arrow.target};")
    lines.append("}")
    return "\n".join(lines)


def has_program(name: str) -> bool:
    return shutil.which(name) is not None


def render_graph(
    graph: Graph,
    path: Union[str, Path],
    config: RenderConfig,
) -> Path:
    logger = logging.getLogger("fconex.render")
    path = Path(path)
    source = to_dot(graph)

    if config.write_dot_source:
        Path(f"{path}.dot").write_text(source, encoding="utf-8")

    t0 = time.perf_counter()
    subprocess.run(
        [config.dot_program, f"-T{config.image_format}", "-o", str(path)],
        input=source,
        text=True,
        check=True,
    )
    logger.info(
        "rendered %s (nodes=%s) in %.3fs",
        path,
        len(graph),
        time.perf_counter() - t0,
    )
    return path


def open_image(path: Union[str, Path], config: RenderConfig) -> None:
    if not config.open_images:
        return
    try:
        subprocess.Popen([config.opener_program, str(path)])
    except OSError as exc:
        logging.getLogger("fconex.render").warning(
            "could not open %s with %s: %s",
            path,
            config.opener_program,
            exc,
        )
