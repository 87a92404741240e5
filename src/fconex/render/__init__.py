"""
Text and image renderings of graphs.

Both formats rely on the graph's id-ordered iteration, so output is
stable across runs.
"""

from fconex.render.graphviz import to_dot, has_program, render_graph, open_image
from fconex.render.dump import format_graph, dump_graph, dump_components

__all__ = [
    "to_dot",
    "has_program",
    "render_graph",
    "open_image",
    "format_graph",
    "dump_graph",
    "dump_components",
]
