from __future__ import annotations

import argparse
import logging
import os
import subprocess
import time
from pathlib import Path
from typing import List, Optional, Sequence

from fconex.cli.config import AppConfig
from fconex.config.settings import FconexConfig
from fconex.graph.graph_store import Graph
from fconex.loaders.edge_list import load_graph
from fconex.render.dump import dump_components
from fconex.render.graphviz import has_program, open_image, render_graph


def build_parser(config: FconexConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fconex",
        description="Split a directed graph into its connex factors.",
    )
    parser.add_argument(
        "input_file",
        help="The file to read the graph from",
    )
    parser.add_argument(
        "output_file",
        nargs="?",
        default=config.output.output_file,
        help="The file to write the f_conex to (default: %(default)s)",
    )
    parser.add_argument(
        "-n",
        "--no-graphviz",
        action="store_true",
        help="Do not use graphviz to show graphs",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log partition details",
    )
    return parser


def show_graphs(graph: Graph, components: List[Graph], config: FconexConfig) -> None:
    render = config.render
    output = config.output

    image = render_graph(graph, output.graph_image, render)
    open_image(image, render)

    os.makedirs(output.components_dir, exist_ok=True)
    for i, component in enumerate(components):
        path = Path(output.components_dir) / output.component_image(i)
        open_image(render_graph(component, path, render), render)


def run(args: argparse.Namespace, config: FconexConfig) -> int:
    logger = logging.getLogger("fconex.run")
    start = time.perf_counter()

    try:
        graph = load_graph(args.input_file)
    except OSError as exc:
        logger.error("failed to open %s: %s", args.input_file, exc)
        return 1
    except ValueError as exc:
        logger.error("failed to read %s: %s", args.input_file, exc)
        return 1

    components = graph.f_conex()
    logger.info(
        "found %s connex factors in %.3fs",
        len(components),
        time.perf_counter() - start,
    )

    try:
        with open(args.output_file, "w", encoding="utf-8") as f:
            dump_components(components, f)
    except OSError as exc:
        logger.error("failed to write %s: %s", args.output_file, exc)
        return 1
    logger.info("saved: %s", args.output_file)

    has_dot = has_program(config.render.dot_program)
    if not has_dot:
        logger.warning("Tip: install graphviz to view the graphs")
    elif config.render.enabled and not args.no_graphviz:
        try:
            show_graphs(graph, components, config)
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.error("graphviz rendering failed: %s", exc)
            return 1
    return 0


def log_level(config: FconexConfig, verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(str(config.log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {config.log_level!r}")
    return level


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = AppConfig().fconex
    args = build_parser(config).parse_args(argv)

    logging.basicConfig(
        level=log_level(config, args.verbose),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    return run(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
