from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------
# Graphviz rendering
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class RenderConfig:
    """
    Controls how graphs are handed to Graphviz and shown to the user.
    """

    enabled: bool = True
    dot_program: str = "dot"
    opener_program: str = "xdg-open"
    image_format: str = "png"
    write_dot_source: bool = True
    open_images: bool = True


# ---------------------------------------------------------------------
# Output layout
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class OutputConfig:
    """
    Where the run writes its images and the component dump.
    """

    output_file: str = "output.txt"
    graph_image: str = "graph.png"
    components_dir: str = "f_conex"
    component_image_template: str = "graph-fconex-{index}.png"

    def component_image(self, index: int) -> str:
        return self.component_image_template.format(index=index)


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class FconexConfig:
    """
    Root configuration object for fconex.

    Built once at the edge (see ``fconex.cli.config``) and passed down,
    never read from globals by library code.
    """

    render: RenderConfig = RenderConfig()
    output: OutputConfig = OutputConfig()
    log_level: str = "INFO"
