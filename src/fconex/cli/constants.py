DEFAULTS = {
    # Root logger level for the command line run
    "LOG_LEVEL": "INFO",
    # Render graphs with Graphviz when it is installed
    "GRAPHVIZ_ENABLED": True,
    # Graphviz layout program
    "DOT_PROGRAM": "dot",
    # Program used to show rendered images
    "OPENER_PROGRAM": "xdg-open",
    # Graphviz output format (-T flag)
    "IMAGE_FORMAT": "png",
    # Keep the DOT source next to each image
    "WRITE_DOT_SOURCE": True,
    # Launch the opener on every rendered image
    "OPEN_IMAGES": True,
    # Image of the whole input graph
    "GRAPH_IMAGE": "graph.png",
    # Directory holding one image per component
    "COMPONENTS_DIR": "f_conex",
    # File name of component images, formatted with the component index
    "COMPONENT_IMAGE_TEMPLATE": "graph-fconex-{index}.png",
    # Component dump written when no output file is given
    "OUTPUT_FILE": "output.txt",
}
