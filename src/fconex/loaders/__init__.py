from fconex.loaders.edge_list import read_graph, load_graph

__all__ = ["read_graph", "load_graph"]
