from .errors import LoaderError
from .graph_loader import graph_from_mapping, load_graph

__all__ = ["graph_from_mapping", "load_graph", "LoaderError"]
