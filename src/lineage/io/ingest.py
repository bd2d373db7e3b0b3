from __future__ import annotations

"""Single entry point for building the initial lineage graph."""

from pathlib import Path
from typing import Any, Mapping, Union

from lineage.core.graph.models import LineageGraph
from lineage.io.loaders.graph_loader import graph_from_mapping, load_graph
from lineage.io.synthetic import SyntheticSpec, generate_random_tree

GraphSource = Union[SyntheticSpec, str, Path, Mapping[str, Any]]


def build_initial_graph(source: GraphSource) -> LineageGraph:
    """
    Build a graph from a synthetic spec, a YAML file path, or a mapping.

    Raises:
        LoaderError: If the file or mapping does not describe a single rooted tree
        TypeError: For any other kind of source
    """
    if isinstance(source, SyntheticSpec):
        return generate_random_tree(source)
    if isinstance(source, (str, Path)):
        return load_graph(str(source))
    if isinstance(source, Mapping):
        return graph_from_mapping(source)
    raise TypeError(f"Unsupported graph source: {type(source).__name__}")


__all__ = ["GraphSource", "build_initial_graph"]
