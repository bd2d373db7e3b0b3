from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping

import yaml
from pydantic import ValidationError

from lineage.core.graph.errors import GraphError
from lineage.core.graph.models import LineageGraph
from lineage.core.graph.validators import GraphValidator
from lineage.io.loaders.errors import INLINE_SOURCE, LoaderError
from lineage.io.loaders.file_spec import GraphFileSpec

logger = logging.getLogger(__name__)


def _read_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def build_graph(spec: GraphFileSpec, *, source: str = INLINE_SOURCE) -> LineageGraph:
    """Build a graph from a validated file spec and check its structure."""
    graph = LineageGraph()
    try:
        for node_spec in spec.nodes:
            graph.create_node(node_spec.id, node_spec.x, node_spec.y, node_spec.build_payload())
        for link_spec in spec.links:
            graph.create_link(link_spec.source, link_spec.target)
    except GraphError as exc:
        raise LoaderError(source, "Failed to build lineage graph", cause=exc) from exc

    errors = GraphValidator(graph).validate_all()
    if errors:
        raise LoaderError(source, "Lineage graph is not a single rooted tree", cause=GraphError("; ".join(errors)))

    logger.info("Loaded lineage graph with %d node(s), %d link(s)", len(graph.nodes), len(graph.links))
    return graph


def graph_from_mapping(data: Mapping[str, Any], *, source: str = INLINE_SOURCE) -> LineageGraph:
    try:
        spec = GraphFileSpec.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(source, "Invalid lineage graph definition", cause=exc) from exc
    return build_graph(spec, source=source)


def load_graph(path: str) -> LineageGraph:
    """Load a lineage graph from a YAML file."""
    if not os.path.exists(path):
        raise LoaderError(path, "Graph file not found")
    try:
        data = _read_yaml(path)
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Graph file is not valid YAML", cause=exc) from exc
    return graph_from_mapping(data, source=path)


def dump_graph_spec(graph: LineageGraph) -> Dict[str, Any]:
    """Plain data in the file format accepted by ``load_graph``."""
    nodes = []
    for node in graph.nodes.values():
        entry: Dict[str, Any] = {"id": node.id, "x": node.x, "y": node.y}
        if node.payload is not None:
            if node.payload.balance is not None:
                entry["balance"] = node.payload.balance
            if node.payload.snapshot:
                entry["snapshot"] = node.payload.snapshot
        nodes.append(entry)
    links = [{"source": link.source_id, "target": link.target_id} for link in graph.links.values()]
    return {"nodes": nodes, "links": links}


__all__ = ["build_graph", "dump_graph_spec", "graph_from_mapping", "load_graph"]
