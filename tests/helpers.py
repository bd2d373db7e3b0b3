"""Graph builders and invariant assertions shared by the test modules."""

from typing import Iterable, Set, Tuple

from lineage.core.graph.models import LineageGraph
from lineage.core.graph.validators import GraphValidator


def build_graph(nodes: Iterable[Tuple[str, float, float]], links: Iterable[Tuple[str, str]]) -> LineageGraph:
    """Build a graph from (id, x, y) node tuples and (source, target) link tuples."""
    graph = LineageGraph()
    for node_id, x, y in nodes:
        graph.create_node(node_id, x, y)
    for source_id, target_id in links:
        graph.create_link(source_id, target_id)
    return graph


def assert_well_formed(graph: LineageGraph) -> None:
    errors = GraphValidator(graph).validate_all()
    assert errors == [], errors


def reachable_ids(graph: LineageGraph) -> Set[str]:
    root = graph.root
    if root is None:
        return set()
    return {node.id for node in graph.iter_subtree(root.id)}


def assert_layout_aligned(graph: LineageGraph) -> None:
    """Every parent sits on the row of its topmost child."""
    for node in graph.nodes.values():
        children = graph.get_children(node.id)
        if children:
            assert node.y == min(child.y for child in children), node.id
