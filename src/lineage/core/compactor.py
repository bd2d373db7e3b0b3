"""
Chain compaction.

A non-branching node has exactly one inbound and one outbound link. Such a
node adds a point in time but no decision, so compaction replaces
``origin -> node -> destination`` with a direct ``origin -> destination`` link
and drops the node.
"""

from __future__ import annotations

import logging
from typing import List

from lineage.core.discard import discard_link, discard_node
from lineage.core.graph.models import LineageGraph

logger = logging.getLogger(__name__)


def find_non_branching(graph: LineageGraph) -> List[str]:
    """Ids of nodes with exactly one inbound and one outbound link."""
    return [node.id for node in graph.nodes.values() if node.is_non_branching]


def collapse_node(graph: LineageGraph, node_id: str) -> str:
    """
    Replace a non-branching node by a direct link between its neighbours.

    Returns:
        Id of the link created between origin and destination
    """
    node = graph.nodes[node_id]
    inbound = graph.links[node.input_link]
    outbound = graph.links[node.output_links[0]]
    origin = graph.nodes[inbound.source_id]
    destination_id = outbound.target_id

    origin.output_links = [lid for lid in origin.output_links if lid != inbound.id]
    discard_link(graph, outbound.id)
    new_link = graph.create_link(origin.id, destination_id)

    discard_link(graph, inbound.id)
    discard_node(graph, node_id)
    return new_link.id


def simplify_chains(graph: LineageGraph) -> LineageGraph:
    """
    Collapse non-branching nodes until none remain.

    Each pass collects the current batch first and only then mutates, so the
    node map is never modified while it is being scanned.
    """
    collapsed = 0
    passes = 0
    while True:
        batch = find_non_branching(graph)
        if not batch:
            break
        passes += 1
        for node_id in batch:
            node = graph.nodes.get(node_id)
            if node is None or not node.is_non_branching:
                continue
            collapse_node(graph, node_id)
            collapsed += 1

    if collapsed:
        logger.info("Compacted %d non-branching node(s) in %d pass(es)", collapsed, passes)
    return graph


__all__ = ["collapse_node", "find_non_branching", "simplify_chains"]
