"""Removal primitives shared by the structural editor and the chain compactor.

Both helpers keep the node map, the link map and the back-references on the
surviving endpoints consistent, and retire the removed id so it is never
handed out again.
"""

from __future__ import annotations

from typing import Optional

from lineage.core.graph.models import LineageGraph, TimelineLink, TimelineNode


def discard_link(graph: LineageGraph, link_id: str) -> Optional[TimelineLink]:
    link = graph.links.pop(link_id, None)
    if link is None:
        return None
    graph.retired_link_ids.add(link_id)

    source = graph.nodes.get(link.source_id)
    if source is not None and link_id in source.output_links:
        source.output_links = [lid for lid in source.output_links if lid != link_id]

    target = graph.nodes.get(link.target_id)
    if target is not None and target.input_link == link_id:
        target.input_link = None
    return link


def discard_node(graph: LineageGraph, node_id: str) -> Optional[TimelineNode]:
    node = graph.nodes.pop(node_id, None)
    if node is not None:
        graph.retired_node_ids.add(node_id)
    return node


__all__ = ["discard_link", "discard_node"]
