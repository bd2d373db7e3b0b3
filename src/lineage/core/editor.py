"""
Structural editor: branch deletion with automatic repair.

Deleting a link removes everything downstream of it and leaves a graph that is
still a single rooted tree:

1. prune   - drop the link and its target node, then sweep orphan links
             (links whose source node is gone) together with their targets
             until none remain
2. compact - optionally collapse non-branching chains
3. layout  - re-run the vertical layout from the root
"""

from __future__ import annotations

import logging
from typing import List, Optional

from lineage.config.settings import EditorSettings
from lineage.core.compactor import simplify_chains
from lineage.core.discard import discard_link, discard_node
from lineage.core.graph.models import LineageGraph
from lineage.core.layout import reposition
from lineage.utils.logging import log_calls

logger = logging.getLogger(__name__)


def find_orphan_links(graph: LineageGraph) -> List[str]:
    """Ids of links whose source node is no longer in the node map."""
    return [link.id for link in graph.links.values() if link.source_id not in graph.nodes]


def prune_link_branch(link_id: str, graph: LineageGraph) -> LineageGraph:
    """
    Remove a link and the whole branch below it.

    An unknown ``link_id`` is a silent no-op: the link may already have been
    swept away by an earlier deletion.
    """
    link = graph.links.get(link_id)
    if link is None:
        logger.debug("Link %s not in graph; nothing to prune", link_id)
        return graph

    discard_link(graph, link_id)
    discard_node(graph, link.target_id)
    removed_nodes = 1
    removed_links = 1

    # Fixed point: every pass either removes at least one node or finds nothing.
    while True:
        orphans = find_orphan_links(graph)
        if not orphans:
            break
        for orphan_id in orphans:
            orphan = graph.links.get(orphan_id)
            if orphan is None:
                continue
            discard_link(graph, orphan_id)
            removed_links += 1
            if discard_node(graph, orphan.target_id) is not None:
                removed_nodes += 1

    logger.info("Pruned branch %s: removed %d node(s), %d link(s)", link_id, removed_nodes, removed_links)
    return graph


class StructuralEditor:
    """Applies deletions according to an ``EditorSettings`` policy."""

    def __init__(self, settings: Optional[EditorSettings] = None):
        self.settings = settings or EditorSettings()

    @log_calls(__name__)
    def delete_link(self, link_id: str, graph: LineageGraph) -> LineageGraph:
        """
        Delete a link and repair the graph.

        Args:
            link_id: Id of the link to delete; unknown ids leave the graph unchanged
            graph: Graph to edit in place

        Returns:
            The same graph, pruned, optionally compacted and repositioned
        """
        if link_id not in graph.links:
            logger.debug("Ignoring delete of unknown link %s", link_id)
            return graph

        prune_link_branch(link_id, graph)
        if self.settings.compact_chains:
            simplify_chains(graph)
        if self.settings.reposition:
            reposition(graph)
        return graph


def delete_link(link_id: str, graph: LineageGraph, *, compact: bool = False) -> LineageGraph:
    """Delete ``link_id`` from ``graph`` using a one-off editor."""
    return StructuralEditor(EditorSettings(compact_chains=compact)).delete_link(link_id, graph)


__all__ = ["StructuralEditor", "delete_link", "find_orphan_links", "prune_link_branch"]
