"""
Vertical layout for lineage graphs.

Each parent is drawn on the same row as its topmost child. Rows are recomputed
from scratch after every structural edit by walking the tree from the root:
children are ordered by their current row (ties broken by node id), then
shifted together so the first child lines up with its parent.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from lineage.core.graph.models import LineageGraph, TimelineNode

logger = logging.getLogger(__name__)


def sort_children(children: List[TimelineNode]) -> List[TimelineNode]:
    """Order siblings top to bottom; equal rows fall back to ascending id."""
    return sorted(children, key=lambda node: (node.y, node.id))


def position_tree(root: Optional[TimelineNode], graph: LineageGraph) -> LineageGraph:
    """
    Align every parent with its topmost child, starting at ``root``.

    Only ``y`` is written; the link structure is untouched. A ``None`` root
    (empty graph) leaves the graph as it is.

    Args:
        root: Node to start from, usually ``graph.root``
        graph: Graph whose node rows are updated in place

    Returns:
        The same graph
    """
    if root is None:
        return graph

    # Pre-order walk: a node's children are shifted before their own children are visited.
    stack = [root]
    while stack:
        parent = stack.pop()
        children = graph.get_children(parent.id)
        if not children:
            continue

        ordered = sort_children(children)
        shift = ordered[0].y - parent.y
        if shift:
            logger.debug("Shifting %d children of %s by %g", len(ordered), parent.id, -shift)
            for child in ordered:
                child.y -= shift

        stack.extend(reversed(ordered))

    return graph


def reposition(graph: LineageGraph) -> LineageGraph:
    """Locate the root and lay out the whole tree from it."""
    return position_tree(graph.root, graph)


__all__ = ["position_tree", "reposition", "sort_children"]
