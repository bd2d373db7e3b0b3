"""
Lineage graph model.

Components:
- TimelineNode: a point in simulation time with a display row
- TimelineLink: a parent-to-child edge, identified by its endpoint ids
- LineageGraph: node and link arenas plus construction primitives
- GraphValidator: reports structural invariant violations
"""

from lineage.core.graph.errors import (
    CycleError,
    DuplicateLinkError,
    DuplicateNodeError,
    GraphError,
    NodeAlreadyAttachedError,
    UnknownNodeError,
)
from lineage.core.graph.models import (
    LineageGraph,
    NodePayload,
    TimelineLink,
    TimelineNode,
    get_root_node,
    make_link_id,
)
from lineage.core.graph.validators import GraphValidator

__all__ = [
    "CycleError",
    "DuplicateLinkError",
    "DuplicateNodeError",
    "GraphError",
    "GraphValidator",
    "LineageGraph",
    "NodeAlreadyAttachedError",
    "NodePayload",
    "TimelineLink",
    "TimelineNode",
    "UnknownNodeError",
    "get_root_node",
    "make_link_id",
]
