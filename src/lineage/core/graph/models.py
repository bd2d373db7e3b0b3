"""
Lineage graph data models.

A lineage graph is a rooted tree of simulation timelines:
- TimelineNode: a point in simulation time (x) drawn on a display row (y)
- TimelineLink: a directed edge from a parent node to a child node
- LineageGraph: the node and link maps, kept consistent as one pair

Nodes and links live in two arenas addressed by string ids. A link stores the
ids of its endpoints; a node stores the ids of its inbound link (at most one)
and its outbound links (ordered). Whether a link is an "orphan" is therefore a
plain id-presence check against the node map.

Tree Structure (sample):
    0_0
    └── 7_0
        ├── 17_0
        │   ├── 30_0
        │   └── 30_1
        └── 25_0
            ├── 30_2
            ├── 30_3
            └── 30_4
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Set

from pydantic import BaseModel, Field

from lineage.core.graph.errors import (
    CycleError,
    DuplicateLinkError,
    DuplicateNodeError,
    NodeAlreadyAttachedError,
    UnknownNodeError,
)

LINK_ID_SEPARATOR = "-"


def make_link_id(source_id: str, target_id: str) -> str:
    """Derive a link id from its endpoint node ids."""
    return f"{source_id}{LINK_ID_SEPARATOR}{target_id}"


class NodePayload(BaseModel):
    """
    Domain data carried by a node.

    Only the ingestion side interprets it; the editing and layout algorithms
    never look inside.
    """

    balance: Optional[float] = None
    snapshot: Dict[str, Any] = Field(default_factory=dict)


class TimelineNode(BaseModel):
    """A node in the lineage graph."""

    id: str
    x: float
    y: float
    payload: Optional[NodePayload] = None
    input_link: Optional[str] = None
    output_links: List[str] = Field(default_factory=list)

    @property
    def is_root(self) -> bool:
        """Check if this node has no inbound link."""
        return self.input_link is None

    @property
    def is_leaf(self) -> bool:
        """Check if this node has no outbound links."""
        return len(self.output_links) == 0

    @property
    def is_non_branching(self) -> bool:
        """Exactly one inbound and exactly one outbound link."""
        return self.input_link is not None and len(self.output_links) == 1

    def describe(self) -> str:
        """Human-readable description of this node."""
        text = f"[{self.id}] t={self.x:g} row={self.y:g}"
        if self.payload and self.payload.balance is not None:
            text += f" balance={self.payload.balance:g}"
        return text


class TimelineLink(BaseModel):
    """A directed link from ``source_id`` (node1) to ``target_id`` (node2)."""

    id: str
    source_id: str
    target_id: str


class LineageGraph(BaseModel):
    """
    Node map and link map of a lineage tree.

    Every operation that touches one map keeps the other consistent in the
    same step. Ids removed from the graph are remembered so they are never
    handed out again.
    """

    nodes: Dict[str, TimelineNode] = Field(default_factory=dict)
    links: Dict[str, TimelineLink] = Field(default_factory=dict)

    # Ids that were deleted from this graph instance (excluded from serialization)
    retired_node_ids: Set[str] = Field(default_factory=set, exclude=True)
    retired_link_ids: Set[str] = Field(default_factory=set, exclude=True)

    # =========================================================================
    # Construction
    # =========================================================================

    def create_node(
        self,
        node_id: str,
        x: float,
        y: float,
        payload: Optional[NodePayload] = None,
    ) -> TimelineNode:
        """Create a detached node and add it to the node map."""
        node_id = str(node_id)
        if node_id in self.nodes:
            raise DuplicateNodeError(node_id)
        if node_id in self.retired_node_ids:
            raise DuplicateNodeError(node_id, retired=True)

        node = TimelineNode(id=node_id, x=x, y=y, payload=payload)
        self.nodes[node_id] = node
        return node

    def create_link(self, source_id: str, target_id: str) -> TimelineLink:
        """
        Attach ``target_id`` under ``source_id``.

        Appends the new link id to the source's output links and makes it the
        target's input link. This is the only way links are attached.

        Raises:
            UnknownNodeError: If either endpoint is not in the node map
            DuplicateLinkError: If the derived link id is live or was used before
            NodeAlreadyAttachedError: If the target already has an input link
            CycleError: If the target is the source itself or one of its ancestors
        """
        for node_id in (source_id, target_id):
            if node_id not in self.nodes:
                raise UnknownNodeError(node_id)

        link_id = make_link_id(source_id, target_id)
        if link_id in self.links:
            raise DuplicateLinkError(link_id)
        if link_id in self.retired_link_ids:
            raise DuplicateLinkError(link_id, retired=True)

        target = self.nodes[target_id]
        if target.input_link is not None:
            raise NodeAlreadyAttachedError(target_id, target.input_link)
        if self._is_ancestor_or_self(target_id, source_id):
            raise CycleError(source_id, target_id)

        link = TimelineLink(id=link_id, source_id=source_id, target_id=target_id)
        self.nodes[source_id].output_links.append(link_id)
        target.input_link = link_id
        self.links[link_id] = link
        return link

    def _is_ancestor_or_self(self, candidate_id: str, node_id: str) -> bool:
        """Walk inbound links up from ``node_id`` looking for ``candidate_id``."""
        seen: Set[str] = set()
        current: Optional[str] = node_id
        while current is not None and current not in seen:
            if current == candidate_id:
                return True
            seen.add(current)
            parent = self.get_parent(current)
            current = parent.id if parent else None
        return False

    # =========================================================================
    # Access
    # =========================================================================

    @property
    def root(self) -> Optional[TimelineNode]:
        """The node without an inbound link, or None for an empty graph."""
        for node in self.nodes.values():
            if node.input_link is None:
                return node
        return None

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def get_node(self, node_id: str) -> Optional[TimelineNode]:
        """Get a node by ID."""
        return self.nodes.get(node_id)

    def get_link(self, link_id: str) -> Optional[TimelineLink]:
        """Get a link by ID."""
        return self.links.get(link_id)

    def get_children(self, node_id: str) -> List[TimelineNode]:
        """Get the target nodes of a node's outbound links, in link order."""
        node = self.nodes.get(node_id)
        if not node:
            return []
        children: List[TimelineNode] = []
        for link_id in node.output_links:
            link = self.links.get(link_id)
            if link and link.target_id in self.nodes:
                children.append(self.nodes[link.target_id])
        return children

    def get_parent(self, node_id: str) -> Optional[TimelineNode]:
        """Get the source node of a node's inbound link."""
        node = self.nodes.get(node_id)
        if not node or node.input_link is None:
            return None
        link = self.links.get(node.input_link)
        if not link:
            return None
        return self.nodes.get(link.source_id)

    def iter_subtree(self, node_id: str) -> List[TimelineNode]:
        """Nodes reachable from ``node_id`` (inclusive), in pre-order."""
        if node_id not in self.nodes:
            return []
        visited: List[TimelineNode] = []
        stack = [self.nodes[node_id]]
        while stack:
            node = stack.pop()
            visited.append(node)
            stack.extend(reversed(self.get_children(node.id)))
        return visited

    # =========================================================================
    # Statistics and Serialization
    # =========================================================================

    def get_depth(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        root = self.root
        if root is None:
            return 0
        depth = 0
        stack = [(root.id, 1)]
        while stack:
            node_id, level = stack.pop()
            depth = max(depth, level)
            stack.extend((child.id, level + 1) for child in self.get_children(node_id))
        return depth

    def get_statistics(self) -> Dict[str, Any]:
        """Summary counts for display."""
        root = self.root
        return {
            "total_nodes": len(self.nodes),
            "total_links": len(self.links),
            "root": root.id if root else None,
            "depth": self.get_depth(),
            "leaf_nodes": sum(1 for n in self.nodes.values() if n.is_leaf),
            "branch_points": sum(1 for n in self.nodes.values() if len(n.output_links) > 1),
        }

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the graph to plain data for a renderer.

        Links are emitted with both endpoint ids and coordinates so a renderer
        can draw them without resolving nodes itself.
        """
        links: Dict[str, Dict[str, Any]] = {}
        for link_id, link in self.links.items():
            source = self.nodes[link.source_id]
            target = self.nodes[link.target_id]
            links[link_id] = {
                "source": link.source_id,
                "target": link.target_id,
                "points": [source.x, source.y, target.x, target.y],
            }
        return {
            "nodes": {node_id: node.model_dump() for node_id, node in self.nodes.items()},
            "links": links,
        }


def get_root_node(graph: LineageGraph) -> Optional[TimelineNode]:
    """Return the unique node with no inbound link, or None if the graph is empty."""
    return graph.root


__all__ = [
    "LINK_ID_SEPARATOR",
    "LineageGraph",
    "NodePayload",
    "TimelineLink",
    "TimelineNode",
    "get_root_node",
    "make_link_id",
]
