"""Errors raised by the lineage graph model."""

from __future__ import annotations


class GraphError(ValueError):
    """Base class for structural graph failures."""


class DuplicateLinkError(GraphError):
    """A link between the two endpoints already exists (or existed)."""

    def __init__(self, link_id: str, *, retired: bool = False):
        self.link_id = link_id
        self.retired = retired
        if retired:
            message = f"Link id '{link_id}' was already used in this graph and cannot be reused"
        else:
            message = f"Duplicate link: {link_id}"
        super().__init__(message)


class DuplicateNodeError(GraphError):
    """A node with the same id is live in the graph, or was deleted from it."""

    def __init__(self, node_id: str, *, retired: bool = False):
        self.node_id = node_id
        self.retired = retired
        if retired:
            message = f"Node id '{node_id}' was already used in this graph and cannot be reused"
        else:
            message = f"Duplicate node: {node_id}"
        super().__init__(message)


class NodeAlreadyAttachedError(GraphError):
    """The target node already hangs under another link."""

    def __init__(self, node_id: str, input_link: str):
        self.node_id = node_id
        self.input_link = input_link
        super().__init__(f"Node {node_id} is already attached by link {input_link}")


class CycleError(GraphError):
    """Linking would make a node its own ancestor."""

    def __init__(self, source_id: str, target_id: str):
        self.source_id = source_id
        self.target_id = target_id
        super().__init__(f"Cannot link {source_id} -> {target_id}: {target_id} is an ancestor of {source_id}")


class UnknownNodeError(GraphError, KeyError):
    """Referenced node id is not present in the node map."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Unknown node: {node_id}")

    def __str__(self) -> str:
        return self.args[0]


__all__ = [
    "CycleError",
    "DuplicateLinkError",
    "DuplicateNodeError",
    "GraphError",
    "NodeAlreadyAttachedError",
    "UnknownNodeError",
]
