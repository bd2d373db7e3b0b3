from __future__ import annotations

from typing import List, Set

from lineage.core.graph.models import LineageGraph


class GraphValidator:
    def __init__(self, graph: LineageGraph):
        self.graph = graph

    def validate_all(self) -> List[str]:
        """Return list of structural errors in the graph (empty when well-formed)."""
        errors: List[str] = []
        errors.extend(self._validate_root())
        errors.extend(self._validate_link_endpoints())
        errors.extend(self._validate_node_references())
        errors.extend(self._validate_reachability())
        return errors

    def _validate_root(self) -> List[str]:
        """Exactly one node without an inbound link, unless the graph is empty."""
        if not self.graph.nodes:
            return []
        roots = sorted(n.id for n in self.graph.nodes.values() if n.input_link is None)
        if len(roots) == 1:
            return []
        if not roots:
            return ["Graph has no root node (every node has an input link)"]
        return [f"Graph has {len(roots)} root nodes: {', '.join(roots)}"]

    def _validate_link_endpoints(self) -> List[str]:
        """Each link is named by both of its endpoints."""
        errors: List[str] = []
        for link_id, link in self.graph.links.items():
            if link.id != link_id:
                errors.append(f"Link stored under '{link_id}' has id '{link.id}'")
            source = self.graph.nodes.get(link.source_id)
            target = self.graph.nodes.get(link.target_id)
            if source is None:
                errors.append(f"Link {link_id} references unknown source node: {link.source_id}")
            elif link_id not in source.output_links:
                errors.append(f"Node {source.id} does not list link {link_id} in its output links")
            if target is None:
                errors.append(f"Link {link_id} references unknown target node: {link.target_id}")
            elif target.input_link != link_id:
                errors.append(f"Node {target.id} has input link {target.input_link}, expected {link_id}")
        return errors

    def _validate_node_references(self) -> List[str]:
        """Each link id held by a node resolves in the link map."""
        errors: List[str] = []
        for node in self.graph.nodes.values():
            if node.input_link is not None and node.input_link not in self.graph.links:
                errors.append(f"Node {node.id} references unknown input link: {node.input_link}")
            for link_id in node.output_links:
                if link_id not in self.graph.links:
                    errors.append(f"Node {node.id} references unknown output link: {link_id}")
            if len(set(node.output_links)) != len(node.output_links):
                errors.append(f"Node {node.id} lists an output link more than once")
        return errors

    def _validate_reachability(self) -> List[str]:
        """Every node is reachable from the root and no node is visited twice."""
        root = self.graph.root
        if root is None:
            return []
        errors: List[str] = []
        seen: Set[str] = set()
        stack = [root.id]
        while stack:
            node_id = stack.pop()
            if node_id in seen:
                errors.append(f"Node {node_id} is reachable along more than one path (cycle or shared child)")
                continue
            seen.add(node_id)
            node = self.graph.nodes[node_id]
            for link_id in node.output_links:
                link = self.graph.links.get(link_id)
                if link and link.target_id in self.graph.nodes:
                    stack.append(link.target_id)
        unreachable = sorted(set(self.graph.nodes) - seen)
        if unreachable:
            errors.append(f"Nodes not reachable from root {root.id}: {', '.join(unreachable)}")
        return errors


__all__ = ["GraphValidator"]
