"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from rich.table import Table
from rich.tree import Tree

from lineage.core.graph.models import LineageGraph, TimelineNode
from lineage.services.pruning_service import PruneResult


def _node_label(node: TimelineNode, link_id: str | None = None) -> str:
    label = f"[bold]{node.id}[/bold] [dim]t={node.x:g} row={node.y:g}[/dim]"
    if node.payload and node.payload.balance is not None:
        label += f" [green]{node.payload.balance:g}[/green]"
    if link_id:
        label += f" [cyan]via {link_id}[/cyan]"
    return label


def build_lineage_tree(graph: LineageGraph) -> Tree:
    """Render the graph as a rich tree, children listed top row first."""
    root = graph.root
    if root is None:
        return Tree("[dim]<empty graph>[/dim]")

    view = Tree(_node_label(root))
    stack = [(root, view)]
    while stack:
        node, branch = stack.pop()
        children = sorted(graph.get_children(node.id), key=lambda n: (n.y, n.id))
        pending = []
        for child in children:
            pending.append((child, branch.add(_node_label(child, child.input_link))))
        stack.extend(reversed(pending))
    return view


def build_nodes_table(graph: LineageGraph) -> Table:
    table = Table(title="Nodes")
    table.add_column("Node")
    table.add_column("Time", justify="right")
    table.add_column("Row", justify="right")
    table.add_column("Input link")
    table.add_column("Output links")
    table.add_column("Balance", justify="right")

    for node in sorted(graph.nodes.values(), key=lambda n: (n.x, n.y, n.id)):
        balance = node.payload.balance if node.payload else None
        table.add_row(
            node.id,
            f"{node.x:g}",
            f"{node.y:g}",
            node.input_link or "[dim]root[/dim]",
            ", ".join(node.output_links) or "[dim]-[/dim]",
            "" if balance is None else f"{balance:g}",
        )
    return table


def build_result_table(result: PruneResult) -> Table:
    table = Table(title="Changes")
    table.add_column("Change")
    table.add_column("Ids")
    table.add_row("Removed nodes", ", ".join(result.removed_node_ids) or "-")
    table.add_row("Removed links", ", ".join(result.removed_link_ids) or "-")
    if result.created_link_ids:
        table.add_row("Created links", ", ".join(result.created_link_ids))
    return table


def format_statistics(graph: LineageGraph) -> str:
    stats = graph.get_statistics()
    return (
        f"Nodes: {stats['total_nodes']}, Links: {stats['total_links']}, "
        f"Root: {stats['root'] or '-'}, Depth: {stats['depth']}, Leaves: {stats['leaf_nodes']}"
    )


__all__ = ["build_lineage_tree", "build_nodes_table", "build_result_table", "format_statistics"]
