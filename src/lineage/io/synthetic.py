"""
Synthetic lineage trees for demos and tests.

The sample tree mirrors a small simulation run: a single timeline forks at
t=7, and each fork splits again into final outcomes at t=30.
"""

from __future__ import annotations

import random
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from lineage.core.graph.models import LineageGraph, NodePayload, TimelineNode
from lineage.core.layout import reposition

# (node id, x, y)
SAMPLE_NODES = [
    ("0_0", 0, 0),
    ("7_0", 7, 0),
    ("17_0", 17, 0),
    ("25_0", 25, 2),
    ("30_0", 30, 0),
    ("30_1", 30, 1),
    ("30_2", 30, 2),
    ("30_3", 30, 3),
    ("30_4", 30, 4),
]

SAMPLE_LINKS = [
    ("0_0", "7_0"),
    ("7_0", "17_0"),
    ("7_0", "25_0"),
    ("17_0", "30_0"),
    ("17_0", "30_1"),
    ("25_0", "30_2"),
    ("25_0", "30_3"),
    ("25_0", "30_4"),
]


class SyntheticSpec(BaseModel):
    """Shape of a randomly generated lineage tree."""

    depth: int = Field(default=3, ge=0, le=12)
    max_children: int = Field(default=3, ge=1, le=8)
    min_children: int = Field(default=1, ge=0)
    time_step: float = Field(default=5.0, gt=0)
    initial_balance: float = 100.0
    seed: Optional[int] = None


def generate_sample_tree() -> LineageGraph:
    """Build the nine-node demo tree with its hand-placed rows."""
    graph = LineageGraph()
    for node_id, x, y in SAMPLE_NODES:
        graph.create_node(node_id, x, y)
    for source_id, target_id in SAMPLE_LINKS:
        graph.create_link(source_id, target_id)
    return graph


def generate_random_tree(spec: SyntheticSpec) -> LineageGraph:
    """
    Generate a random lineage tree.

    Node ids follow the ``<time>_<index>`` convention of the sample tree, with
    the index counting nodes created at that time so ids never collide. Each
    child's balance is a random walk from its parent's balance. Rows are laid
    out in creation order and then normalised with the layout engine.
    """
    rng = random.Random(spec.seed)
    graph = LineageGraph()
    per_time_counter: Dict[float, int] = {}
    next_row = 0

    def _new_node(level: int, balance: float) -> TimelineNode:
        nonlocal next_row
        x = level * spec.time_step
        index = per_time_counter.get(x, 0)
        per_time_counter[x] = index + 1
        node = graph.create_node(
            f"{x:g}_{index}",
            x,
            next_row,
            NodePayload(balance=round(balance, 2), snapshot={"level": level}),
        )
        next_row += 1
        return node

    root = _new_node(0, spec.initial_balance)
    frontier: List[TimelineNode] = [root]
    for level in range(1, spec.depth + 1):
        next_frontier: List[TimelineNode] = []
        for parent in frontier:
            low = min(spec.min_children, spec.max_children)
            for _ in range(rng.randint(low, spec.max_children)):
                parent_balance = parent.payload.balance if parent.payload else spec.initial_balance
                child = _new_node(level, parent_balance * rng.uniform(0.8, 1.2))
                graph.create_link(parent.id, child.id)
                next_frontier.append(child)
        frontier = next_frontier
        if not frontier:
            break

    return reposition(graph)


__all__ = [
    "SAMPLE_LINKS",
    "SAMPLE_NODES",
    "SyntheticSpec",
    "generate_random_tree",
    "generate_sample_tree",
]
