"""Lineage tree pruning engine.

Core API:
- build_initial_graph: graph from a YAML file, a mapping or a synthetic spec
- delete_link: prune a branch, repair and re-layout the tree
- simplify_chains: collapse non-branching chains
- position_tree / get_root_node: layout and root lookup
"""

from lineage.config.settings import EditorSettings
from lineage.core.compactor import simplify_chains
from lineage.core.editor import StructuralEditor, delete_link, prune_link_branch
from lineage.core.graph import (
    DuplicateLinkError,
    GraphError,
    GraphValidator,
    LineageGraph,
    TimelineLink,
    TimelineNode,
    get_root_node,
)
from lineage.core.layout import position_tree
from lineage.io import SyntheticSpec, build_initial_graph

__all__ = [
    "DuplicateLinkError",
    "EditorSettings",
    "GraphError",
    "GraphValidator",
    "LineageGraph",
    "StructuralEditor",
    "SyntheticSpec",
    "TimelineLink",
    "TimelineNode",
    "build_initial_graph",
    "delete_link",
    "get_root_node",
    "position_tree",
    "prune_link_branch",
    "simplify_chains",
]
