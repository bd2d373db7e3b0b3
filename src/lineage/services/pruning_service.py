"""Pruning service: owns the authoritative graph for an editing session."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from lineage.config.settings import EditorSettings
from lineage.core.editor import StructuralEditor
from lineage.core.graph.models import LineageGraph

logger = logging.getLogger(__name__)


class PruneResult(BaseModel):
    """What a deletion request changed."""

    requested: List[str] = Field(default_factory=list)
    removed_node_ids: List[str] = Field(default_factory=list)
    removed_link_ids: List[str] = Field(default_factory=list)
    created_link_ids: List[str] = Field(default_factory=list)
    ignored_link_ids: List[str] = Field(default_factory=list)
    root_id: Optional[str] = None

    @property
    def changed(self) -> bool:
        return bool(self.removed_node_ids or self.removed_link_ids or self.created_link_ids)

    def describe(self) -> str:
        if not self.changed:
            return "No changes"
        parts = [f"removed {len(self.removed_node_ids)} node(s)", f"{len(self.removed_link_ids)} link(s)"]
        if self.created_link_ids:
            parts.append(f"created {len(self.created_link_ids)} link(s)")
        return ", ".join(parts)


class PruningService:
    """
    Serialises deletions against a single graph.

    The editor mutates the graph in place; holding the lock for the whole
    request means no caller ever observes a half-pruned graph.
    """

    def __init__(self, graph: LineageGraph, settings: Optional[EditorSettings] = None):
        self.graph = graph
        self.settings = settings or EditorSettings()
        self.editor = StructuralEditor(self.settings)
        self._lock = threading.Lock()

    def delete(self, link_id: str) -> PruneResult:
        """Delete one link and report the difference."""
        return self.delete_many([link_id])

    def delete_many(self, link_ids: Iterable[str]) -> PruneResult:
        """Delete links in order; ids already swept away are ignored."""
        requested = list(link_ids)
        with self._lock:
            nodes_before = set(self.graph.nodes)
            links_before = set(self.graph.links)

            ignored: List[str] = []
            for link_id in requested:
                if link_id not in self.graph.links:
                    ignored.append(link_id)
                    continue
                self.editor.delete_link(link_id, self.graph)

            root = self.graph.root
            result = PruneResult(
                requested=requested,
                removed_node_ids=sorted(nodes_before - set(self.graph.nodes)),
                removed_link_ids=sorted(links_before - set(self.graph.links)),
                created_link_ids=sorted(set(self.graph.links) - links_before),
                ignored_link_ids=ignored,
                root_id=root.id if root else None,
            )

        logger.info("Deleted %s: %s", ", ".join(requested) or "nothing", result.describe())
        return result

    def snapshot(self) -> LineageGraph:
        """Deep copy of the current graph, safe to hand to another thread."""
        with self._lock:
            return self.graph.model_copy(deep=True)


__all__ = ["PruneResult", "PruningService"]
