"""Service Layer: editing sessions over a lineage graph."""

from __future__ import annotations

from .pruning_service import PruneResult, PruningService

__all__ = [
    "PruneResult",
    "PruningService",
]
