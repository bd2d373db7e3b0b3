"""Ingestion: turn graph files, mappings or synthetic specs into lineage graphs."""

from lineage.io.ingest import build_initial_graph
from lineage.io.synthetic import SyntheticSpec, generate_random_tree, generate_sample_tree

__all__ = ["SyntheticSpec", "build_initial_graph", "generate_random_tree", "generate_sample_tree"]
