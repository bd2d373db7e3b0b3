"""
Shared fixtures for lineage graph tests.
"""

import pytest

from lineage.core.graph.models import LineageGraph
from lineage.io.synthetic import generate_sample_tree
from tests.helpers import build_graph


@pytest.fixture
def chain_graph() -> LineageGraph:
    """A -> B -> C -> D, all on row 0."""
    return build_graph(
        [("A", 0, 0), ("B", 1, 0), ("C", 2, 0), ("D", 3, 0)],
        [("A", "B"), ("B", "C"), ("C", "D")],
    )


@pytest.fixture
def star_graph() -> LineageGraph:
    """Root R with children X, Y, Z on rows 0, 1, 2."""
    return build_graph(
        [("R", 0, 0), ("X", 1, 0), ("Y", 1, 1), ("Z", 1, 2)],
        [("R", "X"), ("R", "Y"), ("R", "Z")],
    )


@pytest.fixture
def sample_graph() -> LineageGraph:
    """The nine-node demo tree."""
    return generate_sample_tree()
