"""
Tests for lineage graph data models.

Tests cover:
- TimelineNode
- LineageGraph construction primitives (create_node, create_link)
- Derived queries (root, children, parent, statistics)
"""

import pytest

from lineage.core.editor import prune_link_branch
from lineage.core.graph.errors import (
    CycleError,
    DuplicateLinkError,
    DuplicateNodeError,
    GraphError,
    NodeAlreadyAttachedError,
    UnknownNodeError,
)
from lineage.core.graph.models import LineageGraph, NodePayload, get_root_node, make_link_id
from tests.helpers import assert_well_formed


class TestTimelineNode:
    """Tests for TimelineNode model."""

    def test_node_creation_defaults(self):
        """A new node is detached: no input link, no output links."""
        graph = LineageGraph()
        node = graph.create_node("0_0", 0, 0)

        assert node.id == "0_0"
        assert node.input_link is None
        assert node.output_links == []
        assert node.payload is None
        assert node.is_root
        assert node.is_leaf
        assert graph.nodes["0_0"] is node

    def test_node_id_is_stringified(self):
        """Integer ids are stored as strings."""
        graph = LineageGraph()
        node = graph.create_node(7, 7, 0)

        assert node.id == "7"
        assert "7" in graph.nodes

    def test_node_payload(self):
        """Payload carries balance and snapshot untouched."""
        graph = LineageGraph()
        payload = NodePayload(balance=120.5, snapshot={"agents": 3})
        node = graph.create_node("0_0", 0, 0, payload)

        assert node.payload.balance == 120.5
        assert node.payload.snapshot == {"agents": 3}
        assert "balance=120.5" in node.describe()

    def test_non_branching(self, chain_graph):
        """Only interior nodes of a chain are non-branching."""
        assert not chain_graph.nodes["A"].is_non_branching
        assert chain_graph.nodes["B"].is_non_branching
        assert chain_graph.nodes["C"].is_non_branching
        assert not chain_graph.nodes["D"].is_non_branching


class TestCreateLink:
    """Tests for LineageGraph.create_link."""

    def test_link_id_is_derived_from_endpoints(self):
        assert make_link_id("B", "C") == "B-C"

    def test_create_link_sets_back_references(self):
        """Both endpoints reference the new link."""
        graph = LineageGraph()
        graph.create_node("A", 0, 0)
        graph.create_node("B", 1, 0)

        link = graph.create_link("A", "B")

        assert link.id == "A-B"
        assert link.source_id == "A"
        assert link.target_id == "B"
        assert graph.nodes["A"].output_links == ["A-B"]
        assert graph.nodes["B"].input_link == "A-B"
        assert graph.links["A-B"] is link

    def test_output_links_keep_insertion_order(self, star_graph):
        assert star_graph.nodes["R"].output_links == ["R-X", "R-Y", "R-Z"]

    def test_duplicate_link_fails(self, chain_graph):
        """Linking the same endpoints twice is a caller defect."""
        with pytest.raises(DuplicateLinkError) as exc_info:
            chain_graph.create_link("A", "B")

        assert exc_info.value.link_id == "A-B"
        assert chain_graph.nodes["A"].output_links == ["A-B"]

    def test_duplicate_link_is_graph_error(self, chain_graph):
        with pytest.raises(GraphError):
            chain_graph.create_link("B", "C")

    def test_unknown_endpoint_fails(self, chain_graph):
        with pytest.raises(UnknownNodeError) as exc_info:
            chain_graph.create_link("A", "missing")

        assert exc_info.value.node_id == "missing"
        assert "Unknown node: missing" in str(exc_info.value)
        assert chain_graph.nodes["A"].output_links == ["A-B"]

    def test_unknown_endpoint_is_key_error(self, chain_graph):
        with pytest.raises(KeyError):
            chain_graph.create_link("missing", "A")

    def test_attached_target_fails(self, chain_graph):
        """A node keeps its one inbound link; re-parenting is refused."""
        with pytest.raises(NodeAlreadyAttachedError) as exc_info:
            chain_graph.create_link("A", "C")

        assert exc_info.value.node_id == "C"
        assert exc_info.value.input_link == "B-C"
        assert "A-C" not in chain_graph.links
        assert chain_graph.nodes["A"].output_links == ["A-B"]
        assert chain_graph.nodes["C"].input_link == "B-C"
        assert_well_formed(chain_graph)

    def test_link_into_ancestor_fails(self, chain_graph):
        """The target is the root here, so it is unattached but above the source."""
        with pytest.raises(CycleError):
            chain_graph.create_link("D", "A")

        assert "D-A" not in chain_graph.links
        assert chain_graph.nodes["D"].output_links == []
        assert chain_graph.nodes["A"].input_link is None
        assert_well_formed(chain_graph)

    def test_self_link_fails(self):
        graph = LineageGraph()
        graph.create_node("A", 0, 0)

        with pytest.raises(CycleError) as exc_info:
            graph.create_link("A", "A")

        assert isinstance(exc_info.value, GraphError)
        assert graph.links == {}
        assert graph.nodes["A"].output_links == []

    def test_attached_error_is_graph_error(self, star_graph):
        with pytest.raises(GraphError):
            star_graph.create_link("X", "Y")


class TestIdReuse:
    """Ids removed from a graph are never handed out again."""

    def test_duplicate_node_fails(self, chain_graph):
        with pytest.raises(DuplicateNodeError) as exc_info:
            chain_graph.create_node("A", 5, 5)

        assert not exc_info.value.retired

    def test_retired_node_id_rejected(self, chain_graph):
        prune_link_branch("B-C", chain_graph)

        with pytest.raises(DuplicateNodeError) as exc_info:
            chain_graph.create_node("C", 2, 0)

        assert exc_info.value.retired
        assert "cannot be reused" in str(exc_info.value)

    def test_retired_link_id_rejected(self, chain_graph):
        """Re-attaching a surviving node under a link id used before fails."""
        chain_graph.create_node("E", 5, 0)
        chain_graph.create_link("A", "E")
        prune_link_branch("A-E", chain_graph)
        chain_graph.retired_node_ids.discard("E")
        chain_graph.create_node("E", 5, 0)

        with pytest.raises(DuplicateLinkError) as exc_info:
            chain_graph.create_link("A", "E")

        assert exc_info.value.retired

    def test_retired_ids_not_serialized(self, chain_graph):
        prune_link_branch("C-D", chain_graph)
        data = chain_graph.model_dump()

        assert set(data) == {"nodes", "links"}


class TestGraphQueries:
    """Tests for derived graph queries."""

    def test_root(self, sample_graph):
        assert sample_graph.root.id == "0_0"
        assert get_root_node(sample_graph).id == "0_0"

    def test_empty_graph_has_no_root(self):
        graph = LineageGraph()

        assert graph.root is None
        assert get_root_node(graph) is None
        assert graph.is_empty

    def test_get_children_in_link_order(self, sample_graph):
        children = sample_graph.get_children("25_0")

        assert [c.id for c in children] == ["30_2", "30_3", "30_4"]
        assert sample_graph.get_children("30_0") == []
        assert sample_graph.get_children("missing") == []

    def test_get_parent(self, sample_graph):
        assert sample_graph.get_parent("30_3").id == "25_0"
        assert sample_graph.get_parent("0_0") is None

    def test_iter_subtree_pre_order(self, sample_graph):
        ids = [node.id for node in sample_graph.iter_subtree("7_0")]

        assert ids == ["7_0", "17_0", "30_0", "30_1", "25_0", "30_2", "30_3", "30_4"]

    def test_statistics(self, sample_graph):
        stats = sample_graph.get_statistics()

        assert stats["total_nodes"] == 9
        assert stats["total_links"] == 8
        assert stats["root"] == "0_0"
        assert stats["depth"] == 4
        assert stats["leaf_nodes"] == 5
        assert stats["branch_points"] == 3

    def test_to_dict_for_renderer(self, star_graph):
        """Links carry endpoint coordinates for drawing."""
        data = star_graph.to_dict()

        assert set(data["nodes"]) == {"R", "X", "Y", "Z"}
        assert data["links"]["R-Z"] == {"source": "R", "target": "Z", "points": [0, 0, 1, 2]}
        assert data["nodes"]["R"]["output_links"] == ["R-X", "R-Y", "R-Z"]
