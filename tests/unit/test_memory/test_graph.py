"""Tests for the NetworkX projection of the ledger."""

from networkx import MultiGraph

from rapport.memory.entities import Person, Relationship, RelationshipEvent


class TestGetGraph:
    """Tests for get_graph."""

    def test_nodes_and_edges(self, triangle_ledger):
        """Every person is a node and every relationship an edge keyed by its id."""
        graph = triangle_ledger.get_graph()

        assert isinstance(graph, MultiGraph)
        assert set(graph.nodes) == {"A", "B", "C", "D"}
        assert graph.number_of_edges() == 3
        assert graph.nodes["A"]["name"] == "Person A"
        assert graph.edges["B", "C", "bc"]["type"] == "Colleague"
        assert graph.edges["B", "C", "bc"]["health_score"] == 50

    def test_graph_cached(self, triangle_ledger):
        """The same graph object is returned until something changes."""
        assert triangle_ledger.get_graph() is triangle_ledger.get_graph()

    def test_rebuilt_after_mutation(self, triangle_ledger):
        """Mutations invalidate the cached graph."""
        before = triangle_ledger.get_graph()
        triangle_ledger.record_event(
            "ab",
            RelationshipEvent(
                id="e1",
                type="negative",
                category="Fight",
                description="Argument",
                impact=-15,
                date="2025-01-01",
            ),
        )

        after = triangle_ledger.get_graph()

        assert after is not before
        assert after.edges["A", "B", "ab"]["health_score"] == 35

    def test_duplicate_pair_edges_kept(self, triangle_ledger):
        """Two relationships for one pair become two parallel edges."""
        triangle_ledger.add_relationship(
            Relationship(id="ab2", person1_id="B", person2_id="A", type="Colleague")
        )
        assert triangle_ledger.get_graph().number_of_edges("A", "B") == 2

    def test_clear_resets_graph(self, triangle_ledger):
        """A cleared ledger projects to an empty graph."""
        triangle_ledger.get_graph()
        triangle_ledger.clear()
        assert triangle_ledger.get_graph().number_of_nodes() == 0


class TestTraversal:
    """Tests for get_connected_people and find_path."""

    def test_direct_neighbours(self, triangle_ledger):
        """Depth 1 returns people one relationship away."""
        connected = triangle_ledger.get_connected_people("B")
        assert sorted(p.id for p in connected) == ["A", "C"]

    def test_nearest_first(self, triangle_ledger):
        """Deeper searches list nearer people first."""
        connected = triangle_ledger.get_connected_people("A", max_depth=3)
        assert [p.id for p in connected] == ["B", "C", "D"]

    def test_unknown_person(self, triangle_ledger):
        """Unknown people have no connections."""
        assert triangle_ledger.get_connected_people("Z") == []

    def test_find_path(self, triangle_ledger):
        """The shortest chain of person ids is returned."""
        assert triangle_ledger.find_path("A", "D") == ["A", "B", "C", "D"]

    def test_no_path(self, triangle_ledger):
        """Disconnected or unknown people give an empty path."""
        triangle_ledger.add_person(Person(id="E", name="Loner"))
        assert triangle_ledger.find_path("A", "E") == []
        assert triangle_ledger.find_path("A", "Z") == []
