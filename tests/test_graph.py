"""Tests for Edge and Graph construction, validation and queries."""
import networkx as nx
import pytest

from mst_graph import NO_MAX_WEIGHT, NO_MIN_WEIGHT, Edge, Graph, InvalidGraphInput


class TestEdge:
    def test_equality_ignores_direction(self):
        assert Edge("A", "B", 5) == Edge("B", "A", 5)
        assert hash(Edge("A", "B", 5)) == hash(Edge("B", "A", 5))

    def test_different_weight_not_equal(self):
        assert Edge("A", "B", 5) != Edge("A", "B", 6)

    def test_ordering_by_weight_is_stable(self):
        first = Edge("C", "D", 3)
        second = Edge("A", "B", 3)
        light = Edge("E", "F", 1)
        assert sorted([first, second, light]) == [light, first, second]
        assert sorted([first, second, light])[1] is first

    def test_reversed_is_new_value(self):
        edge = Edge("A", "B", 4)
        rev = edge.reversed()
        assert (rev.source, rev.target, rev.weight) == ("B", "A", 4)
        assert (edge.source, edge.target) == ("A", "B")
        assert rev == edge

    def test_other_endpoint(self):
        edge = Edge("A", "B", 4)
        assert edge.other("A") == "B"
        assert edge.other("B") == "A"
        with pytest.raises(ValueError):
            edge.other("C")

    def test_connects(self):
        edge = Edge("A", "B", 4)
        assert edge.connects("B", "A")
        assert edge.connects_to("A")
        assert not edge.connects("A", "C")

    def test_str_and_dict(self):
        edge = Edge("A", "B", 4)
        assert str(edge) == "A -- B [weight: 4]"
        assert edge.to_dict() == {"from": "A", "to": "B", "weight": 4}

    @pytest.mark.parametrize(
        "source,target,weight",
        [
            ("A", "A", 1),
            ("A", "B", -1),
            ("", "B", 1),
            ("A", "  ", 1),
            ("A", "B", 1.5),
            ("A", "B", True),
        ],
    )
    def test_invalid_edges(self, source, target, weight):
        with pytest.raises(InvalidGraphInput):
            Edge(source, target, weight)

    def test_zero_weight_allowed(self):
        assert Edge("A", "B", 0).weight == 0


class TestGraphValidation:
    def test_empty_nodes(self):
        with pytest.raises(InvalidGraphInput):
            Graph(1, [], [])

    def test_duplicate_node(self):
        with pytest.raises(InvalidGraphInput, match="Duplicate"):
            Graph(1, ["A", "B", "A"], [])

    def test_unknown_node(self):
        with pytest.raises(InvalidGraphInput, match="unknown node"):
            Graph(1, ["A", "B"], [("A", "C", 1)])

    def test_self_loop(self):
        with pytest.raises(InvalidGraphInput):
            Graph(1, ["A", "B"], [("A", "A", 1)])

    def test_negative_weight(self):
        with pytest.raises(InvalidGraphInput):
            Graph(1, ["A", "B"], [("A", "B", -3)])

    def test_malformed_edge_tuple(self):
        with pytest.raises(InvalidGraphInput):
            Graph(1, ["A", "B"], [("A", "B")])

    def test_invalid_graph_error_is_value_error(self):
        with pytest.raises(ValueError):
            Graph(1, ["A", "A"], [])

    def test_accepts_edge_objects(self):
        graph = Graph(1, ["A", "B"], [Edge("A", "B", 2)])
        assert graph.edges == (Edge("A", "B", 2),)


class TestGraphQueries:
    def test_counts(self, small_connected_graph):
        assert small_connected_graph.id == 1
        assert small_connected_graph.node_count == 5
        assert small_connected_graph.edge_count == 7
        assert small_connected_graph.nodes == ("A", "B", "C", "D", "E")

    def test_adjacency_oriented_away_from_node(self, small_connected_graph):
        for node in small_connected_graph.nodes:
            for edge in small_connected_graph.adjacent_edges(node):
                assert edge.source == node

    def test_each_edge_listed_once_per_endpoint(self, small_connected_graph):
        total = sum(small_connected_graph.degree(n) for n in small_connected_graph.nodes)
        assert total == 2 * small_connected_graph.edge_count

    def test_neighbors_and_degree(self, small_connected_graph):
        assert small_connected_graph.neighbors("A") == ["B", "C"]
        assert small_connected_graph.degree("C") == 4
        assert small_connected_graph.degree("missing") == 0
        assert small_connected_graph.adjacent_edges("missing") == ()

    def test_has_and_get_edge(self, small_connected_graph):
        assert small_connected_graph.has_node("E")
        assert not small_connected_graph.has_node("F")
        assert small_connected_graph.has_edge("E", "C")
        assert not small_connected_graph.has_edge("A", "E")
        assert small_connected_graph.get_edge("D", "B").weight == 5
        assert small_connected_graph.get_edge("A", "E") is None

    def test_density(self, small_connected_graph, single_node_graph):
        assert small_connected_graph.density() == pytest.approx(0.7)
        assert single_node_graph.density() == 0.0

    def test_weights(self, small_connected_graph):
        assert small_connected_graph.total_weight() == 35
        assert small_connected_graph.min_edge_weight() == 2
        assert small_connected_graph.max_edge_weight() == 8

    def test_weight_sentinels_without_edges(self, single_node_graph):
        assert single_node_graph.total_weight() == 0
        assert single_node_graph.min_edge_weight() == NO_MIN_WEIGHT
        assert single_node_graph.max_edge_weight() == NO_MAX_WEIGHT
        stats = single_node_graph.statistics()
        assert stats["min_edge_weight"] is None
        assert stats["max_edge_weight"] is None

    def test_connectivity(self, small_connected_graph, disconnected_graph, single_node_graph):
        assert small_connected_graph.is_connected()
        assert not disconnected_graph.is_connected()
        assert single_node_graph.is_connected()

    def test_connected_components(self, disconnected_graph):
        assert disconnected_graph.connected_components() == [["A", "B"], ["C", "D"]]

    def test_statistics(self, disconnected_graph):
        stats = disconnected_graph.statistics()
        assert stats["vertices"] == 4
        assert stats["edges"] == 2
        assert stats["connected"] is False
        assert stats["components"] == 2
        assert stats["total_weight"] == 3

    def test_describe(self, triangle_graph):
        text = triangle_graph.describe()
        assert text.startswith("Graph 2:")
        assert "X -> Y(1), Z(3)" in text

    def test_str(self, triangle_graph):
        assert str(triangle_graph) == "Graph 2 [nodes=3, edges=3, connected=True]"

    def test_to_networkx_keeps_lightest_parallel_edge(self):
        graph = Graph(1, ["A", "B", "C"], [("A", "B", 5), ("B", "A", 2), ("B", "C", 1)])
        G = graph.to_networkx()
        assert isinstance(G, nx.Graph)
        assert G["A"]["B"]["weight"] == 2
        assert set(G.nodes()) == {"A", "B", "C"}

    def test_graph_is_read_only(self, triangle_graph):
        with pytest.raises(AttributeError):
            triangle_graph.nodes = ("Q",)
        with pytest.raises(AttributeError):
            triangle_graph.edges.append(Edge("X", "Y", 9))
