"""Tests for closeness centrality.

Scores use (total_node_count - 1) / sum_of_reachable_distances, so on a
disconnected graph they exceed the textbook [0, 1] range. The tests below
assert that formula as defined.
"""

import pytest

from teamgraph.tools.roster_analysis import (
    build_roster_graph, closeness_for_node, compute_closeness_centrality
)

from .helpers import make_records


class TestClosenessCentrality:
    """Tests for compute_closeness_centrality."""

    def test_single_clique_scores_one(self, one_team):
        result = compute_closeness_centrality(build_roster_graph(one_team))

        assert len(result.scores) == 5
        assert all(score == pytest.approx(1.0) for score in result.scores.values())

    def test_disconnected_pairs_use_total_node_count(self, two_pairs):
        result = compute_closeness_centrality(build_roster_graph(two_pairs))

        # each node reaches one neighbour at distance 1: (4 - 1) / 1
        assert result.scores_by_name == {
            "A": pytest.approx(3.0),
            "B": pytest.approx(3.0),
            "C": pytest.approx(3.0),
            "D": pytest.approx(3.0),
        }

    def test_scale_by_reachable(self, two_pairs):
        result = compute_closeness_centrality(build_roster_graph(two_pairs), scale_by_reachable=True)

        assert result.scale_by_reachable is True
        assert all(score == pytest.approx(1.0) for score in result.scores.values())

    def test_no_teammates_scores_zero(self, no_teammates):
        result = compute_closeness_centrality(build_roster_graph(no_teammates))

        assert result.scores == {0: 0.0, 1: 0.0, 2: 0.0}

    def test_isolated_node_scores_zero(self):
        roster_graph = build_roster_graph(make_records(("A", "X"), ("B", "X"), ("Solo", "Q")))
        result = compute_closeness_centrality(roster_graph)

        assert result.scores_by_name["Solo"] == 0.0
        assert result.scores_by_name["A"] == pytest.approx(2.0)

    def test_single_node_graph(self):
        result = compute_closeness_centrality(build_roster_graph(make_records(("A", "X"))))

        assert result.scores == {0: 0.0}

    def test_empty_graph(self):
        result = compute_closeness_centrality(build_roster_graph([]))

        assert result.scores == {}
        assert result.scores_by_name == {}

    def test_path_distances(self):
        # A-B share X, B-C share Y, C-D share Z: a path A-B-C-D
        records = make_records(
            ("A", "X"), ("B", "X"), ("B", "Y"), ("C", "Y"), ("C", "Z"), ("D", "Z")
        )
        roster_graph = build_roster_graph(records, duplicate_policy="merge")
        scores = compute_closeness_centrality(roster_graph).scores_by_name

        assert scores["A"] == pytest.approx(3 / 6)
        assert scores["B"] == pytest.approx(3 / 4)
        assert scores["C"] == pytest.approx(3 / 4)
        assert scores["D"] == pytest.approx(3 / 6)

    def test_parallel_edges_do_not_change_scores(self):
        records = make_records(("A", "X"), ("B", "X"), ("A", "Y"), ("B", "Y"), ("C", "Y"))
        merged = build_roster_graph(records, duplicate_policy="merge")

        assert merged.graph.number_of_edges(0, 1) == 2
        scores = compute_closeness_centrality(merged).scores_by_name
        assert scores == {"A": pytest.approx(1.0), "B": pytest.approx(1.0), "C": pytest.approx(1.0)}

    def test_closeness_for_node_matches_bulk(self, two_pairs):
        roster_graph = build_roster_graph(two_pairs)
        bulk = compute_closeness_centrality(roster_graph).scores

        for node in roster_graph.graph.nodes:
            assert closeness_for_node(roster_graph.graph, node) == bulk[node]

    def test_repeated_runs_identical(self):
        records = make_records(*[(f"P{i}", f"T{i % 5}") for i in range(20)])
        first = compute_closeness_centrality(build_roster_graph(records)).scores_by_name
        second = compute_closeness_centrality(build_roster_graph(records)).scores_by_name

        assert first == second

    def test_to_dict(self, two_pairs):
        data = compute_closeness_centrality(build_roster_graph(two_pairs)).to_dict()

        assert data["metric"] == "closeness"
        assert data["node_count"] == 4
        assert set(data["scores"]) == {"A", "B", "C", "D"}
